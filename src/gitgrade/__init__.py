"""gitgrade: AI-powered quality assessment for GitHub repositories."""

__version__ = "0.1.0"
