"""Read-only GitHub REST API access."""

from .client import GitHubAPIError, GitHubClient
from .rate_limit import RateLimitMonitor

__all__ = ["GitHubAPIError", "GitHubClient", "RateLimitMonitor"]
