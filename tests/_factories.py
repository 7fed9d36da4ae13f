"""Shared builders for test data."""

from __future__ import annotations

from gitgrade.models import AnalysisResult, Level, RepositoryMetadata

_WIRE_NAMES = {
    "consistency_score": "consistencyScore",
    "documentation_score": "documentationScore",
    "best_practices_score": "bestPracticesScore",
}


def make_metadata(**kwargs) -> RepositoryMetadata:
    defaults = dict(
        owner="octo",
        name="demo",
        description="Demo repo",
        stars=5,
        forks=1,
        primary_language="TypeScript",
        open_issues=0,
        topics=("cli",),
        default_branch="main",
    )
    defaults.update(kwargs)
    return RepositoryMetadata(**defaults)


def make_analysis(**kwargs) -> AnalysisResult:
    """Build an AnalysisResult; snake_case keyword names map to the wire names."""
    defaults = dict(
        score=72,
        level=Level.INTERMEDIATE,
        summary="Solid structure, thin documentation.",
        strengths=["Clear layout", "Typed code", "CI configured"],
        weaknesses=["Sparse README", "No tests"],
        roadmap=["Write a README", "Add unit tests", "Publish releases"],
        consistency_score=70,
        documentation_score=40,
        best_practices_score=80,
    )
    defaults.update(kwargs)
    return AnalysisResult.model_validate(
        {_WIRE_NAMES.get(key, key): value for key, value in defaults.items()}
    )
