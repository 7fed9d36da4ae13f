"""Render the evaluation prompt for a repository."""

from __future__ import annotations

import json

from .models import RepositoryContext

README_CHAR_LIMIT = 2000

NO_DESCRIPTION = "No description provided"
UNKNOWN_LANGUAGE = "Unknown"
NO_README = "No README found."
EMPTY_LISTING = "(empty)"

TASK_INSTRUCTIONS = """\
TASK:
Act as a senior software engineer and mentor. Evaluate the repository on:
1. Code quality indicators (inferred from structure, linting files, languages)
2. Documentation (README quality, clarity)
3. Project structure (standard conventions for the language)
4. Development consistency (inferred from metadata)

Provide a Score (0-100), a qualitative Level (Beginner, Intermediate or Advanced), \
a Summary, detailed Strengths/Weaknesses, a specific Roadmap for improvement, \
and sub-scores (0-100) for consistency, documentation and best practices."""


def truncate_readme(readme: str | None, limit: int = README_CHAR_LIMIT) -> str:
    if not readme:
        return NO_README
    return readme[:limit]


def build_prompt(context: RepositoryContext) -> str:
    """Render the prompt for ``context``; the same context always gives the same text."""
    metadata = context.metadata
    languages = json.dumps(context.languages, sort_keys=True, separators=(",", ":"))
    if context.root_listing:
        listing = "\n".join(f"- {entry.name} ({entry.kind.value})" for entry in context.root_listing)
    else:
        listing = EMPTY_LISTING

    sections = [
        "Analyze this GitHub repository based on the following metadata:",
        "\n".join(
            [
                f"Repository: {metadata.owner}/{metadata.name}",
                f"Description: {metadata.description or NO_DESCRIPTION}",
                f"Primary Language: {metadata.primary_language or UNKNOWN_LANGUAGE}",
                f"Languages Breakdown: {languages}",
                f"Stars: {metadata.stars}, Forks: {metadata.forks}, "
                f"Open Issues: {metadata.open_issues}",
            ]
        ),
        f"Root File Structure:\n{listing}",
        f"README Content (First {README_CHAR_LIMIT} characters):\n"
        f"{truncate_readme(context.readme)}",
        TASK_INSTRUCTIONS,
    ]
    return "\n\n".join(sections) + "\n"
