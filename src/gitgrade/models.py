"""Data models for gitgrade."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

LanguageBreakdown = dict[str, int]


@dataclass(frozen=True)
class RepositoryIdentifier:
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class RepositoryMetadata:
    owner: str
    name: str
    description: str | None = None
    stars: int = 0
    forks: int = 0
    primary_language: str | None = None
    open_issues: int = 0
    topics: tuple[str, ...] = ()
    default_branch: str = ""


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "dir"


@dataclass(frozen=True)
class FileEntry:
    name: str
    kind: EntryKind
    path: str


@dataclass(frozen=True)
class RepositoryContext:
    metadata: RepositoryMetadata
    languages: LanguageBreakdown = field(default_factory=dict)
    root_listing: tuple[FileEntry, ...] = ()
    readme: str | None = None


class Level(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class AnalysisResult(BaseModel):
    """Structured evaluation returned by the model service.

    Fields are populated by their wire names (the aliases) only, so a
    payload can be validated directly with
    ``AnalysisResult.model_validate_json``. Scores must be JSON numbers;
    whole-number floats are accepted, strings and booleans are not.
    Scores are not clamped.
    """

    model_config = ConfigDict(frozen=True)

    score: int
    level: Level
    summary: str
    strengths: list[str]
    weaknesses: list[str]
    roadmap: list[str]
    consistency_score: int = Field(alias="consistencyScore")
    documentation_score: int = Field(alias="documentationScore")
    best_practices_score: int = Field(alias="bestPracticesScore")

    @field_validator(
        "score",
        "consistency_score",
        "documentation_score",
        "best_practices_score",
        mode="before",
    )
    @classmethod
    def _require_number(cls, value: Any) -> Any:
        if isinstance(value, (str, bool)):
            raise ValueError("must be a number")
        return value
