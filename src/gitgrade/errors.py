"""Error taxonomy for the analysis pipeline."""

from __future__ import annotations


class GitGradeError(Exception):
    """Base class for failures that end a pipeline run."""


class ParseFailure(GitGradeError):
    """Raised when user input is not a recognizable repository identifier."""

    def __init__(self, raw_input: str) -> None:
        super().__init__("Invalid GitHub URL. Format: https://github.com/owner/repo")
        self.raw_input = raw_input


class RepositoryNotFound(GitGradeError):
    """Raised when the repository metadata read fails."""

    def __init__(self, full_name: str, status_code: int, message: str | None = None) -> None:
        super().__init__(
            message or f"Repository not found or private. Status: {status_code}"
        )
        self.full_name = full_name
        self.status_code = status_code


class RepositoryAccessDenied(RepositoryNotFound):
    """Raised when GitHub refuses the metadata read (401/403)."""

    def __init__(self, full_name: str, status_code: int, rate_limited: bool = False) -> None:
        message = f"Repository access denied. Status: {status_code}"
        if rate_limited:
            message += " (GitHub API rate limit exhausted, set GITHUB_TOKEN to raise it)"
        super().__init__(full_name, status_code, message)
        self.rate_limited = rate_limited


class ModelInvocationError(GitGradeError):
    """Raised when the model service produces no usable payload."""

    def __init__(self, detail: str | None = None) -> None:
        message = "Failed to generate analysis from AI."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class ResponseDecodeError(GitGradeError):
    """Raised when the model payload does not match the analysis schema."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to parse analysis response: {detail}")
        self.detail = detail
