"""Single-slot holder for the current analysis of an interactive session."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from .errors import GitGradeError
from .logging import get_logger
from .models import AnalysisResult, RepositoryMetadata

logger = get_logger("session")

ResultPair = tuple[RepositoryMetadata, AnalysisResult]
Pipeline = Callable[[str], Awaitable[ResultPair]]


@dataclass
class SessionState:
    loading: bool = False
    error: str | None = None
    result: ResultPair | None = None


class AnalysisSession:
    """Overwrite register for pipeline outcomes.

    Submissions are not queued or cancelled: each one that completes
    replaces the slot, so the last to finish is what the session shows.
    An error always clears the result and vice versa.
    """

    def __init__(self, pipeline: Pipeline, describe_error: Callable[[BaseException], str]) -> None:
        self._pipeline = pipeline
        self._describe_error = describe_error
        self._pending = 0
        self.state = SessionState()

    async def submit(self, raw_input: str) -> SessionState:
        if not raw_input.strip():
            return self.state

        self._pending += 1
        self.state = SessionState(loading=True)
        try:
            result = await self._pipeline(raw_input)
        except GitGradeError as exc:
            logger.debug("analysis of %r failed: %s", raw_input, exc)
            self.state = SessionState(error=self._describe_error(exc))
        except Exception as exc:
            logger.exception("unexpected failure while analyzing %r", raw_input)
            self.state = SessionState(error=self._describe_error(exc))
        else:
            self.state = SessionState(result=result)
        finally:
            self._pending -= 1
            self.state.loading = self._pending > 0
        return self.state

    def reset(self) -> SessionState:
        """Start over: drop any displayed result or error."""
        self.state = SessionState(loading=self._pending > 0)
        return self.state
