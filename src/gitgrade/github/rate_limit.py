"""Track the GitHub API rate-limit budget from response headers."""

from __future__ import annotations

import time

import httpx

from ..logging import get_logger

logger = get_logger("github.rate_limit")


class RateLimitMonitor:
    """Remember the last reported budget and warn when it runs low.

    Requests are never delayed; the budget is only reported so that a
    refused read can be explained to the user.
    """

    def __init__(self, threshold: int = 10) -> None:
        self.threshold = threshold
        self._remaining: int | None = None
        self._reset_at: float | None = None

    def update(self, response: httpx.Response) -> None:
        remaining = response.headers.get("X-RateLimit-Remaining")
        reset = response.headers.get("X-RateLimit-Reset")
        if remaining is not None:
            try:
                self._remaining = int(remaining)
            except ValueError:
                self._remaining = None
        if reset is not None:
            try:
                self._reset_at = float(reset)
            except ValueError:
                self._reset_at = None

        if self._remaining is not None and self._remaining <= self.threshold:
            logger.warning(
                "GitHub rate limit low: %d requests left, resets in %ds",
                self._remaining,
                self.seconds_until_reset(),
            )

    @property
    def remaining(self) -> int | None:
        return self._remaining

    @property
    def exhausted(self) -> bool:
        return self._remaining == 0

    def seconds_until_reset(self) -> int:
        if self._reset_at is None:
            return 0
        return max(0, int(self._reset_at - time.time()))
