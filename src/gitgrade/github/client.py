"""Async client for the read-only GitHub REST endpoints gitgrade needs."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from .. import __version__
from ..logging import get_logger
from .rate_limit import RateLimitMonitor

logger = get_logger("github.client")

GITHUB_API_URL = "https://api.github.com"


class GitHubAPIError(Exception):
    """A GitHub endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int, path: str, rate_limited: bool = False) -> None:
        super().__init__(f"GitHub API returned {status_code} for {path}")
        self.status_code = status_code
        self.path = path
        self.rate_limited = rate_limited


class GitHubClient:
    """Thin wrapper over ``httpx.AsyncClient`` for repository reads.

    Use as an async context manager so the connection pool is closed.
    Every method returns the decoded JSON body or raises GitHubAPIError.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str = GITHUB_API_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": f"gitgrade/{__version__}",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        client_kwargs: dict[str, Any] = {}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            follow_redirects=True,
            transport=transport,
            **client_kwargs,
        )
        self.rate_limit = RateLimitMonitor()

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_repository(self, owner: str, name: str) -> dict[str, Any]:
        return await self._get(self._repo_path(owner, name))

    async def get_languages(self, owner: str, name: str) -> Any:
        return await self._get(f"{self._repo_path(owner, name)}/languages")

    async def get_root_contents(self, owner: str, name: str) -> Any:
        return await self._get(f"{self._repo_path(owner, name)}/contents")

    async def get_readme(self, owner: str, name: str) -> Any:
        return await self._get(f"{self._repo_path(owner, name)}/readme")

    @staticmethod
    def _repo_path(owner: str, name: str) -> str:
        return f"/repos/{quote(owner, safe='')}/{quote(name, safe='')}"

    async def _get(self, path: str) -> Any:
        logger.debug("GET %s", path)
        response = await self._client.get(path)
        self.rate_limit.update(response)
        if not response.is_success:
            rate_limited = response.status_code in (403, 429) and self.rate_limit.exhausted
            raise GitHubAPIError(response.status_code, path, rate_limited=rate_limited)
        return response.json()
