"""Assemble a RepositoryContext from the GitHub metadata endpoints."""

from __future__ import annotations

import asyncio
import base64
import binascii
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from .errors import RepositoryAccessDenied, RepositoryNotFound
from .github.client import GitHubAPIError, GitHubClient
from .logging import get_logger
from .models import (
    EntryKind,
    FileEntry,
    LanguageBreakdown,
    RepositoryContext,
    RepositoryIdentifier,
    RepositoryMetadata,
)

logger = get_logger("aggregator")

# Failures of the optional reads that degrade to an empty value.
_DEGRADABLE = (GitHubAPIError, httpx.HTTPError, ValueError)


def _as_count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(0, value)


def _as_text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def parse_metadata(payload: dict[str, Any], identifier: RepositoryIdentifier) -> RepositoryMetadata:
    owner = payload.get("owner")
    owner_login = owner.get("login") if isinstance(owner, dict) else None
    topics = payload.get("topics")
    return RepositoryMetadata(
        owner=_as_text(owner_login) or identifier.owner,
        name=_as_text(payload.get("name")) or identifier.name,
        description=_as_text(payload.get("description")),
        stars=_as_count(payload.get("stargazers_count")),
        forks=_as_count(payload.get("forks_count")),
        primary_language=_as_text(payload.get("language")),
        open_issues=_as_count(payload.get("open_issues_count")),
        topics=tuple(t for t in topics if isinstance(t, str)) if isinstance(topics, list) else (),
        default_branch=_as_text(payload.get("default_branch")) or "",
    )


def parse_languages(payload: Any) -> LanguageBreakdown:
    if not isinstance(payload, dict):
        return {}
    return {
        str(language): size
        for language, size in payload.items()
        if isinstance(size, int) and not isinstance(size, bool) and size >= 0
    }


def parse_root_listing(payload: Any) -> tuple[FileEntry, ...]:
    """Root contents; a non-list payload (e.g. a single file object) yields nothing."""
    if not isinstance(payload, list):
        return ()
    entries = []
    for item in payload:
        if not isinstance(item, dict) or not _as_text(item.get("name")):
            continue
        kind = EntryKind.DIRECTORY if item.get("type") == "dir" else EntryKind.FILE
        entries.append(
            FileEntry(name=item["name"], kind=kind, path=_as_text(item.get("path")) or item["name"])
        )
    return tuple(entries)


def decode_readme(payload: Any) -> str | None:
    """Decode the base64 README body, or None when it cannot be decoded."""
    if not isinstance(payload, dict):
        return None
    content = payload.get("content")
    if not isinstance(content, str):
        return None
    try:
        raw = base64.b64decode("".join(content.split()), validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        logger.debug("README could not be decoded: %s", exc)
        return None


async def _optional(
    label: str, fetch: Callable[[str, str], Awaitable[Any]], identifier: RepositoryIdentifier
) -> Any:
    try:
        return await fetch(identifier.owner, identifier.name)
    except _DEGRADABLE as exc:
        logger.debug(
            "%s read for %s failed, continuing without it: %s", label, identifier.full_name, exc
        )
        return None


async def _discard(tasks: tuple[asyncio.Future, ...]) -> None:
    """Cancel reads whose results are no longer needed and reap them."""
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)


async def aggregate_context(
    client: GitHubClient, identifier: RepositoryIdentifier
) -> RepositoryContext:
    """Read the four endpoints concurrently and merge them.

    Only the metadata read is mandatory; its failure raises
    RepositoryNotFound (RepositoryAccessDenied for 401/403) and cancels
    the other reads, as does a metadata body that is not a JSON object.
    The remaining reads fall back to empty values.
    """
    languages_task = asyncio.ensure_future(_optional("languages", client.get_languages, identifier))
    listing_task = asyncio.ensure_future(
        _optional("root listing", client.get_root_contents, identifier)
    )
    readme_task = asyncio.ensure_future(_optional("README", client.get_readme, identifier))
    optional_tasks = (languages_task, listing_task, readme_task)

    try:
        payload = await client.get_repository(identifier.owner, identifier.name)
    except GitHubAPIError as exc:
        await _discard(optional_tasks)
        logger.debug("metadata read for %s failed: %s", identifier.full_name, exc)
        if exc.status_code in (401, 403):
            raise RepositoryAccessDenied(
                identifier.full_name, exc.status_code, rate_limited=exc.rate_limited
            ) from exc
        raise RepositoryNotFound(identifier.full_name, exc.status_code) from exc
    except Exception:
        await _discard(optional_tasks)
        raise
    except BaseException:
        for task in optional_tasks:
            task.cancel()
        raise

    if not isinstance(payload, dict):
        await _discard(optional_tasks)
        logger.debug(
            "metadata read for %s returned %s, not an object",
            identifier.full_name,
            type(payload).__name__,
        )
        raise RepositoryNotFound(
            identifier.full_name, 200, "Unexpected repository metadata response from GitHub."
        )

    languages_payload, listing_payload, readme_payload = await asyncio.gather(*optional_tasks)
    metadata = parse_metadata(payload, identifier)
    context = RepositoryContext(
        metadata=metadata,
        languages=parse_languages(languages_payload),
        root_listing=parse_root_listing(listing_payload),
        readme=decode_readme(readme_payload),
    )
    logger.debug(
        "aggregated %s: %d languages, %d root entries, readme=%s",
        identifier.full_name,
        len(context.languages),
        len(context.root_listing),
        context.readme is not None,
    )
    return context
