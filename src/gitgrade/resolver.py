"""Turn user input into a repository identifier."""

from __future__ import annotations

import re

from .errors import ParseFailure
from .models import RepositoryIdentifier

GITHUB_HOST = "github.com"
_HOST_SEGMENTS = {GITHUB_HOST, f"www.{GITHUB_HOST}"}
_QUERY_OR_FRAGMENT = re.compile(r"[?#].*$")


def resolve(raw_input: str) -> RepositoryIdentifier:
    """Parse a GitHub URL or a bare ``owner/name`` string.

    URLs may carry extra path segments (``/tree/main/src``) which are
    ignored. Raises ParseFailure for anything else.
    """
    text = _QUERY_OR_FRAGMENT.sub("", raw_input.strip())
    if text.endswith("/"):
        text = text[:-1]
    parts = text.split("/")

    host_index = next((i for i, part in enumerate(parts) if part.lower() in _HOST_SEGMENTS), None)
    if host_index is not None:
        if len(parts) < host_index + 3:
            raise ParseFailure(raw_input)
        owner, name = parts[host_index + 1], parts[host_index + 2]
        if name.endswith(".git"):
            name = name[: -len(".git")]
    elif GITHUB_HOST not in text.lower() and len(parts) == 2:
        owner, name = parts
    else:
        raise ParseFailure(raw_input)

    if not owner or not name:
        raise ParseFailure(raw_input)
    return RepositoryIdentifier(owner=owner, name=name)
