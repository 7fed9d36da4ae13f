"""Tests for the identifier resolver."""

from __future__ import annotations

import pytest

from gitgrade.errors import ParseFailure
from gitgrade.models import RepositoryIdentifier
from gitgrade.resolver import resolve


@pytest.mark.parametrize(
    "raw",
    [
        "https://github.com/octo/demo",
        "https://github.com/octo/demo/",
        "http://github.com/octo/demo",
        "github.com/octo/demo",
        "https://www.github.com/octo/demo",
        "https://github.com/octo/demo/tree/main/src",
        "https://github.com/octo/demo/blob/main/README.md",
        "https://github.com/octo/demo.git",
        "https://github.com/octo/demo?tab=readme-ov-file",
        "https://github.com/octo/demo#readme",
        "  https://github.com/octo/demo  ",
    ],
)
def test_resolve_full_urls(raw):
    assert resolve(raw) == RepositoryIdentifier(owner="octo", name="demo")


def test_resolve_bare_owner_name():
    assert resolve("facebook/react") == RepositoryIdentifier(owner="facebook", name="react")


def test_resolve_bare_trailing_slash():
    assert resolve("facebook/react/") == RepositoryIdentifier(owner="facebook", name="react")


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "not a url",
        "react",
        "a/b/c",
        "/react",
        "facebook/",
        "https://github.com",
        "https://github.com/octo",
        "https://github.com/octo/",
        "https://github.com//demo",
        "github.com/octo",
        "https://gitlab.com/octo/demo/extra",
    ],
)
def test_resolve_rejects_malformed_input(raw):
    with pytest.raises(ParseFailure) as exc_info:
        resolve(raw)
    assert exc_info.value.raw_input == raw
    assert "Invalid GitHub URL" in str(exc_info.value)


def test_resolve_rejects_host_token_in_bare_form():
    """A two-segment string naming github.com is not a bare identifier."""
    with pytest.raises(ParseFailure):
        resolve("github.com/octo")


def test_full_name():
    assert RepositoryIdentifier(owner="octo", name="demo").full_name == "octo/demo"
