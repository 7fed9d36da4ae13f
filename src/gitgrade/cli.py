"""Command line entry point for gitgrade."""

from __future__ import annotations

import asyncio

import click

from . import __version__
from .github.client import GITHUB_API_URL
from .invoker import DEFAULT_MODEL
from .logging import configure_logging
from .orchestrator import run

EXAMPLES = ("facebook/react", "airbnb/javascript", "tailwindlabs/tailwindcss")


@click.command(
    epilog="Examples: " + ", ".join(EXAMPLES),
)
@click.argument("target")
@click.option(
    "--token",
    envvar="GITHUB_TOKEN",
    default=None,
    help="GitHub token; optional, raises the API rate limit.",
)
@click.option(
    "--api-key",
    envvar="GEMINI_API_KEY",
    required=True,
    help="Gemini API key.",
)
@click.option(
    "--model",
    envvar="GITGRADE_MODEL",
    default=DEFAULT_MODEL,
    show_default=True,
    help="Gemini model used for the analysis.",
)
@click.option(
    "--api-url",
    envvar="GITHUB_API_URL",
    default=GITHUB_API_URL,
    show_default=True,
    help="GitHub REST API base URL.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the report to a file instead of the terminal.",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
@click.version_option(version=__version__, prog_name="gitgrade")
def main(
    target: str,
    token: str | None,
    api_key: str,
    model: str,
    api_url: str,
    output_format: str,
    output_file: str | None,
    verbose: bool,
) -> None:
    """Score a GitHub repository with AI.

    TARGET is a GitHub URL (https://github.com/owner/repo) or owner/repo.
    """
    if not target.strip():
        raise click.BadParameter("must not be empty", param_hint="TARGET")
    configure_logging(verbose=verbose)
    state = asyncio.run(
        run(
            target,
            token=token or None,
            api_key=api_key,
            model=model,
            api_url=api_url,
            output_format=output_format,
            output_file=output_file,
        )
    )
    if state.error is not None:
        raise SystemExit(1)
