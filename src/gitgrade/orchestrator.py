"""Wire the resolver, aggregator, prompt builder and invoker together."""

from __future__ import annotations

from .aggregator import aggregate_context
from .github.client import GITHUB_API_URL, GitHubClient
from .invoker import DEFAULT_MODEL, AnalysisInvoker
from .logging import get_logger
from .models import AnalysisResult, RepositoryMetadata
from .prompt import build_prompt
from .renderer import render_analysis, render_error, render_json
from .resolver import resolve
from .session import AnalysisSession, SessionState

logger = get_logger("orchestrator")

GENERIC_ERROR = "An unexpected error occurred."


async def analyze(
    raw_input: str, client: GitHubClient, invoker: AnalysisInvoker
) -> tuple[RepositoryMetadata, AnalysisResult]:
    """Run one analysis end to end.

    Steps run strictly in order and the first failure propagates; a
    malformed identifier never reaches the network.
    """
    identifier = resolve(raw_input)
    logger.debug("resolved %r to %s", raw_input, identifier.full_name)
    context = await aggregate_context(client, identifier)
    prompt = build_prompt(context)
    analysis = await invoker.invoke(prompt)
    return context.metadata, analysis


def describe_error(exc: BaseException) -> str:
    """Map a pipeline failure to the single message shown to the user."""
    return str(exc) or GENERIC_ERROR


async def run(
    target: str,
    *,
    token: str | None = None,
    api_key: str | None = None,
    model: str = DEFAULT_MODEL,
    api_url: str = GITHUB_API_URL,
    output_format: str = "table",
    output_file: str | None = None,
) -> SessionState:
    """Analyze ``target`` and render the outcome; returns the final session state."""
    invoker = AnalysisInvoker(api_key=api_key, model=model)
    async with GitHubClient(token=token, base_url=api_url) as client:

        async def pipeline(raw_input: str) -> tuple[RepositoryMetadata, AnalysisResult]:
            return await analyze(raw_input, client, invoker)

        session = AnalysisSession(pipeline, describe_error)
        state = await session.submit(target)

    if state.error is not None:
        render_error(state.error)
    elif state.result is not None:
        metadata, analysis = state.result
        if output_format == "json":
            render_json(metadata, analysis, output_file=output_file)
        else:
            render_analysis(metadata, analysis, output_file=output_file)
    return state
