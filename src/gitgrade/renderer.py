"""Rich-based terminal report renderer with JSON support."""

from __future__ import annotations

import io
import json
from dataclasses import asdict

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import AnalysisResult, Level, RepositoryMetadata

_LEVEL_STYLES = {
    Level.BEGINNER: "yellow",
    Level.INTERMEDIATE: "cyan",
    Level.ADVANCED: "green",
}


def _format_number(n: int) -> str:
    return f"{n:,}"


def _make_bar(score: int, width: int = 20) -> str:
    filled = round(min(max(score, 0), 100) / 100 * width)
    return "█" * filled + "░" * (width - filled)


def _score_style(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def _write_to_file(content: str, output_file: str) -> None:
    """Write content to a file and print confirmation."""
    with open(output_file, "w", encoding="utf-8") as f:
        f.write(content)
    Console().print(f"Saved to {output_file}")


def _print_list(console: Console, title: str, items: list[str], *, numbered: bool = False) -> None:
    console.print(f"[bold]{title}[/bold]")
    if not items:
        console.print("  [dim]none[/dim]")
    for i, item in enumerate(items, 1):
        marker = f"{i}." if numbered else "•"
        console.print(f"  {marker} {escape(item)}", highlight=False)
    console.print()


def render_analysis(
    metadata: RepositoryMetadata,
    analysis: AnalysisResult,
    output_file: str | None = None,
) -> None:
    """Render a repository analysis to the terminal using rich."""
    if output_file:
        string_io = io.StringIO()
        console = Console(file=string_io, force_terminal=False, width=120)
    else:
        console = Console()

    # Header panel
    header = Text(f"gitgrade: {metadata.owner}/{metadata.name}", justify="center")
    if metadata.description:
        header.append(f"\n{metadata.description}", style="dim")
    console.print(Panel(header, style="bold cyan"))
    console.print()

    # Repository stats
    stats = Table(show_header=False, box=None, padding=(0, 2))
    stats.add_column("label", style="dim")
    stats.add_column("value", style="bold")
    stats.add_row("Stars", _format_number(metadata.stars))
    stats.add_row("Forks", _format_number(metadata.forks))
    stats.add_row("Open Issues", _format_number(metadata.open_issues))
    stats.add_row("Language", escape(metadata.primary_language or "-"))
    if metadata.topics:
        stats.add_row("Topics", escape(", ".join(metadata.topics)))
    console.print(stats)
    console.print()

    # Overall score
    level_style = _LEVEL_STYLES.get(analysis.level, "white")
    console.print(
        f"[bold]Score[/bold] [{_score_style(analysis.score)}]{analysis.score}/100[/] "
        f"[{level_style}]{analysis.level.value}[/]"
    )
    console.print(escape(analysis.summary), highlight=False)
    console.print()

    scores = Table(show_header=True, header_style="bold")
    scores.add_column("Dimension")
    scores.add_column("Bar")
    scores.add_column("Score", justify="right")
    for label, value in (
        ("Consistency", analysis.consistency_score),
        ("Documentation", analysis.documentation_score),
        ("Best Practices", analysis.best_practices_score),
    ):
        scores.add_row(label, _make_bar(value), f"[{_score_style(value)}]{value}[/]")
    console.print(scores)
    console.print()

    _print_list(console, "Strengths", analysis.strengths)
    _print_list(console, "Weaknesses", analysis.weaknesses)
    _print_list(console, "Roadmap", analysis.roadmap, numbered=True)

    if output_file:
        _write_to_file(string_io.getvalue(), output_file)


def render_json(
    metadata: RepositoryMetadata,
    analysis: AnalysisResult,
    output_file: str | None = None,
) -> None:
    """Render metadata and analysis as one JSON document."""
    payload = {
        "metadata": asdict(metadata),
        "analysis": analysis.model_dump(mode="json", by_alias=True),
    }
    content = json.dumps(payload, indent=2, ensure_ascii=False)
    if output_file:
        _write_to_file(content, output_file)
    else:
        print(content)


def render_error(message: str) -> None:
    Console(stderr=True).print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
