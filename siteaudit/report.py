"""
Report Rendering
================

Console tables for site and page results, and JSON export of the wire
format. An all-zero (failed) result is shown as an incomplete analysis,
never as a site that scored zero everywhere.
"""

import json
from typing import Optional

from rich.console import Console
from rich.table import Table

from siteaudit.scoring.methodology import LANGUAGES
from siteaudit.scoring.models import Dimension, PageResult, SiteResult

console = Console()


def score_status(score: float) -> str:
    if score >= 80:
        return "[green]Good[/green]"
    if score >= 60:
        return "[yellow]Needs Work[/yellow]"
    return "[red]Poor[/red]"


def print_report(result: SiteResult, out: Optional[Console] = None, language: str = LANGUAGES[0]) -> None:
    """Print formatted site audit report."""
    out = out or console
    out.print("\n[bold]Website Audit Report[/bold]")
    out.print("=" * 60)
    out.print(f"URL: {result.url}")

    if result.is_empty:
        out.print("[red]Analysis could not be completed.[/red] No page of this website could be analyzed.")
        for error in result.errors:
            out.print(f"  [dim]{error['url']}: {error['reason']}[/dim]")
        return

    out.print(f"Pages Analyzed: {len(result.pages)}")
    out.print(f"Status: {result.status.value}")

    table = Table(title="Dimension Scores")
    table.add_column("Dimension", style="cyan")
    table.add_column("Score", style="green")
    table.add_column("Range")
    table.add_column("Status")
    table.add_column("Methodology", style="dim")

    for dimension in Dimension:
        aggregated = result.dimensions[dimension]
        table.add_row(
            dimension.label,
            f"{aggregated.score:.2f}/100",
            f"{aggregated.min_score:.0f}-{aggregated.max_score:.0f}",
            score_status(aggregated.score),
            aggregated.methodology.get(language, ""),
        )

    table.add_row(
        "[bold]Total[/bold]",
        f"[bold]{result.site_total:.2f}/100[/bold]",
        "",
        score_status(result.site_total),
        "",
    )
    out.print(table)

    if result.errors:
        out.print("\n[bold]Pages that could not be analyzed:[/bold]")
        for error in result.errors:
            out.print(f"  [yellow]{error['url']}[/yellow]: {error['reason']}")


def print_page_report(result: PageResult, out: Optional[Console] = None) -> None:
    """Print the nine dimension scores of a single page."""
    out = out or console
    table = Table(title=f"Page Scores: {result.url}")
    table.add_column("Dimension", style="cyan")
    table.add_column("Score", style="green")
    table.add_column("Status")

    for dimension in Dimension:
        score = result.scores[dimension]
        status = "[red]Failed[/red]" if score.failed else score_status(score.score)
        table.add_row(dimension.label, f"{score.score:.0f}/100", status)

    table.add_row("[bold]Total[/bold]", f"[bold]{result.page_total:.2f}/100[/bold]", score_status(result.page_total))
    out.print(table)


def export_report(result: SiteResult, output_path: str) -> None:
    """Export site result to a JSON file."""
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)

    console.print(f"[green]Report exported to {output_path}[/green]")
