"""
Command Line Interface
======================

    siteaudit audit example.com --max-pages 10 --output report.json
    siteaudit page https://example.com/about
"""

import asyncio
import json
import sys
from typing import Optional

import click
from loguru import logger
from rich.console import Console

from siteaudit import __version__
from siteaudit.analyzer import PageAnalyzer
from siteaudit.auditor import SiteAuditor
from siteaudit.config import get_settings
from siteaudit.report import export_report, print_page_report, print_report
from siteaudit.scoring.methodology import LANGUAGES
from siteaudit.scoring.models import AuditStatus
from siteaudit.web.crawler import normalize_url
from siteaudit.web.fetcher import Fetcher, FetchFailure

console = Console()


def configure_logging(debug: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "INFO")


@click.group()
@click.version_option(version=__version__, prog_name="siteaudit")
@click.option("--debug/--no-debug", default=False, help="Enable debug logging")
def main(debug: bool):
    """Audit on-page SEO, accessibility, speed and content quality of a website."""
    configure_logging(debug)


@main.command()
@click.argument("url")
@click.option("--max-pages", "-m", type=click.IntRange(min=1), default=None, help="Maximum pages to discover")
@click.option("--concurrency", "-c", type=click.IntRange(min=1), default=None, help="Parallel page fetches")
@click.option("--deadline", "-d", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Overall audit deadline in seconds")
@click.option("--lang", "language", type=click.Choice(LANGUAGES), default=LANGUAGES[0],
              help="Methodology language")
@click.option("--output", "-o", type=click.Path(), help="Export report to JSON file")
@click.option("--json", "as_json", is_flag=True, help="Print the JSON result instead of a table")
def audit(url: str, max_pages: Optional[int], concurrency: Optional[int], deadline: Optional[float],
          language: str, output: Optional[str], as_json: bool):
    """Crawl a website and score every discovered page."""
    overrides = {
        "max_pages": max_pages,
        "concurrency": concurrency,
        "crawl_deadline": deadline,
    }
    settings = get_settings().model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )

    if not as_json:
        console.print(f"[bold blue]Auditing website: {url}[/bold blue]")

    result = asyncio.run(SiteAuditor(settings).analyze(url))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_report(result, console, language)

    if output:
        export_report(result, output)

    if result.status is AuditStatus.FAILED:
        sys.exit(1)


@main.command()
@click.argument("url")
def page(url: str):
    """Score a single page without crawling."""
    try:
        target = normalize_url(url)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="URL")

    settings = get_settings()

    async def run():
        async with Fetcher(settings) as fetcher:
            return await PageAnalyzer(fetcher, settings).analyze(target)

    try:
        result = asyncio.run(run())
    except FetchFailure as e:
        console.print(f"[red]Could not fetch {target}: {e}[/red]")
        sys.exit(1)

    print_page_report(result, console)


if __name__ == "__main__":
    main()
