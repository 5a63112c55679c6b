"""
Site Auditor
============

Entry point of the audit: discover same-host pages from a seed URL, analyze
each page with bounded concurrency and aggregate the results. Always
returns a SiteResult; total failure yields the all-zero result with
status ``failed``.
"""

import asyncio
from typing import Callable, Optional

from loguru import logger

from siteaudit.aggregator import aggregate, empty_site_result
from siteaudit.analyzer import PageAnalyzer
from siteaudit.config import Settings, get_settings
from siteaudit.scoring.models import AuditStatus, PageResult, SiteResult
from siteaudit.web.crawler import CrawlSession, CrawlTarget
from siteaudit.web.fetcher import Fetcher, FetchFailure


class SiteAuditor:
    """
    Audit one website per ``analyze`` call.

    Nothing is kept between calls: every run builds its own crawl session,
    fetcher and result collections.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetcher_factory: Optional[Callable[[Settings], Fetcher]] = None,
    ):
        self.settings = settings or get_settings()
        self.fetcher_factory = fetcher_factory or Fetcher

    async def analyze(self, seed_url: str) -> SiteResult:
        """
        Crawl and score a website.

        Args:
            seed_url: Website to audit; scheme defaults to https

        Returns:
            SiteResult (all-zero with status ``failed`` if nothing could be analyzed)
        """
        try:
            target = CrawlTarget.from_url(seed_url)
        except ValueError as e:
            logger.warning("Invalid seed URL {!r}: {}", seed_url, e)
            return empty_site_result(seed_url, [{"url": seed_url, "reason": "invalid_url"}])

        urls: list[str] = [target.seed_url]
        results: dict[str, PageResult] = {}
        errors: list[dict] = []
        timed_out = False

        logger.info("Starting website audit: {}", target.seed_url)
        try:
            async with self.fetcher_factory(self.settings) as fetcher:
                await asyncio.wait_for(
                    self._run(target, fetcher, urls, results, errors),
                    timeout=self.settings.crawl_deadline,
                )
        except asyncio.TimeoutError:
            timed_out = True
            logger.warning(
                "Audit of {} hit the {}s deadline; keeping {} analyzed page(s)",
                target.seed_url, self.settings.crawl_deadline, len(results),
            )
        except Exception:
            logger.exception("Website analysis failed for {}", target.seed_url)

        ordered = [results[url] for url in urls if url in results]
        if not ordered:
            return empty_site_result(target.seed_url, errors)

        status = AuditStatus.COMPLETE
        if timed_out or errors or len(ordered) < len(urls):
            status = AuditStatus.PARTIAL

        site = aggregate(ordered, url=target.seed_url, status=status, errors=errors)
        logger.info(
            "Audit of {} finished: {} page(s), total {:.2f} ({})",
            target.seed_url, len(ordered), site.site_total, site.status.value,
        )
        return site

    async def _run(
        self,
        target: CrawlTarget,
        fetcher: Fetcher,
        urls: list[str],
        results: dict[str, PageResult],
        errors: list[dict],
    ) -> None:
        session = CrawlSession(
            target,
            fetcher,
            max_pages=self.settings.max_pages,
            concurrency=self.settings.concurrency,
        )
        try:
            await session.discover()
        finally:
            urls[:] = session.discovered

        analyzer = PageAnalyzer(fetcher, self.settings)
        semaphore = asyncio.Semaphore(self.settings.concurrency)

        async def analyze_page(url: str) -> None:
            async with semaphore:
                try:
                    results[url] = await analyzer.analyze(url)
                except FetchFailure as e:
                    logger.warning("Failed to analyze {}: {}", url, e)
                    errors.append({"url": url, "reason": e.reason.value})
                except Exception as e:
                    logger.exception("Unexpected error analyzing {}", url)
                    errors.append({"url": url, "reason": type(e).__name__})

        await asyncio.gather(*(analyze_page(url) for url in list(urls)))


async def analyze_async(seed_url: str, settings: Optional[Settings] = None) -> SiteResult:
    return await SiteAuditor(settings).analyze(seed_url)


def analyze(seed_url: str, settings: Optional[Settings] = None) -> SiteResult:
    """Synchronous wrapper for SiteAuditor.analyze."""
    return asyncio.run(analyze_async(seed_url, settings))
