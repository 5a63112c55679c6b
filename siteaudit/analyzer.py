"""
Page Analyzer
=============

Fetches one page, runs all nine scorers against it and derives the page
total. A failed primary fetch propagates as ``FetchFailure``; failures of
the auxiliary requests only zero the affected dimension.
"""

import asyncio
from typing import Optional

from loguru import logger

from siteaudit.config import Settings
from siteaudit.scoring import MARKUP_SCORERS, NETWORK_SCORERS
from siteaudit.scoring.models import PageResult
from siteaudit.web.fetcher import Fetcher
from siteaudit.web.parser import ParsedPage


class PageAnalyzer:
    """Score a single URL across every dimension."""

    def __init__(self, fetcher: Fetcher, settings: Optional[Settings] = None):
        self.fetcher = fetcher
        self.settings = settings or fetcher.settings

    async def analyze(self, url: str) -> PageResult:
        """
        Analyze one page.

        Args:
            url: Absolute page URL

        Returns:
            PageResult with nine dimension scores and the page total

        Raises:
            FetchFailure: If the page itself cannot be fetched
        """
        response = await self.fetcher.fetch(url, timeout=self.settings.page_timeout)
        page = ParsedPage(response.body)

        scores = {
            dimension: scorer(page, url)
            for dimension, scorer in MARKUP_SCORERS.items()
        }
        network_scores = await asyncio.gather(*(
            scorer(url, self.fetcher) for scorer in NETWORK_SCORERS.values()
        ))
        scores.update(zip(NETWORK_SCORERS, network_scores))

        result = PageResult.build(
            url,
            scores,
            exclude_failed=self.settings.exclude_failed_dimensions,
        )
        logger.info("Analyzed {} (page total {:.2f})", url, result.page_total)
        return result
