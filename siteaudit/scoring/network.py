"""
Network Scorers
===============

Sitemap/robots and speed need their own requests. Fetch failures turn into
zero points for the affected checks; they never escape the scorer.
"""

import asyncio
from typing import Optional
from urllib.parse import urlparse

from loguru import logger

from siteaudit.scoring.methodology import methodology_for
from siteaudit.scoring.models import Dimension, DimensionScore
from siteaudit.web.fetcher import FailureReason, FetchedPage, Fetcher, FetchFailure

# (upper bound in ms, points)
LOAD_TIME_TIERS = [(1000, 40), (2000, 30), (3000, 20), (5000, 10)]

# (upper bound in bytes, points)
RESPONSE_SIZE_TIERS = [(50_000, 20), (100_000, 15), (200_000, 10), (500_000, 5)]


def _tier_points(value: float, tiers: list[tuple[int, int]]) -> int:
    for bound, points in tiers:
        if value < bound:
            return points
    return 0


def site_origin(url: str) -> str:
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


async def _fetch_optional(
    fetcher: Fetcher, url: str, timeout: float
) -> tuple[Optional[FetchedPage], Optional[FetchFailure]]:
    try:
        return await fetcher.fetch(url, timeout=timeout), None
    except FetchFailure as e:
        logger.debug("Auxiliary fetch failed: {}", e)
        return None, e


async def score_sitemap_robots(url: str, fetcher: Fetcher, timeout: Optional[float] = None) -> DimensionScore:
    """Reachability of /sitemap.xml and /robots.txt on the page's origin."""
    timeout = timeout if timeout is not None else fetcher.settings.auxiliary_timeout
    origin = site_origin(url)
    score = 0
    details = {}

    (sitemap, sitemap_error), (robots, robots_error) = await asyncio.gather(
        _fetch_optional(fetcher, f"{origin}/sitemap.xml", timeout),
        _fetch_optional(fetcher, f"{origin}/robots.txt", timeout),
    )

    details["sitemapExists"] = sitemap is not None
    if sitemap is not None:
        details["sitemapStatus"] = sitemap.status
        if sitemap.status == 200:
            score += 50
            if "<urlset" in sitemap.body or "<sitemapindex" in sitemap.body:
                score += 10
    elif sitemap_error.status is not None:
        details["sitemapStatus"] = sitemap_error.status

    details["robotsExists"] = robots is not None
    if robots is not None:
        details["robotsStatus"] = robots.status
        if robots.status == 200:
            score += 30
            if "sitemap:" in robots.body.lower():
                score += 10
    elif robots_error.status is not None:
        details["robotsStatus"] = robots_error.status

    # A 404 is a finding; only transport-level failure on both means no data
    failed = all(
        error is not None and error.reason is not FailureReason.HTTP_STATUS
        for error in (sitemap_error, robots_error)
    )
    return DimensionScore(score, methodology_for(Dimension.SITEMAP_ROBOTS), details, failed=failed)


async def score_speed(url: str, fetcher: Fetcher, timeout: Optional[float] = None) -> DimensionScore:
    """Timed re-fetch of the page: load time, size, compression, caching."""
    timeout = timeout if timeout is not None else fetcher.settings.page_timeout
    score = 0
    details = {}

    try:
        response = await fetcher.fetch(url, timeout=timeout)
    except FetchFailure as e:
        logger.debug("Speed check failed for {}: {}", url, e)
        details["error"] = str(e)
        return DimensionScore(0, methodology_for(Dimension.SPEED), details, failed=True)

    details["loadTime"] = round(response.elapsed_ms)
    details["responseSize"] = response.size
    details["status"] = response.status

    score += _tier_points(response.elapsed_ms, LOAD_TIME_TIERS)
    score += _tier_points(response.size, RESPONSE_SIZE_TIERS)

    has_compression = bool(response.header("content-encoding"))
    details["hasCompression"] = has_compression
    if has_compression:
        score += 20

    has_cache_headers = bool(response.header("cache-control") or response.header("etag"))
    details["hasCacheHeaders"] = has_cache_headers
    if has_cache_headers:
        score += 20

    return DimensionScore(score, methodology_for(Dimension.SPEED), details)
