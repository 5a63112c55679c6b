"""Fetching, parsing and same-host URL discovery."""

from siteaudit.web.crawler import CrawlSession, CrawlTarget, normalize_url
from siteaudit.web.fetcher import FailureReason, FetchedPage, Fetcher, FetchFailure
from siteaudit.web.parser import ParsedPage

__all__ = [
    "CrawlSession",
    "CrawlTarget",
    "normalize_url",
    "FailureReason",
    "FetchedPage",
    "Fetcher",
    "FetchFailure",
    "ParsedPage",
]
