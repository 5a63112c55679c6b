"""
Site Audit
==========

Crawls a bounded set of same-host pages, scores each page across nine
dimensions (HTML structure, metadata, structured data, content without
JavaScript, sitemap/robots, accessibility, speed, readability, internal
linking) and rolls the scores up into one site-level result.
"""

__version__ = "1.0.0"

from siteaudit.aggregator import aggregate, empty_site_result
from siteaudit.analyzer import PageAnalyzer
from siteaudit.auditor import SiteAuditor, analyze, analyze_async
from siteaudit.config import Settings, get_settings
from siteaudit.scoring.models import AuditStatus, Dimension, PageResult, SiteResult

__all__ = [
    "SiteAuditor",
    "PageAnalyzer",
    "analyze",
    "analyze_async",
    "aggregate",
    "empty_site_result",
    "Settings",
    "get_settings",
    "AuditStatus",
    "Dimension",
    "PageResult",
    "SiteResult",
]
