"""Per-page dimension scorers and result records."""

from siteaudit.scoring.content import score_accessibility, score_content_without_js, score_readability
from siteaudit.scoring.linking import score_internal_linking
from siteaudit.scoring.markup import score_html_structure, score_metadata, score_schema
from siteaudit.scoring.models import (
    AggregatedDimensionScore,
    AuditStatus,
    Dimension,
    DimensionScore,
    PageResult,
    SiteResult,
)
from siteaudit.scoring.network import score_sitemap_robots, score_speed

# Scorers that only need the parsed page and its URL
MARKUP_SCORERS = {
    Dimension.HTML_STRUCTURE: score_html_structure,
    Dimension.METADATA: score_metadata,
    Dimension.SCHEMA: score_schema,
    Dimension.CONTENT_WITHOUT_JS: score_content_without_js,
    Dimension.ACCESSIBILITY: score_accessibility,
    Dimension.READABILITY: score_readability,
    Dimension.INTERNAL_LINKING: score_internal_linking,
}

# Scorers that make their own requests
NETWORK_SCORERS = {
    Dimension.SITEMAP_ROBOTS: score_sitemap_robots,
    Dimension.SPEED: score_speed,
}

__all__ = [
    "AggregatedDimensionScore",
    "AuditStatus",
    "Dimension",
    "DimensionScore",
    "PageResult",
    "SiteResult",
    "MARKUP_SCORERS",
    "NETWORK_SCORERS",
]
