"""Internal linking scorer."""

from urllib.parse import urljoin, urlparse

from siteaudit.scoring.methodology import methodology_for
from siteaudit.scoring.models import Dimension, DimensionScore, ratio_points
from siteaudit.web.parser import ParsedPage

WEAK_ANCHOR_PHRASES = ("click here", "read more")

BREADCRUMB_SELECTOR = '[class*="breadcrumb"], [role="navigation"]'


def is_descriptive_anchor(text: str) -> bool:
    lowered = text.strip().lower()
    return len(lowered) > 2 and not any(phrase in lowered for phrase in WEAK_ANCHOR_PHRASES)


def score_internal_linking(page: ParsedPage, url: str) -> DimensionScore:
    """Same-host links, anchor text quality and breadcrumbs."""
    score = 0
    details = {}

    page_host = urlparse(url).hostname
    anchors = page.anchors()
    internal_links = 0
    external_links = 0
    for href, _ in anchors:
        try:
            host = urlparse(urljoin(url, href.strip())).hostname
        except ValueError:
            continue
        if host and host == page_host:
            internal_links += 1
        else:
            external_links += 1

    details["totalLinks"] = len(anchors)
    details["internalLinks"] = internal_links
    details["externalLinks"] = external_links
    if internal_links > 0:
        score += 30
    if internal_links > 3:
        score += 20

    good_anchors = sum(1 for _, text in anchors if is_descriptive_anchor(text))
    details["goodAnchorTexts"] = good_anchors
    if anchors:
        score += ratio_points(good_anchors, len(anchors), 30)

    has_breadcrumbs = page.count_selector(BREADCRUMB_SELECTOR) > 0
    details["hasBreadcrumbs"] = has_breadcrumbs
    if has_breadcrumbs:
        score += 20

    return DimensionScore(score, methodology_for(Dimension.INTERNAL_LINKING), details)
