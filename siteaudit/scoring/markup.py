"""
Markup Scorers
==============

HTML structure, metadata and structured data. Each scorer is a pure
function of the parsed page and returns an immutable DimensionScore.
"""

import json

from siteaudit.scoring.methodology import methodology_for
from siteaudit.scoring.models import Dimension, DimensionScore
from siteaudit.web.parser import HEADING_TAGS, ParsedPage

SEMANTIC_TAGS = ["main", "section", "article", "aside", "header", "footer", "nav"]

OPEN_GRAPH_TAGS = ["og:title", "og:description", "og:image", "og:url"]

COMMON_SCHEMA_TYPES = {"Organization", "WebSite", "Article", "Product", "LocalBusiness"}


def score_html_structure(page: ParsedPage, url: str = "") -> DimensionScore:
    """Single H1, heading hierarchy, semantic elements, HTML5 doctype."""
    score = 0
    details = {}

    h1_count = page.count("h1")
    details["h1Count"] = h1_count
    if h1_count == 1:
        score += 25
    elif h1_count > 1:
        score += 10

    # Levels in use must form an unbroken run starting at h1
    levels = [level for level, tag in enumerate(HEADING_TAGS, start=1) if page.count(tag) > 0]
    has_proper_hierarchy = True
    previous = 0
    for level in levels:
        if level > previous + 1:
            has_proper_hierarchy = False
            break
        previous = level
    details["headingLevels"] = levels
    details["hasProperHierarchy"] = has_proper_hierarchy
    if has_proper_hierarchy:
        score += 25

    semantic_used = [tag for tag in SEMANTIC_TAGS if page.count(tag) > 0]
    details["semanticTagsUsed"] = len(semantic_used)
    details["semanticTags"] = semantic_used
    score += min(len(semantic_used) * 5, 25)

    has_doctype = page.has_html5_doctype()
    details["hasHtml5Doctype"] = has_doctype
    if has_doctype:
        score += 25

    return DimensionScore(score, methodology_for(Dimension.HTML_STRUCTURE), details)


def score_metadata(page: ParsedPage, url: str = "") -> DimensionScore:
    """Title, meta description, Open Graph and Twitter card."""
    score = 0
    details = {}

    title = page.title()
    details["title"] = title
    details["titleLength"] = len(title)
    if 0 < len(title) <= 60:
        score += 25
    elif title:
        score += 15

    description = page.meta_content(name="description")
    details["metaDescription"] = description
    details["metaDescriptionLength"] = len(description)
    if 120 <= len(description) <= 160:
        score += 25
    elif description:
        score += 15

    og_count = sum(1 for tag in OPEN_GRAPH_TAGS if page.meta_content(prop=tag))
    details["openGraphTags"] = og_count
    score += min(og_count * 6, 25)

    twitter_card = page.meta_content(name="twitter:card")
    details["hasTwitterCard"] = bool(twitter_card)
    if twitter_card:
        score += 25

    return DimensionScore(score, methodology_for(Dimension.METADATA), details)


def _schema_types(data) -> list[str]:
    """Every ``@type`` declared in a JSON-LD payload, including ``@graph`` members."""
    types = []
    if isinstance(data, list):
        for item in data:
            types.extend(_schema_types(item))
    elif isinstance(data, dict):
        declared = data.get("@type")
        if isinstance(declared, str):
            types.append(declared)
        elif isinstance(declared, list):
            types.extend(t for t in declared if isinstance(t, str))
        types.extend(_schema_types(data.get("@graph", [])))
    return types


def score_schema(page: ParsedPage, url: str = "") -> DimensionScore:
    """JSON-LD blocks, microdata and well-known schema types."""
    score = 0
    details = {}

    schemas = []
    for script in page.find_all("script", attrs={"type": "application/ld+json"}):
        content = script.get_text().strip()
        if not content:
            continue
        try:
            schemas.append(json.loads(content))
        except ValueError:
            continue

    schema_types = [t for schema in schemas for t in _schema_types(schema)]
    details["jsonLdCount"] = len(schemas)
    details["jsonLdTypes"] = schema_types
    if schemas:
        score += 50

    microdata_count = len(page.find_all(attrs={"itemscope": True}))
    details["microdataCount"] = microdata_count
    if microdata_count > 0:
        score += 25

    has_common_schema = any(t in COMMON_SCHEMA_TYPES for t in schema_types)
    details["hasCommonSchema"] = has_common_schema
    if has_common_schema:
        score += 25

    return DimensionScore(score, methodology_for(Dimension.SCHEMA), details)
