"""
Methodology Texts
=================

Human-readable description of each dimension's point budget, keyed by
dimension and language. Scorers attach these verbatim; wording changes and
new languages belong here, never in the scoring code.
"""

from siteaudit.scoring.models import Dimension

# Primary language first
LANGUAGES = ("cs", "en")

METHODOLOGY: dict[Dimension, dict[str, str]] = {
    Dimension.HTML_STRUCTURE: {
        "cs": "Hodnotíme přítomnost jediného H1 tagu (25 bodů), správnou hierarchii nadpisů (25 bodů), "
              "použití sémantických HTML5 elementů (25 bodů) a HTML5 doctype (25 bodů).",
        "en": "We evaluate the presence of a single H1 tag (25 points), proper heading hierarchy (25 points), "
              "use of semantic HTML5 elements (25 points), and HTML5 doctype (25 points).",
    },
    Dimension.METADATA: {
        "cs": "Hodnotíme title tag (25 bodů), meta description (25 bodů), Open Graph tagy (25 bodů) "
              "a Twitter Card (25 bodů).",
        "en": "We evaluate the title tag (25 points), meta description (25 points), Open Graph tags (25 points), "
              "and Twitter Card (25 points).",
    },
    Dimension.SCHEMA: {
        "cs": "Hodnotíme přítomnost JSON-LD strukturovaných dat (50 bodů), microdata (25 bodů) "
              "a běžných schema typů (25 bodů).",
        "en": "We evaluate the presence of JSON-LD structured data (50 points), microdata (25 points), "
              "and common schema types (25 points).",
    },
    Dimension.CONTENT_WITHOUT_JS: {
        "cs": "Hodnotíme množství textového obsahu (40 bodů), obsah v noscript tagech (20 bodů) "
              "a poměr obrázků s alt textem (40 bodů).",
        "en": "We evaluate the amount of text content (40 points), content in noscript tags (20 points), "
              "and the ratio of images with alt text (40 points).",
    },
    Dimension.SITEMAP_ROBOTS: {
        "cs": "Hodnotíme přístupnost sitemap.xml (50 bodů), validitu XML (10 bodů), přístupnost robots.txt "
              "(30 bodů) a odkaz na sitemap v robots.txt (10 bodů).",
        "en": "We evaluate sitemap.xml accessibility (50 points), XML validity (10 points), robots.txt "
              "accessibility (30 points), and sitemap reference in robots.txt (10 points).",
    },
    Dimension.ACCESSIBILITY: {
        "cs": "Hodnotíme alt atributy obrázků (25 bodů), strukturu nadpisů (25 bodů), labely formulářů "
              "(25 bodů) a lang atribut (25 bodů).",
        "en": "We evaluate alt attributes on images (25 points), heading structure (25 points), form labels "
              "(25 points), and lang attribute (25 points).",
    },
    Dimension.SPEED: {
        "cs": "Hodnotíme rychlost načítání (40 bodů), velikost odpovědi (20 bodů), kompresi (20 bodů) "
              "a cache hlavičky (20 bodů).",
        "en": "We evaluate loading speed (40 points), response size (20 points), compression (20 points), "
              "and cache headers (20 points).",
    },
    Dimension.READABILITY: {
        "cs": "Hodnotíme průměrnou délku vět (30 bodů), průměrnou délku slov (25 bodů), strukturu odstavců "
              "(25 bodů) a použití seznamů (20 bodů).",
        "en": "We evaluate average sentence length (30 points), average word length (25 points), paragraph "
              "structure (25 points), and use of lists (20 points).",
    },
    Dimension.INTERNAL_LINKING: {
        "cs": "Hodnotíme počet vnitřních odkazů (50 bodů), kvalitu anchor textů (30 bodů) "
              "a přítomnost breadcrumbs (20 bodů).",
        "en": "We evaluate the number of internal links (50 points), anchor text quality (30 points), "
              "and presence of breadcrumbs (20 points).",
    },
}

FAILED_METHODOLOGY: dict[str, str] = {
    "cs": "Analýza se nezdařila kvůli technické chybě.",
    "en": "Analysis failed due to technical error.",
}


def methodology_for(dimension: Dimension) -> dict[str, str]:
    """Methodology text of ``dimension`` in every language."""
    return dict(METHODOLOGY[dimension])


def failed_methodology() -> dict[str, str]:
    return dict(FAILED_METHODOLOGY)
