"""Tests for the markup, content and linking scorers."""

import pytest

from siteaudit.scoring import MARKUP_SCORERS
from siteaudit.scoring.content import score_accessibility, score_content_without_js, score_readability
from siteaudit.scoring.linking import is_descriptive_anchor, score_internal_linking
from siteaudit.scoring.markup import score_html_structure, score_metadata, score_schema
from siteaudit.scoring.methodology import LANGUAGES
from siteaudit.scoring.models import DimensionScore
from siteaudit.web.parser import ParsedPage

from tests.conftest import GOOD_PAGE, html_page

URL = "https://example.com/"

SAMPLE_DOCUMENTS = [
    GOOD_PAGE,
    "",
    "<p>no html element at all",
    html_page("<h3>deep</h3><h1>a</h1><h1>b</h1>" + "<img>" * 5, doctype=False, lang=""),
    html_page("<input><input><label for='x'>x</label><label for='y'>y</label><label for='z'>z</label>"),
    html_page("<script type='application/ld+json'>{not json</script>"),
    html_page("<p>" + "word " * 5000 + "</p>" + "<a href='/x'>click here</a>" * 20),
]


class TestScoreBounds:
    """Every scorer stays inside [0, 100] and carries both languages."""

    @pytest.mark.parametrize("document", SAMPLE_DOCUMENTS)
    def test_scores_within_bounds(self, document):
        page = ParsedPage(document)
        for scorer in MARKUP_SCORERS.values():
            result = scorer(page, URL)
            assert 0 <= result.score <= 100
            assert set(result.methodology) == set(LANGUAGES)

    def test_dimension_score_clamps(self):
        assert DimensionScore(130, {"en": "x"}).score == 100
        assert DimensionScore(-5, {"en": "x"}).score == 0

    def test_dimension_score_is_immutable(self):
        result = DimensionScore(50, {"en": "x"}, {"a": 1})
        with pytest.raises(AttributeError):
            result.score = 10
        with pytest.raises(TypeError):
            result.details["a"] = 2


class TestHtmlStructure:
    """Tests for the HTML structure scorer."""

    def test_full_marks(self):
        body = (
            "<header></header><nav></nav><main><article><section>"
            "<h1>T</h1><h2>a</h2><h3>b</h3><h4>c</h4><h5>d</h5><h6>e</h6>"
            "</section></article></main><footer></footer>"
        )
        result = score_html_structure(ParsedPage(html_page(body)))
        assert result.score == 100
        assert result.details["hasProperHierarchy"] is True

    def test_four_semantic_tags_give_twenty_points(self):
        body = "<header></header><nav></nav><main><h1>T</h1><h2>x</h2></main><footer></footer>"
        result = score_html_structure(ParsedPage(html_page(body)))
        assert result.details["semanticTagsUsed"] == 4
        assert result.score == 95

    def test_multiple_h1(self):
        result = score_html_structure(ParsedPage(html_page("<h1>a</h1><h1>b</h1>", doctype=False)))
        assert result.details["h1Count"] == 2
        assert result.score == 10 + 25

    def test_skipped_heading_level(self):
        result = score_html_structure(ParsedPage(html_page("<h1>a</h1><h3>b</h3>", doctype=False)))
        assert result.details["hasProperHierarchy"] is False
        assert result.score == 25

    def test_missing_h1_is_a_skipped_level(self):
        result = score_html_structure(ParsedPage(html_page("<h2>a</h2>", doctype=False)))
        assert result.details["hasProperHierarchy"] is False

    def test_semantic_contribution_is_capped(self):
        body = "".join(f"<{tag}></{tag}>" for tag in ["main", "section", "article", "aside", "header", "footer", "nav"])
        result = score_html_structure(ParsedPage(html_page(body, doctype=False)))
        # no headings: hierarchy holds vacuously
        assert result.score == 25 + 25


class TestMetadata:
    """Tests for the metadata scorer."""

    def test_good_page(self):
        result = score_metadata(ParsedPage(GOOD_PAGE))
        assert result.details["openGraphTags"] == 4
        assert result.details["hasTwitterCard"] is True
        # four Open Graph tags are worth 24 points
        assert result.score == 99

    def test_long_title_and_short_description(self):
        head = f"<title>{'x' * 61}</title><meta name='description' content='short'>"
        result = score_metadata(ParsedPage(html_page(head=head)))
        assert result.details["titleLength"] == 61
        assert result.score == 15 + 15

    def test_nothing_present(self):
        assert score_metadata(ParsedPage(html_page())).score == 0

    def test_empty_open_graph_content_not_counted(self):
        head = "<meta property='og:title' content=''><meta property='og:url' content='https://e.com'>"
        result = score_metadata(ParsedPage(html_page(head=head)))
        assert result.details["openGraphTags"] == 1
        assert result.score == 6


class TestSchema:
    """Tests for the structured data scorer."""

    def test_good_page(self):
        result = score_schema(ParsedPage(GOOD_PAGE))
        assert result.details["jsonLdTypes"] == ["Organization"]
        assert result.score == 100

    def test_invalid_json_ld_is_ignored(self):
        body = "<script type='application/ld+json'>{broken</script>"
        result = score_schema(ParsedPage(html_page(body)))
        assert result.details["jsonLdCount"] == 0
        assert result.score == 0

    def test_uncommon_type(self):
        body = '<script type="application/ld+json">{"@type": "Recipe"}</script>'
        result = score_schema(ParsedPage(html_page(body)))
        assert result.score == 50
        assert result.details["hasCommonSchema"] is False

    def test_graph_and_list_types(self):
        body = '<script type="application/ld+json">{"@graph": [{"@type": ["Thing", "Product"]}]}</script>'
        result = score_schema(ParsedPage(html_page(body)))
        assert result.details["jsonLdTypes"] == ["Thing", "Product"]
        assert result.score == 75

    def test_microdata_only(self):
        result = score_schema(ParsedPage(html_page("<div itemscope></div>")))
        assert result.details["microdataCount"] == 1
        assert result.score == 25


class TestContentWithoutJs:
    """Tests for the content-without-JavaScript scorer."""

    def test_no_images_earns_full_image_points(self):
        result = score_content_without_js(ParsedPage(html_page("")))
        assert result.details["totalImages"] == 0
        assert result.score == 40

    @pytest.mark.parametrize("words,points", [(201, 40), (101, 30), (51, 20), (1, 10), (0, 0)])
    def test_word_count_tiers(self, words, points):
        body = "<p>" + "word " * words + "</p>"
        result = score_content_without_js(ParsedPage(html_page(body)))
        assert result.details["wordCount"] == words
        assert result.score == points + 40

    def test_noscript_content(self):
        result = score_content_without_js(ParsedPage(html_page("<noscript>Enable JavaScript</noscript>")))
        assert result.details["noscriptContentLength"] > 0
        assert result.score == 10 + 20 + 40

    def test_image_alt_ratio(self):
        body = '<img src="a.png" alt="A"><img src="b.png">'
        result = score_content_without_js(ParsedPage(html_page(body)))
        assert result.details["imagesWithAlt"] == 1
        assert result.score == 20

    def test_scripts_do_not_count_as_content(self):
        body = "<script>" + "var x = 1; " * 100 + "</script>"
        result = score_content_without_js(ParsedPage(html_page(body)))
        assert result.details["wordCount"] == 0


class TestAccessibility:
    """Tests for the accessibility scorer."""

    def test_good_page(self):
        assert score_accessibility(ParsedPage(GOOD_PAGE)).score == 100

    def test_no_images_no_forms(self):
        result = score_accessibility(ParsedPage(html_page("<h1>T</h1>")))
        assert result.score == 100

    def test_missing_lang_and_headings(self):
        result = score_accessibility(ParsedPage(html_page("<p>x</p>", lang="")))
        assert result.details["hasLangAttribute"] is False
        assert result.score == 50

    def test_label_ratio_rounds_half_up(self):
        body = "<h1>T</h1><input id='a'><input id='b'><label for='a'>A</label>"
        result = score_accessibility(ParsedPage(html_page(body)))
        assert result.details["totalInputs"] == 2
        # 12.5 rounds up to 13
        assert result.score == 25 + 25 + 13 + 25

    def test_hidden_inputs_are_not_controls(self):
        body = "<h1>T</h1><input type='hidden' name='csrf'>"
        result = score_accessibility(ParsedPage(html_page(body)))
        assert result.details["totalInputs"] == 0
        assert result.score == 100

    def test_extra_labels_do_not_overflow(self):
        body = "<h1>T</h1><select id='s'></select><label for='s'>S</label><label for='t'>T</label>"
        result = score_accessibility(ParsedPage(html_page(body)))
        assert result.score == 100


class TestReadability:
    """Tests for the readability scorer."""

    def test_no_sentences_scores_zero(self):
        result = score_readability(ParsedPage(html_page("<p></p><ul><li></li></ul>")))
        assert result.details["sentenceCount"] == 0
        assert result.score == 0

    def test_well_formed_text(self):
        sentence = "Clear writing helps readers understand complex topics quickly and easily today."
        body = f"<p>{sentence} {sentence}</p><ul><li>Short lists make pages easy to scan for busy readers</li></ul>"
        result = score_readability(ParsedPage(html_page(body)))
        assert result.details["sentenceCount"] == 3
        assert result.score == 100

    def test_one_word_sentences(self):
        body = "<div>" + "Go! " * 10 + "</div>"
        result = score_readability(ParsedPage(html_page(body)))
        assert result.details["avgSentenceLength"] == 1
        # average word length 3 ("Go!") falls in the 3-7 band
        assert result.score == 20


class TestInternalLinking:
    """Tests for the internal linking scorer."""

    def test_good_page(self):
        result = score_internal_linking(ParsedPage(GOOD_PAGE), URL)
        assert result.details["internalLinks"] == 5
        assert result.score == 100

    def test_external_links_only(self):
        body = '<a href="https://other.org/a">Other site</a>'
        result = score_internal_linking(ParsedPage(html_page(body)), URL)
        assert result.details["externalLinks"] == 1
        assert result.score == 30

    def test_weak_anchor_texts(self):
        body = '<a href="/a">Click here</a><a href="/b">Read more</a><a href="/c">Go</a><a href="/d">Pricing</a>'
        result = score_internal_linking(ParsedPage(html_page(body)), URL)
        assert result.details["goodAnchorTexts"] == 1
        # 4 internal links: 50 points, 1 of 4 good anchors: 8 points (7.5 rounded up)
        assert result.score == 30 + 20 + 8

    def test_no_links(self):
        result = score_internal_linking(ParsedPage(html_page("<p>x</p>")), URL)
        assert result.score == 0

    def test_malformed_href_is_skipped(self):
        body = '<a href="http://[::1">Broken link</a><a href="/ok">Fine link</a>'
        result = score_internal_linking(ParsedPage(html_page(body)), URL)
        assert result.details["internalLinks"] == 1

    def test_role_navigation_counts_as_breadcrumb(self):
        result = score_internal_linking(ParsedPage(html_page('<div role="navigation"></div>')), URL)
        assert result.details["hasBreadcrumbs"] is True
        assert result.score == 20

    @pytest.mark.parametrize("text,expected", [
        ("Pricing plans", True),
        ("Go", False),
        ("CLICK HERE now", False),
        ("read more", False),
    ])
    def test_is_descriptive_anchor(self, text, expected):
        assert is_descriptive_anchor(text) is expected
