"""
Content Scorers
===============

Content available without JavaScript, accessibility basics and
readability of the visible text.
"""

import re

from siteaudit.scoring.methodology import methodology_for
from siteaudit.scoring.models import Dimension, DimensionScore, ratio_points, round_half_up
from siteaudit.web.parser import HEADING_TAGS, ParsedPage

SENTENCE_BREAK = re.compile(r"[.!?]+")


def _image_alt_counts(page: ParsedPage) -> tuple[int, int]:
    images = page.find_all("img")
    with_alt = [img for img in images if img.has_attr("alt")]
    return len(images), len(with_alt)


def score_content_without_js(page: ParsedPage, url: str = "") -> DimensionScore:
    """Text volume, noscript fallback and image alt coverage."""
    score = 0
    details = {}

    text = page.visible_text()
    word_count = len(page.words())
    details["textLength"] = len(text)
    details["wordCount"] = word_count

    if word_count > 200:
        score += 40
    elif word_count > 100:
        score += 30
    elif word_count > 50:
        score += 20
    elif word_count > 0:
        score += 10

    noscript_text = page.text_of("noscript")
    details["noscriptContentLength"] = len(noscript_text)
    if noscript_text:
        score += 20

    total_images, images_with_alt = _image_alt_counts(page)
    details["totalImages"] = total_images
    details["imagesWithAlt"] = images_with_alt
    score += ratio_points(images_with_alt, total_images, 40)

    return DimensionScore(score, methodology_for(Dimension.CONTENT_WITHOUT_JS), details)


def score_accessibility(page: ParsedPage, url: str = "") -> DimensionScore:
    """Image alt text, headings, form labels, document language."""
    score = 0
    details = {}

    total_images, images_with_alt = _image_alt_counts(page)
    details["totalImages"] = total_images
    details["imagesWithAlt"] = images_with_alt
    score += ratio_points(images_with_alt, total_images, 25)

    heading_count = page.count(*HEADING_TAGS)
    details["headingCount"] = heading_count
    if heading_count > 0:
        score += 25

    controls = [
        el for el in page.find_all(["input", "select", "textarea"])
        if not (el.name == "input" and (el.get("type") or "").lower() == "hidden")
    ]
    labels = page.find_all("label", attrs={"for": True})
    details["totalInputs"] = len(controls)
    details["labelsForInputs"] = len(labels)
    score += ratio_points(min(len(labels), len(controls)), len(controls), 25)

    lang = (page.html_attr("lang") or "").strip()
    details["hasLangAttribute"] = bool(lang)
    details["lang"] = lang
    if lang:
        score += 25

    return DimensionScore(score, methodology_for(Dimension.ACCESSIBILITY), details)


def score_readability(page: ParsedPage, url: str = "") -> DimensionScore:
    """Sentence length, word length, paragraphs and lists."""
    score = 0
    details = {}

    text = page.visible_text()
    sentences = [s for s in SENTENCE_BREAK.split(text) if s.strip()]
    words = page.words()
    details["sentenceCount"] = len(sentences)
    details["wordCount"] = len(words)

    if not sentences or not words:
        return DimensionScore(0, methodology_for(Dimension.READABILITY), details)

    avg_sentence_length = len(words) / len(sentences)
    details["avgSentenceLength"] = round_half_up(avg_sentence_length)
    if 10 <= avg_sentence_length <= 25:
        score += 30
    elif 8 <= avg_sentence_length <= 30:
        score += 20
    elif 5 <= avg_sentence_length <= 35:
        score += 10

    avg_word_length = sum(len(word) for word in words) / len(words)
    details["avgWordLength"] = round_half_up(avg_word_length)
    if 4 <= avg_word_length <= 6:
        score += 25
    elif 3 <= avg_word_length <= 7:
        score += 20
    elif 2 <= avg_word_length <= 8:
        score += 15

    paragraph_count = page.count("p")
    details["paragraphCount"] = paragraph_count
    if paragraph_count > 0:
        score += 25

    list_count = page.count("ul", "ol")
    details["listCount"] = list_count
    if list_count > 0:
        score += 20

    return DimensionScore(score, methodology_for(Dimension.READABILITY), details)
