"""
Page Parser
===========

Static-markup view of a fetched HTML body. Nothing is executed and no
sub-resources are loaded; scorers only ever see what the server sent.
"""

import re
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Comment, Declaration, Doctype, ProcessingInstruction

# Elements whose text never renders
HIDDEN_TEXT_TAGS = {"script", "style", "template", "head", "title"}

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


class ParsedPage:
    """
    Queryable document tree for one page.

    Provides:
    - Element counts by tag name or CSS selector
    - Attribute and meta-tag lookups
    - Visible text extraction
    - Raw-body checks (doctype)
    """

    def __init__(self, html: str):
        self.raw = html or ""
        self.soup = BeautifulSoup(self.raw, "html.parser")
        self._text: Optional[str] = None

    def count(self, *tags: str) -> int:
        """Number of elements matching any of ``tags``."""
        return len(self.soup.find_all(list(tags)))

    def count_selector(self, selector: str) -> int:
        return len(self.soup.select(selector))

    def find_all(self, *args, **kwargs) -> list:
        return self.soup.find_all(*args, **kwargs)

    def text_of(self, tag: str) -> str:
        """Concatenated, stripped text of every ``tag`` element."""
        return " ".join(el.get_text(" ", strip=True) for el in self.soup.find_all(tag)).strip()

    def html_attr(self, name: str) -> Optional[str]:
        """Attribute of the root ``<html>`` element."""
        html_tag = self.soup.find("html")
        if html_tag is None:
            return None
        return html_tag.get(name)

    def meta_content(self, name: Optional[str] = None, prop: Optional[str] = None) -> str:
        """Content of a ``<meta name=...>`` or ``<meta property=...>`` tag."""
        attrs = {"name": name} if name else {"property": prop}
        meta = self.soup.find("meta", attrs=attrs)
        if meta is None:
            return ""
        return (meta.get("content") or "").strip()

    def title(self) -> str:
        title_tag = self.soup.find("title")
        return title_tag.get_text().strip() if title_tag else ""

    def anchors(self) -> list[tuple[str, str]]:
        """``(href, anchor text)`` for every ``<a href>``."""
        return [
            (anchor.get("href", ""), anchor.get_text(" ", strip=True))
            for anchor in self.soup.find_all("a", href=True)
        ]

    def visible_text(self) -> str:
        """Document text with script/style/template contents removed."""
        if self._text is None:
            parts = []
            for string in self.soup.find_all(string=True):
                if isinstance(string, (Comment, Declaration, Doctype, ProcessingInstruction)):
                    continue
                if any(parent.name in HIDDEN_TEXT_TAGS for parent in string.parents):
                    continue
                parts.append(string)
            self._text = re.sub(r"\s+", " ", " ".join(parts)).strip()
        return self._text

    def words(self) -> list[str]:
        return self.visible_text().split()

    def has_html5_doctype(self) -> bool:
        return self.raw.lstrip("\ufeff \t\r\n").lower().startswith("<!doctype html")
