# === FILE: doc_scout/parser/html_parser.py ===
"""HTML parsing utilities for DocScout.

:class:`ParsedPage` is the only view of a page that the extractors get.  It
offers selector-based queries (CSS selectors through soupsieve) instead of
exposing BeautifulSoup directly, so the heuristics in
:mod:`doc_scout.parser.metadata` and :mod:`doc_scout.crawler.link_extractor`
read as lists of selectors:

* ``select`` / ``select_one``: elements matching a selector.
* ``text_of``: text of *all* matches concatenated, no separator.
* ``first_text``: trimmed text of the first match.
* ``attr_of``: attribute of the first match.
* ``enclosing_text``: full text of the nearest enclosing container.
* ``visible_text``: raw body text (no separators added) without scripts and styles.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("ParsedPage", "parse_html")

_INVISIBLE = ("script", "style", "noscript", "template")


class ParsedPage:
    """Lightweight selector-based wrapper around a parsed HTML document."""

    __slots__ = ("url", "_soup", "_visible_text")

    def __init__(self, soup: BeautifulSoup, url: str = "") -> None:
        self.url = url
        self._soup = soup
        self._visible_text: Optional[str] = None

    # Element queries -------------------------------------------------------
    def select(self, selector: str) -> list[Tag]:
        return list(self._soup.select(selector))

    def select_one(self, selector: str) -> Optional[Tag]:
        return self._soup.select_one(selector)

    # Text helpers ----------------------------------------------------------
    def text_of(self, selector: str) -> str:
        """Concatenated text of every element matching *selector*."""
        return "".join(el.get_text() for el in self._soup.select(selector))

    def first_text(self, selector: str) -> str:
        el = self._soup.select_one(selector)
        return el.get_text().strip() if el is not None else ""

    def attr_of(self, selector: str, name: str) -> Optional[str]:
        el = self._soup.select_one(selector)
        if el is None:
            return None
        value = el.get(name)
        if isinstance(value, list):
            value = " ".join(value)
        return value

    @staticmethod
    def enclosing_text(element: Tag, names: Iterable[str]) -> str:
        """Text of the nearest ancestor of *element* whose tag is in *names*."""
        parent = element.find_parent(list(names))
        return parent.get_text() if parent is not None else ""

    def visible_text(self) -> str:
        if self._visible_text is None:
            root = self._soup.body or self._soup
            self._visible_text = root.get_text()
        return self._visible_text


def parse_html(page: Any, url: str = "") -> ParsedPage:
    """Parse raw HTML (string) or :class:`~doc_scout.crawler.models.PageData`.

    Parameters
    ----------
    page
        Either a *str* (HTML markup) **or** an object with ``url`` and
        ``content`` attributes.
    url
        Page address used when *page* is plain markup.
    """
    if hasattr(page, "content") and hasattr(page, "url"):
        html = page.content
        url = str(page.url)
    else:
        html = str(page)

    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="replace")

    soup = BeautifulSoup(html, "html.parser")
    for element in soup(list(_INVISIBLE)):
        element.decompose()

    return ParsedPage(soup, url=url)
