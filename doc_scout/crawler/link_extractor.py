# doc_scout/crawler/link_extractor.py
"""
Navigation link discovery for DocScout.

Only table-of-contents, navigation and sidebar regions are searched, and
"supported countries/regions" clusters are skipped: they list hundreds of
near-identical region pages.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple
from urllib.parse import urljoin, urlsplit

from bs4.element import Tag

from doc_scout.crawler.urls import same_domain
from doc_scout.parser.html_parser import ParsedPage

NAV_SELECTORS: Tuple[str, ...] = (
    'nav[data-bi-name="toc"] a[href]',
    'nav[role="navigation"] a[href]',
    "aside a[href]",
)

COUNTRY_TEXT_KEYWORDS: Tuple[str, ...] = (
    "supported countries",
    "supported regions",
    "supported country",
    "countries/regions",
    "country/region",
)
COUNTRY_CONTAINER_KEYWORDS: Tuple[str, ...] = (
    "supported countries",
    "supported regions",
    "country/region",
)
CONTAINER_TAGS: Tuple[str, ...] = ("section", "table", "div")
DEFAULT_SCHEMES: Tuple[str, ...] = ("https",)


def _href(anchor: Tag) -> str:
    value = anchor.get("href")
    return value.strip() if isinstance(value, str) else ""


def is_supported_country_link(anchor: Tag) -> bool:
    """True if *anchor* belongs to a "supported countries/regions" link cluster."""
    text = anchor.get_text().strip().lower()
    href = _href(anchor).lower()

    if any(keyword in text for keyword in COUNTRY_TEXT_KEYWORDS):
        return True
    if "country-region" in href or ("availability" in href and "country" in href):
        return True

    parent_text = ParsedPage.enclosing_text(anchor, CONTAINER_TAGS).lower()
    return any(keyword in parent_text for keyword in COUNTRY_CONTAINER_KEYWORDS)


def discover_links(
    page: ParsedPage,
    page_url: str,
    allowed_domain: str,
    allowed_schemes: Sequence[str] = DEFAULT_SCHEMES,
) -> List[str]:
    """
    Collect in-domain navigation links of *page*.

    A link is kept only when its scheme is in *allowed_schemes* and its host
    (and port, if any) matches *allowed_domain*, see :func:`same_domain`.

    Returns absolute, deduplicated URLs in discovery order.  They are not
    canonicalized here.
    """
    links: dict[str, None] = {}
    for selector in NAV_SELECTORS:
        for anchor in page.select(selector):
            href = _href(anchor)
            if not href or href.startswith("#"):
                continue
            try:
                absolute = urljoin(page_url, href)
                scheme = urlsplit(absolute).scheme
            except ValueError:
                continue
            if scheme not in allowed_schemes or not same_domain(absolute, allowed_domain):
                continue
            if is_supported_country_link(anchor):
                continue
            links.setdefault(absolute, None)
    return list(links)
