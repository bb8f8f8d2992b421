# File: doc_scout/parser/metadata.py
"""doc_scout.parser.metadata: title and "last updated" extraction from documentation pages.

Pages are inconsistent in markup, so both values come from ordered fallback
chains.  The date chain is a list of strategy objects; the first one that
returns a value wins.
"""
from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional, Sequence, Tuple

from doc_scout.crawler.models import UNKNOWN
from doc_scout.parser.html_parser import ParsedPage

__all__ = (
    "DateStrategy",
    "LocalTimeText",
    "LocalTimeAttribute",
    "LastUpdatedLabel",
    "LooseDate",
    "DATE_STRATEGIES",
    "TITLE_SELECTORS",
    "extract_title",
    "extract_last_updated",
    "extract_last_updated_with_source",
    "format_us_date",
)

logger = logging.getLogger("DocScout")

TITLE_SELECTORS: Tuple[str, ...] = ("main h1", "h1", "title")

LOCAL_TIME_SELECTOR = "local-time[datetime]"
LABEL_CONTAINERS: Tuple[str, ...] = (
    ".content-footer p",
    ".content-footer",
    ".main p",
    "main",
    "article",
    "header",
)

_NUMERIC_DATE_RE = re.compile(r"^\d{2}/\d{2}/\d{4}$")
_LABEL_RE = re.compile(r"Last\s*updated[:\s]*([A-Za-z]+\s+\d{1,2},\s+\d{4})", re.IGNORECASE)
_LOOSE_RE = re.compile(r"\b([A-Za-z]+\s+\d{1,2},\s+\d{4})\b")


def extract_title(page: ParsedPage) -> str:
    """Main-content h1, then any h1, then <title>; empty string if all are blank."""
    for selector in TITLE_SELECTORS:
        text = page.first_text(selector)
        if text:
            return text
    return ""


def format_us_date(value: datetime) -> str:
    """``M/D/YYYY`` without zero padding, e.g. ``3/15/2024``."""
    return f"{value.month}/{value.day}/{value.year}"


def _parse_datetime(raw: str) -> Optional[datetime]:
    """ISO-8601 first, then RFC 2822/1123 (``Fri, 15 Mar 2024 00:00:00 GMT``)."""
    raw = raw.strip()
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(raw)
        except (TypeError, ValueError):
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class DateStrategy:
    """One step of the date fallback chain."""

    name = "base"
    low_confidence = False

    def attempt(self, page: ParsedPage) -> Optional[str]:  # pragma: no cover - interface
        raise NotImplementedError


class LocalTimeText(DateStrategy):
    """Visible text of <local-time datetime=...> when it is already MM/DD/YYYY."""

    name = "local-time-text"

    def attempt(self, page: ParsedPage) -> Optional[str]:
        element = page.select_one(LOCAL_TIME_SELECTOR)
        if element is None:
            return None
        text = element.get_text().strip()
        return text if _NUMERIC_DATE_RE.match(text) else None


class LocalTimeAttribute(DateStrategy):
    """The ``datetime`` attribute of <local-time>, rendered as a US date in UTC."""

    name = "local-time-attribute"

    def attempt(self, page: ParsedPage) -> Optional[str]:
        raw = page.attr_of(LOCAL_TIME_SELECTOR, "datetime")
        if not raw:
            return None
        parsed = _parse_datetime(raw)
        return format_us_date(parsed) if parsed else None


class LastUpdatedLabel(DateStrategy):
    """``Last updated: <Month D, YYYY>`` inside the usual footer/content containers."""

    name = "last-updated-label"

    def __init__(self, containers: Sequence[str] = LABEL_CONTAINERS) -> None:
        self.containers = tuple(containers)

    def attempt(self, page: ParsedPage) -> Optional[str]:
        for selector in self.containers:
            match = _LABEL_RE.search(page.text_of(selector))
            if match:
                return match.group(1).strip()
        return None


class LooseDate(DateStrategy):
    """First ``<Month D, YYYY>`` anywhere in the page; may pick an unrelated date."""

    name = "loose-date"
    low_confidence = True

    def attempt(self, page: ParsedPage) -> Optional[str]:
        match = _LOOSE_RE.search(page.visible_text())
        return match.group(1).strip() if match else None


DATE_STRATEGIES: Tuple[DateStrategy, ...] = (
    LocalTimeText(),
    LocalTimeAttribute(),
    LastUpdatedLabel(),
    LooseDate(),
)


def extract_last_updated_with_source(
    page: ParsedPage,
    url: str = "",
    strategies: Sequence[DateStrategy] = DATE_STRATEGIES,
) -> Tuple[str, Optional[DateStrategy]]:
    """Run the chain and return ``(value, strategy)``; ``(UNKNOWN, None)`` when nothing matched."""
    for strategy in strategies:
        value = strategy.attempt(page)
        if value:
            return value, strategy
    logger.warning("No Last Updated date found for: %s", url or page.url)
    return UNKNOWN, None


def extract_last_updated(page: ParsedPage, url: str = "") -> str:
    return extract_last_updated_with_source(page, url)[0]
