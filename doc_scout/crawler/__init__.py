"""doc_scout.crawler: crawl engine (URL canonicalization, frontier, fetching, link discovery)."""

from .crawler import CrawlSession, CrawlState
from .frontier import Frontier
from .models import UNKNOWN, FetchFailure, PageData, PageRecord, ResultSet
from .urls import canonicalize

__all__ = [
    "CrawlSession",
    "CrawlState",
    "Frontier",
    "FetchFailure",
    "PageData",
    "PageRecord",
    "ResultSet",
    "UNKNOWN",
    "canonicalize",
]
