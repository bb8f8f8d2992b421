# doc_scout/crawler/models.py
"""
Data models for the DocScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Literal, Optional, Tuple

UNKNOWN = "UNKNOWN"
CSV_HEADER: Tuple[str, str, str] = ("Title", "URL", "LastUpdated")

FailureReason = Literal["network-error", "non-success-status"]


@dataclass(slots=True)
class PageData:
    """Holds the canonical URL and decoded HTML of a fetched page."""

    url: str
    content: str


@dataclass(frozen=True, slots=True)
class FetchFailure:
    """Why a URL could not be fetched. Never fatal for the crawl."""

    url: str
    reason: FailureReason
    status: Optional[int] = None
    detail: str = ""

    def __str__(self) -> str:
        if self.reason == "non-success-status":
            return f"HTTP {self.status} for {self.url}"
        return f"Failed to fetch {self.url}: {self.detail or self.reason}"


@dataclass(frozen=True, slots=True)
class PageRecord:
    """One row of the crawl report."""

    title: str
    url: str
    last_updated: str = UNKNOWN

    def as_row(self) -> Tuple[str, str, str]:
        return (self.title, self.url, self.last_updated)

    def as_dict(self) -> dict[str, str]:
        return dict(zip(CSV_HEADER, self.as_row()))


@dataclass(slots=True)
class ResultSet:
    """Records split into seed pages and discovered pages, each in traversal order."""

    seed_results: List[PageRecord] = field(default_factory=list)
    discovered_results: List[PageRecord] = field(default_factory=list)

    def add(self, record: PageRecord, is_seed: bool) -> None:
        if is_seed:
            self.seed_results.append(record)
        else:
            self.discovered_results.append(record)

    def rows(self) -> List[PageRecord]:
        """Seed records first, then discovered ones."""
        return [*self.seed_results, *self.discovered_results]

    def __iter__(self) -> Iterator[PageRecord]:
        return iter(self.rows())

    def __len__(self) -> int:
        return len(self.seed_results) + len(self.discovered_results)
