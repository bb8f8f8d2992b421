# doc_scout/crawler/frontier.py
"""
Crawl frontier: seed set, visited set, queued set and the FIFO work queue.
"""
from __future__ import annotations

from collections import deque
from typing import AbstractSet, Deque, FrozenSet, Iterable, Optional, Set


class Frontier:
    """
    Guarantees that every canonical URL is scheduled at most once.

    ``queued`` holds every URL ever enqueued (a superset of ``visited``), so a
    URL discovered from several pages before it is fetched still sits in the
    queue only once.
    """

    def __init__(self) -> None:
        self._seeds: FrozenSet[str] = frozenset()
        self._visited: Set[str] = set()
        self._queued: Set[str] = set()
        self._queue: Deque[str] = deque()

    def seed(self, urls: Iterable[str]) -> None:
        """Schedule canonical seed URLs in input order; duplicates collapse."""
        if self._queued:
            raise RuntimeError("Frontier is already seeded, the seed set is immutable")
        ordered = list(dict.fromkeys(urls))
        self._seeds = frozenset(ordered)
        for url in ordered:
            self.enqueue_if_new(url)

    def dequeue(self) -> Optional[str]:
        """Pop the oldest pending URL and mark it visited; ``None`` when exhausted."""
        if not self._queue:
            return None
        url = self._queue.popleft()
        self._visited.add(url)
        return url

    def enqueue_if_new(self, url: str) -> bool:
        if url in self._queued:
            return False
        self._queued.add(url)
        self._queue.append(url)
        return True

    def is_seed(self, url: str) -> bool:
        return url in self._seeds

    @property
    def seeds(self) -> FrozenSet[str]:
        return self._seeds

    @property
    def visited(self) -> AbstractSet[str]:
        return frozenset(self._visited)

    @property
    def queued(self) -> AbstractSet[str]:
        return frozenset(self._queued)

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)
