# doc_scout/crawler/fetcher.py
"""
Fetcher module: the network boundary of the crawl.

:class:`Fetcher` performs one GET per call and reports failures as values.
:class:`RetryingFetcher` layers retry/backoff on top of any fetcher.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Protocol, Sequence, Union

from aiohttp import ClientError, ClientSession, ClientTimeout

from doc_scout.config import CrawlerConfig
from doc_scout.crawler.models import FetchFailure, PageData

FetchResult = Union[PageData, FetchFailure]

RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)
MAX_BACKOFF = 60.0


class PageFetcher(Protocol):
    async def fetch(self, url: str) -> FetchResult: ...


class Fetcher:
    """Single GET per URL over a shared aiohttp session."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    @classmethod
    def session_for(cls, config: CrawlerConfig) -> ClientSession:
        """Build the ClientSession a crawl should use; the caller owns and closes it."""
        return ClientSession(
            timeout=ClientTimeout(total=config.timeout),
            headers={"User-Agent": config.user_agent},
            raise_for_status=False,
        )

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch *url*.

        Returns PageData for a 2xx response, FetchFailure otherwise.
        """
        try:
            async with self.session.get(url) as resp:
                if not 200 <= resp.status < 300:
                    return FetchFailure(url, "non-success-status", status=resp.status)
                text = await resp.text(errors="replace")
                return PageData(url, text)
        except asyncio.TimeoutError:
            return FetchFailure(url, "network-error", detail="timed out")
        except ClientError as exc:
            return FetchFailure(url, "network-error", detail=str(exc) or type(exc).__name__)


class RetryingFetcher:
    """Retries network errors and 5xx/429 responses with exponential backoff."""

    def __init__(
        self,
        inner: PageFetcher,
        retry_times: int,
        backoff: float = 1.0,
        retry_status: Sequence[int] = RETRY_STATUS,
    ) -> None:
        self.inner = inner
        self.retry_times = retry_times
        self.backoff = backoff
        self._retry_status = retry_status
        self.logger = logging.getLogger("DocScout")

    def _should_retry(self, result: FetchResult) -> bool:
        if not isinstance(result, FetchFailure):
            return False
        return result.reason == "network-error" or result.status in self._retry_status

    async def fetch(self, url: str) -> FetchResult:
        attempts = 0
        result = await self.inner.fetch(url)
        while self._should_retry(result) and attempts < self.retry_times:
            attempts += 1
            delay = min(self.backoff * 2 ** (attempts - 1), MAX_BACKOFF)
            self.logger.debug("Retry %d/%d for %s after %.2f s", attempts, self.retry_times, url, delay)
            await asyncio.sleep(delay)
            result = await self.inner.fetch(url)
        return result


def build_fetcher(session: ClientSession, config: CrawlerConfig) -> PageFetcher:
    fetcher: PageFetcher = Fetcher(session)
    if config.retry_times:
        fetcher = RetryingFetcher(fetcher, config.retry_times, config.retry_backoff)
    return fetcher


__all__ = ["Fetcher", "RetryingFetcher", "PageFetcher", "FetchResult", "build_fetcher", "RETRY_STATUS"]
