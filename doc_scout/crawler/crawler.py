# === FILE: doc_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import enum
import logging
import time
from typing import Iterable, List, Optional

from doc_scout.config import CrawlerConfig
from doc_scout.crawler.fetcher import Fetcher, PageFetcher, build_fetcher
from doc_scout.crawler.frontier import Frontier
from doc_scout.crawler.link_extractor import discover_links
from doc_scout.crawler.models import FetchFailure, PageData, PageRecord, ResultSet
from doc_scout.crawler.urls import canonicalize
from doc_scout.parser.html_parser import parse_html
from doc_scout.parser.metadata import extract_last_updated_with_source, extract_title

__all__ = ("CrawlState", "CrawlSession")


class CrawlState(enum.Enum):
    RUNNING = "running"
    DONE = "done"


class CrawlSession:
    """
    One crawl invocation: its own frontier and results, fetched strictly one
    page at a time in breadth-first (FIFO) order.

    Seed URLs are canonicalized on construction; the ones that are not valid
    absolute URLs are dropped with a warning.  Pass *fetcher* to crawl without
    the network; otherwise an aiohttp session is opened for the run.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        seeds: Iterable[str],
        fetcher: Optional[PageFetcher] = None,
    ) -> None:
        self.config = config
        self.logger = logging.getLogger("DocScout")
        self.frontier = Frontier()
        self.results = ResultSet()
        self.failures: List[FetchFailure] = []
        self._fetcher = fetcher
        self._started = False

        canonical: List[str] = []
        for raw in seeds:
            url = canonicalize(raw)
            if url is None:
                self.logger.warning("Skipping invalid seed URL: %r", raw)
                continue
            canonical.append(url)
        self.frontier.seed(canonical)
        self.state = CrawlState.RUNNING

    async def crawl(self) -> ResultSet:
        if self._started:
            raise RuntimeError("CrawlSession can only be run once")
        self._started = True

        if self._fetcher is not None:
            return await self._loop(self._fetcher)
        async with Fetcher.session_for(self.config) as session:
            return await self._loop(build_fetcher(session, self.config))

    def run(self) -> ResultSet:
        """Blocking variant of :meth:`crawl`."""
        return asyncio.run(self.crawl())

    async def _loop(self, fetcher: PageFetcher) -> ResultSet:
        self.logger.info("Starting full scrape: %d seed URLs", len(self.frontier.seeds))
        start = time.monotonic()
        page_count = 0

        while self.state is CrawlState.RUNNING:
            if self._limit_reached():
                self.logger.info("Page limit %d reached", self.config.max_pages)
                self.state = CrawlState.DONE
                break
            current = self.frontier.dequeue()
            if current is None:
                self.state = CrawlState.DONE
                break

            page_count += 1
            self.logger.info("[%d] Scraping: %s", page_count, current)
            result = await fetcher.fetch(current)
            if isinstance(result, FetchFailure):
                self.logger.warning("%s", result)
                self.failures.append(result)
                continue
            self._process(result)

        duration = time.monotonic() - start
        self.logger.info(
            "Scraping complete in %.2f s. Seed pages: %d, new pages: %d, total: %d, failed: %d",
            duration,
            len(self.results.seed_results),
            len(self.results.discovered_results),
            len(self.results),
            len(self.failures),
        )
        return self.results

    def _process(self, page: PageData) -> PageRecord:
        parsed = parse_html(page)
        title = extract_title(parsed)
        last_updated, strategy = extract_last_updated_with_source(parsed, page.url)
        self.logger.debug("Extracted date for %s -> %s", page.url, last_updated)
        if strategy is not None and strategy.low_confidence:
            self.logger.debug("Date for %s comes from loose text match (%s)", page.url, strategy.name)

        record = PageRecord(title=title, url=page.url, last_updated=last_updated)
        is_seed = self.frontier.is_seed(page.url)
        self.results.add(record, is_seed)
        if is_seed:
            self.logger.info("  Seed page scraped: %s", title)
        else:
            self.logger.info("  New page discovered: %s", title)

        added = 0
        for link in discover_links(
            parsed, page.url, self.config.allowed_domain, self.config.allowed_schemes
        ):
            url = canonicalize(link)
            if url is not None and self.frontier.enqueue_if_new(url):
                added += 1
        if added:
            self.logger.info("  Found %d sidebar links", added)
        return record

    def _limit_reached(self) -> bool:
        return self.config.max_pages is not None and len(self.results) >= self.config.max_pages
