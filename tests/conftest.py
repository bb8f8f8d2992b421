# File: tests/conftest.py
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Dict, List, Union

import pytest
from aiohttp import web

from doc_scout.config import CrawlerConfig
from doc_scout.crawler.models import FetchFailure, PageData
from doc_scout.logger import LOGGER_NAME

DOCS = "https://learn.microsoft.com"


class FakeFetcher:
    """
    In-memory fetcher: maps URL -> HTML, HTTP status (int) or an exception message.
    Records every call so tests can check at-most-once fetching.
    """

    def __init__(self, pages: Dict[str, Union[str, int, Exception]]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str):
        self.calls.append(url)
        page = self.pages.get(url, 404)
        if isinstance(page, Exception):
            return FetchFailure(url, "network-error", detail=str(page))
        if isinstance(page, int):
            return FetchFailure(url, "non-success-status", status=page)
        return PageData(url, page)


def doc_page(
    title: str = "",
    *,
    sidebar: str = "",
    body: str = "",
    head_title: str = "",
) -> str:
    """Minimal documentation page: optional <title>, <aside> sidebar and <main>."""
    heading = f"<h1>{title}</h1>" if title else ""
    return (
        f"<html><head><title>{head_title}</title></head><body>"
        f"<aside><ul>{sidebar}</ul></aside>"
        f"<main>{heading}{body}</main>"
        "</body></html>"
    )


@pytest.fixture()
def crawl_config() -> CrawlerConfig:
    """Config for crawls against learn.microsoft.com with a fake fetcher."""
    return CrawlerConfig(allowed_domain="learn.microsoft.com", timeout=2.0)


@pytest.fixture()
def doc_scout_logs(caplog, monkeypatch):
    """caplog that also sees records of the non-propagating project logger."""
    monkeypatch.setattr(logging.getLogger(LOGGER_NAME), "propagate", True)
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    return caplog


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()
