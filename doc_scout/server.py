# File: doc_scout/server.py
"""doc_scout.server: HTTP-граница на aiohttp.web.

``GET /``: сообщение о готовности; ``GET /scrape-all``: полный обход
и CSV в ответе.  Каждый запрос создаёт собственную CrawlSession.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Optional

from aiohttp import web

from doc_scout.config import CrawlerConfig
from doc_scout.crawler.models import ResultSet
from doc_scout.engine import start_crawl
from doc_scout.logger import logger
from doc_scout.report.csv_report import CSV_CONTENT_TYPE, report_filename, to_csv

__all__ = ["create_app", "serve", "READY_MESSAGE"]

READY_MESSAGE = "DocScout is running. Use /scrape-all to start scraping."

CrawlRunner = Callable[[CrawlerConfig], Awaitable[ResultSet]]

CONFIG_KEY = web.AppKey("config", CrawlerConfig)
RUNNER_KEY = web.AppKey("crawl_runner", object)


async def handle_index(_: web.Request) -> web.Response:
    return web.Response(text=READY_MESSAGE)


async def handle_scrape_all(request: web.Request) -> web.Response:
    config = request.app[CONFIG_KEY]
    runner: CrawlRunner = request.app[RUNNER_KEY]  # type: ignore[assignment]
    try:
        result = await runner(config)
    except Exception as exc:
        logger.exception("Scraping error: %s", exc)
        return web.Response(status=500, text=f"Scraping failed: {exc}")

    return web.Response(
        body=to_csv(result).encode("utf-8"),
        headers={
            "Content-Type": CSV_CONTENT_TYPE,
            "Content-Disposition": f'attachment; filename="{report_filename()}"',
        },
    )


def create_app(config: CrawlerConfig, crawl_runner: Optional[CrawlRunner] = None) -> web.Application:
    """Собирает приложение; *crawl_runner* подменяется в тестах."""
    app = web.Application()
    app[CONFIG_KEY] = config
    app[RUNNER_KEY] = crawl_runner or start_crawl
    app.router.add_get("/", handle_index)
    app.router.add_get("/scrape-all", handle_scrape_all)
    return app


def serve(config: CrawlerConfig) -> None:
    """Запускает сервер и блокирует до остановки (Ctrl+C)."""
    logger.info("Server running at http://%s:%d", config.host, config.port)
    web.run_app(create_app(config), host=config.host, port=config.port, print=None)
