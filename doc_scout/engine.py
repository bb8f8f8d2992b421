# File: doc_scout/engine.py
"""doc_scout.engine: Orchestration layer для запуска обхода из CLI, HTTP-сервера и тестов."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Union

from doc_scout.config import CrawlerConfig
from doc_scout.crawler.crawler import CrawlSession
from doc_scout.crawler.models import ResultSet
from doc_scout.logger import logger
from doc_scout.seeds import load_seeds

__all__ = ["Engine", "start_crawl"]


async def start_crawl(
    cfg: CrawlerConfig, seeds_path: Union[str, Path, None] = None
) -> ResultSet:
    """
    Загружает seed-файл и выполняет полный обход в новой CrawlSession.

    Parameters
    ----------
    cfg : CrawlerConfig
        Конфигурация обхода.
    seeds_path : str | Path | None
        Путь к seed-файлу; по умолчанию ``cfg.seeds_file``.

    Returns
    -------
    ResultSet
        Записи: сначала стартовые страницы, затем найденные.

    Raises
    ------
    SeedInputError
        Seed-файл отсутствует; ни одного запроса не выполняется.
    """
    seeds = load_seeds(seeds_path or cfg.seeds_file)
    session = CrawlSession(cfg, seeds)
    return await session.crawl()


class Engine:
    """Блокирующий запуск обхода для CLI."""

    def __init__(self, config: CrawlerConfig) -> None:
        self.config = config

    def run(self, seeds_path: Union[str, Path, None] = None) -> ResultSet:
        """Запускает обход и блокирует до его завершения."""
        logger.info("Starting crawl…")
        try:
            return asyncio.run(start_crawl(self.config, seeds_path))
        except Exception as exc:
            logger.error("Crawl failed: %s", exc)
            raise
