# File: doc_scout/seeds.py
"""doc_scout.seeds: загрузка списка стартовых URL."""

from __future__ import annotations

import errno
import os
import re
from pathlib import Path
from typing import List, Union

from doc_scout.logger import logger
from doc_scout.parser.sitemap_parser import parse_sitemap

__all__ = ["SeedInputError", "load_seeds", "parse_seed_list"]

_LINE_SPLIT_RE = re.compile(r"\r?\n")


class SeedInputError(FileNotFoundError):
    """Seed list is missing; the crawl must not start."""


def parse_seed_list(text: str) -> List[str]:
    """Одна URL на строку; пробелы по краям обрезаются, пустые строки пропускаются."""
    return [line.strip() for line in _LINE_SPLIT_RE.split(text) if line.strip()]


def load_seeds(path: Union[str, Path]) -> List[str]:
    """Читает seed-файл (текстовый список или sitemap *.xml) и возвращает сырые URL.

    Raises:
        SeedInputError: файл не найден.
    """
    p = Path(path).expanduser()
    if not p.is_file():
        logger.error("Seed list not found: %s", p)
        raise SeedInputError(
            errno.ENOENT, f"{os.strerror(errno.ENOENT)}: seed list {p.name} not found", str(p)
        )
    text = p.read_text(encoding="utf-8")
    urls = parse_sitemap(text) if p.suffix.lower() == ".xml" else parse_seed_list(text)
    logger.info("Loaded %d seed URLs from %s", len(urls), p)
    return urls
