# === FILE: doc_scout/logger.py ===
"""Project-wide logging configuration for **DocScout**.

Highlights
----------
* Unified format for console and optional file output (with rotation).
* Single, importable instance :data:`logger` – simply::

      from doc_scout.logger import logger
      logger.info("Crawl started")
* Re‑configurable at runtime via :func:`configure`.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

# --------------------------------------------------------------------------- #
# Constants & basic types                                                     #
# --------------------------------------------------------------------------- #

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "DocScout"
# aiohttp.web loggers used by `doc_scout serve`; they share the project handlers.
SERVER_LOGGERS: Final[tuple[str, ...]] = ("aiohttp.access", "aiohttp.server", "aiohttp.web")

_LevelT = Union[int, str]


# --------------------------------------------------------------------------- #
# Helper builders                                                             #
# --------------------------------------------------------------------------- #


def _console_handler(fmt: str, to_stderr: bool) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stderr if to_stderr else sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
    to_stderr: bool = False,
) -> logging.Logger:
    """(Re)configure the project logger and the aiohttp server loggers.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Path to a logfile. *None* → console‑only output.
    log_format
        Format string for :class:`logging.Formatter`.
    replace_handlers
        *True* – remove existing handlers; *False* – just append new one(s).
    to_stderr
        Send console output to stderr, leaving stdout free for CSV output.
    """
    handlers: list[logging.Handler] = [_console_handler(log_format, to_stderr)]
    if log_file is not None:
        handlers.append(_file_handler(log_file, log_format))

    for name in (LOGGER_NAME, *SERVER_LOGGERS):
        lg = logging.getLogger(name)
        lg.setLevel(level)
        if replace_handlers:
            lg.handlers.clear()
        for handler in handlers:
            lg.addHandler(handler)
        lg.propagate = False
    return logging.getLogger(LOGGER_NAME)


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    to_stderr: bool = False,
) -> logging.Logger:
    """Shortcut used by the CLI: replace handlers and apply *level*."""
    return configure(
        level=level,
        log_file=log_file,
        log_format=log_format,
        replace_handlers=True,
        to_stderr=to_stderr,
    )


# --------------------------------------------------------------------------- #
# Ready‑to‑use instance                                                       #
# --------------------------------------------------------------------------- #

logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "LOGGER_NAME", "SERVER_LOGGERS", "DEFAULT_FORMAT"]
