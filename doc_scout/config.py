# === FILE: doc_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации краулера DocScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["CrawlerConfig", "load_config", "DEFAULT_CONFIG_PATH"]


class CrawlerConfig(BaseModel):
    """Конфигурация одного запуска обхода документации."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seeds_file: Path = Field(Path("urls.txt"), description="Файл со списком стартовых URL.")
    allowed_domain: str = Field(
        "learn.microsoft.com", min_length=1, description="Единственный разрешённый домен (host или host:port)."
    )
    allowed_schemes: Tuple[str, ...] = Field(
        ("https",), min_length=1, description="Схемы, по которым разрешено переходить по ссылкам."
    )
    user_agent: str = Field("D365-Scraper/1.0", min_length=1, description="Заголовок User-Agent.")
    timeout: float = Field(30.0, gt=0, description="Таймаут на один запрос (секунд).")
    retry_times: int = Field(0, ge=0, description="Число повторных попыток при 5xx/429 и сетевых ошибках.")
    retry_backoff: float = Field(1.0, ge=0, description="Базовая пауза экспоненциального backoff (секунд).")
    max_pages: Optional[int] = Field(None, ge=1, description="Жесткий лимит по числу страниц.")
    host: str = Field("0.0.0.0", description="Адрес HTTP-сервера.")
    port: int = Field(3000, ge=1, le=65535, description="Порт HTTP-сервера.")

    @field_validator("allowed_domain", mode="before")
    def _lower_domain(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("allowed_schemes", mode="before")
    def _lower_schemes(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple)):
            return tuple(s.strip().lower() if isinstance(s, str) else s for s in v)
        return v


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> CrawlerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CrawlerConfig.
    Без пути использует configs/default.yaml, а если его нет, значения по умолчанию.
    Явно указанный, но отсутствующий файл приводит к FileNotFoundError.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return CrawlerConfig()
        path_obj = DEFAULT_CONFIG_PATH
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return CrawlerConfig(**data)
