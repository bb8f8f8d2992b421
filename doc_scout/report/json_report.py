# doc_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта DocScout.

Сериализация ResultSet в файл.
"""
import json
from pathlib import Path
from typing import Any

from doc_scout.crawler.models import ResultSet


def report_data(result: ResultSet) -> dict[str, Any]:
    """Словарь с разбивкой на стартовые и найденные страницы."""
    return {
        "seed_pages": [r.as_dict() for r in result.seed_results],
        "discovered_pages": [r.as_dict() for r in result.discovered_results],
        "total": len(result),
    }


def render_json(result: ResultSet, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт в формате JSON по указанному пути.

    :param result: ResultSet с записями обхода
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 пробела
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open("w", encoding="utf-8") as f:
        json.dump(report_data(result), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
