# doc_scout/report/csv_report.py

"""
Генерация CSV-отчёта для проекта DocScout.

Формат: строка заголовка ``Title,URL,LastUpdated``; каждое поле данных
в двойных кавычках, кавычки внутри удваиваются, строки разделены CRLF.
Сначала идут стартовые страницы, затем найденные.
"""
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterable, Optional, Union

from doc_scout.crawler.models import CSV_HEADER, PageRecord, ResultSet

LINE_SEPARATOR = "\r\n"
CSV_CONTENT_TYPE = "text/csv; charset=utf-8"


def _quote(value: object) -> str:
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def to_csv(rows: Union[ResultSet, Iterable[PageRecord]]) -> str:
    """
    Сериализует записи в CSV-строку (без завершающего перевода строки).

    :param rows: ResultSet или последовательность PageRecord в нужном порядке
    :return: текст CSV
    """
    lines = [",".join(CSV_HEADER)]
    for record in rows:
        lines.append(",".join(_quote(field) for field in record.as_row()))
    return LINE_SEPARATOR.join(lines)


def report_filename(day: Optional[date] = None) -> str:
    """Имя файла для скачивания: ``d365_scrape_YYYY-MM-DD.csv``."""
    day = day or date.today()
    return f"d365_scrape_{day.isoformat()}.csv"


def render_csv(rows: Union[ResultSet, Iterable[PageRecord]], output_path: Union[str, Path]) -> Path:
    """
    Сохраняет CSV-отчёт по указанному пути и возвращает Path сохранённого файла.

    Пример:
    ```python
    from doc_scout.report.csv_report import render_csv
    csv_path = render_csv(result_set, 'reports/d365.csv')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps CRLF as written
    with output.open("w", encoding="utf-8", newline="") as f:
        f.write(to_csv(rows))
    return output
