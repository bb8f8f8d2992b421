"""doc_scout.report: CSV, JSON and HTML reports of a crawl, used by the CLI and the HTTP server."""

from __future__ import annotations

from .csv_report import CSV_CONTENT_TYPE, render_csv, report_filename, to_csv
from .html_report import render_html
from .json_report import render_json

__all__ = ["to_csv", "render_csv", "report_filename", "render_json", "render_html", "CSV_CONTENT_TYPE"]
