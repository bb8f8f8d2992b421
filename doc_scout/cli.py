# === FILE: doc_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска DocScout через командную строку.

Команды:
  crawl     Выполнить полный обход и вывести/сохранить CSV (и другие отчёты)
  serve     Запустить HTTP-сервер с эндпоинтом /scrape-all
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  --seeds PATH        Seed-файл (override seeds_file)
  --output, -o PATH   Сохранить CSV в файл (stdout, если не указан)
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами
  --limit INT         Макс. число страниц (override max_pages)

Пример:
  doc_scout crawl --seeds urls.txt -o d365.csv --html report.html
"""
import sys
from pathlib import Path

import click

from doc_scout import __version__
from doc_scout.config import load_config
from doc_scout.engine import Engine
from doc_scout.logger import DEFAULT_FORMAT, init_logging
from doc_scout.report.csv_report import render_csv, to_csv
from doc_scout.report.html_report import render_html
from doc_scout.report.json_report import render_json
from doc_scout.server import serve

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='DocScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд DocScout CLI."""
    # stdout is reserved for CSV output
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
        to_stderr=True,
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--seeds', '-s', 'seeds_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Seed-файл со списком URL (override seeds_file)'
)
@click.option(
    '--output', '-o', 'csv_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить CSV в файл'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (по умолчанию из пакета)'
)
@click.option(
    '--limit', '-l', 'limit',
    type=click.IntRange(min=1),
    default=None,
    help='Макс. число страниц (override max_pages)'
)
@click.pass_context
def crawl(ctx, seeds_path, csv_output, json_output, html_output, template_dir, limit):
    """Выполнить обход и сгенерировать отчёты."""
    cfg = ctx.obj['config']
    if limit is not None:
        cfg = cfg.model_copy(update={'max_pages': limit})
    try:
        result = Engine(cfg).run(seeds_path)
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    if not csv_output and not json_output and not html_output:
        click.echo(to_csv(result))
        return

    if csv_output:
        try:
            click.echo(f'CSV report: {render_csv(result, csv_output)}')
        except OSError as e:
            print_error(f'Ошибка при сохранении CSV: {e}')

    if json_output:
        try:
            click.echo(f'JSON report: {render_json(result, json_output)}')
        except (OSError, TypeError) as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            click.echo(f'HTML report: {render_html(result, template_dir, html_output)}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('serve', context_settings=CONTEXT_SETTINGS)
@click.option('--host', default=None, help='Адрес для прослушивания (override host)')
@click.option(
    '--port', '-p', 'port',
    type=click.IntRange(1, 65535),
    default=None,
    envvar='PORT',
    help='Порт HTTP-сервера (override port, env PORT)'
)
@click.pass_context
def serve_command(ctx, host, port):
    """Запустить HTTP-сервер: GET / и GET /scrape-all."""
    cfg = ctx.obj['config']
    overrides = {k: v for k, v in (('host', host), ('port', port)) if v is not None}
    if overrides:
        cfg = cfg.model_copy(update=overrides)
    serve(cfg)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
