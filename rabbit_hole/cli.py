#!/usr/bin/env python3
"""
Точка входа для запуска RabbitHole через командную строку.

Команды:
  links URL     Найти ссылки сайта (BFS) и печатать их по мере обнаружения
  content URL   Извлечь заголовок, метаданные и markdown-текст страницы
  config        Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда links опции:
  --depth INT         Глубина обхода (корень = 1; override depth)

Команда content опции:
  --json PATH         Сохранить JSON-отчёт в файл
  --markdown PATH     Сохранить markdown-архив страницы
  --template DIR      Папка с Jinja2-шаблоном page.md.j2
  --pretty            Преформатировать JSON-вывод (отступ 2)

Пример:
  rabbit-hole links https://example.com --depth 3
  rabbit-hole content https://example.com/docs --markdown docs.md
"""
import asyncio
import json
import sys
from pathlib import Path

import click
from aiohttp import ClientError

from rabbit_hole import __version__
from rabbit_hole.config import load_config
from rabbit_hole.engine import scrape_page, stream_links
from rabbit_hole.errors import ScraperError
from rabbit_hole.logger import init_logging
from rabbit_hole.report.json_report import details_to_data, render_json
from rabbit_hole.report.markdown_report import render_markdown

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='RabbitHole, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
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
    default='%(asctime)s %(levelname)s %(name)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд RabbitHole CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('links', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option(
    '--depth', '-d', 'depth',
    type=click.IntRange(min=0),
    default=None,
    help='Глубина обхода (корень = 1)'
)
@click.pass_context
def links(ctx, url, depth):
    """Найти ссылки сайта и печатать их по мере обнаружения."""
    cfg = ctx.obj['config']
    try:
        asyncio.run(stream_links(cfg, url, depth, on_link=click.echo))
    except ScraperError as e:
        print_error(f'Ошибка: {e}')
    except KeyboardInterrupt:
        print_error('Обход прерван')


@cli.command('content', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--markdown', '-m', 'markdown_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить markdown-архив страницы'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном page.md.j2'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.pass_context
def content(ctx, url, json_output, markdown_output, template_dir, pretty):
    """Извлечь метаданные и markdown-текст страницы."""
    cfg = ctx.obj['config']
    try:
        details = asyncio.run(scrape_page(cfg, url))
    except ScraperError as e:
        print_error(f'Ошибка: {e}')
    except (ClientError, asyncio.TimeoutError) as e:
        print_error(f'Ошибка сети: {e!r}')

    # Если не сохраняем в файл — печатаем в stdout
    if not json_output and not markdown_output:
        indent = 2 if pretty else None
        click.echo(json.dumps(details_to_data(details), ensure_ascii=False, indent=indent))
        return

    if json_output:
        try:
            saved_json = render_json(details, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if markdown_output:
        try:
            saved_md = render_markdown(details, template_dir, markdown_output)
            click.echo(f'Markdown report: {saved_md}')
        except Exception as e:
            print_error(f'Ошибка при сохранении markdown: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    data = cfg.model_dump(mode='json')
    data['ignored_extensions'] = sorted(data['ignored_extensions'])
    click.echo(json.dumps(data, ensure_ascii=False, indent=2))


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
