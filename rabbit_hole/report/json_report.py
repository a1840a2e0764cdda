"""
Генерация JSON-отчёта для проекта RabbitHole.

Сериализация одного или нескольких PageDetails в файл.
"""
from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Iterable, Union

from rabbit_hole.parser.html_parser import PageDetails


def details_to_data(details: Union[PageDetails, Iterable[PageDetails]]) -> Any:
    """PageDetails -> dict, список PageDetails -> список dict."""
    if isinstance(details, PageDetails):
        return asdict(details)
    return [asdict(d) for d in details]


def render_json(details: Union[PageDetails, Iterable[PageDetails]], output_path: Path | str) -> Path:
    """
    Сохраняет details в формате JSON по указанному пути.

    :param details: PageDetails или список PageDetails
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from rabbit_hole.report.json_report import render_json
    report_path = render_json(details, 'reports/page.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(details_to_data(details), f, ensure_ascii=False, indent=2)

    return output
