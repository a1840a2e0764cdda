"""rabbit_hole.report.markdown_report: markdown-архив страницы с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from rabbit_hole.parser.html_parser import PageDetails

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_NAME = "page.md.j2"


def render_markdown(
    details: PageDetails,
    template_dir: Union[Path, str, None],
    output_path: Union[Path, str],
) -> Path:
    """Рендерит markdown-документ из шаблона и сохраняет его по указанному пути.

    Args:
        details: результат извлечения контента.
        template_dir: директория с шаблоном ``page.md.j2``; None — встроенный шаблон.
        output_path: путь к итоговому .md файлу.

    Returns:
        Path до сохранённого файла.
    """
    template_dir = Path(template_dir) if template_dir is not None else DEFAULT_TEMPLATE_DIR
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        keep_trailing_newline=True,
    )
    template = env.get_template(TEMPLATE_NAME)

    text = template.render(
        url=details.url,
        title=details.title,
        description=details.description,
        keywords=details.keywords,
        content=details.content,
    )
    output_path.write_text(text, encoding="utf-8")

    return output_path
