"""rabbit_hole.report: сохранение PageDetails в JSON и markdown-архив."""

from rabbit_hole.report.json_report import render_json
from rabbit_hole.report.markdown_report import DEFAULT_TEMPLATE_DIR, render_markdown

__all__ = ["render_json", "render_markdown", "DEFAULT_TEMPLATE_DIR"]
