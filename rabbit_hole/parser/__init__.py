"""HTML parsing: page metadata and markdown-like content."""
from rabbit_hole.parser.html_parser import PageDetails, parse_page_details, render_content

__all__ = ("PageDetails", "parse_page_details", "render_content")
