"""HTML → markdown-like text for RabbitHole.

:func:`parse_page_details` turns raw HTML into :class:`PageDetails`:

* title — text of the first ``<title>``;
* description / keywords — ``content`` of the matching ``<meta name=…>``;
* content — headings, paragraphs and lists of the main container flattened
  to markdown (``#`` headings, ``-`` / ``1.`` list lines, inline
  ``[text](href)`` links and ``![alt](src)`` images).

The container is the first match of the configured CSS selectors
(``article``, ``main``, ``[class*="content"]`` by default) or the whole
document. Whitespace inside every rendered fragment is collapsed to single
spaces; lines end with ``\\n``.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, Tag

from rabbit_hole.config import CONTAINER_SELECTORS

__all__: Sequence[str] = (
    "PageDetails",
    "collapse_whitespace",
    "select_container",
    "render_content",
    "parse_page_details",
    "make_soup",
)

_SPACE_RE = re.compile(r"\s+")
_HEADINGS = ("h1", "h2", "h3", "h4", "h5", "h6")
_BLOCKS = [*_HEADINGS, "p", "ul", "ol"]


@dataclass(frozen=True, slots=True)
class PageDetails:
    """Metadata and markdown-like content of one page.

    ``content`` is ``None`` for non-HTML resources and a (possibly empty)
    string otherwise.
    """

    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    content: Optional[str] = None


def make_soup(markup: Union[str, bytes], encoding: Optional[str] = None) -> BeautifulSoup:
    """Parse *markup*; raw bytes are decoded with *encoding* when the server declared one."""
    if isinstance(markup, bytes) and encoding:
        return BeautifulSoup(markup, "html.parser", from_encoding=encoding)
    return BeautifulSoup(markup, "html.parser")


def collapse_whitespace(text: str) -> str:
    """Trim *text* and squeeze every whitespace run into one space."""
    return _SPACE_RE.sub(" ", text.strip())


def _meta_content(soup: BeautifulSoup, name: str) -> Optional[str]:
    tag = soup.find("meta", attrs={"name": name})
    if not isinstance(tag, Tag):
        return None
    value = tag.get("content", "")
    return str(value).strip()


def select_container(
    soup: BeautifulSoup, selectors: Sequence[str] = CONTAINER_SELECTORS
) -> Union[BeautifulSoup, Tag]:
    """Return the first element matching *selectors* in order, else the document."""
    for selector in selectors:
        node = soup.select_one(selector)
        if node is not None:
            return node
    return soup


def _render_paragraph(node: Tag) -> str:
    parts: list[str] = []
    for child in node.children:
        if isinstance(child, Tag):
            if child.name == "img":
                src = child.get("src", "")
                if src:
                    alt = str(child.get("alt", "")).strip()
                    parts.append(f"![{alt}]({src})\n")
            elif child.name == "a":
                href = child.get("href", "")
                if href:
                    parts.append(f"[{collapse_whitespace(child.get_text())}]({href})")
            else:
                parts.append(collapse_whitespace(child.get_text()))
        elif isinstance(child, NavigableString) and not isinstance(child, Comment):
            parts.append(collapse_whitespace(str(child)))
    return "".join(parts)


def _render_list(node: Tag, ordered: bool) -> list[str]:
    lines = []
    for index, item in enumerate(node.find_all("li"), start=1):
        marker = f"{index}." if ordered else "-"
        lines.append(f"{marker} {collapse_whitespace(item.get_text())}")
    return lines


def render_content(container: Union[BeautifulSoup, Tag]) -> str:
    """Flatten headings, paragraphs and lists under *container* (document order)."""
    lines: list[str] = []
    for node in container.find_all(_BLOCKS):
        name = node.name
        if name in _HEADINGS:
            lines.append(f"{'#' * int(name[1])} {collapse_whitespace(node.get_text())}")
        elif name == "p":
            lines.append(_render_paragraph(node))
        else:
            lines.extend(_render_list(node, ordered=name == "ol"))
    return "".join(f"{line}\n" for line in lines)


def parse_page_details(
    url: str,
    markup: Union[str, bytes],
    selectors: Sequence[str] = CONTAINER_SELECTORS,
    encoding: Optional[str] = None,
) -> PageDetails:
    """Parse an HTML document fetched from *url* into :class:`PageDetails`."""
    soup = make_soup(markup, encoding)

    title_tag = soup.find("title")
    title = title_tag.get_text().strip() if isinstance(title_tag, Tag) else None

    container = select_container(soup, selectors)
    return PageDetails(
        url=url,
        title=title,
        description=_meta_content(soup, "description"),
        keywords=_meta_content(soup, "keywords"),
        content=render_content(container),
    )
