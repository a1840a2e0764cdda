"""
Link extraction and URL normalization utilities for RabbitHole.

Normalized URLs are trimmed and lowercased; discovered links additionally lose
their query string and fragment. Scope is a literal prefix test against the
normalized root, so ``/docs`` and ``/docs-old`` are both in scope of ``/docs``.
"""
from __future__ import annotations

import posixpath
from typing import AbstractSet, List, Optional, Union
from urllib.parse import urlsplit

from bs4.element import Tag

from rabbit_hole.config import IGNORED_EXTENSIONS
from rabbit_hole.errors import InvalidArgumentError
from rabbit_hole.parser.html_parser import make_soup

_SKIPPED_PREFIXES = ("#", "mailto:", "tel:")


def normalize_root(url: Optional[str]) -> str:
    """
    Validate a root URL and return it trimmed and lowercased.

    Raises InvalidArgumentError for blank input or a non-absolute URL.
    """
    if url is None or not url.strip():
        raise InvalidArgumentError("URL cannot be blank.")
    root = url.strip().lower()
    try:
        parsed = urlsplit(root)
    except ValueError as exc:
        raise InvalidArgumentError(f"The provided URL is invalid: {url!r}") from exc
    if not parsed.scheme or not parsed.netloc:
        raise InvalidArgumentError(f"The provided URL is invalid: {url!r}")
    return root


def link_extension(link: str) -> str:
    """Return the lowercase extension of the last path segment, or ``""``."""
    try:
        path = urlsplit(link).path
    except ValueError:
        path = link
    return posixpath.splitext(path)[1].lower()


def _host(netloc: str) -> str:
    """Host part of *netloc* without userinfo and port; IPv6 keeps its brackets."""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        return host[: host.find("]") + 1] or host
    return host.partition(":")[0]


def _cut(url: str, marker: str) -> str:
    index = url.find(marker)
    return url[:index] if index > 0 else url


def normalize_link(
    href: str,
    root_url: str,
    ignored_extensions: AbstractSet[str] = IGNORED_EXTENSIONS,
) -> Optional[str]:
    """
    Normalize *href* found on a page below *root_url*.

    Returns the fully-qualified, in-scope URL or ``None`` when the link must be
    skipped. *root_url* is expected to come from :func:`normalize_root`.
    """
    link = href.strip().lower()
    if not link or link == "/" or link.startswith(_SKIPPED_PREFIXES):
        return None

    if link_extension(link) in ignored_extensions:
        return None

    if link.startswith("/"):
        # scheme and host only: a non-default port on the root is dropped
        root = urlsplit(root_url)
        link = f"{root.scheme}://{_host(root.netloc)}{link}"

    if not link.startswith(root_url):
        return None

    return _cut(_cut(link, "?"), "#")


def extract_links(
    markup: Union[str, bytes],
    root_url: str,
    ignored_extensions: AbstractSet[str] = IGNORED_EXTENSIONS,
    encoding: Optional[str] = None,
) -> List[str]:
    """
    Extract normalized in-scope links from an HTML document, in document order.

    Duplicates are kept; de-duplication is up to the caller.
    """
    soup = make_soup(markup, encoding)
    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        link = normalize_link(href_val, root_url, ignored_extensions)
        if link is not None:
            links.append(link)
    return links


__all__ = ("normalize_root", "normalize_link", "link_extension", "extract_links")
