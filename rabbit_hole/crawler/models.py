"""
Data models for the RabbitHole crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class LinkCandidate:
    """Queued BFS work item; the root URL has depth 1."""

    url: str
    depth: int


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Status, media type and body of one HTTP response.

    ``body`` is only read for ``text/html`` responses and is empty otherwise;
    ``encoding`` is the charset declared in the ``Content-Type`` header, if any.
    """

    url: str
    status: int
    media_type: str
    body: bytes = b""
    encoding: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def is_html(self) -> bool:
        return self.media_type == "text/html"
