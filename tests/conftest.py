from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Dict, List, Union

import pytest
from aiohttp import web

from rabbit_hole.config import ScraperConfig
from rabbit_hole.crawler.models import FetchResult

PageSpec = Union[str, FetchResult, BaseException]


class FakeFetcher:
    """
    In-memory stand-in for :class:`rabbit_hole.crawler.fetcher.Fetcher`.

    *pages* maps URL → HTML text, a ready FetchResult, or an exception to raise.
    Unknown URLs answer 404. Every requested URL is recorded in ``calls``.
    """

    def __init__(self, pages: Dict[str, PageSpec]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str) -> FetchResult:
        self.calls.append(url)
        page = self.pages.get(url)
        if page is None:
            return FetchResult(url=url, status=404, media_type="text/html")
        if isinstance(page, BaseException):
            raise page
        if isinstance(page, FetchResult):
            return page
        return FetchResult(url=url, status=200, media_type="text/html", body=page.encode("utf-8"))


def anchors(*hrefs: str) -> str:
    """Build an HTML body with one anchor per href."""
    return "<html><body>" + "".join(f'<a href="{h}">{h}</a>' for h in hrefs) + "</body></html>"


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def basic_config() -> ScraperConfig:
    """Return a basic valid ScraperConfig for crawler tests."""
    return ScraperConfig(timeout=2.0, user_agent="TestAgent/1.0")
