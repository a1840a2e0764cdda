"""rabbit_hole.scraper: фасад над обходом ссылок и извлечением контента."""

from __future__ import annotations

import asyncio
from typing import AsyncIterator, Optional

from aiohttp import ClientSession, ClientTimeout

from rabbit_hole.config import ScraperConfig
from rabbit_hole.crawler.crawler import LinkCrawler
from rabbit_hole.crawler.fetcher import Fetcher
from rabbit_hole.extractor import ContentExtractor
from rabbit_hole.parser.html_parser import PageDetails

__all__ = ["WebsiteScraper"]


class WebsiteScraper:
    """Crawls a website for in-scope links and extracts readable page content.

    Use as an async context manager. Without an injected *session* one
    :class:`aiohttp.ClientSession` is created on enter and closed on exit; an
    injected session is shared, not closed. Every call owns its own traversal
    state, so one instance may serve concurrent unrelated calls.

    Example::

        async with WebsiteScraper() as scraper:
            async for link in scraper.scrape_links("https://example.com", depth=3):
                print(link)
            details = await scraper.scrape_content("https://example.com")
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        *,
        session: Optional[ClientSession] = None,
        fetcher: Optional[Fetcher] = None,
    ) -> None:
        self.config = config or ScraperConfig()
        self.session = session
        self._owns_session = False
        self._fetcher = fetcher
        if fetcher is None and session is not None:
            self._fetcher = Fetcher(session)

    async def __aenter__(self) -> WebsiteScraper:
        if self._fetcher is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            self._owns_session = True
            self._fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()
        if self._owns_session:
            self.session = None
            self._fetcher = None
            self._owns_session = False

    @property
    def fetcher(self) -> Fetcher:
        if self._fetcher is None:
            raise RuntimeError("Session not initialized; use 'async with WebsiteScraper()'")
        return self._fetcher

    def scrape_links(
        self,
        url: str,
        depth: int = 2,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> AsyncIterator[str]:
        """Async iterator over in-scope URLs; see :meth:`LinkCrawler.discover_links`."""
        return LinkCrawler(self.fetcher, self.config).discover_links(url, depth, cancel_event)

    async def scrape_content(self, url: str) -> PageDetails:
        """PageDetails for *url*; see :meth:`ContentExtractor.extract`."""
        return await ContentExtractor(self.fetcher, self.config).extract(url)
