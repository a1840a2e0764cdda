from __future__ import annotations

import asyncio
import time
from collections import deque
from typing import AsyncIterator, Deque, Optional, Set

from aiohttp import ClientError

from rabbit_hole.config import ScraperConfig
from rabbit_hole.crawler.fetcher import Fetcher
from rabbit_hole.crawler.link_extractor import extract_links, normalize_root
from rabbit_hole.crawler.models import LinkCandidate
from rabbit_hole.logger import get_logger

__all__ = ("LinkCrawler",)


class LinkCrawler:
    """Breadth-first discovery of in-scope links, one page in flight at a time.

    Discovery is best-effort: a page that cannot be fetched, is not HTML or
    answers with a non-2xx status is skipped without aborting the crawl.
    """

    def __init__(self, fetcher: Fetcher, config: Optional[ScraperConfig] = None) -> None:
        self.fetcher = fetcher
        self.config = config or ScraperConfig()
        self.logger = get_logger("crawler")

    def discover_links(
        self,
        url: str,
        depth: int = 2,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> AsyncIterator[str]:
        """
        Validate *url* and return an async iterator over discovered URLs.

        The normalized root comes first; every other URL is yielded as soon as
        it is found. The root is depth 1, so ``depth < 2`` yields only the root
        and ``depth == 2`` fetches the root without following its links.

        Raises InvalidArgumentError immediately for a blank or relative URL.
        """
        root = normalize_root(url)
        return self._walk(root, depth, cancel_event)

    async def _walk(
        self,
        root: str,
        depth: int,
        cancel_event: Optional[asyncio.Event],
    ) -> AsyncIterator[str]:
        yield root
        if depth < 2:
            return

        self.logger.info("Старт обхода: %s (depth=%d)", root, depth)
        start = time.monotonic()
        visited: Set[str] = {root}
        queue: Deque[LinkCandidate] = deque([LinkCandidate(root, 1)])

        while queue:
            if cancel_event is not None and cancel_event.is_set():
                self.logger.info("Обход %s отменён, найдено %d URL", root, len(visited))
                return

            candidate = queue.popleft()
            links = await self._links_of(candidate, root)
            for link in links:
                if link in visited:
                    continue
                visited.add(link)
                yield link
                if candidate.depth + 1 < depth:
                    queue.append(LinkCandidate(link, candidate.depth + 1))

        self.logger.info("Завершено: %d URL за %.2f с", len(visited), time.monotonic() - start)

    async def _links_of(self, candidate: LinkCandidate, root: str) -> list[str]:
        """Fetch one candidate and return its normalized links, or ``[]`` on any failure."""
        try:
            page = await self.fetcher.fetch(candidate.url)
        except (ClientError, asyncio.TimeoutError, ValueError) as e:
            self.logger.debug("Skip %s: %s", candidate.url, e)
            return []
        if not page.ok or not page.is_html:
            self.logger.debug("Skip %s: HTTP %s, %s", candidate.url, page.status, page.media_type or "no media type")
            return []
        try:
            return extract_links(page.body, root, self.config.ignored_extensions, page.encoding)
        except Exception as e:  # malformed markup skips the page
            self.logger.debug("Skip %s: parse error %s", candidate.url, e)
            return []
