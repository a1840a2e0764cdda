"""rabbit_hole.extractor: загрузка одной страницы и построение PageDetails."""

from __future__ import annotations

from typing import Optional

from rabbit_hole.config import ScraperConfig
from rabbit_hole.crawler.fetcher import Fetcher
from rabbit_hole.crawler.link_extractor import normalize_root
from rabbit_hole.errors import FetchFailedError
from rabbit_hole.logger import get_logger
from rabbit_hole.parser.html_parser import PageDetails, parse_page_details

__all__ = ["ContentExtractor"]


class ContentExtractor:
    """Извлекает метаданные и markdown-текст страницы.

    В отличие от обхода ссылок, ошибки здесь не подавляются: неверный URL —
    InvalidArgumentError, ответ не 2xx — FetchFailedError, сетевые ошибки
    aiohttp пробрасываются как есть.
    """

    def __init__(self, fetcher: Fetcher, config: Optional[ScraperConfig] = None) -> None:
        self.fetcher = fetcher
        self.config = config or ScraperConfig()
        self.logger = get_logger("extractor")

    async def extract(self, url: str) -> PageDetails:
        """Загружает *url* и возвращает PageDetails; для не-HTML ответа все поля кроме url равны None."""
        normalize_root(url)
        page = await self.fetcher.fetch(url.strip())
        if not page.ok:
            raise FetchFailedError(url, page.status)
        if not page.is_html:
            self.logger.debug("Not HTML (%s): %s", page.media_type or "no media type", url)
            return PageDetails(url=url)
        details = parse_page_details(url, page.body, self.config.container_selectors, page.encoding)
        self.logger.info("Extracted %s: %d chars", url, len(details.content or ""))
        return details
