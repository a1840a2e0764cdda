"""
Корутины-обёртки, которые CLI запускает через asyncio.run.
"""
from __future__ import annotations

from typing import Callable, List, Optional

from rabbit_hole.config import ScraperConfig
from rabbit_hole.parser.html_parser import PageDetails
from rabbit_hole.scraper import WebsiteScraper

__all__ = ["stream_links", "scrape_page"]


async def stream_links(
    cfg: ScraperConfig,
    url: str,
    depth: Optional[int] = None,
    on_link: Optional[Callable[[str], None]] = None,
) -> List[str]:
    """
    Обходит сайт от *url* и возвращает найденные URL в порядке обнаружения.

    Parameters
    ----------
    cfg : ScraperConfig
        Конфигурация HTTP-клиента и обхода.
    depth : int, optional
        Глубина обхода; по умолчанию ``cfg.depth``.
    on_link : callable, optional
        Вызывается для каждого URL сразу после обнаружения.
    """
    links: List[str] = []
    async with WebsiteScraper(cfg) as scraper:
        async for link in scraper.scrape_links(url, cfg.depth if depth is None else depth):
            links.append(link)
            if on_link is not None:
                on_link(link)
    return links


async def scrape_page(cfg: ScraperConfig, url: str) -> PageDetails:
    """Загружает одну страницу и возвращает её PageDetails."""
    async with WebsiteScraper(cfg) as scraper:
        return await scraper.scrape_content(url)
