"""
Fetcher module: single HTTP GET over a shared aiohttp session.

No retries, no rate limiting: callers decide what a failed fetch means.
"""
from __future__ import annotations

from aiohttp import ClientSession

from rabbit_hole.crawler.models import FetchResult
from rabbit_hole.logger import get_logger

HTML_MEDIA_TYPE = "text/html"


class Fetcher:
    """Fetches URLs through a long-lived :class:`aiohttp.ClientSession`.

    The session is borrowed, never closed here; whoever created it owns it.
    Timeouts come from the session's ``ClientTimeout``.
    """

    def __init__(self, session: ClientSession) -> None:
        self.session = session
        self.logger = get_logger("fetcher")

    async def fetch(self, url: str) -> FetchResult:
        """
        GET *url* and return its status, media type and (HTML only) body.

        Transport errors (``aiohttp.ClientError``, ``asyncio.TimeoutError``)
        propagate to the caller.
        """
        async with self.session.get(url, raise_for_status=False) as resp:
            # aiohttp lowercases the media type; the charset parameter is kept apart
            media_type = resp.content_type if "Content-Type" in resp.headers else ""
            body = b""
            if 200 <= resp.status < 300 and media_type == HTML_MEDIA_TYPE:
                body = await resp.read()
            self.logger.debug("GET %s -> %s %s (%d bytes)", url, resp.status, media_type or "-", len(body))
            return FetchResult(
                url=url, status=resp.status, media_type=media_type, body=body, encoding=resp.charset
            )


__all__ = ("Fetcher", "HTML_MEDIA_TYPE")
