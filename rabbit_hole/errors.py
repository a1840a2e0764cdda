"""Exceptions raised by RabbitHole."""
from __future__ import annotations

__all__ = ("ScraperError", "InvalidArgumentError", "FetchFailedError")


class ScraperError(Exception):
    """Base class for every error raised by the scraper."""


class InvalidArgumentError(ScraperError, ValueError):
    """Blank or unparseable URL passed to a public operation."""


class FetchFailedError(ScraperError):
    """The server answered, but with a non-2xx status."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"Failed to retrieve content from '{url}'. Status code: {status_code}.")
        self.url = url
        self.status_code = status_code
