"""
RabbitHole package initializer.
Defines package version and exposes the scraper API.
"""
__version__ = "0.1.0"

from rabbit_hole.config import ScraperConfig, load_config
from rabbit_hole.errors import FetchFailedError, InvalidArgumentError, ScraperError
from rabbit_hole.parser.html_parser import PageDetails
from rabbit_hole.scraper import WebsiteScraper

__all__ = [
    "__version__",
    "WebsiteScraper",
    "PageDetails",
    "ScraperConfig",
    "load_config",
    "ScraperError",
    "InvalidArgumentError",
    "FetchFailedError",
]
