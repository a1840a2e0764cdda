"""Link discovery: URL normalization, HTTP fetching and the BFS crawler."""
from rabbit_hole.crawler.crawler import LinkCrawler
from rabbit_hole.crawler.fetcher import Fetcher
from rabbit_hole.crawler.link_extractor import extract_links, normalize_link, normalize_root
from rabbit_hole.crawler.models import FetchResult, LinkCandidate

__all__ = (
    "LinkCrawler",
    "Fetcher",
    "FetchResult",
    "LinkCandidate",
    "extract_links",
    "normalize_link",
    "normalize_root",
)
