"""Crawling primitives: shared state, fetching, link extraction."""

from .crawler import Crawler
from .fetcher import Fetcher, FetchResponse, HttpFetcher
from .link_collector import LinkExtractor, SoupLinkExtractor
from .state import Admission, CrawlState
from .targeting import OriginFilter

__all__ = [
    "Admission",
    "Crawler",
    "CrawlState",
    "FetchResponse",
    "Fetcher",
    "HttpFetcher",
    "LinkExtractor",
    "OriginFilter",
    "SoupLinkExtractor",
]
