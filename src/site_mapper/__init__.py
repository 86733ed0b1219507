"""Bounded, concurrent same-origin crawler that emits a sitemap."""

from .core.config import CrawlConfig, load_configuration
from .core.sitemap import SitemapDocument
from .recon.crawler import Crawler

__all__ = ["CrawlConfig", "Crawler", "SitemapDocument", "load_configuration"]
