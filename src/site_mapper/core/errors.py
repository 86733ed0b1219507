"""Exception hierarchy shared by the crawler and the sitemap writer."""

from __future__ import annotations


class SiteMapperError(RuntimeError):
    """Base class for every error raised by the package."""


class ConfigurationError(SiteMapperError, ValueError):
    """Raised when CLI or environment options cannot be used."""


class FetchError(SiteMapperError):
    """Raised when a page cannot be retrieved at the transport level."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class LinkExtractionError(SiteMapperError):
    """Raised when a fetched document cannot be parsed for links."""


class SitemapWriteError(SiteMapperError):
    """Raised when the sitemap file cannot be created or written."""
