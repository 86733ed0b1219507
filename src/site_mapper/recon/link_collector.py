from __future__ import annotations

from typing import Iterator, Protocol

from bs4 import BeautifulSoup

from ..core.errors import LinkExtractionError


class LinkExtractor(Protocol):
    def extract_hrefs(self, document: str) -> Iterator[str]:
        """Yield raw ``href`` values found in ``document``."""


class SoupLinkExtractor:
    """Pulls anchor hrefs out of an HTML document with BeautifulSoup.

    Values are yielded exactly as written in the markup, without joining or
    normalization, and each call parses the document afresh.
    """

    def __init__(self, parser: str = "html.parser") -> None:
        self.parser = parser

    def extract_hrefs(self, document: str) -> Iterator[str]:
        try:
            soup = BeautifulSoup(document, self.parser)
        except Exception as exc:
            raise LinkExtractionError(f"could not parse document: {exc}") from exc

        for anchor in soup.find_all("a"):
            href = anchor.get("href")
            if isinstance(href, str):
                yield href
