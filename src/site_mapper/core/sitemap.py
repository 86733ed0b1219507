"""Sitemap document written once the crawl has drained."""

from __future__ import annotations

import os
import tempfile
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

from .errors import SitemapWriteError

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


@dataclass(frozen=True)
class SitemapDocument:
    """Immutable snapshot of the URLs that make up a sitemap."""

    urls: Tuple[str, ...] = ()

    @classmethod
    def from_iterable(cls, urls: Iterable[str]) -> "SitemapDocument":
        return cls(urls=tuple(sorted(set(urls))))

    def __len__(self) -> int:
        return len(self.urls)

    def to_xml(self) -> str:
        root = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)
        for url in self.urls:
            entry = ET.SubElement(root, "url")
            ET.SubElement(entry, "loc").text = url
        ET.indent(root, space="  ")
        return f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}\n"

    def save(self, path: Path) -> None:
        """Atomically replace ``path`` with the encoded document.

        The previous file is left untouched when encoding or writing fails.
        """

        try:
            data = self.to_xml().encode("utf-8")
        except UnicodeError as exc:
            raise SitemapWriteError(f"could not encode sitemap for {path}: {exc}") from exc

        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
            ) as tmp_file:
                tmp_path = Path(tmp_file.name)
                tmp_file.write(data)
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, path)
        except OSError as exc:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise SitemapWriteError(f"could not write sitemap to {path}: {exc}") from exc

    @classmethod
    def load(cls, path: Path) -> "SitemapDocument":
        root = ET.fromstring(path.read_bytes())
        namespaces = {"sitemap": SITEMAP_NAMESPACE}
        locations = root.findall("sitemap:url/sitemap:loc", namespaces)
        return cls(urls=tuple(loc.text for loc in locations if loc.text is not None))
