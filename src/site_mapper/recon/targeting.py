from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OriginFilter:
    """Decides which discovered hrefs belong to the crawled site.

    Membership is a plain string prefix test against the configured base URL:
    relative links, other schemes and case variants never match.
    """

    base_origin: str

    def is_allowed(self, url: str | None) -> bool:
        if not url:
            return False
        return url.startswith(self.base_origin)
