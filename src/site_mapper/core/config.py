"""Configuration loading utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_MAX_LINKS = 100
DEFAULT_MAX_WORKERS = 15
DEFAULT_OUTPUT_NAME = "sitemap.xml"


@dataclass(slots=True)
class CrawlConfig:
    """Holds runtime options for a single crawl."""

    target_url: str
    max_links: int = DEFAULT_MAX_LINKS
    output_path: Path = Path(DEFAULT_OUTPUT_NAME)
    max_workers: int = DEFAULT_MAX_WORKERS
    request_timeout: Optional[float] = None
    user_agent: Optional[str] = None

    @property
    def base_origin(self) -> str:
        return self.target_url


def _int_setting(name: str, explicit: Optional[int], default: int) -> int:
    if explicit is not None:
        return explicit
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _timeout_setting(explicit: Optional[float]) -> Optional[float]:
    if explicit is not None:
        return explicit
    raw = os.getenv("SITEMAP_REQUEST_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"SITEMAP_REQUEST_TIMEOUT must be a number, got {raw!r}"
        ) from exc


def load_configuration(
    target_url: str,
    output_name: str = DEFAULT_OUTPUT_NAME,
    *,
    max_links: Optional[int] = None,
    max_workers: Optional[int] = None,
    request_timeout: Optional[float] = None,
) -> CrawlConfig:
    """Builds a ``CrawlConfig`` from CLI input and environment variables."""

    load_dotenv()  # Loads .env values if present

    if not target_url:
        raise ConfigurationError("a target URL is required")

    links = _int_setting("SITEMAP_MAX_LINKS", max_links, DEFAULT_MAX_LINKS)
    workers = _int_setting("SITEMAP_WORKERS", max_workers, DEFAULT_MAX_WORKERS)
    timeout = _timeout_setting(request_timeout)

    if links < 0:
        raise ConfigurationError("the link budget cannot be negative")
    if workers < 1:
        raise ConfigurationError("at least one worker is required")
    if timeout is not None and timeout <= 0:
        raise ConfigurationError("the request timeout must be positive")

    return CrawlConfig(
        target_url=target_url,
        max_links=links,
        output_path=Path(output_name).resolve(),
        max_workers=workers,
        request_timeout=timeout,
        user_agent=os.getenv("SITEMAP_USER_AGENT") or None,
    )
