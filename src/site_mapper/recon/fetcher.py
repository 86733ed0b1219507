"""HTTP transport used by the crawler workers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

import requests

from ..core.errors import FetchError

SUCCESS_STATUS = 200


@dataclass(frozen=True, slots=True)
class FetchResponse:
    """Status and decoded body of a fetched page."""

    url: str
    status_code: int
    text: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code == SUCCESS_STATUS


class Fetcher(Protocol):
    def fetch(self, url: str) -> FetchResponse:
        """Return the response for ``url`` or raise :class:`FetchError`."""


class HttpFetcher:
    """``requests`` backed fetcher sharing one session across workers."""

    def __init__(
        self,
        *,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    def fetch(self, url: str) -> FetchResponse:
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(url, str(exc)) from exc

        if response.status_code != SUCCESS_STATUS:
            return FetchResponse(url=url, status_code=response.status_code)
        return FetchResponse(url=url, status_code=response.status_code, text=response.text)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpFetcher":
        return self

    def __exit__(self, *_exc_info) -> None:
        self.close()
