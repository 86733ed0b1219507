"""Concurrent crawler that discovers same-origin URLs for the sitemap."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Optional

from ..core.config import CrawlConfig
from ..core.errors import FetchError, LinkExtractionError
from .fetcher import Fetcher, HttpFetcher
from .link_collector import LinkExtractor, SoupLinkExtractor
from .state import Admission, CrawlState
from .targeting import OriginFilter

logger = logging.getLogger(__name__)

_STOP = None


class Crawler:
    """Fans out fetch-and-expand tasks over a bounded pool of worker threads.

    Every admitted URL is put on a work queue and picked up by one of
    ``config.max_workers`` threads. ``Queue.join`` is the termination
    barrier: a task enqueues the links it discovers before it is marked done,
    so the unfinished count only reaches zero once no work is left.

    The link budget is enforced at admission time. Once it is reached no new
    URL is recorded or dispatched, but fetches that are already running are
    not cancelled and simply find nothing left to admit.
    """

    def __init__(
        self,
        config: CrawlConfig,
        *,
        fetcher: Optional[Fetcher] = None,
        extractor: Optional[LinkExtractor] = None,
    ) -> None:
        if config.max_workers < 1:
            raise ValueError("at least one worker is required")
        self.config = config
        self._state = CrawlState(
            base_origin=config.base_origin,
            link_budget=config.max_links,
        )
        self._origin_filter = OriginFilter(self._state.base_origin)
        self._owns_fetcher = fetcher is None
        self._fetcher = fetcher or HttpFetcher(
            timeout=config.request_timeout,
            user_agent=config.user_agent,
        )
        self._extractor = extractor or SoupLinkExtractor()
        self._queue: "queue.Queue[Optional[str]]" = queue.Queue()
        self._started = False
        self._drained = False

    @property
    def state(self) -> CrawlState:
        return self._state

    @property
    def drained(self) -> bool:
        return self._drained

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def start(self, seed_url: Optional[str] = None) -> tuple[str, ...]:
        """Crawl from ``seed_url`` and block until every task has finished."""

        seed = seed_url or self.config.target_url
        if not seed:
            raise ValueError("a seed URL is required")
        if self._started:
            raise RuntimeError("a crawler can only be started once")
        self._started = True

        logger.info(
            "Crawling %s (budget %d, %d worker(s))",
            seed,
            self._state.link_budget,
            self.config.max_workers,
        )
        self._state.admit(seed, force=True)
        self._dispatch(seed)

        workers = [
            threading.Thread(target=self._work, name=f"crawler-{index}", daemon=True)
            for index in range(self.config.max_workers)
        ]
        for worker in workers:
            worker.start()

        self._queue.join()
        self._shutdown(workers)

        if self._state.stopped:
            logger.info("Link budget of %d reached", self._state.link_budget)
        logger.info("Crawl drained with %d URL(s)", self._state.discovered_count)
        return self.export()

    def process_one(self, url: str) -> None:
        """Fetch ``url`` and admit the same-origin links it points to."""

        if self._state.exhausted():
            logger.debug("Budget exhausted, skipping %s", url)
            return

        try:
            response = self._fetcher.fetch(url)
        except FetchError as exc:
            logger.warning("Fetch failed for %s: %s", url, exc.reason)
            return

        if not response.ok:
            logger.warning("Non-200 response status code %s for %s", response.status_code, url)
            return

        try:
            for href in self._extractor.extract_hrefs(response.text):
                if not self._origin_filter.is_allowed(href):
                    continue
                if self._offer(href) is Admission.REJECTED:
                    break
        except LinkExtractionError as exc:
            logger.warning("Could not extract links from %s: %s", url, exc)

    def export(self) -> tuple[str, ...]:
        """Return the discovered URLs once the crawl has drained."""

        if not self._drained:
            raise RuntimeError("the crawl has not finished yet")
        return tuple(sorted(self._state.snapshot()))

    # ------------------------------------------------------------------
    # Worker pool
    # ------------------------------------------------------------------
    def _offer(self, url: str) -> Admission:
        admission = self._state.admit(url)
        if admission is Admission.ADMITTED:
            logger.info("Link found: %s", url)
            self._dispatch(url)
        return admission

    def _dispatch(self, url: str) -> None:
        self._queue.put(url)

    def _work(self) -> None:
        while True:
            url = self._queue.get()
            try:
                if url is _STOP:
                    return
                self.process_one(url)
            except Exception:
                logger.exception("Unexpected failure while crawling %s", url)
            finally:
                self._queue.task_done()

    def _shutdown(self, workers: list[threading.Thread]) -> None:
        for _ in workers:
            self._queue.put(_STOP)
        for worker in workers:
            worker.join()
        self._drained = True
        if self._owns_fetcher and isinstance(self._fetcher, HttpFetcher):
            self._fetcher.close()
