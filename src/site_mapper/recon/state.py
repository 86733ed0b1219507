from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum


class Admission(Enum):
    """Outcome of offering a URL to the crawl state."""

    ADMITTED = "admitted"
    DUPLICATE = "duplicate"
    REJECTED = "rejected"


@dataclass(slots=True)
class CrawlState:
    """Mutable bookkeeping shared by every crawl worker.

    ``seen``, ``discovered_count`` and ``stopped`` are only touched inside
    :meth:`admit`, which holds ``_lock`` for the whole check-then-insert, so
    ``discovered_count == len(seen)`` at all times.
    """

    base_origin: str
    link_budget: int
    seen: set[str] = field(default_factory=set)
    discovered_count: int = 0
    stopped: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def admit(self, url: str, *, force: bool = False) -> Admission:
        """Record ``url`` if it is new and the budget allows it.

        ``force`` admits regardless of the budget and is used for the seed.
        """

        with self._lock:
            if url in self.seen:
                return Admission.DUPLICATE
            if not force and (self.stopped or self.discovered_count >= self.link_budget):
                self.stopped = True
                return Admission.REJECTED
            self.seen.add(url)
            self.discovered_count += 1
            if self.discovered_count >= self.link_budget:
                self.stopped = True
            return Admission.ADMITTED

    def exhausted(self) -> bool:
        with self._lock:
            return self.stopped or self.discovered_count >= self.link_budget

    def snapshot(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self.seen)
