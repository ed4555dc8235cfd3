"""ReportStore: bounded, expiring in-memory store for generated reports.

Request handlers receive a store instance instead of sharing a module-level
cache. Swap in a persistent implementation with the same interface when
reports must outlive the process.

Defaults come from the environment when not passed explicitly:

- ``DT_REPORT_CACHE_SIZE``: maximum number of reports kept (default 100)
- ``DT_REPORT_TTL_SECONDS``: seconds a report lives after ``put`` (default 0, no expiry)
- ``DT_REPORT_PREFIX_MIN``: shortest id prefix ``resolve`` accepts (default 12)
"""

import logging
import os
import threading
import time
from collections.abc import Callable
from typing import Any

from decision_trace.exceptions import AmbiguousReportIdError, ReportIdTooShortError, ReportNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 100
DEFAULT_TTL_SECONDS = 0.0
DEFAULT_MIN_PREFIX = 12


class ReportStore:
    """Thread-safe key -> report mapping with FIFO eviction and optional TTL."""

    def __init__(
        self,
        max_entries: int | None = None,
        ttl_seconds: float | None = None,
        min_prefix: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_entries = max_entries if max_entries is not None else int(
            os.environ.get("DT_REPORT_CACHE_SIZE", str(DEFAULT_MAX_ENTRIES))
        )
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else float(
            os.environ.get("DT_REPORT_TTL_SECONDS", str(DEFAULT_TTL_SECONDS))
        )
        self.min_prefix = min_prefix if min_prefix is not None else int(
            os.environ.get("DT_REPORT_PREFIX_MIN", str(DEFAULT_MIN_PREFIX))
        )
        if self.max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {self.max_entries}")

        self._clock = clock
        self._lock = threading.Lock()
        # report_id -> (report, expires_at or None); insertion order is eviction order
        self._items: dict[str, tuple[Any, float | None]] = {}

    def put(self, report_id: str, report: Any) -> None:
        """Store a report, replacing any previous report with the same id."""
        expires_at = self._clock() + self.ttl_seconds if self.ttl_seconds > 0 else None
        with self._lock:
            self._items.pop(report_id, None)
            self._items[report_id] = (report, expires_at)
            while len(self._items) > self.max_entries:
                oldest = next(iter(self._items))
                del self._items[oldest]
                logger.info("Evicted report %s (store limit %d)", oldest, self.max_entries)

    def get(self, report_id: str) -> Any | None:
        """Return the report stored under the exact id, or None."""
        with self._lock:
            self._purge_expired_unlocked()
            item = self._items.get(report_id)
        return item[0] if item is not None else None

    def resolve(self, report_id: str) -> Any:
        """Return the report matching an exact id or a unique id prefix.

        Raises:
            ReportIdTooShortError: prefix shorter than ``min_prefix`` and not an exact id.
            ReportNotFoundError: nothing matches.
            AmbiguousReportIdError: the prefix matches several reports.
        """
        with self._lock:
            self._purge_expired_unlocked()
            if report_id in self._items:
                return self._items[report_id][0]
            if len(report_id) < self.min_prefix:
                raise ReportIdTooShortError(report_id, self.min_prefix)
            matches = [key for key in self._items if key.startswith(report_id)]
            if not matches:
                raise ReportNotFoundError(report_id)
            if len(matches) > 1:
                raise AmbiguousReportIdError(report_id, matches)
            return self._items[matches[0]][0]

    def remove(self, report_id: str) -> bool:
        """Delete a report. Returns True if it was present."""
        with self._lock:
            return self._items.pop(report_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            self._purge_expired_unlocked()
            return len(self._items)

    def __contains__(self, report_id: object) -> bool:
        with self._lock:
            self._purge_expired_unlocked()
            return report_id in self._items

    def _purge_expired_unlocked(self) -> None:
        if self.ttl_seconds <= 0:
            return
        now = self._clock()
        expired = [key for key, (_, expires_at) in self._items.items() if expires_at is not None and expires_at <= now]
        for key in expired:
            del self._items[key]
        if expired:
            logger.debug("Expired %d report(s)", len(expired))
