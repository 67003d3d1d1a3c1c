"""In-memory cache of full analysis results.

Entries are keyed by a content fingerprint of the dataset plus the call
options. By default only the first rows are fingerprinted: datasets that
differ only beyond that prefix and share options collide. This is a
deliberate fast path; enable full-content keys for exact matching.

Eviction is FIFO on insertion order (reads do not refresh an entry).
Expiry is checked lazily when an entry is read.
"""

from __future__ import annotations

import hashlib
import json
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from tablelens.core.config import get_settings
from tablelens.core.dataset import Dataset
from tablelens.core.logging import get_logger
from tablelens.profiling.values import canonical_string

logger = get_logger(__name__)

KEY_LENGTH = 16


def compute_cache_key(
    dataset: Dataset,
    options: BaseModel | dict[str, Any] | None = None,
    prefix_rows: int = 100,
    full_content: bool = False,
) -> str:
    """Compute a cache key from dataset content and call options.

    Args:
        dataset: Rows to fingerprint
        options: Call options (pydantic model or plain dict)
        prefix_rows: Rows fingerprinted when full_content is False
        full_content: Fingerprint every row

    Returns:
        First 16 hex characters of a SHA256 digest
    """
    rows = dataset if full_content else dataset[:prefix_rows]
    if isinstance(options, BaseModel):
        options_data: Any = options.model_dump(mode="json")
    else:
        options_data = options or {}

    # Deterministic key data
    rows_json = json.dumps([dict(row) for row in rows], sort_keys=True, default=canonical_string)
    options_json = json.dumps(options_data, sort_keys=True, default=str)

    key_json = f"{rows_json}|{options_json}"
    return hashlib.sha256(key_json.encode()).hexdigest()[:KEY_LENGTH]


class CacheEntry(BaseModel):
    """A cached result with its insertion time and serialized size."""

    key: str
    result: Any
    timestamp_ms: float
    size_bytes: int


class AnalysisCache:
    """Bounded, expiring cache of analysis results.

    All operations run under one lock so the cache can be shared by
    concurrent callers.
    """

    def __init__(
        self,
        max_size: int | None = None,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.time,
    ):
        settings = get_settings()
        self.max_size = max_size if max_size is not None else settings.cache_max_entries
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.cache_ttl_seconds
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()

    def _now_ms(self) -> float:
        return self._clock() * 1000

    @staticmethod
    def _size_of(result: Any) -> int:
        if isinstance(result, BaseModel):
            return len(result.model_dump_json())
        return len(json.dumps(result, default=str))

    def get(self, key: str) -> Any | None:
        """Get a cached result if present and not expired.

        An expired entry is removed on the way out.

        Returns:
            The cached result, or None
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug("cache_miss", key=key)
                return None

            age_ms = self._now_ms() - entry.timestamp_ms
            if age_ms >= self.ttl_seconds * 1000:
                del self._entries[key]
                logger.debug("cache_expired", key=key, age_ms=age_ms)
                return None

            logger.debug("cache_hit", key=key)
            return entry.result

    def set(self, key: str, result: Any) -> None:
        """Store a result, evicting the oldest entries beyond capacity.

        Re-setting a key replaces its entry and makes it the newest.
        """
        entry = CacheEntry(
            key=key,
            result=result,
            timestamp_ms=self._now_ms(),
            size_bytes=self._size_of(result),
        )
        with self._lock:
            self._entries.pop(key, None)
            self._entries[key] = entry

            while len(self._entries) > self.max_size:
                evicted_key, _ = self._entries.popitem(last=False)
                logger.debug("cache_evicted", key=evicted_key)

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def stats(self) -> dict[str, Any]:
        """Entry count, capacity, keys (oldest first) and total serialized size."""
        with self._lock:
            return {
                "size": len(self._entries),
                "max_size": self.max_size,
                "entries": list(self._entries),
                "total_size": sum(entry.size_bytes for entry in self._entries.values()),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries
