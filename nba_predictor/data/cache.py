"""Short-lived in-memory response cache with lazy expiry."""

from __future__ import annotations

import json
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

CACHE_DURATION_SECONDS = 300.0


@dataclass
class CacheEntry:
    data: Any
    timestamp: float


def make_cache_key(resource: str, params: Optional[Dict[str, Any]] = None) -> str:
    """
    Build a deterministic cache key.

    Parameters are encoded with sorted keys so that the order in which a
    caller passes them never produces a different key.
    """
    encoded = json.dumps(params or {}, sort_keys=True, separators=(",", ":"), default=str)
    return f"{resource}:{encoded}"


class ResponseCache:
    """
    Key -> value store whose entries expire ``ttl`` seconds after insertion.

    Expired entries are removed only when looked up; there is no capacity
    bound and no background sweep.
    """

    def __init__(self, ttl: float = CACHE_DURATION_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() - entry.timestamp < self.ttl:
                logger.debug("Cache hit for %s", key)
                return entry.data
            del self._entries[key]
            logger.debug("Cache entry expired for %s", key)
            return None

    def set(self, key: str, data: Any) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(data=data, timestamp=self._clock())

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
