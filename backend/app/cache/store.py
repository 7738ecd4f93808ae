"""
Process-local TTL cache used as a read-through accelerator in front of the store.

Every entry carries its own time-to-live. Entries live in memory only and are
not shared between processes.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional

from cachetools import TLRUCache

logger = logging.getLogger(__name__)


class _Miss:
    """Sentinel returned by get() for absent or expired keys"""

    def __repr__(self) -> str:
        return "MISS"


MISS = _Miss()


@dataclass(frozen=True)
class _Entry:
    value: Any
    ttl: float


def _time_to_use(_key: str, entry: _Entry, now: float) -> float:
    return now + entry.ttl


class TTLCache:
    """
    Key/value cache with per-entry expiry

    Failures inside get/set/delete are logged and reported as a miss so a
    broken cache never fails the operation that consulted it.
    """

    def __init__(self, max_entries: int = 10000, timer: Callable[[], float] = time.monotonic):
        self._entries: TLRUCache = TLRUCache(maxsize=max_entries, ttu=_time_to_use, timer=timer)
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Any:
        try:
            entry: Optional[_Entry] = self._entries.get(key)
        except Exception:
            logger.exception("cache_get_failed key=%s", key)
            entry = None

        if entry is None:
            self._misses += 1
            return MISS

        self._hits += 1
        return entry.value

    def set(self, key: str, value: Any, ttl: float) -> None:
        try:
            self._entries[key] = _Entry(value=value, ttl=ttl)
        except Exception:
            logger.exception("cache_set_failed key=%s", key)

    def delete(self, key: str) -> None:
        try:
            self._entries.pop(key, None)
        except Exception:
            logger.exception("cache_delete_failed key=%s", key)

    def invalidate(self, keys: Iterable[str]) -> None:
        """Delete every key a mutation may have made stale"""
        for key in keys:
            self.delete(key)
            logger.debug("cache_invalidated key=%s", key)

    def clear(self) -> None:
        self._entries.clear()

    async def read_through(self, key: str, ttl: float, loader: Callable[[], Awaitable[Any]]) -> Any:
        """
        Serve key from cache, or load it from the source of truth

        On miss the loader result is stored with ttl before returning.
        Loader errors propagate and nothing is cached.
        """
        cached = self.get(key)
        if cached is not MISS:
            logger.debug("cache_hit key=%s", key)
            return cached

        value = await loader()
        self.set(key, value, ttl)
        return value

    def stats(self) -> Dict[str, int]:
        """Return cache statistics for health reporting"""
        try:
            size = len(self._entries)
        except Exception:
            size = 0
        return {
            "entries": size,
            "max_entries": int(self._entries.maxsize),
            "hits": self._hits,
            "misses": self._misses,
        }
