"""In-memory cache provider using cachetools.TTLCache.

Simple, fast cache suitable for a single-process deployment.  Expiry is lazy:
``TTLCache`` checks an entry's age against its timer on every read, so a
stale entry is never returned even before it is physically evicted.  Access
is guarded by a readers-writer lock so many concurrent request handlers can
read together while an insert or a clear runs alone.
"""

from __future__ import annotations

import time
from typing import Callable

from cachetools import TTLCache

from groupie_tracker.interfaces.cache_provider import CacheEntry, CacheStats, ICacheProvider
from groupie_tracker.utils.concurrency import ReadWriteLock
from groupie_tracker.utils.logging import get_logger

logger = get_logger(__name__)


class MemoryCacheProvider(ICacheProvider):
    """In-memory TTL cache backed by ``cachetools.TTLCache``.

    Parameters
    ----------
    max_size:
        Maximum number of entries before the least-recently-used entry
        is evicted.
    ttl:
        Time-to-live in seconds.  An entry is a hit while
        ``clock() - entry.fetched_at < ttl``.
    clock:
        Monotonic time source.  Tests inject a fake clock to step past
        the TTL without sleeping.
    """

    def __init__(
        self,
        max_size: int = 1000,
        ttl: float = 300,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl
        self._clock = clock
        self._cache: TTLCache[str, CacheEntry] = TTLCache(
            maxsize=max_size, ttl=ttl, timer=clock
        )
        self._lock = ReadWriteLock()
        self._stats = CacheStats()

    @property
    def ttl(self) -> float:
        return self._ttl

    # ------------------------------------------------------------------
    # ICacheProvider implementation
    # ------------------------------------------------------------------

    async def get(self, key: str) -> CacheEntry | None:
        """Retrieve the cached entry for *key*, or ``None`` if missing/expired."""
        async with self._lock.read():
            entry = self._cache.get(key)
        if entry is not None:
            self._stats.hits += 1
            logger.debug("cache_hit", key=key)
        else:
            self._stats.misses += 1
            logger.debug("cache_miss", key=key)
        return entry

    async def set(self, key: str, data: bytes) -> CacheEntry:
        """Store *data* under *key*, overwriting any existing entry."""
        async with self._lock.write():
            entry = CacheEntry(data=data, fetched_at=self._clock())
            self._cache[key] = entry
        logger.debug("cache_set", key=key, size=len(data))
        return entry

    async def clear(self) -> None:
        """Drop every entry in one exclusive step."""
        async with self._lock.write():
            dropped = len(self._cache)
            self._cache.clear()
        logger.info("cache_cleared", entries=dropped)

    def get_stats(self) -> CacheStats:
        """Return a copy of the counters with the current entry count."""
        self._cache.expire()
        return CacheStats(
            entries=len(self._cache),
            hits=self._stats.hits,
            misses=self._stats.misses,
        )
