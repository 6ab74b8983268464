"""Cache providers.

MemoryCacheProvider keeps raw upstream response bodies keyed by request URL.
It is not shared across processes; a multi-worker deployment can swap in a
Redis adapter implementing ICacheProvider without touching the API client.
"""

from groupie_tracker.providers.cache.memory_cache import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
