"""Public interface definitions for external service providers.

Concrete adapters implement these interfaces and are injected at runtime from
``groupie_tracker/main.py``:

    Interface             →  Concrete implementation (in groupie_tracker/providers/)
    ─────────────────────────────────────────────────────────────────────
    ICacheProvider        →  MemoryCacheProvider
    ITrackerAPIProvider   →  GroupieAPIProvider
"""

from groupie_tracker.interfaces.cache_provider import CacheEntry, CacheStats, ICacheProvider
from groupie_tracker.interfaces.tracker_api_provider import ITrackerAPIProvider

__all__ = [
    "CacheEntry",
    "CacheStats",
    "ICacheProvider",
    "ITrackerAPIProvider",
]
