"""Abstract base class for cache service providers.

Defines the contract for the key-value cache that sits in front of outbound
API calls.  Keys are request URLs; values are :class:`CacheEntry` objects
holding the raw response body and the clock reading at which it was fetched.
Implementations may use an in-memory dict, Redis, or any other backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntry:
    """A cached upstream response.

    Attributes
    ----------
    data:
        The raw response body, exactly as received.
    fetched_at:
        Reading of the cache's clock when the body was stored.
    """

    data: bytes
    fetched_at: float


@dataclass
class CacheStats:
    """Cache counters reported by the health endpoint."""

    entries: int = 0
    hits: int = 0
    misses: int = 0

    @property
    def hit_rate(self) -> float:
        """Fraction of lookups served from the cache."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class ICacheProvider(ABC):
    """Contract for key-value cache services.

    All operations are async to allow for network-backed stores (e.g. Redis)
    without blocking the event loop.
    """

    @abstractmethod
    async def get(self, key: str) -> CacheEntry | None:
        """Retrieve the entry stored under *key*.

        Parameters
        ----------
        key:
            The cache key to look up.

        Returns
        -------
        CacheEntry or None
            The cached entry if present and younger than the TTL; ``None``
            otherwise.
        """

    @abstractmethod
    async def set(self, key: str, data: bytes) -> CacheEntry:
        """Store *data* under *key*, replacing any previous entry.

        Parameters
        ----------
        key:
            The cache key.
        data:
            The raw response body.

        Returns
        -------
        CacheEntry
            The entry that was written, stamped with the current clock.
        """

    @abstractmethod
    async def clear(self) -> None:
        """Discard every entry."""

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """Return a snapshot of the cache counters."""
