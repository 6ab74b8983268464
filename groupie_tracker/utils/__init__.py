"""Utility modules for Groupie Tracker.

- **errors** -- Exception hierarchy rooted at GroupieTrackerError; fetch and
  decode failures are separate branches so callers can tell "unreachable"
  apart from "malformed".
- **concurrency** -- asyncio readers-writer lock guarding the response cache.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
"""

from groupie_tracker.utils.concurrency import ReadWriteLock
from groupie_tracker.utils.errors import (
    DecodeError,
    FetchError,
    GroupieTrackerError,
    ProviderUnavailableError,
    ResponseReadError,
    UpstreamStatusError,
)
from groupie_tracker.utils.logging import configure_logging, get_logger

__all__ = [
    "DecodeError",
    "FetchError",
    "GroupieTrackerError",
    "ProviderUnavailableError",
    "ReadWriteLock",
    "ResponseReadError",
    "UpstreamStatusError",
    "configure_logging",
    "get_logger",
]
