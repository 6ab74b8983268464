"""Groupie Trackers API providers."""

from groupie_tracker.providers.tracker.groupie_api_provider import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    GroupieAPIProvider,
)

__all__ = ["DEFAULT_BASE_URL", "DEFAULT_TIMEOUT", "GroupieAPIProvider"]
