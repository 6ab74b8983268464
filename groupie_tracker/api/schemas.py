"""Pydantic response schemas for the Groupie Tracker API.

Artist payloads are returned as the domain models themselves
(:class:`~groupie_tracker.models.entities.ArtistComplete`), serialised with
their camelCase aliases; the schemas here cover the envelope responses.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CacheStatsResponse(BaseModel):
    """Response cache counters."""

    entries: int = 0
    hits: int = 0
    misses: int = 0
    hit_rate: float = Field(default=0.0, ge=0.0, le=1.0)


class HealthResponse(BaseModel):
    """Application health check response."""

    status: str
    version: str
    upstream: str
    cache: CacheStatsResponse


class CacheClearResponse(BaseModel):
    """Confirmation returned after the response cache was emptied."""

    cleared: bool = True


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: str
    detail: str | None = None
