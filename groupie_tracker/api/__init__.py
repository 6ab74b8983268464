"""Groupie Tracker API layer: routes, schemas and middleware."""

from groupie_tracker.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from groupie_tracker.api.routes import router
from groupie_tracker.api.schemas import (
    CacheClearResponse,
    CacheStatsResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "CacheClearResponse",
    "CacheStatsResponse",
    "ErrorHandlingMiddleware",
    "ErrorResponse",
    "HealthResponse",
    "RequestLoggingMiddleware",
    "configure_cors",
    "router",
]
