"""Groupie Tracker FastAPI application entry point.

Wires the HTTP client, the response cache and the aggregating API client
together via dependency injection, configures structured logging, and
exposes the JSON routes.  One ``GroupieAPIProvider`` instance is created per
application and shared by every request handler through ``app.state``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx
import structlog
import uvicorn
from fastapi import FastAPI

from groupie_tracker.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from groupie_tracker.api.routes import APP_VERSION
from groupie_tracker.api.routes import router as api_router
from groupie_tracker.config.settings import Settings
from groupie_tracker.providers.cache.memory_cache import MemoryCacheProvider
from groupie_tracker.providers.tracker.groupie_api_provider import GroupieAPIProvider
from groupie_tracker.utils.logging import configure_logging, get_logger

# ---------------------------------------------------------------------------
# Module-level settings & logging
# ---------------------------------------------------------------------------

settings = Settings()

configure_logging(
    log_level=settings.log_level,
    json_output=(settings.app_env == "production"),
)
_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# DI assembly
# ---------------------------------------------------------------------------


def _build_all(app_settings: Settings) -> dict[str, Any]:
    """Construct every provider for the application.

    Returns a flat dict of named components to be stored on ``app.state``.
    """
    http_client = httpx.AsyncClient(timeout=app_settings.http_timeout_seconds)
    cache = MemoryCacheProvider(
        max_size=app_settings.cache_max_size,
        ttl=app_settings.cache_ttl_seconds,
    )
    api_client = GroupieAPIProvider(
        http_client=http_client,
        cache=cache,
        base_url=app_settings.groupie_api_base_url,
        timeout=app_settings.http_timeout_seconds,
    )
    return {
        "http_client": http_client,
        "cache": cache,
        "api_client": api_client,
    }


# ---------------------------------------------------------------------------
# Application lifespan (startup / shutdown)
# ---------------------------------------------------------------------------


@asynccontextmanager
async def _lifespan(application: FastAPI):  # noqa: ANN201
    """Build the shared client on startup, close its HTTP pool on shutdown."""
    components = _build_all(settings)

    for key, value in components.items():
        setattr(application.state, key, value)

    _logger.info(
        "app_startup",
        version=APP_VERSION,
        environment=settings.app_env,
        upstream=settings.groupie_api_base_url,
        cache_ttl=settings.cache_ttl_seconds,
    )

    yield

    http_client: httpx.AsyncClient = components["http_client"]
    await http_client.aclose()
    _logger.info("app_shutdown", message="HTTP client closed")


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    application = FastAPI(
        title="Groupie Tracker API",
        version=APP_VERSION,
        description=(
            "Artists, tour locations and concert dates from the Groupie "
            "Trackers API, merged into one view per artist."
        ),
        lifespan=_lifespan,
    )

    # Last added = first executed.
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)
    configure_cors(application, allowed_origins=settings.cors_allowed_origins)

    application.include_router(api_router)

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "groupie_tracker.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=(settings.app_env == "development"),
    )
