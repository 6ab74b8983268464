"""FastAPI routes for the Groupie Tracker JSON API.

Endpoint                          Method  Description
─────────────────────────────────────────────────────────────────────
/api/v1/artists                   GET     Every artist joined with its relation
/api/v1/artists/{artist_id}       GET     One artist with all enrichment data
/api/v1/locations                 GET     Raw locations index
/api/v1/dates                     GET     Raw concert dates index
/api/v1/relations                 GET     Raw venue → dates index
/api/v1/cache/clear               POST    Drop every cached upstream response
/api/v1/health                    GET     Health check + cache counters

Services are resolved from ``app.state`` (populated at startup in
``main.py``) through ``Annotated[T, Depends(helper)]`` aliases, so handlers
never reach for module-level globals.  Upstream failures are not caught
here: they propagate to ``ErrorHandlingMiddleware``, which maps them to 404
or 502.
"""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request

from groupie_tracker.api.schemas import CacheClearResponse, CacheStatsResponse, HealthResponse
from groupie_tracker.interfaces.cache_provider import ICacheProvider
from groupie_tracker.interfaces.tracker_api_provider import ITrackerAPIProvider
from groupie_tracker.models.entities import ArtistComplete, DatesIndex, LocationsIndex, RelationIndex
from groupie_tracker.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

APP_VERSION = "0.1.0"

router = APIRouter(prefix="/api/v1")


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


def _get_api_client(request: Request) -> ITrackerAPIProvider:
    """Return the shared API client from application state."""
    return request.app.state.api_client


def _get_cache(request: Request) -> ICacheProvider | None:
    """Return the response cache from application state, or ``None``."""
    return getattr(request.app.state, "cache", None)


APIClientDep = Annotated[ITrackerAPIProvider, Depends(_get_api_client)]
CacheDep = Annotated[ICacheProvider | None, Depends(_get_cache)]


# ---------------------------------------------------------------------------
# Artists
# ---------------------------------------------------------------------------


@router.get(
    "/artists",
    response_model=list[ArtistComplete],
    summary="List every artist with its concert relation",
)
async def list_artists(api_client: APIClientDep) -> list[ArtistComplete]:
    return await api_client.get_all_artists_complete()


@router.get(
    "/artists/{artist_id}",
    response_model=ArtistComplete,
    summary="Get one artist with locations, dates and relation",
)
async def get_artist(artist_id: int, api_client: APIClientDep) -> ArtistComplete:
    """Return the assembled view model for *artist_id*.

    Ids below 1 are rejected before any upstream call is made.
    """
    if artist_id < 1:
        raise HTTPException(status_code=400, detail="Artist id must be a positive integer")

    artist = await api_client.get_artist_complete(artist_id)
    if artist.warnings:
        _logger.info("artist_served_partial", artist_id=artist_id, warnings=len(artist.warnings))
    return artist


# ---------------------------------------------------------------------------
# Raw indexes
# ---------------------------------------------------------------------------


@router.get("/locations", response_model=LocationsIndex, summary="Locations of every artist")
async def list_locations(api_client: APIClientDep) -> LocationsIndex:
    return await api_client.get_locations()


@router.get("/dates", response_model=DatesIndex, summary="Concert dates of every artist")
async def list_dates(api_client: APIClientDep) -> DatesIndex:
    return await api_client.get_dates()


@router.get("/relations", response_model=RelationIndex, summary="Venue to dates mapping of every artist")
async def list_relations(api_client: APIClientDep) -> RelationIndex:
    return await api_client.get_relations()


# ---------------------------------------------------------------------------
# Cache & health
# ---------------------------------------------------------------------------


@router.post("/cache/clear", response_model=CacheClearResponse, summary="Empty the response cache")
async def clear_cache(api_client: APIClientDep) -> CacheClearResponse:
    await api_client.clear_cache()
    return CacheClearResponse()


@router.get("/health", response_model=HealthResponse, summary="Application health check")
async def health_check(api_client: APIClientDep, cache: CacheDep) -> HealthResponse:
    """Return application status, version and cache counters.

    Does not call upstream: the health of this process is reported, not the
    availability of the third-party API.
    """
    stats = CacheStatsResponse()
    if cache is not None:
        snapshot = cache.get_stats()
        stats = CacheStatsResponse(
            entries=snapshot.entries,
            hits=snapshot.hits,
            misses=snapshot.misses,
            hit_rate=snapshot.hit_rate,
        )

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        upstream=api_client.get_provider_name(),
        cache=stats,
    )
