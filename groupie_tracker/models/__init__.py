"""Groupie Tracker domain models: re-exports all public model classes."""

from __future__ import annotations

from groupie_tracker.models.entities import (
    ApiIndex,
    Artist,
    ArtistComplete,
    DatesIndex,
    DatesRecord,
    LocationsIndex,
    LocationsRecord,
    Relation,
    RelationIndex,
)

__all__ = [
    "ApiIndex",
    "Artist",
    "ArtistComplete",
    "DatesIndex",
    "DatesRecord",
    "LocationsIndex",
    "LocationsRecord",
    "Relation",
    "RelationIndex",
]
