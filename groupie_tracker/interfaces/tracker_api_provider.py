"""Abstract base class for Groupie Trackers API providers.

Defines the contract the API layer depends on: typed retrieval of the four
upstream resources (artists, locations, dates, relation), the two composite
lookups that join artists with their tour data, and cache invalidation.
Route handlers receive an instance through dependency injection, so tests
can substitute a mock.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

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


class ITrackerAPIProvider(ABC):
    """Contract for the aggregating Groupie Trackers client.

    Every retrieval method raises :class:`~groupie_tracker.utils.errors.FetchError`
    when the body cannot be retrieved and
    :class:`~groupie_tracker.utils.errors.DecodeError` when it cannot be parsed.
    """

    @abstractmethod
    async def get_api_index(self) -> ApiIndex:
        """Return the root document listing each resource URL."""

    @abstractmethod
    async def get_artists(self) -> list[Artist]:
        """Return every artist, in upstream order."""

    @abstractmethod
    async def get_artist_by_id(self, artist_id: int) -> Artist:
        """Return a single artist."""

    @abstractmethod
    async def get_locations(self) -> LocationsIndex:
        """Return the locations of every artist."""

    @abstractmethod
    async def get_locations_by_artist_id(self, artist_id: int) -> LocationsRecord:
        """Return the locations of one artist."""

    @abstractmethod
    async def get_dates(self) -> DatesIndex:
        """Return the concert dates of every artist."""

    @abstractmethod
    async def get_dates_by_artist_id(self, artist_id: int) -> DatesRecord:
        """Return the concert dates of one artist."""

    @abstractmethod
    async def get_relations(self) -> RelationIndex:
        """Return the venue to dates mapping of every artist."""

    @abstractmethod
    async def get_relation_by_artist_id(self, artist_id: int) -> Relation:
        """Return the venue to dates mapping of one artist."""

    @abstractmethod
    async def get_artist_complete(self, artist_id: int) -> ArtistComplete:
        """Return one artist with every enrichment that could be fetched.

        Only the base artist fetch is fatal; enrichment failures are
        reported through :attr:`ArtistComplete.warnings`.
        """

    @abstractmethod
    async def get_all_artists_complete(self) -> list[ArtistComplete]:
        """Return every artist joined with its relation mapping.

        Issues exactly two upstream calls regardless of the artist count.
        """

    @abstractmethod
    async def clear_cache(self) -> None:
        """Discard every cached response."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the provider identifier used in logs and errors."""
