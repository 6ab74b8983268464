"""Groupie Trackers API provider implementing ITrackerAPIProvider.

Fetches artists, locations, concert dates and venue/date relations from the
public Groupie Trackers JSON API and joins them by artist id into
``ArtistComplete`` view models.  Every GET goes through an injected
``ICacheProvider`` keyed by the exact request URL, so repeated page renders
within the TTL never touch the network.

There is no retry, backoff or de-duplication of in-flight requests: a single
failed attempt propagates to the caller, and concurrent misses for one URL
each fetch and store their own copy (last writer wins).
"""

from __future__ import annotations

import asyncio
from typing import TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from groupie_tracker.interfaces.cache_provider import ICacheProvider
from groupie_tracker.interfaces.tracker_api_provider import ITrackerAPIProvider
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
from groupie_tracker.utils.errors import (
    DecodeError,
    GroupieTrackerError,
    ProviderUnavailableError,
    ResponseReadError,
    UpstreamStatusError,
)
from groupie_tracker.utils.logging import get_logger

DEFAULT_BASE_URL = "https://groupietrackers.herokuapp.com/api"
DEFAULT_TIMEOUT = 10.0  # seconds, per request

_T = TypeVar("_T")

_API_INDEX = TypeAdapter(ApiIndex)
_ARTISTS = TypeAdapter(list[Artist])
_ARTIST = TypeAdapter(Artist)
_LOCATIONS_INDEX = TypeAdapter(LocationsIndex)
_LOCATIONS = TypeAdapter(LocationsRecord)
_DATES_INDEX = TypeAdapter(DatesIndex)
_DATES = TypeAdapter(DatesRecord)
_RELATION_INDEX = TypeAdapter(RelationIndex)
_RELATION = TypeAdapter(Relation)


class GroupieAPIProvider(ITrackerAPIProvider):
    """Cache-fronted client for the Groupie Trackers API.

    The ``httpx.AsyncClient`` and the cache are injected so one instance can
    be shared by every request handler and replaced in tests.

    Parameters
    ----------
    http_client:
        Shared async HTTP client.  Its own timeout is overridden per request.
    cache:
        Response cache keyed by request URL.
    base_url:
        Root of the API, without a trailing slash.
    timeout:
        Per-request timeout in seconds.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        cache: ICacheProvider,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._http = http_client
        self._cache = cache
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._logger = get_logger(__name__)

    # -- Endpoint URLs ---------------------------------------------------------

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def artists_endpoint(self) -> str:
        return f"{self._base_url}/artists"

    @property
    def locations_endpoint(self) -> str:
        return f"{self._base_url}/locations"

    @property
    def dates_endpoint(self) -> str:
        return f"{self._base_url}/dates"

    @property
    def relation_endpoint(self) -> str:
        return f"{self._base_url}/relation"

    # -- Raw fetch -------------------------------------------------------------

    async def fetch(self, url: str) -> bytes:
        """Return the body of ``GET url``, from the cache when it is fresh.

        Raises
        ------
        ProviderUnavailableError
            DNS failure, refused connection or timeout.
        UpstreamStatusError
            Upstream answered with anything but 200.
        ResponseReadError
            The body could not be read to completion.
        """
        entry = await self._cache.get(url)
        if entry is not None:
            return entry.data

        self._logger.info("api_request", url=url)
        try:
            async with self._http.stream("GET", url, timeout=self._timeout) as response:
                if response.status_code != httpx.codes.OK:
                    raise UpstreamStatusError(
                        status_code=response.status_code,
                        message=(
                            f"Unexpected HTTP status {response.status_code} "
                            f"{response.reason_phrase} for {url}"
                        ),
                        provider_name=self.get_provider_name(),
                        url=url,
                    )
                try:
                    body = await response.aread()
                except httpx.HTTPError as exc:
                    raise ResponseReadError(
                        message=f"Failed to read response body from {url}: {exc}",
                        provider_name=self.get_provider_name(),
                        url=url,
                    ) from exc
        except httpx.RequestError as exc:
            raise ProviderUnavailableError(
                message=f"HTTP request to {url} failed: {exc!r}",
                provider_name=self.get_provider_name(),
                url=url,
            ) from exc

        await self._cache.set(url, body)
        return body

    def _decode(self, url: str, data: bytes, adapter: TypeAdapter[_T], what: str) -> _T:
        try:
            return adapter.validate_json(data)
        except ValidationError as exc:
            raise DecodeError(
                message=f"Invalid JSON for {what} from {url}: {exc.error_count()} error(s)",
                provider_name=self.get_provider_name(),
                url=url,
            ) from exc

    async def _get(self, url: str, adapter: TypeAdapter[_T], what: str) -> _T:
        data = await self.fetch(url)
        return self._decode(url, data, adapter, what)

    # -- ITrackerAPIProvider: single resources ---------------------------------

    async def get_api_index(self) -> ApiIndex:
        return await self._get(self._base_url, _API_INDEX, "API index")

    async def get_artists(self) -> list[Artist]:
        artists = await self._get(self.artists_endpoint, _ARTISTS, "artists")
        self._logger.info("artists_fetched", count=len(artists))
        return artists

    async def get_artist_by_id(self, artist_id: int) -> Artist:
        url = f"{self.artists_endpoint}/{artist_id}"
        return await self._get(url, _ARTIST, f"artist {artist_id}")

    async def get_locations(self) -> LocationsIndex:
        locations = await self._get(self.locations_endpoint, _LOCATIONS_INDEX, "locations")
        self._logger.info("locations_fetched", count=len(locations.index))
        return locations

    async def get_locations_by_artist_id(self, artist_id: int) -> LocationsRecord:
        url = f"{self.locations_endpoint}/{artist_id}"
        return await self._get(url, _LOCATIONS, f"locations of artist {artist_id}")

    async def get_dates(self) -> DatesIndex:
        dates = await self._get(self.dates_endpoint, _DATES_INDEX, "dates")
        self._logger.info("dates_fetched", count=len(dates.index))
        return dates

    async def get_dates_by_artist_id(self, artist_id: int) -> DatesRecord:
        url = f"{self.dates_endpoint}/{artist_id}"
        return await self._get(url, _DATES, f"dates of artist {artist_id}")

    async def get_relations(self) -> RelationIndex:
        relations = await self._get(self.relation_endpoint, _RELATION_INDEX, "relations")
        self._logger.info("relations_fetched", count=len(relations.index))
        return relations

    async def get_relation_by_artist_id(self, artist_id: int) -> Relation:
        url = f"{self.relation_endpoint}/{artist_id}"
        return await self._get(url, _RELATION, f"relation of artist {artist_id}")

    # -- ITrackerAPIProvider: composites ---------------------------------------

    async def get_artist_complete(self, artist_id: int) -> ArtistComplete:
        """Fetch one artist and attach whichever enrichments succeed.

        Locations, dates and relation are fetched concurrently; each failure
        leaves its field unset and adds an entry to ``warnings``.
        """
        artist = await self.get_artist_by_id(artist_id)

        results = await asyncio.gather(
            self.get_locations_by_artist_id(artist_id),
            self.get_dates_by_artist_id(artist_id),
            self.get_relation_by_artist_id(artist_id),
            return_exceptions=True,
        )

        warnings: list[str] = []
        locations, dates, relation = [
            self._enrichment_or_none(artist_id, source, result, warnings)
            for source, result in zip(("locations", "dates", "relation"), results)
        ]

        enrichment: dict[str, object] = {"warnings": warnings}
        if isinstance(locations, LocationsRecord):
            enrichment["locations_list"] = locations.locations
        if isinstance(dates, DatesRecord):
            enrichment["dates_list"] = dates.dates
        if isinstance(relation, Relation):
            enrichment["dates_locations"] = relation.dates_locations

        return ArtistComplete.from_artist(artist, **enrichment)

    def _enrichment_or_none(
        self,
        artist_id: int,
        source: str,
        result: object,
        warnings: list[str],
    ) -> object | None:
        if isinstance(result, GroupieTrackerError):
            self._logger.warning(
                "artist_enrichment_failed",
                artist_id=artist_id,
                source=source,
                error=str(result),
            )
            warnings.append(f"{source} unavailable: {result.message}")
            return None
        if isinstance(result, BaseException):
            raise result
        return result

    async def get_all_artists_complete(self) -> list[ArtistComplete]:
        """Join the artist index with the relation index in two calls."""
        artists = await self.get_artists()
        relations = await self.get_relations()

        relations_by_id = {relation.id: relation for relation in relations.index}

        result: list[ArtistComplete] = []
        for artist in artists:
            relation = relations_by_id.get(artist.id)
            if relation is not None:
                result.append(
                    ArtistComplete.from_artist(artist, dates_locations=relation.dates_locations)
                )
            else:
                result.append(ArtistComplete.from_artist(artist))

        self._logger.debug(
            "artists_joined",
            artists=len(result),
            with_relation=sum(1 for a in artists if a.id in relations_by_id),
        )
        return result

    async def clear_cache(self) -> None:
        await self._cache.clear()
        self._logger.info("api_cache_cleared")

    def get_provider_name(self) -> str:
        """Return the provider identifier."""
        return "groupie_api"
