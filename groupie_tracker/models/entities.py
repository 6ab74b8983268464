"""Domain entities for the Groupie Trackers API.

Pydantic v2 models mirroring the upstream JSON shapes.  Field names are
snake_case in Python; the camelCase spelling used on the wire is kept as the
alias, so ``Artist.model_validate_json(body)`` reads upstream payloads
directly and ``model_dump(by_alias=True)`` writes them back in the same
shape.  All models are frozen: a record fetched from upstream is never
mutated, a refetch produces a new object.

Key relationships:
    - Artist, LocationsRecord, DatesRecord and Relation share the artist ``id``
    - Relation is the join key that attaches tour data to an Artist
    - ArtistComplete is the assembled view model consumed by the API layer
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _UpstreamModel(BaseModel):
    """Shared config: frozen, aliases accepted on input, names accepted too."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ---------------------------------------------------------------------------
# Upstream records
# ---------------------------------------------------------------------------

class Artist(_UpstreamModel):
    """An artist or band as listed by the ``/artists`` endpoint."""

    id: int
    image: str = ""                                              # Portrait URL
    name: str = ""
    members: list[str] = Field(default_factory=list)             # Ordered as upstream lists them
    creation_date: int = Field(default=0, alias="creationDate")  # Year the band formed
    first_album: str = Field(default="", alias="firstAlbum")     # "dd-mm-yyyy"
    locations: str = ""                                          # URL of the locations sub-resource
    concert_dates: str = Field(default="", alias="concertDates")  # URL of the dates sub-resource
    relations: str = ""                                          # URL of the relation sub-resource


class LocationsRecord(_UpstreamModel):
    """Tour locations for one artist (``/locations/<id>``)."""

    id: int
    locations: list[str] = Field(default_factory=list)  # e.g. "london-uk"
    dates: str = ""                                     # URL of the matching dates record


class DatesRecord(_UpstreamModel):
    """Concert dates for one artist (``/dates/<id>``).

    Upstream prefixes some dates with ``*``; the raw strings are kept as-is.
    """

    id: int
    dates: list[str] = Field(default_factory=list)


class Relation(_UpstreamModel):
    """Venue to dates mapping for one artist (``/relation/<id>``)."""

    id: int
    dates_locations: dict[str, list[str]] = Field(
        default_factory=dict, alias="datesLocations"
    )


class LocationsIndex(_UpstreamModel):
    """Envelope returned by the bulk ``/locations`` endpoint."""

    index: list[LocationsRecord] = Field(default_factory=list)


class DatesIndex(_UpstreamModel):
    """Envelope returned by the bulk ``/dates`` endpoint."""

    index: list[DatesRecord] = Field(default_factory=list)


class RelationIndex(_UpstreamModel):
    """Envelope returned by the bulk ``/relation`` endpoint."""

    index: list[Relation] = Field(default_factory=list)


class ApiIndex(_UpstreamModel):
    """Root document of the API: the URL of each resource collection."""

    artists: str = ""
    locations: str = ""
    dates: str = ""
    relation: str = ""


# ---------------------------------------------------------------------------
# View model
# ---------------------------------------------------------------------------

class ArtistComplete(Artist):
    """An artist merged with whatever enrichment data could be fetched.

    ``locations_list`` and ``dates_list`` are ``None`` when the matching
    sub-record was not fetched (or its fetch failed); ``dates_locations`` is
    empty in that case so templates can iterate it unconditionally.
    ``warnings`` carries one message per enrichment fetch that failed.
    """

    locations_list: list[str] | None = Field(default=None, alias="locationsList")
    dates_list: list[str] | None = Field(default=None, alias="datesList")
    dates_locations: dict[str, list[str]] = Field(
        default_factory=dict, alias="datesLocations"
    )
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_artist(cls, artist: Artist, **enrichment: object) -> ArtistComplete:
        """Build a view model from *artist* plus keyword enrichment fields."""
        return cls.model_validate({**artist.model_dump(), **enrichment})
