"""Shared pytest fixtures for the Groupie Tracker test suite."""

from __future__ import annotations

import json
from typing import Any, Awaitable, Callable, Union

import httpx
import pytest

from groupie_tracker.providers.cache.memory_cache import MemoryCacheProvider
from groupie_tracker.providers.tracker.groupie_api_provider import GroupieAPIProvider

_Handler = Callable[[httpx.Request], Union[httpx.Response, Awaitable[httpx.Response]]]

BASE_URL = "https://groupie.test/api"

QUEEN: dict[str, Any] = {
    "id": 1,
    "image": "https://groupie.test/api/images/queen.jpeg",
    "name": "Queen",
    "members": ["Freddie Mercury", "Brian May", "John Daecon", "Roger Meddows-Taylor"],
    "creationDate": 1970,
    "firstAlbum": "14-12-1973",
    "locations": f"{BASE_URL}/locations/1",
    "concertDates": f"{BASE_URL}/dates/1",
    "relations": f"{BASE_URL}/relation/1",
}

SOJA: dict[str, Any] = {
    "id": 2,
    "image": "https://groupie.test/api/images/soja.jpeg",
    "name": "SOJA",
    "members": ["Jacob Hemphill", "Bob Jefferson"],
    "creationDate": 1997,
    "firstAlbum": "05-06-2002",
    "locations": f"{BASE_URL}/locations/2",
    "concertDates": f"{BASE_URL}/dates/2",
    "relations": f"{BASE_URL}/relation/2",
}

QUEEN_LOCATIONS: dict[str, Any] = {
    "id": 1,
    "locations": ["north_carolina-usa", "london-uk"],
    "dates": f"{BASE_URL}/dates/1",
}

QUEEN_DATES: dict[str, Any] = {"id": 1, "dates": ["*23-08-2019", "05-12-2019"]}

QUEEN_RELATION: dict[str, Any] = {
    "id": 1,
    "datesLocations": {
        "north_carolina-usa": ["23-08-2019"],
        "london-uk": ["05-12-2019"],
    },
}


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced time source for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUpstream:
    """Stand-in for the Groupie Trackers API behind ``httpx.MockTransport``.

    Routes are keyed by path relative to ``BASE_URL``.  Every request is
    recorded so tests can assert on the number of network calls.
    Unknown paths answer 404.
    """

    def __init__(self) -> None:
        self._routes: dict[str, _Handler] = {}
        self.requests: list[httpx.Request] = []

    def url(self, path: str = "") -> str:
        return f"{BASE_URL}{path}"

    def add_json(self, path: str, payload: Any, status_code: int = 200) -> None:
        body = json.dumps(payload).encode()
        self._routes[self.url(path)] = lambda request: httpx.Response(status_code, content=body)

    def add_raw(self, path: str, body: bytes, status_code: int = 200) -> None:
        self._routes[self.url(path)] = lambda request: httpx.Response(status_code, content=body)

    def add_handler(self, path: str, handler: _Handler) -> None:
        self._routes[self.url(path)] = handler

    def handler(self, request: httpx.Request) -> httpx.Response | Awaitable[httpx.Response]:
        self.requests.append(request)
        route = self._routes.get(str(request.url))
        if route is None:
            return httpx.Response(404, content=b'{"error": "not found"}')
        return route(request)

    @property
    def calls(self) -> list[str]:
        return [str(request.url) for request in self.requests]

    def call_count(self, path: str | None = None) -> int:
        if path is None:
            return len(self.requests)
        return self.calls.count(self.url(path))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def cache(clock: FakeClock) -> MemoryCacheProvider:
    return MemoryCacheProvider(max_size=100, ttl=300, clock=clock)


@pytest.fixture
def provider(upstream: FakeUpstream, cache: MemoryCacheProvider) -> GroupieAPIProvider:
    """GroupieAPIProvider wired to the fake upstream and a fake-clock cache."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))
    return GroupieAPIProvider(http_client=http_client, cache=cache, base_url=BASE_URL)


@pytest.fixture
def populated_upstream(upstream: FakeUpstream) -> FakeUpstream:
    """Upstream serving Queen (fully enriched) and SOJA (no relation)."""
    upstream.add_json("", {
        "artists": f"{BASE_URL}/artists",
        "locations": f"{BASE_URL}/locations",
        "dates": f"{BASE_URL}/dates",
        "relation": f"{BASE_URL}/relation",
    })
    upstream.add_json("/artists", [QUEEN, SOJA])
    upstream.add_json("/artists/1", QUEEN)
    upstream.add_json("/artists/2", SOJA)
    upstream.add_json("/locations", {"index": [QUEEN_LOCATIONS]})
    upstream.add_json("/locations/1", QUEEN_LOCATIONS)
    upstream.add_json("/dates", {"index": [QUEEN_DATES]})
    upstream.add_json("/dates/1", QUEEN_DATES)
    upstream.add_json("/relation", {"index": [QUEEN_RELATION]})
    upstream.add_json("/relation/1", QUEEN_RELATION)
    return upstream
