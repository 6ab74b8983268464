"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from groupie_tracker.utils.errors import (
    DecodeError,
    FetchError,
    GroupieTrackerError,
    ProviderUnavailableError,
    ResponseReadError,
    UpstreamStatusError,
)


class TestGroupieTrackerError:
    def test_default_message(self) -> None:
        err = GroupieTrackerError()
        assert err.message == "An unexpected error occurred"
        assert str(err) == "An unexpected error occurred"

    def test_provider_prefix(self) -> None:
        err = GroupieTrackerError("Request timed out", provider_name="groupie_api")
        assert err.provider_name == "groupie_api"
        assert str(err) == "[groupie_api] Request timed out"


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [ProviderUnavailableError, ResponseReadError],
    )
    def test_fetch_errors(self, exc_type: type[FetchError]) -> None:
        err = exc_type(url="https://groupie.test/api/artists")
        assert isinstance(err, FetchError)
        assert isinstance(err, GroupieTrackerError)
        assert err.url == "https://groupie.test/api/artists"

    def test_upstream_status_error(self) -> None:
        err = UpstreamStatusError(status_code=404, provider_name="groupie_api")
        assert isinstance(err, FetchError)
        assert err.status_code == 404
        assert err.message == "Unexpected HTTP status 404"

    def test_upstream_status_error_custom_message(self) -> None:
        err = UpstreamStatusError(status_code=500, message="Internal Server Error")
        assert str(err) == "Internal Server Error"

    def test_decode_error_is_not_fetch_error(self) -> None:
        err = DecodeError(url="https://groupie.test/api/dates")
        assert isinstance(err, GroupieTrackerError)
        assert not isinstance(err, FetchError)
        assert err.url == "https://groupie.test/api/dates"
