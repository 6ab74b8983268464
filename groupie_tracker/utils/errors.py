"""Custom exception hierarchy for Groupie Tracker.

All application exceptions inherit from :class:`GroupieTrackerError`, which
carries an optional ``provider_name`` so error handlers can identify which
upstream service caused the failure.

    GroupieTrackerError  (base -- catch-all for any groupie_tracker error)
    +-- FetchError               (the raw bytes could not be retrieved)
    |   +-- ProviderUnavailableError (DNS, connect, timeout)
    |   +-- UpstreamStatusError      (upstream answered with a non-200 status)
    |   +-- ResponseReadError        (status was fine, body read failed)
    +-- DecodeError              (body is not the JSON shape we expect)

Callers can tell "unreachable" apart from "malformed" by catching
``FetchError`` and ``DecodeError`` separately.
"""

from __future__ import annotations


class GroupieTrackerError(Exception):
    """Base exception for all Groupie Tracker errors.

    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[groupie_api] Request timed out``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Fetch errors
# ---------------------------------------------------------------------------

class FetchError(GroupieTrackerError):
    """Raised when a response body could not be retrieved from upstream."""

    def __init__(
        self,
        message: str = "Upstream fetch failed",
        provider_name: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self.url = url


class ProviderUnavailableError(FetchError):
    """Raised when the upstream API is unreachable (DNS, connect, timeout)."""

    def __init__(
        self,
        message: str = "External service is unavailable",
        provider_name: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name, url=url)


class UpstreamStatusError(FetchError):
    """Raised when the upstream API answers with a non-success status code."""

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        provider_name: str | None = None,
        url: str | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(
            message=message or f"Unexpected HTTP status {status_code}",
            provider_name=provider_name,
            url=url,
        )


class ResponseReadError(FetchError):
    """Raised when the response body cannot be read to completion."""

    def __init__(
        self,
        message: str = "Failed to read response body",
        provider_name: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name, url=url)


# ---------------------------------------------------------------------------
# Decode errors
# ---------------------------------------------------------------------------

class DecodeError(GroupieTrackerError):
    """Raised when a response body is not valid JSON of the expected shape."""

    def __init__(
        self,
        message: str = "Failed to decode response body",
        provider_name: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self.url = url
