"""API middleware: CORS, request logging, error handling.

Starlette middleware is a stack (last added, first executed).  ``main.py``
adds ErrorHandlingMiddleware first and RequestLoggingMiddleware second, so
the request flows Client → RequestLogging → ErrorHandling → route handler
and the logging middleware sees the final status code, including the one
ErrorHandling substituted for an upstream failure.
"""

from __future__ import annotations

import time
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from groupie_tracker.api.schemas import ErrorResponse
from groupie_tracker.utils.errors import GroupieTrackerError, UpstreamStatusError
from groupie_tracker.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------


def configure_cors(app: FastAPI, *, allowed_origins: list[str] | None = None) -> None:
    """Add CORS middleware to the FastAPI application.

    Parameters
    ----------
    app:
        The FastAPI application instance.
    allowed_origins:
        Explicit list of allowed origins.  Defaults to ``["*"]``.
    """
    origins = allowed_origins or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "POST"],
        allow_headers=["*"],
    )


# ---------------------------------------------------------------------------
# Request Logging
# ---------------------------------------------------------------------------


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log one ``http_request`` line for it.

    The id is bound into structlog's context variables for the lifetime of
    the request, so ``api_request`` and ``cache_hit`` lines emitted by the
    client while serving it carry the same ``request_id``.  It is echoed back
    in the ``X-Request-ID`` header; a caller-supplied header is reused.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex[:12]
        start = time.perf_counter()
        status_code = 500

        with structlog.contextvars.bound_contextvars(request_id=request_id):
            try:
                response = await call_next(request)
                status_code = response.status_code
                response.headers[REQUEST_ID_HEADER] = request_id
                return response
            finally:
                log = _logger.warning if status_code >= 500 else _logger.info
                log(
                    "http_request",
                    method=request.method,
                    path=request.url.path,
                    status=status_code,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                )


# ---------------------------------------------------------------------------
# Error Handling
# ---------------------------------------------------------------------------


def status_for_error(exc: GroupieTrackerError) -> int:
    """Map an application error to the HTTP status shown to the client.

    An upstream 404 means the requested record does not exist and is passed
    through; every other upstream, transport or decode failure is a 502.
    """
    if isinstance(exc, UpstreamStatusError) and exc.status_code == 404:
        return 404
    return 502


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Catch ``GroupieTrackerError`` subclasses and return structured JSON errors.

    Stack traces and upstream URLs are logged server-side only; the client
    sees the exception class name and a generic message.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except GroupieTrackerError as exc:
            status_code = status_for_error(exc)
            _logger.error(
                "application_error",
                error_type=type(exc).__name__,
                message=exc.message,
                provider=exc.provider_name,
                path=str(request.url.path),
                status=status_code,
            )
            detail = (
                "The requested resource does not exist."
                if status_code == 404
                else "The upstream API could not be reached or returned invalid data."
            )
            body = ErrorResponse(error=type(exc).__name__, detail=detail)
            return JSONResponse(status_code=status_code, content=body.model_dump())
