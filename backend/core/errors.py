"""Exception handling utilities."""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse


class ResponseEncodingError(RuntimeError):
    """Raised when a response payload cannot be serialized."""


def _request_logger(request: Request) -> logging.Logger:
    return getattr(request.app.state, "logger", None) or logging.getLogger("metrics.errors")


async def encoding_error_handler(request: Request, exc: ResponseEncodingError) -> PlainTextResponse:
    """Log the underlying cause and answer with a bare 500."""

    cause = exc.__cause__ or exc
    _request_logger(request).error(
        "Failed to encode metrics response: %s",
        cause,
        exc_info=(type(cause), cause, cause.__traceback__),
    )
    return PlainTextResponse("Internal Server Error", status_code=500)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: D401
    """Return a generic JSON error response while logging the exception."""

    _request_logger(request).exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "Something unexpected happened. Please try again later.",
        },
    )
