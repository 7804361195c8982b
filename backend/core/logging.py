"""Logging utilities for the backend."""

from __future__ import annotations

import logging
import sys
import uuid
from typing import Awaitable, Callable

from fastapi import Request
from starlette.responses import Response

from backend.core.config import Settings

LOGGER_NAME = "metrics"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(filename)s:%(lineno)d %(message)s"

_NANOS_PER_MICRO = 1_000
_NANOS_PER_MILLI = 1_000_000
_NANOS_PER_SECOND = 1_000_000_000


def build_logger(settings: Settings, name: str = LOGGER_NAME) -> logging.Logger:
    """Return the service logger writing to stdout at the configured level.

    Only the named logger is touched; the root logger and any other library
    configuration are left alone. Calling this twice reuses the existing
    stdout handler.
    """

    level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not any(getattr(handler, "_metrics_stdout", False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._metrics_stdout = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger


def _fraction(value: int, unit: int) -> str:
    whole, remainder = divmod(value, unit)
    if not remainder:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{str(remainder).rjust(digits, '0').rstrip('0')}"


def format_duration(seconds: float) -> str:
    """Render an elapsed time the way Go's ``time.Duration`` prints it.

    Examples: ``512ns``, ``12.5µs``, ``1.234ms``, ``2.5s``, ``1m3s``.
    """

    nanos = int(round(seconds * _NANOS_PER_SECOND))
    if nanos == 0:
        return "0s"
    if nanos < 0:
        return "-" + format_duration(-seconds)

    if nanos < _NANOS_PER_MICRO:
        return f"{nanos}ns"
    if nanos < _NANOS_PER_MILLI:
        return _fraction(nanos, _NANOS_PER_MICRO) + "µs"
    if nanos < _NANOS_PER_SECOND:
        return _fraction(nanos, _NANOS_PER_MILLI) + "ms"

    total_minutes, remainder = divmod(nanos, 60 * _NANOS_PER_SECOND)
    hours, minutes = divmod(total_minutes, 60)
    rendered = ""
    if hours:
        rendered += f"{hours}h"
    if hours or minutes:
        rendered += f"{minutes}m"
    return rendered + _fraction(remainder, _NANOS_PER_SECOND) + "s"


def create_request_id_middleware(
    logger: logging.Logger,
) -> Callable[[Request, Callable[[Request], Awaitable[Response]]], Awaitable[Response]]:
    """Build an HTTP middleware tagging every request with an ``X-Request-ID``."""

    async def request_id_middleware(request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
        request.state.request_id = request_id

        logger.debug("%s %s [rid=%s]", request.method, request.url.path, request_id)

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    return request_id_middleware
