"""Synthetic metrics route."""

from __future__ import annotations

import json
import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import Response
from starlette.routing import Route

from backend.core.errors import ResponseEncodingError
from backend.core.logging import format_duration
from backend.core.metrics import RequestCounter
from backend.simulation.generator import MetricsGenerator

METRICS_PATH = "/metrics"


def create_metrics_router(
    counter: RequestCounter,
    generator: MetricsGenerator,
    logger: logging.Logger,
) -> APIRouter:
    router = APIRouter(tags=["metrics"])

    # Plain ``def`` so each request runs on its own worker thread.
    @router.get(METRICS_PATH)
    def metrics_endpoint(request: Request) -> Response:
        """Return a freshly generated metrics snapshot and bump the request count."""

        start = time.perf_counter()

        request_count = counter.increment()
        snapshot = generator.generate(request_count)

        logger.info("Handling %s request", METRICS_PATH)
        logger.debug("Metrics requested with %s", request.method)

        try:
            body = json.dumps(snapshot.to_payload(), allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise ResponseEncodingError("metrics snapshot is not JSON serializable") from exc

        response = Response(
            content=body,
            status_code=200,
            media_type="application/json",
            headers={"Access-Control-Allow-Origin": "*"},
        )

        logger.info("Metrics served in %s", format_duration(time.perf_counter() - start))
        return response

    # A route without ``methods`` matches every HTTP method, including ones
    # FastAPI has no decorator for (TRACE, PROPFIND, ...).
    router.routes.append(Route(METRICS_PATH, metrics_endpoint, include_in_schema=False))
    return router
