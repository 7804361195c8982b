"""Application factory for the synthetic metrics backend."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from backend.api.metrics import create_metrics_router
from backend.api.preflight import create_preflight_router
from backend.core.config import Settings, get_settings
from backend.core.errors import ResponseEncodingError, encoding_error_handler, unhandled_exception_handler
from backend.core.logging import build_logger, create_request_id_middleware
from backend.core.metrics import RequestCounter
from backend.simulation.generator import MetricsGenerator


def create_app(
    settings: Settings | None = None,
    *,
    logger: logging.Logger | None = None,
    counter: RequestCounter | None = None,
    generator: MetricsGenerator | None = None,
) -> FastAPI:
    """Build the application around explicitly provided collaborators.

    Anything not passed in is created fresh, so every app instance owns its
    own request counter starting at zero.
    """

    settings = settings or get_settings()
    logger = logger or build_logger(settings)
    counter = counter or RequestCounter()
    generator = generator or MetricsGenerator(seed=settings.random_seed)

    app = FastAPI(title=settings.app_name, version="0.1.0", docs_url=None, redoc_url=None)
    app.state.settings = settings
    app.state.logger = logger
    app.state.counter = counter
    app.state.generator = generator

    app.middleware("http")(create_request_id_middleware(logger))

    app.include_router(create_metrics_router(counter, generator, logger))
    app.include_router(create_preflight_router(logger))

    app.add_exception_handler(ResponseEncodingError, encoding_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.debug("Application built for %s environment (seed=%s)", settings.environment, generator.seed)
    return app
