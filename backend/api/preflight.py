"""CORS preflight responses for every path outside the metrics route."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response
from starlette.routing import Route

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def create_preflight_router(logger: logging.Logger) -> APIRouter:
    """Catch-all router; must be included after every concrete route."""

    async def preflight_endpoint(request: Request) -> Response:
        path = request.path_params.get("path", "")
        if request.method == "OPTIONS":
            logger.info("Handling preflight OPTIONS request")
            return Response(status_code=200, headers=PREFLIGHT_HEADERS)

        logger.warning("No route for %s /%s", request.method, path)
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": f"No resource at /{path}.",
            },
            headers={"Access-Control-Allow-Origin": "*"},
        )

    router = APIRouter()
    router.routes.append(Route("/{path:path}", preflight_endpoint, include_in_schema=False))
    return router
