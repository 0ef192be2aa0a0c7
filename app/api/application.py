"""FastAPI application factory for the platform API.

This module composes routers, the cross-origin policy and request logging.
"""

import logging
import time

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from app.config import AppSettings
from app.domain import SERVICE_MESSAGE, SERVICE_VERSION, UptimeClockPort

from .routers import api_create_health_router, api_create_info_router

_request_logger = logging.getLogger("app.api.requests")


def create_api_application(settings: AppSettings, uptime_clock: UptimeClockPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated settings snapshot used by the route handlers.
        uptime_clock: Process uptime clock used by the health endpoint.

    Returns:
        FastAPI: Framework application with routes and middleware installed.

    Raises:
        ValueError: Raised when a dependency is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if uptime_clock is None:
        raise ValueError("uptime_clock must not be None")

    application = FastAPI(title=SERVICE_MESSAGE, version=SERVICE_VERSION)

    # Regex origins make the middleware echo the caller's Origin back.
    application.add_middleware(
        CORSMiddleware,
        allow_origin_regex=".*",
        allow_methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["*"],
    )

    @application.middleware("http")
    async def api_log_request(request: Request, call_next) -> Response:
        """Log method, path, status and elapsed time for each request."""

        started_at = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started_at) * 1000
        _request_logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    application.include_router(api_create_info_router(settings=settings))
    application.include_router(api_create_health_router(uptime_clock=uptime_clock))

    return application
