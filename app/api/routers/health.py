"""Health endpoint router composition for process liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.domain import HealthStatus, UptimeClockPort, domain_utc_timestamp


def api_create_health_router(uptime_clock: UptimeClockPort) -> APIRouter:
    """Create health-check router reporting process uptime.

    Args:
        uptime_clock: Clock reporting seconds since process start.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when uptime_clock is invalid.
    """

    if uptime_clock is None:
        raise ValueError("uptime_clock must not be None")

    router = APIRouter(tags=["health"])

    @router.api_route("/health", methods=["GET", "HEAD"])
    def api_health_status() -> JSONResponse:
        """Return liveness state with process uptime.

        Returns:
            JSONResponse: Health payload for operational checks.
        """

        health = HealthStatus(
            status="ok",
            uptime=uptime_clock.domain_uptime_seconds(),
            timestamp=domain_utc_timestamp(),
        )
        return JSONResponse(content=health.to_payload(), status_code=status.HTTP_200_OK)

    return router
