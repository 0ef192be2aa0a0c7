"""Service information routes: root metadata and environment echo."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.config import AppSettings
from app.domain import (
    SERVICE_MESSAGE,
    SERVICE_VERSION,
    TEST_ENDPOINT_MESSAGE,
    EnvironmentEcho,
    ServiceInfo,
    domain_utc_timestamp,
)


def api_create_info_router(settings: AppSettings) -> APIRouter:
    """Create router exposing `/` and `/test` endpoints.

    Args:
        settings: Settings snapshot supplying the environment label.

    Returns:
        APIRouter: Router exposing service information endpoints.

    Raises:
        ValueError: Raised when settings is invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    router = APIRouter(tags=["info"])

    @router.api_route("/", methods=["GET", "HEAD"])
    def api_service_info() -> JSONResponse:
        """Return service name, version and current time."""

        info = ServiceInfo(message=SERVICE_MESSAGE, version=SERVICE_VERSION, timestamp=domain_utc_timestamp())
        return JSONResponse(content=info.to_payload(), status_code=status.HTTP_200_OK)

    @router.api_route("/test", methods=["GET", "HEAD"])
    def api_environment_echo() -> JSONResponse:
        """Echo the configured environment label.

        The `environment` key is left out of the payload when no environment
        label is configured.
        """

        echo = EnvironmentEcho(
            message=TEST_ENDPOINT_MESSAGE,
            environment=settings.node_env,
            timestamp=domain_utc_timestamp(),
        )
        return JSONResponse(content=echo.to_payload(), status_code=status.HTTP_200_OK)

    return router
