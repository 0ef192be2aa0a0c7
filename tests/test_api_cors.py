"""Tests for the permissive cross-origin policy."""

import pytest
from fastapi.testclient import TestClient

from app.api.application import create_api_application
from app.config import AppSettings


class _ZeroUptimeClock:
    """Uptime clock stub for API factory dependency injection."""

    def domain_uptime_seconds(self) -> float:
        return 0.0


def _build_client() -> TestClient:
    return TestClient(create_api_application(AppSettings(), _ZeroUptimeClock()))


@pytest.mark.parametrize("path", ["/", "/health", "/test"])
@pytest.mark.parametrize("origin", ["https://example.com", "http://localhost:5173"])
def test_api_cors_reflects_request_origin(path: str, origin: str) -> None:
    """Allow any requesting origin by echoing it back.

    Args:
        path: Route under test.
        origin: Origin header sent by the client.
    """

    response = _build_client().get(path, headers={"Origin": origin})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == origin
    assert "Origin" in response.headers.get("vary", "")


def test_api_cors_answers_preflight_for_any_origin() -> None:
    """Answer preflight requests with the caller's origin and allowed method."""

    response = _build_client().options(
        "/test",
        headers={
            "Origin": "https://example.com",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://example.com"
    assert "GET" in response.headers["access-control-allow-methods"]


def test_api_cors_headers_absent_without_origin() -> None:
    """Send no CORS allow header when the request declares no origin."""

    response = _build_client().get("/")

    assert "access-control-allow-origin" not in response.headers
