"""Tests for API health endpoint behavior.

These tests validate the payload shape, uptime reporting and timestamp
freshness of the `/health` endpoint.
"""

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from app.api.application import create_api_application
from app.config import AppSettings
from app.domain import ProcessUptimeClock


class _SteppingUptimeClock:
    """Test double that advances by a fixed step on every read."""

    def __init__(self, step_seconds: float):
        """Initialize clock double.

        Args:
            step_seconds: Seconds added per read.
        """

        self._step_seconds = step_seconds
        self._elapsed_seconds = 0.0

    def domain_uptime_seconds(self) -> float:
        """Return deterministic increasing uptime.

        Returns:
            float: Elapsed seconds.
        """

        self._elapsed_seconds += self._step_seconds
        return self._elapsed_seconds


class _FixedUptimeClock:
    """Test double that always reports the same uptime."""

    def domain_uptime_seconds(self) -> float:
        return 12.5


def _build_client(uptime_clock) -> TestClient:
    """Create test client with deterministic settings.

    Args:
        uptime_clock: Uptime clock double.

    Returns:
        TestClient: Client bound to a freshly created application.
    """

    return TestClient(create_api_application(AppSettings(node_env="test"), uptime_clock))


def test_api_health_returns_exact_payload_shape() -> None:
    """Return HTTP 200 with exactly status, uptime and timestamp fields.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = _build_client(_FixedUptimeClock())

    response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert set(payload) == {"status", "uptime", "timestamp"}
    assert payload["status"] == "ok"
    assert payload["uptime"] == 12.5


def test_api_health_uptime_is_non_decreasing_across_requests() -> None:
    """Return non-decreasing uptime values for sequential requests."""

    client = _build_client(_SteppingUptimeClock(step_seconds=0.25))

    uptimes = [client.get("/health").json()["uptime"] for _ in range(5)]

    assert uptimes == sorted(uptimes)
    assert all(uptime >= 0 for uptime in uptimes)


def test_api_health_uptime_with_real_clock_is_non_negative_and_monotonic() -> None:
    """Report real process uptime as a non-negative non-decreasing float."""

    client = _build_client(ProcessUptimeClock())

    first_uptime = client.get("/health").json()["uptime"]
    second_uptime = client.get("/health").json()["uptime"]

    assert isinstance(first_uptime, float)
    assert 0 <= first_uptime <= second_uptime


def test_api_health_timestamp_is_current_iso_8601() -> None:
    """Return a parseable UTC timestamp close to the wall clock."""

    client = _build_client(_FixedUptimeClock())

    before = datetime.now(timezone.utc)
    response = client.get("/health")
    after = datetime.now(timezone.utc)

    timestamp = datetime.fromisoformat(response.json()["timestamp"].replace("Z", "+00:00"))
    assert before - timedelta(milliseconds=1) <= timestamp <= after + timedelta(seconds=1)
