"""Typed response contracts produced by the API handlers.

Each record is constructed per request, serialized and discarded.
"""

from dataclasses import dataclass

SERVICE_MESSAGE = "Main Platform API"
SERVICE_VERSION = "1.0.0"
TEST_ENDPOINT_MESSAGE = "API Test Endpoint"


@dataclass(frozen=True)
class ServiceInfo:
    """Root endpoint payload identifying the service.

    Attributes:
        message: Human-readable service name.
        version: Service version string.
        timestamp: ISO-8601 UTC time of the request.
    """

    message: str
    version: str
    timestamp: str

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready payload."""

        return {"message": self.message, "version": self.version, "timestamp": self.timestamp}


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        uptime: Seconds elapsed since process start.
        timestamp: ISO-8601 UTC time of the request.
    """

    status: str
    uptime: float
    timestamp: str

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready payload."""

        return {"status": self.status, "uptime": self.uptime, "timestamp": self.timestamp}


@dataclass(frozen=True)
class EnvironmentEcho:
    """Test endpoint payload echoing the runtime environment label.

    Attributes:
        message: Fixed endpoint message.
        environment: Configured environment label, or None when unset.
        timestamp: ISO-8601 UTC time of the request.
    """

    message: str
    environment: str | None
    timestamp: str

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready payload, omitting an unset environment."""

        payload: dict[str, object] = {"message": self.message}
        if self.environment is not None:
            payload["environment"] = self.environment
        payload["timestamp"] = self.timestamp
        return payload
