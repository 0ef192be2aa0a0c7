"""Domain models used across application layer boundaries."""

from .clock import ProcessUptimeClock, domain_utc_timestamp
from .interfaces import UptimeClockPort
from .models import (
    SERVICE_MESSAGE,
    SERVICE_VERSION,
    TEST_ENDPOINT_MESSAGE,
    EnvironmentEcho,
    HealthStatus,
    ServiceInfo,
)

__all__ = [
    "SERVICE_MESSAGE",
    "SERVICE_VERSION",
    "TEST_ENDPOINT_MESSAGE",
    "EnvironmentEcho",
    "HealthStatus",
    "ProcessUptimeClock",
    "ServiceInfo",
    "UptimeClockPort",
    "domain_utc_timestamp",
]
