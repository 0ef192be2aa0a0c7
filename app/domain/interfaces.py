"""Port definitions for runtime values consumed by the API layer."""

from typing import Protocol


class UptimeClockPort(Protocol):
    """Port definition for process uptime measurement."""

    def domain_uptime_seconds(self) -> float:
        """Return seconds elapsed since process start.

        Returns:
            float: Non-negative elapsed seconds, non-decreasing across calls.

        Raises:
            RuntimeError: Raised when the time source is unavailable.
        """
