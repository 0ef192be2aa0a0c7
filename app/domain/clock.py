"""Wall-clock and uptime helpers used by response builders."""

import time
from datetime import datetime, timezone
from typing import Callable


def domain_utc_timestamp(now: datetime | None = None) -> str:
    """Render a UTC timestamp with millisecond precision and `Z` suffix.

    Args:
        now: Optional aware datetime; defaults to the current UTC time.

    Returns:
        str: Timestamp such as `2026-10-18T12:00:00.123Z`.

    Raises:
        ValueError: Raised when `now` is a naive datetime.
    """

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        raise ValueError("now must be timezone-aware")

    utc_now = now.astimezone(timezone.utc)
    return utc_now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ProcessUptimeClock:
    """Monotonic uptime clock anchored at construction time."""

    def __init__(self, monotonic: Callable[[], float] = time.monotonic):
        """Initialize the clock and capture the start reference.

        Args:
            monotonic: Monotonic time source in seconds.

        Raises:
            ValueError: Raised when monotonic is None.
        """

        if monotonic is None:
            raise ValueError("monotonic must not be None")
        self._monotonic = monotonic
        self._started_at = monotonic()

    def domain_uptime_seconds(self) -> float:
        """Return seconds elapsed since the clock was created.

        Returns:
            float: Non-negative, non-decreasing elapsed seconds.
        """

        return max(0.0, self._monotonic() - self._started_at)
