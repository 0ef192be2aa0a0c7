"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from app.api import create_api_application
from app.config import AppSettings, config_load_settings
from app.domain import ProcessUptimeClock

# Anchored at import so uptime covers the whole process lifetime.
_PROCESS_UPTIME_CLOCK = ProcessUptimeClock()


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings if settings is not None else config_load_settings()
    return create_api_application(settings=resolved_settings, uptime_clock=_PROCESS_UPTIME_CLOCK)
