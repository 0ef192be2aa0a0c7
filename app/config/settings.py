"""Typed runtime settings with dotenv support and startup validation."""

import re

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_APPLICATION_PORT = 3000

_LEADING_INTEGER_PATTERN = re.compile(r"^\s*([+-]?\d+)")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the API runtime.

    Environment variable names map directly to field names in uppercase and
    follow the platform conventions shared with other services.
    Example: `port` reads from `PORT`.

    Attributes:
        host: Host interface for web server binding.
        port: Web server port.
        node_env: Runtime environment label, or None when unset.
        log_level: Logging level name for process logging.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=DEFAULT_APPLICATION_PORT)
    node_env: str | None = Field(default=None)
    log_level: str = Field(default="INFO")

    @field_validator("host")
    @classmethod
    def _validate_host(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("port", mode="before")
    @classmethod
    def _parse_port(cls, value: object) -> int:
        return config_parse_port(value)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unsupported log level: {value}")
        return normalized_value


def config_parse_port(raw_value: object) -> int:
    """Parse a listen port leniently, falling back to the default port.

    The leading integer digits of a string are used (`"8080abc"` parses as
    8080). Values without a leading integer resolve to the default port.
    Range is not checked here; an unusable port fails when the socket binds.

    Args:
        raw_value: Raw port value from the environment or caller.

    Returns:
        int: Parsed port number.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if isinstance(raw_value, bool):
        return DEFAULT_APPLICATION_PORT
    if isinstance(raw_value, int):
        return raw_value

    match = _LEADING_INTEGER_PATTERN.match(str(raw_value or ""))
    if match is None:
        return DEFAULT_APPLICATION_PORT
    return int(match.group(1))


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
