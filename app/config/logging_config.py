"""Process logging configuration shared by the runtime entrypoint."""

import logging
import sys

LOG_FORMAT = "%(asctime)s.%(msecs)03d - %(levelname)s - %(name)s:%(lineno)d - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def config_configure_logging(level: str = "INFO") -> logging.Logger:
    """Configure the `app` logger hierarchy with a single stdout handler.

    Repeated calls replace the previously installed handler instead of
    stacking duplicates.

    Args:
        level: Logging level name.

    Returns:
        logging.Logger: Configured `app` root logger.

    Raises:
        ValueError: Raised when the level name is unknown to logging.
    """

    resolved_level = logging.getLevelName(level.upper())
    if not isinstance(resolved_level, int):
        raise ValueError(f"unknown log level: {level}")

    logger = logging.getLogger("app")
    logger.setLevel(resolved_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
