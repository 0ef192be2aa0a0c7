"""Main module entrypoint for local runtime execution.

This module validates startup configuration, binds the listening socket and
launches the FastAPI service.
"""

import argparse
import logging
import socket

import uvicorn

from app.bootstrap import bootstrap_create_application
from app.config import AppSettings, SettingsLoadError, config_configure_logging, config_load_settings

logger = logging.getLogger("app.main")


class ServerBindError(RuntimeError):
    """Raised when the listening socket cannot be bound."""

    def __init__(self, host: str, port: int, error: Exception):
        super().__init__(f"failed to bind {host}:{port}: {error}")
        self.host = host
        self.port = port
        self.error = error


def main_bind_socket(host: str, port: int) -> socket.socket:
    """Bind a listening TCP socket for the API server.

    Args:
        host: Interface to bind; `0.0.0.0` binds all IPv4 interfaces.
        port: TCP port to bind; 0 selects an ephemeral port.

    Returns:
        socket.socket: Bound, listening socket.

    Raises:
        ServerBindError: Raised when address resolution or binding fails.
    """

    try:
        address_family = socket.AF_INET6 if ":" in host else socket.AF_INET
        listening_socket = socket.socket(address_family, socket.SOCK_STREAM)
    except OSError as error:
        raise ServerBindError(host, port, error) from error

    try:
        listening_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listening_socket.bind((host, port))
        listening_socket.listen(socket.SOMAXCONN)
    except (OSError, OverflowError) as error:
        listening_socket.close()
        raise ServerBindError(host, port, error) from error

    listening_socket.set_inheritable(True)
    return listening_socket


def main_serve(settings: AppSettings) -> None:
    """Bind and serve the application until shutdown.

    Args:
        settings: Validated settings snapshot.

    Returns:
        None: Returns after the server shuts down.

    Raises:
        ServerBindError: Raised when the listening socket cannot be bound.
    """

    application = bootstrap_create_application(settings=settings)
    listening_socket = main_bind_socket(settings.host, settings.port)
    server = uvicorn.Server(
        uvicorn.Config(
            application,
            log_level=settings.log_level.lower(),
            access_log=False,
        )
    )
    logger.info("Server running on port %s", listening_socket.getsockname()[1])
    try:
        server.run(sockets=[listening_socket])
    finally:
        listening_socket.close()


def main() -> None:
    """Run the API server with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with code 1 on configuration or bind failure.
    """

    argument_parser = argparse.ArgumentParser(description="Main Platform API runtime entrypoint")
    argument_parser.add_argument("--host", dest="host", type=str, help="Override the HOST bind interface")
    argument_parser.add_argument("--port", dest="port", type=str, help="Override the PORT listen port")
    parsed_arguments = argument_parser.parse_args()

    try:
        settings = config_load_settings()
        overrides: dict[str, object] = {}
        if parsed_arguments.host is not None:
            overrides["host"] = parsed_arguments.host
        if parsed_arguments.port is not None:
            overrides["port"] = parsed_arguments.port
        if overrides:
            settings = AppSettings(**{**settings.model_dump(), **overrides})
    except (SettingsLoadError, ValueError) as error:
        config_configure_logging()
        logger.error("%s", error)
        raise SystemExit(1) from error

    config_configure_logging(settings.log_level)
    try:
        main_serve(settings)
    except ServerBindError as error:
        logger.error("%s", error)
        raise SystemExit(1) from error


if __name__ == "__main__":
    main()
