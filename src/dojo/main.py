from __future__ import annotations

import argparse
import logging
import socket
import sys
from collections.abc import Sequence
from typing import Any, get_args

import uvicorn
from pydantic import ValidationError

from dojo.app import create_app
from dojo.bootstrap import resolve_dependencies
from dojo.logging_config import configure_logging
from dojo.settings import LogLevel, Settings

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dojo", description="Serve the warrior HTTP API.")
    parser.add_argument("--host", help="Interface to bind (default: DOJO_HOST or 127.0.0.1).")
    parser.add_argument("--port", type=int, help="TCP port to bind (default: DOJO_PORT or 3000).")
    parser.add_argument(
        "--log-level",
        choices=get_args(LogLevel),
        help="Logging level (default: DOJO_LOG_LEVEL or INFO).",
    )
    return parser


class DojoServer(uvicorn.Server):
    """uvicorn server that reports the listening address once its sockets are bound."""

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server is running on http://%s:%d", self.config.host, self.config.port)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the HTTP server and return the process exit code."""
    args = _build_parser().parse_args(argv)
    overrides: dict[str, Any] = {
        name: value
        for name, value in (("host", args.host), ("port", args.port), ("log_level", args.log_level))
        if value is not None
    }

    try:
        settings = Settings(**overrides)
    except ValidationError:
        logger.exception("Error starting server: invalid settings")
        return 1
    configure_logging(settings.log_level)

    container = resolve_dependencies()
    container.add_instance(settings, provides=Settings)
    server = DojoServer(
        uvicorn.Config(
            create_app(container),
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        ),
    )

    try:
        server.run()
    except SystemExit as exc:
        # uvicorn exits on its own when the listening socket cannot be bound.
        if server.started:
            raise
        logger.error(
            "Error starting server on %s:%d (uvicorn exit status %s)",
            settings.host,
            settings.port,
            exc.code,
        )
        return 1
    except OSError:
        logger.exception("Error starting server on %s:%d", settings.host, settings.port)
        return 1

    if not server.started:
        logger.error("Server failed to start on %s:%d", settings.host, settings.port)
        return 1
    return 0


def run() -> None:
    sys.exit(main())
