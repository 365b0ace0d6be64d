# project_manager/cli/serve_cli.py

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn
from pydantic import ValidationError as SettingsError

from project_manager.config import get_settings
from project_manager.db.store import open_store
from project_manager.errors import StartupError
from project_manager.logging_config import configure_logging

APP_FACTORY = "project_manager.api.main:create_app"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run the project manager HTTP API."
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Interface to bind. Defaults to HOST from settings.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on. Defaults to PORT from settings (8080).",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change (development only).",
    )

    args = parser.parse_args(argv)

    logger = logging.getLogger(__name__)
    try:
        settings = get_settings()
    except SettingsError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("Invalid configuration (is DATABASE_URL set?): %s", exc)
        return 1

    configure_logging(settings)

    # Fail fast before uvicorn starts; the app opens its own store on startup.
    try:
        open_store(settings).dispose()
    except StartupError as exc:
        logger.error("%s", exc)
        return 1

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("Starting server on %s:%d", host, port)

    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=host,
        port=port,
        reload=args.reload,
        log_config=None,  # keep the handlers configure_logging installed
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
