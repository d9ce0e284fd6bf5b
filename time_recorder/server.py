"""HTTP server entry point for the Yorozuya time recorder service.

Exposes two endpoints:
- POST /time-recorder/toggle: clock in or out depending on today's state
- POST /time-recorder/status: report today's arrival and departure times
"""

from __future__ import annotations

import logging
import sys

from aiohttp import web

from .config import HOST, LOG_LEVEL, PORT
from .web.app import create_app

logger = logging.getLogger("time_recorder")


def resolve_log_level(name: str) -> int:
    """Map a LOG_LEVEL name to its numeric level, falling back to INFO."""
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    logger.warning(f"Unknown LOG_LEVEL {name!r}, using INFO")
    return logging.INFO


def configure_logging(level: str = LOG_LEVEL):
    resolved = resolve_log_level(level)
    logging.basicConfig(
        stream=sys.stdout,
        level=resolved,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )


def main():
    """Run the time recorder HTTP service."""
    configure_logging()
    logger.info(f"Starting server on {HOST}:{PORT}...")
    # Requests are logged by access_log_middleware instead.
    web.run_app(create_app(), host=HOST, port=PORT, access_log=None, print=None)


if __name__ == "__main__":
    main()
