#!/usr/bin/env python3
"""
storysheet run script.

Starts the API under uvicorn. Host, port and log level default to the
HOST/PORT/LOG_LEVEL environment values.
"""

from __future__ import annotations

import argparse
import logging

import uvicorn

from storysheet import __version__
from storysheet.config import Settings
from storysheet.log import configure_logging

logger = logging.getLogger("storysheet.run")


def main(argv: list[str] | None = None) -> None:
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="storysheet API server")
    parser.add_argument("--version", action="version", version=f"storysheet {__version__}")
    parser.add_argument("--host", type=str, default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.add_argument("--log-level", type=str, default=settings.log_level, help="Log level")

    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logger.info("Server is running on http://%s:%d", args.host, args.port)

    uvicorn.run(
        "storysheet.api.run:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
