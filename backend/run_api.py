#!/usr/bin/env python
"""
Run the Storefront API server.

Usage:
    python run_api.py
    python run_api.py --reload  # Development mode
    storefront-api --port 9000 --log-level debug
"""

import argparse
import logging

import uvicorn

from shared.config import get_settings


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def main():
    parser = argparse.ArgumentParser(description="Run Storefront API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument("--log-level", type=str, help="Logging level (e.g. info, debug)")
    args = parser.parse_args()

    settings = get_settings()
    log_level = args.log_level or settings.log_level
    configure_logging(log_level)

    uvicorn.run(
        "api.app:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    main()
