#!/usr/bin/env python3
"""Start the gitusers API under uvicorn."""

import sys

import logfire
import uvicorn

from gitusers.config import Settings
from gitusers.util.logging import setup_logging
from gitusers.util.observability import configure_logfire


def main() -> int:
    """Configure logging, then serve the API until shutdown."""
    settings = Settings()

    # Before the app import so startup errors are reported
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting gitusers API",
        host=settings.host,
        port=settings.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "gitusers.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("gitusers API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
