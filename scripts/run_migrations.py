#!/usr/bin/env python3
"""Apply identity store migrations before the API starts."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from gitusers.config import Settings
from gitusers.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to the given revision."""
    settings = Settings()
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")
    with logfire.span("Database migration", revision=revision):
        try:
            command.upgrade(alembic_cfg, revision)
        except Exception:
            # Fail the container rather than serve with an outdated schema
            logfire.exception("Database migration failed", revision=revision)
            raise
    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
