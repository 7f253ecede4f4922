#!/usr/bin/env python3
"""Upgrade the club database to the latest alembic revision."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from club.config import Settings
from club.util.logging import setup_logging
from club.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The deploy must stop rather than serve a stale schema
            raise

    logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
