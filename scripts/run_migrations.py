#!/usr/bin/env python3
"""Apply Alembic migrations to the configured database.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f6a2b9d40
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from stackit.config import Settings
from stackit.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    """Upgrade the schema and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"

    try:
        logfire.info("Starting database migrations", target=target)

        alembic_cfg = Config(str(ALEMBIC_INI))
        alembic_cfg.set_main_option(
            "script_location", str(ALEMBIC_INI.parent / "migrations")
        )
        command.upgrade(alembic_cfg, target)

        logfire.info("Database migrations completed", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # The app must not start against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
