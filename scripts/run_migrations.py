#!/usr/bin/env python3
"""Apply Alembic migrations to the accounts/comments database."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from tbn.config import Settings
from tbn.util.observability import configure_logfire


def main(target: str = "head") -> int:
    """Upgrade the schema to ``target`` and report failures to Logfire."""
    settings = Settings()

    configure_logfire(settings)

    try:
        logfire.info(
            "Starting database migrations",
            environment=settings.environment,
            target=target,
        )

        # env.py reads the URL from Settings, not from alembic.ini
        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, target)

        logfire.info("Database migrations completed successfully", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
