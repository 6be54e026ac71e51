#!/usr/bin/env python3
"""Apply Alembic migrations before the API starts."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from menumaster.config import Settings
from menumaster.util.logging import setup_logging
from menumaster.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to head, reporting failures to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The container must not start against a half-migrated schema
            raise

    logfire.info("Database migrations completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
