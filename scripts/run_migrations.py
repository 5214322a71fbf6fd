#!/usr/bin/env python3
"""Upgrade the trust schema to the latest Alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from kiiaren.config import Settings
from kiiaren.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)

    target = make_url(settings.database_url)
    with logfire.span(
        "Upgrading schema to {revision}",
        revision=revision,
        database_host=target.host,
        database_name=target.database,
    ):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            # The deploy must stop rather than serve a half-migrated schema
            logfire.error(
                "Schema upgrade failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise
    logfire.info("Schema is at {revision}", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
