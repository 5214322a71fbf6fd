#!/usr/bin/env python3
"""Serve the trust API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from kiiaren.config import Settings
from kiiaren.util.observability import configure_logfire

APP_TARGET = "kiiaren.interface.api.app:app"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    logfire.info(
        "Starting trust API",
        port=settings.port,
        environment=settings.environment,
        dns_backend=settings.dns.backend,
        frontend_url=settings.api.frontend_url,
    )
    try:
        # Importing the app calls configure_logfire again, which is a no-op
        uvicorn.run(
            APP_TARGET,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Trust API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
