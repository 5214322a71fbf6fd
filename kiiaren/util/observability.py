"""Observability configuration using Logfire.

Services and use cases open ``logfire.span`` blocks around each operation
and emit structured events with ``logfire.info`` / ``logfire.warn``. This
module configures the exporter once per process and instruments the
libraries whose calls we want traced automatically: FastAPI requests,
SQLAlchemy queries and outbound httpx calls (DNS-over-HTTPS lookups).
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from kiiaren.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Telemetry is sent to Logfire cloud only when explicitly enabled or when
    a token is configured (``OBSERVABILITY__LOGFIRE_TOKEN``); otherwise
    output stays on the console.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": "kiiaren-trust",
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        dns_backend=settings.dns.backend,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        return result

    # Headers carry the session cookie; keep them out of traces
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL queries issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound httpx requests."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
