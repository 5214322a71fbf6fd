"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kiiaren.config import Settings
from kiiaren.interface.api.routes import domains, health, invite_links, workspaces
from kiiaren.interface.error import register_error_handlers
from kiiaren.util.di.container import create_container, setup_di
from kiiaren.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.

    Args:
        container: DI container to use; the production container by default
    """
    settings = Settings()

    # Outbound DNS-over-HTTPS lookups go through httpx
    instrument_httpx()

    app_instance = FastAPI(
        title="Kiiaren Trust API",
        description="Domain verification and invite links for Kiiaren workspaces",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(workspaces.router)
    app_instance.include_router(domains.router)
    app_instance.include_router(invite_links.router)

    register_error_handlers(app_instance)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
