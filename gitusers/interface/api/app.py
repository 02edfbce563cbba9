"""FastAPI application."""

from fastapi import FastAPI

from gitusers.interface.api.routes import health, users
from gitusers.interface.error import register_error_handlers
from gitusers.util.di.container import create_container, setup_di
from gitusers.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    # Instrument httpx for git provider requests
    instrument_httpx()

    app_instance = FastAPI(
        title="gitusers",
        description="Resolves git provider identities to canonical user records",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)

    return app_instance


# Create app instance for uvicorn
app = create_app()
