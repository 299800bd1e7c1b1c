"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tbn.config import Settings
from tbn.interface.api.routes import auth, broadcast, comments, health, users
from tbn.util.di.container import create_container, setup_di
from tbn.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)

API_PREFIX = "/api"


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    # Instrument httpx for outbound HTTP requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="TBN Backend API",
        description="Backend API for the TBN traffic radio app - accounts, "
        "regional broadcast info and listener comments",
        version="0.1.0",
        debug=settings.debug,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # The mobile client sends bearer tokens, not cookies
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router, prefix=API_PREFIX)
    app_instance.include_router(users.router, prefix=API_PREFIX)
    app_instance.include_router(broadcast.router, prefix=API_PREFIX)
    app_instance.include_router(comments.router, prefix=API_PREFIX)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
