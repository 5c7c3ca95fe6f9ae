"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from demo_service.app.exception_handlers import configure_exception_handlers
from demo_service.app.lifespan import lifespan
from demo_service.app.middleware import configure_middleware
from demo_service.app.router import setup_routers
from demo_service.core.settings import get_settings


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Uses unified settings from core.settings for all configuration.
    Settings are loaded once and cached via LRU cache.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()
    app_settings = settings.app

    app = FastAPI(
        title=app_settings.title,
        description=app_settings.description,
        version=app_settings.version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    # Configure exception handlers (must be before middleware)
    configure_exception_handlers(app)

    configure_middleware(app)

    setup_routers(app, settings.graphql)

    return app


# Application instance for uvicorn
app = create_app()
