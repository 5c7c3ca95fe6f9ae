"""Application lifespan management.

Startup configures logging and reports the seeded in-memory stores.
Shutdown stops the background log listener.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import TYPE_CHECKING

from demo_service.core.settings import get_app_settings, get_logging_settings
from demo_service.features.movies.repository import get_movie_repository
from demo_service.features.users.repository import get_user_repository
from demo_service.infra.logging.config import setup_logging, shutdown

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup and shutdown."""
    app_settings = get_app_settings()
    setup_logging(get_logging_settings(), service_name=app_settings.service_name)

    users = get_user_repository()
    movies = get_movie_repository()
    logger.info(
        "Application starting",
        extra={
            "service": app_settings.service_name,
            "version": app_settings.version,
            "environment": app_settings.environment,
            "users": len(users.list_users()),
            "admins": len(users.list_admins()),
            "movies": len(movies.list_movies()),
        },
    )

    try:
        yield
    finally:
        logger.info("Application shutting down", extra={"service": app_settings.service_name})
        shutdown()
