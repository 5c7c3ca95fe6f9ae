"""Router registry and setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from demo_service.core.settings import get_graphql_settings
from demo_service.features.graphql.router import create_graphql_router
from demo_service.features.health.router import router as health_router

if TYPE_CHECKING:
    from fastapi import FastAPI

    from demo_service.core.settings.graphql import GraphQLSettings

logger = logging.getLogger(__name__)


def setup_routers(app: FastAPI, graphql_settings: GraphQLSettings | None = None) -> None:
    """Register all feature routers with the application.

    Args:
        app: FastAPI application instance.
        graphql_settings: Optional override controlling GraphQL availability.
    """
    graphql_settings = graphql_settings or get_graphql_settings()

    app.include_router(health_router)

    # Include GraphQL endpoint if enabled
    if graphql_settings.enabled:
        app.include_router(
            create_graphql_router(settings=graphql_settings),
            prefix=graphql_settings.path,
            tags=["graphql"],
        )
        logger.info(
            "GraphQL endpoint enabled at %s (IDE: %s)",
            graphql_settings.path,
            "enabled" if graphql_settings.playground_enabled else "disabled",
        )
    else:
        logger.info("GraphQL endpoint disabled")
