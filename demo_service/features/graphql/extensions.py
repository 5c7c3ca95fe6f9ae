"""Strawberry extensions for the GraphQL schema.

Provides:
- Query depth limiting (GRAPHQL_MAX_QUERY_DEPTH, default 10)
- Introspection blocking when GRAPHQL_INTROSPECTION_ENABLED=false
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import TYPE_CHECKING

from graphql.validation import NoSchemaIntrospectionCustomRule
from strawberry.extensions import AddValidationRules, QueryDepthLimiter, SchemaExtension

from demo_service.core.settings import get_graphql_settings

if TYPE_CHECKING:
    from demo_service.core.settings.graphql import GraphQLSettings

logger = logging.getLogger(__name__)


def get_extensions(settings: GraphQLSettings | None = None) -> list[Callable[[], SchemaExtension]]:
    """Get list of Strawberry extension factories for the schema.

    Strawberry calls each factory once per operation, so no extension state
    is shared between requests.

    Args:
        settings: GraphQL settings (defaults to the cached environment settings)

    Returns:
        List of zero-argument extension factories
    """
    settings = settings or get_graphql_settings()
    max_depth = settings.max_query_depth

    extensions: list[Callable[[], SchemaExtension]] = [
        # Limit query depth to prevent abuse
        lambda: QueryDepthLimiter(max_depth=max_depth),
    ]
    if not settings.introspection_enabled:
        extensions.append(lambda: AddValidationRules([NoSchemaIntrospectionCustomRule]))

    logger.debug(
        "GraphQL extensions configured",
        extra={
            "max_query_depth": settings.max_query_depth,
            "introspection_enabled": settings.introspection_enabled,
        },
    )
    return extensions


__all__ = ["get_extensions"]
