"""GraphQL router for FastAPI integration.

Provides:
- GraphQL endpoint (mounted at GRAPHQL_PATH by app/router.py)
- GraphQL IDE options (GraphiQL, Apollo Sandbox, Pathfinder, or disabled)
- Request context with repositories and DataLoaders
- Response-side error formatting (see error_handler.py)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Any, cast

from fastapi import BackgroundTasks, Depends, Request, Response
from strawberry.fastapi import GraphQLRouter

from demo_service.core.settings import get_graphql_settings
from demo_service.features.graphql.context import GraphQLContext, build_graphql_context
from demo_service.features.graphql.error_handler import process_graphql_errors
from demo_service.features.graphql.schema import create_schema
from demo_service.features.movies.repository import MovieRepository, get_movie_repository
from demo_service.features.users.repository import UserRepository, get_user_repository

if TYPE_CHECKING:
    import strawberry
    from strawberry.http import GraphQLHTTPResponse
    from strawberry.types import ExecutionResult

    from demo_service.core.settings.graphql import GraphQLSettings

logger = logging.getLogger(__name__)


async def get_graphql_context(
    request: Request,
    response: Response,
    background_tasks: BackgroundTasks,
    users: Annotated[UserRepository, Depends(get_user_repository)],
    movies: Annotated[MovieRepository, Depends(get_movie_repository)],
) -> GraphQLContext:
    """Create GraphQL context from FastAPI dependencies.

    Following Strawberry's FastAPI integration pattern, this provides
    the standard context fields (request, response, background_tasks)
    plus application-specific dependencies.

    Args:
        request: FastAPI request
        response: FastAPI response (for setting headers/cookies)
        background_tasks: FastAPI background tasks
        users: User repository from dependency
        movies: Movie repository from dependency

    Returns:
        GraphQLContext for use in resolvers
    """
    correlation_id = getattr(request.state, "correlation_id", None)

    return build_graphql_context(
        users=users,
        movies=movies,
        request=request,
        response=response,
        background_tasks=background_tasks,
        correlation_id=correlation_id,
    )


class DemoGraphQLRouter(GraphQLRouter):
    """GraphQLRouter that formats errors before they reach the client."""

    async def process_result(
        self,
        request: Request,
        result: ExecutionResult,
    ) -> GraphQLHTTPResponse:
        data: GraphQLHTTPResponse = {"data": result.data}
        if result.errors:
            data["errors"] = process_graphql_errors(result.errors)
        if result.extensions:
            data["extensions"] = result.extensions
        return data


def create_graphql_router(
    schema: strawberry.Schema | None = None,
    settings: GraphQLSettings | None = None,
) -> DemoGraphQLRouter:
    """Create GraphQL router with settings-based configuration.

    The router serves its own root; app/router.py mounts it under GRAPHQL_PATH.
    """
    settings = settings or get_graphql_settings()

    graphql_ide = settings.get_graphql_ide()
    graphql_app = DemoGraphQLRouter(
        schema or create_schema(settings),
        context_getter=cast("Any", get_graphql_context),
        graphql_ide=graphql_ide or None,
    )

    logger.debug("GraphQL router created", extra={"graphql_ide": graphql_ide or None})
    return graphql_app


__all__ = ["DemoGraphQLRouter", "create_graphql_router", "get_graphql_context"]
