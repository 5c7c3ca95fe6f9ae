"""GraphQL context for request-scoped dependencies.

The context is created fresh for each GraphQL request and provides:
- The incoming request (headers included) and outgoing response
- The user and movie repositories
- DataLoaders (for N+1 prevention)
- Correlation ID (for log correlation)

Following Strawberry's FastAPI integration pattern:
https://strawberry.rocks/docs/integrations/fastapi#context_getter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from strawberry.fastapi import BaseContext

from demo_service.features.graphql.dataloaders import create_dataloaders
from demo_service.features.movies.repository import get_movie_repository
from demo_service.features.users.repository import get_user_repository

if TYPE_CHECKING:
    from starlette.background import BackgroundTasks
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.websockets import WebSocket

    from demo_service.features.graphql.dataloaders import DataLoaders
    from demo_service.features.movies.repository import MovieRepository
    from demo_service.features.users.repository import UserRepository


@dataclass
class GraphQLContext(BaseContext):
    """Request context for GraphQL operations.

    Standard fields (per Strawberry docs):
    - request: The HTTP request (or None outside HTTP)
    - response: The HTTP response (for setting headers/cookies)
    - background_tasks: FastAPI BackgroundTasks

    Custom fields:
    - users / movies: repositories the resolvers read and mutate
    - loaders: DataLoaders (request-scoped)
    - correlation_id: For log correlation

    Example usage in resolver:
        @strawberry.field
        async def friends(self, info: Info[GraphQLContext, None]) -> list[UserType] | None:
            users = await info.context.loaders.users.load_many(self.friend_ids)
            ...
    """

    request: Request | WebSocket | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None

    users: UserRepository = field(default=None)  # type: ignore[assignment]
    movies: MovieRepository = field(default=None)  # type: ignore[assignment]
    loaders: DataLoaders = field(default=None)  # type: ignore[assignment]
    correlation_id: str | None = None

    @property
    def headers(self) -> dict[str, str]:
        """Headers of the incoming request (empty outside HTTP)."""
        if self.request is None:
            return {}
        return dict(self.request.headers)


def build_graphql_context(
    users: UserRepository | None = None,
    movies: MovieRepository | None = None,
    **kwargs: Any,
) -> GraphQLContext:
    """Build a context with fresh DataLoaders.

    Repositories default to the process-wide instances. Used by the HTTP
    context getter, the CLI and tests.
    """
    users = users or get_user_repository()
    movies = movies or get_movie_repository()
    return GraphQLContext(
        users=users,
        movies=movies,
        loaders=create_dataloaders(users),
        **kwargs,
    )


__all__ = ["GraphQLContext", "build_graphql_context"]
