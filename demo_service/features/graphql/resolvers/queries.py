"""Query resolvers for the GraphQL API.

Provides read operations:
- users: every user followed by every admin (UserAdmin union)
- user(id): a single user, looked up through the request's DataLoader
- movies: every movie (Movie interface)
- movie(name): a single movie by exact name
"""

from __future__ import annotations

import logging
from typing import Annotated

import strawberry
from strawberry.types import Info

from demo_service.features.graphql.context import GraphQLContext
from demo_service.features.graphql.error_handler import UserNotExistsError
from demo_service.features.graphql.types.movies import MovieInterface, movie_to_graphql
from demo_service.features.graphql.types.users import AdminType, UserAdmin, UserType

logger = logging.getLogger(__name__)

UserIdArg = Annotated[strawberry.ID, strawberry.argument(description="User ID")]
MovieNameArg = Annotated[str, strawberry.argument(description="Exact movie name")]


def parse_user_id(value: strawberry.ID) -> int | None:
    """Parse a GraphQL ID into a numeric user id (None when not numeric)."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@strawberry.type(description="Root query type")
class Query:
    """GraphQL Query resolvers."""

    @strawberry.field(description="All users followed by all admins")
    def users(self, info: Info[GraphQLContext, None]) -> list[UserAdmin]:
        repository = info.context.users
        return [
            *(UserType.from_model(user) for user in repository.list_users()),
            *(AdminType.from_model(admin) for admin in repository.list_admins()),
        ]

    @strawberry.field(description="Get a single user by ID")
    async def user(self, info: Info[GraphQLContext, None], id: UserIdArg) -> UserType:
        """Get a user by ID.

        Raises:
            UserNotExistsError: If no user has this ID
        """
        user_id = parse_user_id(id)
        user = await info.context.loaders.users.load(user_id) if user_id is not None else None
        if user is None:
            logger.debug("User lookup missed", extra={"user_id": id})
            raise UserNotExistsError(id)
        return UserType.from_model(user)

    @strawberry.field(description="All movies")
    def movies(self, info: Info[GraphQLContext, None]) -> list[MovieInterface]:
        return [movie_to_graphql(movie) for movie in info.context.movies.list_movies()]

    @strawberry.field(description="Get a single movie by name")
    def movie(self, info: Info[GraphQLContext, None], name: MovieNameArg) -> MovieInterface:
        return movie_to_graphql(info.context.movies.require_movie_by_name(name))


__all__ = ["Query", "parse_user_id"]
