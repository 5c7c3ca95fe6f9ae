"""GraphQL types for the demo schema."""

from __future__ import annotations

from demo_service.features.graphql.types.movies import (
    MovieInterface,
    TheaterMovieType,
    TvMovieType,
    movie_to_graphql,
)
from demo_service.features.graphql.types.users import (
    AdminType,
    CreateUserInput,
    UpdateUsernameInput,
    UserAdmin,
    UserType,
)

__all__ = [
    "AdminType",
    "CreateUserInput",
    "MovieInterface",
    "TheaterMovieType",
    "TvMovieType",
    "UpdateUsernameInput",
    "UserAdmin",
    "UserType",
    "movie_to_graphql",
]
