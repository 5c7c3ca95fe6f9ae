"""GraphQL types for the users feature.

Provides:
- UserType / AdminType: GraphQL representations of the two account kinds
- UserAdmin: union returned by the ``users`` query
- Input types: CreateUserInput, UpdateUsernameInput
"""

from __future__ import annotations

from typing import Annotated

import strawberry
from strawberry.types import Info

from demo_service.features.graphql.context import GraphQLContext
from demo_service.features.graphql.types.movies import MovieInterface, movie_to_graphql
from demo_service.features.users.models import Admin, AdminRole, Nationality, User

NationalityEnum = strawberry.enum(Nationality, name="Nationality", description="Nationality of a user")
AdminRoleEnum = strawberry.enum(AdminRole, name="AdminRole", description="Permission level of an admin")


@strawberry.type(name="User", description="A regular user of the demo")
class UserType:
    """GraphQL type for User records.

    ``friends`` is resolved lazily through the request's user DataLoader, so
    a list of users resolves every friend list with one bulk lookup.
    """

    id: strawberry.ID
    name: str
    username: str
    age: int | None
    nationality: Nationality
    friend_ids: strawberry.Private[list[int] | None] = None

    @strawberry.field(description="Friends of this user")
    async def friends(self, info: Info[GraphQLContext, None]) -> list[UserType] | None:
        if not self.friend_ids:
            return []
        users = await info.context.loaders.users.load_many(self.friend_ids)
        return [UserType.from_model(user) for user in users if user is not None]

    @strawberry.field(description="Movies published between 2000 and 2010")
    def favorite_movies(self, info: Info[GraphQLContext, None]) -> list[MovieInterface] | None:
        return [movie_to_graphql(movie) for movie in info.context.movies.list_favorite_movies()]

    @classmethod
    def from_model(cls, user: User) -> UserType:
        """Convert a User record to the GraphQL type."""
        return cls(
            id=strawberry.ID(str(user.id)),
            name=user.name,
            username=user.username,
            age=user.age,
            nationality=user.nationality,
            friend_ids=list(user.friends) if user.friends is not None else None,
        )


@strawberry.type(name="Admin", description="An administrator account")
class AdminType:
    id: strawberry.ID
    name: str
    username: str
    role: AdminRole

    @classmethod
    def from_model(cls, admin: Admin) -> AdminType:
        return cls(
            id=strawberry.ID(str(admin.id)),
            name=admin.name,
            username=admin.username,
            role=admin.role,
        )


UserAdmin = Annotated[UserType | AdminType, strawberry.union("UserAdmin")]


# --- Input Types ---


@strawberry.input(description="Input for creating a new user")
class CreateUserInput:
    name: str
    username: str
    age: int
    nationality: Nationality = Nationality.BRAZIL


@strawberry.input(description="Input for changing a user's username")
class UpdateUsernameInput:
    id: strawberry.ID
    new_username: str


__all__ = [
    "AdminRoleEnum",
    "AdminType",
    "CreateUserInput",
    "NationalityEnum",
    "UpdateUsernameInput",
    "UserAdmin",
    "UserType",
]
