"""Mutation resolvers for the GraphQL API.

Provides write operations for users:
- createUser: Create a new user
- updateUsername: Change a user's username
- deleteUser: Remove a user
"""

from __future__ import annotations

import logging
from typing import Annotated

import strawberry
from strawberry.types import Info

from demo_service.features.graphql.context import GraphQLContext
from demo_service.features.graphql.error_handler import format_validation_error
from demo_service.features.graphql.resolvers.queries import parse_user_id
from demo_service.features.graphql.types.users import (
    CreateUserInput,
    UpdateUsernameInput,
    UserType,
)

logger = logging.getLogger(__name__)


def _validate_create_input(input: CreateUserInput) -> None:
    if not input.name.strip():
        raise format_validation_error("Name cannot be empty", field="name")
    if not input.username.strip():
        raise format_validation_error("Username cannot be empty", field="username")
    if input.age < 0:
        raise format_validation_error("Age cannot be negative", field="age")


@strawberry.type(description="Root mutation type")
class Mutation:
    """GraphQL Mutation resolvers."""

    @strawberry.mutation(description="Create a new user")
    def create_user(self, info: Info[GraphQLContext, None], input: CreateUserInput) -> UserType | None:
        """Create a new user.

        Raises:
            GraphQLError: VALIDATION_ERROR for an empty name or username, or a negative age
        """
        _validate_create_input(input)
        user = info.context.users.create_user(
            name=input.name,
            username=input.username,
            age=input.age,
            nationality=input.nationality,
        )
        return UserType.from_model(user)

    @strawberry.mutation(description="Change the username of an existing user")
    def update_username(
        self,
        info: Info[GraphQLContext, None],
        input: UpdateUsernameInput,
    ) -> UserType | None:
        if not input.new_username.strip():
            raise format_validation_error("Username cannot be empty", field="newUsername")
        user_id = parse_user_id(input.id)
        if user_id is None:
            return None
        user = info.context.users.update_username(user_id, input.new_username)
        if user is None:
            logger.debug("Username update for unknown user", extra={"user_id": input.id})
            return None
        return UserType.from_model(user)

    @strawberry.mutation(description="Delete a user, returning the removed record")
    def delete_user(
        self,
        info: Info[GraphQLContext, None],
        id: Annotated[strawberry.ID, strawberry.argument(description="User ID")],
    ) -> UserType | None:
        user_id = parse_user_id(id)
        if user_id is None:
            return None
        user = info.context.users.delete_user(user_id)
        return UserType.from_model(user) if user is not None else None


__all__ = ["Mutation"]
