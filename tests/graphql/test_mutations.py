"""Tests for GraphQL mutation resolvers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from demo_service.features.graphql.schema import schema

if TYPE_CHECKING:
    from demo_service.features.graphql.context import GraphQLContext
    from demo_service.features.users.repository import UserRepository

CREATE_USER = """
    mutation CreateUser($input: CreateUserInput!) {
        createUser(input: $input) {
            id
            name
            username
            age
            nationality
            friends { id }
        }
    }
"""

UPDATE_USERNAME = """
    mutation UpdateUsername($input: UpdateUsernameInput!) {
        updateUsername(input: $input) {
            id
            username
        }
    }
"""

DELETE_USER = """
    mutation DeleteUser($id: ID!) {
        deleteUser(id: $id) {
            id
            name
        }
    }
"""


@pytest.mark.asyncio
async def test_create_user_defaults_to_brazil(
    graphql_context: GraphQLContext,
    user_repository: UserRepository,
) -> None:
    result = await schema.execute(
        CREATE_USER,
        variable_values={"input": {"name": "Ana", "username": "ana", "age": 31}},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["createUser"] == {
        "id": "6",
        "name": "Ana",
        "username": "ana",
        "age": 31,
        "nationality": "BRAZIL",
        "friends": [],
    }
    assert user_repository.get_user(6) is not None


@pytest.mark.asyncio
async def test_create_user_with_nationality(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        CREATE_USER,
        variable_values={
            "input": {"name": "Jan", "username": "jan", "age": 40, "nationality": "SLOVAKIA"},
        },
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["createUser"]["nationality"] == "SLOVAKIA"


@pytest.mark.asyncio
async def test_create_user_rejects_explicit_null_nationality(
    graphql_context: GraphQLContext,
    user_repository: UserRepository,
) -> None:
    result = await schema.execute(
        CREATE_USER,
        variable_values={
            "input": {"name": "Jan", "username": "jan", "age": 40, "nationality": None},
        },
        context_value=graphql_context,
    )

    assert result.data is None
    [error] = result.errors
    assert "Nationality!" in error.message
    assert len(user_repository.list_users()) == 5


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("user_input", "field"),
    [
        ({"name": " ", "username": "ana", "age": 31}, "name"),
        ({"name": "Ana", "username": "", "age": 31}, "username"),
        ({"name": "Ana", "username": "ana", "age": -1}, "age"),
    ],
)
async def test_create_user_validation(
    graphql_context: GraphQLContext,
    user_repository: UserRepository,
    user_input: dict,
    field: str,
) -> None:
    result = await schema.execute(
        CREATE_USER,
        variable_values={"input": user_input},
        context_value=graphql_context,
    )

    assert result.data == {"createUser": None}
    [error] = result.errors
    assert error.extensions == {"code": "VALIDATION_ERROR", "field": field}
    assert len(user_repository.list_users()) == 5


@pytest.mark.asyncio
async def test_update_username(
    graphql_context: GraphQLContext,
    user_repository: UserRepository,
) -> None:
    result = await schema.execute(
        UPDATE_USERNAME,
        variable_values={"input": {"id": "2", "newUsername": "pedro"}},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["updateUsername"] == {"id": "2", "username": "pedro"}
    assert user_repository.get_user(2).username == "pedro"


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id", ["99", "abc"])
async def test_update_username_unknown_user(
    graphql_context: GraphQLContext,
    user_id: str,
) -> None:
    result = await schema.execute(
        UPDATE_USERNAME,
        variable_values={"input": {"id": user_id, "newUsername": "ghost"}},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["updateUsername"] is None


@pytest.mark.asyncio
async def test_delete_user_returns_removed_user(
    graphql_context: GraphQLContext,
    user_repository: UserRepository,
) -> None:
    result = await schema.execute(
        DELETE_USER,
        variable_values={"id": "5"},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["deleteUser"] == {"id": "5", "name": "Kelly"}
    assert user_repository.get_user(5) is None


@pytest.mark.asyncio
async def test_delete_unknown_user_returns_null(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        DELETE_USER,
        variable_values={"id": "99"},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["deleteUser"] is None


@pytest.mark.asyncio
async def test_deleted_friend_is_dropped_from_friends(graphql_context: GraphQLContext) -> None:
    await schema.execute(DELETE_USER, variable_values={"id": "5"}, context_value=graphql_context)

    result = await schema.execute(
        "{ user(id: 1) { friends { id } } }",
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["user"]["friends"] == [{"id": "2"}]
