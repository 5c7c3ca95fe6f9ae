"""Tests for GraphQL query resolvers."""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING

import pytest

from demo_service.features.graphql.context import build_graphql_context
from demo_service.features.graphql.schema import schema
from tests.graphql.conftest import MOVIE_FIELDS, USER_QUERY

if TYPE_CHECKING:
    from demo_service.features.graphql.context import GraphQLContext


@pytest.mark.asyncio
async def test_user_query_returns_user_with_friends(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        USER_QUERY,
        variable_values={"id": "1"},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data == {
        "user": {
            "id": "1",
            "name": "John",
            "username": "john",
            "age": 20,
            "nationality": "CANADA",
            "friends": [
                {"id": "2", "name": "Pedro"},
                {"id": "5", "name": "Kelly"},
            ],
        }
    }


@pytest.mark.asyncio
async def test_user_without_friends_has_empty_list(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        USER_QUERY,
        variable_values={"id": "2"},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["user"]["friends"] == []


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id", ["99", "not-a-number"])
async def test_user_query_raises_user_not_exists(
    graphql_context: GraphQLContext,
    user_id: str,
) -> None:
    result = await schema.execute(
        USER_QUERY,
        variable_values={"id": user_id},
        context_value=graphql_context,
    )

    assert result.data is None
    [error] = result.errors
    assert error.extensions == {"code": "USER_NOT_EXISTS", "userId": user_id}


@pytest.mark.asyncio
async def test_users_query_returns_users_then_admins(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        """
        {
            users {
                __typename
                ... on User { id username }
                ... on Admin { id username role }
            }
        }
        """,
        context_value=graphql_context,
    )

    assert result.errors is None
    users = result.data["users"]
    assert [item["__typename"] for item in users] == ["User"] * 5 + ["Admin"] * 3
    assert users[5] == {
        "__typename": "Admin",
        "id": "1",
        "username": "andrew001",
        "role": "SUPERADMIN",
    }


@pytest.mark.asyncio
async def test_get_all_users_operation(graphql_context: GraphQLContext) -> None:
    from demo_service.client import QUERY_ALL_USERS

    result = await schema.execute(QUERY_ALL_USERS, context_value=graphql_context)

    assert result.errors is None
    john = result.data["users"][0]
    assert john["name"] == "John"
    assert john["age"] == 20
    assert [friend["name"] for friend in john["friends"]] == ["Pedro", "Kelly"]
    assert [movie["name"] for movie in john["friends"][0]["favoriteMovies"]] == [
        "Interstellar",
        "Superbad",
    ]


@pytest.mark.asyncio
async def test_movies_query_resolves_interface_types(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        "{ movies {" + MOVIE_FIELDS + "} }",
        context_value=graphql_context,
    )

    assert result.errors is None
    movies = result.data["movies"]
    assert len(movies) == 5
    assert movies[0] == {
        "__typename": "TheaterMovie",
        "name": "Avengers Endgame",
        "yearOfPublication": 2019,
        "isInTheaters": True,
    }
    assert movies[4] == {
        "__typename": "TvMovie",
        "name": "Sherlock: The Abominable Bride",
        "yearOfPublication": 2016,
        "yearFirstAired": 2016,
    }


@pytest.mark.asyncio
async def test_movie_query_by_name(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        "query ($name: String!) { movie(name: $name) {" + MOVIE_FIELDS + "} }",
        variable_values={"name": "Superbad"},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["movie"]["yearOfPublication"] == 2009


@pytest.mark.asyncio
async def test_movie_query_unknown_name(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        'query { movie(name: "Titanic") { name } }',
        context_value=graphql_context,
    )

    assert result.data is None
    [error] = result.errors
    assert error.message == "Movie 'Titanic' not found"
    assert error.path == ["movie"]


def test_context_exposes_request_headers() -> None:
    context = build_graphql_context(request=SimpleNamespace(headers={"customheader": "testtest"}))

    assert context.headers == {"customheader": "testtest"}
