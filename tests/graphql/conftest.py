"""GraphQL test fixtures.

Provides:
- A request context over the (reset) process-wide repositories
- Operation documents shared by the query tests
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from demo_service.features.graphql.context import GraphQLContext, build_graphql_context

if TYPE_CHECKING:
    from demo_service.features.users.repository import UserRepository

USER_QUERY = """
    query GetUser($id: ID!) {
        user(id: $id) {
            id
            name
            username
            age
            nationality
            friends {
                id
                name
            }
        }
    }
"""

MOVIE_FIELDS = """
    __typename
    name
    yearOfPublication
    ... on TvMovie {
        yearFirstAired
    }
    ... on TheaterMovie {
        isInTheaters
    }
"""


@pytest.fixture
def graphql_context(user_repository: UserRepository) -> GraphQLContext:
    """Context with fresh DataLoaders, as built for every HTTP request."""
    return build_graphql_context(users=user_repository)
