"""HTTP client for the demo GraphQL API.

Carries the operation documents of the demo front end (users with a
fragment, movies through the ``Movie`` interface, a movie lookup by name and
user creation) and sends them over HTTP with optional extra headers.

Example:
    ```python
    async with GraphQLClient("http://localhost:4000/graphql") as client:
        users = await client.get_all_users()
        movie = await client.get_movie_by_name("Interstellar")
    ```
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:4000/graphql"

GET_AGE_AND_NAME_FRAGMENT = """
fragment GetAgeAndName on User {
  name
  age
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

QUERY_ALL_USERS = (
    GET_AGE_AND_NAME_FRAGMENT
    + """
query GetAllUsers {
  users {
    __typename
    ... on User {
      id
      username
      ...GetAgeAndName
      nationality
      friends {
        id
        ...GetAgeAndName
        favoriteMovies {"""
    + MOVIE_FIELDS
    + """        }
      }
    }
    ... on Admin {
      id
      name
      username
      role
    }
  }
}
"""
)

QUERY_ALL_MOVIES = "{\n  movies {" + MOVIE_FIELDS + "  }\n}\n"

GET_MOVIE_BY_NAME = (
    "query ($name: String!) {\n  movie(name: $name) {" + MOVIE_FIELDS + "  }\n}\n"
)

CREATE_USER_MUTATION = """
mutation CreateUser($input: CreateUserInput!) {
  createUser(input: $input) {
    name
    id
  }
}
"""

OPERATIONS: dict[str, str] = {
    "users": QUERY_ALL_USERS,
    "movies": QUERY_ALL_MOVIES,
    "movie": GET_MOVIE_BY_NAME,
    "create-user": CREATE_USER_MUTATION,
}


class GraphQLClientError(Exception):
    """Raised when a GraphQL response carries errors."""

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        self.errors = errors
        messages = "; ".join(str(error.get("message")) for error in errors)
        super().__init__(messages or "GraphQL request failed")

    @property
    def codes(self) -> list[str | None]:
        """``extensions.code`` of every error, in order."""
        return [(error.get("extensions") or {}).get("code") for error in self.errors]


class GraphQLClient:
    """Async GraphQL-over-HTTP client.

    Args:
        url: Endpoint URL.
        headers: Extra headers sent with every request.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (e.g. ``httpx.ASGITransport`` in tests).
    """

    def __init__(
        self,
        url: str = DEFAULT_URL,
        headers: dict[str, str] | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.default_headers = headers or {}
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers=self.default_headers,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client and release connections."""
        await self.client.aclose()

    async def __aenter__(self) -> GraphQLClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """POST an operation and return the decoded response body.

        GraphQL errors are returned in the body, not raised.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response.
        """
        payload: dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables

        response = await self.client.post(self.url, json=payload, headers=headers)
        logger.debug(
            "GraphQL response received",
            extra={"url": self.url, "status_code": response.status_code},
        )
        response.raise_for_status()
        return response.json()

    async def fetch(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Execute an operation and return its ``data``.

        Raises:
            GraphQLClientError: If the response carries errors.
        """
        body = await self.execute(query, variables, headers)
        if body.get("errors"):
            raise GraphQLClientError(body["errors"])
        return body.get("data") or {}

    async def get_all_users(self) -> list[dict[str, Any]]:
        data = await self.fetch(QUERY_ALL_USERS)
        return data["users"]

    async def get_all_movies(self) -> list[dict[str, Any]]:
        data = await self.fetch(QUERY_ALL_MOVIES)
        return data["movies"]

    async def get_movie_by_name(self, name: str) -> dict[str, Any]:
        data = await self.fetch(GET_MOVIE_BY_NAME, {"name": name})
        return data["movie"]

    async def create_user(
        self,
        name: str,
        username: str,
        age: int,
        nationality: str | None = None,
    ) -> dict[str, Any]:
        """Create a user; nationality falls back to the server default."""
        user_input: dict[str, Any] = {"name": name, "username": username, "age": age}
        if nationality:
            user_input["nationality"] = nationality.upper()
        data = await self.fetch(CREATE_USER_MUTATION, {"input": user_input})
        return data["createUser"]


__all__ = [
    "OPERATIONS",
    "GraphQLClient",
    "GraphQLClientError",
]
