"""GraphQL feature module using Strawberry.

This module provides a GraphQL API endpoint (default /graphql) with:
- Query resolvers for users, admins and movies
- Mutation resolvers for creating, renaming and deleting users
- A UserAdmin union and a Movie interface
- Request-scoped DataLoaders batching friend lookups
- Apollo-style error formatting
"""

from __future__ import annotations

from typing import Any

__all__ = ["create_graphql_router", "schema"]


def __getattr__(name: str) -> Any:
    if name == "create_graphql_router":
        from demo_service.features.graphql.router import create_graphql_router

        return create_graphql_router
    if name == "schema":
        from demo_service.features.graphql.schema import schema as graphql_schema

        return graphql_schema
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
