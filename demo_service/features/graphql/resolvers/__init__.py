"""GraphQL resolvers for queries and mutations.

This package contains:
- queries.py: Query resolvers for users and movies
- mutations.py: Mutation resolvers for creating/updating/deleting users
"""

from __future__ import annotations

from demo_service.features.graphql.resolvers.mutations import Mutation
from demo_service.features.graphql.resolvers.queries import Query

__all__ = ["Mutation", "Query"]
