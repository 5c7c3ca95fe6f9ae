"""GraphQL schema assembly.

Combines the Query and Mutation types into a single schema with configured
extensions. The ``Movie`` interface implementations are registered
explicitly: no field returns them by name, so Strawberry would not discover
them otherwise.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import strawberry

from demo_service.features.graphql.error_handler import log_error
from demo_service.features.graphql.extensions import get_extensions
from demo_service.features.graphql.resolvers import Mutation, Query
from demo_service.features.graphql.types import TheaterMovieType, TvMovieType

if TYPE_CHECKING:
    from graphql import GraphQLError
    from strawberry.types import ExecutionContext

    from demo_service.core.settings.graphql import GraphQLSettings

logger = logging.getLogger(__name__)


class DemoSchema(strawberry.Schema):
    """Schema that logs every execution error once through ``log_error``."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            log_error(error, execution_context)


def create_schema(settings: GraphQLSettings | None = None) -> DemoSchema:
    """Build the schema with extensions derived from ``settings``."""
    return DemoSchema(
        query=Query,
        mutation=Mutation,
        types=[TheaterMovieType, TvMovieType],
        extensions=get_extensions(settings),
    )


schema = create_schema()

logger.debug("GraphQL schema created")

__all__ = ["DemoSchema", "create_schema", "schema"]
