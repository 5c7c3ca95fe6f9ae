"""DataLoader container and factory.

DataLoaders batch keyed lookups within a single request, preventing the N+1
problem common in GraphQL resolvers. Each GraphQL request gets its own
DataLoader instances so batching boundaries never cross requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from demo_service.features.graphql.dataloaders.users import UserDataLoader

if TYPE_CHECKING:
    from demo_service.features.users.repository import UserRepository


@dataclass
class DataLoaders:
    """Container for all DataLoader instances.

    One instance created per GraphQL request.

    Usage in resolver:
        friends = await info.context.loaders.users.load_many(friend_ids)
    """

    users: UserDataLoader


def create_dataloaders(users: UserRepository) -> DataLoaders:
    """Factory for creating request-scoped DataLoaders.

    Args:
        users: Repository backing the user loader

    Returns:
        DataLoaders container with all loaders initialized
    """
    return DataLoaders(users=UserDataLoader(users))


__all__ = ["DataLoaders", "UserDataLoader", "create_dataloaders"]
