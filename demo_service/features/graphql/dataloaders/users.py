"""DataLoader for batch-loading users.

Prevents N+1 lookups when resolving ``User.friends`` by collecting every
friend id requested while a query's user list resolves and fetching them
with a single repository call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from demo_service.utils.batching import BatchLoader

if TYPE_CHECKING:
    from collections.abc import Sequence

    from demo_service.features.users.models import User
    from demo_service.features.users.repository import UserRepository


class UserDataLoader:
    """DataLoader for batch-loading users by ID.

    Each request gets its own loader instance so batches never span requests.
    Nothing is cached between batches: a user requested again later in the
    same request is fetched again.

    Usage:
        loader = UserDataLoader(repository)
        user = await loader.load(2)            # Batched with other loads
        friends = await loader.load_many([2, 5])
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository
        self._loader: BatchLoader[int, User] = BatchLoader(
            repository.get_users_by_ids,
            name="users",
        )

    @property
    def dispatch_count(self) -> int:
        """Number of bulk fetches issued by this loader."""
        return self._loader.dispatch_count

    async def load(self, user_id: int) -> User | None:
        """Load a single user by ID.

        Returns:
            User if found, None otherwise
        """
        return await self._loader.load(user_id)

    async def load_many(self, user_ids: Sequence[int]) -> list[User | None]:
        """Load multiple users by ID.

        Returns:
            Users (or None for unknown ids) in the same order as ``user_ids``
        """
        return await self._loader.load_many(user_ids)


__all__ = ["UserDataLoader"]
