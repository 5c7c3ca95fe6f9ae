"""Repository for the users feature.

Users and admins live in process memory, seeded from ``data.py``. Mutations
change the repository's own lists; the seed tuples are never touched, so
``reset()`` always restores the original records.
"""

from __future__ import annotations

from copy import deepcopy
import logging
from typing import TYPE_CHECKING

from demo_service.features.users.data import ADMINS, USERS
from demo_service.features.users.models import Nationality, User

if TYPE_CHECKING:
    from collections.abc import Iterable

    from demo_service.features.users.models import Admin

logger = logging.getLogger(__name__)


class UserRepository:
    """In-memory store of users and admins.

    Methods:
        - list_users() -> list[User]
        - list_admins() -> list[Admin]
        - get_user(user_id) -> User | None
        - get_users_by_ids(ids) -> list[User]   (bulk fetch for BatchLoader)
        - create_user(...) -> User
        - update_username(user_id, new_username) -> User | None
        - delete_user(user_id) -> User | None
    """

    def __init__(self) -> None:
        self._users: list[User] = []
        self._admins: list[Admin] = []
        self.reset()

    def reset(self) -> None:
        """Restore the seed records."""
        self._users = deepcopy(list(USERS))
        self._admins = deepcopy(list(ADMINS))

    def list_users(self) -> list[User]:
        return list(self._users)

    def list_admins(self) -> list[Admin]:
        return list(self._admins)

    def get_user(self, user_id: int) -> User | None:
        return next((user for user in self._users if user.id == user_id), None)

    def get_users_by_ids(self, ids: Iterable[int]) -> list[User]:
        """Return the users whose id is in ``ids``, in store order.

        Unknown ids are skipped rather than reported; callers treat absence
        as data.
        """
        wanted = set(ids)
        users = [user for user in self._users if user.id in wanted]
        logger.debug(
            "Fetched users by ids",
            extra={"requested": len(wanted), "found": len(users)},
        )
        return users

    def create_user(
        self,
        name: str,
        username: str,
        age: int | None,
        nationality: Nationality = Nationality.BRAZIL,
    ) -> User:
        """Append a new user with the next id (last id + 1)."""
        next_id = self._users[-1].id + 1 if self._users else 1
        user = User(
            id=next_id,
            name=name,
            username=username,
            age=age,
            nationality=nationality,
        )
        self._users.append(user)
        logger.info("User created", extra={"user_id": user.id, "username": username})
        return user

    def update_username(self, user_id: int, new_username: str) -> User | None:
        user = self.get_user(user_id)
        if user is None:
            return None
        user.username = new_username
        logger.info("Username updated", extra={"user_id": user_id, "username": new_username})
        return user

    def delete_user(self, user_id: int) -> User | None:
        """Remove a user and return the removed record (None if unknown).

        Friend lists that point at the removed user are left as they are;
        lookups for the id then resolve to nothing.
        """
        user = self.get_user(user_id)
        if user is None:
            return None
        self._users.remove(user)
        logger.info("User deleted", extra={"user_id": user_id})
        return user


_user_repository: UserRepository | None = None


def get_user_repository() -> UserRepository:
    """Get the process-wide UserRepository instance."""
    global _user_repository
    if _user_repository is None:
        _user_repository = UserRepository()
    return _user_repository


__all__ = ["UserRepository", "get_user_repository"]
