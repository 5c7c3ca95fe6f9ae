"""User and admin records held by the in-memory store."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Nationality(str, Enum):
    """Nationalities a user can have."""

    CANADA = "CANADA"
    BRAZIL = "BRAZIL"
    INDIA = "INDIA"
    GERMANY = "GERMANY"
    CHILE = "CHILE"
    UKRAINE = "UKRAINE"
    SLOVAKIA = "SLOVAKIA"
    HUNGARY = "HUNGARY"


class AdminRole(str, Enum):
    """Roles an admin account can hold."""

    ADMIN = "ADMIN"
    SUPERADMIN = "SUPERADMIN"


@dataclass
class User:
    """A regular user.

    ``friends`` holds the ids of other users, or None when the user never
    had any (kept distinct from an emptied list).
    """

    id: int
    name: str
    username: str
    nationality: Nationality
    age: int | None = None
    friends: list[int] | None = field(default=None)


@dataclass
class Admin:
    """An administrator account."""

    id: int
    name: str
    username: str
    role: AdminRole
