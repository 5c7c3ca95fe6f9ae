"""Users feature: users and admins held in memory."""

from demo_service.features.users.models import Admin, AdminRole, Nationality, User
from demo_service.features.users.repository import UserRepository, get_user_repository

__all__ = [
    "Admin",
    "AdminRole",
    "Nationality",
    "User",
    "UserRepository",
    "get_user_repository",
]
