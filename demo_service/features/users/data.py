"""Seed records for the user store."""

from __future__ import annotations

from demo_service.features.users.models import Admin, AdminRole, Nationality, User

USERS: tuple[User, ...] = (
    User(id=1, name="John", username="john", age=20, nationality=Nationality.CANADA, friends=[2, 5]),
    User(id=2, name="Pedro", username="PedroTech", age=20, nationality=Nationality.BRAZIL),
    User(id=3, name="Sarah", username="cameron", age=25, nationality=Nationality.INDIA, friends=[2]),
    User(id=4, name="Rafe", username="rafe123", age=60, nationality=Nationality.GERMANY, friends=[3, 5]),
    User(id=5, name="Kelly", username="kelly2019", age=5, nationality=Nationality.CHILE),
)

ADMINS: tuple[Admin, ...] = (
    Admin(id=1, name="Andrew", username="andrew001", role=AdminRole.SUPERADMIN),
    Admin(id=2, name="Chris", username="chris007", role=AdminRole.ADMIN),
    Admin(id=3, name="Jaro", username="huskylover64", role=AdminRole.ADMIN),
)
