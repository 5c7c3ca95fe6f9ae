"""Health check API endpoint.

Provides a liveness probe at /health reporting the service identity and the
size of the in-memory stores.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from demo_service.core.schemas import HealthStatus
from demo_service.core.settings import get_app_settings
from demo_service.features.movies.repository import MovieRepository, get_movie_repository
from demo_service.features.users.repository import UserRepository, get_user_repository

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=HealthStatus,
    summary="Liveness check",
    description="Returns service identity and in-memory record counts",
)
async def health_check(
    users: Annotated[UserRepository, Depends(get_user_repository)],
    movies: Annotated[MovieRepository, Depends(get_movie_repository)],
) -> HealthStatus:
    settings = get_app_settings()
    return HealthStatus(
        service=settings.service_name,
        version=settings.version,
        users=len(users.list_users()),
        movies=len(movies.list_movies()),
    )
