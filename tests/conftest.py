"""Pytest configuration and shared fixtures.

Organization:
    - Environment: settings defaults for an isolated test run
    - Store Fixtures: fresh in-memory repositories for every test
    - Application Fixtures: FastAPI app and HTTP client
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Iterator
import os

from httpx import ASGITransport, AsyncClient
import pytest

from demo_service.core.settings import clear_all_settings_caches
from demo_service.features.movies.repository import MovieRepository, get_movie_repository
from demo_service.features.users.repository import UserRepository, get_user_repository

# Run against predictable settings regardless of the developer's .env
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_CONSOLE_ENABLED", "false")


@pytest.fixture(autouse=True)
def _settings_cache() -> Iterator[None]:
    """Drop cached settings so monkeypatched environment variables apply."""
    clear_all_settings_caches()
    yield
    clear_all_settings_caches()


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def user_repository() -> UserRepository:
    """Process-wide user repository, restored to the seed records."""
    repository = get_user_repository()
    repository.reset()
    return repository


@pytest.fixture
def movie_repository() -> MovieRepository:
    return get_movie_repository()


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
async def app():
    """Create FastAPI application for testing.

    Example:
        async def test_endpoint(app):
            assert app.title == "GraphQL Demo API"
    """
    from demo_service.app.main import create_app

    return create_app()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing.

    Example:
        async def test_health_check(client):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
