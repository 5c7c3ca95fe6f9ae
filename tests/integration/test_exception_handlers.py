"""Tests for RFC 7807 problem-details rendering of REST errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from httpx import ASGITransport, AsyncClient
import pytest

from demo_service.core.exceptions import AppException, NotFoundException

if TYPE_CHECKING:
    from fastapi import FastAPI


@pytest.fixture
def failing_app(app: FastAPI) -> FastAPI:
    @app.get("/movies/{name}")
    async def movie(name: str) -> dict:
        raise NotFoundException(
            detail=f"Movie {name!r} not found",
            type="movie-not-found",
            extra={"movieName": name},
        )

    @app.get("/boom")
    async def boom() -> dict:
        msg = "kaboom"
        raise RuntimeError(msg)

    return app


@pytest.mark.asyncio
async def test_app_exception_renders_problem_details(failing_app: FastAPI) -> None:
    async with AsyncClient(transport=ASGITransport(app=failing_app), base_url="http://test") as ac:
        response = await ac.get("/movies/Titanic", headers={"X-Correlation-ID": "corr-1"})

    assert response.status_code == 404
    body = response.json()
    assert body["type"] == "movie-not-found"
    assert body["title"] == "Not Found"
    assert body["detail"] == "Movie 'Titanic' not found"
    assert body["correlation_id"] == "corr-1"
    assert body["movieName"] == "Titanic"


@pytest.mark.asyncio
async def test_unexpected_exception_returns_generic_500(failing_app: FastAPI) -> None:
    transport = ASGITransport(app=failing_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["type"] == "internal-error"
    assert "kaboom" not in response.text


@pytest.mark.parametrize(
    ("status_code", "title"),
    [(400, "Bad Request"), (404, "Not Found"), (500, "Internal Server Error"), (418, "Error")],
)
def test_default_titles(status_code: int, title: str) -> None:
    assert AppException(status_code=status_code, detail="x").title == title
