"""Tests for the in-memory user and movie repositories."""

from __future__ import annotations

import pytest

from demo_service.core.exceptions import NotFoundException
from demo_service.features.movies.models import TheaterMovie, TvMovie
from demo_service.features.movies.repository import MovieRepository
from demo_service.features.users.data import USERS
from demo_service.features.users.models import Nationality
from demo_service.features.users.repository import UserRepository


@pytest.fixture
def users() -> UserRepository:
    return UserRepository()


@pytest.fixture
def movies() -> MovieRepository:
    return MovieRepository()


class TestUserRepository:
    def test_seed_records(self, users: UserRepository) -> None:
        assert [user.username for user in users.list_users()] == [
            "john",
            "PedroTech",
            "cameron",
            "rafe123",
            "kelly2019",
        ]
        assert [admin.username for admin in users.list_admins()] == [
            "andrew001",
            "chris007",
            "huskylover64",
        ]

    def test_get_user(self, users: UserRepository) -> None:
        user = users.get_user(3)

        assert user is not None
        assert user.name == "Sarah"
        assert user.friends == [2]
        assert users.get_user(42) is None

    def test_get_users_by_ids_skips_unknown_ids(self, users: UserRepository) -> None:
        found = users.get_users_by_ids([5, 42, 2])

        assert sorted(user.id for user in found) == [2, 5]

    def test_create_user_uses_next_id(self, users: UserRepository) -> None:
        user = users.create_user(name="Ana", username="ana", age=31)

        assert user.id == 6
        assert user.nationality is Nationality.BRAZIL
        assert user.friends is None
        assert users.get_user(6) is user

    def test_create_user_in_empty_store_starts_at_one(self, users: UserRepository) -> None:
        for user in users.list_users():
            users.delete_user(user.id)

        assert users.create_user(name="Ana", username="ana", age=31).id == 1

    def test_update_username(self, users: UserRepository) -> None:
        user = users.update_username(2, "pedro")

        assert user is not None
        assert users.get_user(2).username == "pedro"
        assert users.update_username(42, "ghost") is None

    def test_delete_user_returns_removed_record(self, users: UserRepository) -> None:
        removed = users.delete_user(5)

        assert removed is not None
        assert removed.name == "Kelly"
        assert users.get_user(5) is None
        assert users.delete_user(5) is None

    def test_deleted_and_unknown_ids_look_the_same(self, users: UserRepository) -> None:
        users.delete_user(5)

        assert users.get_users_by_ids([5]) == users.get_users_by_ids([42]) == []

    def test_reset_leaves_seed_data_untouched(self, users: UserRepository) -> None:
        users.update_username(1, "changed")
        users.delete_user(2)

        users.reset()

        assert users.get_user(1).username == "john"
        assert users.get_user(2) is not None
        assert USERS[0].username == "john"


class TestMovieRepository:
    def test_list_movies_has_both_kinds(self, movies: MovieRepository) -> None:
        kinds = {type(movie) for movie in movies.list_movies()}

        assert kinds == {TheaterMovie, TvMovie}

    def test_get_movie_by_name_is_exact(self, movies: MovieRepository) -> None:
        movie = movies.get_movie_by_name("Interstellar")

        assert movie is not None
        assert movie.year_of_publication == 2007
        assert movies.get_movie_by_name("interstellar") is None

    def test_require_movie_by_name_raises_not_found(self, movies: MovieRepository) -> None:
        with pytest.raises(NotFoundException) as exc_info:
            movies.require_movie_by_name("Titanic")

        assert exc_info.value.status_code == 404
        assert exc_info.value.extra == {"movieName": "Titanic"}

    def test_favorite_movies_window(self, movies: MovieRepository) -> None:
        favorites = movies.list_favorite_movies()

        assert [movie.name for movie in favorites] == ["Interstellar", "Superbad"]
