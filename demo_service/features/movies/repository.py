"""Repository for the movies feature."""

from __future__ import annotations

from copy import deepcopy

from demo_service.core.exceptions import NotFoundException
from demo_service.features.movies.data import FAVORITE_YEARS, MOVIES
from demo_service.features.movies.models import Movie


class MovieRepository:
    """In-memory, read-only catalogue of movies."""

    def __init__(self) -> None:
        self._movies: list[Movie] = deepcopy(list(MOVIES))

    def list_movies(self) -> list[Movie]:
        return list(self._movies)

    def get_movie_by_name(self, name: str) -> Movie | None:
        """Find a movie by exact name."""
        return next((movie for movie in self._movies if movie.name == name), None)

    def require_movie_by_name(self, name: str) -> Movie:
        """Find a movie by exact name or raise NotFoundException."""
        movie = self.get_movie_by_name(name)
        if movie is None:
            raise NotFoundException(
                detail=f"Movie {name!r} not found",
                type="movie-not-found",
                extra={"movieName": name},
            )
        return movie

    def list_favorite_movies(self) -> list[Movie]:
        """Movies published between 2000 and 2010 (inclusive)."""
        return [movie for movie in self._movies if movie.year_of_publication in FAVORITE_YEARS]


_movie_repository: MovieRepository | None = None


def get_movie_repository() -> MovieRepository:
    """Get the process-wide MovieRepository instance."""
    global _movie_repository
    if _movie_repository is None:
        _movie_repository = MovieRepository()
    return _movie_repository


__all__ = ["MovieRepository", "get_movie_repository"]
