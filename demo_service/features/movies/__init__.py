"""Movies feature: read-only movie catalogue."""

from demo_service.features.movies.models import Movie, TheaterMovie, TvMovie
from demo_service.features.movies.repository import MovieRepository, get_movie_repository

__all__ = ["Movie", "MovieRepository", "TheaterMovie", "TvMovie", "get_movie_repository"]
