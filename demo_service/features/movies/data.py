"""Seed records for the movie store."""

from __future__ import annotations

from demo_service.features.movies.models import Movie, TheaterMovie, TvMovie

MOVIES: tuple[Movie, ...] = (
    TheaterMovie(id=1, name="Avengers Endgame", year_of_publication=2019, is_in_theaters=True),
    TheaterMovie(id=2, name="Interstellar", year_of_publication=2007, is_in_theaters=True),
    TheaterMovie(id=3, name="Superbad", year_of_publication=2009, is_in_theaters=True),
    TheaterMovie(id=4, name="PedroTech The Movie", year_of_publication=2035, is_in_theaters=False),
    TvMovie(
        id=5,
        name="Sherlock: The Abominable Bride",
        year_of_publication=2016,
        year_first_aired=2016,
    ),
)

# Publication window used for every user's favorite movies
FAVORITE_YEARS = range(2000, 2011)
