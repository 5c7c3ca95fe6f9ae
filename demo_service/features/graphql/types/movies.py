"""GraphQL types for the movies feature.

Provides:
- MovieInterface: the ``Movie`` interface shared by every kind of movie
- TheaterMovieType / TvMovieType: its two implementations
- movie_to_graphql(): maps a domain record onto the matching implementation
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from demo_service.features.movies.models import TheaterMovie, TvMovie

if TYPE_CHECKING:
    from demo_service.features.movies.models import Movie


@strawberry.interface(name="Movie", description="Fields shared by every kind of movie")
class MovieInterface:
    id: strawberry.ID
    name: str
    year_of_publication: int


@strawberry.type(name="TheaterMovie", description="A movie released to cinemas")
class TheaterMovieType(MovieInterface):
    is_in_theaters: bool = strawberry.field(description="Whether it is still showing")


@strawberry.type(name="TvMovie", description="A movie made for television")
class TvMovieType(MovieInterface):
    year_first_aired: int = strawberry.field(description="Year of the first broadcast")


def movie_to_graphql(movie: Movie) -> MovieInterface:
    """Convert a movie record to its concrete GraphQL type.

    Raises:
        TypeError: If the record is neither a theater nor a TV movie
    """
    if isinstance(movie, TheaterMovie):
        return TheaterMovieType(
            id=strawberry.ID(str(movie.id)),
            name=movie.name,
            year_of_publication=movie.year_of_publication,
            is_in_theaters=movie.is_in_theaters,
        )
    if isinstance(movie, TvMovie):
        return TvMovieType(
            id=strawberry.ID(str(movie.id)),
            name=movie.name,
            year_of_publication=movie.year_of_publication,
            year_first_aired=movie.year_first_aired,
        )
    msg = f"Unsupported movie record: {type(movie).__name__}"
    raise TypeError(msg)


__all__ = ["MovieInterface", "TheaterMovieType", "TvMovieType", "movie_to_graphql"]
