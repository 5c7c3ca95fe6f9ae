"""Movie records held by the in-memory store."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Movie:
    """Fields shared by every kind of movie."""

    id: int
    name: str
    year_of_publication: int


@dataclass
class TheaterMovie(Movie):
    """A movie released to cinemas."""

    is_in_theaters: bool = False


@dataclass
class TvMovie(Movie):
    """A movie made for television."""

    year_first_aired: int = 0
