"""Catalog row definitions requested from the upstream provider."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .models import ContentType


@dataclass(frozen=True)
class CategoryDefinition:
    """Describes a single catalog row backed by an upstream listing endpoint."""

    title: str
    path: str
    kind: ContentType
    params: Mapping[str, str] = field(default_factory=dict)


EDITORIAL_CATEGORIES: tuple[CategoryDefinition, ...] = (
    CategoryDefinition("Trending Movies", "/trending/movie/week", "movie"),
    CategoryDefinition("Trending TV", "/trending/tv/week", "series"),
    CategoryDefinition("Now Playing", "/movie/now_playing", "movie"),
    CategoryDefinition("Popular Movies", "/movie/popular", "movie"),
    CategoryDefinition("Top Rated Movies", "/movie/top_rated", "movie"),
    CategoryDefinition("Upcoming Movies", "/movie/upcoming", "movie"),
    CategoryDefinition("Popular TV", "/tv/popular", "series"),
    CategoryDefinition("Top Rated TV", "/tv/top_rated", "series"),
    CategoryDefinition("On The Air", "/tv/on_the_air", "series"),
)

MOVIE_GENRES: tuple[str, ...] = (
    "Action",
    "Adventure",
    "Animation",
    "Comedy",
    "Crime",
    "Documentary",
    "Drama",
    "Family",
    "Fantasy",
    "Horror",
    "Romance",
    "Science Fiction",
    "Thriller",
)

SERIES_GENRES: tuple[str, ...] = (
    "Action & Adventure",
    "Animation",
    "Comedy",
    "Crime",
    "Documentary",
    "Drama",
    "Family",
    "Mystery",
    "Reality",
    "Sci-Fi & Fantasy",
    "War & Politics",
)


def build_genre_categories(
    movie_genres: Mapping[str, int],
    series_genres: Mapping[str, int],
) -> list[CategoryDefinition]:
    """Return discovery rows for every known genre present in the genre maps.

    Genre names missing from a map are skipped.
    """

    categories: list[CategoryDefinition] = []
    for name in MOVIE_GENRES:
        genre_id = movie_genres.get(name.lower())
        if genre_id:
            categories.append(
                CategoryDefinition(
                    title=f"{name} Movies",
                    path="/discover/movie",
                    kind="movie",
                    params={"with_genres": str(genre_id), "sort_by": "popularity.desc"},
                )
            )
    for name in SERIES_GENRES:
        genre_id = series_genres.get(name.lower())
        if genre_id:
            categories.append(
                CategoryDefinition(
                    title=f"{name} TV",
                    path="/discover/tv",
                    kind="series",
                    params={"with_genres": str(genre_id), "sort_by": "popularity.desc"},
                )
            )
    return categories
