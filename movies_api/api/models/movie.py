"""
Pydantic schemas for Movie API.

Fields are snake_case in Python and serialized with the camelCase names the
datasets use (movieId, releaseDate, ...).
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MovieBase(BaseModel):
    """Shared configuration for movie records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MovieRecord(MovieBase):
    """Full movie row with the raw numeric budget."""

    movie_id: int
    imdb_id: str | None = None
    title: str | None = None
    overview: str | None = None
    production_companies: str | None = None
    release_date: str | None = None
    budget: int | float | None = None
    revenue: int | float | None = None
    runtime: int | float | None = None
    language: str | None = None
    genres: str | None = None  # JSON array as string
    status: str | None = None


class FormattedMovieRecord(MovieRecord):
    """Full movie row with the budget formatted as US dollars."""

    budget: str


class MovieSummary(MovieBase):
    """Projection used by the paginated movie listing."""

    movie_id: int
    imdb_id: str | None = None
    title: str | None = None
    genres: str | None = None
    release_date: str | None = None
    budget: str


class MovieDetails(MovieBase):
    """Movie with its description and average rating from the ratings dataset."""

    movie_id: int
    imdb_id: str | None = None
    title: str | None = None
    description: str | None = None
    release_date: str | None = None
    budget: str
    runtime: int | float | None = None
    genres: str | None = None
    original_language: str | None = Field(None, alias="original_Language")
    production_companies: str | None = None
    average_rating: float | None = Field(None, alias="average_rating")


class MoviePage(MovieBase):
    """Page envelope for the full movie listing."""

    page: int
    page_size: int
    total_pages: int
    total_movies: int
    movies: list[MovieSummary]


class FilteredMoviePage(MovieBase):
    """Page envelope for movies filtered by year or genre."""

    page: int
    page_size: int
    total_pages: int
    total_movies: int
    movies: list[FormattedMovieRecord]


class MovieDetailsList(BaseModel):
    """Response model for movie details lookups."""

    movies: list[MovieDetails]
