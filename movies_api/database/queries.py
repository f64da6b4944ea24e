"""
Read operations over the movies and ratings datasets.

Each function takes a Session bound to the dataset it reads, builds a
parameterized statement, and maps result rows to typed records. Store
failures are raised as QueryError, empty results as NotFoundError and bad
parameters as ValidationError (before any statement runs).
"""

import functools
import logging
import math
import re
from typing import Any, Callable, List, TypeVar

from sqlalchemy import func, inspect, select, text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from movies_api.api.models import (
    AverageRating,
    FilteredMoviePage,
    FormattedMovieRecord,
    Genre,
    MovieDetails,
    MovieDetailsList,
    MoviePage,
    MovieRecord,
    MovieSummary,
    RatingRecord,
)
from movies_api.database.connection import deadline_exceeded
from movies_api.database.exceptions import (
    NotFoundError,
    QueryError,
    QueryTimeoutError,
    ValidationError,
)
from movies_api.database.models import Movie, Rating
from movies_api.utils.formatting import format_movie_budget

logger = logging.getLogger(__name__)

ALL_MOVIES_LIMIT = 100
PAGE_SIZE = 50

YEAR_PATTERN = re.compile(r"\d{4}")

# Rows with a malformed genres column are treated as having no genres, and
# array elements that are not objects have no name
_GENRE_ELEMENTS = (
    "json_each(CASE WHEN json_valid(movies.genres) THEN movies.genres ELSE '[]' END) AS g"
)

_GENRE_NAME = "CASE WHEN g.type = 'object' THEN json_extract(g.value, '$.name') END"
_GENRE_ID = "CASE WHEN g.type = 'object' THEN json_extract(g.value, '$.id') END"

_GENRE_MATCH = text(
    f"EXISTS (SELECT 1 FROM {_GENRE_ELEMENTS} WHERE {_GENRE_NAME} = :genre)"
)

_GENRE_LIST = text(
    f"SELECT DISTINCT {_GENRE_ID} AS id, {_GENRE_NAME} AS name "
    f"FROM movies, {_GENRE_ELEMENTS} "
    f"WHERE {_GENRE_NAME} IS NOT NULL "
    "ORDER BY name, id"
)

F = TypeVar("F", bound=Callable[..., Any])


def _columns(model) -> list:
    """ORM column attributes of a model, selected as plain columns."""
    return [attr.class_attribute for attr in inspect(model).column_attrs]


def _store_call(func_: F) -> F:
    """Translate SQLAlchemy errors raised by a query function into QueryError."""

    @functools.wraps(func_)
    def wrapper(*args, **kwargs):
        try:
            return func_(*args, **kwargs)
        except OperationalError as e:
            sessions = [arg for arg in args if isinstance(arg, Session)]
            if any(deadline_exceeded(session) for session in sessions):
                logger.warning("%s interrupted by the request deadline", func_.__name__)
                raise QueryTimeoutError("Query exceeded the request deadline") from e
            logger.exception("%s failed", func_.__name__)
            raise QueryError("Failed to query the dataset") from e
        except SQLAlchemyError as e:
            logger.exception("%s failed", func_.__name__)
            raise QueryError("Failed to query the dataset") from e

    return wrapper  # type: ignore[return-value]


def _require_text(value: str | None, name: str) -> str:
    """Return the stripped value or raise ValidationError if it is blank."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Invalid {name}")
    return value.strip()


def _page_offset(page: int) -> int:
    """Row offset of a 1-based page number."""
    if page < 1:
        raise ValidationError("Invalid page number")
    return (page - 1) * PAGE_SIZE


def _total_pages(total: int) -> int:
    return math.ceil(total / PAGE_SIZE)


# ==================== MOVIE QUERIES ====================

@_store_call
def get_all_movies(session: Session) -> List[MovieRecord]:
    """
    Get the first 100 movies.

    Args:
        session: Movies dataset session

    Returns:
        List of MovieRecord with raw numeric budgets

    Raises:
        NotFoundError: If the dataset holds no movies
    """
    stmt = select(*_columns(Movie)).order_by(Movie.movie_id).limit(ALL_MOVIES_LIMIT)
    rows = session.execute(stmt).all()

    if not rows:
        logger.debug("No movies found")
        raise NotFoundError("No movies found")

    return [MovieRecord.model_validate(dict(row._mapping)) for row in rows]


@_store_call
def get_movie(session: Session, movie_id: int) -> List[MovieRecord]:
    """
    Get every movie row whose id equals movie_id.

    Rows are selected as columns rather than entities so duplicate ids in
    the dataset are all returned.

    Args:
        session: Movies dataset session
        movie_id: Movie ID

    Returns:
        List of MovieRecord with raw numeric budgets

    Raises:
        NotFoundError: If no row matches
    """
    stmt = select(*_columns(Movie)).where(Movie.movie_id == movie_id)
    rows = session.execute(stmt).all()

    if not rows:
        logger.debug("Movie %s not found", movie_id)
        raise NotFoundError("Movie not found")

    return [MovieRecord.model_validate(dict(row._mapping)) for row in rows]


@_store_call
def get_paginated_movies(session: Session, page: int = 1) -> MoviePage:
    """
    Get one page of the movie listing.

    Counts all movies, then reads the page window with LIMIT/OFFSET.

    Args:
        session: Movies dataset session
        page: 1-based page number

    Returns:
        MoviePage with currency-formatted budgets
    """
    offset = _page_offset(page)

    total = session.scalar(select(func.count()).select_from(Movie))

    stmt = (
        select(
            Movie.movie_id,
            Movie.imdb_id,
            Movie.title,
            Movie.genres,
            Movie.release_date,
            Movie.budget,
        )
        .order_by(Movie.movie_id)
        .limit(PAGE_SIZE)
        .offset(offset)
    )
    rows = session.execute(stmt).all()

    movies = [format_movie_budget(row._mapping, MovieSummary) for row in rows]

    return MoviePage(
        page=page,
        page_size=PAGE_SIZE,
        total_pages=_total_pages(total),
        total_movies=total,
        movies=movies,
    )


@_store_call
def get_movie_details_with_ratings(
    movies_session: Session,
    ratings_session: Session,
    movie_id: int
) -> MovieDetailsList:
    """
    Get a movie together with its average rating.

    The datasets are separate files, so the movie rows and the rating
    aggregate are read with two sequential queries and combined here.

    Args:
        movies_session: Movies dataset session
        ratings_session: Ratings dataset session
        movie_id: Movie ID

    Returns:
        MovieDetailsList; empty when the movie does not exist. The average
        is rounded to 2 decimals and None when the movie has no ratings.
    """
    stmt = select(
        Movie.movie_id,
        Movie.imdb_id,
        Movie.title,
        Movie.overview.label("description"),
        Movie.release_date,
        Movie.budget,
        Movie.runtime,
        Movie.genres,
        Movie.language.label("original_language"),
        Movie.production_companies,
    ).where(Movie.movie_id == movie_id)
    rows = movies_session.execute(stmt).all()

    if not rows:
        logger.debug("Movie %s not found for details", movie_id)
        return MovieDetailsList(movies=[])

    average = ratings_session.scalar(
        select(func.round(func.avg(Rating.rating), 2)).where(Rating.movie_id == movie_id)
    )

    movies = [
        format_movie_budget({**row._mapping, "average_rating": average}, MovieDetails)
        for row in rows
    ]

    return MovieDetailsList(movies=movies)


def _filtered_page(session: Session, condition, page: int) -> FilteredMoviePage:
    """Count and read one page of movies matching condition."""
    offset = _page_offset(page)

    total = session.scalar(select(func.count()).select_from(Movie).where(condition))

    stmt = (
        select(*_columns(Movie))
        .where(condition)
        .order_by(Movie.movie_id)
        .limit(PAGE_SIZE)
        .offset(offset)
    )
    rows = session.execute(stmt).all()

    movies = [format_movie_budget(row._mapping, FormattedMovieRecord) for row in rows]

    return FilteredMoviePage(
        page=page,
        page_size=PAGE_SIZE,
        total_pages=_total_pages(total),
        total_movies=total,
        movies=movies,
    )


@_store_call
def get_movies_by_year(session: Session, year: str, page: int = 1) -> FilteredMoviePage:
    """
    Get one page of movies released in a given year.

    The year is compared against the first four characters of the
    release date.

    Args:
        session: Movies dataset session
        year: Four-digit year string
        page: 1-based page number

    Returns:
        FilteredMoviePage with currency-formatted budgets

    Raises:
        ValidationError: If year is blank or not four digits
    """
    year = _require_text(year, "year")
    if not YEAR_PATTERN.fullmatch(year):
        raise ValidationError("Invalid year")

    condition = func.substr(Movie.release_date, 1, 4) == year
    return _filtered_page(session, condition, page)


@_store_call
def get_movies_by_genre(session: Session, genre: str, page: int = 1) -> FilteredMoviePage:
    """
    Get one page of movies tagged with a genre.

    A movie matches when its genres array holds an object whose name equals
    genre exactly (case-sensitive). Each movie is returned once.

    Args:
        session: Movies dataset session
        genre: Genre name
        page: 1-based page number

    Returns:
        FilteredMoviePage with currency-formatted budgets

    Raises:
        ValidationError: If genre is blank
    """
    genre = _require_text(genre, "genre name")

    condition = _GENRE_MATCH.bindparams(genre=genre)
    return _filtered_page(session, condition, page)


@_store_call
def get_genres(session: Session) -> List[Genre]:
    """
    Get the distinct genres used across all movies, ordered by name.

    Args:
        session: Movies dataset session

    Returns:
        List of Genre
    """
    rows = session.execute(_GENRE_LIST).all()
    return [Genre(id=row.id, name=row.name) for row in rows]


# ==================== RATING QUERIES ====================

@_store_call
def get_ratings(session: Session, movie_id: int) -> List[RatingRecord]:
    """
    Get all ratings for a movie.

    Args:
        session: Ratings dataset session
        movie_id: Movie ID

    Returns:
        List of RatingRecord

    Raises:
        NotFoundError: If the movie has no ratings
    """
    stmt = (
        select(*_columns(Rating))
        .where(Rating.movie_id == movie_id)
        .order_by(Rating.rating_id)
    )
    rows = session.execute(stmt).all()

    if not rows:
        logger.debug("No ratings found for movie %s", movie_id)
        raise NotFoundError("No ratings found")

    return [RatingRecord.model_validate(dict(row._mapping)) for row in rows]


@_store_call
def get_average_rating(session: Session, movie_id: int) -> AverageRating:
    """
    Get the average rating of a movie, rounded to 2 decimals.

    Args:
        session: Ratings dataset session
        movie_id: Movie ID

    Returns:
        AverageRating with the mean and the number of ratings

    Raises:
        NotFoundError: If the movie has no ratings (the average is undefined)
    """
    stats = session.execute(
        select(
            func.count(Rating.rating_id).label('num_ratings'),
            func.round(func.avg(Rating.rating), 2).label('average'),
        ).where(Rating.movie_id == movie_id)
    ).one()

    if not stats.num_ratings:
        logger.debug("No ratings found for movie %s", movie_id)
        raise NotFoundError("No ratings found")

    return AverageRating(movie_id=movie_id, average_rating=stats.average, count=stats.num_ratings)
