"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from movies_api.api.dependencies import get_movies_session, get_ratings_session
from movies_api.api.models import (
    ErrorResponse,
    FilteredMoviePage,
    MovieDetailsList,
    MoviePage,
    MovieRecord,
)
from movies_api.database import queries
from movies_api.database.exceptions import ValidationError

router = APIRouter(
    tags=["movies"],
    responses={500: {"model": ErrorResponse}},
)


@router.get(
    "/movies/all",
    response_model=list[MovieRecord],
    responses={404: {"model": ErrorResponse}},
)
def get_all_movies(db: Session = Depends(get_movies_session)):
    """List the first 100 movies with raw budgets."""
    return queries.get_all_movies(db)


@router.get(
    "/movies/{movie_id}",
    response_model=list[MovieRecord],
    responses={404: {"model": ErrorResponse}},
)
def get_movie(movie_id: int, db: Session = Depends(get_movies_session)):
    """Get every row for a movie ID with raw budgets."""
    return queries.get_movie(db, movie_id)


@router.get(
    "/moviesByPage",
    response_model=MoviePage,
    responses={400: {"model": ErrorResponse}},
)
def get_movies_by_page(
    page: int = Query(1, ge=1, description="1-based page number"),
    db: Session = Depends(get_movies_session),
):
    """List movies 50 per page."""
    return queries.get_paginated_movies(db, page)


@router.get("/movieDetailsWithRatings/{movie_id}", response_model=MovieDetailsList)
def get_movie_details_with_ratings(
    movie_id: int,
    movies_db: Session = Depends(get_movies_session),
    ratings_db: Session = Depends(get_ratings_session),
):
    """Get movie details with the average rating from the ratings dataset."""
    return queries.get_movie_details_with_ratings(movies_db, ratings_db, movie_id)


@router.get(
    "/moviesByYear/{year}",
    response_model=FilteredMoviePage,
    responses={400: {"model": ErrorResponse}},
)
def get_movies_by_year(
    year: str,
    page: int = Query(1, ge=1, description="1-based page number"),
    db: Session = Depends(get_movies_session),
):
    """List movies released in a year, 50 per page."""
    return queries.get_movies_by_year(db, year, page)


@router.get("/moviesByYear/", include_in_schema=False)
def get_movies_by_missing_year():
    raise ValidationError("Invalid year")


@router.get(
    "/moviesByGenre/{genre}",
    response_model=FilteredMoviePage,
    responses={400: {"model": ErrorResponse}},
)
def get_movies_by_genre(
    genre: str,
    page: int = Query(1, ge=1, description="1-based page number"),
    db: Session = Depends(get_movies_session),
):
    """List movies tagged with a genre, 50 per page."""
    return queries.get_movies_by_genre(db, genre, page)


@router.get("/moviesByGenre/", include_in_schema=False)
def get_movies_by_missing_genre():
    raise ValidationError("Invalid genre name")
