"""
Rating API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from movies_api.api.dependencies import get_ratings_session
from movies_api.api.models import AverageRating, ErrorResponse, RatingRecord
from movies_api.database import queries

router = APIRouter(
    prefix="/ratings",
    tags=["ratings"],
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("/{movie_id}", response_model=list[RatingRecord])
def get_ratings(movie_id: int, db: Session = Depends(get_ratings_session)):
    """Get all ratings for a movie."""
    return queries.get_ratings(db, movie_id)


@router.get("/{movie_id}/average", response_model=AverageRating)
def get_average_rating(movie_id: int, db: Session = Depends(get_ratings_session)):
    """Get the average rating of a movie (404 when it has no ratings)."""
    return queries.get_average_rating(db, movie_id)
