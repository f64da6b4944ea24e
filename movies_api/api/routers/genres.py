"""
Genre API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from movies_api.api.dependencies import get_movies_session
from movies_api.api.models import ErrorResponse, Genre
from movies_api.database import queries

router = APIRouter(
    prefix="/genres",
    tags=["genres"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("/all", response_model=list[Genre])
def get_genre_list(db: Session = Depends(get_movies_session)):
    """List the distinct genres used by the movies dataset."""
    return queries.get_genres(db)
