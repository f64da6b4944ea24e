"""
Pydantic schemas for API responses.
"""

from movies_api.api.models.movie import (
    MovieRecord,
    FormattedMovieRecord,
    MovieSummary,
    MovieDetails,
    MoviePage,
    FilteredMoviePage,
    MovieDetailsList,
)
from movies_api.api.models.rating import RatingRecord, AverageRating
from movies_api.api.models.genre import Genre
from movies_api.api.models.error import ErrorResponse

__all__ = [
    "MovieRecord",
    "FormattedMovieRecord",
    "MovieSummary",
    "MovieDetails",
    "MoviePage",
    "FilteredMoviePage",
    "MovieDetailsList",
    "RatingRecord",
    "AverageRating",
    "Genre",
    "ErrorResponse",
]
