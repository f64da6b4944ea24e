"""
Database module for the movies API.

This module provides the dataset models, read-only connection management,
and the query layer over the movies and ratings SQLite files.
"""

from movies_api.database.models import MoviesBase, RatingsBase, Movie, Rating
from movies_api.database.connection import DatabaseManager
from movies_api.database.exceptions import (
    MoviesApiError,
    ValidationError,
    NotFoundError,
    QueryError,
    QueryTimeoutError,
)
from movies_api.database.init_db import create_movies_dataset, create_ratings_dataset, verify_schema
from movies_api.database import queries

__all__ = [
    # Models
    'MoviesBase',
    'RatingsBase',
    'Movie',
    'Rating',
    # Connection
    'DatabaseManager',
    # Errors
    'MoviesApiError',
    'ValidationError',
    'NotFoundError',
    'QueryError',
    'QueryTimeoutError',
    # Initialization
    'create_movies_dataset',
    'create_ratings_dataset',
    'verify_schema',
    # Query module
    'queries',
]
