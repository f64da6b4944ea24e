"""
API route handlers.
"""

from movies_api.api.routers import movies, ratings, genres, system

__all__ = ["movies", "ratings", "genres", "system"]
