"""
Pydantic schemas for Genre API.
"""

from pydantic import BaseModel


class Genre(BaseModel):
    """A genre as it appears in the movies' genres arrays."""

    id: int | None = None
    name: str
