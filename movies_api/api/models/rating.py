"""
Pydantic schemas for Rating API.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RatingRecord(BaseModel):
    """Response model for a single rating row."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    rating_id: int
    user_id: int | None = None
    movie_id: int
    rating: float
    timestamp: int | None = None


class AverageRating(BaseModel):
    """Response model for the aggregate rating of one movie."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    movie_id: int
    average_rating: float = Field(..., alias="average_rating")
    count: int
