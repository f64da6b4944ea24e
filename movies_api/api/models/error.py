"""
Pydantic schema for error responses.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned with every 4xx/5xx produced by the API."""

    error: str
    detail: list[dict] | None = None
