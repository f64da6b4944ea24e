"""
FastAPI dependency injection for dataset sessions.

The DatabaseManager for each dataset is created once by the application
lifespan and stored on app.state; every request gets its own read-only
session from it.
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session


def _read_session(request: Request, manager_name: str) -> Generator[Session, None, None]:
    manager = getattr(request.app.state, manager_name)
    settings = request.app.state.settings
    with manager.read_session(timeout=settings.query_timeout) as session:
        yield session


def get_movies_session(request: Request) -> Generator[Session, None, None]:
    """Yield a movies dataset session for FastAPI Depends()."""
    yield from _read_session(request, "movies_db")


def get_ratings_session(request: Request) -> Generator[Session, None, None]:
    """Yield a ratings dataset session for FastAPI Depends()."""
    yield from _read_session(request, "ratings_db")
