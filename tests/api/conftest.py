"""
API test fixtures.

Uses FastAPI TestClient against an application opened on the sample
dataset files.
"""

from contextlib import ExitStack

import pytest
from fastapi.testclient import TestClient

from movies_api.api.config import Settings
from movies_api.api.main import create_app


def make_settings(movies_db_path, ratings_db_path):
    return Settings(
        movies_db_path=movies_db_path,
        ratings_db_path=ratings_db_path,
        host="127.0.0.1",
        port=3000,
        log_level="INFO",
        log_file=None,
        query_timeout=5,
    )


@pytest.fixture
def client(movies_db_path, ratings_db_path):
    """TestClient with the lifespan running (datasets opened)."""
    app = create_app(make_settings(movies_db_path, ratings_db_path), configure_logging=False)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def broken_client(tmp_path):
    """TestClient whose dataset files do not exist."""
    settings = make_settings(str(tmp_path / "missing_movies.db"), str(tmp_path / "missing_ratings.db"))
    app = create_app(settings, configure_logging=False)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_client(ratings_db_path):
    """Factory for TestClients opened on another movies dataset file."""
    with ExitStack() as stack:
        def _make(movies_db_path):
            app = create_app(make_settings(movies_db_path, ratings_db_path), configure_logging=False)
            return stack.enter_context(TestClient(app))

        yield _make
