"""
Dataset file creation and schema verification.

The API only ever reads the datasets. These helpers are used by the
developer scripts and the test suite to build dataset files.
"""

import logging
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase

from movies_api.database.connection import get_database_url
from movies_api.database.models import MoviesBase, RatingsBase

logger = logging.getLogger(__name__)


def create_dataset(db_path: str, base: type[DeclarativeBase], reset: bool = False) -> Engine:
    """
    Create a writable engine for a dataset file and build its tables.

    Args:
        db_path: Path to SQLite database file
        base: Declarative base holding the dataset's tables
        reset: If True, drop existing tables before creating new ones

    Returns:
        Writable SQLAlchemy Engine (dispose it when done)
    """
    engine = create_engine(get_database_url(db_path, read_only=False))

    if reset:
        logger.info("Resetting dataset %s (dropping all tables)", db_path)
        base.metadata.drop_all(bind=engine)
    base.metadata.create_all(bind=engine)
    logger.info("Dataset tables created in %s", db_path)

    return engine


def create_movies_dataset(db_path: str, reset: bool = False) -> Engine:
    """Create the movies dataset file."""
    return create_dataset(db_path, MoviesBase, reset=reset)


def create_ratings_dataset(db_path: str, reset: bool = False) -> Engine:
    """Create the ratings dataset file."""
    return create_dataset(db_path, RatingsBase, reset=reset)


def verify_schema(engine: Engine, expected_tables: set[str]) -> bool:
    """
    Verify that all expected tables exist in a dataset.

    Args:
        engine: Engine bound to the dataset
        expected_tables: Names of the tables that must exist

    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(inspect(engine).get_table_names())
    missing_tables = expected_tables - existing_tables

    if missing_tables:
        logger.warning("Missing tables: %s", missing_tables)
        return False

    return True
