"""
Read-only database connection management using SQLAlchemy.

This module opens each SQLite dataset read-only, hands out short-lived
sessions for request handling, and enforces an optional per-request
deadline on running statements.
"""

import logging
import os
import time
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session

from movies_api.database.exceptions import QueryError

logger = logging.getLogger(__name__)

# Number of SQLite virtual machine instructions between deadline checks
PROGRESS_HANDLER_STEPS = 1000


def get_database_url(db_path: str, read_only: bool = True) -> str:
    """
    Get SQLite database URL.

    Args:
        db_path: Path to SQLite database file
        read_only: If True, open the file through a read-only SQLite URI

    Returns:
        SQLAlchemy database URL
    """
    abs_path = os.path.abspath(db_path)

    if read_only:
        # mode=ro refuses writes and never creates a missing file
        return f"sqlite:///file:{abs_path}?mode=ro&uri=true"
    return f"sqlite:///{abs_path}"


def set_query_only_pragma(dbapi_conn, connection_record):
    """
    Reject writes on every connection.

    Registered for the engines of read-only managers.
    """
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA query_only=ON")
    cursor.close()


def deadline_exceeded(session: Session) -> bool:
    """Return True if the session carries a deadline that has passed."""
    deadline = session.info.get("deadline")
    return deadline is not None and time.monotonic() >= deadline


class DatabaseManager:
    """
    Read-only database connection manager for one dataset file.

    Handles engine creation and session management. The engine is shared by
    all requests; each session checks out its own pooled connection.
    """

    def __init__(self, db_path: str, echo: bool = False, name: Optional[str] = None):
        """
        Initialize database manager.

        Args:
            db_path: Path to SQLite database file
            echo: If True, log all SQL statements (useful for debugging)
            name: Dataset name used in log messages (defaults to the file name)
        """
        self.db_path = db_path
        self.name = name or os.path.basename(db_path)
        self.database_url = get_database_url(db_path)

        # check_same_thread=False lets pooled connections move between
        # threadpool workers
        self.engine = create_engine(
            self.database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )
        event.listen(self.engine, "connect", set_query_only_pragma)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def verify_connection(self) -> bool:
        """
        Check that the dataset can be opened and queried.

        Returns:
            True if a trivial statement succeeds, False otherwise
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error("Error opening database %s: %s", self.name, e)
            return False
        logger.info("Database %s opened successfully", self.name)
        return True

    @contextmanager
    def read_session(self, timeout: Optional[float] = None) -> Generator[Session, None, None]:
        """
        Context manager for read-only database sessions.

        The session is always rolled back and closed; nothing is committed.

        Usage:
            with db_manager.read_session(timeout=5) as session:
                rows = session.execute(select(Movie.title)).all()

        Args:
            timeout: Seconds before running statements are interrupted
                (None or 0 disables the deadline)

        Yields:
            SQLAlchemy Session object

        Raises:
            QueryError: If a connection for the deadline cannot be opened
        """
        session = self.SessionLocal()
        dbapi_conn = None
        try:
            if timeout:
                deadline = time.monotonic() + timeout
                session.info["deadline"] = deadline
                try:
                    dbapi_conn = session.connection().connection.dbapi_connection
                except SQLAlchemyError as e:
                    logger.exception("Failed to open a connection to %s", self.name)
                    raise QueryError("Failed to query the dataset") from e
                dbapi_conn.set_progress_handler(
                    lambda: int(time.monotonic() >= deadline),
                    PROGRESS_HANDLER_STEPS
                )
            yield session
        finally:
            if dbapi_conn is not None:
                dbapi_conn.set_progress_handler(None, 0)
            session.rollback()
            session.close()

    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()
