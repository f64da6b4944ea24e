"""
API configuration loaded from environment or defaults.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DATA_DIR = Path(__file__).resolve().parents[2] / "data"


def get_movies_db_path() -> str:
    """Get movies dataset path from env or default."""
    return os.getenv("MOVIES_DB_PATH", "") or str(DATA_DIR / "movies.db")


def get_ratings_db_path() -> str:
    """Get ratings dataset path from env or default."""
    return os.getenv("RATINGS_DB_PATH", "") or str(DATA_DIR / "ratings.db")


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> Optional[str]:
    """Get log file name from env (console only when unset)."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("PORT") or os.getenv("API_PORT") or "3000")


def get_query_timeout() -> Optional[float]:
    """Get the per-request query deadline in seconds (0 disables it)."""
    timeout = float(os.getenv("QUERY_TIMEOUT_SECONDS", "10"))
    return timeout if timeout > 0 else None


@dataclass
class Settings:
    """Runtime settings for one application instance."""

    movies_db_path: str = field(default_factory=get_movies_db_path)
    ratings_db_path: str = field(default_factory=get_ratings_db_path)
    host: str = field(default_factory=get_api_host)
    port: int = field(default_factory=get_api_port)
    log_level: str = field(default_factory=get_log_level)
    log_file: Optional[str] = field(default_factory=get_log_file)
    query_timeout: Optional[float] = field(default_factory=get_query_timeout)
