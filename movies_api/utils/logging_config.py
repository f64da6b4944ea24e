"""
Logging configuration for the movies API.

The API logs to the console and, when LOG_FILE is set, to a rotating file
under the log directory. Modules obtain loggers with get_logger(__name__).
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import List, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def _api_handlers(log_file: Optional[str], log_dir: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_path / log_file,
                maxBytes=MAX_LOG_BYTES,
                backupCount=LOG_BACKUP_COUNT,
            )
        )
    return handlers


def configure_api_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: str = "logs"
) -> None:
    """
    Install the API's console and file handlers on the root logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: Logging level name ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_file: Log file name (console only when None)
        log_dir: Directory for the log file

    Raises:
        ValueError: If level is not a logging level name
    """
    level = level.upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _api_handlers(log_file, log_dir):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # SQL echo is controlled by DatabaseManager(echo=...)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

    if log_file:
        root_logger.info("Logging to file: %s", Path(log_dir) / log_file)


def get_logger(name: str) -> logging.Logger:
    """Logger for a module of the API (pass __name__)."""
    return logging.getLogger(name)
