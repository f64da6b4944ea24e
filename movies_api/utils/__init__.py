"""
Shared utilities package.

This package contains logging configuration and the output formatting
helpers used across the application.
"""

from movies_api.utils.logging_config import configure_api_logging, get_logger
from movies_api.utils.formatting import format_currency, format_movie_budget

__all__ = ['configure_api_logging', 'get_logger', 'format_currency', 'format_movie_budget']
