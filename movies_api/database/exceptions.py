"""
Error taxonomy for the query layer.

Each error carries the HTTP status it maps to; the API layer registers
handlers that turn them into structured JSON responses.
"""


class MoviesApiError(Exception):
    """Base class for query layer errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MoviesApiError):
    """Missing or malformed request parameter, raised before any store access."""

    status_code = 400


class NotFoundError(MoviesApiError):
    """No rows matched the request."""

    status_code = 404


class QueryError(MoviesApiError):
    """The dataset could not be read."""

    status_code = 500


class QueryTimeoutError(QueryError):
    """The per-request deadline interrupted a running statement."""

    status_code = 504
