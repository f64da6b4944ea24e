"""
Exception handlers mapping query layer errors to HTTP responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from movies_api.api.models import ErrorResponse
from movies_api.database.exceptions import MoviesApiError

logger = logging.getLogger(__name__)


async def movies_api_error_handler(request: Request, exc: MoviesApiError) -> JSONResponse:
    """Return the error's status with a structured body."""
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    body = ErrorResponse(error=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report invalid path or query parameters as 400."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    body = ErrorResponse(error="Invalid request parameters", detail=errors)
    return JSONResponse(status_code=400, content=jsonable_encoder(body.model_dump()))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""
    app.add_exception_handler(MoviesApiError, movies_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
