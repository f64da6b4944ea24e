"""
FastAPI application entry point for the Movies API.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movies_api import __version__
from movies_api.api.config import Settings
from movies_api.api.errors import register_exception_handlers
from movies_api.api.routers import movies, ratings, genres, system
from movies_api.database.connection import DatabaseManager
from movies_api.utils.logging_config import configure_api_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open both datasets read-only for the lifetime of the application."""
    settings: Settings = app.state.settings
    app.state.movies_db = DatabaseManager(settings.movies_db_path, name="movies")
    app.state.ratings_db = DatabaseManager(settings.ratings_db_path, name="ratings")
    # A dataset that fails to open is logged; its endpoints answer 500
    app.state.movies_db.verify_connection()
    app.state.ratings_db.verify_connection()
    try:
        yield
    finally:
        app.state.movies_db.close()
        app.state.ratings_db.close()
        logger.info("Datasets closed")


def create_app(settings: Optional[Settings] = None, configure_logging: bool = True) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Runtime settings (read from the environment when None)
        configure_logging: If True, install the API logging handlers

    Returns:
        FastAPI application
    """
    settings = settings or Settings()
    if configure_logging:
        configure_api_logging(level=settings.log_level, log_file=settings.log_file)

    app = FastAPI(
        title="Movies API",
        description="Read-only REST API over the movies and ratings datasets",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(system.router)
    app.include_router(genres.router)
    app.include_router(ratings.router)
    app.include_router(movies.router)

    return app


def run() -> None:
    """Start the API server with settings from the environment."""
    settings = Settings()
    app = create_app(settings)
    logger.info("Server is running on http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
