"""
SQLAlchemy ORM models for the movies and ratings datasets.

The two datasets live in separate SQLite files, so each one has its own
declarative base. Attribute names are snake_case; the stored column names
are kept as they appear in the dataset files.
"""

from sqlalchemy import Integer, Float, Text, Index
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class MoviesBase(DeclarativeBase):
    """Base class for models stored in the movies dataset."""
    pass


class RatingsBase(DeclarativeBase):
    """Base class for models stored in the ratings dataset."""
    pass


class Movie(MoviesBase):
    """
    Movie table storing movie information and metadata.

    Attributes:
        movie_id: Movie identifier
        imdb_id: IMDB identifier (e.g. 'tt0111161')
        title: Movie title
        overview: Free-text plot summary
        production_companies: Serialized list of production companies
        release_date: ISO release date ('YYYY-MM-DD')
        budget: Budget in US dollars
        revenue: Revenue in US dollars
        runtime: Runtime in minutes
        language: Original language code
        genres: JSON array of {"id", "name"} objects stored as text
        status: Release status
    """
    __tablename__ = 'movies'

    movie_id: Mapped[int] = mapped_column("movieId", Integer, primary_key=True)
    imdb_id: Mapped[str | None] = mapped_column("imdbId", Text, nullable=True)
    title: Mapped[str | None] = mapped_column("title", Text, nullable=True)
    overview: Mapped[str | None] = mapped_column("overview", Text, nullable=True)
    production_companies: Mapped[str | None] = mapped_column(
        "productionCompanies", Text, nullable=True
    )
    release_date: Mapped[str | None] = mapped_column("releaseDate", Text, nullable=True)
    budget: Mapped[int | None] = mapped_column("budget", Integer, nullable=True)
    revenue: Mapped[int | None] = mapped_column("revenue", Integer, nullable=True)
    runtime: Mapped[float | None] = mapped_column("runtime", Float, nullable=True)
    language: Mapped[str | None] = mapped_column("language", Text, nullable=True)
    genres: Mapped[str | None] = mapped_column("genres", Text, nullable=True)  # JSON array as text
    status: Mapped[str | None] = mapped_column("status", Text, nullable=True)

    __table_args__ = (
        Index('idx_movies_release_date', 'releaseDate'),
    )

    def __repr__(self) -> str:
        return f"<Movie(movie_id={self.movie_id}, title='{self.title}', release_date={self.release_date})>"


class Rating(RatingsBase):
    """
    Rating table storing user ratings for movies.

    The movie_id column refers to movies in the other dataset file, so the
    relationship is not enforced.

    Attributes:
        rating_id: Rating identifier
        user_id: Identifier of the rating user
        movie_id: Identifier of the rated movie
        rating: Rating value
        timestamp: Unix time the rating was recorded
    """
    __tablename__ = 'ratings'

    rating_id: Mapped[int] = mapped_column("ratingId", Integer, primary_key=True)
    user_id: Mapped[int | None] = mapped_column("userId", Integer, nullable=True)
    movie_id: Mapped[int] = mapped_column("movieId", Integer, nullable=False)
    rating: Mapped[float] = mapped_column("rating", Float, nullable=False)
    timestamp: Mapped[int | None] = mapped_column("timestamp", Integer, nullable=True)

    __table_args__ = (
        Index('idx_ratings_movie', 'movieId'),
    )

    def __repr__(self) -> str:
        return f"<Rating(rating_id={self.rating_id}, movie_id={self.movie_id}, rating={self.rating})>"
