"""
Shared fixtures: small movies and ratings dataset files.

Datasets are built with a writable engine under tmp_path; the code under
test then opens them read-only, as the API does.
"""

import json

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session

from movies_api.database.connection import DatabaseManager, get_database_url
from movies_api.database.init_db import create_movies_dataset, create_ratings_dataset
from movies_api.database.models import Movie, Rating


def _genres(*pairs):
    return json.dumps([{"id": genre_id, "name": name} for genre_id, name in pairs])


SAMPLE_MOVIES = [
    dict(
        movie_id=1, imdb_id="tt0114709", title="Toy Story",
        overview="A cowboy doll is threatened by a new spaceman figure.",
        production_companies='[{"name": "Pixar Animation Studios"}]',
        release_date="1995-10-30", budget=1000000, revenue=373554033, runtime=81.0,
        language="en", genres=_genres((16, "Animation"), (35, "Comedy"), (10751, "Family")),
        status="Released",
    ),
    dict(
        movie_id=2, imdb_id="tt0113497", title="Jumanji",
        overview="Siblings find a magical board game.",
        production_companies='[{"name": "TriStar Pictures"}]',
        release_date="1995-12-15", budget=65000000, revenue=262797249, runtime=104.0,
        language="en", genres=_genres((12, "Adventure"), (14, "Fantasy"), (10751, "Family")),
        status="Released",
    ),
    dict(
        movie_id=3, imdb_id="tt0113277", title="Heat",
        overview="A group of professional bank robbers.",
        production_companies='[{"name": "Warner Bros."}]',
        release_date="1995-12-15", budget=60000000, revenue=187436818, runtime=170.0,
        language="en", genres=_genres((28, "Action"), (80, "Crime"), (18, "Drama")),
        status="Released",
    ),
    dict(
        movie_id=4, imdb_id="tt0112641", title="Casino",
        overview="Greed, deception, money, power, and murder.",
        production_companies='[{"name": "Universal Pictures"}]',
        release_date="1995-11-22", budget=52000000, revenue=116112375, runtime=178.0,
        language="en", genres=_genres((18, "Drama"), (80, "Crime")),
        status="Released",
    ),
    dict(
        movie_id=5, imdb_id="tt0209144", title="Memento",
        overview="A man with short-term memory loss hunts a killer.",
        production_companies='[{"name": "Summit Entertainment"}]',
        release_date="2000-10-11", budget=9000000, revenue=39723096, runtime=113.0,
        language="en", genres=_genres((9648, "Mystery"), (53, "Thriller")),
        status="Released",
    ),
    dict(
        movie_id=6, imdb_id="tt0000006", title="Broken Genres",
        overview=None, production_companies=None,
        release_date="2001-01-01", budget=None, revenue=None, runtime=None,
        language="fr", genres="not json", status="Released",
    ),
    dict(
        movie_id=7, imdb_id="tt0000007", title="No Genres",
        overview=None, production_companies=None,
        release_date="2001-05-05", budget=0, revenue=0, runtime=90.0,
        language="de", genres=None, status="Rumored",
    ),
]

# movie 1 -> 4.17, movie 2 -> 3.0, movie 3 -> 2.75, movies 4+ unrated
SAMPLE_RATINGS = [
    dict(rating_id=1, user_id=10, movie_id=1, rating=4.0, timestamp=1260759144),
    dict(rating_id=2, user_id=11, movie_id=1, rating=3.5, timestamp=1260759179),
    dict(rating_id=3, user_id=12, movie_id=1, rating=5.0, timestamp=1260759182),
    dict(rating_id=4, user_id=10, movie_id=2, rating=3.0, timestamp=1260759185),
    dict(rating_id=5, user_id=11, movie_id=3, rating=2.5, timestamp=1260759205),
    dict(rating_id=6, user_id=12, movie_id=3, rating=3.0, timestamp=1260759151),
]


def build_movies_dataset(path, movies):
    """Write a movies dataset file holding the given rows."""
    engine = create_movies_dataset(str(path))
    with Session(engine) as session:
        session.add_all(Movie(**movie) for movie in movies)
        session.commit()
    engine.dispose()
    return str(path)


def build_ratings_dataset(path, ratings):
    """Write a ratings dataset file holding the given rows."""
    engine = create_ratings_dataset(str(path))
    with Session(engine) as session:
        session.add_all(Rating(**rating) for rating in ratings)
        session.commit()
    engine.dispose()
    return str(path)


UNKEYED_MOVIES_TABLE = text(
    "CREATE TABLE movies (movieId INTEGER, imdbId TEXT, title TEXT, overview TEXT, "
    "productionCompanies TEXT, releaseDate TEXT, budget INTEGER, revenue INTEGER, "
    "runtime REAL, language TEXT, genres TEXT, status TEXT)"
)

# Two exported rows sharing movieId 1
DUPLICATE_ID_MOVIES = [
    dict(movie_id=1, title="Toy Story", budget=30000000),
    dict(movie_id=1, title="Toy Story (re-release)", budget=1000000),
    dict(movie_id=2, title="Jumanji", budget=65000000),
]


def build_unkeyed_movies_dataset(path, movies):
    """Write a movies table with no primary key, so movieId may repeat."""
    engine = create_engine(get_database_url(str(path), read_only=False))
    with engine.begin() as conn:
        conn.execute(UNKEYED_MOVIES_TABLE)
        conn.execute(
            text("INSERT INTO movies (movieId, title, budget) VALUES (:movie_id, :title, :budget)"),
            movies,
        )
    engine.dispose()
    return str(path)


def numbered_movies(count):
    """Generate `count` minimal movies with ids 1..count."""
    return [
        dict(
            movie_id=i,
            title=f"Movie {i}",
            release_date="2010-01-01",
            budget=i * 1000,
            genres=_genres((18, "Drama")),
        )
        for i in range(1, count + 1)
    ]


@pytest.fixture
def movies_db_path(tmp_path):
    """Path to a movies dataset with the sample movies."""
    return build_movies_dataset(tmp_path / "movies.db", SAMPLE_MOVIES)


@pytest.fixture
def ratings_db_path(tmp_path):
    """Path to a ratings dataset with the sample ratings."""
    return build_ratings_dataset(tmp_path / "ratings.db", SAMPLE_RATINGS)


@pytest.fixture
def movies_db(movies_db_path):
    """Read-only manager for the sample movies dataset."""
    manager = DatabaseManager(movies_db_path, name="movies")
    yield manager
    manager.close()


@pytest.fixture
def ratings_db(ratings_db_path):
    """Read-only manager for the sample ratings dataset."""
    manager = DatabaseManager(ratings_db_path, name="ratings")
    yield manager
    manager.close()


@pytest.fixture
def movies_session(movies_db):
    """Read-only session on the sample movies dataset."""
    with movies_db.read_session() as session:
        yield session


@pytest.fixture
def ratings_session(ratings_db):
    """Read-only session on the sample ratings dataset."""
    with ratings_db.read_session() as session:
        yield session


@pytest.fixture
def make_movies_db(tmp_path):
    """Factory for read-only managers over a movies dataset of `count` generated rows."""
    managers = []

    def _make(count, name="numbered_movies.db"):
        path = build_movies_dataset(tmp_path / name, numbered_movies(count))
        manager = DatabaseManager(path, name="movies")
        managers.append(manager)
        return manager

    yield _make
    for manager in managers:
        manager.close()


@pytest.fixture
def duplicate_id_movies_db_path(tmp_path):
    """Path to a movies dataset where movieId 1 appears twice."""
    return build_unkeyed_movies_dataset(tmp_path / "duplicate_movies.db", DUPLICATE_ID_MOVIES)


@pytest.fixture
def mixed_genres_movies_db_path(tmp_path):
    """Path to a movies dataset whose genres arrays mix names and objects."""
    movies = [
        dict(movie_id=1, title="Plain Names", genres='["Drama"]'),
        dict(movie_id=2, title="Object Genres", genres=_genres((18, "Drama"))),
        dict(movie_id=3, title="Mixed", genres='["Crime", {"id": 80, "name": "Crime"}, 7]'),
    ]
    return build_movies_dataset(tmp_path / "mixed_genres.db", movies)
