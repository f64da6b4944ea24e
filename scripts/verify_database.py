#!/usr/bin/env python
"""
Verify the movies and ratings dataset files.

Checks performed:
1. Both files open read-only and hold their tables
2. Row counts
3. Movies whose genres column is not valid JSON
4. Ratings that refer to movies missing from the movies dataset

Usage:
    python scripts/verify_database.py
    python scripts/verify_database.py --movies-db data/movies.db --ratings-db data/ratings.db
"""

import sys
import argparse
from pathlib import Path

from sqlalchemy import func, select, text

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movies_api.api.config import get_movies_db_path, get_ratings_db_path
from movies_api.database import DatabaseManager, verify_schema
from movies_api.database.models import Movie, Rating


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def check_basic_stats(movies_session, ratings_session):
    """Print row counts for both datasets."""
    print_section("1. Dataset Statistics")

    movie_count = movies_session.scalar(select(func.count()).select_from(Movie))
    rating_count = ratings_session.scalar(select(func.count()).select_from(Rating))

    print(f"  Movies:  {movie_count:,}")
    print(f"  Ratings: {rating_count:,}")
    return movie_count > 0 and rating_count > 0


def check_genres(movies_session):
    """Report movies whose genres column is not valid JSON."""
    print_section("2. Genres Column")

    invalid = movies_session.execute(
        text(
            "SELECT movieId, title FROM movies "
            "WHERE genres IS NOT NULL AND NOT json_valid(genres) LIMIT 10"
        )
    ).all()

    if invalid:
        print("[WARNING] Movies with malformed genres (first 10):")
        for row in invalid:
            print(f"  {row.movieId}: {row.title}")
        return False

    print("[OK] All genres columns are valid JSON")
    return True


def check_orphan_ratings(movies_session, ratings_session):
    """Report ratings for movies that are not in the movies dataset."""
    print_section("3. Rating References")

    movie_ids = set(movies_session.scalars(select(Movie.movie_id)))
    rated_ids = set(ratings_session.scalars(select(Rating.movie_id).distinct()))
    orphans = rated_ids - movie_ids

    if orphans:
        print(f"[WARNING] {len(orphans):,} rated movie IDs are missing from the movies dataset")
        print(f"  Examples: {sorted(orphans)[:10]}")
        return False

    print("[OK] Every rated movie exists")
    return True


def main():
    parser = argparse.ArgumentParser(description="Verify the movies and ratings datasets")
    parser.add_argument('--movies-db', type=str, default=get_movies_db_path())
    parser.add_argument('--ratings-db', type=str, default=get_ratings_db_path())
    args = parser.parse_args()

    movies_db = DatabaseManager(args.movies_db, name="movies")
    ratings_db = DatabaseManager(args.ratings_db, name="ratings")

    try:
        if not (movies_db.verify_connection() and ratings_db.verify_connection()):
            print("[ERROR] Could not open both datasets")
            sys.exit(1)

        if not (verify_schema(movies_db.engine, {"movies"})
                and verify_schema(ratings_db.engine, {"ratings"})):
            print("[ERROR] Dataset tables are missing")
            sys.exit(1)

        with movies_db.read_session() as movies_session, \
                ratings_db.read_session() as ratings_session:
            results = [
                check_basic_stats(movies_session, ratings_session),
                check_genres(movies_session),
                check_orphan_ratings(movies_session, ratings_session),
            ]
    finally:
        movies_db.close()
        ratings_db.close()

    print_section("Summary")
    if all(results):
        print("[SUCCESS] Datasets look good")
    else:
        print("[WARNING] Some checks reported problems")
        sys.exit(1)


if __name__ == "__main__":
    main()
