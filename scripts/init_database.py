#!/usr/bin/env python
"""
Build the movies and ratings dataset files from CSV exports.

The API opens both files read-only; this offline script is how they are
produced. CSV headers must use the dataset column names:

    movies.csv:  movieId,imdbId,title,overview,productionCompanies,
                 releaseDate,budget,revenue,runtime,language,genres,status
    ratings.csv: ratingId,userId,movieId,rating,timestamp

(ratingId may be omitted; rows are then numbered from 1.)

Usage:
    # Build both datasets from scratch
    python scripts/init_database.py --reset \
        --movies-csv data/movies.csv --ratings-csv data/ratings.csv

    # Rebuild only the ratings dataset
    python scripts/init_database.py --reset --ratings-csv data/ratings.csv
"""

import sys
import csv
import time
import argparse
from pathlib import Path

from sqlalchemy import insert
from sqlalchemy.orm import Session

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movies_api.database.init_db import create_movies_dataset, create_ratings_dataset
from movies_api.database.models import Movie, Rating


MOVIE_COLUMNS = {
    'movieId': ('movie_id', int),
    'imdbId': ('imdb_id', str),
    'title': ('title', str),
    'overview': ('overview', str),
    'productionCompanies': ('production_companies', str),
    'releaseDate': ('release_date', str),
    'budget': ('budget', int),
    'revenue': ('revenue', int),
    'runtime': ('runtime', float),
    'language': ('language', str),
    'genres': ('genres', str),
    'status': ('status', str),
}

RATING_COLUMNS = {
    'ratingId': ('rating_id', int),
    'userId': ('user_id', int),
    'movieId': ('movie_id', int),
    'rating': ('rating', float),
    'timestamp': ('timestamp', int),
}


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def convert_row(row, columns):
    """
    Map a CSV row to model attribute values.

    Empty cells become None; numeric cells are converted ('1.5e6' style
    budgets are accepted through float).
    """
    values = {}
    for column, (attr, cast) in columns.items():
        raw = row.get(column)
        if raw is None or raw.strip() == '':
            values[attr] = None
        elif cast is int:
            values[attr] = int(float(raw))
        else:
            values[attr] = cast(raw)
    return values


def import_csv(engine, csv_path, model, columns, batch_size=5000, verbose=True):
    """
    Bulk insert a CSV file into a dataset table.

    Args:
        engine: Writable engine for the dataset file
        csv_path: Path to the CSV export
        model: ORM model of the target table
        columns: Mapping of CSV column -> (attribute, type)
        batch_size: Rows per insert batch
        verbose: Print progress information

    Returns:
        Number of rows imported
    """
    imported_count = 0
    batch = []
    start_time = time.time()

    with Session(engine) as session, open(csv_path, newline='', encoding='utf-8') as f:
        for line_num, row in enumerate(csv.DictReader(f), 1):
            values = convert_row(row, columns)
            if 'rating_id' in values and values['rating_id'] is None:
                values['rating_id'] = line_num
            batch.append(values)

            if len(batch) >= batch_size:
                session.execute(insert(model), batch)
                imported_count += len(batch)
                batch = []
                if verbose:
                    print(f"  Imported {imported_count:,} rows...")

        if batch:
            session.execute(insert(model), batch)
            imported_count += len(batch)

        session.commit()

    if verbose:
        elapsed = time.time() - start_time
        print(f"\n[SUCCESS] Imported {imported_count:,} rows in {elapsed:.2f}s")

    return imported_count


def main():
    """Main entry point for dataset creation."""

    parser = argparse.ArgumentParser(
        description="Build the movies and ratings SQLite datasets from CSV"
    )
    parser.add_argument(
        '--movies-csv',
        type=str,
        help='CSV export of the movies table'
    )
    parser.add_argument(
        '--ratings-csv',
        type=str,
        help='CSV export of the ratings table'
    )
    parser.add_argument(
        '--movies-db',
        type=str,
        default='data/movies.db',
        help='Path to the movies dataset (default: data/movies.db)'
    )
    parser.add_argument(
        '--ratings-db',
        type=str,
        default='data/ratings.db',
        help='Path to the ratings dataset (default: data/ratings.db)'
    )
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate tables before importing (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--batch-size',
        type=int,
        default=5000,
        help='Rows per insert batch (default: 5000)'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress verbose output'
    )

    args = parser.parse_args()
    verbose = not args.quiet

    if not args.movies_csv and not args.ratings_csv:
        print("[ERROR] Nothing to import: pass --movies-csv and/or --ratings-csv")
        sys.exit(1)

    for csv_path in (args.movies_csv, args.ratings_csv):
        if csv_path and not Path(csv_path).exists():
            print(f"[ERROR] CSV file not found: {csv_path}")
            sys.exit(1)

    if args.movies_csv:
        if verbose:
            print_section(f"Importing Movies into {args.movies_db}")
        Path(args.movies_db).parent.mkdir(parents=True, exist_ok=True)
        engine = create_movies_dataset(args.movies_db, reset=args.reset)
        try:
            import_csv(engine, args.movies_csv, Movie, MOVIE_COLUMNS, args.batch_size, verbose)
        finally:
            engine.dispose()

    if args.ratings_csv:
        if verbose:
            print_section(f"Importing Ratings into {args.ratings_db}")
        Path(args.ratings_db).parent.mkdir(parents=True, exist_ok=True)
        engine = create_ratings_dataset(args.ratings_db, reset=args.reset)
        try:
            import_csv(engine, args.ratings_csv, Rating, RATING_COLUMNS, args.batch_size, verbose)
        finally:
            engine.dispose()


if __name__ == "__main__":
    main()
