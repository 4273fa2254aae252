#!/usr/bin/env python
"""
Database initialization script for the cinema API.

This script:
1. Creates the collection indexes (unique imdbId, review parent lookup)
2. Optionally seeds a small sample catalogue with a review per title
3. Verifies collections and indexes

Usage:
    # Create indexes only
    python scripts/init_database.py

    # Drop everything, recreate indexes, and load the sample catalogue
    python scripts/init_database.py --reset --seed
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api.config import get_mongo_uri, get_database_name
from app.api.models import MovieRequest, SeriesRequest, ReviewRequest
from app.core.errors import AlreadyExistsError
from app.core.services import MovieService, SeriesService, ReviewService
from app.database import DatabaseManager, init_database, verify_schema
from app.utils.logging_config import setup_logging, get_logger

logger = get_logger(__name__)

SAMPLE_MOVIES = [
    {
        "imdbId": "tt0993846",
        "title": "The Wolf of Wall Street",
        "overview": "The rise and fall of stockbroker Jordan Belfort.",
        "duration": "2h 59m",
        "director": "Martin Scorsese",
        "releaseDate": "2014-01-17",
        "trailerLink": "https://youtu.be/DEMZSa0esCU",
        "genres": ["Crime", "Drama", "Comedy"],
        "poster": "https://image.tmdb.org/t/p/original/jTlIYjvS16XOpsfvYCTmtEHV10K.jpg",
        "backdrop": "https://image.tmdb.org/t/p/original/7Nwnmyzrtd0FkcRyPqmdzTPppQa.jpg",
    },
    {
        "imdbId": "tt1375666",
        "title": "Inception",
        "overview": "A thief who steals corporate secrets through dream-sharing technology.",
        "duration": "2h 28m",
        "director": "Christopher Nolan",
        "releaseDate": "2010-07-16",
        "trailerLink": "https://www.youtube.com/watch?v=YoHD9XEInc0",
        "genres": ["Action", "Science Fiction"],
        "poster": "https://image.tmdb.org/t/p/original/inception_poster.jpg",
        "backdrop": "https://image.tmdb.org/t/p/original/inception_backdrop.jpg",
    },
]

SAMPLE_SERIES = [
    {
        "imdbId": "tt11198330",
        "title": "House of the Dragon",
        "overview": "The Targaryen civil war, two hundred years before Game of Thrones.",
        "numberOfSeasons": 1,
        "creator": "Ryan Condal",
        "releaseDate": "2022-08-21",
        "trailerLink": "https://youtu.be/DotnJ7tTA34",
        "genres": ["Drama", "Fantasy"],
        "seasonList": [
            {
                "overview": "The succession crisis begins.",
                "poster": "https://image.tmdb.org/t/p/original/hotd_s1.jpg",
                "episodeList": [
                    {
                        "title": "The Heirs of the Dragon",
                        "releaseDate": "2022-08-21",
                        "duration": "1h 6m",
                        "description": "King Viserys hosts a tournament.",
                    },
                ],
            },
        ],
        "poster": "https://image.tmdb.org/t/p/original/hotd_poster.jpg",
        "backdrop": "https://image.tmdb.org/t/p/original/hotd_backdrop.jpg",
    },
]


def seed_catalogue(db) -> int:
    """
    Insert the sample movies and series, each with one review.

    Titles whose imdbId already exists are skipped.

    Returns:
        Number of titles inserted
    """
    movie_service = MovieService(db)
    series_service = SeriesService(db)
    review_service = ReviewService(db)

    inserted = 0
    samples = [(movie_service, MovieRequest, m) for m in SAMPLE_MOVIES]
    samples += [(series_service, SeriesRequest, s) for s in SAMPLE_SERIES]
    for service, model, payload in samples:
        try:
            created = service.create(model.model_validate(payload))
        except AlreadyExistsError:
            logger.info("Skipping %s, already present", payload["imdbId"])
            continue
        review_service.create(ReviewRequest(
            imdb_id=created.imdb_id,
            title="Worth watching",
            rating=4,
            body=f"{created.title} holds up on a second viewing.",
        ))
        inserted += 1
    return inserted


def main():
    parser = argparse.ArgumentParser(description="Initialize the cinema API database")
    parser.add_argument("--reset", action="store_true", help="Drop all collections first")
    parser.add_argument("--seed", action="store_true", help="Load the sample catalogue")
    args = parser.parse_args()

    setup_logging(level="INFO")

    manager = DatabaseManager(uri=get_mongo_uri(), db_name=get_database_name())
    try:
        init_database(manager, reset=args.reset)
        if args.seed:
            count = seed_catalogue(manager.db)
            logger.info("Seeded %d titles", count)
        ok = verify_schema(manager)
    finally:
        manager.close()

    if ok:
        print("\n✅ Database initialization successful!")
    else:
        print("\n❌ Database initialization failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
