"""
FastAPI dependency injection for the database and resource services.
"""

from fastapi import Depends
from pymongo.database import Database

from app.database.connection import get_db_manager
from app.api.config import get_mongo_uri, get_database_name
from app.core.services import MovieService, SeriesService, ReviewService


def get_db() -> Database:
    """Return the configured MongoDB database for FastAPI Depends()."""
    return get_db_manager(uri=get_mongo_uri(), db_name=get_database_name()).db


def get_movie_service(db: Database = Depends(get_db)) -> MovieService:
    return MovieService(db)


def get_series_service(db: Database = Depends(get_db)) -> SeriesService:
    return SeriesService(db)


def get_review_service(db: Database = Depends(get_db)) -> ReviewService:
    return ReviewService(db)
