"""
Database module for the cinema API.

This module provides MongoDB connection management, index initialization,
and CRUD operations for the movies, series, and reviews collections.
"""

from app.database.connection import (
    MOVIES,
    SERIES,
    REVIEWS,
    DatabaseManager,
    get_db_manager,
    close_db_manager,
)
from app.database.init_db import init_database, verify_schema
from app.database import crud

__all__ = [
    # Collections
    'MOVIES',
    'SERIES',
    'REVIEWS',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    'close_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
    # CRUD module
    'crud',
]
