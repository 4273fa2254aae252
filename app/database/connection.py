"""
Database connection management using pymongo.

This module owns the process-wide ``MongoClient`` (whose connection pool is
shared by every request), hands out the configured database, and manages
the collection indexes.
"""

import logging

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)

# Collection names
MOVIES = "movies"
SERIES = "series"
REVIEWS = "reviews"

COLLECTIONS = (MOVIES, SERIES, REVIEWS)

# Default connection settings
DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_DB_NAME = "cinema-db"


class DatabaseManager:
    """
    MongoDB connection manager.

    Handles client creation, index management, and database teardown.
    """

    def __init__(
        self,
        uri: str = DEFAULT_MONGO_URI,
        db_name: str = DEFAULT_DB_NAME,
        client: MongoClient | None = None,
    ):
        """
        Initialize database manager.

        Args:
            uri: MongoDB connection string
            db_name: Name of the database holding the collections
            client: Pre-built client (any pymongo-compatible client);
                when omitted one is created from ``uri``
        """
        self.uri = uri
        self.db_name = db_name
        # The client connects lazily, so building it never blocks
        self.client = client if client is not None else MongoClient(
            uri, serverSelectionTimeoutMS=5000
        )

    @property
    def db(self) -> Database:
        """The configured database."""
        return self.client[self.db_name]

    def create_indexes(self):
        """
        Create the indexes the service layer relies on.

        ``imdbId`` is unique within movies and within series; reviews are
        looked up by parent. Existing indexes are left untouched.
        """
        self.db[MOVIES].create_index([("imdbId", ASCENDING)], unique=True, name="imdbId_unique")
        self.db[SERIES].create_index([("imdbId", ASCENDING)], unique=True, name="imdbId_unique")
        self.db[REVIEWS].create_index([("parentId", ASCENDING)], name="parentId")

    def drop_collections(self):
        """
        Drop the movies, series, and reviews collections.

        WARNING: This will delete all data in the database!
        """
        for name in COLLECTIONS:
            self.db.drop_collection(name)

    def reset_database(self):
        """
        Drop all collections and recreate the indexes.

        WARNING: This will delete all data in the database!
        """
        self.drop_collections()
        self.create_indexes()

    def close(self):
        """Close the client and all pooled connections."""
        self.client.close()


# Global database manager instance (singleton pattern)
_db_manager = None


def get_db_manager(
    uri: str = DEFAULT_MONGO_URI,
    db_name: str = DEFAULT_DB_NAME,
) -> DatabaseManager:
    """
    Get or create the global database manager instance.

    Args:
        uri: MongoDB connection string
        db_name: Database name

    Returns:
        DatabaseManager instance
    """
    global _db_manager
    if _db_manager is None:
        logger.info("Connecting to MongoDB database '%s'", db_name)
        _db_manager = DatabaseManager(uri=uri, db_name=db_name)
    return _db_manager


def close_db_manager() -> None:
    """Close and forget the global database manager, if any."""
    global _db_manager
    if _db_manager is not None:
        _db_manager.close()
        _db_manager = None
