"""
Database initialization and index creation.

MongoDB creates collections on first insert, so initialization only needs
the indexes; ``verify_schema`` checks that collections and indexes exist.
"""

import logging

from app.database.connection import COLLECTIONS, DatabaseManager, get_db_manager

logger = logging.getLogger(__name__)

# Index each collection must carry, by name
EXPECTED_INDEXES = {
    "movies": "imdbId_unique",
    "series": "imdbId_unique",
    "reviews": "parentId",
}


def init_database(
    manager: DatabaseManager | None = None,
    reset: bool = False,
) -> DatabaseManager:
    """
    Initialize the database indexes.

    Args:
        manager: DatabaseManager to use (default: the global one)
        reset: If True, drop existing collections first

    Returns:
        DatabaseManager instance
    """
    db_manager = manager or get_db_manager()

    if reset:
        logger.warning("Resetting database '%s' (dropping all collections)", db_manager.db_name)
        db_manager.reset_database()
    else:
        db_manager.create_indexes()
    logger.info("Indexes created on database '%s'", db_manager.db_name)

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all collections and their indexes exist.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if everything exists, False otherwise
    """
    existing = set(db_manager.db.list_collection_names())
    missing = set(COLLECTIONS) - existing
    if missing:
        logger.error("Missing collections: %s", sorted(missing))
        return False

    for name, index_name in EXPECTED_INDEXES.items():
        if index_name not in db_manager.db[name].index_information():
            logger.error("Missing index '%s' on collection '%s'", index_name, name)
            return False

    logger.info("All collections exist: %s", sorted(existing & set(COLLECTIONS)))
    return True
