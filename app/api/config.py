"""
API configuration loaded from environment or defaults.

A ``.env`` file in the working directory is loaded first, so local
development can keep its settings there.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def get_mongo_uri() -> str:
    """Get MongoDB connection string from env or default."""
    return os.getenv("MONGO_URI", "") or "mongodb://localhost:27017"


def get_database_name() -> str:
    """Get MongoDB database name from env or default."""
    return os.getenv("MONGO_DB_NAME", "") or "cinema-db"


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name from env, None to log to console only."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8080"))
