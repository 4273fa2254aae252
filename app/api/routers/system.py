"""
General API endpoints (greeting, health).
"""

import logging

from fastapi import APIRouter, Depends
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.api.dependencies import get_db
from app.api.models.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["General"])


@router.get("/")
def hello():
    """Greeting confirming the API is running."""
    return "Hello there, the Cinema API is running!!"


@router.get("/health", response_model=HealthResponse)
def health_check(db: Database = Depends(get_db)):
    """Health check: API up and database reachable."""
    try:
        db.list_collection_names()
    except PyMongoError as e:
        logger.error("Database health check failed: %s", e)
        return HealthResponse(status="DEGRADED", message="Database unreachable.", database="disconnected")
    return HealthResponse(status="UP", message="All systems working correctly.", database="connected")
