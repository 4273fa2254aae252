"""
FastAPI application entry point for the Cinema API.

Serves movies, series, and their reviews from MongoDB, and documents
itself through Swagger UI, ReDoc, and Scalar.

Usage:
    uvicorn app.api.main:app --host 0.0.0.0 --port 8080

Or run directly:
    python -m app.api.main
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
from pymongo.errors import PyMongoError

from app.api.config import (
    get_api_host,
    get_api_port,
    get_database_name,
    get_log_file,
    get_log_level,
    get_mongo_uri,
)
from app.api.routers import movies, series, reviews, system
from app.core.errors import AppError, PersistenceError
from app.database.connection import close_db_manager, get_db_manager
from app.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)

OPENAPI_URL = "/api-docs/openapi.json"

SCALAR_HTML = """<!doctype html>
<html>
  <head>
    <title>{title} - Scalar</title>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
  </head>
  <body>
    <script id="api-reference" data-url="{openapi_url}"></script>
    <script src="https://cdn.jsdelivr.net/npm/@scalar/api-reference"></script>
  </body>
</html>
"""


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Create indexes on startup, release the connection pool on shutdown."""
    manager = get_db_manager(uri=get_mongo_uri(), db_name=get_database_name())
    try:
        manager.create_indexes()
    except PyMongoError as e:
        logger.error("Could not create indexes, is MongoDB reachable? %s", e)
    logger.info("API is up and running on port %d", get_api_port())
    yield
    close_db_manager()


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code == 204:
        return Response(status_code=204)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def database_error_handler(request: Request, exc: PyMongoError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    error = PersistenceError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_api_logging(level=get_log_level(), log_file=get_log_file())

    app = FastAPI(
        title="Cinema API",
        description="REST API for movies, series, and their reviews",
        version="1.0.0",
        openapi_url=OPENAPI_URL,
        docs_url="/api/swagger-ui",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
        return response

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(PyMongoError, database_error_handler)

    app.include_router(system.router)
    app.include_router(movies.router)
    app.include_router(series.router)
    app.include_router(reviews.router)

    @app.get("/api/scalar", include_in_schema=False)
    def scalar_reference():
        """Scalar API reference page."""
        return HTMLResponse(SCALAR_HTML.format(title=app.title, openapi_url=OPENAPI_URL))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.api.main:app", host=get_api_host(), port=get_api_port())
