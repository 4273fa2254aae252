"""
Shared fixtures: an in-memory MongoDB (mongomock) per test, an API client
wired to it, and valid movie/series payloads.
"""

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_db
from app.api.main import app
from app.database.connection import DatabaseManager


@pytest.fixture
def manager():
    """Database manager backed by a fresh mongomock client, indexes created."""
    manager = DatabaseManager(db_name="cinema-test", client=mongomock.MongoClient())
    manager.create_indexes()
    yield manager
    manager.close()


@pytest.fixture
def db(manager):
    return manager.db


@pytest.fixture
def client(db):
    """TestClient whose requests hit the mongomock database."""
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def movie_payload():
    return {
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
    }


@pytest.fixture
def series_payload():
    return {
        "imdbId": "tt11198330",
        "title": "House of the Dragon",
        "overview": "The Targaryen civil war.",
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
                    }
                ],
            }
        ],
        "poster": "https://image.tmdb.org/t/p/original/hotd_poster.jpg",
        "backdrop": "https://image.tmdb.org/t/p/original/hotd_backdrop.jpg",
    }
