"""
End-to-end integration test for the catalogue flow.

Tests the complete client journey over HTTP:
1. Create a movie and a series
2. Review both
3. Browse and search the catalogue
4. Change a movie's imdbId and follow its reviews
5. Delete a review, then the series with its remaining reviews
6. Seed the sample catalogue and verify the schema
"""

import importlib.util
from pathlib import Path

import pytest

from app.database import verify_schema

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "init_database.py"


@pytest.fixture
def init_script():
    """Load scripts/init_database.py as a module."""
    spec = importlib.util.spec_from_file_location("init_database_script", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestCatalogueFlow:
    """Test complete catalogue flow."""

    def test_end_to_end_flow(self, client, movie_payload, series_payload):
        """
        Test complete end-to-end catalogue flow.
        """
        # Step 1: create a movie and a series
        movie = client.post("/api/v1/movies/new", json=movie_payload).json()
        series = client.post("/api/v1/series/new", json=series_payload).json()

        # Step 2: review both
        movie_review = client.post("/api/v1/reviews/new", json={
            "imdbId": movie["imdbId"], "title": "Mind-bending", "rating": 5, "body": "A classic.",
        }).json()
        series_reviews = [
            client.post("/api/v1/reviews/new", json={
                "imdbId": series["imdbId"], "title": f"Take {i}", "rating": i, "body": "Epic.",
            }).json()
            for i in (3, 4)
        ]
        assert client.get("/api/v1/reviews/findAll").json()["totalItems"] == 3

        # Step 3: browse and search
        assert client.get("/api/v1/movies/findAll?title=ception").json()["totalItems"] == 1
        assert client.get("/api/v1/series/findAll?title=ception").status_code == 204

        # Step 4: a new imdbId carries the reviews along
        r = client.patch(
            f"/api/v1/movies/patch/{movie['_id']}", json={"field": "imdbId", "value": "tt7777777"}
        )
        assert r.status_code == 200
        r = client.get("/api/v1/reviews/findAllByImdbId/tt7777777")
        assert [rv["_id"] for rv in r.json()] == [movie_review["_id"]]
        assert r.json()[0]["imdbId"] == "tt7777777"
        assert client.get(f"/api/v1/movies/findByImdbId/{movie_payload['imdbId']}").status_code == 404

        # Step 5: delete one review, then the series and the rest of its reviews
        client.delete(f"/api/v1/reviews/delete/{series_reviews[0]['_id']}")
        remaining = client.get(f"/api/v1/series/findById/{series['_id']}").json()["reviewIds"]
        assert remaining == [series_reviews[1]["_id"]]

        client.delete(f"/api/v1/series/delete/{series['_id']}")
        listing = client.get("/api/v1/reviews/findAll").json()
        assert [rv["_id"] for rv in listing["reviews"]] == [movie_review["_id"]]

    def test_seed_and_verify(self, manager, db, init_script):
        """The sample catalogue loads once and satisfies the schema check."""
        inserted = init_script.seed_catalogue(db)
        assert inserted == len(init_script.SAMPLE_MOVIES) + len(init_script.SAMPLE_SERIES)
        assert db["reviews"].count_documents({}) == inserted

        # A second run skips titles that already exist
        assert init_script.seed_catalogue(db) == 0
        assert verify_schema(manager) is True
