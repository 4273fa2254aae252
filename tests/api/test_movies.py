"""
API tests for movie endpoints.

Uses FastAPI TestClient against the real app with an in-memory database.
"""

import pytest

BASE = "/api/v1/movies"
UNKNOWN_ID = "65f1c2a9e4b0a1b2c3d4e5f6"


def create(client, payload, **overrides):
    r = client.post(f"{BASE}/new", json={**payload, **overrides})
    assert r.status_code == 201, r.text
    return r.json()


class TestMovieCreate:
    """Tests for POST /api/v1/movies/new."""

    def test_create_movie(self, client, movie_payload):
        """Creating a movie returns 201 with a generated id and no reviews."""
        r = client.post(f"{BASE}/new", json=movie_payload)
        assert r.status_code == 201
        data = r.json()
        assert len(data["_id"]) == 24
        assert data["title"] == "Inception"
        assert data["imdbId"] == "tt1375666"
        assert data["reviewIds"] == []

    def test_created_movie_is_retrievable(self, client, movie_payload):
        """The created movie round-trips through GET with identical fields."""
        created = create(client, movie_payload)
        r = client.get(f"{BASE}/findById/{created['_id']}")
        assert r.status_code == 200
        assert r.json() == created
        for key, value in movie_payload.items():
            assert r.json()[key] == value

    def test_create_duplicate_imdb_id(self, client, movie_payload):
        create(client, movie_payload)
        r = client.post(f"{BASE}/new", json={**movie_payload, "title": "Inception (copy)"})
        assert r.status_code == 409
        assert "already exists" in r.json()["detail"]

    def test_create_movie_with_imdb_id_of_series(self, client, movie_payload, series_payload):
        """IMDb ids are unique across movies and series."""
        client.post("/api/v1/series/new", json=series_payload)
        r = client.post(f"{BASE}/new", json={**movie_payload, "imdbId": series_payload["imdbId"]})
        assert r.status_code == 409

    @pytest.mark.parametrize("field,value", [
        ("imdbId", "1375666"),
        ("title", ""),
        ("duration", "148 minutes"),
        ("director", "Nolan"),
        ("releaseDate", "16/07/2010"),
        ("trailerLink", "https://vimeo.com/12345"),
        ("genres", []),
        ("poster", "https://image.tmdb.org/t/p/original/poster.gif"),
    ])
    def test_create_movie_invalid_field(self, client, movie_payload, field, value):
        r = client.post(f"{BASE}/new", json={**movie_payload, field: value})
        assert r.status_code == 422

    def test_create_movie_missing_field(self, client, movie_payload):
        del movie_payload["overview"]
        r = client.post(f"{BASE}/new", json=movie_payload)
        assert r.status_code == 422


class TestMovieRead:
    """Tests for the GET movie endpoints."""

    def test_get_movie_not_found(self, client):
        r = client.get(f"{BASE}/findById/{UNKNOWN_ID}")
        assert r.status_code == 404
        assert "not found" in r.json()["detail"].lower()

    def test_get_movie_invalid_id(self, client):
        r = client.get(f"{BASE}/findById/not-an-object-id")
        assert r.status_code == 400
        assert r.json()["detail"] == "Failed to parse id (id not valid)"

    def test_get_movie_by_imdb_id(self, client, movie_payload):
        created = create(client, movie_payload)
        r = client.get(f"{BASE}/findByImdbId/tt1375666")
        assert r.status_code == 200
        assert r.json()["_id"] == created["_id"]

    def test_get_movie_by_imdb_id_malformed(self, client):
        r = client.get(f"{BASE}/findByImdbId/1375666")
        assert r.status_code == 400

    def test_get_movie_by_imdb_id_not_found(self, client):
        r = client.get(f"{BASE}/findByImdbId/tt0000001")
        assert r.status_code == 404


class TestMovieList:
    """Tests for GET /api/v1/movies/findAll."""

    def test_list_movies_empty(self, client):
        """An empty page answers 204 with no body."""
        r = client.get(f"{BASE}/findAll")
        assert r.status_code == 204
        assert r.content == b""

    def test_list_movies_paging(self, client, movie_payload):
        for i in range(3):
            create(client, movie_payload, imdbId=f"tt100{i}", title=f"Movie {i}")

        r = client.get(f"{BASE}/findAll?page=0&size=2")
        assert r.status_code == 200
        data = r.json()
        assert [m["title"] for m in data["movies"]] == ["Movie 0", "Movie 1"]
        assert data["currentPage"] == 0
        assert data["totalItems"] == 3
        assert data["totalPages"] == 2

        r = client.get(f"{BASE}/findAll?page=1&size=2")
        assert [m["title"] for m in r.json()["movies"]] == ["Movie 2"]

        r = client.get(f"{BASE}/findAll?page=2&size=2")
        assert r.status_code == 204

    def test_list_movies_summary_fields(self, client, movie_payload):
        create(client, movie_payload)
        movie = client.get(f"{BASE}/findAll").json()["movies"][0]
        assert set(movie) == {"_id", "imdbId", "title", "duration", "releaseDate", "poster"}

    def test_list_movies_default_paging(self, client, movie_payload):
        """Missing or invalid paging values fall back to page 0, size 10."""
        for i in range(12):
            create(client, movie_payload, imdbId=f"tt20{i:02d}", title=f"Movie {i}")
        data = client.get(f"{BASE}/findAll?page=-3&size=0").json()
        assert data["currentPage"] == 0
        assert len(data["movies"]) == 10
        assert data["totalPages"] == 2

    def test_list_movies_title_filter(self, client, movie_payload):
        create(client, movie_payload)
        create(client, movie_payload, imdbId="tt0816692", title="Interstellar")
        r = client.get(f"{BASE}/findAll?title=incep")
        data = r.json()
        assert data["totalItems"] == 1
        assert data["movies"][0]["title"] == "Inception"

    def test_list_movies_title_filter_is_literal(self, client, movie_payload):
        create(client, movie_payload)
        r = client.get(f"{BASE}/findAll?title=.*")
        assert r.status_code == 204

    def test_list_movies_huge_page(self, client, movie_payload):
        """Page numbers beyond any real catalogue just give an empty page."""
        create(client, movie_payload)
        r = client.get(f"{BASE}/findAll?page={10**18}&size=100")
        assert r.status_code == 204


class TestMovieUpdate:
    """Tests for PUT and PATCH on movies."""

    def test_update_movie_keeps_id(self, client, movie_payload):
        created = create(client, movie_payload)
        r = client.put(
            f"{BASE}/update/{created['_id']}",
            json={**movie_payload, "title": "Inception (Director's Cut)"},
        )
        assert r.status_code == 200
        data = r.json()
        assert data["_id"] == created["_id"]
        assert data["title"] == "Inception (Director's Cut)"
        assert client.get(f"{BASE}/findById/{created['_id']}").json()["title"] == data["title"]

    def test_update_movie_not_found(self, client, movie_payload):
        r = client.put(f"{BASE}/update/{UNKNOWN_ID}", json=movie_payload)
        assert r.status_code == 404

    def test_update_movie_invalid_id(self, client, movie_payload):
        r = client.put(f"{BASE}/update/123", json=movie_payload)
        assert r.status_code == 400

    def test_update_movie_imdb_id_in_use(self, client, movie_payload):
        create(client, movie_payload)
        other = create(client, movie_payload, imdbId="tt0816692", title="Interstellar")
        r = client.put(f"{BASE}/update/{other['_id']}", json=movie_payload)
        assert r.status_code == 409

    def test_patch_movie_title(self, client, movie_payload):
        created = create(client, movie_payload)
        r = client.patch(f"{BASE}/patch/{created['_id']}", json={"field": "title", "value": "Origen"})
        assert r.status_code == 200
        assert r.json()["title"] == "Origen"
        assert r.json()["director"] == movie_payload["director"]

    def test_patch_movie_genres(self, client, movie_payload):
        created = create(client, movie_payload)
        r = client.patch(
            f"{BASE}/patch/{created['_id']}", json={"field": "genres", "value": ["Thriller"]}
        )
        assert r.status_code == 200
        assert r.json()["genres"] == ["Thriller"]

    def test_patch_movie_field_not_allowed(self, client, movie_payload):
        created = create(client, movie_payload)
        r = client.patch(f"{BASE}/patch/{created['_id']}", json={"field": "reviewIds", "value": []})
        assert r.status_code == 400

    def test_patch_movie_invalid_value(self, client, movie_payload):
        created = create(client, movie_payload)
        r = client.patch(
            f"{BASE}/patch/{created['_id']}", json={"field": "duration", "value": "two hours"}
        )
        assert r.status_code == 422

    def test_patch_movie_not_found(self, client):
        r = client.patch(f"{BASE}/patch/{UNKNOWN_ID}", json={"field": "title", "value": "X"})
        assert r.status_code == 404

    def test_patch_movie_invalid_id(self, client):
        r = client.patch(f"{BASE}/patch/xyz", json={"field": "title", "value": "X"})
        assert r.status_code == 400
        assert r.json()["detail"] == "Failed to parse id (id not valid)"


class TestMovieDelete:
    """Tests for DELETE /api/v1/movies/delete/{id}."""

    def test_delete_movie(self, client, movie_payload):
        created = create(client, movie_payload)
        r = client.delete(f"{BASE}/delete/{created['_id']}")
        assert r.status_code == 200
        assert "successfully deleted" in r.json()["message"]
        assert client.get(f"{BASE}/findById/{created['_id']}").status_code == 404

    def test_delete_movie_not_found(self, client):
        r = client.delete(f"{BASE}/delete/{UNKNOWN_ID}")
        assert r.status_code == 404

    def test_delete_movie_invalid_id(self, client):
        r = client.delete(f"{BASE}/delete/xyz")
        assert r.status_code == 400
        assert r.json()["detail"] == "Failed to parse id (id not valid)"

    def test_delete_frees_imdb_id(self, client, movie_payload):
        created = create(client, movie_payload)
        client.delete(f"{BASE}/delete/{created['_id']}")
        r = client.post(f"{BASE}/new", json=movie_payload)
        assert r.status_code == 201
