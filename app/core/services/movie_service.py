"""
Business logic for movies.
"""

from app.api.models.movie import MovieRequest, MovieResponse, MovieList
from app.core.services.catalogue import CatalogueService
from app.database.connection import MOVIES


class MovieService(CatalogueService):
    """CRUD service for the ``movies`` collection."""

    collection = MOVIES
    label = "Movie"
    list_key = "movies"
    request_model = MovieRequest
    response_model = MovieResponse
    list_model = MovieList
    patchable_fields = (
        "imdbId",
        "title",
        "overview",
        "duration",
        "director",
        "releaseDate",
        "trailerLink",
        "genres",
        "poster",
        "backdrop",
    )
