"""
Business logic for series.
"""

from app.api.models.series import SeriesRequest, SeriesResponse, SeriesList
from app.core.services.catalogue import CatalogueService
from app.database.connection import SERIES


class SeriesService(CatalogueService):
    """CRUD service for the ``series`` collection."""

    collection = SERIES
    label = "Series"
    list_key = "series"
    request_model = SeriesRequest
    response_model = SeriesResponse
    list_model = SeriesList
    patchable_fields = (
        "imdbId",
        "title",
        "overview",
        "numberOfSeasons",
        "creator",
        "releaseDate",
        "trailerLink",
        "genres",
        "seasonList",
        "poster",
        "backdrop",
    )
