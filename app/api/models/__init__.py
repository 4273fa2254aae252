"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.common import PatchRequest, MessageResponse, HealthResponse
from app.api.models.movie import MovieRequest, MovieResponse, MovieSummary, MovieList
from app.api.models.series import (
    Episode,
    Season,
    SeriesRequest,
    SeriesResponse,
    SeriesSummary,
    SeriesList,
)
from app.api.models.review import ReviewRequest, ReviewUpdate, ReviewResponse, ReviewList

__all__ = [
    "PatchRequest",
    "MessageResponse",
    "HealthResponse",
    "MovieRequest",
    "MovieResponse",
    "MovieSummary",
    "MovieList",
    "Episode",
    "Season",
    "SeriesRequest",
    "SeriesResponse",
    "SeriesSummary",
    "SeriesList",
    "ReviewRequest",
    "ReviewUpdate",
    "ReviewResponse",
    "ReviewList",
]
