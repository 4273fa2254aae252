"""
Pydantic schemas for Review API.
"""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from app.api.models.common import CamelModel, IMDB_ID_PATTERN


class ReviewUpdate(CamelModel):
    """Request body for fully updating a review."""

    title: str = Field(..., min_length=1, examples=["A worthy sequel"])
    rating: int = Field(..., ge=0, le=5, strict=True)
    body: str = Field(..., min_length=1)


class ReviewRequest(ReviewUpdate):
    """Request body for creating a review of the movie or series ``imdbId``."""

    imdb_id: str = Field(..., pattern=IMDB_ID_PATTERN, examples=["tt0993846"])


class ReviewResponse(CamelModel):
    """Response model for review."""

    id: str = Field(..., alias="_id")
    title: str
    rating: int
    body: str
    imdb_id: str
    parent_id: str
    parent_type: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # MongoDB hands back naive UTC datetimes
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class ReviewList(CamelModel):
    """One page of reviews with paging metadata."""

    reviews: list[ReviewResponse]
    current_page: int
    total_items: int
    total_pages: int
