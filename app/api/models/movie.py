"""
Pydantic schemas for Movie API.
"""

from pydantic import Field, field_validator

from app.api.models.common import (
    CamelModel,
    IMDB_ID_PATTERN,
    RE_DURATION,
    RE_PERSON_NAME,
    RE_RELEASE_DATE,
    RE_REMOTE_IMAGE,
    RE_TRAILER_LINK,
    check_not_empty,
    check_pattern,
)


class MovieRequest(CamelModel):
    """Request body for creating or fully updating a movie."""

    imdb_id: str = Field(..., pattern=IMDB_ID_PATTERN, examples=["tt0993846"])
    title: str = Field(..., min_length=1, examples=["The Wolf of Wall Street"])
    overview: str = Field(..., min_length=1)
    duration: str = Field(..., examples=["2h 59m"])
    director: str = Field(..., examples=["Martin Scorsese"])
    release_date: str = Field(..., examples=["2014-01-17"])
    trailer_link: str = Field(..., examples=["https://youtu.be/DEMZSa0esCU"])
    genres: list[str]
    poster: str
    backdrop: str

    @field_validator("duration")
    @classmethod
    def check_duration(cls, v: str) -> str:
        return check_pattern(v, RE_DURATION, "The duration must match the following format: '00h 00m'")

    @field_validator("director")
    @classmethod
    def check_director(cls, v: str) -> str:
        return check_pattern(
            v, RE_PERSON_NAME, "The director's name must match the following format: 'Name Surname'"
        )

    @field_validator("release_date")
    @classmethod
    def check_release_date(cls, v: str) -> str:
        return check_pattern(
            v, RE_RELEASE_DATE, "The release date of the movie must match the following format: 'YYYY-MM-DD'"
        )

    @field_validator("trailer_link")
    @classmethod
    def check_trailer_link(cls, v: str) -> str:
        return check_pattern(v, RE_TRAILER_LINK, "The movie trailer link has to be a valid YouTube URL")

    @field_validator("genres")
    @classmethod
    def check_genres(cls, v: list[str]) -> list[str]:
        return check_not_empty(v, "The movie has to have at least one genre")

    @field_validator("poster", "backdrop")
    @classmethod
    def check_image(cls, v: str) -> str:
        return check_pattern(
            v,
            RE_REMOTE_IMAGE,
            "The movie images must be valid URLs with one of these extensions: (.jpg, .jpeg, .png or .webp)",
        )


class MovieResponse(CamelModel):
    """Response model for a single movie, as stored."""

    id: str = Field(..., alias="_id")
    imdb_id: str
    title: str
    overview: str
    duration: str
    director: str
    release_date: str
    trailer_link: str
    genres: list[str]
    poster: str
    backdrop: str
    review_ids: list[str] = []


class MovieSummary(CamelModel):
    """Short movie representation used in listings."""

    id: str = Field(..., alias="_id")
    imdb_id: str
    title: str
    duration: str
    release_date: str
    poster: str


class MovieList(CamelModel):
    """One page of movies with paging metadata."""

    movies: list[MovieSummary]
    current_page: int
    total_items: int
    total_pages: int
