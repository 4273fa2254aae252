"""
Pydantic schemas for Series API.

A series nests its seasons, and each season its episodes; nested entries
are validated along with the series.
"""

import re

from pydantic import Field, field_validator

from app.api.models.common import (
    CamelModel,
    IMDB_ID_PATTERN,
    RE_PERSON_NAME,
    RE_RELEASE_DATE,
    RE_REMOTE_IMAGE,
    RE_TRAILER_LINK,
    check_not_empty,
    check_pattern,
)

# Episodes may be shorter than an hour or a round number of hours
RE_EPISODE_DURATION = re.compile(r"^(?:(\d{1,2})h(?: (\d{1,2})m)?|(\d{1,2})m)$")


class Episode(CamelModel):
    """A single episode of a season."""

    title: str = Field(..., min_length=1)
    release_date: str
    duration: str = Field(..., examples=["1h 2m", "58m"])
    description: str = Field(..., min_length=1)

    @field_validator("release_date")
    @classmethod
    def check_release_date(cls, v: str) -> str:
        return check_pattern(
            v, RE_RELEASE_DATE, "The release date of the episode must match the following format: 'YYYY-MM-DD'"
        )

    @field_validator("duration")
    @classmethod
    def check_duration(cls, v: str) -> str:
        return check_pattern(
            v, RE_EPISODE_DURATION, "The duration must match the following formats: '00h 00m', '00h' or '00m'"
        )


class Season(CamelModel):
    """A season and its episodes."""

    overview: str = Field(..., min_length=1)
    episode_list: list[Episode]
    poster: str

    @field_validator("episode_list")
    @classmethod
    def check_episodes(cls, v: list[Episode]) -> list[Episode]:
        return check_not_empty(v, "The season has to have at least one episode")

    @field_validator("poster")
    @classmethod
    def check_poster(cls, v: str) -> str:
        return check_pattern(
            v,
            RE_REMOTE_IMAGE,
            "The season poster must be a valid URL with one of these extensions: (.jpg, .jpeg, .png or .webp)",
        )


class SeriesRequest(CamelModel):
    """Request body for creating or fully updating a series."""

    imdb_id: str = Field(..., pattern=IMDB_ID_PATTERN, examples=["tt11198330"])
    title: str = Field(..., min_length=1, examples=["House of the Dragon"])
    overview: str = Field(..., min_length=1)
    number_of_seasons: int = Field(..., ge=1)
    creator: str = Field(..., examples=["Ryan Condal"])
    release_date: str = Field(..., examples=["2022-08-21"])
    trailer_link: str
    genres: list[str]
    season_list: list[Season]
    poster: str
    backdrop: str

    @field_validator("creator")
    @classmethod
    def check_creator(cls, v: str) -> str:
        return check_pattern(
            v, RE_PERSON_NAME, "The creator's name must match the following format: 'Name Surname'"
        )

    @field_validator("release_date")
    @classmethod
    def check_release_date(cls, v: str) -> str:
        return check_pattern(
            v, RE_RELEASE_DATE, "The release date of the series must match the following format: 'YYYY-MM-DD'"
        )

    @field_validator("trailer_link")
    @classmethod
    def check_trailer_link(cls, v: str) -> str:
        return check_pattern(v, RE_TRAILER_LINK, "The series trailer link has to be a valid YouTube URL")

    @field_validator("genres")
    @classmethod
    def check_genres(cls, v: list[str]) -> list[str]:
        return check_not_empty(v, "The series has to have at least one genre")

    @field_validator("season_list")
    @classmethod
    def check_seasons(cls, v: list[Season]) -> list[Season]:
        return check_not_empty(v, "The series has to have at least one season")

    @field_validator("poster", "backdrop")
    @classmethod
    def check_image(cls, v: str) -> str:
        return check_pattern(
            v,
            RE_REMOTE_IMAGE,
            "The series images must be valid URLs with one of these extensions: (.jpg, .jpeg, .png or .webp)",
        )


class SeriesResponse(CamelModel):
    """Response model for a single series, as stored."""

    id: str = Field(..., alias="_id")
    imdb_id: str
    title: str
    overview: str
    number_of_seasons: int
    creator: str
    release_date: str
    trailer_link: str
    genres: list[str]
    season_list: list[Season]
    poster: str
    backdrop: str
    review_ids: list[str] = []


class SeriesSummary(CamelModel):
    """Short series representation used in listings."""

    id: str = Field(..., alias="_id")
    imdb_id: str
    title: str
    number_of_seasons: int
    release_date: str
    poster: str


class SeriesList(CamelModel):
    """One page of series with paging metadata."""

    series: list[SeriesSummary]
    current_page: int
    total_items: int
    total_pages: int
