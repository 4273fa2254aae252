"""
Shared pydantic building blocks for the API schemas.
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

IMDB_ID_PATTERN = r"^tt\d+$"

RE_IMDB_ID = re.compile(IMDB_ID_PATTERN)
RE_DURATION = re.compile(r"^(\d{1,2})h\s(\d{1,2})m$")
RE_PERSON_NAME = re.compile(r"^([a-zA-Z]+\.?)\s([a-zA-Z]+\.?)(?:\s([a-zA-Z]+))?$")
RE_RELEASE_DATE = re.compile(r"^(\d{4})-([1-9]|0[1-9]|1[0-2])-([1-9]|0[1-9]|[12]\d|3[01])$")
RE_TRAILER_LINK = re.compile(
    r"^((?:https?:)?//)?((?:www|m)\.)?((?:youtube(?:-nocookie)?\.com|youtu\.be))"
    r"(/(?:[\w\-]+\?v=|embed/|live/|v/)?)([\w\-]+)(\S+)?$"
)
RE_REMOTE_IMAGE = re.compile(r"^https?://\S+\.(?:png|jpe?g|webp)(?:\?\S*)?$", re.IGNORECASE)


def check_pattern(value: str, pattern: re.Pattern, message: str) -> str:
    """Raise ``ValueError(message)`` unless ``value`` matches ``pattern``."""
    if not pattern.match(value):
        raise ValueError(message)
    return value


def check_not_empty(value: list, message: str) -> list:
    """Raise ``ValueError(message)`` for an empty list."""
    if not value:
        raise ValueError(message)
    return value


class CamelModel(BaseModel):
    """Base model whose JSON field names are camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PatchRequest(BaseModel):
    """Request body for a single-field patch."""

    field: str = Field(..., min_length=1, examples=["title"])
    value: Any = Field(..., examples=["New title"])


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str
    message: str
    database: str
