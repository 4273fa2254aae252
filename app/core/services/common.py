"""
Helpers shared by the resource services.
"""

import math
from typing import Any, Dict, Optional, Tuple

from bson import ObjectId
from pydantic import ValidationError

from app.api.models.common import RE_IMDB_ID
from app.core.errors import InvalidIdError, ValidationFailedError, WrongImdbIdError

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# Keeps page * size inside the signed 64-bit skip MongoDB accepts
MAX_PAGE = (2**63 - 1) // MAX_PAGE_SIZE


def parse_object_id(value: str) -> ObjectId:
    """
    Convert a path identifier into an ObjectId.

    Raises:
        InvalidIdError: If ``value`` is not a 24-character hex string
    """
    if not ObjectId.is_valid(value):
        raise InvalidIdError()
    return ObjectId(value)


def check_imdb_id(imdb_id: str) -> str:
    """Raise WrongImdbIdError unless ``imdb_id`` looks like ``tt0000``."""
    if not RE_IMDB_ID.match(imdb_id):
        raise WrongImdbIdError()
    return imdb_id


def resolve_paging(page: Optional[int], size: Optional[int]) -> Tuple[int, int]:
    """
    Normalize paging parameters.

    Pages are 0-based; a missing or negative page means the first one, and
    pages past ``MAX_PAGE`` are clamped to it. A missing or non-positive size
    falls back to the default, and sizes are capped at ``MAX_PAGE_SIZE``.

    Returns:
        ``(page, size)``
    """
    page_num = min(page, MAX_PAGE) if page is not None and page > 0 else 0
    page_size = size if size is not None and size > 0 else DEFAULT_PAGE_SIZE
    return page_num, min(page_size, MAX_PAGE_SIZE)


def total_pages(total_items: int, page_size: int) -> int:
    return math.ceil(total_items / page_size)


def to_api(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Render a stored document for the API: ObjectIds become hex strings."""
    out = {}
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            out[key] = str(value)
        elif isinstance(value, list) and value and isinstance(value[0], ObjectId):
            out[key] = [str(v) for v in value]
        else:
            out[key] = value
    return out


def validate_patched(model, data: Dict[str, Any]):
    """
    Validate a document after a patch was applied to it.

    Args:
        model: Pydantic request model the document must satisfy
        data: Patched document in API (camelCase) form

    Returns:
        The validated model instance

    Raises:
        ValidationFailedError: Listing every failed rule
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        messages = [err["msg"] for err in e.errors()]
        raise ValidationFailedError("; ".join(messages))
