"""
Business logic for reviews.

A review belongs to exactly one movie or series, chosen at creation time
by IMDb identifier. The link is kept on both sides: the review stores
``parentId``/``parentType`` and the parent lists the review in
``reviewIds``. Deleting a review detaches it from its parent; deleting a
parent deletes its reviews (see ``CatalogueService.delete``).
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from pymongo.database import Database

from app.api.models.common import MessageResponse
from app.api.models.review import ReviewRequest, ReviewUpdate, ReviewResponse, ReviewList
from app.core.errors import EmptyListError, FieldNotAllowedError, NotFoundError
from app.core.services.common import (
    check_imdb_id,
    parse_object_id,
    resolve_paging,
    to_api,
    total_pages,
    validate_patched,
)
from app.database import crud
from app.database.connection import MOVIES, SERIES

logger = logging.getLogger(__name__)

PARENT_TYPES = {MOVIES: "movie", SERIES: "series"}
PARENT_COLLECTIONS = {v: k for k, v in PARENT_TYPES.items()}

PATCHABLE_FIELDS = ("title", "rating", "body")


def utc_now() -> datetime:
    """Current UTC time at the millisecond precision BSON stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class ReviewService:
    """Service for handling movie and series reviews."""

    def __init__(self, db: Database):
        self.db = db

    def _load(self, review_id: str) -> dict:
        oid = parse_object_id(review_id)
        doc = crud.get_review(self.db, oid)
        if doc is None:
            logger.warning("Review with id '%s' not found", review_id)
            raise NotFoundError()
        return doc

    def get_page(self, page: Optional[int] = None, size: Optional[int] = None) -> ReviewList:
        """
        Return one page of reviews in creation order.

        Raises:
            EmptyListError: If the page holds no reviews
        """
        page_num, page_size = resolve_paging(page, size)
        logger.info("Listing reviews (page=%d, size=%d)", page_num, page_size)
        total = crud.get_review_count(self.db)
        docs = crud.get_reviews(self.db, skip=page_num * page_size, limit=page_size)
        if not docs:
            logger.warning("No reviews found for page %d", page_num)
            raise EmptyListError()
        return ReviewList.model_validate({
            "reviews": [to_api(d) for d in docs],
            "currentPage": page_num,
            "totalItems": total,
            "totalPages": total_pages(total, page_size),
        })

    def get_by_imdb_id(self, imdb_id: str) -> list[ReviewResponse]:
        """
        Return every review of the movie or series with this IMDb id.

        Raises:
            WrongImdbIdError: If ``imdb_id`` is malformed
            NotFoundError: If no movie or series has this IMDb id
            EmptyListError: If it has no reviews
        """
        logger.info("Listing reviews for imdbId '%s'", imdb_id)
        check_imdb_id(imdb_id)
        found = crud.find_parent_by_imdb_id(self.db, imdb_id)
        if found is None:
            logger.warning("No movie or series with imdbId '%s'", imdb_id)
            raise NotFoundError()
        _, parent = found
        docs = crud.get_reviews_by_ids(self.db, parent.get("reviewIds", []))
        if not docs:
            raise EmptyListError()
        return [ReviewResponse.model_validate(to_api(d)) for d in docs]

    def get_by_id(self, review_id: str) -> ReviewResponse:
        logger.info("Fetching review with id '%s'", review_id)
        return ReviewResponse.model_validate(to_api(self._load(review_id)))

    def create(self, request: ReviewRequest) -> ReviewResponse:
        """
        Store a review and attach it to its movie or series.

        Raises:
            NotFoundError: If no movie or series has ``request.imdb_id``
        """
        logger.info("Creating review for imdbId '%s'", request.imdb_id)
        found = crud.find_parent_by_imdb_id(self.db, request.imdb_id)
        if found is None:
            logger.warning("No movie or series with imdbId '%s'", request.imdb_id)
            raise NotFoundError()
        collection, parent = found
        now = utc_now()
        doc = crud.create_review(self.db, {
            "title": request.title,
            "rating": request.rating,
            "body": request.body,
            "imdbId": request.imdb_id,
            "parentId": parent["_id"],
            "parentType": PARENT_TYPES[collection],
            "createdAt": now,
            "updatedAt": now,
        })
        crud.attach_review(self.db, collection, parent["_id"], doc["_id"])
        logger.info("Review '%s' created for %s '%s'", doc["_id"], PARENT_TYPES[collection], parent["_id"])
        return ReviewResponse.model_validate(to_api(doc))

    def update(self, review_id: str, request: ReviewUpdate) -> ReviewResponse:
        """
        Replace the title, rating, and body of a review.

        Raises:
            NotFoundError: If no review has this id
        """
        logger.info("Updating review with id '%s'", review_id)
        current = self._load(review_id)
        return self._save(current, request)

    def patch(self, review_id: str, field: str, value: Any) -> ReviewResponse:
        """
        Change the title, rating, or body of a review.

        Raises:
            FieldNotAllowedError: For any other field
            NotFoundError: If no review has this id
            ValidationFailedError: If the new value is invalid
        """
        logger.info("Patching review %s with id '%s'", field, review_id)
        if field not in PATCHABLE_FIELDS:
            logger.warning("Field '%s' cannot be patched on reviews", field)
            raise FieldNotAllowedError()
        current = self._load(review_id)
        data = {name: current[name] for name in PATCHABLE_FIELDS}
        data[field] = value
        return self._save(current, validate_patched(ReviewUpdate, data))

    def _save(self, current: dict, request: ReviewUpdate) -> ReviewResponse:
        doc = crud.update_review(self.db, current["_id"], {
            "title": request.title,
            "rating": request.rating,
            "body": request.body,
            "updatedAt": utc_now(),
        })
        if doc is None:
            raise NotFoundError()
        return ReviewResponse.model_validate(to_api(doc))

    def delete(self, review_id: str) -> MessageResponse:
        """
        Delete a review and remove it from its parent's ``reviewIds``.

        Raises:
            NotFoundError: If no review has this id
        """
        logger.info("Deleting review with id '%s'", review_id)
        current = self._load(review_id)
        if not crud.delete_review(self.db, current["_id"]):
            raise NotFoundError()
        collection = PARENT_COLLECTIONS.get(current.get("parentType"))
        if collection is not None:
            crud.detach_review(self.db, collection, current["parentId"], current["_id"])
        return MessageResponse(message=f"Review with id: '{review_id}' was successfully deleted")
