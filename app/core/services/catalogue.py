"""
Business logic shared by movies and series.

Both resources live in their own collection, are addressed by ObjectId or
IMDb identifier, and own a list of review ids. An IMDb identifier may be
used by at most one movie or series across both collections.
"""

import logging
from typing import Any, Optional

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.api.models.common import MessageResponse
from app.core.errors import (
    AlreadyExistsError,
    EmptyListError,
    FieldNotAllowedError,
    ImdbIdInUseError,
    NotFoundError,
)
from app.core.services.common import (
    check_imdb_id,
    parse_object_id,
    resolve_paging,
    to_api,
    total_pages,
    validate_patched,
)
from app.database import crud

logger = logging.getLogger(__name__)


class CatalogueService:
    """
    CRUD service for one catalogue collection.

    Subclasses set the collection, the display label, the key used in list
    responses, the pydantic models, and the fields a patch may touch.
    """

    collection: str
    label: str
    list_key: str
    request_model: Any
    response_model: Any
    list_model: Any
    patchable_fields: tuple = ()

    def __init__(self, db: Database):
        self.db = db

    def _load(self, entry_id: str) -> dict:
        oid = parse_object_id(entry_id)
        doc = crud.get_entry(self.db, self.collection, oid)
        if doc is None:
            logger.warning("%s with id '%s' not found", self.label, entry_id)
            raise NotFoundError()
        return doc

    def get_page(self, title: Optional[str] = None, page: Optional[int] = None, size: Optional[int] = None):
        """
        Return one page of entries in creation order.

        Raises:
            EmptyListError: If the page holds no entries
        """
        page_num, page_size = resolve_paging(page, size)
        logger.info("Listing %s (title=%r, page=%d, size=%d)", self.list_key, title, page_num, page_size)
        total = crud.get_entry_count(self.db, self.collection, title=title)
        docs = crud.get_entries(
            self.db, self.collection, title=title, skip=page_num * page_size, limit=page_size
        )
        if not docs:
            logger.warning("No %s found for page %d", self.list_key, page_num)
            raise EmptyListError()
        return self.list_model.model_validate({
            self.list_key: [to_api(d) for d in docs],
            "currentPage": page_num,
            "totalItems": total,
            "totalPages": total_pages(total, page_size),
        })

    def get_by_id(self, entry_id: str):
        logger.info("Fetching %s with id '%s'", self.label.lower(), entry_id)
        return self.response_model.model_validate(to_api(self._load(entry_id)))

    def get_by_imdb_id(self, imdb_id: str):
        logger.info("Fetching %s with imdbId '%s'", self.label.lower(), imdb_id)
        check_imdb_id(imdb_id)
        doc = crud.get_entry_by_imdb_id(self.db, self.collection, imdb_id)
        if doc is None:
            logger.warning("%s with imdbId '%s' not found", self.label, imdb_id)
            raise NotFoundError()
        return self.response_model.model_validate(to_api(doc))

    def create(self, request):
        """
        Store a new entry.

        Raises:
            AlreadyExistsError: If a movie or series already has the imdbId
        """
        logger.info("Creating %s with imdbId '%s'", self.label.lower(), request.imdb_id)
        if crud.imdb_id_in_use(self.db, request.imdb_id):
            logger.warning("imdbId '%s' already exists", request.imdb_id)
            raise AlreadyExistsError()
        try:
            doc = crud.create_entry(self.db, self.collection, request.model_dump(by_alias=True))
        except DuplicateKeyError:
            raise AlreadyExistsError()
        logger.info("%s created with id '%s'", self.label, doc["_id"])
        return self.response_model.model_validate(to_api(doc))

    def update(self, entry_id: str, request):
        """
        Replace every editable field of an entry.

        The identifier and review ids are kept.

        Raises:
            NotFoundError: If no entry has this id
            ImdbIdInUseError: If the new imdbId belongs to another entry
        """
        logger.info("Updating %s with id '%s'", self.label.lower(), entry_id)
        current = self._load(entry_id)
        return self._save(current, request)

    def patch(self, entry_id: str, field: str, value: Any):
        """
        Change one field of an entry.

        The patched entry must still pass the request validation rules.

        Raises:
            FieldNotAllowedError: If ``field`` cannot be patched
            NotFoundError: If no entry has this id
            ValidationFailedError: If the patched entry is invalid
            ImdbIdInUseError: If the new imdbId belongs to another entry
        """
        logger.info("Patching %s %s with id '%s'", self.label.lower(), field, entry_id)
        if field not in self.patchable_fields:
            logger.warning("Field '%s' cannot be patched on %s", field, self.list_key)
            raise FieldNotAllowedError()
        current = self._load(entry_id)
        data = {k: v for k, v in to_api(current).items() if k not in ("_id", "reviewIds")}
        data[field] = value
        request = validate_patched(self.request_model, data)
        return self._save(current, request)

    def _save(self, current: dict, request):
        if request.imdb_id != current["imdbId"] and crud.imdb_id_in_use(
            self.db, request.imdb_id, exclude_id=current["_id"]
        ):
            logger.warning("imdbId '%s' already in use", request.imdb_id)
            raise ImdbIdInUseError()
        try:
            doc = crud.update_entry(
                self.db, self.collection, current["_id"], request.model_dump(by_alias=True)
            )
        except DuplicateKeyError:
            raise ImdbIdInUseError()
        if doc is None:
            # Deleted between the read and the write
            raise NotFoundError()
        if request.imdb_id != current["imdbId"]:
            crud.relabel_reviews(self.db, current["_id"], request.imdb_id)
        return self.response_model.model_validate(to_api(doc))

    def delete(self, entry_id: str) -> MessageResponse:
        """
        Delete an entry together with its reviews.

        Raises:
            NotFoundError: If no entry has this id
        """
        logger.info("Deleting %s with id '%s'", self.label.lower(), entry_id)
        current = self._load(entry_id)
        if not crud.delete_entry(self.db, self.collection, current["_id"]):
            raise NotFoundError()
        # Reviews go only once their parent is gone
        removed = crud.delete_reviews_by_parent(self.db, current["_id"])
        logger.info("%s '%s' deleted along with %d reviews", self.label, entry_id, removed)
        return MessageResponse(message=f"{self.label} with id: '{entry_id}' was successfully deleted")
