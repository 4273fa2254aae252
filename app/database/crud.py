"""
CRUD operations for the movies, series, and reviews collections.

Functions here speak MongoDB documents (plain dicts with ``ObjectId``
identifiers) and return ``None``/``False`` when nothing matched; turning
that into API errors is the service layer's job. Driver errors propagate.
"""

import re
from typing import List, Optional, Dict, Any

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.database import Database

from app.database.connection import MOVIES, SERIES, REVIEWS


# ==================== CATALOGUE CRUD OPERATIONS ====================
# Movies and series share one document shape for everything the
# repository touches (_id, imdbId, title, reviewIds), so these functions
# take the collection name.

def title_filter(title: Optional[str] = None) -> Dict[str, Any]:
    """
    Build a case-insensitive "title contains" query.

    Args:
        title: Search term, matched literally (regex characters are escaped)

    Returns:
        MongoDB filter document (empty when no term is given)
    """
    if not title:
        return {}
    return {"title": {"$regex": re.escape(title), "$options": "i"}}


def create_entry(db: Database, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insert a new movie or series.

    Args:
        db: Database handle
        collection: ``movies`` or ``series``
        data: Document fields (camelCase, without ``_id``)

    Returns:
        The stored document, including its generated ``_id``

    Raises:
        pymongo.errors.DuplicateKeyError: If the imdbId index rejects it
    """
    doc = dict(data)
    doc["reviewIds"] = []
    result = db[collection].insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc


def get_entry(db: Database, collection: str, entry_id: ObjectId) -> Optional[Dict[str, Any]]:
    """Get a movie or series by ObjectId, None if not found."""
    return db[collection].find_one({"_id": entry_id})


def get_entry_by_imdb_id(db: Database, collection: str, imdb_id: str) -> Optional[Dict[str, Any]]:
    """Get a movie or series by IMDb identifier, None if not found."""
    return db[collection].find_one({"imdbId": imdb_id})


def get_entries(
    db: Database,
    collection: str,
    title: Optional[str] = None,
    skip: int = 0,
    limit: int = 10
) -> List[Dict[str, Any]]:
    """
    Get a page of movies or series in creation order.

    Args:
        db: Database handle
        collection: ``movies`` or ``series``
        title: Optional title search term
        skip: Number of documents to skip
        limit: Maximum number of documents to return

    Returns:
        List of documents sorted by ascending ``_id``
    """
    cursor = (
        db[collection]
        .find(title_filter(title))
        .sort("_id", ASCENDING)
        .skip(skip)
        .limit(limit)
    )
    return list(cursor)


def get_entry_count(db: Database, collection: str, title: Optional[str] = None) -> int:
    """Count movies or series matching the optional title term."""
    return db[collection].count_documents(title_filter(title))


def update_entry(
    db: Database,
    collection: str,
    entry_id: ObjectId,
    fields: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    """
    Set fields on a movie or series.

    Args:
        db: Database handle
        collection: ``movies`` or ``series``
        entry_id: Document ObjectId
        fields: Fields to set (``_id`` and ``reviewIds`` are never touched)

    Returns:
        Updated document or None if not found
    """
    fields = {k: v for k, v in fields.items() if k not in ("_id", "reviewIds")}
    return db[collection].find_one_and_update(
        {"_id": entry_id},
        {"$set": fields},
        return_document=ReturnDocument.AFTER,
    )


def delete_entry(db: Database, collection: str, entry_id: ObjectId) -> bool:
    """
    Delete a movie or series.

    Returns:
        True if the document was deleted, False if not found
    """
    result = db[collection].delete_one({"_id": entry_id})
    return result.deleted_count > 0


def imdb_id_in_use(db: Database, imdb_id: str, exclude_id: Optional[ObjectId] = None) -> bool:
    """
    Check whether any movie or series already uses an IMDb identifier.

    Args:
        db: Database handle
        imdb_id: IMDb identifier to look for
        exclude_id: Document allowed to hold it (the one being updated)

    Returns:
        True if another movie or series has this imdbId
    """
    query: Dict[str, Any] = {"imdbId": imdb_id}
    if exclude_id is not None:
        query["_id"] = {"$ne": exclude_id}
    return any(db[name].find_one(query, {"_id": 1}) is not None for name in (MOVIES, SERIES))


def find_parent_by_imdb_id(db: Database, imdb_id: str) -> Optional[tuple]:
    """
    Find the movie or series a review can attach to.

    Returns:
        ``(collection, document)`` or None when neither collection has it
    """
    for name in (MOVIES, SERIES):
        doc = get_entry_by_imdb_id(db, name, imdb_id)
        if doc is not None:
            return name, doc
    return None


def attach_review(db: Database, collection: str, parent_id: ObjectId, review_id: ObjectId) -> None:
    """Append a review id to a parent's ``reviewIds``."""
    db[collection].update_one({"_id": parent_id}, {"$push": {"reviewIds": review_id}})


def detach_review(db: Database, collection: str, parent_id: ObjectId, review_id: ObjectId) -> None:
    """Remove a review id from a parent's ``reviewIds``."""
    db[collection].update_one({"_id": parent_id}, {"$pull": {"reviewIds": review_id}})


# ==================== REVIEW CRUD OPERATIONS ====================

def create_review(db: Database, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insert a new review.

    Args:
        db: Database handle
        data: Review fields including ``parentId`` and ``parentType``

    Returns:
        The stored document, including its generated ``_id``
    """
    doc = dict(data)
    result = db[REVIEWS].insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc


def get_review(db: Database, review_id: ObjectId) -> Optional[Dict[str, Any]]:
    """Get a review by ObjectId, None if not found."""
    return db[REVIEWS].find_one({"_id": review_id})


def get_reviews(db: Database, skip: int = 0, limit: int = 10) -> List[Dict[str, Any]]:
    """Get a page of reviews in creation order."""
    cursor = db[REVIEWS].find({}).sort("_id", ASCENDING).skip(skip).limit(limit)
    return list(cursor)


def get_review_count(db: Database) -> int:
    """Get total count of reviews."""
    return db[REVIEWS].count_documents({})


def get_reviews_by_ids(db: Database, review_ids: List[ObjectId]) -> List[Dict[str, Any]]:
    """Get the reviews whose ids are listed, in creation order."""
    if not review_ids:
        return []
    cursor = db[REVIEWS].find({"_id": {"$in": list(review_ids)}}).sort("_id", ASCENDING)
    return list(cursor)


def update_review(db: Database, review_id: ObjectId, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Set fields on a review.

    Returns:
        Updated document or None if not found
    """
    return db[REVIEWS].find_one_and_update(
        {"_id": review_id},
        {"$set": fields},
        return_document=ReturnDocument.AFTER,
    )


def delete_review(db: Database, review_id: ObjectId) -> bool:
    """
    Delete a review.

    Returns:
        True if the review was deleted, False if not found
    """
    result = db[REVIEWS].delete_one({"_id": review_id})
    return result.deleted_count > 0


def delete_reviews_by_parent(db: Database, parent_id: ObjectId) -> int:
    """
    Delete every review attached to a movie or series.

    Returns:
        Number of reviews deleted
    """
    result = db[REVIEWS].delete_many({"parentId": parent_id})
    return result.deleted_count


def relabel_reviews(db: Database, parent_id: ObjectId, imdb_id: str) -> int:
    """
    Copy a parent's new IMDb identifier onto its reviews.

    Returns:
        Number of reviews updated
    """
    result = db[REVIEWS].update_many({"parentId": parent_id}, {"$set": {"imdbId": imdb_id}})
    return result.modified_count
