"""
Review API endpoints.
"""

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_review_service
from app.api.models.common import MessageResponse, PatchRequest
from app.api.models.review import ReviewRequest, ReviewUpdate, ReviewResponse, ReviewList
from app.core.services import ReviewService

router = APIRouter(prefix="/api/v1/reviews", tags=["Reviews"])


@router.get(
    "/findAll",
    response_model=ReviewList,
    responses={204: {"description": "No reviews on this page"}},
)
def list_reviews(
    page: int | None = Query(None, description="0-based page number"),
    size: int | None = Query(None, description="Page size (default 10, max 100)"),
    service: ReviewService = Depends(get_review_service),
):
    """List reviews with pagination, in creation order."""
    return service.get_page(page=page, size=size)


@router.get(
    "/findAllByImdbId/{imdb_id}",
    response_model=list[ReviewResponse],
    responses={204: {"description": "The movie or series has no reviews"}},
)
def list_reviews_by_imdb_id(imdb_id: str, service: ReviewService = Depends(get_review_service)):
    """List the reviews of one movie or series."""
    return service.get_by_imdb_id(imdb_id)


@router.get("/findById/{review_id}", response_model=ReviewResponse)
def get_review(review_id: str, service: ReviewService = Depends(get_review_service)):
    """Get a review by ID."""
    return service.get_by_id(review_id)


@router.post("/new", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def create_review(review_in: ReviewRequest, service: ReviewService = Depends(get_review_service)):
    """Review the movie or series identified by ``imdbId``."""
    return service.create(review_in)


@router.put("/update/{review_id}", response_model=ReviewResponse)
def update_review(
    review_id: str,
    review_in: ReviewUpdate,
    service: ReviewService = Depends(get_review_service),
):
    """Replace the title, rating, and body of a review."""
    return service.update(review_id, review_in)


@router.patch("/patch/{review_id}", response_model=ReviewResponse)
def patch_review(
    review_id: str,
    patch_in: PatchRequest,
    service: ReviewService = Depends(get_review_service),
):
    """Change the title, rating, or body of a review."""
    return service.patch(review_id, patch_in.field, patch_in.value)


@router.delete("/delete/{review_id}", response_model=MessageResponse)
def delete_review(review_id: str, service: ReviewService = Depends(get_review_service)):
    """Delete a review and detach it from its movie or series."""
    return service.delete(review_id)
