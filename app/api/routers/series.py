"""
Series API endpoints.
"""

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_series_service
from app.api.models.common import MessageResponse, PatchRequest
from app.api.models.series import SeriesRequest, SeriesResponse, SeriesList
from app.core.services import SeriesService

router = APIRouter(prefix="/api/v1/series", tags=["Series"])


@router.get(
    "/findAll",
    response_model=SeriesList,
    responses={204: {"description": "No series on this page"}},
)
def list_series(
    title: str | None = Query(None, description="Case-insensitive title search"),
    page: int | None = Query(None, description="0-based page number"),
    size: int | None = Query(None, description="Page size (default 10, max 100)"),
    service: SeriesService = Depends(get_series_service),
):
    """List series with pagination, in creation order."""
    return service.get_page(title=title, page=page, size=size)


@router.get("/findById/{series_id}", response_model=SeriesResponse)
def get_series(series_id: str, service: SeriesService = Depends(get_series_service)):
    """Get series details by ID."""
    return service.get_by_id(series_id)


@router.get("/findByImdbId/{imdb_id}", response_model=SeriesResponse)
def get_series_by_imdb_id(imdb_id: str, service: SeriesService = Depends(get_series_service)):
    """Get series details by IMDb ID."""
    return service.get_by_imdb_id(imdb_id)


@router.post("/new", response_model=SeriesResponse, status_code=status.HTTP_201_CREATED)
def create_series(series_in: SeriesRequest, service: SeriesService = Depends(get_series_service)):
    """Create a new series."""
    return service.create(series_in)


@router.put("/update/{series_id}", response_model=SeriesResponse)
def update_series(
    series_id: str,
    series_in: SeriesRequest,
    service: SeriesService = Depends(get_series_service),
):
    """Replace every field of a series."""
    return service.update(series_id, series_in)


@router.patch("/patch/{series_id}", response_model=SeriesResponse)
def patch_series(
    series_id: str,
    patch_in: PatchRequest,
    service: SeriesService = Depends(get_series_service),
):
    """Change a single field of a series."""
    return service.patch(series_id, patch_in.field, patch_in.value)


@router.delete("/delete/{series_id}", response_model=MessageResponse)
def delete_series(series_id: str, service: SeriesService = Depends(get_series_service)):
    """Delete a series and its reviews."""
    return service.delete(series_id)
