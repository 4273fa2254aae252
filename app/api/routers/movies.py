"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_movie_service
from app.api.models.common import MessageResponse, PatchRequest
from app.api.models.movie import MovieRequest, MovieResponse, MovieList
from app.core.services import MovieService

router = APIRouter(prefix="/api/v1/movies", tags=["Movies"])


@router.get(
    "/findAll",
    response_model=MovieList,
    responses={204: {"description": "No movies on this page"}},
)
def list_movies(
    title: str | None = Query(None, description="Case-insensitive title search"),
    page: int | None = Query(None, description="0-based page number"),
    size: int | None = Query(None, description="Page size (default 10, max 100)"),
    service: MovieService = Depends(get_movie_service),
):
    """List movies with pagination, in creation order."""
    return service.get_page(title=title, page=page, size=size)


@router.get("/findById/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: str, service: MovieService = Depends(get_movie_service)):
    """Get movie details by ID."""
    return service.get_by_id(movie_id)


@router.get("/findByImdbId/{imdb_id}", response_model=MovieResponse)
def get_movie_by_imdb_id(imdb_id: str, service: MovieService = Depends(get_movie_service)):
    """Get movie details by IMDb ID."""
    return service.get_by_imdb_id(imdb_id)


@router.post("/new", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(movie_in: MovieRequest, service: MovieService = Depends(get_movie_service)):
    """Create a new movie."""
    return service.create(movie_in)


@router.put("/update/{movie_id}", response_model=MovieResponse)
def update_movie(
    movie_id: str,
    movie_in: MovieRequest,
    service: MovieService = Depends(get_movie_service),
):
    """Replace every field of a movie."""
    return service.update(movie_id, movie_in)


@router.patch("/patch/{movie_id}", response_model=MovieResponse)
def patch_movie(
    movie_id: str,
    patch_in: PatchRequest,
    service: MovieService = Depends(get_movie_service),
):
    """Change a single field of a movie."""
    return service.patch(movie_id, patch_in.field, patch_in.value)


@router.delete("/delete/{movie_id}", response_model=MessageResponse)
def delete_movie(movie_id: str, service: MovieService = Depends(get_movie_service)):
    """Delete a movie and its reviews."""
    return service.delete(movie_id)
