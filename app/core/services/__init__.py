"""
Resource services: business rules between the routers and the database.

This package contains:
- Movie and series catalogue services (shared base in ``catalogue``)
- Review service (parent linking and cascades)
"""

from app.core.services.movie_service import MovieService
from app.core.services.series_service import SeriesService
from app.core.services.review_service import ReviewService

__all__ = ['MovieService', 'SeriesService', 'ReviewService']
