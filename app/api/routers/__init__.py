"""
API route handlers.
"""

from app.api.routers import movies, series, reviews, system

__all__ = ["movies", "series", "reviews", "system"]
