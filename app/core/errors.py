"""
Application errors raised by the service layer.

Each error carries the HTTP status the API answers with, so routers never
translate them by hand; ``app.api.main`` registers one handler for the
whole hierarchy.
"""


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500
    message = "An internal server error occurred."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.detail = message or self.message


class EmptyListError(AppError):
    """A list query matched nothing."""

    status_code = 204
    message = "Empty List"


class InvalidIdError(AppError):
    """The identifier is not a valid ObjectId."""

    status_code = 400
    message = "Failed to parse id (id not valid)"


class WrongImdbIdError(AppError):
    """The IMDb identifier does not look like ``tt0000``."""

    status_code = 400
    message = "ImdbId malformed (imdbId not valid)"


class FieldNotAllowedError(AppError):
    status_code = 400
    message = "Field not allowed to be patched"


class NotFoundError(AppError):
    status_code = 404
    message = "Entity not found"


class AlreadyExistsError(AppError):
    status_code = 409
    message = "Entity with this imdbId already exists"


class ImdbIdInUseError(AppError):
    status_code = 409
    message = "ImdbId already in use by another entity"


class PersistenceError(AppError):
    """The database rejected or failed an operation."""

    status_code = 500
    message = "An internal server error occurred."


class ValidationFailedError(AppError):
    """A patched document no longer satisfies the request schema."""

    status_code = 422
    message = "Validation failed"
