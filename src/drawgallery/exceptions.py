"""Structured exception types for the drawing gallery.

Each exception carries the HTTP status code and error code it maps to, so the
API layer converts any of them through a single exception handler.

Usage:
    from drawgallery.exceptions import ValidationException

    # In service layer
    if not name:
        raise ValidationException("Name is required")
"""

from .models.errors import ErrorCode


class GalleryException(Exception):
    """Base exception for the drawing gallery.

    Attributes:
        error_code: ErrorCode enum value for API responses
        status_code: HTTP status code to return
        message: Human-readable error message, safe to show to clients
    """

    error_code: ErrorCode = ErrorCode.STORAGE_ERROR
    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationException(GalleryException):
    """Raised when a required request field is missing."""

    error_code = ErrorCode.VALIDATION_ERROR
    status_code = 400


class InvalidFilenameException(ValidationException):
    """Raised when a filename points outside the image directory."""

    error_code = ErrorCode.INVALID_FILENAME


class ImageNotFoundException(GalleryException):
    """Raised when deleting an image whose blob does not exist.

    Reported as 500 like any other failed delete.
    """

    error_code = ErrorCode.IMAGE_NOT_FOUND
    status_code = 500


class StorageException(GalleryException):
    """Raised when reading or writing the image directory fails."""

    error_code = ErrorCode.STORAGE_ERROR
    status_code = 500
