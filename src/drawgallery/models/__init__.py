"""Domain models."""

from .errors import ErrorCode, ErrorResponse
from .image import GalleryItem, ImageRecord

__all__ = ["ErrorCode", "ErrorResponse", "GalleryItem", "ImageRecord"]
