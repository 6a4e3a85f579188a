"""Service layer."""

from .gallery_service import GalleryService

__all__ = ["GalleryService"]
