"""Shared dependencies for API endpoints."""

from typing import Annotated

from fastapi import Depends, Request

from ..config import get_settings
from ..services import GalleryService


def get_gallery_service(request: Request) -> GalleryService:
    """Get the gallery service created during application startup.

    Falls back to building one from settings when the lifespan has not run.
    """
    service = getattr(request.app.state, "gallery_service", None)
    if service is None:
        service = GalleryService.from_settings(get_settings())
        request.app.state.gallery_service = service
    return service


# Type aliases for cleaner endpoint signatures
GalleryServiceDep = Annotated[GalleryService, Depends(get_gallery_service)]
