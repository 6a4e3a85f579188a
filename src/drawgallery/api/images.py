"""Image API endpoints."""

from fastapi import APIRouter

from ..utils.data_url import strip_png_data_url
from .dependencies import GalleryServiceDep
from .schemas import (
    ErrorResponse,
    GalleryItemResponse,
    MessageResponse,
    SaveImageRequest,
    SaveImageResponse,
)

router = APIRouter(tags=["images"])


@router.post(
    "/save",
    response_model=SaveImageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def save_image(request: SaveImageRequest, service: GalleryServiceDep) -> SaveImageResponse:
    """Save a new drawing, or overwrite the one named by filename."""
    result = service.save_image(
        name=request.name,
        image_payload=strip_png_data_url(request.image),
        price=request.price,
        filename=request.filename,
    )
    return SaveImageResponse(**result)


@router.get(
    "/images",
    response_model=list[GalleryItemResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_images(service: GalleryServiceDep) -> list[GalleryItemResponse]:
    """List every stored drawing with its title and price."""
    return [GalleryItemResponse(**item.to_dict()) for item in service.list_images()]


@router.delete(
    "/images/{filename}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def delete_image(filename: str, service: GalleryServiceDep) -> MessageResponse:
    """Delete one drawing and its metadata."""
    service.delete_image(filename)
    return MessageResponse(message="Image deleted successfully")


@router.delete(
    "/images",
    response_model=MessageResponse,
    responses={500: {"model": ErrorResponse}},
)
async def delete_all_images(service: GalleryServiceDep) -> MessageResponse:
    """Delete every file in the image directory."""
    service.delete_all()
    return MessageResponse(message="All images deleted successfully")
