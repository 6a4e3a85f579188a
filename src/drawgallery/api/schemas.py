"""Pydantic request/response schemas."""

from pydantic import BaseModel, field_validator

from ..models import ErrorResponse

__all__ = [
    "ErrorResponse",
    "GalleryItemResponse",
    "MessageResponse",
    "SaveImageRequest",
    "SaveImageResponse",
]


class SaveImageRequest(BaseModel):
    """Save or update image request.

    name is optional here so a missing name is reported by the service with
    the gallery's own error body instead of a 422.
    """

    name: str | None = None
    image: str = ""
    price: str = ""
    filename: str | None = None

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, bool):
            return value
        # Whole floats print like JSON numbers do in the editor: 1.0 -> "1"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, int | float):
            return str(value)
        return value


class SaveImageResponse(BaseModel):
    """Save or update image response."""

    message: str
    filename: str
    title: str
    price: str


class GalleryItemResponse(BaseModel):
    """One drawing in the gallery listing."""

    filename: str
    title: str
    price: str | None


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
