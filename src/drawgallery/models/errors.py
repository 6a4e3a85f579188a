"""Error codes and the error response body."""

from enum import Enum

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Error codes for API responses."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FILENAME = "INVALID_FILENAME"
    IMAGE_NOT_FOUND = "IMAGE_NOT_FOUND"
    STORAGE_ERROR = "STORAGE_ERROR"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"


class ErrorResponse(BaseModel):
    """Unified error response format."""

    message: str = Field(..., description="Error description")
    code: str = Field(..., description="Error code")
