"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from . import __version__
from .api import router
from .config import get_settings
from .exceptions import GalleryException
from .logging_config import configure_logging
from .models import ErrorCode, ErrorResponse
from .services import GalleryService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager."""
    settings = get_settings()
    configure_logging(settings.log_level)

    # One service per process owns the image directory and its index
    app.state.gallery_service = GalleryService.from_settings(settings)
    logger.info("Starting drawing gallery v%s, images in %s", __version__, settings.images_path)
    yield
    logger.info("Shutting down drawing gallery")


settings = get_settings()

app = FastAPI(
    title="Drawing Gallery API",
    description="Stores canvas drawings as PNG files with a JSON metadata index",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    """Reject requests whose declared body exceeds max_body_bytes."""
    limit = get_settings().max_body_bytes
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > limit:
        logger.warning("%s %s rejected: body of %s bytes", request.method, request.url.path, content_length)
        return JSONResponse(
            status_code=413,
            content=ErrorResponse(
                message="Request body too large",
                code=ErrorCode.PAYLOAD_TOO_LARGE.value,
            ).model_dump(),
        )
    return await call_next(request)


@app.exception_handler(GalleryException)
async def gallery_exception_handler(request: Request, exc: GalleryException) -> JSONResponse:
    """Handle all GalleryException subclasses with proper error response."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (cause: %r)", request.method, request.url.path, exc.message, exc.__cause__)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=exc.message, code=exc.error_code.value).model_dump(),
    )


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


# Stored drawings are served as-is for the editor's <img> tags
app.mount("/img", StaticFiles(directory=settings.images_path), name="img")

# Front-end bundle, when one is deployed next to the server
if settings.static_path.is_dir():
    app.mount("/", StaticFiles(directory=settings.static_path, html=True), name="static")


def run() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "drawgallery.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
