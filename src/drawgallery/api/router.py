"""API router registration."""

from fastapi import APIRouter

from . import images

# The editor calls /save and /images at the site root
router = APIRouter()

router.include_router(images.router)
