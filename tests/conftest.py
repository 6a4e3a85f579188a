"""Shared fixtures for drawing gallery tests."""

import base64
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from drawgallery.services import GalleryService
from drawgallery.storage import BlobStore, MetadataStore

# 1x1 transparent PNG
PNG_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
PNG_BYTES = base64.b64decode(PNG_BASE64)
MOCK_IMAGE_DATA = f"data:image/png;base64,{PNG_BASE64}"


@pytest.fixture
def images_dir(tmp_path: Path) -> Path:
    """Empty image directory."""
    path = tmp_path / "img"
    path.mkdir()
    return path


@pytest.fixture
def blob_store(images_dir: Path) -> BlobStore:
    return BlobStore(images_dir)


@pytest.fixture
def metadata_store(images_dir: Path) -> MetadataStore:
    return MetadataStore(images_dir / "meta.json")


@pytest.fixture
def service(blob_store: BlobStore, metadata_store: MetadataStore) -> GalleryService:
    """Gallery service with a fixed clock."""
    return GalleryService(blob_store, metadata_store, clock=lambda: 1700000000000)


@pytest.fixture
def client(tmp_path: Path, images_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """Create test client with isolated temp directory."""
    # Set environment variables BEFORE importing the app
    monkeypatch.setenv("IMAGES_DIR", str(images_dir))
    monkeypatch.setenv("STATIC_DIR", str(tmp_path / "public"))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("MAX_BODY_BYTES", "4096")

    # Clear cached settings and the module-level app
    modules_to_clear = [k for k in sys.modules if k.startswith("drawgallery")]
    for mod in modules_to_clear:
        del sys.modules[mod]

    from drawgallery.main import app

    # Entering the client runs the lifespan, which builds the gallery service
    with TestClient(app) as test_client:
        yield test_client
