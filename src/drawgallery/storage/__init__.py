"""Storage layer."""

from .blob_store import BlobStore
from .metadata_store import MetadataIndex, MetadataStore

__all__ = ["BlobStore", "MetadataIndex", "MetadataStore"]
