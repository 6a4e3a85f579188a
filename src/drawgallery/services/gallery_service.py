"""Gallery business service.

Keeps the PNG blobs and the meta.json index in step across save, update and
delete, and assembles the listing shown by the gallery.
"""

import logging
import re
import time
from collections.abc import Callable

from ..config import Settings
from ..exceptions import ImageNotFoundException, StorageException, ValidationException
from ..models import GalleryItem
from ..storage import BlobStore, MetadataStore
from ..utils.slug import derive_title, generate_filename

logger = logging.getLogger(__name__)


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class GalleryService:
    """Gallery business service."""

    def __init__(
        self,
        blob_store: BlobStore,
        metadata_store: MetadataStore,
        currency_sign: str = "€",
        clock: Callable[[], int] = _epoch_millis,
    ) -> None:
        """
        Initialize gallery service.

        Args:
            blob_store: Storage for the PNG files.
            metadata_store: Index of names and prices, kept in the same directory.
            currency_sign: Sign appended to prices in responses.
            clock: Source of millisecond timestamps for new filenames.
        """
        self.blob_store = blob_store
        self.metadata_store = metadata_store
        self.currency_sign = currency_sign
        self._clock = clock
        self._currency_suffix = re.compile(rf"\s?{re.escape(currency_sign)}\Z")

    @classmethod
    def from_settings(cls, settings: Settings) -> "GalleryService":
        """Build the service and its stores from application settings."""
        blob_store = BlobStore(settings.images_path)
        blob_store.ensure_directory()
        metadata_store = MetadataStore(
            settings.images_path / settings.metadata_filename,
            lock_writes=settings.lock_metadata_writes,
        )
        return cls(blob_store, metadata_store, currency_sign=settings.currency_sign)

    def format_price(self, price: str) -> str:
        """Append the currency suffix, e.g. "100" -> "100 €"."""
        return f"{price} {self.currency_sign}"

    def clean_price(self, price: str) -> str:
        """Strip a trailing " €" or "€" echoed back by the client."""
        return self._currency_suffix.sub("", price)

    def list_images(self) -> list[GalleryItem]:
        """
        Assemble the gallery from the blobs present on disk.

        Listing is driven by blob presence: index entries without a blob are
        ignored, and blobs without an entry get a title derived from the
        filename and no price.

        Returns:
            Gallery items in directory listing order.

        Raises:
            StorageException: If the directory or the index cannot be read.
        """
        try:
            index = self.metadata_store.load_all()
            filenames = self.blob_store.list_png_filenames()
        except (OSError, ValueError) as e:
            logger.error("Failed to load images: %s", e)
            raise StorageException("Failed to load images") from e

        items = []
        for filename in filenames:
            entry = index.get(filename)
            if not isinstance(entry, dict):
                entry = {}

            name = entry.get("name")
            title = str(name) if name is not None else derive_title(filename)

            price = entry.get("price")
            items.append(
                GalleryItem(
                    filename=filename,
                    title=title,
                    price=self.format_price(price) if price else None,
                )
            )
        return items

    def save_image(
        self,
        name: str | None,
        image_payload: str,
        price: str = "",
        filename: str | None = None,
    ) -> dict:
        """
        Create a new drawing or overwrite an existing one.

        Args:
            name: Display title; required.
            image_payload: Base64 PNG data without the data URL prefix.
            price: Price without currency suffix. On update a suffix is stripped.
            filename: Existing blob to overwrite; a new filename is generated if empty.

        Returns:
            Dict with message, filename, title and suffixed price.

        Raises:
            ValidationException: If name is missing or filename is invalid.
            StorageException: If the blob or the index cannot be written.
        """
        if not name:
            raise ValidationException("Name is required")

        if filename:
            return self._update_image(filename, name, image_payload, price)
        return self._create_image(name, image_payload, price)

    def _create_image(self, name: str, image_payload: str, price: str) -> dict:
        filename = generate_filename(name, self._clock())
        self._write(filename, name, image_payload, price, "Failed to save image")
        logger.info("Saved image %s", filename)

        return {
            "message": "Image saved successfully",
            "filename": filename,
            "title": name,
            # An empty price still yields the bare suffix
            "price": self.format_price(price),
        }

    def _update_image(self, filename: str, name: str, image_payload: str, price: str) -> dict:
        clean_price = self.clean_price(price)
        self._write(filename, name, image_payload, clean_price, "Failed to update image")
        logger.info("Updated image %s", filename)

        return {
            "message": "Image updated successfully",
            "filename": filename,
            "title": name,
            "price": self.format_price(clean_price),
        }

    def _write(self, filename: str, name: str, image_payload: str, price: str, failure: str) -> None:
        """Write the blob, then its index entry. No rollback if the second step fails."""
        try:
            self.blob_store.write(filename, image_payload)
        except (OSError, ValueError) as e:
            logger.error("%s %s: %s", failure, filename, e)
            raise StorageException(failure) from e

        try:
            self.metadata_store.upsert(filename, name, price)
        except (OSError, ValueError) as e:
            logger.error("%s %s: metadata write failed: %s", failure, filename, e)
            raise StorageException(failure) from e

    def delete_image(self, filename: str) -> None:
        """
        Delete one blob and its index entry.

        Raises:
            ImageNotFoundException: If the blob does not exist.
            StorageException: If the blob or the index cannot be updated.
        """
        try:
            self.blob_store.delete(filename)
        except FileNotFoundError as e:
            logger.error("Failed to delete image %s: not found", filename)
            raise ImageNotFoundException("Failed to delete image") from e
        except OSError as e:
            logger.error("Failed to delete image %s: %s", filename, e)
            raise StorageException("Failed to delete image") from e

        try:
            self.metadata_store.remove(filename)
        except (OSError, ValueError) as e:
            logger.error("Failed to remove metadata for %s: %s", filename, e)
            raise StorageException("Failed to delete image") from e

        logger.info("Deleted image %s", filename)

    def delete_all(self) -> None:
        """
        Wipe the whole image directory, index included.

        Raises:
            StorageException: If any entry cannot be removed.
        """
        try:
            removed = self.blob_store.delete_all()
            self.metadata_store.clear()
        except OSError as e:
            logger.error("Failed to delete images: %s", e)
            raise StorageException("Failed to delete images") from e

        logger.info("Deleted all images (%d entries)", removed)
