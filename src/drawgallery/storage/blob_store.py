"""File system operations for drawing blobs."""

import base64
import logging
import shutil
from pathlib import Path

from ..exceptions import InvalidFilenameException

logger = logging.getLogger(__name__)


class BlobStore:
    """Stores PNG drawings as files in a single directory."""

    def __init__(self, images_dir: Path) -> None:
        """
        Initialize blob storage.

        Args:
            images_dir: Directory holding the PNG files. Created on first write.
        """
        self.images_dir = Path(images_dir)

    def ensure_directory(self) -> Path:
        """Ensure the image directory exists and return its path."""
        self.images_dir.mkdir(parents=True, exist_ok=True)
        return self.images_dir

    def resolve(self, filename: str) -> Path:
        """
        Resolve a blob filename to its path inside the image directory.

        Args:
            filename: Bare filename like 'cat-1712345678901.png'.

        Returns:
            Path of the blob.

        Raises:
            InvalidFilenameException: If the name is empty or escapes the directory.
        """
        if not filename or filename in (".", ".."):
            raise InvalidFilenameException("Invalid filename")

        path = self.images_dir / filename
        if path.resolve().parent != self.images_dir.resolve():
            raise InvalidFilenameException("Invalid filename")
        return path

    def write(self, filename: str, base64_payload: str) -> Path:
        """
        Decode a base64 payload and write it under the given filename.

        Existing files are overwritten.

        Raises:
            binascii.Error: If the payload is not valid base64.
            OSError: If the file cannot be written.
        """
        path = self.resolve(filename)
        data = base64.b64decode(base64_payload)
        self.ensure_directory()
        path.write_bytes(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)
        return path

    def read(self, filename: str) -> bytes | None:
        """Read blob bytes, or None if the blob does not exist."""
        path = self.resolve(filename)
        if not path.is_file():
            return None
        return path.read_bytes()

    def exists(self, filename: str) -> bool:
        """Check if a blob exists."""
        return self.resolve(filename).is_file()

    def list_png_filenames(self) -> list[str]:
        """List every entry ending in .png, in directory listing order."""
        if not self.images_dir.exists():
            return []
        return [path.name for path in self.images_dir.iterdir() if path.name.endswith(".png")]

    def delete(self, filename: str) -> None:
        """
        Delete one blob.

        Raises:
            FileNotFoundError: If the blob does not exist.
        """
        self.resolve(filename).unlink()

    def delete_all(self) -> int:
        """
        Remove every entry of the image directory.

        Not limited to PNG files: stray files, subdirectories and the
        metadata document are removed too. The directory itself is kept.

        Returns:
            Number of entries removed.
        """
        if not self.images_dir.exists():
            return 0

        removed = 0
        for path in list(self.images_dir.iterdir()):
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
            removed += 1
        return removed
