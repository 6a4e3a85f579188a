"""JSON-based metadata index for stored drawings."""

import json
import threading
from contextlib import nullcontext
from pathlib import Path
from typing import Any

from ..models import ImageRecord

MetadataIndex = dict[str, dict[str, Any]]


class MetadataStore:
    """Manages the meta.json document mapping blob filenames to {name, price}."""

    def __init__(self, path: Path, lock_writes: bool = False) -> None:
        """
        Initialize metadata store.

        Args:
            path: Location of the JSON document.
            lock_writes: Serialize read-modify-write cycles within this process.
                Without it, overlapping writers follow last-writer-wins.
        """
        self.path = Path(path)
        self._lock = threading.Lock() if lock_writes else nullcontext()

    def exists(self) -> bool:
        """Check if the metadata document exists."""
        return self.path.exists()

    def load_all(self) -> MetadataIndex:
        """
        Load the full index.

        Returns:
            The filename -> entry mapping, or {} if the document is absent.

        Raises:
            json.JSONDecodeError: If the document is malformed.
            ValueError: If the document is valid JSON but not an object.
        """
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            index = json.load(f)
        if not isinstance(index, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return index

    def save_all(self, index: MetadataIndex) -> None:
        """Overwrite the document with the given index."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(index, f, indent=2, ensure_ascii=False)

    def get(self, filename: str) -> dict[str, Any] | None:
        """Get the entry for one filename."""
        return self.load_all().get(filename)

    def upsert(self, filename: str, name: str, price: str) -> ImageRecord:
        """Set or replace the entry for a filename."""
        record = ImageRecord(filename=filename, name=name, price=price)
        with self._lock:
            index = self.load_all()
            index[filename] = record.to_entry()
            self.save_all(index)
        return record

    def remove(self, filename: str) -> bool:
        """
        Remove the entry for a filename.

        A missing document is left missing.

        Returns:
            True if an entry was removed, False if there was none.
        """
        with self._lock:
            if not self.exists():
                return False
            index = self.load_all()
            removed = filename in index
            index.pop(filename, None)
            self.save_all(index)
        return removed

    def clear(self) -> None:
        """Delete the document entirely."""
        with self._lock:
            self.path.unlink(missing_ok=True)
