"""Image domain models."""

from dataclasses import asdict, dataclass


@dataclass
class ImageRecord:
    """Metadata entry for one stored drawing."""

    filename: str
    name: str
    price: str = ""  # stored without currency suffix

    def to_entry(self) -> dict[str, str]:
        """Convert to the value stored under the filename key in meta.json."""
        return {"name": self.name, "price": self.price}


@dataclass
class GalleryItem:
    """A drawing as listed in the gallery."""

    filename: str
    title: str
    price: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)
