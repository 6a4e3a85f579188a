"""Data URL helpers."""

import re

PNG_DATA_URL_PREFIX = re.compile(r"^data:image/png;base64,")


def strip_png_data_url(image: str) -> str:
    """Return the base64 payload of a PNG data URL.

    Strings without the prefix are returned unchanged.
    """
    return PNG_DATA_URL_PREFIX.sub("", image)
