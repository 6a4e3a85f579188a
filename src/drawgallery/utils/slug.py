"""Filename generation for stored drawings."""

import re

# Anything other than a Unicode letter, digit, underscore or hyphen
_UNSAFE_CHARS = re.compile(r"[^\w-]")
_TIMESTAMP_SUFFIX = re.compile(r"-[0-9]+\.png\Z")


def sanitize(raw_name: str) -> str:
    """
    Map a display name to a filesystem-safe slug.

    Every unsafe character becomes one underscore, so the slug keeps the
    length and ordering of the input. Empty or all-symbol names are accepted.

    Args:
        raw_name: Free-text display name.

    Returns:
        The sanitized slug.
    """
    return _UNSAFE_CHARS.sub("_", raw_name)


def generate_filename(raw_name: str, timestamp_ms: int) -> str:
    """Build the blob filename for a new drawing."""
    return f"{sanitize(raw_name)}-{timestamp_ms}.png"


def derive_title(filename: str) -> str:
    """
    Derive a display title from a blob filename.

    Used when a blob has no metadata entry, e.g. "img_one-12345.png" -> "img one".
    """
    return _TIMESTAMP_SUFFIX.sub("", filename).replace("_", " ")
