"""Tests for filename sanitizing and title derivation."""

import pytest

from drawgallery.utils.data_url import strip_png_data_url
from drawgallery.utils.slug import derive_title, generate_filename, sanitize


def _is_safe(ch: str) -> bool:
    return ch.isalnum() or ch in "_-"


class TestSanitize:
    """Tests for sanitize()."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("My Test Image", "My_Test_Image"),
            ("cat-dog_1", "cat-dog_1"),
            ("Кот в сапогах", "Кот_в_сапогах"),
            ("日本の絵 №2", "日本の絵__2"),
            ("a/b\\c..png", "a_b_c__png"),
            ("", ""),
            ("!!!", "___"),
        ],
    )
    def test_known_values(self, raw: str, expected: str) -> None:
        assert sanitize(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["hello world", "€100 price!", "tab\there", "émoji 🎨 art", "  ", "x" * 200],
    )
    def test_length_and_charset(self, raw: str) -> None:
        """Output keeps the input length and only holds letters, digits, _ and -."""
        slug = sanitize(raw)
        assert len(slug) == len(raw)
        assert all(_is_safe(ch) for ch in slug)

    def test_deterministic(self) -> None:
        assert sanitize("Same name?") == sanitize("Same name?")


def test_generate_filename() -> None:
    assert generate_filename("My Test Image", 1700000000000) == "My_Test_Image-1700000000000.png"


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("img_one-12345.png", "img one"),
        ("My_Test_Image-1700000000000.png", "My Test Image"),
        ("plain.png", "plain.png"),
        ("no_digits-abc.png", "no digits-abc.png"),
        ("a-1-2.png", "a-1"),
        # Only ASCII digits form the timestamp suffix
        ("a_b-١٢٣.png", "a b-١٢٣.png"),
        ("a_b-123.png\n", "a b-123.png\n"),
    ],
)
def test_derive_title(filename: str, expected: str) -> None:
    assert derive_title(filename) == expected


def test_strip_png_data_url() -> None:
    assert strip_png_data_url("data:image/png;base64,AAAA") == "AAAA"
    assert strip_png_data_url("AAAA") == "AAAA"
    assert strip_png_data_url("data:image/jpeg;base64,AAAA") == "data:image/jpeg;base64,AAAA"
