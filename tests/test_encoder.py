"""Tests for the Base64 encoder."""

from __future__ import annotations

import base64

import pytest

from b64codec import STANDARD, URL_SAFE, encode, encode_url, encoded_length
from tests.implementation import sample_bytes, sample_sizes


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", ""),
        (b"f", "Zg=="),
        (b"fo", "Zm8="),
        (b"foo", "Zm9v"),
        (b"foob", "Zm9vYg=="),
        (b"fooba", "Zm9vYmE="),
        (b"foobar", "Zm9vYmFy"),
        (bytes([77, 97, 110]), "TWFu"),
        (bytes([0xFF]), "/w=="),
        (bytes([0xFB, 0xFF]), "+/8="),
        (bytes([0, 0, 0]), "AAAA"),
    ],
)
def test_encode_vectors(data: bytes, expected: str) -> None:
    """Test RFC 4648 section 10 vectors and edge bytes."""
    assert encode(data) == expected


def test_encode_url_uses_url_safe_symbols() -> None:
    """Test that the URL-safe path swaps + and / for - and _."""
    assert encode(bytes([0xFB, 0xFF, 0xBF])) == "+/+/"
    assert encode_url(bytes([0xFB, 0xFF, 0xBF])) == "-_-_"


def test_encode_url_is_padded() -> None:
    """Test that URL-safe output carries the same padding as the standard path."""
    assert encode_url(bytes([0xFF])) == "_w=="
    assert encode_url(b"fo") == "Zm8="
    assert encode_url(b"") == ""


def test_encode_accepts_bytes_like() -> None:
    """Test that bytearray and memoryview encode like bytes."""
    assert encode(bytearray(b"Man")) == "TWFu"
    assert encode(memoryview(b"foobar")[3:]) == "YmFy"


def test_encode_rejects_text() -> None:
    """Test that passing a str is a programming error."""
    with pytest.raises(TypeError):
        encode("Man")  # type: ignore[arg-type]


@pytest.mark.parametrize("size", sample_sizes())
def test_encode_matches_stdlib(size: int) -> None:
    """Test output against the standard library for both alphabets."""
    data = sample_bytes(size)

    assert encode(data) == base64.b64encode(data).decode("ascii")
    assert encode(data, STANDARD) == base64.b64encode(data).decode("ascii")
    assert encode(data, URL_SAFE) == base64.urlsafe_b64encode(data).decode("ascii")
    assert encode_url(data) == base64.urlsafe_b64encode(data).decode("ascii")


@pytest.mark.parametrize("size", sample_sizes())
def test_length_law(size: int) -> None:
    """Test that output length is ceil(n / 3) * 4 and pure ASCII."""
    text = encode(sample_bytes(size))

    assert len(text) == -(-size // 3) * 4
    assert len(text) == encoded_length(size)
    assert text.isascii()


def test_encoded_length_unpadded() -> None:
    """Test lengths without padding."""
    assert [encoded_length(n, padded=False) for n in range(7)] == [0, 2, 3, 4, 6, 7, 8]


def test_encoded_length_rejects_negative() -> None:
    """Test that a negative size is rejected."""
    with pytest.raises(ValueError):
        encoded_length(-1)
