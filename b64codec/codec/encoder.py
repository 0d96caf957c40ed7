"""Base64 encoder for the standard and URL-safe alphabets."""

from __future__ import annotations

from typing import Union

from b64codec.alphabet import PAD, STANDARD, URL_SAFE, Alphabet

BytesLike = Union[bytes, bytearray, memoryview]


def encoded_length(size: int, padded: bool = True) -> int:
    """Return the number of characters produced by encoding size bytes.

    Args:
        size: Number of input bytes.
        padded: Whether the output carries "=" padding.

    Returns:
        ceil(size / 3) * 4 when padded, ceil(size * 4 / 3) otherwise.

    Raises:
        ValueError: If size is negative.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if padded:
        return (size + 2) // 3 * 4
    return (size * 4 + 2) // 3


def encode(data: BytesLike, alphabet: Alphabet = STANDARD) -> str:
    """Encode bytes as padded Base64 text.

    Args:
        data: The bytes to encode.
        alphabet: Symbol table to use, STANDARD by default.

    Returns:
        ASCII text of length ceil(len(data) / 3) * 4.

    Raises:
        TypeError: If data is not bytes-like.

    Example:
        >>> encode(b"Man")
        'TWFu'
        >>> encode(b"\\xff")
        '/w=='
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes-like object, got {type(data).__name__}")
    data = bytes(data)
    symbols = alphabet.symbols

    out = []
    end = len(data) - len(data) % 3
    for i in range(0, end, 3):
        word = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
        out.append(symbols[word >> 18])
        out.append(symbols[(word >> 12) & 0x3F])
        out.append(symbols[(word >> 6) & 0x3F])
        out.append(symbols[word & 0x3F])

    remainder = len(data) - end
    if remainder == 1:
        word = data[end] << 4
        out.append(symbols[word >> 6])
        out.append(symbols[word & 0x3F])
        out.append(PAD * 2)
    elif remainder == 2:
        word = ((data[end] << 8) | data[end + 1]) << 2
        out.append(symbols[word >> 12])
        out.append(symbols[(word >> 6) & 0x3F])
        out.append(symbols[word & 0x3F])
        out.append(PAD)

    return "".join(out)


def encode_url(data: BytesLike) -> str:
    """Encode bytes with the URL-safe alphabet.

    Padding is the same as for encode(): the output is always a multiple of four
    characters.

    Args:
        data: The bytes to encode.

    Returns:
        Padded URL-safe Base64 text.
    """
    return encode(data, URL_SAFE)
