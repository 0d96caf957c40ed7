"""Permissive Base64 decoder.

Accepts symbols of both the standard and URL-safe alphabets, ignores whitespace
anywhere in the input, and ignores everything trailing the last symbol that is
padding or whitespace.
"""

from __future__ import annotations

from typing import Union

from b64codec.alphabet import DECODE_TABLE, INVALID, PAD, SKIP, WHITESPACE
from b64codec.exceptions import InvalidInputError

from .result import Decoded, DecodeFailure, DecodeResult

EncodedText = Union[str, bytes, bytearray, memoryview]


def _as_text(text: EncodedText) -> str:
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray, memoryview)):
        # One character per byte; non-ASCII bytes fall out as invalid characters.
        return bytes(text).decode("latin-1")
    raise TypeError(f"expected str or bytes-like object, got {type(text).__name__}")


def effective_length(text: str) -> int:
    """Return the length of text without trailing padding and whitespace.

    Args:
        text: The encoded text.

    Returns:
        Index one past the last character that is neither "=" nor whitespace.
    """
    limit = len(text)
    while limit > 0 and (text[limit - 1] == PAD or text[limit - 1] in WHITESPACE):
        limit -= 1
    return limit


def decode(text: EncodedText) -> DecodeResult:
    """Decode Base64 text into bytes.

    Every four accepted symbols yield three bytes. A final group of two or three
    symbols yields one or two bytes; a final group of one symbol is rejected.

    Args:
        text: The encoded text, as a string or ASCII bytes.

    Returns:
        Decoded with the bytes, or DecodeFailure with an InvalidInputError.

    Raises:
        TypeError: If text is neither a string nor bytes-like.

    Example:
        >>> decode("TWFu").unwrap()
        b'Man'
        >>> decode("SGVsbG8@").ok
        False
    """
    text = _as_text(text)
    limit = effective_length(text)

    out = bytearray()
    word = 0
    count = 0
    for pos in range(limit):
        code = ord(text[pos])
        bits = DECODE_TABLE[code] if code < 256 else INVALID
        if bits == SKIP:
            continue
        if bits == INVALID:
            return DecodeFailure(InvalidInputError.invalid_character(pos, text[pos]))

        word = (word << 6) | bits
        count += 1
        if count % 4 == 0:
            out += word.to_bytes(3, "big")
            word = 0

    remainder = count % 4
    if remainder == 1:
        return DecodeFailure(InvalidInputError.truncated_group(count))
    if remainder == 2:
        # 12 bits read, 8 of them make the byte.
        word <<= 12
        out.append((word >> 16) & 0xFF)
    elif remainder == 3:
        # 18 bits read, 16 of them make two bytes.
        word <<= 6
        out.append((word >> 16) & 0xFF)
        out.append((word >> 8) & 0xFF)

    return Decoded(bytes(out))


def decode_or_raise(text: EncodedText) -> bytes:
    """Decode Base64 text, raising on malformed input.

    Args:
        text: The encoded text.

    Returns:
        The decoded bytes.

    Raises:
        InvalidInputError: If the text cannot be decoded.
    """
    return decode(text).unwrap()
