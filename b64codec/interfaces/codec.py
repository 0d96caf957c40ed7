"""Codec interfaces for b64codec.

This module defines protocols for encoding bytes to text and decoding text back
to bytes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Union

if TYPE_CHECKING:
    from b64codec.codec.result import DecodeResult


class IEncoder(Protocol):
    """Interface for bytes-to-text encoding."""

    def encode(self, data: bytes) -> str:
        """Encode bytes to text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...


class IDecoder(Protocol):
    """Interface for text-to-bytes decoding."""

    def decode(self, text: Union[str, bytes]) -> DecodeResult:
        """Decode text to bytes.

        Args:
            text: The encoded text.

        Returns:
            The decode result; failures are returned, not raised.
        """
        ...

    def decode_or_raise(self, text: Union[str, bytes]) -> bytes:
        """Decode text to bytes.

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            InvalidInputError: When the text cannot be decoded.
        """
        ...
