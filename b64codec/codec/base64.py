"""Base64 codec facades.

This module provides the static Base64 helper and the configurable Base64Codec.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from b64codec.alphabet import PAD, STANDARD, URL_SAFE, Alphabet
from b64codec.interfaces.codec import IDecoder, IEncoder

from . import decoder, encoder
from .decoder import EncodedText
from .encoder import BytesLike
from .result import DecodeResult


class Base64(IEncoder, IDecoder):
    """Base64 encoding utilities.

    Encoding uses the standard alphabet, or the URL-safe one through
    encode_url(); both pad with "=". Decoding accepts either alphabet.
    """

    @staticmethod
    def encode(data: BytesLike) -> str:
        """Encode bytes to a standard Base64 string.

        Args:
            data: The bytes to encode.

        Returns:
            A padded Base64 string.
        """
        return encoder.encode(data, STANDARD)

    @staticmethod
    def encode_url(data: BytesLike) -> str:
        """Encode bytes to a URL-safe Base64 string.

        Encodes the input using base64url (RFC 4648 Section 5), which replaces
        + with - and / with _. The output is padded.

        Args:
            data: The bytes to encode.

        Returns:
            A padded URL-safe Base64 string.
        """
        return encoder.encode(data, URL_SAFE)

    @staticmethod
    def decode(text: EncodedText) -> DecodeResult:
        """Decode a standard or URL-safe Base64 string.

        Args:
            text: The Base64 string to decode.

        Returns:
            The decode result.
        """
        return decoder.decode(text)

    @staticmethod
    def decode_or_raise(text: EncodedText) -> bytes:
        """Decode a standard or URL-safe Base64 string to bytes.

        Args:
            text: The Base64 string to decode.

        Returns:
            The decoded bytes.

        Raises:
            InvalidInputError: If the string cannot be decoded.
        """
        return decoder.decode_or_raise(text)


@dataclass
class CodecConfig:
    """Configuration for a Base64Codec.

    Attributes:
        alphabet: Alphabet used for encoding, or its name ("standard",
            "url_safe"). Only the standard and URL-safe alphabets are
            accepted, since the decoder reads no others.
        padded: Whether encoded output keeps its "=" padding.
    """

    alphabet: Union[Alphabet, str] = field(default=STANDARD)
    padded: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.alphabet, str):
            self.alphabet = Alphabet.by_name(self.alphabet)
        if not isinstance(self.alphabet, Alphabet):
            raise TypeError(f"expected Alphabet or name, got {type(self.alphabet).__name__}")
        if self.alphabet not in (STANDARD, URL_SAFE):
            raise ValueError(
                f"unsupported alphabet {self.alphabet.name!r}: use STANDARD or URL_SAFE"
            )


class Base64Codec(IEncoder, IDecoder):
    """Base64 codec bound to a configuration.

    Decoding is always permissive and accepts both alphabets, so a codec
    configured for unpadded URL-safe output still decodes padded standard text.
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize the codec.

        Args:
            config: Codec configuration; defaults to padded standard Base64.
        """
        self.config = config if config is not None else CodecConfig()

    def encode(self, data: BytesLike) -> str:
        """Encode bytes with the configured alphabet and padding.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        text = encoder.encode(data, self.config.alphabet)
        if not self.config.padded:
            text = text.rstrip(PAD)
        return text

    def encoded_length(self, size: int) -> int:
        """Return the length of the text encode() produces for size bytes."""
        return encoder.encoded_length(size, self.config.padded)

    def decode(self, text: EncodedText) -> DecodeResult:
        """Decode text, returning failures as values.

        Args:
            text: The encoded text.

        Returns:
            The decode result.
        """
        return decoder.decode(text)

    def decode_or_raise(self, text: EncodedText) -> bytes:
        """Decode text to bytes.

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            InvalidInputError: If the text cannot be decoded.
        """
        return self.decode(text).unwrap()
