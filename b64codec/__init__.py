"""b64codec: a permissive Base64 codec.

This package implements Base64 (RFC 4648) encoding with the standard and URL-safe
alphabets, and a decoder that accepts either alphabet, embedded whitespace, and
missing or excess padding.

Main Components:
    - encode / encode_url: bytes to padded Base64 text
    - decode: Base64 text to a Decoded or DecodeFailure result
    - Base64 / Base64Codec: facades over the encoder and decoder
    - Alphabet: the STANDARD and URL_SAFE symbol tables

Example:
    >>> from b64codec import decode, encode
    >>> encode(b"Man")
    'TWFu'
    >>> decode("TW Fu\\n").unwrap()
    b'Man'
"""

from b64codec.alphabet import STANDARD, URL_SAFE, Alphabet
from b64codec.codec import (
    Base64,
    Base64Codec,
    CodecConfig,
    DecodeFailure,
    Decoded,
    DecodeResult,
    decode,
    decode_or_raise,
    encode,
    encode_url,
    encoded_length,
)
from b64codec.exceptions import Base64Error, InvalidInputError

__version__ = "0.1.0"

__all__ = [
    # Codec
    "encode",
    "encode_url",
    "encoded_length",
    "decode",
    "decode_or_raise",
    "Base64",
    "Base64Codec",
    "CodecConfig",
    # Results
    "Decoded",
    "DecodeFailure",
    "DecodeResult",
    # Alphabets
    "Alphabet",
    "STANDARD",
    "URL_SAFE",
    # Exceptions
    "Base64Error",
    "InvalidInputError",
]
