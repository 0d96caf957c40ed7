"""b64codec codec package.

This package provides the decoder, the encoder, the decode result types, and the
Base64 facades built on them.
"""

from b64codec.codec.base64 import Base64, Base64Codec, CodecConfig
from b64codec.codec.decoder import decode, decode_or_raise, effective_length
from b64codec.codec.encoder import encode, encode_url, encoded_length
from b64codec.codec.result import DecodeFailure, Decoded, DecodeResult

__all__ = [
    # Facades
    "Base64",
    "Base64Codec",
    "CodecConfig",
    # Decoder
    "decode",
    "decode_or_raise",
    "effective_length",
    # Encoder
    "encode",
    "encode_url",
    "encoded_length",
    # Results
    "Decoded",
    "DecodeFailure",
    "DecodeResult",
]
