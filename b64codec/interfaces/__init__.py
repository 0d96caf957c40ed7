"""b64codec interfaces package.

This package provides protocol definitions for the encoder and decoder seams.
"""

from .codec import IDecoder, IEncoder

__all__ = [
    "IDecoder",
    "IEncoder",
]
