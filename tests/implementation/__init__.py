"""Test helper package.

This package provides deterministic sample payloads and real-world encoded
documents for the codec tests.
"""

from .keys import generate_pem_key, pem_body
from .samples import sample_bytes, sample_sizes

__all__ = [
    "generate_pem_key",
    "pem_body",
    "sample_bytes",
    "sample_sizes",
]
