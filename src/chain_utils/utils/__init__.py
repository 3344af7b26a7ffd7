"""
chain_utils utility functions
"""

from chain_utils.utils.address import (
    BASE58_ALPHABET,
    base58_decode,
    base58_encode,
    double_sha256_checksum,
    strip_hex_prefix,
)

__all__ = [
    "BASE58_ALPHABET",
    "base58_encode",
    "base58_decode",
    "double_sha256_checksum",
    "strip_hex_prefix",
]
