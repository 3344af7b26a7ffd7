"""
Address utility functions: Base58 codec and Base58Check checksum
"""

import hashlib

import base58

from chain_utils.config import UniversalAddressConfig
from chain_utils.exceptions import InvalidBase58CharacterError

BASE58_ALPHABET = base58.BITCOIN_ALPHABET.decode("ascii")


def base58_encode(data: bytes) -> str:
    """Encode bytes as Base58 (leading zero bytes become leading '1's)"""
    return base58.b58encode(bytes(data)).decode("ascii")


def base58_decode(value: str) -> bytes:
    """Decode a Base58 string, preserving leading zero bytes

    Raises:
        InvalidBase58CharacterError: If a character is outside the alphabet
    """
    for position, char in enumerate(value):
        if char not in BASE58_ALPHABET:
            raise InvalidBase58CharacterError(value, char, position)
    return base58.b58decode(value)


def double_sha256_checksum(payload: bytes) -> bytes:
    """First 4 bytes of SHA256(SHA256(payload)), as used by TRON Base58Check"""
    hash1 = hashlib.sha256(payload).digest()
    hash2 = hashlib.sha256(hash1).digest()
    return hash2[: UniversalAddressConfig.TRON_CHECKSUM_SIZE]


def strip_hex_prefix(value: str) -> str:
    """Remove an optional 0x / 0X prefix"""
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value
