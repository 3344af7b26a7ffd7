"""Tests for Base58 and checksum helpers"""

import hashlib

import pytest

from chain_utils.exceptions import InvalidBase58CharacterError, InvalidFormatError
from chain_utils.utils import (
    BASE58_ALPHABET,
    base58_decode,
    base58_encode,
    double_sha256_checksum,
    strip_hex_prefix,
)


def test_alphabet_excludes_ambiguous_characters():
    assert len(BASE58_ALPHABET) == 58
    for char in "0OIl":
        assert char not in BASE58_ALPHABET


def test_base58_known_vector():
    assert base58_encode(b"hello world") == "StV1DL6CwTryKyV"
    assert base58_decode("StV1DL6CwTryKyV") == b"hello world"


def test_base58_preserves_leading_zero_bytes():
    """Leading zero bytes map to leading '1' characters and back"""
    assert base58_encode(b"\x00\x00\x01") == "112"
    assert base58_decode("112") == b"\x00\x00\x01"
    assert base58_encode(b"\x00" * 3) == "111"
    assert base58_decode("111") == b"\x00" * 3


def test_base58_decode_invalid_character():
    with pytest.raises(InvalidBase58CharacterError) as exc_info:
        base58_decode("T0abc")

    assert exc_info.value.character == "0"
    assert exc_info.value.position == 1
    # Also an InvalidFormatError
    assert isinstance(exc_info.value, InvalidFormatError)


@pytest.mark.parametrize("value", ["abc l", "IOU", "abc "])
def test_base58_decode_rejects_non_alphabet(value):
    with pytest.raises(InvalidBase58CharacterError):
        base58_decode(value)


def test_double_sha256_checksum():
    payload = bytes.fromhex("41" + "00" * 20)
    expected = hashlib.sha256(hashlib.sha256(payload).digest()).digest()[:4]

    checksum = double_sha256_checksum(payload)

    assert checksum == expected
    assert len(checksum) == 4


def test_double_sha256_checksum_empty_payload():
    assert double_sha256_checksum(b"").hex() == "5df6e0e2"


def test_strip_hex_prefix():
    assert strip_hex_prefix("0xabcd") == "abcd"
    assert strip_hex_prefix("0Xabcd") == "abcd"
    assert strip_hex_prefix("abcd") == "abcd"
    assert strip_hex_prefix("") == ""
