"""
TRON address converter tests
"""

import pytest

from chain_utils.address import TronAddressConverter, tron_converter
from chain_utils.exceptions import InvalidFormatError, InvalidLengthError
from chain_utils.utils import base58_decode, base58_encode, double_sha256_checksum

# Deployed mainnet / testnet contracts
KNOWN_ADDRESSES = [
    "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t",
    "TXDk8mbtRbXeYuMNS83CfKPaYYT8XWv9Hz",
    "TG3XXyExBkPp9nzdajDZsozEu4BkaSJozs",
    "TXYZopYRdj2D9XRtbG411XZZ3kM5VkAeBf",
    "T9yD14Nj9j7xAB4dbGeiX9h8unkKHxuWwb",
]


def test_to_bytes(tron_address, tron_address_hex):
    result = tron_converter.to_bytes(tron_address)

    assert len(result) == 32
    assert result[:12] == bytes(12)
    assert result[12:].hex() == tron_address_hex


def test_from_bytes(tron_address, tron_address_hex):
    data = bytes(12) + bytes.fromhex(tron_address_hex)

    assert tron_converter.from_bytes(data) == tron_address


@pytest.mark.parametrize("address", KNOWN_ADDRESSES)
def test_round_trip_known_addresses(address):
    assert tron_converter.is_valid(address) is True
    assert tron_converter.from_bytes(tron_converter.to_bytes(address)) == address


@pytest.mark.parametrize(
    "payload",
    [bytes(20), b"\xff" * 20, bytes(range(20)), bytes(range(100, 120))],
)
def test_round_trip_from_payload(payload):
    address = tron_converter.from_bytes(bytes(12) + payload)

    assert address.startswith("T")
    assert len(address) == 34
    assert tron_converter.is_valid(address) is True
    assert tron_converter.to_bytes(address)[12:] == payload


def test_zero_address():
    assert tron_converter.from_bytes(bytes(32)) == TronAddressConverter.ZERO_ADDRESS
    assert tron_converter.get_zero_address() == TronAddressConverter.ZERO_ADDRESS


def test_from_bytes_emits_mainnet_prefix(tron_address):
    decoded = base58_decode(tron_converter.from_bytes(tron_converter.to_bytes(tron_address)))

    assert len(decoded) == 25
    assert decoded[0] == 0x41


def test_is_valid_rejects_bad_checksum(tron_address):
    tampered = tron_address[:-1] + ("u" if tron_address[-1] != "u" else "v")

    assert tron_converter.is_valid(tampered) is False
    with pytest.raises(InvalidFormatError):
        tron_converter.to_bytes(tampered)


@pytest.mark.parametrize(
    "address",
    [
        "",
        "T",
        "AR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t",
        "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6",
        "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6tt",
        "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj60",
        "T0000000000000000000000000000000",
        "0xa614f803b6fd780986a42c78ec9c7f77e6ded13c",
    ],
)
def test_invalid_addresses(address):
    assert tron_converter.is_valid(address) is False
    with pytest.raises(InvalidFormatError):
        tron_converter.to_bytes(address)


def test_is_valid_never_raises_on_non_string():
    assert tron_converter.is_valid(None) is False
    assert tron_converter.is_valid(b"TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t") is False


@pytest.mark.parametrize("length", [0, 20, 25, 31, 33])
def test_from_bytes_rejects_wrong_length(length):
    with pytest.raises(InvalidLengthError):
        tron_converter.from_bytes(bytes(length))


def test_injected_checksum():
    """Converter uses the supplied checksum for both encoding and validation"""
    calls = []

    def fixed_checksum(payload):
        calls.append(payload)
        return b"\x00\x00\x00\x00"

    converter = TronAddressConverter(checksum=fixed_checksum)
    address = converter.from_bytes(bytes(32))

    assert calls[0] == bytes.fromhex("41" + "00" * 20)
    assert address != TronAddressConverter.ZERO_ADDRESS
    assert converter.is_valid(address) is True
    # The default double-SHA256 converter rejects the substitute checksum
    assert tron_converter.is_valid(address) is False


def test_to_evm_format(tron_address, tron_address_hex):
    assert tron_converter.to_evm_format(tron_address) == "0x" + tron_address_hex


@pytest.mark.parametrize(
    "prefix,payload",
    [(0x42, bytes(20)), (0x40, b"\xff" * 20), (0xA0, bytes(range(20)))],
)
def test_is_valid_rejects_non_mainnet_prefix(prefix, payload):
    """Correctly checksummed T-addresses with another network prefix are rejected"""
    raw = bytes([prefix]) + payload
    address = base58_encode(raw + double_sha256_checksum(raw))

    assert tron_converter.is_valid(address) is False
    with pytest.raises(InvalidFormatError):
        tron_converter.to_bytes(address)


def test_custom_prefix_round_trip():
    converter = TronAddressConverter(prefix=0x42)
    address = converter.from_bytes(bytes(32))

    assert converter.is_valid(address) is True
    assert converter.from_bytes(converter.to_bytes(address)) == address
    assert tron_converter.is_valid(address) is False
