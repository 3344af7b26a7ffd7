"""
Universal Address (36 bytes) encoding

Format: SLIP-44 chain ID (4 bytes, big-endian) + address slot (32 bytes)
Hex form: 0x + 72 lower-case hex characters
"""

import logging
import re
from typing import Mapping, Optional, Union

from chain_utils.address.converter import AddressConverter, get_converter
from chain_utils.chains.registry import ChainRegistry, get_default_registry
from chain_utils.config import UniversalAddressConfig
from chain_utils.exceptions import (
    InvalidFormatError,
    InvalidLengthError,
    UnknownChainError,
    UnsupportedChainError,
)
from chain_utils.types import ChainType, NativeChainId, UniversalAddress
from chain_utils.utils.address import strip_hex_prefix

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")

_SIZE = UniversalAddressConfig.UNIVERSAL_ADDRESS_SIZE
_SLIP44_SIZE = UniversalAddressConfig.SLIP44_SIZE


def bytes_to_hex(data: BytesLike) -> str:
    """Render 36 Universal Address bytes as 0x + 72 hex characters

    Raises:
        InvalidLengthError: If data is not 36 bytes
    """
    data = bytes(data)
    if len(data) != _SIZE:
        raise InvalidLengthError("Universal Address bytes", _SIZE, len(data))
    return "0x" + data.hex()


def hex_to_bytes(value: str) -> bytes:
    """Parse 0x + 72 hex characters (prefix optional) into 36 bytes

    Raises:
        InvalidLengthError: If the unprefixed string is not 72 characters
        InvalidFormatError: If it is not a string or contains non-hex characters
    """
    if not isinstance(value, str):
        raise InvalidFormatError(value, "expected a hex string")
    cleaned = strip_hex_prefix(value)
    expected = UniversalAddressConfig.UNIVERSAL_ADDRESS_HEX_LENGTH
    if len(cleaned) != expected:
        raise InvalidLengthError("Universal Address hex", expected, len(cleaned))
    if not _HEX_PATTERN.fullmatch(cleaned):
        raise InvalidFormatError(value, "contains non-hex characters")
    return bytes.fromhex(cleaned)


class UniversalAddressCodec:
    """Encode/decode Universal Addresses against a chain registry

    Args:
        registry: Chain registry for SLIP-44 lookups (default: process-wide registry)
        converters: Chain type -> converter overrides; chain types missing
            here fall back to the global converter table
    """

    def __init__(
        self,
        registry: Optional[ChainRegistry] = None,
        converters: Optional[Mapping[ChainType, AddressConverter]] = None,
    ):
        self.registry = registry if registry is not None else get_default_registry()
        self._converters = dict(converters or {})

    def get_converter(self, chain_type: ChainType) -> AddressConverter:
        """
        Raises:
            UnsupportedChainTypeError: If the chain type has no converter
        """
        converter = self._converters.get(chain_type)
        if converter is not None:
            return converter
        return get_converter(chain_type)

    def encode_universal_address(self, slip44: int, native_address: str) -> bytes:
        """Encode a native address as a 36-byte Universal Address

        Args:
            slip44: SLIP-44 chain ID
            native_address: Native address (EVM: 0x..., TRON: T...)

        Returns:
            36 bytes: SLIP-44 (big-endian) + 32-byte address slot

        Raises:
            UnsupportedChainError: If slip44 is not registered
            UnsupportedChainTypeError: If the chain type has no converter
            InvalidFormatError: If the address is malformed for the chain
        """
        chain_type = self.registry.get_chain_type(slip44)
        if chain_type is None:
            raise UnsupportedChainError(slip44, f"Unsupported SLIP-44 ID: {slip44}")
        address_bytes = self.get_converter(chain_type).to_bytes(native_address)
        return slip44.to_bytes(_SLIP44_SIZE, "big") + address_bytes

    def decode_universal_address(self, data: BytesLike) -> UniversalAddress:
        """Decode 36 Universal Address bytes

        Raises:
            InvalidLengthError: If data is not 36 bytes
            UnknownChainError: If the SLIP-44 ID is not registered
            UnsupportedChainTypeError: If the chain type has no converter
        """
        data = bytes(data)
        if len(data) != _SIZE:
            raise InvalidLengthError("Universal Address", _SIZE, len(data))

        slip44 = int.from_bytes(data[:_SLIP44_SIZE], "big")
        chain_type = self.registry.get_chain_type(slip44)
        if chain_type is None:
            raise UnknownChainError(slip44)

        address_bytes = data[_SLIP44_SIZE:]
        native_address = self.get_converter(chain_type).from_bytes(address_bytes)
        return UniversalAddress(
            slip44=slip44,
            native_address=native_address,
            native_chain_id=self.registry.slip44_to_native(slip44),
            address=address_bytes,
        )

    def create_universal_address(
        self, native_chain_id: NativeChainId, native_address: str
    ) -> bytes:
        """Create a Universal Address from a native chain ID and address

        Raises:
            UnsupportedChainError: If the native chain ID is not registered
        """
        slip44 = self.registry.native_to_slip44(native_chain_id)
        if slip44 is None:
            raise UnsupportedChainError(
                native_chain_id, f"Unsupported native chain ID: {native_chain_id!r}"
            )
        return self.encode_universal_address(slip44, native_address)

    def create_universal_address_hex(
        self, native_chain_id: NativeChainId, native_address: str
    ) -> str:
        return bytes_to_hex(self.create_universal_address(native_chain_id, native_address))

    def is_valid_universal_address(self, value: Union[BytesLike, str]) -> bool:
        """Check whether bytes or hex decode to a Universal Address, never raises"""
        try:
            data = hex_to_bytes(value) if isinstance(value, str) else value
            self.decode_universal_address(data)
            return True
        except Exception as e:
            logger.debug(f"Invalid Universal Address {value!r}: {e}")
            return False


def _default_codec() -> UniversalAddressCodec:
    return UniversalAddressCodec(get_default_registry())


def encode_universal_address(slip44: int, native_address: str) -> bytes:
    return _default_codec().encode_universal_address(slip44, native_address)


def decode_universal_address(data: BytesLike) -> UniversalAddress:
    return _default_codec().decode_universal_address(data)


def create_universal_address(native_chain_id: NativeChainId, native_address: str) -> bytes:
    return _default_codec().create_universal_address(native_chain_id, native_address)


def create_universal_address_hex(native_chain_id: NativeChainId, native_address: str) -> str:
    return _default_codec().create_universal_address_hex(native_chain_id, native_address)


def is_valid_universal_address(value: Union[BytesLike, str]) -> bool:
    return _default_codec().is_valid_universal_address(value)


__all__ = [
    "UniversalAddressCodec",
    "bytes_to_hex",
    "hex_to_bytes",
    "encode_universal_address",
    "decode_universal_address",
    "create_universal_address",
    "create_universal_address_hex",
    "is_valid_universal_address",
]
