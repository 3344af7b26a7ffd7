"""
Address converter interface and implementations

A converter maps a chain-native address string to the 32-byte address slot
of a Universal Address and back.
"""

import hmac
import logging
import re
from abc import ABC, abstractmethod

from chain_utils.config import UniversalAddressConfig
from chain_utils.exceptions import (
    InvalidFormatError,
    InvalidLengthError,
    UnsupportedChainTypeError,
)
from chain_utils.types import ChainType, ChecksumFunction
from chain_utils.utils.address import base58_decode, base58_encode, double_sha256_checksum

logger = logging.getLogger(__name__)

_PAD_SIZE = UniversalAddressConfig.ADDRESS_SIZE - UniversalAddressConfig.EVM_ADDRESS_SIZE


class AddressConverter(ABC):
    """Abstract base class for address converters"""

    # Width of the binary form produced by to_bytes
    SIZE = UniversalAddressConfig.ADDRESS_SIZE

    @abstractmethod
    def to_bytes(self, native_address: str) -> bytes:
        """Convert a native address to its fixed-width binary form

        Raises:
            InvalidFormatError: If the address fails the chain's syntax rules
        """
        pass

    @abstractmethod
    def from_bytes(self, data: bytes) -> str:
        """Convert the fixed-width binary form back to a native address

        Raises:
            InvalidLengthError: If data is not SIZE bytes long
        """
        pass

    @abstractmethod
    def is_valid(self, native_address: str) -> bool:
        """Check native address format, never raises"""
        pass

    @abstractmethod
    def get_zero_address(self) -> str:
        """Get zero address"""
        pass

    def to_evm_format(self, native_address: str) -> str:
        """Convert to EVM format (0x + 40 lower-case hex chars)"""
        return "0x" + self.to_bytes(native_address)[-20:].hex()

    def _check_size(self, data: bytes) -> bytes:
        data = bytes(data)
        if len(data) != self.SIZE:
            raise InvalidLengthError(f"{type(self).__name__} input", self.SIZE, len(data))
        return data


class EvmAddressConverter(AddressConverter):
    """EVM address converter

    0x + 40 hex chars (20 bytes), left-padded with 12 zero bytes in the slot.
    Case is not preserved: decoded addresses are always lower-case.
    """

    ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
    ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")

    def to_bytes(self, native_address: str) -> bytes:
        # Lower-case first, so an upper-case 0X prefix is accepted here
        normalized = native_address.lower() if isinstance(native_address, str) else native_address
        if not self.is_valid(normalized):
            raise InvalidFormatError(native_address, "expected 0x followed by 40 hex characters")
        address_bytes = bytes.fromhex(normalized[2:])
        return bytes(_PAD_SIZE) + address_bytes

    def from_bytes(self, data: bytes) -> str:
        data = self._check_size(data)
        # Leading 12 padding bytes are ignored, not verified
        return "0x" + data[_PAD_SIZE:].hex()

    def is_valid(self, native_address: str) -> bool:
        # Syntax only, no EIP-55 checksum validation
        return isinstance(native_address, str) and bool(
            self.ADDRESS_PATTERN.fullmatch(native_address)
        )

    def format(self, native_address: str) -> str:
        """Normalize an EVM address to lower case"""
        if not self.is_valid(native_address):
            raise InvalidFormatError(native_address, "expected 0x followed by 40 hex characters")
        return native_address.lower()

    def to_evm_format(self, native_address: str) -> str:
        """Already in EVM format"""
        return self.format(native_address)

    def get_zero_address(self) -> str:
        return self.ZERO_ADDRESS


class TronAddressConverter(AddressConverter):
    """TRON address converter

    Base58Check string (T..., 34 chars) decoding to prefix (1) + address (20)
    + checksum (4). The 20-byte address is left-padded with 12 zero bytes.
    """

    ZERO_ADDRESS = "T9yD14Nj9j7xAB4dbGeiX9h8unkKHxuWwb"
    ADDRESS_PATTERN = re.compile(r"T[1-9A-HJ-NP-Za-km-z]{33}")

    def __init__(
        self,
        checksum: ChecksumFunction = double_sha256_checksum,
        prefix: int = UniversalAddressConfig.TRON_MAINNET_PREFIX,
    ):
        self._checksum = checksum
        self._prefix = prefix

    def to_bytes(self, native_address: str) -> bytes:
        if not self.is_valid(native_address):
            raise InvalidFormatError(native_address, "not a valid TRON Base58Check address")
        decoded = base58_decode(native_address)
        address_bytes = decoded[1 : 1 + UniversalAddressConfig.TRON_ADDRESS_SIZE]
        return bytes(_PAD_SIZE) + address_bytes

    def from_bytes(self, data: bytes) -> str:
        data = self._check_size(data)
        payload = bytes([self._prefix]) + data[_PAD_SIZE:]
        return base58_encode(payload + self._checksum(payload))

    def is_valid(self, native_address: str) -> bool:
        if not isinstance(native_address, str) or not self.ADDRESS_PATTERN.fullmatch(
            native_address
        ):
            return False
        try:
            decoded = base58_decode(native_address)
        except InvalidFormatError as e:
            logger.debug(f"TRON address {native_address} rejected: {e}")
            return False
        if len(decoded) != UniversalAddressConfig.TRON_RAW_SIZE or decoded[0] != self._prefix:
            return False
        split = UniversalAddressConfig.TRON_RAW_SIZE - UniversalAddressConfig.TRON_CHECKSUM_SIZE
        payload, checksum = decoded[:split], decoded[split:]
        return hmac.compare_digest(checksum, self._checksum(payload))

    def get_zero_address(self) -> str:
        return self.ZERO_ADDRESS


evm_converter = EvmAddressConverter()
tron_converter = TronAddressConverter()

# Chain type -> converter. Adding a chain type means adding one entry here.
_CONVERTERS: dict[ChainType, AddressConverter] = {
    ChainType.EVM: evm_converter,
    ChainType.TRON: tron_converter,
}


def get_converter(chain_type: ChainType) -> AddressConverter:
    """Get the converter for a chain type

    Raises:
        UnsupportedChainTypeError: If no converter is registered (e.g. SOLANA)
    """
    converter = _CONVERTERS.get(chain_type)
    if converter is None:
        raise UnsupportedChainTypeError(chain_type)
    return converter


def register_converter(chain_type: ChainType, converter: AddressConverter) -> None:
    """Register (or replace) the converter for a chain type"""
    logger.info(f"Registering {type(converter).__name__} for chain type {chain_type.value}")
    _CONVERTERS[chain_type] = converter


def get_converters() -> dict[ChainType, AddressConverter]:
    """Snapshot of the converter table"""
    return dict(_CONVERTERS)
