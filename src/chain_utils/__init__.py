"""
chain_utils - Multi-chain address utilities

- SLIP-44 <-> native chain ID mapping (ChainRegistry)
- Universal Address encoding: SLIP-44 (4 bytes) + address slot (32 bytes)
- Chain-specific address converters (EVM, TRON)
"""

__version__ = "0.1.0"

from chain_utils.address import (
    AddressConverter,
    EvmAddressConverter,
    TronAddressConverter,
    evm_converter,
    get_converter,
    register_converter,
    tron_converter,
)
from chain_utils.chains import DEFAULT_CHAINS, ChainRegistry, get_default_registry
from chain_utils.config import UniversalAddressConfig
from chain_utils.exceptions import (
    ChainUtilsError,
    ConfigurationError,
    InvalidBase58CharacterError,
    InvalidFormatError,
    InvalidLengthError,
    UnknownChainError,
    UnsupportedChainError,
    UnsupportedChainTypeError,
    ValidationError,
)
from chain_utils.types import ChainInfo, ChainType, NativeChainId, UniversalAddress
from chain_utils.universal import (
    UniversalAddressCodec,
    bytes_to_hex,
    create_universal_address,
    create_universal_address_hex,
    decode_universal_address,
    encode_universal_address,
    hex_to_bytes,
    is_valid_universal_address,
)

__all__ = [
    "__version__",
    # Types
    "ChainType",
    "ChainInfo",
    "NativeChainId",
    "UniversalAddress",
    # Exceptions
    "ChainUtilsError",
    "ValidationError",
    "InvalidFormatError",
    "InvalidBase58CharacterError",
    "InvalidLengthError",
    "ConfigurationError",
    "UnsupportedChainError",
    "UnknownChainError",
    "UnsupportedChainTypeError",
    # Config
    "UniversalAddressConfig",
    # Chain registry
    "ChainRegistry",
    "DEFAULT_CHAINS",
    "get_default_registry",
    # Address converters
    "AddressConverter",
    "EvmAddressConverter",
    "TronAddressConverter",
    "evm_converter",
    "tron_converter",
    "get_converter",
    "register_converter",
    # Universal Address
    "UniversalAddressCodec",
    "encode_universal_address",
    "decode_universal_address",
    "create_universal_address",
    "create_universal_address_hex",
    "bytes_to_hex",
    "hex_to_bytes",
    "is_valid_universal_address",
]
