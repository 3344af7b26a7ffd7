"""
Address converter module
"""

from chain_utils.address.converter import (
    AddressConverter,
    EvmAddressConverter,
    TronAddressConverter,
    evm_converter,
    get_converter,
    get_converters,
    register_converter,
    tron_converter,
)

__all__ = [
    "AddressConverter",
    "EvmAddressConverter",
    "TronAddressConverter",
    "evm_converter",
    "tron_converter",
    "get_converter",
    "get_converters",
    "register_converter",
]
