"""
Pytest configuration and fixtures
"""

import pytest

from chain_utils.chains import ChainRegistry
from chain_utils.universal import UniversalAddressCodec


@pytest.fixture
def registry():
    """Fresh registry seeded with the default chains"""
    return ChainRegistry()


@pytest.fixture
def codec(registry):
    """Codec bound to the isolated registry"""
    return UniversalAddressCodec(registry)


@pytest.fixture
def evm_address():
    """Mixed-case EVM address"""
    return "0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb0"


@pytest.fixture
def tron_address():
    """USDT contract on TRON mainnet"""
    return "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t"


@pytest.fixture
def tron_address_hex():
    """20-byte payload of the USDT contract address"""
    return "a614f803b6fd780986a42c78ec9c7f77e6ded13c"
