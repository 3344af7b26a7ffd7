"""
Type definitions for chain IDs and Universal Addresses
"""

from enum import Enum
from typing import Callable, Optional, Union

from pydantic import BaseModel, Field

from chain_utils.config import UniversalAddressConfig

# Native chain ID: numeric for EVM-style chains, a string token for named
# network clusters (e.g. Solana "mainnet-beta")
NativeChainId = Union[int, str]

# Checksum capability: payload bytes -> fixed-length integrity tag
ChecksumFunction = Callable[[bytes], bytes]


class ChainType(str, Enum):
    """Address format family"""

    EVM = "evm"
    TRON = "tron"
    SOLANA = "solana"
    COSMOS = "cosmos"


class ChainInfo(BaseModel):
    """Chain registry record"""

    native_chain_id: NativeChainId = Field(alias="nativeChainId")
    slip44: int = Field(ge=0, le=UniversalAddressConfig.SLIP44_MAX)
    name: str
    chain_type: ChainType = Field(alias="chainType")
    symbol: str
    is_testnet: bool = Field(False, alias="isTestnet")

    class Config:
        populate_by_name = True


class UniversalAddress(BaseModel):
    """Decoded view of a 36-byte Universal Address"""

    slip44: int
    native_address: str = Field(alias="nativeAddress")
    native_chain_id: Optional[NativeChainId] = Field(None, alias="nativeChainId")
    address: bytes = Field(
        min_length=UniversalAddressConfig.ADDRESS_SIZE,
        max_length=UniversalAddressConfig.ADDRESS_SIZE,
    )

    class Config:
        populate_by_name = True
