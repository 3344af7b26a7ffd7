"""
Chain registry - SLIP-44 <-> native chain ID mapping with per-chain metadata

SLIP-44 standard: https://github.com/satoshilabs/slips/blob/master/slip-0044.md
"""

import logging
import threading
from typing import Iterable, Optional

from chain_utils.types import ChainInfo, ChainType, NativeChainId

logger = logging.getLogger(__name__)


DEFAULT_CHAINS: tuple[ChainInfo, ...] = (
    ChainInfo(
        native_chain_id=1, slip44=60, name="Ethereum Mainnet", chain_type=ChainType.EVM, symbol="ETH"
    ),
    ChainInfo(
        native_chain_id=195, slip44=195, name="Tron Mainnet", chain_type=ChainType.TRON, symbol="TRX"
    ),
    ChainInfo(
        native_chain_id=56, slip44=714, name="BNB Smart Chain", chain_type=ChainType.EVM, symbol="BNB"
    ),
    ChainInfo(
        native_chain_id=137,
        slip44=966,
        name="Polygon Mainnet",
        chain_type=ChainType.EVM,
        symbol="MATIC",
    ),
    # Registered, but no SOLANA converter yet
    ChainInfo(
        native_chain_id="mainnet-beta",
        slip44=501,
        name="Solana Mainnet",
        chain_type=ChainType.SOLANA,
        symbol="SOL",
    ),
    ChainInfo(
        native_chain_id=43114,
        slip44=9000,
        name="Avalanche C-Chain",
        chain_type=ChainType.EVM,
        symbol="AVAX",
    ),
    # Custom SLIP-44 IDs: 1_000_000 + native chain ID
    ChainInfo(
        native_chain_id=42161, slip44=1042161, name="Arbitrum One", chain_type=ChainType.EVM, symbol="ETH"
    ),
    ChainInfo(
        native_chain_id=10, slip44=1000010, name="Optimism", chain_type=ChainType.EVM, symbol="ETH"
    ),
    ChainInfo(
        native_chain_id=8453, slip44=1008453, name="Base", chain_type=ChainType.EVM, symbol="ETH"
    ),
    ChainInfo(
        native_chain_id=324, slip44=1000324, name="zkSync Era", chain_type=ChainType.EVM, symbol="ETH"
    ),
)


def chain_id_key(native_chain_id: NativeChainId) -> str:
    """Canonical lookup key for a native chain ID (1 and "1" are the same key)"""
    return str(native_chain_id)


class ChainRegistry:
    """SLIP-44 <-> native chain ID registry

    Holds a forward map (SLIP-44 -> ChainInfo) and a reverse map
    (native chain ID key -> SLIP-44). Registration is last-write-wins on
    both maps; all access is serialized by a lock.
    """

    def __init__(self, chains: Optional[Iterable[ChainInfo]] = None):
        """
        Args:
            chains: Initial records; defaults to DEFAULT_CHAINS. Pass an
                empty iterable for an empty registry.
        """
        self._lock = threading.RLock()
        self._by_slip44: dict[int, ChainInfo] = {}
        self._native_to_slip44: dict[str, int] = {}
        for info in DEFAULT_CHAINS if chains is None else chains:
            self.register_chain(info)

    def register_chain(self, info: ChainInfo) -> None:
        """Register a chain, overwriting any record with the same SLIP-44

        No uniqueness validation: a SLIP-44 shared by two native chain IDs
        keeps the latest record in the forward map, while both native IDs
        keep resolving to it in the reverse map.
        """
        key = chain_id_key(info.native_chain_id)
        with self._lock:
            previous = self._by_slip44.get(info.slip44)
            if previous is not None and chain_id_key(previous.native_chain_id) != key:
                logger.warning(
                    f"SLIP-44 {info.slip44} re-registered: native chain ID "
                    f"{previous.native_chain_id!r} replaced by {info.native_chain_id!r}"
                )
            previous_slip44 = self._native_to_slip44.get(key)
            if previous_slip44 is not None and previous_slip44 != info.slip44:
                logger.warning(
                    f"Native chain ID {info.native_chain_id!r} re-pointed: "
                    f"SLIP-44 {previous_slip44} replaced by {info.slip44}"
                )
            self._by_slip44[info.slip44] = info
            self._native_to_slip44[key] = info.slip44
        logger.debug(
            f"Registered chain {info.name} (native={info.native_chain_id!r}, slip44={info.slip44})"
        )

    def native_to_slip44(self, native_chain_id: NativeChainId) -> Optional[int]:
        """Convert a native chain ID to its SLIP-44 ID

        Example:
            native_to_slip44(1)    # => 60 (Ethereum)
            native_to_slip44(56)   # => 714 (BSC)
            native_to_slip44(137)  # => 966 (Polygon)
        """
        with self._lock:
            return self._native_to_slip44.get(chain_id_key(native_chain_id))

    def slip44_to_native(self, slip44: int) -> Optional[NativeChainId]:
        """Convert a SLIP-44 ID to its native chain ID"""
        info = self.get_chain_info_by_slip44(slip44)
        return info.native_chain_id if info is not None else None

    def get_chain_info_by_slip44(self, slip44: int) -> Optional[ChainInfo]:
        with self._lock:
            return self._by_slip44.get(slip44)

    def get_chain_info_by_native(self, native_chain_id: NativeChainId) -> Optional[ChainInfo]:
        with self._lock:
            slip44 = self.native_to_slip44(native_chain_id)
            return self.get_chain_info_by_slip44(slip44) if slip44 is not None else None

    def get_chain_type(self, slip44: int) -> Optional[ChainType]:
        info = self.get_chain_info_by_slip44(slip44)
        return info.chain_type if info is not None else None

    def is_supported_chain(self, native_chain_id: NativeChainId) -> bool:
        with self._lock:
            return chain_id_key(native_chain_id) in self._native_to_slip44

    def is_supported_slip44(self, slip44: int) -> bool:
        with self._lock:
            return slip44 in self._by_slip44

    def get_all_supported_chains(self) -> list[ChainInfo]:
        """All registered chains, in registration order"""
        with self._lock:
            return list(self._by_slip44.values())

    def get_all_supported_slip44s(self) -> list[int]:
        with self._lock:
            return list(self._by_slip44.keys())


_default_registry: Optional[ChainRegistry] = None
_default_lock = threading.Lock()


def get_default_registry() -> ChainRegistry:
    """Process-wide registry seeded with DEFAULT_CHAINS, created on first use"""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = ChainRegistry()
        return _default_registry
