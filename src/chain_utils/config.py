"""
Universal Address Configuration
Centralized wire-format constants and SLIP-44 range settings
"""

from chain_utils.exceptions import ConfigurationError


class UniversalAddressConfig:
    """Wire-format sizes, address constants and the custom SLIP-44 range"""

    # Universal Address layout: SLIP-44 (4 bytes, big-endian) + address slot (32 bytes)
    SLIP44_SIZE = 4
    ADDRESS_SIZE = 32
    UNIVERSAL_ADDRESS_SIZE = SLIP44_SIZE + ADDRESS_SIZE
    UNIVERSAL_ADDRESS_HEX_LENGTH = UNIVERSAL_ADDRESS_SIZE * 2
    SLIP44_MAX = 0xFFFFFFFF

    # EVM
    EVM_ADDRESS_SIZE = 20

    # TRON: prefix (1) + address (20) + checksum (4)
    TRON_ADDRESS_SIZE = 20
    TRON_CHECKSUM_SIZE = 4
    TRON_RAW_SIZE = 1 + TRON_ADDRESS_SIZE + TRON_CHECKSUM_SIZE
    TRON_MAINNET_PREFIX = 0x41

    # Custom SLIP-44 IDs for chains without an official assignment.
    # Official registrations stay far below this range.
    CUSTOM_SLIP44_BASE = 1_000_000
    CUSTOM_SLIP44_MAX = 1_999_999

    @classmethod
    def custom_slip44(cls, native_chain_id: int) -> int:
        """Derive the custom SLIP-44 ID for a chain lacking an official one

        Args:
            native_chain_id: Numeric native chain ID (e.g. 42161 for Arbitrum One)

        Returns:
            1_000_000 + native_chain_id

        Raises:
            ConfigurationError: If the ID is not a non-negative integer or the
                result falls outside the custom range
        """
        if isinstance(native_chain_id, bool) or not isinstance(native_chain_id, int):
            raise ConfigurationError(
                f"Custom SLIP-44 requires an integer native chain ID, got {native_chain_id!r}"
            )
        slip44 = cls.CUSTOM_SLIP44_BASE + native_chain_id
        if not cls.is_custom_slip44(slip44):
            raise ConfigurationError(
                f"Native chain ID {native_chain_id} does not fit the custom SLIP-44 range "
                f"{cls.CUSTOM_SLIP44_BASE}-{cls.CUSTOM_SLIP44_MAX}"
            )
        return slip44

    @classmethod
    def is_custom_slip44(cls, slip44: int) -> bool:
        """Check whether a SLIP-44 ID lies in the custom range"""
        return cls.CUSTOM_SLIP44_BASE <= slip44 <= cls.CUSTOM_SLIP44_MAX
