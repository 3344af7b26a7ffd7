"""
chain_utils custom exception hierarchy
"""

from typing import Any


class ChainUtilsError(Exception):
    """chain_utils base exception"""

    pass


class ValidationError(ChainUtilsError):
    """Input validation error"""

    pass


class InvalidFormatError(ValidationError):
    """Native address (or hex string) does not match the expected syntax"""

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid format for {value!r}: {reason}")


class InvalidBase58CharacterError(InvalidFormatError):
    """Character outside the Base58 alphabet"""

    def __init__(self, value: str, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(value, f"invalid Base58 character {character!r} at position {position}")


class InvalidLengthError(ValidationError):
    """Fixed-width input has the wrong size"""

    def __init__(self, what: str, expected: int, actual: int):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid {what} length: expected {expected}, got {actual}")


class ConfigurationError(ChainUtilsError):
    """Configuration-related error"""

    pass


class UnsupportedChainError(ConfigurationError):
    """No registry entry for the given chain identifier"""

    def __init__(self, chain_id: Any, message: str | None = None):
        self.chain_id = chain_id
        super().__init__(message or f"Unsupported chain: {chain_id!r}")


class UnknownChainError(UnsupportedChainError):
    """SLIP-44 ID read from a Universal Address has no registry entry"""

    def __init__(self, chain_id: Any):
        super().__init__(chain_id, f"Unknown SLIP-44 ID: {chain_id}")


class UnsupportedChainTypeError(ConfigurationError):
    """Chain type has no address converter"""

    def __init__(self, chain_type: Any):
        self.chain_type = chain_type
        super().__init__(f"Address conversion not implemented for chain type: {chain_type}")
