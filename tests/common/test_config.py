"""Tests for wire-format configuration"""

import pytest

from chain_utils.config import UniversalAddressConfig
from chain_utils.exceptions import ConfigurationError


def test_wire_sizes():
    assert UniversalAddressConfig.UNIVERSAL_ADDRESS_SIZE == 36
    assert UniversalAddressConfig.UNIVERSAL_ADDRESS_HEX_LENGTH == 72
    assert UniversalAddressConfig.TRON_RAW_SIZE == 25


@pytest.mark.parametrize(
    "native_chain_id,expected",
    [(42161, 1042161), (10, 1000010), (8453, 1008453), (324, 1000324), (0, 1000000)],
)
def test_custom_slip44(native_chain_id, expected):
    assert UniversalAddressConfig.custom_slip44(native_chain_id) == expected


@pytest.mark.parametrize("native_chain_id", [-1, 1_000_000, "42161", 1.5, True])
def test_custom_slip44_rejects_invalid_ids(native_chain_id):
    with pytest.raises(ConfigurationError):
        UniversalAddressConfig.custom_slip44(native_chain_id)


def test_is_custom_slip44():
    assert UniversalAddressConfig.is_custom_slip44(1_000_000) is True
    assert UniversalAddressConfig.is_custom_slip44(1_999_999) is True
    assert UniversalAddressConfig.is_custom_slip44(999_999) is False
    assert UniversalAddressConfig.is_custom_slip44(2_000_000) is False
    assert UniversalAddressConfig.is_custom_slip44(60) is False
