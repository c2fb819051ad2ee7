"""
Tests for size validation and parsing.
"""

import pytest

from sizemap_gen.io.size_parser import (
    is_valid_input,
    is_valid_size,
    parse_device_sizes,
    parse_sizes,
)
from sizemap_gen.models import DeviceType, SizeState


@pytest.mark.parametrize("token", ["150x50", "0x0", "1x1", "970x250", "007x10"])
def test_valid_size_tokens(token):
    assert is_valid_size(token)


@pytest.mark.parametrize(
    "token",
    ["150X50", "150x", "x50", "-150x50", "150x-50", "150 x 50", "150x50x10", "1.5x2", "150*50", "١٥٠x50"],
)
def test_invalid_size_tokens(token):
    assert not is_valid_size(token)


def test_trailing_newline_is_not_accepted_by_token_check():
    assert not is_valid_size("150x50\n")


@pytest.mark.parametrize(
    "line",
    ["", "null", "NULL", "Null", "150x50", "150x50,300x100", "150x50, 300x100", " 150x50 ,300x100 "],
)
def test_valid_input_lines(line):
    assert is_valid_input(line)


@pytest.mark.parametrize(
    "line",
    ["abc", " ", "150x50,", ",150x50", "150x50,,300x100", "150x50,null", "nul", "150x50;300x100"],
)
def test_invalid_input_lines(line):
    assert not is_valid_input(line)


def test_parse_null_any_case():
    """Test the null sentinel is case-insensitive."""
    assert parse_sizes("null") is None
    assert parse_sizes("NULL") is None


def test_parse_empty():
    assert parse_sizes("") == []


def test_parse_preserves_order_and_duplicates():
    assert parse_sizes("150x50,300x100") == [(150, 50), (300, 100)]
    assert parse_sizes("300x100,150x50,300x100") == [(300, 100), (150, 50), (300, 100)]


def test_parse_trims_tokens():
    assert parse_sizes("150x50, 300x100") == [(150, 50), (300, 100)]


def test_parse_leading_zeros_as_decimal():
    assert parse_sizes("010x08") == [(10, 8)]


def test_parse_device_sizes_states():
    """Test each input kind maps to its device state."""
    null = parse_device_sizes("null", DeviceType.MOBILE)
    assert null.state == SizeState.NULL
    assert null.device_type == DeviceType.MOBILE

    blank = parse_device_sizes("", DeviceType.TABLET)
    assert blank.state == SizeState.ABSENT
    assert blank.sizes == []

    present = parse_device_sizes("728x90", DeviceType.DESKTOP)
    assert present.state == SizeState.PRESENT
    assert present.sizes == [(728, 90)]


def test_parse_is_idempotent():
    assert parse_sizes("150x50,300x100") == parse_sizes("150x50,300x100")
