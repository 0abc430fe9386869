"""Tests for the range and shape predicates."""

import pytest

from steamid.core.validation import (
    MAX_ID64,
    MIN_ID64,
    is_valid_account_number,
    is_valid_id2_number,
    is_valid_id2_string,
    is_valid_id3_string,
    is_valid_id64,
    is_valid_id64_string,
    is_valid_instance_id,
    is_valid_vanity_name,
)


@pytest.mark.parametrize(
    ["value", "expected"],
    [
        (0, False),
        (1, True),
        (0x7FFFFFFF, True),
        (0x80000000, False),
        (-1, False),
        (True, False),
        ("1", False),
        (None, False),
    ],
)
def test_is_valid_account_number(value, expected):
    assert is_valid_account_number(value) is expected


def test_id64_bounds():
    assert MIN_ID64 == 76561197960265729
    assert is_valid_id64(MIN_ID64)
    assert is_valid_id64(MAX_ID64)
    assert not is_valid_id64(MIN_ID64 - 1)
    assert not is_valid_id64(MAX_ID64 + 1)
    assert not is_valid_id64(str(MIN_ID64))


def test_id2_number_bounds():
    assert is_valid_id2_number(0)
    assert is_valid_id2_number((1 << 30) - 1)
    assert not is_valid_id2_number(1 << 30)
    assert not is_valid_id2_number(-1)


def test_instance_ids():
    assert is_valid_instance_id(0)
    assert is_valid_instance_id(0x80000)
    assert not is_valid_instance_id(3)


@pytest.mark.parametrize(
    ["value", "expected"],
    [
        ("76561197960265729", True),
        (" 76561197960265729 ", True),
        ("76561197960265728", False),
        ("+76561197960265729", False),
        ("7656119796026572x", False),
        (76561197960265729, False),
    ],
)
def test_is_valid_id64_string(value, expected):
    assert is_valid_id64_string(value) is expected


@pytest.mark.parametrize(
    ["value", "expected"],
    [
        ("STEAM_0:1:0", True),
        ("STEAM_1:0:1073741823", True),
        ("STEAM_0:1:1073741824", False),
        ("STEAM_0:2:0", False),
        ("STEAM_6:1:0", False),
        ("steam_0:1:0", False),
    ],
)
def test_is_valid_id2_string(value, expected):
    assert is_valid_id2_string(value) is expected


@pytest.mark.parametrize(
    ["value", "expected"],
    [
        ("[U:1:1]", True),
        ("U:1:1", True),
        ("[A:1:5:1]", True),
        ("[U:1:0]", False),
        ("[U:1:2147483648]", False),
        ("[X:1:1]", False),
        ("[U:1:1]x", False),
        (None, False),
    ],
)
def test_is_valid_id3_string(value, expected):
    assert is_valid_id3_string(value) is expected


@pytest.mark.parametrize(
    ["value", "expected"],
    [
        ("gabelogannewell", True),
        ("a_b-c", True),
        ("a", False),
        ("x" * 33, False),
        ("has space", False),
    ],
)
def test_is_valid_vanity_name(value, expected):
    assert is_valid_vanity_name(value) is expected


@pytest.mark.parametrize(
    ["predicate", "value"],
    [
        (is_valid_id64_string, "1" * 5000),
        (is_valid_id2_string, "STEAM_0:1:" + "1" * 5000),
        (is_valid_id3_string, "[U:1:" + "1" * 5000 + "]"),
        (is_valid_id3_string, "[A:1:5:" + "1" * 5000 + "]"),
    ],
)
def test_string_validators_reject_thousands_of_digits(predicate, value):
    """CRITICAL: Validators stay total; oversized digit runs are False, not an exception."""
    assert predicate(value) is False
