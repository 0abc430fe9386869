"""Tests for the friend code obfuscator.

Critical Invariants:
- Encoding is bit-exact with the reference vectors
- Decoding inverts encoding for every valid account number
- Decoding never needs (or verifies) the hash
- Missing MD5 fails closed
"""

import hashlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from steamid.codec import friend
from steamid.codec.friend import MAX_CODE, MIN_CODE, from_friend_code, to_friend_code
from steamid.errors import HashUnavailableError, InvalidFormatError, OutOfRangeError


@pytest.mark.parametrize(
    ["account_number", "code"],
    [
        (1, "AJJJS-ABAA"),
        (1266042636, "AEVDG-WQTQ"),
        (0x7FFFFFFF, "S5999-9988"),
    ],
)
def test_known_codes(account_number, code):
    assert to_friend_code(account_number).unwrap() == code
    assert from_friend_code(code).unwrap() == account_number


def test_bounds_constants():
    assert to_friend_code(1).unwrap() == MIN_CODE
    assert to_friend_code(0x7FFFFFFF).unwrap() == MAX_CODE


@pytest.mark.parametrize("account_number", [0, -1, 0x80000000, 0xFFFFFFFF, None])
def test_encode_rejects_invalid_account_number(account_number):
    result = to_friend_code(account_number)
    assert isinstance(result.error, OutOfRangeError)


def test_code_shape():
    code = to_friend_code(123456789).unwrap()
    assert len(code) == 10
    assert code[5] == "-"


def test_decode_ignores_surrounding_whitespace():
    assert from_friend_code(" AEVDG-WQTQ\t").unwrap() == 1266042636


@pytest.mark.parametrize(
    "code",
    ["", "AJJJSABAA", "AJJJS-ABA", "AJJJS-ABAAA", "AJJJ-SABAA", "ajjjs-abaa", "AJJJS-ABA0", "AAAA-AJJJS-ABAA", None],
)
def test_decode_rejects_malformed(code):
    result = from_friend_code(code)
    assert isinstance(result.error, InvalidFormatError)


def test_decode_rejects_zero_account():
    result = from_friend_code("AAAAA-AAAA")
    assert isinstance(result.error, OutOfRangeError)


def test_decode_does_not_use_the_hash(monkeypatch):
    """The hash bits are discarded on decode, never recomputed or verified."""

    def boom(account_number):
        raise AssertionError("decode must not hash")

    monkeypatch.setattr(friend, "_hash", boom)
    assert from_friend_code("AEVDG-WQTQ").unwrap() == 1266042636


def test_encode_fails_closed_without_md5(monkeypatch):
    monkeypatch.setattr(friend, "_md5_available", lambda: False)
    result = to_friend_code(1)
    assert isinstance(result.error, HashUnavailableError)


@pytest.fixture
def fresh_md5_probe():
    friend._md5_available.cache_clear()
    yield
    friend._md5_available.cache_clear()


def test_encode_fails_closed_when_hashlib_has_no_md5(monkeypatch, fresh_md5_probe):
    """Interpreters built without OpenSSL or _md5 never define hashlib.md5."""
    monkeypatch.delattr(hashlib, "md5")
    result = to_friend_code(1)
    assert isinstance(result.error, HashUnavailableError)


def test_encode_fails_closed_when_md5_is_refused(monkeypatch, fresh_md5_probe):
    def refuse(*args, **kwargs):
        raise ValueError("unsupported hash type md5")

    monkeypatch.setattr(hashlib, "md5", refuse)
    result = to_friend_code(1)
    assert isinstance(result.error, HashUnavailableError)


def test_interleave_places_hash_bit_below_each_nibble():
    # all-zero hash: every 5-bit group is just nibble << 1
    assert friend._interleave(0x1, 0) == 0x1 << 36
    assert friend._interleave(0x21, 0) == (0x1 << 36) | (0x2 << 31)
    assert friend._interleave(0x1, 0b1) == (0x1 << 36) | (1 << 35)


@given(st.integers(min_value=1, max_value=0x7FFFFFFF))
def test_roundtrip(account_number):
    assert from_friend_code(to_friend_code(account_number).unwrap()).unwrap() == account_number
