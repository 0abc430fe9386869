"""Range and shape predicates gating every conversion.

Pure functions: no side effects, no exceptions for bad input.
"""

from __future__ import annotations

from steamid.core.identity.models import (
    MAX_ACCOUNT_NUMBER,
    MIN_ACCOUNT_NUMBER,
    Instance,
)
from steamid.core import patterns

MIN_ID64 = 0x0110000100000001
MAX_ID64 = 0x01100001FFFFFFFF
BASE_ID64 = 0x0110000100000000

MIN_ID2 = 0x00000000
MAX_ID2 = 0x3FFFFFFF

MAX_UINT32 = 0xFFFFFFFF
MAX_UINT64 = 0xFFFFFFFFFFFFFFFF


_INSTANCE_IDS = frozenset(Instance)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_account_number(value: object) -> bool:
    return _is_int(value) and MIN_ACCOUNT_NUMBER <= value <= MAX_ACCOUNT_NUMBER  # type: ignore[operator]


def is_valid_id64(value: object) -> bool:
    return _is_int(value) and MIN_ID64 <= value <= MAX_ID64  # type: ignore[operator]


def is_valid_id2_number(value: object) -> bool:
    """Check the trailing number of an ID2 (the account number without its auth bit)."""
    return _is_int(value) and MIN_ID2 <= value <= MAX_ID2  # type: ignore[operator]


def is_valid_instance_id(value: object) -> bool:
    return _is_int(value) and value in _INSTANCE_IDS


def is_valid_id64_string(value: object) -> bool:
    if not isinstance(value, str):
        return False
    value = value.strip()
    return patterns.DIGITS.fullmatch(value) is not None and is_valid_id64(int(value))


def is_valid_id2_string(value: object) -> bool:
    if not isinstance(value, str):
        return False
    m = patterns.ID2.fullmatch(value.strip())
    return m is not None and is_valid_id2_number(int(m["id"]))


def is_valid_id3_string(value: object) -> bool:
    """Check ID3 grammar and that the embedded account number is in range."""
    if not isinstance(value, str):
        return False
    m = patterns.ID3.fullmatch(value.strip())
    return m is not None and is_valid_account_number(int(m["id"]))


def is_valid_vanity_name(value: object) -> bool:
    return isinstance(value, str) and patterns.VANITY_NAME.fullmatch(value) is not None
