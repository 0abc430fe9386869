"""Friend code: an obfuscated spelling of the account number.

The account number's eight nibbles are interleaved with eight bits taken from
an MD5 of the tagged account number, byte-swapped, and written out in a
Base32 variant. The leading ``AAAA-`` every code shares is not emitted.

This is obfuscation, not authentication: decoding drops the hash bits without
checking them, so any well-formed code decodes to some account number.

Usage:
    to_friend_code(1).unwrap()              # "AJJJS-ABAA"
    from_friend_code("AEVDG-WQTQ").unwrap()   # 1266042636
"""

from __future__ import annotations

import hashlib
from functools import cache

from steamid.codec.alphabet import decode_base32, encode_base32, reverse_bytes
from steamid.core import patterns
from steamid.core.alphabets import FRIEND_ALPHABET, FRIEND_DELIMITER
from steamid.core.validation import is_valid_account_number
from steamid.errors import HashUnavailableError, InvalidFormatError, OutOfRangeError
from steamid.result import Err, Ok, Result

MIN_CODE = "AJJJS-ABAA"
MAX_CODE = "S5999-9988"

CODE_LENGTH = 13
"""Symbols in the full rendering, prefix included."""
CODE_POINTS = (4, 9)
"""Symbol counts after which a delimiter goes, before any delimiter is inserted."""
CODE_PREFIX = "AAAA" + FRIEND_DELIMITER

HASH_TAG = 0x4353474F00000000  # b"CSGO" in the high half
NIBBLES = 8


@cache
def _md5_available() -> bool:
    try:
        hashlib.md5(b"", usedforsecurity=False)
    except (AttributeError, ValueError):
        # FIPS builds refuse md5; builds without OpenSSL or _md5 lack it entirely
        return False
    return True


def _hash(account_number: int) -> int:
    seed = (account_number | HASH_TAG).to_bytes(8, "little")
    digest = hashlib.md5(seed, usedforsecurity=False).digest()
    return int.from_bytes(digest[:8], "little")


def _interleave(account_number: int, hash_bits: int) -> int:
    res = 0
    for i in range(NIBBLES):
        a = ((res << 4) & 0xFFFFFFFF) | (account_number & 0xF)
        res = (res >> 28) << 32 | (a & 0xFFFF)
        res = (res >> 31) << 32 | (a << 1) | ((hash_bits >> i) & 1)
        account_number >>= 4
    return res


def _deinterleave(value: int) -> int:
    account_number = 0
    for _ in range(NIBBLES):
        value >>= 1
        account_number = (account_number << 4) | (value & 0xF)
        value >>= 4
    return account_number


def _render(value: int) -> str:
    code = encode_base32(reverse_bytes(value), FRIEND_ALPHABET, CODE_LENGTH)
    for i, point in enumerate(CODE_POINTS):
        at = point + i
        code = code[:at] + FRIEND_DELIMITER + code[at:]
    return code


def to_friend_code(account_number: int) -> Result[str]:
    """Encode an account number as a friend code.

    Args:
        account_number: Account number within [1, 2^31-1].

    Returns:
        Ok with a code shaped ``XXXXX-XXXX``; Err(OutOfRangeError) for an invalid
        account number, Err(HashUnavailableError) when MD5 cannot be used.
    """
    if not is_valid_account_number(account_number):
        return Err(OutOfRangeError(f"Invalid account number: {account_number!r}"))
    if not _md5_available():
        return Err(HashUnavailableError("MD5 is not available in this interpreter"))

    res = _interleave(account_number, _hash(account_number))
    return Ok(_render(res)[len(CODE_PREFIX) :])


def from_friend_code(code: str) -> Result[int]:
    """Decode a friend code back to its account number.

    Surrounding whitespace is ignored. The hash bits are not verified.

    Returns:
        Ok with the account number; Err(InvalidFormatError) when the code does not
        match ``XXXXX-XXXX``, Err(OutOfRangeError) when it decodes outside the
        account-number range.
    """
    if not isinstance(code, str):
        return Err(InvalidFormatError(f"Friend code must be a string, got {type(code).__name__}"))

    code = code.strip()
    if patterns.FRIEND_CODE.fullmatch(code) is None:
        return Err(InvalidFormatError(f"Not a friend code: {code!r}"))

    symbols = (CODE_PREFIX + code).replace(FRIEND_DELIMITER, "")
    result = decode_base32(symbols, FRIEND_ALPHABET)
    if not isinstance(result, Ok):
        return result

    account_number = _deinterleave(reverse_bytes(result.value))
    if not is_valid_account_number(account_number):
        return Err(OutOfRangeError(f"Friend code {code!r} decodes to invalid account {account_number}"))
    return Ok(account_number)
