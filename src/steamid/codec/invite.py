"""Invite code: the account number in hex, re-spelled over a 16-letter alphabet.

Usage:
    to_invite_code(1).unwrap()            # "c"
    from_invite_code("gqkj-gkbr").unwrap()  # 1266042636
"""

from __future__ import annotations

from steamid.codec.alphabet import remap
from steamid.core import patterns
from steamid.core.alphabets import HEX_ALPHABET, INVITE_ALPHABET, INVITE_DELIMITER
from steamid.core.validation import MAX_UINT32, is_valid_account_number
from steamid.errors import InvalidFormatError, OutOfRangeError
from steamid.result import Err, Ok, Result

MIN_CODE = "c"
MAX_CODE = "kwww-wwww"


def to_invite_code(account_number: int) -> Result[str]:
    """Encode an account number as an invite code.

    The delimiter splits the code in half once it is longer than three symbols.

    Args:
        account_number: Account number within [1, 2^31-1].

    Returns:
        Ok with the code, or Err(OutOfRangeError) for an invalid account number.
    """
    if not is_valid_account_number(account_number):
        return Err(OutOfRangeError(f"Invalid account number: {account_number!r}"))

    result = remap(format(account_number, "x"), HEX_ALPHABET, INVITE_ALPHABET)
    if not isinstance(result, Ok):
        return result

    code = result.value
    idx = len(code) >> 1
    if idx > 1:
        code = code[:idx] + INVITE_DELIMITER + code[idx:]
    return Ok(code)


def from_invite_code(code: str) -> Result[int]:
    """Decode an invite code back to its account number.

    Surrounding whitespace is ignored. The delimiter may sit anywhere, once.

    Returns:
        Ok with the account number; Err(InvalidFormatError) when the code does not
        match the grammar, Err(OutOfRangeError) when it decodes outside the
        account-number range.
    """
    if not isinstance(code, str):
        return Err(InvalidFormatError(f"Invite code must be a string, got {type(code).__name__}"))

    code = code.strip()
    if patterns.INVITE_CODE.fullmatch(code) is None:
        return Err(InvalidFormatError(f"Not an invite code: {code!r}"))

    result = remap(code.replace(INVITE_DELIMITER, ""), INVITE_ALPHABET, HEX_ALPHABET)
    if not isinstance(result, Ok):
        return result

    account_number = int(result.value, 16)
    if account_number > MAX_UINT32:
        return Err(InvalidFormatError(f"Invite code exceeds 32 bits: {code!r}"))
    if not is_valid_account_number(account_number):
        return Err(OutOfRangeError(f"Invite code {code!r} decodes to invalid account {account_number}"))
    return Ok(account_number)
