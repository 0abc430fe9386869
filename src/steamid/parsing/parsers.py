"""Parsers from external representations to SteamId.

Every parser strips surrounding whitespace, requires the whole input to match
its grammar, and validates the numbers it extracts before building a SteamId.
Failures come back as Err values; nothing here raises for bad input.

Usage:
    parse_id2("STEAM_0:1:0").unwrap()        # SteamId(account_number=1, ...)
    parse_id3("[g:1:4]").unwrap()             # clan, instance ALL
    parse_url("https://s.team/p/c").unwrap()  # via invite code
    parse_any("76561197960265729").unwrap_or(None)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from steamid.codec.bits import unpack
from steamid.codec.friend import from_friend_code
from steamid.codec.invite import from_invite_code
from steamid.core import patterns
from steamid.core.identity import (
    CLAN_CHAT_CHAR,
    LOBBY_CHAT_CHAR,
    AccountType,
    Instance,
    SteamId,
    Universe,
)
from steamid.core.types import AccountNumber, Id64
from steamid.core.validation import (
    MAX_UINT64,
    is_valid_account_number,
    is_valid_id2_number,
    is_valid_id64,
    is_valid_instance_id,
)
from steamid.errors import InvalidFormatError, OutOfRangeError
from steamid.result import Err, Ok, Result

logger = logging.getLogger(__name__)

_ALL_INSTANCE_CHARS = frozenset(
    (AccountType.CLAN.char, AccountType.CHAT.char, CLAN_CHAT_CHAR, LOBBY_CHAT_CHAR)
)


def _strip(value: object, what: str) -> Result[str]:
    if not isinstance(value, str):
        return Err(InvalidFormatError(f"{what} must be a string, got {type(value).__name__}"))
    return Ok(value.strip())


def _checked(sid: SteamId) -> Result[SteamId]:
    if not sid.is_valid():
        return Err(OutOfRangeError(f"Invalid identifier: {sid}"))
    return Ok(sid)


def _parse_unsigned(text: str) -> int | None:
    """Unsigned decimal parse that rejects signs, underscores and non-ASCII digits."""
    if patterns.DIGITS.fullmatch(text) is None:
        return None
    value = int(text)
    if value > MAX_UINT64:
        return None
    return value


def from_account_number(account_number: AccountNumber) -> Result[SteamId]:
    """Build the default public individual identifier for an account number."""
    if not is_valid_account_number(account_number):
        return Err(OutOfRangeError(f"Invalid account number: {account_number!r}"))
    return Ok(SteamId(account_number))


def from_id64(id64: Id64) -> Result[SteamId]:
    """Unpack a canonical 64-bit identifier.

    Returns:
        Ok with the identifier; Err(OutOfRangeError) if id64 is outside the id64
        range or its fields do not form a valid identifier.
    """
    if not is_valid_id64(id64):
        return Err(OutOfRangeError(f"Invalid id64: {id64!r}"))

    fields = unpack(id64)
    if not is_valid_account_number(fields.account_number):
        return Err(OutOfRangeError(f"id64 {id64} carries invalid account {fields.account_number}"))
    if not is_valid_instance_id(fields.instance):
        return Err(OutOfRangeError(f"id64 {id64} carries unknown instance {fields.instance}"))

    return _checked(
        SteamId(
            account_number=fields.account_number,
            universe=Universe(fields.universe),
            instance=Instance(fields.instance),
            account_type=AccountType(fields.account_type),
        )
    )


def parse_account_number(text: str) -> Result[SteamId]:
    """Parse a bare decimal account number."""
    stripped = _strip(text, "Account number")
    if not isinstance(stripped, Ok):
        return stripped

    value = _parse_unsigned(stripped.value)
    if value is None:
        return Err(InvalidFormatError(f"Not an unsigned decimal: {stripped.value!r}"))
    return from_account_number(value)


def parse_id64(text: str) -> Result[SteamId]:
    """Parse a decimal 64-bit identifier."""
    stripped = _strip(text, "id64")
    if not isinstance(stripped, Ok):
        return stripped

    value = _parse_unsigned(stripped.value)
    if value is None:
        return Err(InvalidFormatError(f"Not an unsigned 64-bit decimal: {stripped.value!r}"))
    return from_id64(value)


def parse_id2(text: str) -> Result[SteamId]:
    """Parse ``STEAM_U:A:N``.

    The account number is ``N << 1 | A``. The universe digit is not carried over:
    legacy IDs commonly say ``STEAM_0`` for the public universe, so the result is
    always a public individual account.
    """
    stripped = _strip(text, "ID2")
    if not isinstance(stripped, Ok):
        return stripped

    m = patterns.ID2.fullmatch(stripped.value)
    if m is None:
        return Err(InvalidFormatError(f"Not an ID2: {stripped.value!r}"))

    number = int(m["id"])
    if not is_valid_id2_number(number):
        return Err(OutOfRangeError(f"ID2 number out of range: {number}"))
    return from_account_number((number << 1) | int(m["auth"]))


def parse_id3(text: str) -> Result[SteamId]:
    """Parse ``[T:U:N]`` or ``[T:U:N:I]``; the brackets are optional.

    Without an explicit instance, clan and chat characters mean ALL and every
    other type means DESKTOP. The clan-chat and lobby-chat characters both
    resolve to the CHAT account type.
    """
    stripped = _strip(text, "ID3")
    if not isinstance(stripped, Ok):
        return stripped

    m = patterns.ID3.fullmatch(stripped.value)
    if m is None:
        return Err(InvalidFormatError(f"Not an ID3: {stripped.value!r}"))

    account_number = int(m["id"])
    if not is_valid_account_number(account_number):
        return Err(OutOfRangeError(f"ID3 account number out of range: {account_number}"))

    ch = m["account"]
    if m["instance"] is not None:
        instance_id = int(m["instance"])
        if not is_valid_instance_id(instance_id):
            return Err(OutOfRangeError(f"Unknown instance in ID3: {instance_id}"))
        instance = Instance(instance_id)
    elif ch in _ALL_INSTANCE_CHARS:
        instance = Instance.ALL
    else:
        instance = Instance.DESKTOP

    account_type = AccountType.from_char(ch)
    if account_type is None:
        return Err(InvalidFormatError(f"Unknown account type character: {ch!r}"))

    return _checked(
        SteamId(
            account_number=account_number,
            universe=Universe(int(m["universe"])),
            instance=instance,
            account_type=account_type,
        )
    )


def parse_invite_code(text: str) -> Result[SteamId]:
    return from_invite_code(text).then(from_account_number)


def parse_friend_code(text: str) -> Result[SteamId]:
    return from_friend_code(text).then(from_account_number)


def parse_profile_url(url: str) -> Result[SteamId]:
    """Parse ``.../profiles/<id64-or-id3>``.

    The captured id is read as a decimal id64 first; only when it is not a number
    at all is it parsed as an ID3. A number outside the id64 range fails.
    """
    stripped = _strip(url, "Profile URL")
    if not isinstance(stripped, Ok):
        return stripped

    m = patterns.PROFILE_URL.fullmatch(stripped.value)
    if m is None:
        return Err(InvalidFormatError(f"Not a profile URL: {stripped.value!r}"))

    value = _parse_unsigned(m["id"])
    if value is not None:
        return from_id64(value)
    return parse_id3(m["id"])


def parse_user_url(url: str) -> Result[SteamId]:
    """Parse ``.../user/<invite-code>`` or ``s.team/p/<invite-code>``."""
    stripped = _strip(url, "User URL")
    if not isinstance(stripped, Ok):
        return stripped

    m = patterns.USER_URL.fullmatch(stripped.value)
    if m is None:
        return Err(InvalidFormatError(f"Not a user URL: {stripped.value!r}"))
    return parse_invite_code(m["id"])


def parse_url(url: str) -> Result[SteamId]:
    """Parse a profile URL, falling back to a user URL."""
    result = parse_profile_url(url)
    if result.is_ok():
        return result
    return parse_user_url(url)


_STRING_PARSERS: tuple[Callable[[str], Result[SteamId]], ...] = (
    parse_account_number,
    parse_id64,
    parse_id2,
    parse_id3,
    parse_invite_code,
    parse_friend_code,
    parse_url,
)


def parse_any(value: object) -> Result[SteamId]:
    """Interpret an int, string or SteamId as an identifier.

    Ints inside the account-number range are account numbers, other ints are
    id64s. Strings are tried as account number, id64, ID2, ID3, invite code,
    friend code and URL, in that order; the first success wins.

    Returns:
        Ok with the first successful interpretation, or Err(InvalidFormatError)
        if none applies.
    """
    if isinstance(value, SteamId):
        return _checked(value)

    if isinstance(value, int) and not isinstance(value, bool):
        if is_valid_account_number(value):
            return from_account_number(value)
        return from_id64(value)

    if isinstance(value, str):
        for parser in _STRING_PARSERS:
            result = parser(value)
            if result.is_ok():
                logger.debug("Parsed %r with %s", value, parser.__name__)
                return result
            logger.debug("%s rejected %r: %s", parser.__name__, value, result.error)

    return Err(InvalidFormatError(f"Unrecognized identifier: {value!r}"))
