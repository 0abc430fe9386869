"""Compiled grammars for every external identifier format.

All patterns are ASCII-only and meant for ``fullmatch`` on stripped input.
Digit runs are bounded to the widest value each slot can hold, so a matched
group always converts with ``int()``.
"""

from __future__ import annotations

import re

from steamid.core.alphabets import (
    FRIEND_ALPHABET,
    FRIEND_DELIMITER,
    INVITE_ALPHABET,
    INVITE_DELIMITER,
)
from steamid.core.identity.models import ACCOUNT_TYPE_CHARS, Universe

_UNIVERSES = f"{min(Universe):d}-{max(Universe):d}"
_COMMUNITY_HOSTS = r"(?:my\.steamchina|(?:www\.)?steamcommunity)\.com"
_SCHEME = r"(?:https?:+//)?/*"

DIGITS = re.compile(r"[0-9]{1,20}", re.ASCII)
"""Unsigned decimal of at most 20 digits, enough for any 64-bit value."""

ID2 = re.compile(
    rf"STEAM_(?P<universe>[{_UNIVERSES}]):(?P<auth>[01]):(?P<id>[0-9]{{1,10}})",
    re.ASCII,
)

ID3 = re.compile(
    rf"\[?(?P<account>[{re.escape(ACCOUNT_TYPE_CHARS)}]):(?P<universe>[{_UNIVERSES}])"
    r":(?P<id>[0-9]{1,10})(?::(?P<instance>[0-9]{1,10}))?\]?",
    re.ASCII,
)

ID64 = re.compile(r"[0-9]{17}", re.ASCII)
"""Canonical shape of a public id64; parsing itself accepts any ``DIGITS`` match."""

VANITY_NAME = re.compile(r"[a-zA-Z0-9_-]{2,32}", re.ASCII)

_INVITE_DIGITS = f"[{INVITE_ALPHABET}]"
INVITE_CODE = re.compile(
    rf"{_INVITE_DIGITS}+(?:{re.escape(INVITE_DELIMITER)}{_INVITE_DIGITS}+)?",
    re.ASCII,
)

_FRIEND_DIGITS = f"[{FRIEND_ALPHABET}]"
FRIEND_CODE = re.compile(
    rf"{_FRIEND_DIGITS}{{5}}{re.escape(FRIEND_DELIMITER)}{_FRIEND_DIGITS}{{4}}",
    re.ASCII,
)

PROFILE_URL = re.compile(
    rf"{_SCHEME}{_COMMUNITY_HOSTS}/+profiles/+(?P<id>.+?)/*",
    re.ASCII,
)

USER_URL = re.compile(
    rf"{_SCHEME}(?:{_COMMUNITY_HOSTS}/+user|s\.team/+p)/+(?P<id>[\w-]+)/*",
    re.ASCII,
)
