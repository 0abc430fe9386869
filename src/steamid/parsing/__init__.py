"""Parsing of external identifier strings into SteamId values."""

from steamid.parsing.parsers import (
    from_account_number,
    from_id64,
    parse_account_number,
    parse_any,
    parse_friend_code,
    parse_id2,
    parse_id3,
    parse_id64,
    parse_invite_code,
    parse_profile_url,
    parse_url,
    parse_user_url,
)

__all__ = [
    "from_account_number",
    "from_id64",
    "parse_account_number",
    "parse_id64",
    "parse_id2",
    "parse_id3",
    "parse_invite_code",
    "parse_friend_code",
    "parse_profile_url",
    "parse_user_url",
    "parse_url",
    "parse_any",
]
