"""Rendering SteamId values into their external representations.

Every function checks the identifier first and returns Err(OutOfRangeError)
for an invalid one; nothing is rendered from out-of-range fields.

Usage:
    sid = SteamId(1)
    to_id64(sid).unwrap()         # 76561197960265729
    to_id2(sid).unwrap()          # "STEAM_1:1:0"
    to_id3(sid).unwrap()          # "[U:1:1]"
    to_profile_url(sid).unwrap()  # "https://steamcommunity.com/profiles/76561197960265729/"
"""

from __future__ import annotations

from steamid.codec import bits
from steamid.codec.friend import to_friend_code as _account_to_friend_code
from steamid.codec.invite import to_invite_code as _account_to_invite_code
from steamid.config import UrlSettings, get_settings
from steamid.core.identity import (
    CLAN_CHAT_CHAR,
    LOBBY_CHAT_CHAR,
    AccountType,
    Instance,
    SteamId,
    VanityType,
)
from steamid.core.validation import is_valid_vanity_name
from steamid.errors import InvalidFormatError, OutOfRangeError
from steamid.result import Err, Ok, Result

ID2_FMT = "STEAM_{universe:d}:{auth:d}:{number:d}"
ID3_FMT = "[{char}:{universe:d}:{account_number:d}{suffix}]"
URL_FMT = "{scheme}://{domain}/{endpoint}/{value}/"

PROFILES_ENDPOINT = "profiles"
USER_ENDPOINT = "user"
INVITE_ENDPOINT = "p"
VANITY_ENDPOINT = "id"
GROUP_ENDPOINT = "groups"
GAME_GROUP_ENDPOINT = "games"

_CHAT_CHARS = {Instance.CLAN: CLAN_CHAT_CHAR, Instance.LOBBY: LOBBY_CHAT_CHAR}
_INSTANCE_SUFFIX_TYPES = frozenset((AccountType.ANON_GAME_SERVER, AccountType.MULTISEAT))
_VANITY_ENDPOINTS = {
    VanityType.INDIVIDUAL: VANITY_ENDPOINT,
    VanityType.GROUP: GROUP_ENDPOINT,
    VanityType.GAME_GROUP: GAME_GROUP_ENDPOINT,
}


def _invalid(sid: SteamId) -> Err:
    return Err(OutOfRangeError(f"Invalid identifier: {sid}"))


def to_id64(sid: SteamId) -> Result[int]:
    if not sid.is_valid():
        return _invalid(sid)
    return Ok(bits.pack(sid.account_number, sid.universe, sid.instance, sid.account_type))


def to_static_key(sid: SteamId) -> Result[int]:
    """Packed identifier without the instance, shared by every session of an account."""
    if not sid.is_valid():
        return _invalid(sid)
    return Ok(bits.static_key(sid.account_number, sid.universe, sid.account_type))


def to_id2(sid: SteamId) -> Result[str]:
    if not sid.is_valid():
        return _invalid(sid)
    return Ok(
        ID2_FMT.format(
            universe=sid.universe,
            auth=sid.account_number & 1,
            number=sid.account_number >> 1,
        )
    )


def to_id3(sid: SteamId) -> Result[str]:
    """Render ``[T:U:N]``.

    Chats in a clan or lobby instance use the clan-chat and lobby-chat
    characters. Anonymous game servers and multiseat accounts carry their
    instance as a fourth field.

    Returns:
        Ok with the ID3; Err(OutOfRangeError) for an invalid identifier,
        Err(InvalidFormatError) for an account type without a display character.
    """
    if not sid.is_valid():
        return _invalid(sid)

    ch = sid.account_type.char
    if ch is None:
        return Err(InvalidFormatError(f"{sid.account_type.name} has no ID3 character"))
    if sid.account_type == AccountType.CHAT:
        ch = _CHAT_CHARS.get(sid.instance, ch)

    suffix = f":{sid.instance:d}" if sid.account_type in _INSTANCE_SUFFIX_TYPES else ""
    return Ok(
        ID3_FMT.format(
            char=ch,
            universe=sid.universe,
            account_number=sid.account_number,
            suffix=suffix,
        )
    )


def to_invite_code(sid: SteamId) -> Result[str]:
    if not sid.is_valid():
        return _invalid(sid)
    return _account_to_invite_code(sid.account_number)


def to_friend_code(sid: SteamId) -> Result[str]:
    if not sid.is_valid():
        return _invalid(sid)
    return _account_to_friend_code(sid.account_number)


# --- URLs ---


def _url(domain: str, endpoint: str, value: object, settings: UrlSettings) -> str:
    return URL_FMT.format(scheme=settings.scheme, domain=domain, endpoint=endpoint, value=value)


def to_profile_url(sid: SteamId, settings: UrlSettings | None = None) -> Result[str]:
    settings = settings or get_settings()
    return to_id64(sid).map(
        lambda id64: _url(settings.community_domain, PROFILES_ENDPOINT, id64, settings)
    )


def to_id3_profile_url(sid: SteamId, settings: UrlSettings | None = None) -> Result[str]:
    settings = settings or get_settings()
    return to_id3(sid).map(
        lambda id3: _url(settings.community_domain, PROFILES_ENDPOINT, id3, settings)
    )


def to_china_profile_url(sid: SteamId, settings: UrlSettings | None = None) -> Result[str]:
    settings = settings or get_settings()
    return to_id64(sid).map(
        lambda id64: _url(settings.china_domain, PROFILES_ENDPOINT, id64, settings)
    )


def to_user_url(sid: SteamId, settings: UrlSettings | None = None) -> Result[str]:
    settings = settings or get_settings()
    return to_invite_code(sid).map(
        lambda code: _url(settings.community_domain, USER_ENDPOINT, code, settings)
    )


def to_invite_url(sid: SteamId, settings: UrlSettings | None = None) -> Result[str]:
    settings = settings or get_settings()
    return to_invite_code(sid).map(
        lambda code: _url(settings.invite_domain, INVITE_ENDPOINT, code, settings)
    )


def to_vanity_url(
    name: str,
    settings: UrlSettings | None = None,
    *,
    vanity_type: VanityType = VanityType.INDIVIDUAL,
) -> Result[str]:
    """Render a custom URL for a profile, group or game group.

    The name is not resolved, only checked.

    Returns:
        Ok with the URL; Err(InvalidFormatError) for a malformed name,
        Err(OutOfRangeError) for an unknown vanity type.
    """
    if not is_valid_vanity_name(name):
        return Err(InvalidFormatError(f"Not a vanity name: {name!r}"))
    if not isinstance(vanity_type, VanityType):
        return Err(OutOfRangeError(f"Unknown vanity type: {vanity_type!r}"))
    settings = settings or get_settings()
    endpoint = _VANITY_ENDPOINTS[vanity_type]
    return Ok(_url(settings.community_domain, endpoint, name, settings))
