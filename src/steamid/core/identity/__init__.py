"""Account identity: enumerations and the composite identifier."""

from steamid.core.identity.models import (
    ACCOUNT_TYPE_CHARS,
    BASE_ACCOUNT_NUMBER,
    CLAN_CHAT_CHAR,
    LOBBY_CHAT_CHAR,
    MAX_ACCOUNT_NUMBER,
    MIN_ACCOUNT_NUMBER,
    AccountType,
    Auth,
    Instance,
    SteamId,
    Universe,
    VanityType,
)

__all__ = [
    "SteamId",
    "Universe",
    "Instance",
    "AccountType",
    "Auth",
    "VanityType",
    "ACCOUNT_TYPE_CHARS",
    "CLAN_CHAT_CHAR",
    "LOBBY_CHAT_CHAR",
    "BASE_ACCOUNT_NUMBER",
    "MIN_ACCOUNT_NUMBER",
    "MAX_ACCOUNT_NUMBER",
]
