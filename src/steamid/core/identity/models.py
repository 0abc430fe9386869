"""Account identity models.

Usage:
    sid = SteamId(account_number=1)  # Public / Desktop / Individual
    clan = SteamId(7, Universe.PUBLIC, Instance.ALL, AccountType.CLAN)
    sid.is_valid()
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum

MIN_ACCOUNT_NUMBER = 0x00000001
MAX_ACCOUNT_NUMBER = 0x7FFFFFFF
BASE_ACCOUNT_NUMBER = 0x00000000


class Universe(IntEnum):
    """Deployment realm an account belongs to."""

    INVALID = 0
    PUBLIC = 1
    BETA = 2
    INTERNAL = 3
    DEV = 4
    RC = 5


class Instance(IntEnum):
    """Account instance: session kind for users, room flavour for chats.

    The chat flags occupy the three highest bits of the 20-bit instance field.
    """

    ALL = 0
    DESKTOP = 1
    CONSOLE = 2
    WEB = 4
    CLAN = 0x80000
    LOBBY = 0x40000
    MM_LOBBY = 0x20000


class Auth(IntEnum):
    """Low bit of the account number, the middle digit of an ID2."""

    NO = 0
    YES = 1


class VanityType(IntEnum):
    """Kind of profile a vanity name points at."""

    INDIVIDUAL = 1
    GROUP = 2
    GAME_GROUP = 3


class AccountType(IntEnum):
    """Account type with its ID3 display character.

    CONSOLE_USER has no display character and cannot be rendered as ID3.
    """

    INVALID = 0
    INDIVIDUAL = 1
    MULTISEAT = 2
    GAME_SERVER = 3
    ANON_GAME_SERVER = 4
    PENDING = 5
    CONTENT_SERVER = 6
    CLAN = 7
    CHAT = 8
    CONSOLE_USER = 9
    ANON_USER = 10
    UNKNOWN = 11

    @property
    def char(self) -> str | None:
        """ID3 display character, or None for CONSOLE_USER."""
        return _CHAR_BY_TYPE.get(self)

    @classmethod
    def from_char(cls, ch: str) -> AccountType | None:
        """Resolve an ID3 character, folding the chat variants into CHAT."""
        return _TYPE_BY_CHAR.get(ch)


_CHAR_BY_TYPE: dict[AccountType, str] = {
    AccountType.INVALID: "I",
    AccountType.INDIVIDUAL: "U",
    AccountType.MULTISEAT: "M",
    AccountType.GAME_SERVER: "G",
    AccountType.ANON_GAME_SERVER: "A",
    AccountType.PENDING: "P",
    AccountType.CONTENT_SERVER: "C",
    AccountType.CLAN: "g",
    AccountType.CHAT: "T",
    AccountType.ANON_USER: "a",
    AccountType.UNKNOWN: "i",
}

CLAN_CHAT_CHAR = "c"
LOBBY_CHAT_CHAR = "L"

_TYPE_BY_CHAR: dict[str, AccountType] = {ch: t for t, ch in _CHAR_BY_TYPE.items()}
_TYPE_BY_CHAR[CLAN_CHAT_CHAR] = AccountType.CHAT
_TYPE_BY_CHAR[LOBBY_CHAT_CHAR] = AccountType.CHAT

ACCOUNT_TYPE_CHARS = "".join(_TYPE_BY_CHAR)
"""Every character accepted in the type slot of an ID3."""


@dataclass(frozen=True, slots=True)
class SteamId:
    """Composite account identifier.

    Immutable value; every external encoding is derived from these four fields.
    Defaults describe an ordinary user account on the public universe.
    """

    account_number: int
    universe: Universe = Universe.PUBLIC
    instance: Instance = Instance.DESKTOP
    account_type: AccountType = AccountType.INDIVIDUAL

    def is_valid(self) -> bool:
        """Check the composite invariant.

        Returns:
            True if every field is in range and the type/instance combination
            is permitted for the account number. Plain ints, None and other
            values in an enum slot are never valid.
        """
        if not isinstance(self.account_number, int) or isinstance(self.account_number, bool):
            return False
        if not (
            isinstance(self.universe, Universe)
            and isinstance(self.instance, Instance)
            and isinstance(self.account_type, AccountType)
        ):
            return False

        if not BASE_ACCOUNT_NUMBER <= self.account_number <= MAX_ACCOUNT_NUMBER:
            return False

        if self.universe == Universe.INVALID or self.account_type == AccountType.INVALID:
            return False

        if self.account_number < MIN_ACCOUNT_NUMBER:
            if self.account_type in (AccountType.INDIVIDUAL, AccountType.GAME_SERVER):
                return False
            if self.account_type == AccountType.CLAN and self.instance != Instance.ALL:
                return False

        return True

    @property
    def auth(self) -> Auth:
        return Auth(self.account_number & 1)

    def with_account_number(self, account_number: int) -> SteamId:
        if account_number == self.account_number:
            return self
        return replace(self, account_number=account_number)

    def with_universe(self, universe: Universe) -> SteamId:
        if universe == self.universe:
            return self
        return replace(self, universe=universe)

    def with_instance(self, instance: Instance) -> SteamId:
        if instance == self.instance:
            return self
        return replace(self, instance=instance)

    def with_account_type(self, account_type: AccountType) -> SteamId:
        if account_type == self.account_type:
            return self
        return replace(self, account_type=account_type)
