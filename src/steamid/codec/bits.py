"""Bit-field packing of the canonical 64-bit identifier.

Layout (least significant first):
    bits  0..31  account number
    bits 32..51  instance
    bits 52..55  account type
    bits 56..63  universe

Both directions are total over the 64-bit domain. Range checks belong to
``steamid.core.validation``.
"""

from __future__ import annotations

from typing import NamedTuple

from steamid.core.types import AccountNumber, Id64

ACCOUNT_NUMBER_OFFSET = 0
INSTANCE_OFFSET = 32
ACCOUNT_TYPE_OFFSET = 52
UNIVERSE_OFFSET = 56

ACCOUNT_NUMBER_MASK = 0xFFFFFFFF
INSTANCE_MASK = 0x000FFFFF
ACCOUNT_TYPE_MASK = 0x0000000F
UNIVERSE_MASK = 0x000000FF

UINT64_MASK = 0xFFFFFFFFFFFFFFFF


class Fields(NamedTuple):
    """Raw integer sub-fields of a packed identifier."""

    account_number: int
    universe: int
    instance: int
    account_type: int


def _get(vec: int, offset: int, mask: int) -> int:
    return (vec >> offset) & mask


def pack(
    account_number: AccountNumber, universe: int, instance: int, account_type: int
) -> Id64:
    """Pack the four sub-fields into one unsigned 64-bit integer.

    Each field is masked to its width first, so oversized inputs cannot bleed
    into a neighbouring field.
    """
    return (
        (account_number & ACCOUNT_NUMBER_MASK) << ACCOUNT_NUMBER_OFFSET
        | (instance & INSTANCE_MASK) << INSTANCE_OFFSET
        | (account_type & ACCOUNT_TYPE_MASK) << ACCOUNT_TYPE_OFFSET
        | (universe & UNIVERSE_MASK) << UNIVERSE_OFFSET
    )


def unpack(id64: Id64) -> Fields:
    """Split a 64-bit identifier into its raw sub-fields."""
    id64 &= UINT64_MASK
    return Fields(
        account_number=_get(id64, ACCOUNT_NUMBER_OFFSET, ACCOUNT_NUMBER_MASK),
        universe=_get(id64, UNIVERSE_OFFSET, UNIVERSE_MASK),
        instance=_get(id64, INSTANCE_OFFSET, INSTANCE_MASK),
        account_type=_get(id64, ACCOUNT_TYPE_OFFSET, ACCOUNT_TYPE_MASK),
    )


def static_key(account_number: int, universe: int, account_type: int) -> int:
    """Packed identifier with the instance bits cleared."""
    return pack(account_number, universe, 0, account_type)
