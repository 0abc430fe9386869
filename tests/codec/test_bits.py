"""Tests for bit-field packing.

Critical Invariants:
- unpack(pack(fields)) == fields for in-range fields
- Fields never bleed into their neighbours
"""

from hypothesis import given
from hypothesis import strategies as st

from steamid import AccountType, Instance, Universe
from steamid.codec.bits import Fields, pack, static_key, unpack


def test_pack_public_individual():
    assert pack(1, Universe.PUBLIC, Instance.DESKTOP, AccountType.INDIVIDUAL) == 76561197960265729
    assert pack(1, 1, 1, 1) == 0x0110000100000001


def test_unpack_public_individual():
    assert unpack(76561197960265729) == Fields(
        account_number=1, universe=1, instance=1, account_type=1
    )


def test_unpack_clan():
    fields = unpack(0x0170000000000004)
    assert fields.account_type == AccountType.CLAN
    assert fields.instance == Instance.ALL
    assert fields.account_number == 4


def test_unpack_masks_oversized_input():
    assert unpack((1 << 64) | 5) == Fields(5, 0, 0, 0)


def test_pack_masks_oversized_fields():
    assert pack(1 << 32, 0, 0, 0) == 0
    assert pack(0, 0, 0, 0x1F) == 0xF << 52


def test_static_key_drops_instance():
    assert static_key(1, 1, 1) == 76561193665298433


@given(
    st.integers(min_value=1, max_value=0x7FFFFFFF),
    st.sampled_from(list(Universe)),
    st.sampled_from(list(Instance)),
    st.sampled_from(list(AccountType)),
)
def test_pack_unpack_roundtrip(account_number, universe, instance, account_type):
    """CRITICAL: unpacking a packed identifier restores every field."""
    fields = unpack(pack(account_number, universe, instance, account_type))
    assert fields == (account_number, universe, instance, account_type)


@given(st.integers(min_value=0, max_value=(1 << 64) - 1))
def test_unpack_pack_roundtrip_over_full_domain(id64):
    assert pack(*unpack(id64)) == id64
