"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from steamid import AccountType, Instance, SteamId, Universe
from steamid.config import UrlSettings


@pytest.fixture
def sid():
    """Smallest valid public individual account."""
    return SteamId(1)


@pytest.fixture
def max_sid():
    return SteamId(0x7FFFFFFF)


@pytest.fixture
def clan():
    return SteamId(4, Universe.PUBLIC, Instance.ALL, AccountType.CLAN)


@pytest.fixture
def url_settings():
    """Settings independent of the process environment."""
    return UrlSettings(
        scheme="https",
        community_domain="steamcommunity.com",
        invite_domain="s.team",
        china_domain="my.steamchina.com",
    )
