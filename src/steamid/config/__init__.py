"""Configuration module using Pydantic Settings.

Usage:
    from steamid.config import UrlSettings, get_settings

    settings = UrlSettings(community_domain="steamcommunity.com")
"""

from steamid.config.settings import UrlSettings, get_settings

__all__ = [
    "UrlSettings",
    "get_settings",
]
