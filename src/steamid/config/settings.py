"""Configuration settings using Pydantic Settings.

Controls how profile, user and invite URLs are rendered. Parsing always
recognizes the fixed Steam hosts regardless of these values.

Usage:
    from steamid.config import UrlSettings, get_settings

    # Load from environment variables (STEAMID_*)
    settings = get_settings()

    # Or override with explicit values
    settings = UrlSettings(scheme="http", community_domain="localhost:8080")
"""

from __future__ import annotations

from functools import cache

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for the config module. "
        "Install with: pip install steamid"
    ) from e


class UrlSettings(BaseSettings):  # type: ignore[misc]
    """Hosts and scheme used when rendering URLs.

    Attributes:
        scheme: URL scheme.
        community_domain: Host serving /profiles/, /user/ and /id/ pages.
        invite_domain: Short host serving /p/ invite links.
        china_domain: Host of the Steam China community.

    Environment Variables:
        STEAMID_SCHEME
        STEAMID_COMMUNITY_DOMAIN
        STEAMID_INVITE_DOMAIN
        STEAMID_CHINA_DOMAIN
    """

    model_config = SettingsConfigDict(
        env_prefix="STEAMID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    scheme: str = "https"
    community_domain: str = "steamcommunity.com"
    invite_domain: str = "s.team"
    china_domain: str = "my.steamchina.com"


@cache
def get_settings() -> UrlSettings:
    """Default settings, read from the environment once per process."""
    return UrlSettings()
