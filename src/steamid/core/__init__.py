"""Core primitives: identity models, alphabets, grammars and validation.

Architecture Note:
    core/ holds pure data and predicates with no conversion logic.
    Codecs live in codec/, string parsing in parsing/, rendering in formats.
"""

from steamid.core.identity import (
    MAX_ACCOUNT_NUMBER,
    MIN_ACCOUNT_NUMBER,
    AccountType,
    Auth,
    Instance,
    SteamId,
    Universe,
    VanityType,
)
from steamid.core.types import AccountNumber, Id64
from steamid.core.validation import (
    MAX_ID2,
    MAX_ID64,
    MIN_ID2,
    MIN_ID64,
    is_valid_account_number,
    is_valid_id2_number,
    is_valid_id2_string,
    is_valid_id3_string,
    is_valid_id64,
    is_valid_id64_string,
    is_valid_instance_id,
    is_valid_vanity_name,
)

__all__ = [
    # Types
    "AccountNumber",
    "Id64",
    # Identity
    "SteamId",
    "Universe",
    "Instance",
    "AccountType",
    "Auth",
    "VanityType",
    "MIN_ACCOUNT_NUMBER",
    "MAX_ACCOUNT_NUMBER",
    # Validation
    "MIN_ID64",
    "MAX_ID64",
    "MIN_ID2",
    "MAX_ID2",
    "is_valid_account_number",
    "is_valid_id64",
    "is_valid_id2_number",
    "is_valid_id2_string",
    "is_valid_id3_string",
    "is_valid_id64_string",
    "is_valid_instance_id",
    "is_valid_vanity_name",
]
