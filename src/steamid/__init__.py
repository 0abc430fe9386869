"""steamid: codec between Steam account identifiers and their external forms.

Usage:
    from steamid import SteamId, parse_any, to_id3, to_friend_code

    sid = parse_any("STEAM_0:1:0").unwrap()
    to_id3(sid).unwrap()          # "[U:1:1]"
    to_friend_code(sid).unwrap()  # "AJJJS-ABAA"

    result = parse_id2("STEAM_9:1:0")
    result.is_ok()                # False
    result.unwrap_or(None)        # None
"""

import logging

__version__ = "0.1.0"

# Errors and results
from steamid.errors import (
    CodecError,
    HashUnavailableError,
    InvalidDigitError,
    InvalidFormatError,
    OutOfRangeError,
)
from steamid.result import Err, Ok, Result

# Core primitives
from steamid.core import (
    MAX_ACCOUNT_NUMBER,
    MAX_ID64,
    MIN_ACCOUNT_NUMBER,
    MIN_ID64,
    AccountType,
    Auth,
    Instance,
    SteamId,
    Universe,
    VanityType,
    is_valid_account_number,
    is_valid_id2_number,
    is_valid_id2_string,
    is_valid_id3_string,
    is_valid_id64,
    is_valid_id64_string,
    is_valid_vanity_name,
)

# Codecs
from steamid.codec import (
    from_friend_code,
    from_invite_code,
    pack,
    remap,
    unpack,
)

# Parsing
from steamid.parsing import (
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

# Rendering
from steamid.formats import (
    to_china_profile_url,
    to_friend_code,
    to_id2,
    to_id3,
    to_id3_profile_url,
    to_id64,
    to_invite_code,
    to_invite_url,
    to_profile_url,
    to_static_key,
    to_user_url,
    to_vanity_url,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Errors
    "CodecError",
    "InvalidFormatError",
    "OutOfRangeError",
    "InvalidDigitError",
    "HashUnavailableError",
    # Results
    "Ok",
    "Err",
    "Result",
    # Identity
    "SteamId",
    "Universe",
    "Instance",
    "AccountType",
    "Auth",
    "VanityType",
    "MIN_ACCOUNT_NUMBER",
    "MAX_ACCOUNT_NUMBER",
    "MIN_ID64",
    "MAX_ID64",
    # Validation
    "is_valid_account_number",
    "is_valid_id64",
    "is_valid_id2_number",
    "is_valid_id2_string",
    "is_valid_id3_string",
    "is_valid_id64_string",
    "is_valid_vanity_name",
    # Codecs
    "remap",
    "pack",
    "unpack",
    "from_invite_code",
    "from_friend_code",
    # Parsing
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
    # Rendering
    "to_id64",
    "to_static_key",
    "to_id2",
    "to_id3",
    "to_invite_code",
    "to_friend_code",
    "to_profile_url",
    "to_id3_profile_url",
    "to_china_profile_url",
    "to_user_url",
    "to_invite_url",
    "to_vanity_url",
]
