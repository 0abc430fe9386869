"""Codecs: bit-field packing, alphabet remapping and the two short codes."""

from steamid.codec.alphabet import decode_base32, encode_base32, remap, reverse_bytes
from steamid.codec.bits import Fields, pack, static_key, unpack
from steamid.codec.friend import from_friend_code, to_friend_code
from steamid.codec.invite import from_invite_code, to_invite_code

__all__ = [
    # Alphabet
    "remap",
    "encode_base32",
    "decode_base32",
    "reverse_bytes",
    # Bits
    "Fields",
    "pack",
    "unpack",
    "static_key",
    # Short codes
    "to_invite_code",
    "from_invite_code",
    "to_friend_code",
    "from_friend_code",
]
