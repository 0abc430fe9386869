"""Digit alphabets of the invite and friend codes."""

HEX_ALPHABET = "0123456789abcdef"

INVITE_ALPHABET = "bcdfghjkmnpqrtvw"
"""Sixteen consonant-like symbols standing in for the hex digits, in order."""
INVITE_DELIMITER = "-"

FRIEND_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
"""Base32 without I, O, 0 and 1."""
FRIEND_DELIMITER = "-"
