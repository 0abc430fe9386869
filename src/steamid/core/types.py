"""Core type aliases for steamid."""

type AccountNumber = int
"""32-bit per-universe account id; valid values lie in [1, 2^31-1]."""

type Id64 = int
"""Canonical packed 64-bit identifier."""
