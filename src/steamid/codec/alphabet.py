"""Fixed-radix alphabet codecs.

``remap`` substitutes digits positionally between two alphabets of the same
size (no carrying, output length equals input length). ``encode_base32`` and
``decode_base32`` lay a 64-bit value out as 5-bit symbols, least significant
group first, the way the friend code does.
"""

from __future__ import annotations

from steamid.errors import InvalidDigitError, InvalidFormatError
from steamid.result import Err, Ok, Result

INT64_SIGN = 1 << 63
UINT64_MASK = (1 << 64) - 1
BASE32_BITS = 5
BASE32_MASK = 0x1F


def remap(value: str, from_alphabet: str, to_alphabet: str) -> Result[str]:
    """Substitute each digit of value by its counterpart in to_alphabet.

    Args:
        value: Text drawn from from_alphabet.
        from_alphabet: Source digits.
        to_alphabet: Target digits, same length as from_alphabet.

    Returns:
        Ok with the remapped text, or Err(InvalidFormatError) for alphabets of
        different sizes, or Err(InvalidDigitError) for a character outside
        from_alphabet.
    """
    if len(from_alphabet) != len(to_alphabet):
        return Err(
            InvalidFormatError(
                f"Alphabet sizes differ: {len(from_alphabet)} != {len(to_alphabet)}"
            )
        )

    out: list[str] = []
    for ch in value:
        idx = from_alphabet.find(ch)
        if idx < 0:
            return Err(InvalidDigitError(f"Character {ch!r} is not in alphabet {from_alphabet!r}"))
        out.append(to_alphabet[idx])
    return Ok("".join(out))


def encode_base32(value: int, alphabet: str, length: int) -> str:
    """Render value as `length` 5-bit symbols, least significant first.

    value is read as a signed 64-bit integer and shifted arithmetically, so
    symbols past bit 63 repeat the sign bit.
    """
    value &= UINT64_MASK
    if value & INT64_SIGN:
        value -= 1 << 64

    chars = []
    for _ in range(length):
        chars.append(alphabet[value & BASE32_MASK])
        value >>= BASE32_BITS
    return "".join(chars)


def decode_base32(text: str, alphabet: str) -> Result[int]:
    """Inverse of encode_base32; bits beyond 64 are discarded."""
    value = 0
    for i, ch in enumerate(text):
        idx = alphabet.find(ch)
        if idx < 0:
            return Err(InvalidDigitError(f"Character {ch!r} is not in alphabet {alphabet!r}"))
        value |= idx << (BASE32_BITS * i)
    return Ok(value & UINT64_MASK)


def reverse_bytes(value: int) -> int:
    """Swap the byte order of an unsigned 64-bit value."""
    return int.from_bytes((value & UINT64_MASK).to_bytes(8, "little"), "big")
