"""Conversions between bytes, integers and strings of binary digits."""

from __future__ import annotations

WORD_BITS = 32
_WORD_MASK = (1 << WORD_BITS) - 1
_SIGN_BIT = 1 << (WORD_BITS - 1)


def char_to_bits(ch: str | int) -> str:
    """Return the eight binary digits of a single byte, most significant first."""
    value = ord(ch) if isinstance(ch, str) else ch
    if not 0 <= value <= 0xFF:
        raise ValueError(f"character {ch!r} does not fit in one byte")
    return format(value, "08b")


def int_to_bits(number: int) -> str:
    """Return the 32-bit two's complement binary digits of ``number``."""
    return format(number & _WORD_MASK, f"0{WORD_BITS}b")


def bits_to_int(bits: str) -> int:
    """Read up to 32 leading binary digits as a signed 32-bit integer."""
    word = bits[:WORD_BITS]
    if set(word) - {"0", "1"}:
        raise ValueError(f"not a binary string: {bits!r}")
    value = int(word or "0", 2)
    return value - (1 << WORD_BITS) if value & _SIGN_BIT else value