"""Numeric conversions between text and integers.

The parsers follow the classic C rules: leading ASCII whitespace is skipped,
a single optional sign is accepted, and parsing stops at the first character
that is not a digit. Fixed-width results wrap the way the machine types do.
"""

from __future__ import annotations

__all__ = ["atoi", "atol", "itoa", "strtoul"]

_INT_BITS = 32
_LONG_BITS = 64
ULONG_MAX = (1 << _LONG_BITS) - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DECIMAL = "0123456789"


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce *value* to a two's-complement integer of *bits* bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _skip_space_and_sign(text: str) -> tuple[int, int]:
    """Return the index after leading whitespace and sign, and the sign."""
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    return pos, sign


def _parse_decimal(text: str) -> int:
    pos, sign = _skip_space_and_sign(text)
    result = 0
    for ch in text[pos:]:
        if ch not in _DECIMAL:
            break
        result = result * 10 + _DECIMAL.index(ch)
    return result * sign


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value."""
    return _wrap_signed(_parse_decimal(text), _INT_BITS)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit signed value."""
    return _wrap_signed(_parse_decimal(text), _LONG_BITS)


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    return str(int(n))


def _digit_value(ch: str) -> int:
    """Value of an ASCII alphanumeric digit, or -1 for anything else."""
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    return -1


def _has_hex_prefix(text: str, pos: int) -> bool:
    return text[pos : pos + 1] == "0" and text[pos + 1 : pos + 2] in ("x", "X")


def strtoul(text: str, base: int = 0) -> tuple[int, int]:
    """Parse an unsigned 64-bit integer in the given base.

    Returns ``(value, end)`` where *end* is the index just past the last
    character consumed. With base 0 the base is taken from the prefix:
    ``0x``/``0X`` for 16, a leading ``0`` for 8, otherwise 10. A ``0x``
    prefix is also skipped when base is 16. Values that overflow saturate
    at the largest unsigned 64-bit value; a leading minus negates the
    result modulo 2**64.
    """
    pos, sign = _skip_space_and_sign(text)
    if base == 0:
        if _has_hex_prefix(text, pos):
            base = 16
        elif text[pos : pos + 1] == "0":
            base = 8
        else:
            base = 10
    if base == 16 and _has_hex_prefix(text, pos):
        pos += 2

    result = 0
    while pos < len(text):
        digit = _digit_value(text[pos])
        if digit < 0 or digit >= base:
            break
        result = min(result * base + digit, ULONG_MAX)
        pos += 1
    return (result * sign) & ULONG_MAX, pos