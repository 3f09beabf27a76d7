"""Rendering of hexadecimal and pointer conversions (``%x``, ``%X``, ``%p``)."""

from __future__ import annotations

from typing import Optional

from libft.fmt_spec import FormatFlags

__all__ = ["render_hex"]

_ULONG_MASK = (1 << 64) - 1
_HEX_CONVERSIONS = ("x", "X", "p")


def render_hex(
    value: int, conversion: str = "x", flags: Optional[FormatFlags] = None
) -> str:
    """Render *value* as an unsigned 64-bit hexadecimal number.

    *conversion* is ``x`` for lower-case digits, ``X`` for upper case, or
    ``p`` for a pointer, which always carries a ``0x`` prefix. The ``#``
    flag adds a prefix to non-zero values. Without *flags* only the digits
    are returned.
    """
    if conversion not in _HEX_CONVERSIONS:
        raise ValueError(f"not a hexadecimal conversion: {conversion!r}")
    value = int(value) & _ULONG_MASK
    digits = format(value, "X" if conversion == "X" else "x")
    if flags is None:
        return digits

    suppress = flags.has_precision and flags.precision == 0 and value == 0
    if suppress:
        hex_len = 0
    elif flags.has_precision:
        hex_len = max(len(digits), flags.precision)
    else:
        hex_len = len(digits)
    with_prefix = (flags.alternate and value != 0) or conversion == "p"
    prefix = ("0X" if conversion == "X" else "0x") if with_prefix else ""
    padding = max(flags.width - hex_len - len(prefix), 0)
    zero_fill = flags.zero_pad and not flags.has_precision

    parts = []
    if not flags.left_justify and padding and not zero_fill:
        parts.append(" " * padding)
    parts.append(prefix)
    if not flags.left_justify and padding and zero_fill:
        parts.append("0" * padding)
    if flags.has_precision and flags.precision > len(digits):
        parts.append("0" * (flags.precision - len(digits)))
    if not suppress:
        parts.append(digits)
    if flags.left_justify and padding:
        parts.append(" " * padding)
    return "".join(parts)