"""Rendering of signed and unsigned decimal conversions."""

from __future__ import annotations

from typing import Optional

from libft.fmt_spec import FormatFlags

__all__ = ["render_int", "render_unsigned"]

_UINT_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _layout(sign: str, digits: str, suppress: bool, flags: FormatFlags) -> str:
    """Lay out sign, padding, precision zeros and digits according to *flags*."""
    if suppress:
        body_len = 0
    elif flags.has_precision:
        body_len = max(len(digits), flags.precision)
    else:
        body_len = len(digits)
    padding = max(flags.width - body_len - len(sign), 0)
    zero_fill = flags.zero_pad and not flags.has_precision

    parts = []
    if not flags.left_justify and padding and not zero_fill:
        parts.append(" " * padding)
    parts.append(sign)
    if not flags.left_justify and padding and zero_fill:
        parts.append("0" * padding)
    if flags.has_precision and flags.precision > len(digits):
        parts.append("0" * (flags.precision - len(digits)))
    if not suppress:
        parts.append(digits)
    if flags.left_justify and padding:
        parts.append(" " * padding)
    return "".join(parts)


def _suppressed(value: int, flags: FormatFlags) -> bool:
    return flags.has_precision and flags.precision == 0 and value == 0


def render_int(value: int, flags: Optional[FormatFlags] = None) -> str:
    """Render *value* as a 32-bit signed decimal (``%d``/``%i``).

    Without *flags* the plain decimal form is returned.
    """
    value = _to_int32(value)
    if flags is None:
        return str(value)
    if value < 0:
        sign = "-"
    elif flags.plus:
        sign = "+"
    elif flags.space:
        sign = " "
    else:
        sign = ""
    return _layout(sign, str(abs(value)), _suppressed(value, flags), flags)


def render_unsigned(value: int, flags: Optional[FormatFlags] = None) -> str:
    """Render *value* as a 32-bit unsigned decimal (``%u``).

    Sign flags have no effect. Without *flags* the plain decimal form is
    returned.
    """
    value = int(value) & _UINT_MASK
    if flags is None:
        return str(value)
    return _layout("", str(value), _suppressed(value, flags), flags)