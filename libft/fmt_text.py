"""Rendering of character and string conversions (``%c`` and ``%s``)."""

from __future__ import annotations

from typing import Optional, Union

from libft.fmt_spec import FormatFlags

__all__ = ["render_char", "render_str", "NULL_TEXT"]

NULL_TEXT = "(null)"

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    """Return *c* as one character; integers are narrowed to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def render_char(c: CharLike, flags: Optional[FormatFlags] = None) -> str:
    """Render the character *c*, padded with spaces to the field width.

    Without *flags* the bare character is returned.
    """
    ch = _char(c)
    if flags is None:
        return ch
    padding = " " * max(flags.width - 1, 0)
    return ch + padding if flags.left_justify else padding + ch


def render_str(s: Optional[str], flags: Optional[FormatFlags] = None) -> str:
    """Render the string *s*, cut to the precision and padded to the width.

    A ``None`` string is rendered as ``(null)``. Without *flags* the bare
    string is returned.
    """
    text = NULL_TEXT if s is None else s
    if flags is None:
        return text
    if flags.has_precision:
        print_len = min(flags.precision, len(text))
    else:
        print_len = len(text)
    padding = flags.width - print_len if flags.width > 0 else 0
    pad = " " * max(padding, 0)
    body = text[:print_len] if print_len > 0 else ""
    return body + pad if flags.left_justify else pad + body