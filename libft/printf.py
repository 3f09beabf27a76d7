"""Formatted output with the ``%c %s %p %d %i %u %x %X %%`` conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional

from libft.fmt_hex import render_hex
from libft.fmt_numbers import render_int, render_unsigned
from libft.fmt_spec import FormatFlags, parse_flags
from libft.fmt_text import render_char, render_str

__all__ = ["render_conversion", "sprintf", "printf", "NIL_TEXT"]

NIL_TEXT = "(nil)"
_UINT_MASK = 0xFFFFFFFF


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _pointer_value(arg: Any) -> int:
    if isinstance(arg, int):
        return arg
    return id(arg)


def render_conversion(
    conversion: str, args: Iterator[Any], flags: Optional[FormatFlags] = None
) -> str:
    """Render one conversion, taking its argument from *args* if it needs one.

    ``%%`` consumes no argument. A ``None`` or zero pointer renders as
    ``(nil)``. Unknown conversion characters render as nothing.
    """
    if flags is None:
        flags = FormatFlags()
    if conversion == "%":
        return "%"
    if conversion == "c":
        return render_char(_next_arg(args), flags)
    if conversion == "s":
        return render_str(_next_arg(args), flags)
    if conversion == "p":
        arg = _next_arg(args)
        if arg is None or arg == 0:
            return render_str(NIL_TEXT, flags)
        return render_hex(_pointer_value(arg), "p", flags)
    if conversion in ("d", "i"):
        return render_int(_next_arg(args), flags)
    if conversion == "u":
        return render_unsigned(_next_arg(args), flags)
    if conversion in ("x", "X"):
        return render_hex(int(_next_arg(args)) & _UINT_MASK, conversion, flags)
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with each conversion replaced by its rendered argument.

    A ``%`` at the very end of *fmt* ends the output. Raises ``TypeError``
    when *fmt* is ``None`` or the arguments run out.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    arg_iter = iter(args)
    out = []
    pos = 0
    while pos < len(fmt):
        if fmt[pos] == "%":
            flags, pos = parse_flags(fmt, pos + 1, arg_iter)
            if pos >= len(fmt):
                break
            out.append(render_conversion(fmt[pos], arg_iter, flags))
        else:
            out.append(fmt[pos])
        pos += 1
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)