"""ASCII character classification and case mapping.

Every function accepts either an integer character code or a one-character
string. Classification is strictly ASCII: codes outside the ASCII ranges
never match, whatever Unicode says about them.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

__all__ = [
    "absolute",
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "is_space",
    "to_upper",
    "to_lower",
]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_CASE_SHIFT = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of *c*, which is a code or a single character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def absolute(j: int) -> int:
    """Return the absolute value of *j*."""
    return -j if j < 0 else j


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return code in _LOWER or code in _UPPER


def is_digit(c: CharLike) -> bool:
    """True for the ASCII decimal digits."""
    return _code(c) in _DIGITS


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    code = _code(c)
    return code in _DIGITS or code in _LOWER or code in _UPPER


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def is_space(c: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    code = _code(c)
    return 9 <= code <= 13 or code == 32


def _map_case(c: CharLike, source: range, shift: int) -> CharLike:
    code = _code(c)
    if code in source:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone.

    The result has the same kind as the argument: a string for a string,
    an integer code for an integer.
    """
    return _map_case(c, _LOWER, -_CASE_SHIFT)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone.

    The result has the same kind as the argument: a string for a string,
    an integer code for an integer.
    """
    return _map_case(c, _UPPER, _CASE_SHIFT)