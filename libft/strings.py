"""String utilities: length, search, comparison, slicing, joining and splitting.

Text arguments are ordinary ``str`` objects. Searches return an index into
the string, or ``None`` when nothing matches. The bounded copy and
concatenation helpers (:func:`strlcpy`, :func:`strlcat`) work on
NUL-terminated byte buffers held in a ``bytearray``.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

__all__ = [
    "strlen",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
]

CharLike = Union[int, str]
TextLike = Union[str, bytes, bytearray, memoryview]


def _char(c: CharLike) -> str:
    """Return *c* as a one-character string; integers are narrowed to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _c_bytes(src: TextLike) -> bytes:
    """Bytes of *src* up to, not including, its first NUL."""
    data = src.encode("utf-8") if isinstance(src, str) else bytes(src)
    end = data.find(b"\0")
    return data if end < 0 else data[:end]


def _check_size(dst: bytearray, dstsize: int) -> None:
    if dstsize < 0:
        raise ValueError(f"buffer size must not be negative, got {dstsize}")
    if dstsize > len(dst):
        raise ValueError(
            f"buffer size {dstsize} exceeds the destination of {len(dst)} bytes"
        )


def strlen(s: str) -> int:
    """Return the number of characters in *s*."""
    return len(s)


def strlcpy(dst: bytearray, src: TextLike, dstsize: int) -> int:
    """Copy *src* into *dst*, writing at most ``dstsize - 1`` bytes plus a NUL.

    Nothing is written when *dstsize* is 0. Returns the length of *src*, so a
    result of *dstsize* or more means the copy was truncated.
    """
    _check_size(dst, dstsize)
    data = _c_bytes(src)
    if dstsize == 0:
        return len(data)
    copied = min(len(data), dstsize - 1)
    dst[:copied] = data[:copied]
    dst[copied] = 0
    return len(data)


def strlcat(dst: bytearray, src: TextLike, dstsize: int) -> int:
    """Append *src* to the NUL-terminated string in *dst*, within *dstsize* bytes.

    Returns the length of the string it tried to create: the initial length
    of *dst* plus the length of *src*. If no NUL is found within the first
    *dstsize* bytes of *dst*, nothing is written and ``dstsize + len(src)``
    is returned.
    """
    _check_size(dst, dstsize)
    data = _c_bytes(src)
    terminator = dst.find(0, 0, dstsize)
    if terminator < 0:
        return dstsize + len(data)
    dlen = terminator
    room = max(dstsize - dlen - 1, 0)
    copied = min(len(data), room)
    dst[dlen : dlen + copied] = data[:copied]
    if dlen + copied < dstsize:
        dst[dlen + copied] = 0
    return dlen + len(data)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of *c* in *s*, or ``None``.

    Searching for the NUL character finds the end of the string, ``len(s)``.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == "\0" else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of *c* in *s*, or ``None``.

    Searching for the NUL character finds the end of the string, ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of *s1* and *s2*.

    The end of a string compares as a character of code 0. Returns the
    difference of the codes of the first differing characters, or 0.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first *needle* lying wholly within ``haystack[:length]``.

    An empty needle matches at index 0. Returns ``None`` when there is no match.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def strdup(s: str) -> str:
    """Return a string equal to *s*."""
    if s is None:
        raise TypeError("strdup() argument must be a string, not None")
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at *start*.

    A *start* at or past the end gives an empty string.
    """
    if s is None:
        raise TypeError("substr() argument must be a string, not None")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin() arguments must be strings, not None")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *s*."""
    if s is None or charset is None:
        raise TypeError("strtrim() arguments must be strings, not None")
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return the string of ``func(index, char)`` for each character of *s*."""
    if s is None or func is None:
        raise TypeError("strmapi() needs a string and a function")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each item of *chars*, in order.

    When *func* returns a value other than ``None`` it replaces the item in
    place, so *chars* can be edited one character at a time.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement