"""Write characters, strings and numbers to raw file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

__all__ = ["put_char_fd", "put_str_fd", "put_endl_fd", "put_nbr_fd"]

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of *data* to *fd*, retrying short writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode_char(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    return bytes([int(c) & 0xFF])


def put_char_fd(c: CharLike, fd: int) -> None:
    """Write the character *c* to *fd*.

    An integer is narrowed to one byte; a string character is written as
    its UTF-8 encoding.
    """
    _write_all(fd, _encode_char(c))


def put_str_fd(s: Optional[str], fd: int) -> None:
    """Write *s* to *fd*; a ``None`` string writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl_fd(s: Optional[str], fd: int) -> None:
    """Write *s* followed by a newline to *fd*; a ``None`` string writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8") + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of *n* to *fd*."""
    _write_all(fd, str(int(n)).encode("ascii"))