"""Byte-buffer primitives: fill, copy, move, search, compare and allocate.

Buffers are ``bytearray`` objects (or anything supporting the buffer
protocol for read-only arguments). Byte values are taken modulo 256, the
way an ``int`` is narrowed to ``unsigned char``.
"""

from __future__ import annotations

from typing import Optional, Union

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc"]

SIZE_MAX = (1 << 64) - 1

ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_span(buffer_len: int, start: int, length: int, what: str) -> None:
    if length < 0:
        raise ValueError(f"{what}: length must not be negative, got {length}")
    if start < 0 or start + length > buffer_len:
        raise ValueError(
            f"{what}: span [{start}, {start + length}) exceeds buffer of {buffer_len} bytes"
        )


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Set the first *length* bytes of *buf* to ``c & 0xFF`` and return *buf*."""
    _check_span(len(buf), 0, length, "memset")
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first *n* bytes of *buf*."""
    memset(buf, 0, n)


def memcpy(dst: bytearray, src: ReadableBuffer, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* into the start of *dst*; return *dst*."""
    _check_span(len(dst), 0, n, "memcpy destination")
    _check_span(len(src), 0, n, "memcpy source")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy *length* bytes within *buf* from offset *src* to offset *dst*.

    The regions may overlap; the result is as if the source bytes were first
    copied to a temporary buffer. Returns *buf*.
    """
    _check_span(len(buf), dst, length, "memmove destination")
    _check_span(len(buf), src, length, "memmove source")
    if dst == src or length == 0:
        return buf
    buf[dst : dst + length] = bytes(buf[src : src + length])
    return buf


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c & 0xFF`` among the
    first *n* bytes of *data*, or ``None`` if there is none."""
    _check_span(len(data), 0, n, "memchr")
    target = c & 0xFF
    for index, byte in enumerate(bytes(data[:n])):
        if byte == target:
            return index
    return None


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b* as unsigned bytes.

    Returns the difference of the first pair of differing bytes, or 0 when
    the spans are equal.
    """
    _check_span(len(a), 0, n, "memcmp first operand")
    _check_span(len(b), 0, n, "memcmp second operand")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the total exceeds the largest size value,
    and ``ValueError`` for negative arguments.
    """
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"calloc: {count} * {size} overflows the size type")
    return bytearray(total)