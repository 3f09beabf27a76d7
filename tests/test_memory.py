import pytest

from libft.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_and_returns_buffer():
    original = b"hello world"
    buf = bytearray(original)
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf[:5] == b"x" * 5
    assert buf[5:] == original[5:]


def test_memset_narrows_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x1FF, 4)
    assert buf == bytes([0xFF]) * 4


def test_memset_zero_length_leaves_buffer():
    buf = bytearray(b"abc")
    memset(buf, 0, 0)
    assert buf == b"abc"


def test_memset_too_long_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeroes_prefix():
    original = b"abcdef"
    buf = bytearray(original)
    assert bzero(buf, 3) is None
    assert buf[:3] == bytes(3)
    assert buf[3:] == original[3:]


def test_memcpy_copies_bytes():
    dst = bytearray(b"......")
    src = b"abcdef"
    result = memcpy(dst, src, 4)
    assert result is dst
    assert dst[:4] == src[:4]
    assert dst[4:] == b".."


def test_memcpy_source_too_short_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 5)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf[:2] == original[:2]
    assert buf[2:6] == original[0:4]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    result = memmove(buf, 0, 2, 4)
    assert result is buf
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_same_offset_is_noop():
    buf = bytearray(b"xyz")
    memmove(buf, 1, 1, 2)
    assert buf == b"xyz"


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_match():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_limit():
    data = b"hello"
    assert memchr(data, ord("o"), 4) is None
    assert memchr(data, ord("o"), 5) == 4


def test_memchr_narrows_value():
    data = bytes([0, 0xFF, 1])
    assert memchr(data, -1, 3) == 1


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0
    assert memcmp(b"abc", b"abc", 0) == 0


def test_memcmp_sign_of_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\x80", b"\x00", 1) == 128


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 4)
    assert buf == bytearray(12)
    assert isinstance(buf, bytearray)


def test_calloc_zero_size():
    assert calloc(5, 0) == bytearray()


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX, 2)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)