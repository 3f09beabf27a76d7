# libft

A small pure-Python library of utilities for ASCII characters, number parsing,
byte buffers, a singly linked list, string helpers, reading file descriptors
line by line, and printf-style formatting. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.charclass`

ASCII-only predicates and case mapping. Each function takes an integer code or
a one-character string. A string of any other length raises `ValueError`.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` (codes 0 to 127),
  `is_print` (space through tilde), `is_space` (space, `\t \n \v \f \r`).
- `to_upper`, `to_lower` change only ASCII letters. They return a string
  for a string argument and an integer for an integer argument.
- `absolute(j)` returns the absolute value.

### `libft.conversion`

- `atoi(text)` and `atol(text)` skip leading whitespace, accept one optional
  sign and read decimal digits up to the first non-digit. The results wrap to
  32-bit and 64-bit signed integers respectively.
- `itoa(n)` returns the decimal string.
- `strtoul(text, base=0)` returns `(value, end)`, where `end` is the index
  just past the last character consumed. With base 0 the base comes from the
  prefix: `0x` means 16, a leading `0` means 8, and anything else means 10.
  The value saturates at 2**64 - 1. A leading minus negates the value modulo
  2**64.

### `libft.memory`

These helpers work on `bytearray` buffers. Byte values are taken modulo 256.
A span that runs past a buffer raises `ValueError`.

- `memset(buf, c, length)`, `bzero(buf, n)`, `memcpy(dst, src, n)`.
- `memmove(buf, dst, src, length)` copies between two offsets of one buffer.
  The two regions may overlap.
- `memchr(data, c, n)` returns an index or `None`.
- `memcmp(a, b, n)` returns the difference of the first differing bytes, or 0.
- `calloc(count, size)` returns a zero-filled `bytearray`. It raises
  `OverflowError` when the total exceeds 2**64 - 1.

### `libft.linked_list`

`Node` is a dataclass with the fields `content` and `next`. `LinkedList(items=None)`
provides:

- `push_front` and `push_back`, which both return the new node.
- `len()`, iteration over contents, the `head` property and `last()`.
- `clear(delete=None)`, which calls `delete` on each content from front to back.
- `for_each(func)`.
- `map(func, delete=None)`, which returns a new list. If `func` returns
  `None`, the contents mapped so far are passed to `delete` and `ValueError`
  is raised.

### `libft.strings`

- `strlen`, `strdup`, `substr(s, start, length)`, `strjoin`, `strtrim(s, charset)`.
- `split(s, sep)` splits on one character and drops empty pieces.
- `strmapi(s, func)` builds a string from `func(index, char)`.
- `striteri(chars, func)` calls `func(index, char)` on each item of a mutable
  sequence. A non-`None` result replaces that item in place.
- `strchr`, `strrchr` and `strnstr(haystack, needle, length)` return an index
  or `None`. Searching for `"\0"` finds `len(s)`.
- `strncmp(s1, s2, n)` returns the difference of the first differing codes.
- `strlcpy(dst, src, dstsize)` and `strlcat(dst, src, dstsize)` work on
  NUL-terminated `bytearray` buffers. They return the length of the string
  they tried to create.

### `libft.output`

`put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd` write to a raw
file descriptor with `os.write`. Strings are encoded as UTF-8. A `None`
string writes nothing.

### `libft.line_reader`

- `LineReader(buffer_size=42)` reads in chunks of `buffer_size` bytes and
  keeps leftover bytes separately for each descriptor.
- `read_line(fd)` returns the next line as `bytes`, including its newline. It
  returns `None` at end of input.
- `release(fd)` drops the state kept for that descriptor.
- Descriptors outside `0..1023` raise `ValueError`.
- `get_next_line(fd, clean=False)` uses one shared reader. With `clean=True`
  it drops the state for `fd` and returns `None`.

### Formatting: `libft.printf` and helpers

`sprintf(fmt, *args)` returns the formatted text. `printf(fmt, *args)` writes
the text to standard output and returns its length.

Supported conversions are `c s p d i u x X %`. Supported options are the
flags `- + 0 space #`, a width, a `.precision`, and `*` for either of the two.
A negative `*` width left-justifies the field.

- `%d`, `%i`, `%u` and `%x` treat their argument as a 32-bit value.
- `%s` renders `None` as `(null)`.
- `%p` renders `None` or `0` as `(nil)`. Any other argument is printed as an
  address: an integer as its own value, any other object as its `id()`.
- Running out of arguments raises `TypeError`.

The pieces are also available on their own:

- `libft.fmt_spec`: `FormatFlags`, `parse_flags(fmt, pos, args)`, `is_conversion`.
- `libft.fmt_numbers`: `render_int`, `render_unsigned`.
- `libft.fmt_text`: `render_char`, `render_str`.
- `libft.fmt_hex`: `render_hex(value, conversion, flags)`.
- `libft.printf`: `render_conversion(conversion, args, flags)`.

## Examples

```python
from libft.conversion import atoi, strtoul
from libft.strings import split, strtrim
from libft.printf import sprintf

atoi("   -42abc")              # -42
strtoul("0x1f", 0)             # (31, 4)
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
sprintf("%-5d|%05x|%.2s", 42, 255, "abc")  # "42   |000ff|ab"
```

Reading lines:

```python
import os
from libft.line_reader import LineReader

reader = LineReader()
fd = os.open("notes.txt", os.O_RDONLY)
while (line := reader.read_line(fd)) is not None:
    print(line.decode("utf-8"), end="")
os.close(fd)
```

## What it does not do

This is a library only. It installs no command-line program.