"""Read a file descriptor one line at a time, keeping per-descriptor state."""

from __future__ import annotations

import os
from typing import Dict, Optional

__all__ = ["LineReader", "get_next_line", "BUFFER_SIZE", "OPEN_MAX"]

BUFFER_SIZE = 42
OPEN_MAX = 1024


class LineReader:
    """Reads lines from file descriptors in chunks of *buffer_size* bytes.

    Bytes read past the end of a line are kept for the next call on the same
    descriptor, so several descriptors can be read in turn.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._stash: Dict[int, bytes] = {}

    @staticmethod
    def _check_fd(fd: int) -> None:
        if fd < 0 or fd >= OPEN_MAX:
            raise ValueError(f"file descriptor {fd} is outside 0..{OPEN_MAX - 1}")

    def release(self, fd: int) -> None:
        """Drop any bytes kept for *fd*."""
        self._stash.pop(fd, None)

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line of *fd*, newline included, or ``None`` at the end.

        The last line is returned without a newline if the input lacks one.
        A read error drops the state kept for *fd* and is raised.
        """
        self._check_fd(fd)
        stash = self._stash.get(fd, b"")
        while b"\n" not in stash:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                self.release(fd)
                raise
            if not chunk:
                break
            stash += chunk
        return self._take_line(fd, stash)

    def _take_line(self, fd: int, stash: bytes) -> Optional[bytes]:
        if not stash:
            self.release(fd)
            return None
        end = stash.find(b"\n")
        if end < 0:
            self.release(fd)
            return stash
        self._stash[fd] = stash[end + 1 :]
        return stash[: end + 1]


_default_reader = LineReader()


def get_next_line(fd: int, clean: bool = False) -> Optional[bytes]:
    """Return the next line of *fd* using a shared reader.

    With *clean* set, the bytes kept for *fd* are dropped and ``None`` is
    returned without reading.
    """
    if clean:
        _default_reader.release(fd)
        return None
    return _default_reader.read_line(fd)