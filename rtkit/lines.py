"""Line-by-line reading from file descriptors with per-descriptor buffering."""

from __future__ import annotations

import os
from typing import Iterator, Optional, Protocol, Union

DEFAULT_BUFFER_SIZE = 32


class _HasFileno(Protocol):
    def fileno(self) -> int: ...


Descriptor = Union[int, _HasFileno]


class LineReader:
    """Reads newline-terminated lines from any number of descriptors.

    Data read past the end of a line is kept for that descriptor and used by
    the next call for it, so several descriptors can be read in turns.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an int")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    @staticmethod
    def _descriptor(fd: Descriptor) -> int:
        if isinstance(fd, bool):
            raise TypeError("a file descriptor cannot be a bool")
        number = fd if isinstance(fd, int) else fd.fileno()
        if number < 0:
            raise ValueError(f"invalid file descriptor {number}")
        return number

    @staticmethod
    def _decode(data: bytes) -> str:
        return data.decode("utf-8", errors="surrogateescape")

    def next_line(self, fd: Descriptor) -> Optional[str]:
        """Return the next line from ``fd`` without its newline, or ``None`` at end of input.

        A last line with no newline is still returned. Read errors raise ``OSError``.
        """
        number = self._descriptor(fd)
        pending = self._pending.pop(number, b"")
        while True:
            end = pending.find(b"\n")
            if end >= 0:
                self._pending[number] = pending[end + 1:]
                return self._decode(pending[:end])
            chunk = os.read(number, self.buffer_size)
            if not chunk:
                break
            pending += chunk
        return self._decode(pending) if pending else None

    def lines(self, fd: Descriptor) -> Iterator[str]:
        """Yield every remaining line from ``fd``."""
        while (line := self.next_line(fd)) is not None:
            yield line