"""Read a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 1024

_readers: dict[int, LineReader] = {}


class LineReader:
    """Buffered line reader over a raw file descriptor.

    Lines keep their trailing newline; the last line of the input may lack
    one. Bytes are decoded as UTF-8, undecodable bytes kept as surrogates.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> str | None:
        """The next line, or None when no data is left.

        A read error discards whatever was buffered and raises OSError.
        """
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        newline = self._pending.find(b"\n")
        end = newline + 1 if newline >= 0 else len(self._pending)
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode("utf-8", "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def get_next_line(fd: int) -> str | None:
    """The next line from ``fd``, keeping a separate buffer for each descriptor."""
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line