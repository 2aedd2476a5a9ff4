"""Read a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

import operator
from os import PathLike
from typing import IO, AnyStr, Generic, Iterator, Optional, Union

BUFFER_SIZE = 15


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines, reading ``buffer_size``
    characters at a time.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        buffer_size = operator.index(buffer_size)
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._scanned = 0

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._pending:
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                index = self._pending.find(newline, self._scanned)
                if index >= 0:
                    line = self._pending[: index + 1]
                    self._pending = self._pending[index + 1:]
                    self._scanned = 0
                    return line
                self._scanned = len(self._pending)
            chunk = self._stream.read(self._size)
            if not chunk:
                line = self._pending
                self._pending = None
                self._scanned = 0
                return line or None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(path: Union[str, PathLike]) -> list[str]:
    """Return every line of the text file at ``path``, newlines kept."""
    with open(path, encoding="utf-8", newline="") as stream:
        return list(LineReader(stream))