"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 2048


class LineReader(Generic[AnyStr]):
    """Return the lines of a stream one at a time, newline included.

    The stream is read in chunks of buffer_size; it may yield text or bytes,
    and the lines come back in the same type.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """The next line, the unterminated tail at end of input, or None when done."""
        while True:
            if self._pending:
                newline = b"\n" if isinstance(self._pending, bytes) else "\n"
                index = self._pending.find(newline)  # type: ignore[arg-type]
                if index >= 0:
                    line = self._pending[:index + 1]
                    self._pending = self._pending[index + 1:]
                    return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                line, self._pending = self._pending, None
                return line or None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of stream, newline included."""
    yield from LineReader(stream, buffer_size)