"""Buffered line-by-line reading from binary or text streams."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Reads lines, each keeping its trailing newline, in fixed-size chunks."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        parts: list[AnyStr] = []
        while True:
            if not self._pending:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                self._pending = chunk
            pending = self._pending
            newline = "\n" if isinstance(pending, str) else b"\n"
            index = pending.find(newline)
            if index < 0:
                parts.append(pending)
                self._pending = None
                continue
            parts.append(pending[: index + 1])
            self._pending = pending[index + 1 :]
            break
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """Read every remaining line of a stream."""
    return list(LineReader(stream))