"""Line-at-a-time reading from a stream through a fixed-size buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

BUFFER_SIZE = 8192


def _split_line(data: AnyStr) -> tuple[AnyStr, AnyStr | None]:
    """Split data after its first newline; the remainder is None if there is none."""
    newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
    index = data.find(newline)
    if index < 0:
        return data, None
    return data[: index + 1], data[index + 1 :]


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a text or binary stream."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream has nothing left."""
        pending = self._pending
        while True:
            if pending:
                line, rest = _split_line(pending)
                if rest is not None:
                    self._pending = rest
                    return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        self._pending = None
        return pending or None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line