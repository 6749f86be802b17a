"""Read a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 1000


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines, reading ``buffer_size`` at a time.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._size = buffer_size
        self._buffer: Optional[AnyStr] = None
        self._newline = "\n"

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` at the end of the stream."""
        while True:
            if self._buffer is not None:
                cut = self._buffer.find(self._newline)
                if cut >= 0:
                    line = self._buffer[: cut + 1]
                    self._buffer = self._buffer[cut + 1:]
                    return line
            chunk = self._stream.read(self._size)
            if not chunk:
                line, self._buffer = self._buffer, None
                return line or None
            if self._buffer is None:
                self._newline = "\n" if isinstance(chunk, str) else b"\n"
                self._buffer = chunk
            else:
                self._buffer += chunk

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.readline, None)