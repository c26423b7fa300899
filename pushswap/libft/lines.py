"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional, IO

BUFFER_SIZE = 10


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    Each line keeps its trailing newline; the last line may lack one.
    The stream is read ``buffer_size`` units at a time.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Next line, or None once the stream is exhausted.

        A read error discards any buffered data and propagates.
        """
        try:
            pending = self._pending
            if pending is None:
                pending = self._stream.read(0)
            newline = "\n" if isinstance(pending, str) else b"\n"
            while newline not in pending:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                pending += chunk
        except OSError:
            self._pending = None
            raise
        if not pending:
            self._pending = None
            return None
        end = pending.find(newline)
        if end < 0:
            self._pending = pending[:0]
            return pending
        self._pending = pending[end + 1:]
        return pending[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line