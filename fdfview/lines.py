"""Line-by-line reading of a file object through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

DEFAULT_BUFFER_SIZE = 1024
MAX_BUFFER_SIZE = 1000000


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary file object.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, source: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.source = source
        self.buffer_size = min(buffer_size, MAX_BUFFER_SIZE)
        self._pending: AnyStr | None = None
        self._exhausted = False

    def _take_line(self) -> AnyStr | None:
        pending = self._pending
        if not pending:
            return None
        if isinstance(pending, bytes):
            index = pending.find(b"\n")
        else:
            index = pending.find("\n")
        if index < 0:
            return None
        self._pending = pending[index + 1:]
        return pending[:index + 1]

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the source is exhausted."""
        while True:
            line = self._take_line()
            if line is not None:
                return line
            if self._exhausted:
                break
            chunk = self.source.read(self.buffer_size)
            if not chunk:
                self._exhausted = True
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        rest = self._pending
        self._pending = None
        return rest if rest else None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line