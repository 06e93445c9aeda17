"""Buffered line-by-line reading from a text stream."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

BUFFER_SIZE = 5


class LineReader:
    """Read a text stream one line at a time.

    Each line keeps its trailing newline when it has one. Data is pulled
    from the stream in chunks of ``buffer_size`` characters, and what has
    been read but not yet returned is kept between calls.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        self._stream = stream
        self._buffer_size = buffer_size
        self._remainder: Optional[str] = None

    def _fill(self) -> None:
        chunks = [self._remainder] if self._remainder else []
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            chunks.append(chunk)
        self._remainder = "".join(chunks) or None

    def next_line(self) -> Optional[str]:
        """Return the next line, or None when the stream is exhausted."""
        if self._buffer_size <= 0:
            return None
        self._fill()
        if not self._remainder:
            self._remainder = None
            return None
        newline = self._remainder.find("\n")
        end = len(self._remainder) if newline < 0 else newline + 1
        line = self._remainder[:end]
        self._remainder = self._remainder[end:] or None
        return line

    def reset(self) -> None:
        """Discard everything read but not yet returned."""
        self._remainder = None

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line