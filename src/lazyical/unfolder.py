"""Line unfolder: raw byte stream to logical lines.

Calendar markup folds long lines by breaking them and starting the
continuation with a single space. The unfolder joins such folds back
together, drops every carriage return, and hands out one logical line at a
time, pulling bytes from the source only when it has to.

Scanning is window-based: find the next line feed with ``bytes.find``,
copy the run before it, then look at the single byte after it to decide
between a fold and a terminator. When that byte has not been read yet the
unfolder reads more instead of guessing.

Thread Safety:
    LineUnfolder instances own their source and are single-consumer.
    All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, NamedTuple

from lazyical.utils.logger import get_logger

logger = get_logger(__name__)

_SPACE = 0x20


class LogicalLine(NamedTuple):
    """One unfolded line and the physical line it started on (1-indexed)."""

    text: str
    lineno: int


class LineUnfolder:
    """Forward-only producer of logical lines from a readable stream.

    Usage:
            >>> import io
            >>> unfolder = LineUnfolder(io.BytesIO(b"SUMMARY:Hel\\r\\n lo\\r\\nEND:X"))
            >>> unfolder.next_logical_line()
        LogicalLine(text='SUMMARY:Hello', lineno=1)
            >>> unfolder.next_logical_line()
        LogicalLine(text='END:X', lineno=3)
            >>> unfolder.next_logical_line() is None
        True

    """

    __slots__ = (
        "_source",
        "_chunk_size",
        "_encoding",
        "_errors",
        "_buffer",
        "_pos",
        "_eof",
        "_lineno",
    )

    def __init__(
        self,
        source: IO[bytes] | IO[str],
        *,
        chunk_size: int = 4096,
        encoding: str = "utf-8",
        errors: str = "replace",
    ) -> None:
        """Initialize unfolder over a stream.

        Args:
            source: Object with a ``read(n)`` method returning bytes or str
            chunk_size: Number of bytes (or characters) requested per read
            encoding: Encoding for decoding lines and encoding str chunks
            errors: Codec error handler
        """
        self._source = source
        self._chunk_size = chunk_size
        self._encoding = encoding
        self._errors = errors
        self._buffer = b""
        self._pos = 0
        self._eof = False
        self._lineno = 1

    def __iter__(self) -> Iterator[LogicalLine]:
        while (line := self.next_logical_line()) is not None:
            yield line

    @property
    def lineno(self) -> int:
        """Physical line number of the next unread byte."""
        return self._lineno

    def next_logical_line(self) -> LogicalLine | None:
        """Read the next logical line, or None once the stream is exhausted.

        A line feed followed by one space is a fold: both bytes are deleted
        and the line continues. Carriage returns are always deleted. The
        last line is returned even without a trailing line feed.
        """
        start_lineno = self._lineno
        line = bytearray()

        while True:
            buffer = self._buffer
            nl = buffer.find(b"\n", self._pos)

            if nl == -1:
                line += buffer[self._pos :].replace(b"\r", b"")
                self._pos = len(buffer)
                if self._fill():
                    continue
                if not line:
                    return None
                return self._finish(line, start_lineno)

            line += buffer[self._pos : nl].replace(b"\r", b"")

            if nl + 1 == len(buffer):
                # Cannot tell a fold from a terminator without the next byte.
                self._pos = nl
                if self._fill():
                    continue
                self._pos = nl + 1
                self._lineno += 1
                return self._finish(line, start_lineno)

            self._lineno += 1
            if buffer[nl + 1] == _SPACE:
                self._pos = nl + 2
                continue

            self._pos = nl + 1
            return self._finish(line, start_lineno)

    def _finish(self, line: bytearray, lineno: int) -> LogicalLine:
        return LogicalLine(line.decode(self._encoding, self._errors), lineno)

    def _fill(self) -> bool:
        """Append one chunk from the source to the unread part of the buffer.

        Returns:
            False once the source is exhausted (or closed).
        """
        if self._eof:
            return False

        try:
            chunk = self._source.read(self._chunk_size)
        except ValueError:
            # Only read() on a closed file means cancellation; decode errors from
            # text streams are read failures.
            if not getattr(self._source, "closed", False):
                raise
            logger.debug("Source closed while reading; treating as end of stream")
            chunk = b""

        if not chunk:
            self._eof = True
            return False

        if isinstance(chunk, str):
            chunk = chunk.encode(self._encoding, self._errors)

        self._buffer = self._buffer[self._pos :] + chunk
        self._pos = 0
        return True
