"""Structural decoder producing Token trees.

Consumes logical lines from a LineUnfolder and keeps an explicit stack of
open blocks. A decode call for kind X pulls lines until a block of kind X
is closed and returns it at once, leaving the rest of the stream unread.

Architecture:
    Every non-blank line is classified as BEGIN, END or ATTRIBUTE:

    - BEGIN pushes an empty block token.
    - END pops the innermost block and appends it to its parent, if any.
      If the popped block has the requested kind, decoding stops there.
    - ATTRIBUTE builds a leaf token (name, parameters, value) and appends
      it to the innermost open block.

    The stack is owned by the Decoder, not by a single call, so asking
    repeatedly for a nested kind (VEVENT inside VCALENDAR) walks through
    the enclosing block one record at a time.

Thread Safety:
    Decoder instances are single-consumer. Every call advances shared
    state (the stack and the unfolder's buffer). Independent decoders over
    independent sources share nothing and may run on separate threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import IO

from lazyical.config import get_decode_config
from lazyical.errors import (
    MalformedLine,
    MalformedParameter,
    UnbalancedEnd,
    UnexpectedAttribute,
)
from lazyical.tokens import LineKind, Token
from lazyical.unfolder import LineUnfolder, LogicalLine
from lazyical.utils.logger import get_logger

logger = get_logger(__name__)

CALENDAR_KIND = "VCALENDAR"


class DecodeState(Enum):
    """Outcome of a single decode call.

    - SEEKING: Still reading lines (never returned from a finished call)
    - DONE: The requested block was closed and returned
    - EXHAUSTED: Input ended first; the token, if any, is a partial tree

    """

    SEEKING = auto()
    DONE = auto()
    EXHAUSTED = auto()


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """A decoded block paired with how decoding ended.

    Attributes:
        token: The requested block (DONE), the outermost partially built
            block (EXHAUSTED), or None when nothing was open at EOF
        state: DecodeState.DONE or DecodeState.EXHAUSTED

    """

    token: Token | None
    state: DecodeState

    @property
    def complete(self) -> bool:
        """Whether the requested block was fully closed."""
        return self.state is DecodeState.DONE

    @property
    def at_eof(self) -> bool:
        """Whether the input ended before the requested block closed."""
        return self.state is DecodeState.EXHAUSTED


class Decoder:
    """Pull-based decoder for BEGIN/END nested calendar markup.

    Usage:
            >>> import io
            >>> data = b"BEGIN:VCALENDAR\\nVERSION:2.0\\nEND:VCALENDAR\\n"
            >>> decoder = Decoder(io.BytesIO(data))
            >>> result = decoder.decode("VCALENDAR")
            >>> result.state, str(result.token)
        (<DecodeState.DONE: 2>, '<VCALENDAR: VERSION=2.0>')
            >>> decoder.decode("VCALENDAR")
        DecodeResult(token=None, state=<DecodeState.EXHAUSTED: 3>)

    Error Handling:
        Malformed input raises a ParseError subclass naming the raw line.
        The decoder must not be reused afterwards.

    Memory:
        Closed blocks are still appended to their open parent. Iterating
        VEVENTs inside one VCALENDAR therefore keeps every event reachable
        from the calendar token until the calendar closes; only sibling
        top-level records are released as they are returned.

    """

    __slots__ = ("_lines", "_stack", "_source_file", "_strict_end_names")

    def __init__(
        self,
        source: IO[bytes] | IO[str],
        *,
        source_file: str | None = None,
    ) -> None:
        """Initialize decoder over a stream.

        Configuration is read from the active DecodeConfig (ContextVar).

        Args:
            source: Readable stream of calendar data (bytes or text)
            source_file: Optional name used in error messages
        """
        config = get_decode_config()
        self._lines = LineUnfolder(
            source,
            chunk_size=config.chunk_size,
            encoding=config.encoding,
            errors=config.errors,
        )
        self._stack: list[Token] = []
        self._source_file = source_file
        self._strict_end_names = config.strict_end_names

    @property
    def depth(self) -> int:
        """Number of blocks currently open."""
        return len(self._stack)

    def decode(self, kind: str) -> DecodeResult:
        """Decode until the next block of ``kind`` closes.

        Args:
            kind: Block name to return, e.g. "VCALENDAR" or "VEVENT"

        Returns:
            DecodeResult with state DONE and the closed block, or state
            EXHAUSTED with the bottom of the stack (or None) at end of input.

        Raises:
            MalformedLine: A non-blank line has no ':'
            MalformedParameter: A parameter segment has no '='
            UnexpectedAttribute: An attribute appears outside any block
            UnbalancedEnd: An END line has no open block to close
        """
        stack = self._stack

        while True:
            line = self._lines.next_logical_line()
            if line is None:
                return self._exhaust(kind)

            text = line.text
            if not text:
                continue

            line_kind, head, rest = self._classify(line)

            if line_kind is LineKind.BEGIN:
                stack.append(Token(rest))
                continue

            if line_kind is LineKind.END:
                tok = self._pop(line, rest)
                if stack:
                    stack[-1].children.append(tok)
                if tok.kind == kind:
                    return DecodeResult(tok, DecodeState.DONE)
                continue

            if not stack:
                raise UnexpectedAttribute(text, line.lineno, self._source_file)
            stack[-1].children.append(self._attribute(line, head, rest))

    def next_token(self, kind: str) -> Token | None:
        """Return the next complete block of ``kind``, or None at end of input.

        A partial block left open at end of input is not returned here;
        use decode() to inspect it.
        """
        result = self.decode(kind)
        return result.token if result.complete else None

    def iter_blocks(self, kind: str) -> Iterator[Token]:
        """Yield every complete block of ``kind`` until the input ends."""
        while True:
            result = self.decode(kind)
            if result.complete:
                yield result.token
                continue
            if result.token is not None:
                logger.warning(
                    "Input ended inside unterminated %s block; dropping it",
                    result.token.kind,
                )
            return

    def decode_calendar(self) -> Token | None:
        """Decode the next VCALENDAR, accepting a partial tree at end of input."""
        return self.decode(CALENDAR_KIND).token

    def _classify(self, line: LogicalLine) -> tuple[LineKind, str, str]:
        """Split a line at its first ':' and classify it by the head."""
        head, sep, rest = line.text.partition(":")
        if not sep:
            raise MalformedLine(line.text, line.lineno, self._source_file)
        if head == "BEGIN":
            return LineKind.BEGIN, head, rest
        if head == "END":
            return LineKind.END, head, rest
        return LineKind.ATTRIBUTE, head, rest

    def _pop(self, line: LogicalLine, name: str) -> Token:
        stack = self._stack
        if not stack:
            raise UnbalancedEnd(line.text, line.lineno, self._source_file)
        if self._strict_end_names and stack[-1].kind != name:
            raise UnbalancedEnd(
                line.text, line.lineno, self._source_file, expected=stack[-1].kind
            )
        return stack.pop()

    def _attribute(self, line: LogicalLine, head: str, value: str) -> Token:
        """Build an attribute token from ``NAME;P=x;Q=y`` and its value."""
        name, *segments = head.split(";")
        parameters: dict[str, str] = {}
        for segment in segments:
            param, sep, param_value = segment.partition("=")
            if not sep:
                raise MalformedParameter(segment, line.text, line.lineno, self._source_file)
            parameters[param] = param_value
        return Token(name, value, parameters=parameters)

    def _exhaust(self, kind: str) -> DecodeResult:
        stack = self._stack
        if not stack:
            return DecodeResult(None, DecodeState.EXHAUSTED)

        partial = stack[0]
        logger.debug(
            "Input ended with %d open block(s) while seeking %s; returning partial %s",
            len(stack),
            kind,
            partial.kind,
        )
        stack.clear()
        return DecodeResult(partial, DecodeState.EXHAUSTED)
