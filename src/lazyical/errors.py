"""Exception classes for lazyical.

Every malformed-input condition the decoder can hit has its own class so
callers can tell a broken line apart from a broken parameter or an
unbalanced block. Running out of input is not an error and has no class
here; see :class:`lazyical.decoder.DecodeState`.
"""

from __future__ import annotations


class LazyIcalError(Exception):
    """Base exception for all lazyical errors."""

    pass


class ParseError(LazyIcalError):
    """Error while interpreting a logical line.

    The decoder state is undefined after a ParseError; create a new
    Decoder instead of reusing the one that raised.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Physical line where the logical line started (1-indexed)
            source_file: Path or name of the source (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class MalformedLine(ParseError):
    """A line without the ``:`` separating its name from its content."""

    def __init__(
        self,
        line: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.line = line
        super().__init__(f"missing ':' delimiter in line {line!r}", lineno, source_file)


class MalformedParameter(ParseError):
    """A ``;``-separated parameter segment without an ``=``."""

    def __init__(
        self,
        segment: str,
        line: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.segment = segment
        self.line = line
        super().__init__(
            f"parameter {segment!r} has no '=' in line {line!r}", lineno, source_file
        )


class UnexpectedAttribute(ParseError):
    """An attribute line with no enclosing BEGIN block."""

    def __init__(
        self,
        line: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.line = line
        super().__init__(f"attribute outside of any block: {line!r}", lineno, source_file)


class UnbalancedEnd(ParseError):
    """An END marker that does not close an open block.

    Raised when nothing is open, or, with ``strict_end_names`` enabled,
    when the END name differs from the kind of the innermost open block.
    """

    def __init__(
        self,
        line: str,
        lineno: int | None = None,
        source_file: str | None = None,
        expected: str | None = None,
    ) -> None:
        self.line = line
        self.expected = expected
        if expected is None:
            message = f"{line!r} has no matching BEGIN"
        else:
            message = f"{line!r} does not close open block {expected!r}"
        super().__init__(message, lineno, source_file)
