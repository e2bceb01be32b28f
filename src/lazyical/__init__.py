"""
lazyical: lazy decoder for iCalendar-style nested markup

Turns BEGIN/END calendar markup into a tree of Tokens, one record at a
time, without reading further into the stream than the requested record.
Schema-agnostic: values and parameters are passed through uninterpreted.

Quick Start:
    >>> from lazyical import parse
    >>> cal = parse(b"BEGIN:VCALENDAR\\nBEGIN:VEVENT\\nSUMMARY:Hi\\nEND:VEVENT\\nEND:VCALENDAR\\n")
    >>> cal.subtoken("VEVENT").subtoken("SUMMARY").value
    'Hi'

    >>> # Pull events lazily from a large feed
    >>> from lazyical import Decoder
    >>> with open("feed.ics", "rb") as f:
    ...     for event in Decoder(f).iter_blocks("VEVENT"):
    ...         print(event.subtoken("SUMMARY"))

Installation:
    pip install lazyical              # Zero runtime dependencies
"""

import io
from collections.abc import Iterator
from typing import IO

from lazyical.config import (
    DecodeConfig,
    decode_config_context,
    get_decode_config,
    reset_decode_config,
    set_decode_config,
)
from lazyical.decoder import CALENDAR_KIND, DecodeResult, DecodeState, Decoder
from lazyical.errors import (
    LazyIcalError,
    MalformedLine,
    MalformedParameter,
    ParseError,
    UnbalancedEnd,
    UnexpectedAttribute,
)
from lazyical.serialization import from_dict, from_json, to_dict, to_json
from lazyical.tokens import LineKind, Token, describe
from lazyical.unfolder import LineUnfolder, LogicalLine

__version__ = "0.1.0"

Source = bytes | bytearray | memoryview | str | IO[bytes] | IO[str]


def _as_stream(source: Source) -> IO[bytes] | IO[str]:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(source)
    if isinstance(source, str):
        return io.StringIO(source)
    return source


def parse(
    source: Source,
    kind: str = CALENDAR_KIND,
    *,
    source_file: str | None = None,
    config: DecodeConfig | None = None,
) -> Token | None:
    """Decode the first block of ``kind`` from calendar data.

    Args:
        source: Raw bytes (bytes, bytearray, memoryview), text, or a readable stream
        kind: Block name to return (default "VCALENDAR")
        source_file: Optional name used in error messages
        config: Decode configuration for this call (uses active config if None)

    Returns:
        The block, a partial tree if the input ends before it closes,
        or None if no block was opened at all.

    Example:
        >>> parse("BEGIN:VEVENT\\nSUMMARY:Hi\\nEND:VEVENT\\n", "VEVENT")
        Token(kind='VEVENT', value='', children=[Token(kind='SUMMARY', ...)], parameters={})
    """
    return _decoder(source, source_file, config).decode(kind).token


def iter_blocks(
    source: Source,
    kind: str = CALENDAR_KIND,
    *,
    source_file: str | None = None,
    config: DecodeConfig | None = None,
) -> Iterator[Token]:
    """Yield every complete block of ``kind`` from calendar data, in order.

    Example:
        >>> data = b"BEGIN:VEVENT\\nUID:1\\nEND:VEVENT\\nBEGIN:VEVENT\\nUID:2\\nEND:VEVENT\\n"
        >>> [e.subtoken("UID").value for e in iter_blocks(data, "VEVENT")]
        ['1', '2']
    """
    return _decoder(source, source_file, config).iter_blocks(kind)


def _decoder(source: Source, source_file: str | None, config: DecodeConfig | None) -> Decoder:
    stream = _as_stream(source)
    if config is None:
        return Decoder(stream, source_file=source_file)
    with decode_config_context(config):
        return Decoder(stream, source_file=source_file)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "iter_blocks",
    # Decoder components
    "Decoder",
    "DecodeResult",
    "DecodeState",
    "CALENDAR_KIND",
    "LineUnfolder",
    "LogicalLine",
    # Tokens
    "Token",
    "LineKind",
    "describe",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "DecodeConfig",
    "get_decode_config",
    "set_decode_config",
    "reset_decode_config",
    "decode_config_context",
    # Errors
    "LazyIcalError",
    "ParseError",
    "MalformedLine",
    "MalformedParameter",
    "UnexpectedAttribute",
    "UnbalancedEnd",
]
