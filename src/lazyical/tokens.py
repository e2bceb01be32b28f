"""Token and LineKind definitions for lazyical.

A single recursive Token type represents both blocks (BEGIN/END pairs,
which carry children) and attributes (NAME;PARAM=x:value lines, which carry
a value and parameters). Children are owned by their parent only; there are
no back-references, so consumers carry parent context themselves.

Thread Safety:
    A Token is mutated only by the Decoder that builds it and is left
    untouched once handed to the caller. Do not share a tree across threads
    while it is still being decoded.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class LineKind(Enum):
    """Classification of a non-blank logical line."""

    BEGIN = auto()  # BEGIN:<kind>
    END = auto()  # END:<kind>
    ATTRIBUTE = auto()  # <name>[;<param>=<value>]*:<content>


@dataclass(slots=True)
class Token:
    """A block or attribute decoded from a calendar stream.

    Attributes:
        kind: Block name (text after BEGIN:) or attribute name
        value: Raw attribute content; empty for blocks
        children: Nested blocks and attributes in document order
        parameters: Attribute parameters; empty for blocks and for
            attributes without ``;`` segments

    Usage:
            >>> cal = Token("VCALENDAR")
            >>> cal.children.append(Token("VERSION", "2.0"))
            >>> cal.subtoken("VERSION").value
        '2.0'

    """

    kind: str
    value: str = ""
    children: list[Token] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    def subtoken(self, kind: str) -> Token | None:
        """Return the first direct child of the given kind, or None."""
        for child in self.children:
            if child.kind == kind:
                return child
        return None

    def subtokens(self, kind: str) -> list[Token]:
        """Return every direct child of the given kind, in document order."""
        return [child for child in self.children if child.kind == kind]

    def __str__(self) -> str:
        return describe(self)


def describe(token: Token | None) -> str:
    """Render a token and its immediate children for debugging.

    Children are listed as ``KIND=value`` or ``KIND(P=x,Q=y)=value``.
    The output is not calendar markup and cannot be decoded again.

    Example:
        >>> describe(Token("VEVENT", children=[Token("SUMMARY", "Hi")]))
        '<VEVENT: SUMMARY=Hi>'
        >>> describe(None)
        '<NIL: NIL>'
    """
    if token is None:
        return "<NIL: NIL>"

    attrs = []
    for child in token.children:
        if child.parameters:
            params = ",".join(f"{name}={value}" for name, value in child.parameters.items())
            attrs.append(f"{child.kind}({params})={child.value}")
        else:
            attrs.append(f"{child.kind}={child.value}")
    return f"<{token.kind}: {', '.join(attrs)}>"
