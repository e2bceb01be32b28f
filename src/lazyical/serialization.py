"""JSON snapshots of Token trees.

Converts decoded trees to/from JSON-compatible dicts. Useful for:
- Caching decoded records to disk
- Comparing trees in tests
- Debugging and inspection

This is a dict/JSON view of the tree, not calendar markup.
Output is deterministic (sorted keys). Both directions walk the tree with
an explicit stack, so depth is limited by memory only.

Example:
    from lazyical import parse
    from lazyical.serialization import to_json, from_json

    cal = parse(b"BEGIN:VCALENDAR\\nVERSION:2.0\\nEND:VCALENDAR\\n")
    assert from_json(to_json(cal)) == cal

"""

import json
from typing import Any

from lazyical.tokens import Token


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token tree to a JSON-compatible dict.

    Args:
        token: Root of the tree.

    Returns:
        Dict with ``kind``, ``value``, ``parameters`` and ``children``.

    """
    root = _shallow_dict(token)
    pending = [(token, root)]
    while pending:
        tok, out = pending.pop()
        for child in tok.children:
            child_out = _shallow_dict(child)
            out["children"].append(child_out)
            pending.append((child, child_out))
    return root


def _shallow_dict(token: Token) -> dict[str, Any]:
    return {
        "kind": token.kind,
        "value": token.value,
        "parameters": dict(token.parameters),
        "children": [],
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token tree from a dict produced by to_dict.

    Raises:
        ValueError: If a node has no ``kind``.

    """
    root = _shallow_token(data)
    pending = [(data, root)]
    while pending:
        raw, tok = pending.pop()
        for child_raw in raw.get("children", ()):
            child = _shallow_token(child_raw)
            tok.children.append(child)
            pending.append((child_raw, child))
    return root


def _shallow_token(data: dict[str, Any]) -> Token:
    kind = data.get("kind")
    if kind is None:
        msg = "Missing 'kind' field in serialized token"
        raise ValueError(msg)
    return Token(
        kind,
        data.get("value", ""),
        parameters=dict(data.get("parameters", {})),
    )


def to_json(token: Token, *, indent: int | None = None) -> str:
    """Serialize a token tree to a JSON string.

    Args:
        token: Root of the tree.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(token), sort_keys=True, indent=indent)


def from_json(data: str) -> Token:
    """Deserialize a token tree from a JSON string (as produced by to_json).

    Raises:
        ValueError: If the JSON is not a serialized token.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)
