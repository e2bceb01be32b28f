"""Tests for lazyical.serialization: token tree JSON round-trip."""

import io
import json

import pytest

from lazyical.decoder import Decoder
from lazyical.serialization import from_dict, from_json, to_dict, to_json
from lazyical.tokens import Token


class TestToDict:
    """Dict form of a token tree."""

    def test_attribute(self) -> None:
        tok = Token("DTEND", "20160919T123000", parameters={"TZID": "America/Los_Angeles"})
        assert to_dict(tok) == {
            "kind": "DTEND",
            "value": "20160919T123000",
            "parameters": {"TZID": "America/Los_Angeles"},
            "children": [],
        }

    def test_children_keep_order(self) -> None:
        tok = Token("A", children=[Token("X", "1"), Token("B", children=[Token("Y", "2")]), Token("Z", "3")])
        data = to_dict(tok)
        assert [child["kind"] for child in data["children"]] == ["X", "B", "Z"]
        assert data["children"][1]["children"][0]["value"] == "2"

    def test_dict_is_a_copy(self) -> None:
        tok = Token("X", parameters={"P": "1"})
        to_dict(tok)["parameters"]["P"] = "changed"
        assert tok.parameters == {"P": "1"}


class TestRoundTrip:
    """to_json/from_json restore an equal tree."""

    def test_calendar_round_trip(self, calendar_stream: io.BytesIO) -> None:
        cal = Decoder(calendar_stream).decode("VCALENDAR").token
        assert from_json(to_json(cal)) == cal

    def test_deep_tree(self) -> None:
        root = Token("L0")
        node = root
        for i in range(1, 3000):
            child = Token(f"L{i}")
            node.children.append(child)
            node = child
        restored = from_dict(to_dict(root))
        for i in range(1, 3000):
            (restored,) = restored.children
            assert restored.kind == f"L{i}"
        assert restored.children == []

    def test_json_is_deterministic(self) -> None:
        tok = Token("X", "v", parameters={"B": "2", "A": "1"})
        assert to_json(tok) == to_json(from_json(to_json(tok)))
        assert to_json(tok).index('"A"') < to_json(tok).index('"B"')

    def test_indent(self) -> None:
        assert "\n" in to_json(Token("X"), indent=2)


class TestFromDictErrors:
    """Malformed snapshots are rejected."""

    def test_missing_kind(self) -> None:
        with pytest.raises(ValueError, match="kind"):
            from_dict({"value": "x"})

    def test_missing_kind_in_child(self) -> None:
        with pytest.raises(ValueError, match="kind"):
            from_dict({"kind": "A", "children": [{"value": "x"}]})

    def test_non_object_json(self) -> None:
        with pytest.raises(ValueError, match="JSON object"):
            from_json(json.dumps(["kind", "A"]))

    def test_optional_fields_default(self) -> None:
        assert from_dict({"kind": "A"}) == Token("A")
