"""
Unit tests for the JSON / YAML adapters (polyparse.parsers.document).
"""

from __future__ import annotations

import pytest

from polyparse.exceptions import MalformedInputError
from polyparse.parsers.document import JsonParser, YamlParser, parse_json, parse_yaml
from tests.conftest import DONUT_DATA, DONUT_JSON, DONUT_YAML


class TestParseJson:
    """Tests for parse_json()."""

    def test_object(self):
        assert parse_json('{"a": [1, 2], "b": {"c": null}}') == {"a": [1, 2], "b": {"c": None}}

    def test_top_level_array(self):
        assert parse_json("[1, 2]") == [1, 2]

    def test_donut_document(self):
        assert parse_json(DONUT_JSON) == DONUT_DATA

    @pytest.mark.parametrize("text", ["", "   \n", "null"])
    def test_empty_is_empty_dict(self, text):
        assert parse_json(text) == {}

    def test_invalid(self):
        with pytest.raises(MalformedInputError, match="Failed to parse JSON") as exc_info:
            parse_json('{"a": 1,\n "b": }')
        assert exc_info.value.line == 2

    def test_scalar_rejected(self):
        with pytest.raises(MalformedInputError, match="mapping or a sequence"):
            parse_json("42")

    def test_parser_class(self):
        assert JsonParser().parse('{"k": "v"}') == {"k": "v"}


class TestParseYaml:
    """Tests for parse_yaml()."""

    def test_mapping(self):
        assert parse_yaml("a:\n  b: 1\n  c: [x, y]") == {"a": {"b": 1, "c": ["x", "y"]}}

    def test_sequence(self):
        assert parse_yaml("- x\n- y") == ["x", "y"]

    def test_donut_document(self):
        assert parse_yaml(DONUT_YAML) == DONUT_DATA

    @pytest.mark.parametrize("text", ["", "\n\n", "~", "null"])
    def test_empty_is_empty_dict(self, text):
        assert parse_yaml(text) == {}

    def test_invalid(self):
        with pytest.raises(MalformedInputError, match="Failed to parse YAML") as exc_info:
            parse_yaml("a: [1, 2")
        assert exc_info.value.line is not None

    def test_unsafe_tags_rejected(self):
        with pytest.raises(MalformedInputError):
            parse_yaml("!!python/object/apply:os.system ['echo hi']")

    def test_scalar_rejected(self):
        with pytest.raises(MalformedInputError, match="mapping or a sequence"):
            parse_yaml("just text")

    def test_parser_class(self):
        assert YamlParser().parse("k: v") == {"k": "v"}
