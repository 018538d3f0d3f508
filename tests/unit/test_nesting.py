"""
Unit tests for the Dotted-Key Unnester (polyparse.transforms.nesting).

Covers plain expansion, sibling merging, recursion into sections,
and StructureConflictError for incompatible paths.
"""

from __future__ import annotations

import pytest

from polyparse.exceptions import StructureConflictError
from polyparse.transforms.nesting import unnest


class TestUnnest:
    """Tests for unnest() on well-formed input."""

    def test_single_dot(self):
        assert unnest({"0.name": "Adam"}) == {"0": {"name": "Adam"}}

    def test_multiple_dots(self):
        assert unnest({"0.name.first": "Adam"}) == {"0": {"name": {"first": "Adam"}}}

    def test_siblings_merged(self):
        flat = {"a.b": "1", "a.c": "2", "a.d.e": "3"}
        assert unnest(flat) == {"a": {"b": "1", "c": "2", "d": {"e": "3"}}}

    def test_plain_keys_pass_through(self):
        assert unnest({"x": "1", "y": ["a", "b"]}) == {"x": "1", "y": ["a", "b"]}

    def test_numeric_segments_stay_string_keys(self):
        result = unnest({"list.0": "a", "list.1": "b"})
        assert result == {"list": {"0": "a", "1": "b"}}

    def test_recurses_into_sections(self):
        flat = {"section": {"a.b": "1", "plain": "2"}}
        assert unnest(flat) == {"section": {"a": {"b": "1"}, "plain": "2"}}

    def test_dotted_key_merges_into_section(self):
        flat = {"a": {"x": "1"}, "a.y": "2"}
        assert unnest(flat) == {"a": {"x": "1", "y": "2"}}

    def test_dotted_section_merges_with_dotted_key(self):
        flat = {"a.b.c": "1", "a.b": {"d": "2"}}
        assert unnest(flat) == {"a": {"b": {"c": "1", "d": "2"}}}

    def test_lists_untouched(self):
        assert unnest({"a.b": [1, 2]}) == {"a": {"b": [1, 2]}}

    def test_custom_separator(self):
        assert unnest({"a/b": "1"}, separator="/") == {"a": {"b": "1"}}

    def test_input_not_mutated(self):
        flat = {"a.b": "1", "s": {"c.d": "2"}}
        unnest(flat)
        assert flat == {"a.b": "1", "s": {"c.d": "2"}}

    def test_empty(self):
        assert unnest({}) == {}


class TestUnnestConflicts:
    """Incompatible dotted paths raise StructureConflictError."""

    def test_scalar_then_nested(self):
        with pytest.raises(StructureConflictError) as exc_info:
            unnest({"a": "1", "a.b": "2"})
        assert exc_info.value.path == "a"

    def test_nested_then_scalar(self):
        with pytest.raises(StructureConflictError) as exc_info:
            unnest({"a.b": "2", "a": "1"})
        assert exc_info.value.path == "a"

    def test_deep_conflict_reports_path(self):
        with pytest.raises(StructureConflictError, match="a.b") as exc_info:
            unnest({"a.b": "1", "a.b.c": "2"})
        assert exc_info.value.path == "a.b"

    def test_same_leaf_assigned_twice(self):
        with pytest.raises(StructureConflictError) as exc_info:
            unnest({"a": {"b": "1"}, "a.b": "2"})
        assert exc_info.value.path == "a.b"
