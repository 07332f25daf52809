"""Tests for dotted-path resolution."""

import pytest

from confwalk.errors import KeyNotFoundError
from confwalk.resolution.paths import has_path, resolve_path, split_path


class TestSplitPath:
    """Tests for split_path."""

    def test_segments(self):
        """Paths split on dots."""
        assert split_path("a.b.c") == ["a", "b", "c"]

    @pytest.mark.parametrize("path", ["", "a..b", ".a", "a."])
    def test_empty_segments_rejected(self, path):
        """Empty paths and segments never resolve."""
        with pytest.raises(KeyNotFoundError):
            split_path(path)


class TestResolvePath:
    """Tests for resolve_path."""

    def test_top_level(self):
        """Single segments look up the root."""
        assert resolve_path({"key": "v"}, "key") == "v"

    def test_nested_tables(self):
        """Each segment descends one table."""
        assert resolve_path({"a": {"k": "v"}}, "a.k") == "v"

    def test_missing_key(self):
        """Unknown paths raise with the full path."""
        with pytest.raises(KeyNotFoundError) as exc_info:
            resolve_path({"a": {"k": "v"}}, "a.x")
        assert exc_info.value.path == "a.x"

    def test_cannot_descend_into_scalar(self):
        """A scalar in the middle of a path does not resolve."""
        with pytest.raises(KeyNotFoundError):
            resolve_path({"a": "scalar"}, "a.b")

    def test_literal_dotted_key(self):
        """A flat key containing dots is found literally."""
        assert resolve_path({"a": {"b.c": 1}}, "a.b.c") == 1

    def test_literal_key_naming_table_continues(self):
        """A literal dotted key that names a table is descended into."""
        assert resolve_path({"a.b": {"c": 2}}, "a.b.c") == 2

    def test_nested_takes_precedence_over_literal(self):
        """When both representations exist, nested tables win."""
        tree = {"a": {"b": 1}, "a.b": 2}
        assert resolve_path(tree, "a.b") == 1

    def test_literal_used_when_nested_branch_fails(self):
        """A nested table without the key falls back to the literal key."""
        tree = {"a": {"x": 1}, "a.b": 2}
        assert resolve_path(tree, "a.b") == 2

    def test_dotted_key_under_same_named_table(self):
        """A dotted key inside table `a` that repeats `a` needs the repeated prefix."""
        # TOML: [a] then a.b.c = "v"
        tree = {"a": {"x": 1, "a": {"b": {"c": "v"}}}}

        with pytest.raises(KeyNotFoundError):
            resolve_path(tree, "a.b.c")
        assert resolve_path(tree, "a.a.b.c") == "v"

    def test_returns_tables(self):
        """A path may end at a table."""
        assert resolve_path({"a": {"b": {"c": 1}}}, "a.b") == {"c": 1}


def test_has_path():
    """has_path mirrors resolve_path without raising."""
    tree = {"a": {"b": 1}}
    assert has_path(tree, "a.b")
    assert not has_path(tree, "a.c")
    assert not has_path(tree, "")
