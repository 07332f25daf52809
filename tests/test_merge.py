"""Tests for overlay merging."""

from confwalk.resolution.merge import merge_trees


class TestMergeTrees:
    """Tests for merge_trees."""

    def test_disjoint_keys_pass_through(self):
        """Keys present on one side only are kept."""
        assert merge_trees({"a": 1}, {"b": "2"}) == {"a": 1, "b": "2"}

    def test_overlay_wins(self):
        """Conflicting keys take the overlay's value."""
        assert merge_trees({"host": "file"}, {"host": "env"}) == {"host": "env"}

    def test_tables_merge_recursively(self):
        """Tables on both sides merge key by key."""
        base = {"db": {"host": "file", "port": 5432}}
        overlay = {"db": {"host": "env"}}
        assert merge_trees(base, overlay) == {"db": {"host": "env", "port": 5432}}

    def test_scalar_overlay_replaces_table(self):
        """A scalar overlay replaces a table outright."""
        assert merge_trees({"db": {"host": "x"}}, {"db": "sqlite"}) == {"db": "sqlite"}

    def test_inputs_are_not_mutated(self):
        """merge_trees is pure."""
        base = {"db": {"hosts": ["a"]}}
        overlay = {"db": {"port": 1}}
        merged = merge_trees(base, overlay)
        merged["db"]["hosts"].append("b")

        assert base == {"db": {"hosts": ["a"]}}
        assert overlay == {"db": {"port": 1}}

    def test_empty_base(self):
        """An empty base yields the overlay."""
        assert merge_trees({}, {"X": "1"}) == {"X": "1"}
