"""
Source Merger

Overlays one Value Tree on another. The overlay wins on conflicting keys;
tables present on both sides merge recursively.
"""

from __future__ import annotations

from collections.abc import Mapping

from confwalk.types.values import Table, clone_value, is_table


def merge_trees(base: Mapping[str, object], overlay: Mapping[str, object]) -> Table:
    """
    Merge ``overlay`` on top of ``base``.

    Neither input is mutated and the result shares no containers with them.

    Args:
        base: Tree parsed from the configuration file
        overlay: Tree taking precedence (e.g. environment variables)

    Returns:
        New merged table
    """
    result: Table = {key: clone_value(value) for key, value in base.items()}  # type: ignore[arg-type]

    for key, value in overlay.items():
        current = result.get(key)
        if is_table(current) and isinstance(value, Mapping):
            result[key] = merge_trees(current, value)
        else:
            result[key] = clone_value(value)  # type: ignore[arg-type]

    return result

