"""
Resolution

Layer merging and dotted-path addressing over Value Trees.

Modules:
    merge: Overlay merge (overlay wins, tables merge recursively)
    paths: Dotted-path resolver with literal-key fallback
"""

from confwalk.resolution.merge import merge_trees
from confwalk.resolution.paths import has_path, resolve_path, split_path

__all__ = ["merge_trees", "has_path", "resolve_path", "split_path"]
