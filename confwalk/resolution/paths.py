"""
Path Resolver

Interprets dot-delimited keys against a Value Tree.

Resolution order at each level:
    1. Nested tables: if the head segment names a table, descend into it.
    2. Literal flat keys: otherwise (or if descending finds nothing) join the
       remaining segments into progressively longer literal keys
       ("b.c", "b.c.d", ...) and look them up in the current table.

Parser quirk, kept as-is:
    TOML ``[a]`` followed by ``a.b.c = "v"`` puts the dotted key *inside*
    table ``a``, giving a -> a -> b -> c. So ``a.b.c`` is not found while
    ``a.a.b.c`` resolves to "v". A quoted key ``"b.c" = "v"`` under ``[a]``
    is reachable as ``a.b.c`` through the literal fallback.
"""

from __future__ import annotations

from collections.abc import Sequence

from confwalk.errors import KeyNotFoundError
from confwalk.types.values import Table, Value, is_table

SEPARATOR = "."

_MISSING = object()


def split_path(path: str) -> list[str]:
    """
    Split a dotted path into segments.

    Raises:
        KeyNotFoundError: If the path or any segment is empty
    """
    segments = path.split(SEPARATOR)
    if not path or any(not segment for segment in segments):
        raise KeyNotFoundError(path)
    return segments


def resolve_path(table: Table, path: str) -> Value:
    """
    Return the value addressed by ``path``.

    Raises:
        KeyNotFoundError: If nothing in the tree matches
    """
    value = _resolve(table, split_path(path))
    if value is _MISSING:
        raise KeyNotFoundError(path)
    return value  # type: ignore[return-value]


def has_path(table: Table, path: str) -> bool:
    try:
        resolve_path(table, path)
    except KeyNotFoundError:
        return False
    return True


def _resolve(table: Table, segments: Sequence[str]) -> object:
    head = segments[0]

    if len(segments) == 1:
        return table.get(head, _MISSING)

    child = table.get(head, _MISSING)
    if is_table(child):
        found = _resolve(child, segments[1:])
        if found is not _MISSING:
            return found

    # Nested traversal failed; try literal keys containing dots
    for end in range(2, len(segments) + 1):
        literal = table.get(SEPARATOR.join(segments[:end]), _MISSING)
        if literal is _MISSING:
            continue
        if end == len(segments):
            return literal
        if is_table(literal):
            found = _resolve(literal, segments[end:])
            if found is not _MISSING:
                return found

    return _MISSING
