"""
Data Types

Value Tree model and load bookkeeping.

Modules:
    values: Value kinds, normalization and cloning
    report: LoadReport pydantic model
"""

from confwalk.types.report import LoadReport
from confwalk.types.values import (
    Table,
    Value,
    ValueKind,
    clone_table,
    clone_value,
    is_table,
    kind_of,
    normalize_tree,
)

__all__ = [
    "LoadReport",
    "Table",
    "Value",
    "ValueKind",
    "clone_table",
    "clone_value",
    "is_table",
    "kind_of",
    "normalize_tree",
]
