"""
Value Tree

The generic data model every decoder output is normalized into.

A Value is one of:
    - str, int, float, bool (scalars)
    - list[Value] (array)
    - dict[str, Value] (table)

Plain Python containers are used so trees interoperate with tomllib, json
and yaml output directly. ``kind_of`` gives the tagged view.
"""

from __future__ import annotations

import copy
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Union

Value = Union[str, int, float, bool, list["Value"], dict[str, "Value"]]
Table = dict[str, Value]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ValueKind(str, Enum):
    """Kind of a Value Tree node."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ARRAY = "array"
    TABLE = "table"


def kind_of(value: Any) -> ValueKind:
    """
    Classify a value.

    bool is checked before int since it is an int subclass.

    Raises:
        TypeError: If the value is not part of the data model
    """
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.TABLE
    raise TypeError(f"Unsupported configuration value type: {type(value).__name__}")


def is_table(value: Any) -> bool:
    """True for table nodes."""
    return isinstance(value, dict)


def normalize_tree(raw: dict[Any, Any]) -> Table:
    """
    Convert decoder output into a pure Value Tree.

    - keys become str
    - datetime/date/time become ISO-8601 strings
    - None entries are dropped
    - tuples become lists

    Raises:
        TypeError: On integers outside the signed 64-bit range or
            objects outside the data model
    """
    return {str(key): _normalize(value) for key, value in raw.items() if value is not None}


def _normalize(value: Any) -> Value:
    if isinstance(value, dict):
        return normalize_tree(value)
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value if item is not None]
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if not INT64_MIN <= value <= INT64_MAX:
            raise TypeError(f"Integer {value} does not fit in 64 bits")
        return value
    if isinstance(value, (float, str)):
        return value
    raise TypeError(f"Unsupported configuration value type: {type(value).__name__}")


def clone_table(table: Table) -> Table:
    """Return a deep copy that shares no containers with ``table``."""
    return copy.deepcopy(table)


def clone_value(value: Value) -> Value:
    # Scalars are immutable; only containers need copying.
    if isinstance(value, (dict, list)):
        return copy.deepcopy(value)
    return value
