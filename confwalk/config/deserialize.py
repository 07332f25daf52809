"""
Structured Deserialization

Maps a Value Tree onto a caller-defined record shape: a pydantic BaseModel
subclass or a dataclass.

Rules:
    - Fields match top-level keys by name (pydantic aliases honored)
    - Extra keys are ignored
    - A missing required field raises MissingFieldError
    - A field whose type admits None resolves to None when its key is
      missing, even without a default
    - Values are validated in pydantic strict mode at every depth: no
      str/int/bool coercion, ints still widen to float
    - Nested model/dataclass fields follow the same rules one level down

Example:
    >>> class Database(BaseModel):
    ...     host: str
    ...     port: int
    ...     password: str | None
    >>> config.get_sub_config("database").deserialize(Database)
"""

from __future__ import annotations

import dataclasses
import types
import typing
from dataclasses import dataclass
from typing import Any, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from confwalk.errors import FieldTypeMismatchError, MissingFieldError
from confwalk.types.values import Table, clone_value, is_table, kind_of

T = TypeVar("T")

# pydantic error type prefix -> value kind name
_ERROR_KINDS = {
    "string": "string",
    "int": "integer",
    "float": "float",
    "bool": "boolean",
    "list": "array",
    "tuple": "array",
    "set": "array",
    "dict": "table",
    "model": "table",
    "dataclass": "table",
}


@dataclass(frozen=True)
class ShapeField:
    """One field of a target shape."""

    name: str
    key: str
    annotation: Any
    required: bool


def deserialize(table: Table, shape: type[T]) -> T:
    """
    Build an instance of ``shape`` from the top-level keys of ``table``.

    Args:
        table: Resolved tree (root or sub-view)
        shape: pydantic BaseModel subclass or dataclass type

    Returns:
        Validated instance of ``shape``

    Raises:
        MissingFieldError: A required field has no key
        FieldTypeMismatchError: A value has the wrong kind
        TypeError: ``shape`` is neither a model nor a dataclass
    """
    fields = shape_fields(shape)
    data: dict[str, Any] = {}
    for field in fields:
        if field.key in table:
            value = table[field.key]
            nested = _nested_shape(field.annotation)
            if nested is not None and is_table(value):
                data[field.key] = _deserialize_nested(value, nested, field.key)
            else:
                data[field.key] = clone_value(value)
        elif field.required:
            if not admits_none(field.annotation):
                raise MissingFieldError(field.key, shape.__name__)
            data[field.key] = None

    if issubclass(shape, BaseModel):
        try:
            return shape.model_validate(data, strict=True)  # type: ignore[return-value]
        except ValidationError as e:
            raise _translate(e, shape) from e
    return _build_dataclass(shape, fields, data)


def shape_fields(shape: type) -> list[ShapeField]:
    """List the fields of a model or dataclass."""
    if isinstance(shape, type) and issubclass(shape, BaseModel):
        return [
            ShapeField(
                name=name,
                key=info.alias or name,
                annotation=info.annotation,
                required=info.is_required(),
            )
            for name, info in shape.model_fields.items()
        ]

    if isinstance(shape, type) and dataclasses.is_dataclass(shape):
        hints = typing.get_type_hints(shape)
        return [
            ShapeField(
                name=f.name,
                key=f.name,
                annotation=hints.get(f.name, Any),
                required=(
                    f.default is dataclasses.MISSING
                    and f.default_factory is dataclasses.MISSING
                ),
            )
            for f in dataclasses.fields(shape)
            if f.init
        ]

    raise TypeError(
        f"Cannot deserialize into {shape!r}: expected a pydantic model or a dataclass"
    )


def admits_none(annotation: Any) -> bool:
    """True for ``X | None`` / ``Optional[X]`` annotations."""
    if annotation is None or annotation is type(None):
        return True
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return type(None) in typing.get_args(annotation)
    return False


def _build_dataclass(shape: type[T], fields: list[ShapeField], data: dict[str, Any]) -> T:
    # Strict-validate field by field, then call the dataclass constructor
    values: dict[str, Any] = {}
    for field in fields:
        if field.key not in data:
            continue
        try:
            values[field.name] = TypeAdapter(field.annotation).validate_python(
                data[field.key], strict=True
            )
        except ValidationError as e:
            raise _translate(e, shape, prefix=field.key) from e
    return shape(**values)


def _unwrap_optional(annotation: Any) -> Any:
    # Optional[X] -> X; other unions are returned unchanged
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _nested_shape(annotation: Any) -> type | None:
    annotation = _unwrap_optional(annotation)
    if not isinstance(annotation, type):
        return None
    if issubclass(annotation, BaseModel) or dataclasses.is_dataclass(annotation):
        return annotation
    return None


def _deserialize_nested(table: Table, shape: type, key: str) -> Any:
    # Same rules one level down; field names are reported with their parent key
    try:
        return deserialize(table, shape)
    except MissingFieldError as e:
        raise MissingFieldError(f"{key}.{e.field}", e.shape) from e
    except FieldTypeMismatchError as e:
        raise FieldTypeMismatchError(f"{key}.{e.field}", e.expected, e.actual) from e


def _translate(error: ValidationError, shape: type, prefix: str | None = None) -> Exception:
    detail = error.errors()[0]
    parts = [prefix] if prefix else []
    parts.extend(str(part) for part in detail["loc"])
    location = ".".join(parts)

    if detail["type"] == "missing":
        return MissingFieldError(location, shape.__name__)

    expected = _ERROR_KINDS.get(detail["type"].split("_")[0], detail["type"])
    try:
        actual = kind_of(detail["input"]).value
    except TypeError:
        actual = type(detail["input"]).__name__
    return FieldTypeMismatchError(location, expected, actual)
