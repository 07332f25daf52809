"""
Error Types

Exception hierarchy shared by every confwalk module.

Policy:
    - ConfigFileNotFoundError is fatal: it propagates out of construction.
    - ConfigParseError is caught during construction, logged and recorded
      in the LoadReport; the config continues with an empty file tree.
    - Lookup and deserialization errors are raised to the caller, who
      decides on a fallback.

Callers can catch ConfigError to handle every library failure uniformly.
"""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Base class for all confwalk errors."""


# -----------------------------------------------------------------------------
# Loading
# -----------------------------------------------------------------------------


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """The configuration file was not found from the start directory up to the root."""

    def __init__(self, file_name: str | Path, start: str | Path) -> None:
        self.file_name = str(file_name)
        self.start = str(start)
        super().__init__(
            f"{self.file_name} not found in {self.start} or any parent directory"
        )

    def __str__(self) -> str:
        return self.args[0]


class ConfigParseError(ConfigError, ValueError):
    """A located configuration file could not be decoded into a table."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid configuration file {self.path}: {reason}")


class UnsupportedFormatError(ConfigParseError):
    """The file suffix does not map to a known decoder."""

    def __init__(self, path: str | Path, suffix: str) -> None:
        self.suffix = suffix
        super().__init__(path, f"unsupported format '{suffix}'")


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class KeyNotFoundError(ConfigError, LookupError):
    """A dotted path did not resolve to a value."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"configuration property {path!r} not found")

    def __str__(self) -> str:
        return self.args[0]


class TypeMismatchError(ConfigError, TypeError):
    """A resolved value has a different kind than the accessor requires."""

    def __init__(self, path: str, expected: str, actual: str) -> None:
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"invalid type for {path!r}: expected {expected}, found {actual}"
        )


# -----------------------------------------------------------------------------
# Deserialization
# -----------------------------------------------------------------------------


class DeserializationError(ConfigError):
    """Base class for failures mapping a tree into a record shape."""


class MissingFieldError(DeserializationError):
    """A required field of the target shape has no matching key."""

    def __init__(self, field: str, shape: str | None = None) -> None:
        self.field = field
        self.shape = shape
        where = f" for {shape}" if shape else ""
        super().__init__(f"missing field {field!r}{where}")


class FieldTypeMismatchError(DeserializationError, TypeError):
    """A field's value does not have the kind the target shape declares."""

    def __init__(self, field: str, expected: str, actual: str) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"invalid type for field {field!r}: expected {expected}, found {actual}"
        )
