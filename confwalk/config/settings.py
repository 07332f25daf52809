"""
ResolvedConfig - Configuration Resolution

One source of truth for application settings without hardcoding a path.

Resolution (highest to lowest priority):
    1. Environment variables (flat top-level keys, optionally prefixed)
    2. .env file next to the config file (opt-in)
    3. Config file found by walking up from the working directory

Example:
    >>> config = ResolvedConfig.from_file("config.toml")
    >>> config.get_string("database.host")
    'localhost'
    >>> config.get_float("database.timeout")   # integer 5 widens to 5.0
    5.0

    >>> # Scoped view, independent of the parent
    >>> db = config.get_sub_config("database")
    >>> db.get_int("port")
    5432

    >>> # Structured
    >>> db.deserialize(DatabaseSettings)

Errors:
    ConfigFileNotFoundError - fatal, raised by from_file
    ConfigParseError        - non-fatal, logged and recorded in ``report``
    KeyNotFoundError        - path did not resolve
    TypeMismatchError       - value has a different kind
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Any, TypeVar

from confwalk.config.deserialize import deserialize as _deserialize
from confwalk.errors import ConfigParseError, KeyNotFoundError, TypeMismatchError
from confwalk.resolution.merge import merge_trees
from confwalk.resolution.paths import has_path, resolve_path
from confwalk.sources.environment import snapshot_environment
from confwalk.sources.locator import find_upwards
from confwalk.sources.parsers import detect_format, parse_file
from confwalk.types.report import LoadReport
from confwalk.types.values import (
    Table,
    Value,
    ValueKind,
    clone_table,
    clone_value,
    kind_of,
    normalize_tree,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NO_DEFAULT: Any = object()


class ResolvedConfig:
    """
    Immutable, queryable configuration tree.

    Attributes:
        report: How the tree was loaded (file, errors, environment keys)
        root_path: Dotted path of this tree within the original one
            ("" for the top level)
    """

    def __init__(
        self,
        table: Mapping[str, Any] | None = None,
        *,
        report: LoadReport | None = None,
        root_path: str = "",
    ) -> None:
        """
        Wrap an existing tree. The tree is normalized and copied.

        Args:
            table: Root table (decoder output or plain dicts)
            report: Load report to attach
            root_path: Position of ``table`` in its parent tree
        """
        self._table: Table = normalize_tree(dict(table or {}))
        self.report = report if report is not None else LoadReport()
        self.root_path = root_path

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_file(
        cls,
        file_name: str | Path,
        *,
        start: str | Path | None = None,
        use_env: bool = True,
        env_prefix: str | None = None,
        environ: Mapping[str, str] | None = None,
        dotenv: bool = False,
    ) -> "ResolvedConfig":
        """
        Locate, parse and merge a configuration.

        Args:
            file_name: Name to search for, may contain subdirectories
            start: Directory to start the upward search from (default cwd)
            use_env: Overlay environment variables on the file tree
            env_prefix: Only use variables with this prefix (stripped)
            environ: Mapping to use instead of os.environ
            dotenv: Layer a .env file next to the config file beneath
                the environment

        Returns:
            ResolvedConfig for the merged tree

        Raises:
            ConfigFileNotFoundError: No file up to the filesystem root
        """
        path = find_upwards(file_name, start)
        report = LoadReport(file_path=str(path))

        file_tree: Table = {}
        try:
            report.file_format = detect_format(path)
            file_tree = parse_file(path)
            report.file_loaded = True
            logger.info(f"Config loaded: {path}")
        except ConfigParseError as e:
            # Non-fatal: continue with whatever the other layers provide
            logger.error(f"Failed to load config: {e}")
            report.errors.append(str(e))

        if not use_env:
            return cls._adopt(file_tree, report)

        snapshot = snapshot_environment(
            environ,
            prefix=env_prefix,
            dotenv_path=path.parent / ".env" if dotenv else None,
        )
        report.env_keys = len(snapshot)
        report.skipped_env_keys = list(snapshot.skipped)
        report.dotenv_path = snapshot.dotenv_path

        return cls._adopt(merge_trees(file_tree, snapshot.values), report)

    @classmethod
    def _adopt(cls, table: Table, report: LoadReport, root_path: str = "") -> "ResolvedConfig":
        # Takes ownership of an already-normalized tree without copying it again
        config = cls.__new__(cls)
        config._table = table
        config.report = report
        config.root_path = root_path
        return config

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, path: str, default: Any = _NO_DEFAULT) -> Value:
        """Return the raw value at ``path`` (containers are copies)."""
        try:
            return clone_value(self._resolve(path))
        except KeyNotFoundError:
            if default is _NO_DEFAULT:
                raise
            return default

    def get_string(self, path: str, default: Any = _NO_DEFAULT) -> str:
        """Return a string value. No conversion from other kinds."""
        return self._typed(path, (ValueKind.STRING,), default)

    def get_int(self, path: str, default: Any = _NO_DEFAULT) -> int:
        """Return an integer value. Floats are not narrowed."""
        return self._typed(path, (ValueKind.INTEGER,), default)

    def get_float(self, path: str, default: Any = _NO_DEFAULT) -> float:
        """Return a float value; integers are widened."""
        return self._typed(path, (ValueKind.INTEGER, ValueKind.FLOAT), default, convert=float)

    def get_bool(self, path: str, default: Any = _NO_DEFAULT) -> bool:
        """Return a boolean value. Integers and strings are not converted."""
        return self._typed(path, (ValueKind.BOOLEAN,), default)

    def get_array(self, path: str, default: Any = _NO_DEFAULT) -> list[str]:
        """
        Return an array as a list of strings.

        Numbers are rendered with str() and booleans as "true"/"false".
        An empty array gives an empty list.

        Raises:
            KeyNotFoundError: Path not found and no default given
            TypeMismatchError: Not an array, or an element is not a scalar
        """
        try:
            value = self._resolve(path)
        except KeyNotFoundError:
            if default is _NO_DEFAULT:
                raise
            return default

        actual = kind_of(value)
        if actual is not ValueKind.ARRAY:
            raise TypeMismatchError(self._full(path), ValueKind.ARRAY.value, actual.value)

        items: list[str] = []
        for index, item in enumerate(value):  # type: ignore[arg-type]
            item_kind = kind_of(item)
            if item_kind is ValueKind.BOOLEAN:
                items.append("true" if item else "false")
            elif item_kind in (ValueKind.STRING, ValueKind.INTEGER, ValueKind.FLOAT):
                items.append(str(item))
            else:
                raise TypeMismatchError(
                    f"{self._full(path)}[{index}]", ValueKind.STRING.value, item_kind.value
                )
        return items

    def get_table(self, path: str, default: Any = _NO_DEFAULT) -> dict[str, Value]:
        """Return a copy of the table at ``path``."""
        return clone_value(self._typed(path, (ValueKind.TABLE,), default))  # type: ignore[return-value]

    def has(self, path: str) -> bool:
        """Whether ``path`` resolves to a value."""
        return has_path(self._table, path)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.has(path)

    def keys(self) -> list[str]:
        """Top-level keys."""
        return list(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._table)

    def as_dict(self) -> dict[str, Value]:
        """Deep copy of the whole tree."""
        return clone_table(self._table)

    # -------------------------------------------------------------------------
    # Scoping and structure
    # -------------------------------------------------------------------------

    def get_sub_config(self, path: str) -> "ResolvedConfig":
        """
        Extract the table at ``path`` as an independent config.

        The view owns a deep copy: later changes to the parent's data do not
        reach it, and paths on the view are relative to the table.

        Raises:
            KeyNotFoundError: Path not found
            TypeMismatchError: Path is not a table
        """
        value = self._resolve(path)
        actual = kind_of(value)
        if actual is not ValueKind.TABLE:
            raise TypeMismatchError(self._full(path), ValueKind.TABLE.value, actual.value)

        logger.debug(f"Extracted sub-config {self._full(path)!r}")
        return self._adopt(
            clone_table(value),  # type: ignore[arg-type]
            self.report,
            root_path=self._full(path),
        )

    def deserialize(self, shape: type[T]) -> T:
        """
        Map the top-level keys of this tree onto ``shape``.

        See confwalk.config.deserialize for the matching rules.
        """
        return _deserialize(self._table, shape)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _resolve(self, path: str) -> Value:
        try:
            return resolve_path(self._table, path)
        except KeyNotFoundError:
            raise KeyNotFoundError(self._full(path)) from None

    def _typed(
        self,
        path: str,
        kinds: tuple[ValueKind, ...],
        default: Any,
        convert: Callable[[Any], Any] | None = None,
    ) -> Any:
        # convert only runs on values found in the tree, never on the default
        try:
            value = self._resolve(path)
        except KeyNotFoundError:
            if default is _NO_DEFAULT:
                raise
            return default
        actual = kind_of(value)
        if actual not in kinds:
            expected = " or ".join(kind.value for kind in kinds)
            raise TypeMismatchError(self._full(path), expected, actual.value)
        return convert(value) if convert is not None else value

    def _full(self, path: str) -> str:
        return f"{self.root_path}.{path}" if self.root_path else path

    def __repr__(self) -> str:
        where = self.report.file_path or "<memory>"
        scope = f", root_path={self.root_path!r}" if self.root_path else ""
        return f"ResolvedConfig({where}{scope}, keys={len(self._table)})"


def load_config(file_name: str | Path, **kwargs: Any) -> ResolvedConfig:
    """Shorthand for ResolvedConfig.from_file."""
    return ResolvedConfig.from_file(file_name, **kwargs)
