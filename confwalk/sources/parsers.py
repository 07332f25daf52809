"""
File Parsers

Decodes a configuration file into a Value Tree, picking the decoder from the
file suffix.

Formats:
    .toml (and no suffix)  tomllib, or tomli on Python 3.10
    .json                  json
    .yaml / .yml           PyYAML safe_load
    .ini / .cfg            configparser (sections become tables)
"""

from __future__ import annotations

import configparser
import json
from pathlib import Path
from typing import Any

import yaml

# TOML support: tomllib is built-in for Python 3.11+, use tomli for 3.10
try:
    import tomllib
except ImportError:
    import tomli as tomllib

from confwalk.errors import ConfigParseError, UnsupportedFormatError
from confwalk.types.values import Table, normalize_tree

FORMATS = {
    "": "toml",
    ".toml": "toml",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".ini": "ini",
    ".cfg": "ini",
}


def detect_format(path: str | Path) -> str:
    """
    Return the format name for ``path``.

    Raises:
        UnsupportedFormatError: If the suffix is not recognized
    """
    suffix = Path(path).suffix.lower()
    try:
        return FORMATS[suffix]
    except KeyError:
        raise UnsupportedFormatError(path, suffix) from None


def parse_file(path: str | Path) -> Table:
    """
    Decode ``path`` into a normalized Value Tree.

    Raises:
        UnsupportedFormatError: Unknown suffix
        ConfigParseError: The file is unreadable, malformed, or its root is
            not a table
    """
    path = Path(path)
    fmt = detect_format(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(path, f"cannot read file: {e}") from e

    raw = _DECODERS[fmt](path, text)

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigParseError(path, f"root must be a table, got {type(raw).__name__}")

    try:
        return normalize_tree(raw)
    except TypeError as e:
        raise ConfigParseError(path, str(e)) from e


def _decode_toml(path: Path, text: str) -> Any:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(path, f"invalid TOML: {e}") from e


def _decode_json(path: Path, text: str) -> Any:
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(path, f"invalid JSON: {e}") from e


def _decode_yaml(path: Path, text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigParseError(path, f"invalid YAML: {e}") from e


def _decode_ini(path: Path, text: str) -> Any:
    # Keys keep their case; configparser lowercases them by default.
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    try:
        parser.read_string(text, source=str(path))
    except configparser.Error as e:
        raise ConfigParseError(path, f"invalid INI: {e}") from e

    # DEFAULT keys sit at the root and are inherited by every section.
    result: dict[str, Any] = dict(parser.defaults())
    for section in parser.sections():
        result[section] = dict(parser.items(section))
    return result


_DECODERS = {
    "toml": _decode_toml,
    "json": _decode_json,
    "yaml": _decode_yaml,
    "ini": _decode_ini,
}
