"""
Environment Snapshot

Captures process environment variables once, as a flat table of
string-valued top-level keys. Names are matched case-sensitively against
dotted lookups.

Example:
    >>> snap = snapshot_environment({"APP_PORT": "8080", "HOME": "/root"}, prefix="APP_")
    >>> snap.values
    {'PORT': '8080'}
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """Flat key/value view of the environment at one point in time."""

    values: dict[str, str] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)
    dotenv_path: str | None = None

    def __len__(self) -> int:
        return len(self.values)


def snapshot_environment(
    environ: Mapping[Any, Any] | None = None,
    prefix: str | None = None,
    dotenv_path: str | Path | None = None,
) -> EnvironmentSnapshot:
    """
    Snapshot environment variables into a flat table.

    Args:
        environ: Mapping to read (defaults to os.environ)
        prefix: Keep only variables starting with this prefix, stripped
        dotenv_path: Optional .env file layered beneath ``environ``

    Returns:
        EnvironmentSnapshot with the accepted and skipped keys
    """
    source = os.environ if environ is None else environ
    values: dict[str, str] = {}
    skipped: list[str] = []
    loaded_dotenv: str | None = None

    if dotenv_path is not None and Path(dotenv_path).is_file():
        loaded_dotenv = str(dotenv_path)
        for key, value in dotenv_values(dotenv_path).items():
            _accept(values, skipped, key, value, prefix)
        logger.debug(f"Read {len(values)} keys from {dotenv_path}")

    # Process environment wins over .env entries
    for key, value in dict(source).items():
        _accept(values, skipped, key, value, prefix)

    if skipped:
        logger.debug(f"Skipped environment entries: {skipped}")
    logger.debug(f"Environment snapshot holds {len(values)} keys")

    return EnvironmentSnapshot(values=values, skipped=skipped, dotenv_path=loaded_dotenv)


def _accept(
    values: dict[str, str],
    skipped: list[str],
    key: Any,
    value: Any,
    prefix: str | None,
) -> None:
    if not isinstance(key, str) or not isinstance(value, str):
        skipped.append(str(key))
        return
    if prefix:
        if not key.startswith(prefix):
            return
        key = key[len(prefix):]
        if not key:
            skipped.append(prefix)
            return
    values[key] = value
