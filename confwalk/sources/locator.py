"""
File Locator

Finds a configuration file by walking upward from a start directory.

Example:
    >>> # cwd = /srv/app/services/api
    >>> find_upwards("config.toml")
    PosixPath('/srv/app/config.toml')

The full relative name is joined to each candidate directory, so nested
default locations such as ``conf/app.toml`` are honored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from confwalk.errors import ConfigFileNotFoundError

logger = logging.getLogger(__name__)


def candidate_directories(start: str | Path | None = None) -> Iterator[Path]:
    """Yield ``start`` and then each parent up to the filesystem root."""
    current = Path(start).resolve() if start is not None else Path.cwd().resolve()
    yield current
    yield from current.parents


def find_upwards(file_name: str | Path, start: str | Path | None = None) -> Path:
    """
    Locate ``file_name`` in ``start`` or the nearest ancestor that has it.

    Args:
        file_name: File name, possibly containing subdirectories. An
            absolute path is checked as-is.
        start: Directory to start from (defaults to the working directory)

    Returns:
        Absolute path of the first match

    Raises:
        ConfigFileNotFoundError: If the root is reached without a match
    """
    name = Path(file_name)
    origin = Path(start) if start is not None else Path.cwd()

    if name.is_absolute():
        if name.is_file():
            return name
        raise ConfigFileNotFoundError(file_name, origin)

    for directory in candidate_directories(origin):
        candidate = directory / name
        if candidate.is_file():
            logger.debug(f"Found {name} in {directory}")
            return candidate
        logger.debug(f"{name} not in {directory}")

    raise ConfigFileNotFoundError(file_name, origin)
