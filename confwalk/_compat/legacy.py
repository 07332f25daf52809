"""
Legacy ConfigHelper

The first-generation API: a file-only helper exposing get_value and
get_array. It delegates to ResolvedConfig.
"""

from __future__ import annotations

import warnings
from pathlib import Path

from confwalk.config.settings import ResolvedConfig


class ConfigHelper:
    """
    DEPRECATED: Use ResolvedConfig instead.

    Migration:
        # Before
        helper = ConfigHelper("config.toml")
        helper.get_value("key1")

        # After
        config = ResolvedConfig.from_file("config.toml", use_env=False)
        config.get_string("key1")
    """

    def __init__(self, file_name: str | Path) -> None:
        warnings.warn(
            "ConfigHelper is deprecated. Use ResolvedConfig.from_file() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        # The first generation never read the environment
        self._config = ResolvedConfig.from_file(file_name, use_env=False)

    def get_value(self, key: str) -> str:
        """DEPRECATED: Use ResolvedConfig.get_string()."""
        return self._config.get_string(key)

    def get_array(self, key: str) -> list[str]:
        return self._config.get_array(key)
