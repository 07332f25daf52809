"""
Configuration System

Resolves settings from a file found by upward search, overlaid with
environment variables.

Configuration Priority (highest to lowest):
    1. Environment variables (optionally filtered by prefix)
    2. .env file beside the config file (opt-in)
    3. Config file (nearest match walking up from the working directory)

Modules:
    settings: ResolvedConfig class and load_config
    deserialize: Mapping trees onto pydantic models and dataclasses
"""

from confwalk.config.deserialize import deserialize, shape_fields
from confwalk.config.settings import ResolvedConfig, load_config

__all__ = ["ResolvedConfig", "load_config", "deserialize", "shape_fields"]
