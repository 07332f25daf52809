"""
Configuration Sources

Where raw configuration comes from.

Modules:
    locator: Upward search for the configuration file
    parsers: TOML/JSON/YAML/INI decoding into a Value Tree
    environment: One-time snapshot of environment variables (and .env)
"""

from confwalk.sources.environment import EnvironmentSnapshot, snapshot_environment
from confwalk.sources.locator import candidate_directories, find_upwards
from confwalk.sources.parsers import detect_format, parse_file

__all__ = [
    "EnvironmentSnapshot",
    "snapshot_environment",
    "candidate_directories",
    "find_upwards",
    "detect_format",
    "parse_file",
]
