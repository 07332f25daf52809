"""
confwalk - Layered Configuration Resolution

Finds a configuration file by walking up from the working directory,
overlays environment variables, and answers dotted-path queries.

Example:
    >>> from confwalk import ResolvedConfig
    >>> config = ResolvedConfig.from_file("config.toml")
    >>> config.get_string("server.host")
    >>> server = config.get_sub_config("server")
    >>> server.get_int("port")

Main Classes:
    ResolvedConfig: Merged, queryable configuration
    LoadReport: What was loaded and what went wrong

Errors:
    ConfigError and subclasses, see confwalk.errors
"""

__version__ = "0.1.0"

# Public API - lazy imports keep `import confwalk` cheap
def __getattr__(name: str):
    """Lazy import public API components."""

    if name in ("ResolvedConfig", "load_config"):
        from confwalk.config import settings
        return getattr(settings, name)

    if name in ("LoadReport", "ValueKind"):
        from confwalk import types
        return getattr(types, name)

    if name == "find_upwards":
        from confwalk.sources.locator import find_upwards
        return find_upwards

    # Errors
    if name in (
        "ConfigError",
        "ConfigFileNotFoundError",
        "ConfigParseError",
        "UnsupportedFormatError",
        "KeyNotFoundError",
        "TypeMismatchError",
        "DeserializationError",
        "MissingFieldError",
        "FieldTypeMismatchError",
    ):
        from confwalk import errors
        return getattr(errors, name)

    raise AttributeError(f"module 'confwalk' has no attribute {name!r}")


__all__ = [
    # Main classes
    "ResolvedConfig",
    "load_config",
    "LoadReport",
    "ValueKind",
    "find_upwards",

    # Errors
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "UnsupportedFormatError",
    "KeyNotFoundError",
    "TypeMismatchError",
    "DeserializationError",
    "MissingFieldError",
    "FieldTypeMismatchError",

    # Version
    "__version__",
]
