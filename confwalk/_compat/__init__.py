"""
Compatibility Layer

Deprecated entry points kept for code written against the first API.

Modules:
    legacy: ConfigHelper facade with migration guidance
"""

from confwalk._compat.legacy import ConfigHelper

__all__ = ["ConfigHelper"]
