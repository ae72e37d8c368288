"""
Laragen utilities.
"""

from laragen.utils.defaults import (
    DEFAULT_LEGACY,
    DEFAULT_PSR12,
    GenerationDefaults,
    get_defaults,
)

__all__ = [
    "GenerationDefaults",
    "DEFAULT_LEGACY",
    "DEFAULT_PSR12",
    "get_defaults",
]
