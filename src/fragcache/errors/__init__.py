"""Error handling — exception hierarchy for the fragment cache."""

from fragcache.errors.exceptions import (
    ConfigError,
    FragCacheError,
    GeneratorTableError,
    UnknownFragmentKeyError,
)

__all__ = [
    "ConfigError",
    "FragCacheError",
    "UnknownFragmentKeyError",
    "GeneratorTableError",
]
