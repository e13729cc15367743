"""Fragment generators for the dashboard view."""

from fragcache.fragments.registry import (
    DEFAULT_PAGE_TITLE,
    Generator,
    GeneratorTable,
    default_generators,
)

__all__ = [
    "DEFAULT_PAGE_TITLE",
    "Generator",
    "GeneratorTable",
    "default_generators",
]
