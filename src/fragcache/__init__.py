"""fragcache — memoized static fragments for a task dashboard view."""

from fragcache.builder import BuilderOptions, DashboardBuilder, build_dashboard_html
from fragcache.cache import CacheEntry, CacheStats, FragmentCache, KeyHits
from fragcache.core import Dashboard
from fragcache.errors import FragCacheError, GeneratorTableError, UnknownFragmentKeyError
from fragcache.fragments import GeneratorTable, default_generators
from fragcache.types import ALL_FRAGMENT_KEYS, FragmentKey

__version__ = "0.5.0"

__all__ = [
    "ALL_FRAGMENT_KEYS",
    "BuilderOptions",
    "CacheEntry",
    "CacheStats",
    "Dashboard",
    "DashboardBuilder",
    "FragCacheError",
    "FragmentCache",
    "FragmentKey",
    "GeneratorTable",
    "GeneratorTableError",
    "KeyHits",
    "UnknownFragmentKeyError",
    "build_dashboard_html",
    "default_generators",
]
