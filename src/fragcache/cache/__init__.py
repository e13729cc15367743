"""Cache subsystem — in-memory memoization of static dashboard fragments."""

from fragcache.cache.stats import CacheEntry, CacheStats, KeyHits
from fragcache.cache.store import FragmentCache, resolve_key

__all__ = [
    "FragmentCache",
    "CacheEntry",
    "CacheStats",
    "KeyHits",
    "resolve_key",
]
