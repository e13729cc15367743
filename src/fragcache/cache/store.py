"""In-memory fragment cache with at-most-once generation per key."""

from __future__ import annotations

import logging
from collections.abc import Callable

from fragcache.cache.stats import (
    CacheEntry,
    CacheStats,
    compute_hit_rate,
    now_ms,
    rank_by_hits,
)
from fragcache.errors.exceptions import UnknownFragmentKeyError
from fragcache.fragments.registry import GeneratorTable, default_generators
from fragcache.types import ALL_FRAGMENT_KEYS, FragmentKey

logger = logging.getLogger(__name__)


def resolve_key(key: FragmentKey | str) -> FragmentKey:
    """Coerce a key or its string value to a FragmentKey."""
    if isinstance(key, FragmentKey):
        return key
    try:
        return FragmentKey(key)
    except ValueError:
        raise UnknownFragmentKeyError(key) from None


class FragmentCache:
    """Memoizes the static dashboard fragments.

    Each key's generator runs at most once until the key is invalidated
    or the cache is cleared. Lookups are counted as hits or misses; a
    prewarm generation counts as a miss, the same as a first lookup.
    """

    def __init__(
        self,
        generators: GeneratorTable | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._generators = generators if generators is not None else default_generators()
        self._clock = clock
        self._store: dict[FragmentKey, CacheEntry] = {}
        self._hits = 0
        self._misses = 0

    @property
    def generators(self) -> GeneratorTable:
        return self._generators

    def get(self, key: FragmentKey | str) -> str:
        """Return the fragment for key, generating it on first use."""
        key = resolve_key(key)
        entry = self._store.get(key)
        if entry is not None:
            entry.hit_count += 1
            self._hits += 1
            return entry.content

        entry = self._generate(key)
        self._misses += 1
        logger.debug("Fragment cache miss: %s (%d bytes)", key.value, entry.size_bytes)
        return entry.content

    def has(self, key: FragmentKey | str) -> bool:
        return resolve_key(key) in self._store

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            return self.has(key)
        except UnknownFragmentKeyError:
            return False

    def prewarm(self) -> int:
        """Generate every fragment not already cached. Returns count generated."""
        generated = 0
        for key in ALL_FRAGMENT_KEYS:
            if key in self._store:
                continue
            self._generate(key)
            self._misses += 1
            generated += 1
        logger.debug("Prewarmed %d fragment(s), %d cached", generated, len(self._store))
        return generated

    def invalidate(self, key: FragmentKey | str) -> bool:
        """Drop one entry. Returns True if it was cached."""
        key = resolve_key(key)
        removed = self._store.pop(key, None) is not None
        if removed:
            logger.debug("Invalidated fragment: %s", key.value)
        return removed

    def clear(self) -> None:
        """Drop all entries and reset the hit/miss counters."""
        self._store.clear()
        self._hits = 0
        self._misses = 0
        logger.debug("Fragment cache cleared")

    def get_entry(self, key: FragmentKey | str) -> CacheEntry | None:
        """Snapshot of the stored entry, without counting a lookup."""
        entry = self._store.get(resolve_key(key))
        return entry.model_copy() if entry is not None else None

    def keys(self) -> list[FragmentKey]:
        return list(self._store)

    def size(self) -> int:
        return len(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def stats(self) -> CacheStats:
        """Return aggregate cache statistics."""
        return CacheStats(
            entry_count=len(self._store),
            total_hits=self._hits,
            total_misses=self._misses,
            total_size_bytes=sum(e.size_bytes for e in self._store.values()),
            hit_rate=compute_hit_rate(self._hits, self._misses),
            entries_by_hits=rank_by_hits(self._store),
        )

    def _generate(self, key: FragmentKey) -> CacheEntry:
        # Generator errors propagate before anything is stored.
        content = self._generators[key]()
        entry = CacheEntry(content=content, created_at=self._clock())
        self._store[key] = entry
        return entry
