"""Cache entry and statistics models."""

from __future__ import annotations

import time

from pydantic import BaseModel, Field

from fragcache.types import FragmentKey


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class CacheEntry(BaseModel):
    """A materialized fragment."""

    content: str
    created_at: int = Field(default_factory=now_ms)
    hit_count: int = 0

    @property
    def size_bytes(self) -> int:
        return len(self.content.encode("utf-8"))


class KeyHits(BaseModel):
    key: FragmentKey
    hit_count: int


class CacheStats(BaseModel):
    """Snapshot of cache contents and lookup counters."""

    entry_count: int = 0
    total_hits: int = 0
    total_misses: int = 0
    total_size_bytes: int = 0
    hit_rate: float = 0.0  # percentage, 0-100
    entries_by_hits: list[KeyHits] = Field(default_factory=list)

    @property
    def total_lookups(self) -> int:
        return self.total_hits + self.total_misses


def compute_hit_rate(hits: int, misses: int) -> float:
    """Hit rate as a percentage; 0.0 before any lookup."""
    total = hits + misses
    return hits / total * 100 if total > 0 else 0.0


def rank_by_hits(entries: dict[FragmentKey, CacheEntry]) -> list[KeyHits]:
    """Order entries by hit count, most accessed first.

    sorted() is stable, so equal counts keep the dict's insertion order.
    """
    ranked = sorted(entries.items(), key=lambda item: item[1].hit_count, reverse=True)
    return [KeyHits(key=key, hit_count=entry.hit_count) for key, entry in ranked]
