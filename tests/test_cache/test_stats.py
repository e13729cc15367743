"""Tests for cache entry and stats models."""

import pytest

from fragcache.cache.stats import (
    CacheEntry,
    CacheStats,
    KeyHits,
    compute_hit_rate,
    now_ms,
    rank_by_hits,
)
from fragcache.types import FragmentKey


class TestCacheEntry:
    def test_defaults(self):
        entry = CacheEntry(content="<div></div>")
        assert entry.hit_count == 0
        assert entry.created_at > 0

    def test_size_bytes_ascii(self):
        assert CacheEntry(content="hello").size_bytes == 5

    def test_size_bytes_counts_utf8(self):
        # U+26A0 WARNING SIGN encodes to three bytes
        assert CacheEntry(content="⚠").size_bytes == 3

    def test_now_ms_is_integer_millis(self):
        value = now_ms()
        assert isinstance(value, int)
        assert value > 1_577_836_800_000


class TestCacheStats:
    def test_defaults(self):
        stats = CacheStats()
        assert stats.entry_count == 0
        assert stats.total_hits == 0
        assert stats.total_misses == 0
        assert stats.hit_rate == 0.0
        assert stats.entries_by_hits == []

    def test_total_lookups(self):
        assert CacheStats(total_hits=3, total_misses=2).total_lookups == 5


class TestHitRate:
    def test_zero_when_no_lookups(self):
        assert compute_hit_rate(0, 0) == 0.0

    def test_percentage(self):
        assert compute_hit_rate(3, 1) == 75.0

    def test_all_hits(self):
        assert compute_hit_rate(10, 0) == 100.0

    def test_one_third(self):
        assert compute_hit_rate(1, 2) == pytest.approx(33.333, rel=1e-3)


class TestRankByHits:
    def test_descending(self):
        entries = {
            FragmentKey.STYLES: CacheEntry(content="a", hit_count=0),
            FragmentKey.HEADER: CacheEntry(content="b", hit_count=2),
            FragmentKey.FOOTER: CacheEntry(content="c", hit_count=1),
        }
        assert rank_by_hits(entries) == [
            KeyHits(key=FragmentKey.HEADER, hit_count=2),
            KeyHits(key=FragmentKey.FOOTER, hit_count=1),
            KeyHits(key=FragmentKey.STYLES, hit_count=0),
        ]

    def test_ties_stable(self):
        entries = {
            FragmentKey.LOG_SECTION: CacheEntry(content="a", hit_count=1),
            FragmentKey.HEAD: CacheEntry(content="b", hit_count=3),
            FragmentKey.FOOTER: CacheEntry(content="c", hit_count=1),
            FragmentKey.STYLES: CacheEntry(content="d", hit_count=1),
        }
        keys = [item.key for item in rank_by_hits(entries)]
        assert keys == [
            FragmentKey.HEAD,
            FragmentKey.LOG_SECTION,
            FragmentKey.FOOTER,
            FragmentKey.STYLES,
        ]

    def test_empty(self):
        assert rank_by_hits({}) == []
