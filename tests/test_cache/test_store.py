"""Tests for the in-memory fragment cache."""

import pytest

from fragcache.cache.store import FragmentCache, resolve_key
from fragcache.errors.exceptions import UnknownFragmentKeyError
from fragcache.fragments.registry import default_generators
from fragcache.types import ALL_FRAGMENT_KEYS, FragmentKey


class TestGet:
    def test_miss_generates_and_stores(self, cache, counting):
        content = cache.get(FragmentKey.HEADER)
        assert content == '<div data-fragment="header"></div>'
        assert counting.calls[FragmentKey.HEADER] == 1
        assert cache.has(FragmentKey.HEADER)

    def test_generates_at_most_once(self, cache, counting):
        results = [cache.get(FragmentKey.STYLES) for _ in range(10)]
        assert counting.calls[FragmentKey.STYLES] == 1
        assert all(r is results[0] for r in results)

    def test_every_key_generated_once(self, cache, counting):
        for _ in range(3):
            for key in ALL_FRAGMENT_KEYS:
                cache.get(key)
        assert all(counting.calls[key] == 1 for key in ALL_FRAGMENT_KEYS)

    def test_first_lookup_is_miss(self, cache):
        cache.get(FragmentKey.FOOTER)
        stats = cache.stats()
        assert stats.total_misses == 1
        assert stats.total_hits == 0
        assert cache.get_entry(FragmentKey.FOOTER).hit_count == 0

    def test_later_lookups_are_hits(self, cache):
        cache.get(FragmentKey.FOOTER)
        cache.get(FragmentKey.FOOTER)
        cache.get(FragmentKey.FOOTER)
        stats = cache.stats()
        assert stats.total_misses == 1
        assert stats.total_hits == 2
        assert cache.get_entry(FragmentKey.FOOTER).hit_count == 2

    def test_accepts_string_value(self, cache, counting):
        cache.get("skeletonTask")
        assert cache.has(FragmentKey.SKELETON_TASK)
        assert counting.calls[FragmentKey.SKELETON_TASK] == 1

    def test_unknown_key_raises_without_side_effects(self, cache):
        with pytest.raises(UnknownFragmentKeyError):
            cache.get("notAFragment")
        stats = cache.stats()
        assert stats.entry_count == 0
        assert stats.total_misses == 0

    def test_created_at_from_clock(self, cache):
        cache.get(FragmentKey.HEAD)
        assert cache.get_entry(FragmentKey.HEAD).created_at == 1_700_000_000_000

    def test_default_clock_is_epoch_millis(self, counting):
        cache = FragmentCache(counting.table)
        cache.get(FragmentKey.HEAD)
        # Sanity bound: after 2020-01-01 in milliseconds
        assert cache.get_entry(FragmentKey.HEAD).created_at > 1_577_836_800_000


class TestGeneratorFailure:
    def test_error_propagates_and_nothing_cached(self, counting):
        def boom() -> str:
            raise RuntimeError("template broke")

        cache = FragmentCache(counting.table.replace({FragmentKey.FOOTER: boom}))
        with pytest.raises(RuntimeError, match="template broke"):
            cache.get(FragmentKey.FOOTER)
        assert not cache.has(FragmentKey.FOOTER)
        stats = cache.stats()
        assert stats.total_misses == 0
        assert stats.total_hits == 0

    def test_retry_after_failure_calls_generator_again(self, counting):
        attempts = []

        def flaky() -> str:
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("first call fails")
            return "<footer></footer>"

        cache = FragmentCache(counting.table.replace({"footer": flaky}))
        with pytest.raises(RuntimeError):
            cache.get(FragmentKey.FOOTER)
        assert cache.get(FragmentKey.FOOTER) == "<footer></footer>"
        assert len(attempts) == 2
        assert cache.stats().total_misses == 1


class TestHas:
    def test_peek_does_not_create_or_count(self, cache, counting):
        assert not cache.has(FragmentKey.LOG_SECTION)
        assert counting.calls[FragmentKey.LOG_SECTION] == 0
        stats = cache.stats()
        assert stats.entry_count == 0
        assert stats.total_lookups == 0

    def test_contains(self, cache):
        cache.get(FragmentKey.HEADER)
        assert FragmentKey.HEADER in cache
        assert "header" in cache
        assert "footer" not in cache
        assert "bogus" not in cache
        assert 42 not in cache


class TestPrewarm:
    def test_fills_every_key(self, cache, counting):
        generated = cache.prewarm()
        assert generated == 21
        assert cache.stats().entry_count == len(ALL_FRAGMENT_KEYS) == 21
        assert all(counting.calls[key] == 1 for key in ALL_FRAGMENT_KEYS)

    def test_counts_generations_as_misses(self, cache):
        cache.prewarm()
        stats = cache.stats()
        assert stats.total_misses == 21
        assert stats.total_hits == 0

    def test_leaves_existing_entries_untouched(self, counting):
        ticks = iter(range(1000, 2000))
        cache = FragmentCache(counting.table, clock=lambda: next(ticks))
        cache.get(FragmentKey.HEADER)
        cache.get(FragmentKey.HEADER)
        before = cache.get_entry(FragmentKey.HEADER)

        cache.prewarm()
        after = cache.get_entry(FragmentKey.HEADER)
        assert after.created_at == before.created_at
        assert after.hit_count == before.hit_count == 1
        assert counting.calls[FragmentKey.HEADER] == 1

    def test_second_prewarm_is_noop(self, cache, counting):
        cache.prewarm()
        snapshot = {key: cache.get_entry(key) for key in cache.keys()}
        assert cache.prewarm() == 0
        assert {key: cache.get_entry(key) for key in cache.keys()} == snapshot
        assert cache.stats().total_misses == 21
        assert max(counting.calls.values()) == 1

    def test_partial_prewarm_only_generates_missing(self, cache):
        cache.get(FragmentKey.STYLES)
        cache.get(FragmentKey.FOOTER)
        assert cache.prewarm() == 19
        assert cache.stats().total_misses == 21


class TestInvalidate:
    def test_removes_only_that_key(self, cache):
        for key in (FragmentKey.HEADER, FragmentKey.FOOTER, FragmentKey.STYLES):
            cache.get(key)
        assert cache.invalidate(FragmentKey.FOOTER) is True
        assert not cache.has(FragmentKey.FOOTER)
        assert cache.has(FragmentKey.HEADER)
        assert cache.has(FragmentKey.STYLES)

    def test_absent_key_returns_false(self, cache):
        cache.get(FragmentKey.HEADER)
        before = cache.stats()
        assert cache.invalidate(FragmentKey.FOOTER) is False
        assert cache.stats() == before

    def test_does_not_touch_counters(self, cache):
        cache.get(FragmentKey.HEADER)
        cache.get(FragmentKey.HEADER)
        cache.invalidate(FragmentKey.HEADER)
        stats = cache.stats()
        assert stats.total_hits == 1
        assert stats.total_misses == 1

    def test_next_get_is_fresh_miss(self, counting):
        ticks = iter(range(1000, 2000))
        cache = FragmentCache(counting.table, clock=lambda: next(ticks))
        cache.get(FragmentKey.HEADER)
        cache.get(FragmentKey.HEADER)
        first = cache.get_entry(FragmentKey.HEADER)

        cache.invalidate("header")
        cache.get(FragmentKey.HEADER)
        second = cache.get_entry(FragmentKey.HEADER)
        assert second.hit_count == 0
        assert second.created_at > first.created_at
        assert counting.calls[FragmentKey.HEADER] == 2
        assert cache.stats().total_misses == 2


class TestClear:
    def test_resets_everything(self, cache):
        cache.prewarm()
        cache.get(FragmentKey.HEADER)
        cache.clear()
        stats = cache.stats()
        assert stats.entry_count == 0
        assert stats.total_hits == 0
        assert stats.total_misses == 0
        assert stats.total_size_bytes == 0
        assert stats.entries_by_hits == []
        assert not any(cache.has(key) for key in ALL_FRAGMENT_KEYS)

    def test_regenerates_after_clear(self, cache, counting):
        cache.get(FragmentKey.HEADER)
        cache.clear()
        cache.get(FragmentKey.HEADER)
        assert counting.calls[FragmentKey.HEADER] == 2


class TestIntrospection:
    def test_get_entry_absent(self, cache):
        assert cache.get_entry(FragmentKey.HEADER) is None

    def test_get_entry_does_not_count(self, cache):
        cache.get(FragmentKey.HEADER)
        cache.get_entry(FragmentKey.HEADER)
        cache.get_entry(FragmentKey.HEADER)
        assert cache.stats().total_hits == 0
        assert cache.get_entry(FragmentKey.HEADER).hit_count == 0

    def test_get_entry_returns_snapshot(self, cache):
        cache.get(FragmentKey.HEADER)
        entry = cache.get_entry(FragmentKey.HEADER)
        entry.hit_count = 99
        assert cache.get_entry(FragmentKey.HEADER).hit_count == 0

    def test_keys_in_insertion_order(self, cache):
        cache.get(FragmentKey.FOOTER)
        cache.get(FragmentKey.HEADER)
        cache.get(FragmentKey.STYLES)
        assert cache.keys() == [FragmentKey.FOOTER, FragmentKey.HEADER, FragmentKey.STYLES]

    def test_entry_count_matches_keys(self, cache):
        cache.get(FragmentKey.FOOTER)
        cache.get(FragmentKey.HEADER)
        assert cache.stats().entry_count == len(cache.keys()) == len(cache) == cache.size()

    def test_stats_is_pure_read(self, cache):
        cache.get(FragmentKey.HEADER)
        cache.get(FragmentKey.HEADER)
        first = cache.stats()
        second = cache.stats()
        assert first == second
        assert cache.get_entry(FragmentKey.HEADER).hit_count == 1


class TestScenario:
    def test_header_header_footer(self, cache):
        cache.get("header")
        cache.get("header")
        cache.get("footer")
        stats = cache.stats()
        assert stats.entry_count == 2
        assert stats.total_hits == 1
        assert stats.total_misses == 2
        assert stats.hit_rate == pytest.approx(100 / 3)
        assert stats.entries_by_hits[0].key == FragmentKey.HEADER
        assert stats.entries_by_hits[0].hit_count == 1

    def test_one_miss_three_hits(self, cache):
        for _ in range(4):
            cache.get(FragmentKey.SKELETON_LOG)
        assert cache.stats().hit_rate == 75

    def test_ranking(self, cache):
        cache.get(FragmentKey.STYLES)
        cache.get(FragmentKey.FOOTER)
        cache.get(FragmentKey.HEADER)
        cache.get(FragmentKey.HEADER)
        cache.get(FragmentKey.HEADER)
        cache.get(FragmentKey.FOOTER)
        ranked = [(item.key, item.hit_count) for item in cache.stats().entries_by_hits]
        assert ranked == [
            (FragmentKey.HEADER, 2),
            (FragmentKey.FOOTER, 1),
            (FragmentKey.STYLES, 0),
        ]

    def test_ties_keep_insertion_order(self, cache):
        for key in (FragmentKey.LOG_SECTION, FragmentKey.HEAD, FragmentKey.FOOTER):
            cache.get(key)
        ranked = [item.key for item in cache.stats().entries_by_hits]
        assert ranked == [FragmentKey.LOG_SECTION, FragmentKey.HEAD, FragmentKey.FOOTER]


class TestDefaultGenerators:
    def test_uses_production_table_by_default(self):
        cache = FragmentCache()
        assert "<head>" in cache.get(FragmentKey.HEAD)
        assert cache.generators.keys() == default_generators().keys()

    def test_total_size_is_utf8_bytes(self):
        cache = FragmentCache()
        cache.prewarm()
        expected = sum(
            len(cache.get_entry(key).content.encode("utf-8")) for key in ALL_FRAGMENT_KEYS
        )
        assert cache.stats().total_size_bytes == expected


class TestResolveKey:
    def test_member_passthrough(self):
        assert resolve_key(FragmentKey.HEAD) is FragmentKey.HEAD

    def test_string_value(self):
        assert resolve_key("allSkeletons") is FragmentKey.ALL_SKELETONS

    def test_unknown(self):
        with pytest.raises(UnknownFragmentKeyError) as exc_info:
            resolve_key("ALL_SKELETONS")
        assert exc_info.value.key == "ALL_SKELETONS"
