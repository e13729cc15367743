"""Tests for package defaults."""

from fragcache.config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PREWARM,
    DEFAULT_USE_CACHE,
    get_defaults,
)


class TestDefaults:
    def test_cache_enabled(self):
        assert DEFAULT_USE_CACHE is True

    def test_no_prewarm(self):
        assert DEFAULT_PREWARM is False

    def test_max_iterations(self):
        assert DEFAULT_MAX_ITERATIONS == 50

    def test_default_log_level(self):
        assert DEFAULT_LOG_LEVEL == "WARNING"

    def test_get_defaults(self):
        assert get_defaults() == {
            "use_cache": True,
            "prewarm": False,
            "max_iterations": 50,
            "page_title": "Ralph",
            "log_level": "WARNING",
        }

    def test_get_defaults_returns_fresh_dict(self):
        get_defaults()["use_cache"] = False
        assert get_defaults()["use_cache"] is True
