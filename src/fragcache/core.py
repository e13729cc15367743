"""Top-level entry point: Dashboard owns one fragment cache per session."""

from __future__ import annotations

import logging
from typing import Any

from fragcache.builder import BuilderOptions, DashboardBuilder
from fragcache.cache.stats import CacheStats
from fragcache.cache.store import FragmentCache
from fragcache.config.defaults import DEFAULT_MAX_ITERATIONS
from fragcache.config.hierarchy import load_config_hierarchy
from fragcache.config.schema import validate_config
from fragcache.fragments.registry import DEFAULT_PAGE_TITLE, GeneratorTable, default_generators
from fragcache.types import DashboardSettings

logger = logging.getLogger(__name__)


class Dashboard:
    """Renders the dashboard view, reusing one FragmentCache across renders.

    ``page_title`` only shapes the default generator table, so it cannot be
    combined with an explicit ``cache`` or ``generators``; put the title in
    those generators instead.
    """

    def __init__(
        self,
        cache: FragmentCache | None = None,
        generators: GeneratorTable | None = None,
        use_cache: bool = True,
        prewarm: bool = False,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        page_title: str | None = None,
    ) -> None:
        if cache is not None and generators is not None:
            raise ValueError("Pass either cache or generators, not both")
        if page_title is not None and (cache is not None or generators is not None):
            raise ValueError("page_title applies only to the default generators")

        if cache is None:
            cache = FragmentCache(generators or default_generators(page_title or DEFAULT_PAGE_TITLE))
        self._cache = cache
        self._use_cache = use_cache
        self._settings = DashboardSettings(max_iterations=max_iterations)
        if prewarm and use_cache:
            generated = self._cache.prewarm()
            logger.info("Prewarmed fragment cache with %d fragment(s)", generated)

    @classmethod
    def from_config(cls, cache: FragmentCache | None = None, **overrides: Any) -> Dashboard:
        """Build a Dashboard from the merged configuration hierarchy."""
        return cls.from_settings(load_config_hierarchy(**overrides), cache=cache)

    @classmethod
    def from_settings(cls, config: dict[str, Any], cache: FragmentCache | None = None) -> Dashboard:
        """Build a Dashboard from an already-resolved config dict.

        Raises ConfigError when a value does not parse. A caller-supplied
        cache keeps its own generators, so the configured page title is
        not applied to it.
        """
        settings = validate_config(config)
        return cls(
            cache=cache,
            use_cache=settings.use_cache,
            prewarm=settings.prewarm,
            max_iterations=settings.max_iterations,
            page_title=settings.page_title if cache is None else None,
        )

    @property
    def cache(self) -> FragmentCache:
        return self._cache

    @property
    def use_cache(self) -> bool:
        return self._use_cache

    def builder(self, **options: Any) -> DashboardBuilder:
        options.setdefault("use_cache", self._use_cache)
        options.setdefault("settings", self._settings)
        return DashboardBuilder(self._cache, BuilderOptions(**options))

    def render(self, **options: Any) -> str:
        """Render the full page; options are BuilderOptions fields."""
        return self.builder(**options).build()

    def stats(self) -> CacheStats:
        return self._cache.stats()
