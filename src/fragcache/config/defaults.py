"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

from fragcache.fragments.registry import DEFAULT_PAGE_TITLE

# Fragment cache settings
DEFAULT_USE_CACHE = True
DEFAULT_PREWARM = False

# Dashboard settings
DEFAULT_MAX_ITERATIONS = 50

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "use_cache": DEFAULT_USE_CACHE,
        "prewarm": DEFAULT_PREWARM,
        "max_iterations": DEFAULT_MAX_ITERATIONS,
        "page_title": DEFAULT_PAGE_TITLE,
        "log_level": DEFAULT_LOG_LEVEL,
    }
