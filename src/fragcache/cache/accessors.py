"""Per-fragment shortcuts over FragmentCache.get()."""

from __future__ import annotations

from fragcache.cache.store import FragmentCache
from fragcache.types import FragmentKey


def get_cached_fragment(cache: FragmentCache, key: FragmentKey | str) -> str:
    return cache.get(key)


def get_cached_styles(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.STYLES)


def get_cached_client_scripts(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.CLIENT_SCRIPTS)


def get_cached_header(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.HEADER)


def get_cached_setup_section(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.SETUP_SECTION)


def get_cached_timeline_section(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.TIMELINE_SECTION)


def get_cached_log_section(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.LOG_SECTION)


def get_cached_footer(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.FOOTER)


def get_cached_screen_reader_announcer(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.SCREEN_READER_ANNOUNCER)


def get_cached_toast_container(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.TOAST_CONTAINER)


def get_cached_skeleton_timeline(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.SKELETON_TIMELINE)


def get_cached_skeleton_task(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.SKELETON_TASK)


def get_cached_skeleton_log(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.SKELETON_LOG)


def get_cached_skeleton_requirements(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.SKELETON_REQUIREMENTS)


def get_cached_duration_chart_section(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.DURATION_CHART_SECTION)


def get_cached_dependency_graph_section(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.DEPENDENCY_GRAPH_SECTION)


def get_cached_aggregated_stats_section(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.AGGREGATED_STATS_SECTION)


def get_cached_completion_history_section(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.COMPLETION_HISTORY_SECTION)


def get_cached_session_stats_dashboard(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.SESSION_STATS_DASHBOARD)


def get_cached_productivity_report_section(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.PRODUCTIVITY_REPORT_SECTION)


def get_cached_all_skeletons(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.ALL_SKELETONS)


def get_cached_head(cache: FragmentCache) -> str:
    return cache.get(FragmentKey.HEAD)
