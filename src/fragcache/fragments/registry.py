"""Generator table — maps every fragment key to the function that renders it."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType

from fragcache.errors.exceptions import GeneratorTableError
from fragcache.fragments import templates
from fragcache.fragments.scripts import render_client_scripts
from fragcache.fragments.styles import render_styles
from fragcache.types import ALL_FRAGMENT_KEYS, FragmentKey

Generator = Callable[[], str]

DEFAULT_PAGE_TITLE = "Ralph"


class GeneratorTable(Mapping[FragmentKey, Generator]):
    """Read-only mapping covering exactly the registered fragment keys.

    Keys may be given as FragmentKey members or their string values.
    """

    def __init__(self, generators: Mapping[FragmentKey | str, Generator]) -> None:
        resolved: dict[FragmentKey, Generator] = {}
        unexpected: list[str] = []
        for key, generator in generators.items():
            try:
                resolved[FragmentKey(key)] = generator
            except ValueError:
                unexpected.append(str(key))

        missing = [key.value for key in ALL_FRAGMENT_KEYS if key not in resolved]
        if missing or unexpected:
            parts = []
            if missing:
                parts.append(f"missing: {', '.join(missing)}")
            if unexpected:
                parts.append(f"unexpected: {', '.join(unexpected)}")
            raise GeneratorTableError(
                f"Generator table must cover every fragment key ({'; '.join(parts)})",
                missing=missing,
                unexpected=unexpected,
            )

        # Registry order, independent of the order the caller supplied.
        self._generators = MappingProxyType({key: resolved[key] for key in ALL_FRAGMENT_KEYS})

    def __getitem__(self, key: FragmentKey) -> Generator:
        return self._generators[key]

    def __iter__(self) -> Iterator[FragmentKey]:
        return iter(self._generators)

    def __len__(self) -> int:
        return len(self._generators)

    def replace(self, overrides: Mapping[FragmentKey | str, Generator]) -> GeneratorTable:
        """Return a new table with some generators swapped out."""
        merged: dict[FragmentKey | str, Generator] = dict(self._generators)
        merged.update(overrides)
        return GeneratorTable(merged)


def render_all_skeletons() -> str:
    return "\n".join(
        [
            templates.render_skeleton_timeline(),
            templates.render_skeleton_requirements(),
            templates.render_skeleton_task(),
            templates.render_skeleton_log(),
        ]
    )


def default_generators(page_title: str = DEFAULT_PAGE_TITLE) -> GeneratorTable:
    """Production generator table for the dashboard view."""
    return GeneratorTable(
        {
            FragmentKey.STYLES: render_styles,
            FragmentKey.CLIENT_SCRIPTS: render_client_scripts,
            FragmentKey.HEADER: templates.render_header,
            FragmentKey.SETUP_SECTION: templates.render_setup_section,
            FragmentKey.TIMELINE_SECTION: templates.render_timeline_section,
            FragmentKey.LOG_SECTION: templates.render_log_section,
            FragmentKey.FOOTER: templates.render_footer,
            FragmentKey.SCREEN_READER_ANNOUNCER: templates.render_screen_reader_announcer,
            FragmentKey.TOAST_CONTAINER: templates.render_toast_container,
            FragmentKey.SKELETON_TIMELINE: templates.render_skeleton_timeline,
            FragmentKey.SKELETON_TASK: templates.render_skeleton_task,
            FragmentKey.SKELETON_LOG: templates.render_skeleton_log,
            FragmentKey.SKELETON_REQUIREMENTS: templates.render_skeleton_requirements,
            FragmentKey.DURATION_CHART_SECTION: templates.render_duration_chart_section,
            FragmentKey.DEPENDENCY_GRAPH_SECTION: templates.render_dependency_graph_section,
            FragmentKey.AGGREGATED_STATS_SECTION: templates.render_aggregated_stats_section,
            FragmentKey.COMPLETION_HISTORY_SECTION: templates.render_completion_history_section,
            FragmentKey.SESSION_STATS_DASHBOARD: templates.render_session_stats_dashboard,
            FragmentKey.PRODUCTIVITY_REPORT_SECTION: templates.render_productivity_report_section,
            FragmentKey.ALL_SKELETONS: render_all_skeletons,
            FragmentKey.HEAD: lambda: templates.render_head(page_title, render_styles()),
        }
    )
