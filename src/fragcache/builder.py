"""Dashboard page builder.

Combines memoized static fragments from a FragmentCache with the
sections that depend on task, project and settings data. The cache is
passed in by the caller; with ``use_cache=False`` the builder calls the
generators directly and leaves the cache untouched.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from fragcache.cache.store import FragmentCache
from fragcache.fragments import templates
from fragcache.types import (
    DashboardSettings,
    FragmentKey,
    PanelState,
    ProjectInfo,
    Task,
    TaskRequirements,
)

logger = logging.getLogger(__name__)


class BuilderOptions(BaseModel):
    has_prd: bool = False
    next_task: Task | None = None
    all_tasks: list[Task] = Field(default_factory=list)
    total_tasks: int = 0
    panel_state: PanelState = Field(default_factory=PanelState)
    requirements: TaskRequirements = Field(default_factory=TaskRequirements)
    settings: DashboardSettings = Field(default_factory=DashboardSettings)
    use_cache: bool = True
    projects: list[ProjectInfo] = Field(default_factory=list)
    current_project: str | None = None


class DashboardBuilder:
    """Builds the dashboard HTML document section by section."""

    def __init__(self, cache: FragmentCache, options: BuilderOptions | None = None) -> None:
        self._cache = cache
        self._options = options.model_copy() if options else BuilderOptions()

    @classmethod
    def create(cls, cache: FragmentCache, **options: object) -> DashboardBuilder:
        return cls(cache, BuilderOptions(**options))

    @property
    def options(self) -> BuilderOptions:
        return self._options.model_copy()

    # ── Chainable setters ──

    def set_has_prd(self, has_prd: bool) -> DashboardBuilder:
        self._options.has_prd = has_prd
        return self

    def set_next_task(self, next_task: Task | None) -> DashboardBuilder:
        self._options.next_task = next_task
        return self

    def set_all_tasks(self, all_tasks: list[Task]) -> DashboardBuilder:
        self._options.all_tasks = list(all_tasks)
        return self

    def set_total_tasks(self, total_tasks: int) -> DashboardBuilder:
        self._options.total_tasks = total_tasks
        return self

    def set_panel_state(self, panel_state: PanelState) -> DashboardBuilder:
        self._options.panel_state = panel_state
        return self

    def set_requirements(self, requirements: TaskRequirements) -> DashboardBuilder:
        self._options.requirements = requirements
        return self

    def set_settings(self, settings: DashboardSettings) -> DashboardBuilder:
        self._options.settings = settings
        return self

    def set_use_cache(self, use_cache: bool) -> DashboardBuilder:
        self._options.use_cache = use_cache
        return self

    def set_projects(self, projects: list[ProjectInfo]) -> DashboardBuilder:
        self._options.projects = list(projects)
        return self

    def set_current_project(self, current_project: str | None) -> DashboardBuilder:
        self._options.current_project = current_project
        return self

    # ── Sections ──

    def fragment(self, key: FragmentKey) -> str:
        if self._options.use_cache:
            return self._cache.get(key)
        return self._cache.generators[key]()

    def build_head(self) -> str:
        return self.fragment(FragmentKey.HEAD)

    def build_accessibility_components(self) -> str:
        return self.fragment(FragmentKey.SCREEN_READER_ANNOUNCER)

    def build_toast_container(self) -> str:
        return self.fragment(FragmentKey.TOAST_CONTAINER)

    def build_header(self) -> str:
        # A project dropdown depends on the open projects, so it is never cached.
        if len(self._options.projects) > 1:
            return templates.render_header(self._options.projects, self._options.current_project)
        return self.fragment(FragmentKey.HEADER)

    def build_controls(self) -> str:
        return templates.render_controls(self._options.has_prd)

    def build_setup_section(self) -> str:
        return "" if self._options.has_prd else self.fragment(FragmentKey.SETUP_SECTION)

    def build_skeleton_loaders(self) -> str:
        parts = [self.fragment(FragmentKey.SKELETON_TIMELINE)]
        if self._options.has_prd:
            parts.append(self.fragment(FragmentKey.SKELETON_REQUIREMENTS))
        parts.append(self.fragment(FragmentKey.SKELETON_TASK))
        parts.append(self.fragment(FragmentKey.SKELETON_LOG))
        return "\n".join(parts)

    def build_timeline_section(self) -> str:
        return self.fragment(FragmentKey.TIMELINE_SECTION)

    def build_duration_chart_section(self) -> str:
        return self.fragment(FragmentKey.DURATION_CHART_SECTION)

    def build_dependency_graph_section(self) -> str:
        return self.fragment(FragmentKey.DEPENDENCY_GRAPH_SECTION)

    def build_aggregated_stats_section(self) -> str:
        return self.fragment(FragmentKey.AGGREGATED_STATS_SECTION)

    def build_completion_history_section(self) -> str:
        return self.fragment(FragmentKey.COMPLETION_HISTORY_SECTION)

    def build_session_stats_dashboard(self) -> str:
        return self.fragment(FragmentKey.SESSION_STATS_DASHBOARD)

    def build_productivity_report_section(self) -> str:
        return self.fragment(FragmentKey.PRODUCTIVITY_REPORT_SECTION)

    def build_requirements_section(self) -> str:
        if not self._options.has_prd:
            return ""
        return templates.render_requirements_section(self._options.requirements)

    def build_task_section(self) -> str:
        return templates.render_task_section(self._options.next_task, self._options.total_tasks > 0)

    def build_pending_tasks_section(self) -> str:
        if not self._options.has_prd:
            return ""
        return templates.render_pending_tasks_section(self._options.all_tasks)

    def build_log_section(self) -> str:
        return self.fragment(FragmentKey.LOG_SECTION)

    def build_footer(self) -> str:
        return self.fragment(FragmentKey.FOOTER)

    def build_settings_overlay(self) -> str:
        return templates.render_settings_overlay(self._options.settings)

    def build_state_scripts(self) -> str:
        return templates.render_state_script(self._options.panel_state, self._options.all_tasks)

    def build_client_scripts(self) -> str:
        return f"<script>{self.fragment(FragmentKey.CLIENT_SCRIPTS)}</script>"

    def build_main_content(self) -> str:
        sections = [
            self.build_setup_section(),
            self.fragment(FragmentKey.SKELETON_TIMELINE),
            self.build_timeline_section(),
            self.build_duration_chart_section(),
            self.build_dependency_graph_section(),
            self.build_aggregated_stats_section(),
            self.build_session_stats_dashboard(),
            self.build_productivity_report_section(),
            self.build_completion_history_section(),
        ]
        if self._options.has_prd:
            sections.append(self.fragment(FragmentKey.SKELETON_REQUIREMENTS))
            sections.append(self.build_requirements_section())
        sections.extend(
            [
                self.fragment(FragmentKey.SKELETON_TASK),
                self.build_task_section(),
                self.build_pending_tasks_section(),
                self.fragment(FragmentKey.SKELETON_LOG),
                self.build_log_section(),
                self.build_footer(),
            ]
        )
        body = "\n        ".join(s for s in sections if s)
        return (
            '<div class="content" id="mainContent" tabindex="-1" role="main">\n'
            f"        {body}\n"
            "    </div>"
        )

    def build(self) -> str:
        """Assemble the complete HTML document."""
        body = "\n    ".join(
            [
                self.build_accessibility_components(),
                self.build_toast_container(),
                self.build_header(),
                self.build_controls(),
                self.build_main_content(),
                self.build_settings_overlay(),
                self.build_state_scripts(),
                self.build_client_scripts(),
            ]
        )
        html = (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            f"{self.build_head()}\n"
            "<body>\n"
            f"    {body}\n"
            "</body>\n"
            "</html>"
        )
        logger.debug("Built dashboard page (%d chars, cache=%s)", len(html), self._options.use_cache)
        return html


def build_dashboard_html(cache: FragmentCache, **options: object) -> str:
    """Build the dashboard page in one call."""
    return DashboardBuilder.create(cache, **options).build()
