"""Shared enums and Pydantic models for fragcache."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

# ── Fragment keys ──


class FragmentKey(StrEnum):
    """Closed set of static dashboard fragments the cache can hold."""

    STYLES = "styles"
    CLIENT_SCRIPTS = "clientScripts"
    HEADER = "header"
    SETUP_SECTION = "setupSection"
    TIMELINE_SECTION = "timelineSection"
    LOG_SECTION = "logSection"
    FOOTER = "footer"
    SCREEN_READER_ANNOUNCER = "screenReaderAnnouncer"
    TOAST_CONTAINER = "toastContainer"
    SKELETON_TIMELINE = "skeletonTimeline"
    SKELETON_TASK = "skeletonTask"
    SKELETON_LOG = "skeletonLog"
    SKELETON_REQUIREMENTS = "skeletonRequirements"
    DURATION_CHART_SECTION = "durationChartSection"
    DEPENDENCY_GRAPH_SECTION = "dependencyGraphSection"
    AGGREGATED_STATS_SECTION = "aggregatedStatsSection"
    COMPLETION_HISTORY_SECTION = "completionHistorySection"
    SESSION_STATS_DASHBOARD = "sessionStatsDashboard"
    PRODUCTIVITY_REPORT_SECTION = "productivityReportSection"
    ALL_SKELETONS = "allSkeletons"
    HEAD = "head"


ALL_FRAGMENT_KEYS: tuple[FragmentKey, ...] = tuple(FragmentKey)


class TaskStatus(StrEnum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETE = "COMPLETE"
    BLOCKED = "BLOCKED"
    SKIPPED = "SKIPPED"


# ── Dashboard data models ──


class Task(BaseModel):
    id: str
    description: str
    status: TaskStatus = TaskStatus.PENDING
    line_number: int = 0
    dependencies: list[str] = Field(default_factory=list)
    acceptance_criteria: list[str] = Field(default_factory=list)

    @property
    def is_open(self) -> bool:
        """True for tasks that still belong in the upcoming queue."""
        return self.status != TaskStatus.COMPLETE


class ProjectInfo(BaseModel):
    name: str
    path: str


class TaskRequirements(BaseModel):
    run_tests: bool = False
    run_linting: bool = False
    run_type_check: bool = False
    write_tests: bool = False
    update_docs: bool = False
    commit_changes: bool = False


class DashboardSettings(BaseModel):
    max_iterations: int = 50


class PanelState(BaseModel):
    """Persisted view state injected into the rendered page."""

    collapsed_sections: list[str] = Field(default_factory=list)
    scroll_position: int = 0
    requirements: TaskRequirements = Field(default_factory=TaskRequirements)
