"""Jinja2 templates for the dashboard markup.

Static sections take no arguments and are what the fragment cache
memoizes. The dynamic renderers at the bottom depend on task and
project data and are rendered on every build.
"""

from __future__ import annotations

import json

from jinja2 import ChainableUndefined
from jinja2.sandbox import SandboxedEnvironment
from markupsafe import Markup

from fragcache.types import (
    DashboardSettings,
    PanelState,
    ProjectInfo,
    Task,
    TaskRequirements,
)

DASHBOARD_VERSION = "0.5.0"
PRD_INPUT_MAX_LENGTH = 2000

_jinja_env = SandboxedEnvironment(
    autoescape=True,
    keep_trailing_newline=False,
    undefined=ChainableUndefined,
)


def _svg(body: str, size: int = 14) -> Markup:
    return Markup(
        f'<svg width="{size}" height="{size}" viewBox="0 0 24 24" fill="none" '
        f'stroke="currentColor" stroke-width="2" aria-hidden="true">{body}</svg>'
    )


ICONS: dict[str, Markup] = {
    "play": _svg('<polygon points="5 3 19 12 5 21 5 3"/>'),
    "pause": _svg('<rect x="6" y="4" width="4" height="16"/><rect x="14" y="4" width="4" height="16"/>'),
    "stop": _svg('<rect x="4" y="4" width="16" height="16" rx="2"/>'),
    "step": _svg('<polygon points="5 4 15 12 5 20 5 4"/><line x1="19" y1="5" x2="19" y2="19"/>'),
    "skip": _svg('<polygon points="5 4 15 12 5 20 5 4"/><polygon points="13 4 23 12 13 20 13 4"/>'),
    "retry": _svg('<polyline points="23 4 23 10 17 10"/><path d="M20.49 15a9 9 0 1 1-2.12-9.36L23 10"/>'),
    "refresh": _svg('<polyline points="1 4 1 10 7 10"/><path d="M3.51 15a9 9 0 1 0 2.13-9.36L1 10"/>'),
    "settings": _svg('<circle cx="12" cy="12" r="3"/><path d="M12 1v3M12 20v3M4.22 4.22l2.12 2.12M17.66 17.66l2.12 2.12M1 12h3M20 12h3"/>'),
    "check": _svg('<path d="M22 11.08V12a10 10 0 1 1-5.93-9.14"/><polyline points="22 4 12 14.01 9 11.01"/>', 24),
    "chevron_down": _svg('<polyline points="6 9 12 15 18 9"/>', 12),
    "zoom_in": _svg('<circle cx="11" cy="11" r="8"/><line x1="21" y1="21" x2="16.65" y2="16.65"/><line x1="11" y1="8" x2="11" y2="14"/><line x1="8" y1="11" x2="14" y2="11"/>', 12),
    "zoom_out": _svg('<circle cx="11" cy="11" r="8"/><line x1="21" y1="21" x2="16.65" y2="16.65"/><line x1="8" y1="11" x2="14" y2="11"/>', 12),
    "rocket": _svg('<path d="M4.5 16.5c-1.5 1.26-2 5-2 5s3.74-.5 5-2c.71-.84.7-2.13-.09-2.91a2.18 2.18 0 0 0-2.91-.09z"/><path d="M12 15l-3-3a22 22 0 0 1 2-3.95A12.88 12.88 0 0 1 22 2c0 2.72-.78 7.5-6 11a22.35 22.35 0 0 1-4 2z"/>', 16),
    "star": _svg('<polygon points="12 2 15.09 8.26 22 9.27 17 14.14 18.18 21.02 12 17.77 5.82 21.02 7 14.14 2 9.27 8.91 8.26 12 2"/>'),
    "close": _svg('<line x1="18" y1="6" x2="6" y2="18"/><line x1="6" y1="6" x2="18" y2="18"/>'),
    "drag": _svg('<line x1="8" y1="6" x2="21" y2="6"/><line x1="8" y1="12" x2="21" y2="12"/><line x1="8" y1="18" x2="21" y2="18"/>'),
}

LOG_FILTERS: list[dict[str, str]] = [
    {"level": "all", "label": "All", "aria_label": "Show all log entries"},
    {"level": "info", "label": "Info", "aria_label": "Show info log entries only"},
    {"level": "warning", "label": "Warn", "aria_label": "Show warning log entries only"},
    {"level": "error", "label": "Error", "aria_label": "Show error log entries only"},
]

_REQUIREMENT_ITEMS: list[tuple[str, str, str]] = [
    ("reqWriteTests", "Write unit tests", "write_tests"),
    ("reqRunTests", "Run tests", "run_tests"),
    ("reqTypeCheck", "Type check", "run_type_check"),
    ("reqLinting", "Run linting", "run_linting"),
    ("reqDocs", "Update documentation", "update_docs"),
    ("reqCommit", "Commit changes", "commit_changes"),
]

_LOGO = """<svg class="ralph-logo" width="24" height="24" viewBox="0 0 32 32" fill="none" xmlns="http://www.w3.org/2000/svg">
    <defs>
        <linearGradient id="logoGradient" x1="0%" y1="0%" x2="100%" y2="100%">
            <stop offset="0%" style="stop-color:#f97316"/>
            <stop offset="50%" style="stop-color:#ec4899"/>
            <stop offset="100%" style="stop-color:#8b5cf6"/>
        </linearGradient>
    </defs>
    <circle cx="16" cy="16" r="13" stroke="url(#logoGradient)" stroke-width="3" fill="none"/>
    <text x="16" y="21" text-anchor="middle" font-size="14" font-weight="bold" fill="url(#logoGradient)">R</text>
</svg>"""

# ── Template sources ──

_HEADER = """
<div class="header" role="banner">
    <div class="header-title">
        {{ logo }}
        <span>Ralph</span>
        <span class="status-pill" id="statusPill" role="status" aria-live="polite">Idle</span>
    </div>
    {% if projects|length > 1 %}
    <div class="project-selector">
        <label for="projectSelect" class="sr-only">Project</label>
        <select id="projectSelect" onchange="send('switchProject', {path: this.value})" aria-label="Select project">
            {% for project in projects %}
            <option value="{{ project.path }}"{% if project.path == current_project %} selected{% endif %}>{{ project.name }}</option>
            {% endfor %}
        </select>
    </div>
    {% elif projects|length == 1 %}
    <div class="project-name" title="{{ projects[0].path }}">{{ projects[0].name }}</div>
    {% endif %}
    <div class="header-meta">
        <span id="iterationCount" aria-label="Iteration count">Iteration 0</span>
        <span id="countdown" aria-live="off"></span>
    </div>
</div>"""

_SETUP_SECTION = """
<div class="setup-section" role="region" aria-label="Project setup">
    <div class="setup-header">
        <span class="setup-icon" aria-hidden="true">{{ icons.rocket }}</span>
        <span>Get Started with Ralph</span>
    </div>
    <p class="setup-description" id="taskInputDescription">
        Describe what you want to build and Ralph will create a PRD.md with structured tasks.
    </p>
    <div class="setup-input-group">
        <div class="textarea-wrapper">
            <textarea id="taskInput" class="setup-textarea" rows="4"
                placeholder="Example: Build a todo app with add, delete and mark complete functionality."
                aria-label="Project description" aria-describedby="taskInputDescription taskInputError"
                aria-invalid="false" maxlength="{{ max_length }}"></textarea>
            <div class="textarea-char-count" id="taskInputCharCount" aria-live="polite">
                <span id="charCountValue">0</span>/<span>{{ max_length }}</span>
            </div>
        </div>
        <div class="validation-message" id="taskInputError" role="alert" aria-live="assertive"></div>
        <button class="primary generate-btn" onclick="generatePrd()" aria-label="Generate PRD and tasks from description">
            <span class="btn-icon" aria-hidden="true">{{ icons.star }}</span>Generate PRD &amp; Tasks
        </button>
    </div>
</div>"""

_TIMELINE_SECTION = """
<div class="timeline-section collapsible-section" id="timelineSection" role="region" aria-label="Task timeline">
    <div class="timeline-header section-header-collapsible" onclick="toggleSection('timelineContent', 'timelineToggle', this)" role="button" tabindex="0" aria-expanded="true" aria-controls="timelineContent">
        <span id="timelineTitle">Task Timeline</span>
        <div class="section-header-right">
            <div class="zoom-controls" role="group" aria-label="Timeline zoom controls" onclick="event.stopPropagation()">
                <button class="icon-only small" onclick="zoomTimeline(-1)" title="Zoom Out" aria-label="Zoom out timeline">{{ icons.zoom_out }}</button>
                <button class="icon-only small" onclick="resetZoom()" title="Reset Zoom" aria-label="Reset timeline zoom">{{ icons.retry }}</button>
                <button class="icon-only small" onclick="zoomTimeline(1)" title="Zoom In" aria-label="Zoom in timeline">{{ icons.zoom_in }}</button>
            </div>
            <span id="timelineCount" aria-label="Task completion count">0/0</span>
            <span class="section-toggle expanded" id="timelineToggle" aria-hidden="true">{{ icons.chevron_down }}</span>
        </div>
    </div>
    <div class="timeline-content section-content" id="timelineContent" role="img" aria-labelledby="timelineTitle" aria-describedby="timelineCount">
        <div class="timeline-empty" id="timelineEmpty" role="status">No tasks completed yet</div>
        <div class="timeline-scroll-container">
            <div class="timeline-bars" id="timelineBars" style="display: none;" aria-hidden="true"></div>
            <div class="timeline-labels" id="timelineLabels" style="display: none;" aria-hidden="true"></div>
        </div>
    </div>
</div>"""

_LOG_SECTION = """
<div class="log-section collapsible-section" id="logSection" role="region" aria-label="Activity log">
    <div class="log-header section-header-collapsible" onclick="toggleSection('logContent', 'logToggle', this)" role="button" tabindex="0" aria-expanded="true" aria-controls="logContent">
        <span id="logTitle">Activity Log</span>
        <div class="section-header-right">
            <div class="log-filters" role="group" aria-label="Filter log entries" onclick="event.stopPropagation()">
                {% for f in filters %}
                <button class="log-filter-btn small{% if loop.first %} active{% endif %}" data-level="{{ f.level }}" onclick="filterLog('{{ f.level }}')" aria-label="{{ f.aria_label }}" aria-pressed="{{ 'true' if loop.first else 'false' }}">{{ f.label }}</button>
                {% endfor %}
            </div>
            <span class="section-toggle expanded" id="logToggle" aria-hidden="true">{{ icons.chevron_down }}</span>
        </div>
    </div>
    <div class="log-content section-content" id="logContent">
        <div class="log-entries" id="logEntries" role="log" aria-labelledby="logTitle" aria-live="polite"></div>
    </div>
</div>"""

_FOOTER = """
<div class="footer" role="contentinfo">
    <div class="footer-warning" role="alert">
        <strong>Cost Notice:</strong> Each task step spawns one new chat session using your selected model.
    </div>
    <div>
        <a href="https://github.com/aymenfurter/ralph" target="_blank" rel="noopener noreferrer" aria-label="Visit Ralph on GitHub">GitHub: aymenfurter/ralph</a>
        <span class="footer-version" aria-label="Version">v{{ version }}</span>
    </div>
</div>"""

_SCREEN_READER_ANNOUNCER = (
    '<div id="srAnnouncer" class="sr-announcer" role="status" aria-live="assertive" aria-atomic="true"></div>'
)

_TOAST_CONTAINER = (
    '<div id="toastContainer" class="toast-container" role="region" aria-label="Notifications" aria-live="polite"></div>'
)

_SKELETON_TIMELINE = """
<div class="skeleton-timeline" id="skeletonTimeline" role="img" aria-label="Loading timeline" aria-busy="true">
    <div class="skeleton-timeline-bars">
        {% for _ in range(6) %}<div class="skeleton skeleton-timeline-bar" aria-hidden="true"></div>{% endfor %}
    </div>
    <div class="skeleton-timeline-labels">
        {% for _ in range(6) %}<div class="skeleton skeleton-timeline-label" aria-hidden="true"></div>{% endfor %}
    </div>
</div>"""

_SKELETON_TASK = """
<div class="skeleton-task" id="skeletonTask" role="img" aria-label="Loading task" aria-busy="true">
    <div class="skeleton skeleton-task-label" aria-hidden="true"></div>
    <div class="skeleton skeleton-task-text" aria-hidden="true"></div>
    <div class="skeleton skeleton-task-text" aria-hidden="true"></div>
</div>"""

_SKELETON_LOG = """
<div class="skeleton-log" id="skeletonLog" role="img" aria-label="Loading activity log" aria-busy="true">
    <div class="skeleton-log-header"><div class="skeleton skeleton-log-header-text" aria-hidden="true"></div></div>
    <div class="skeleton-log-content">
        {% for _ in range(3) %}
        <div class="skeleton-log-entry">
            <div class="skeleton skeleton-log-time" aria-hidden="true"></div>
            <div class="skeleton skeleton-log-msg" aria-hidden="true"></div>
        </div>
        {% endfor %}
    </div>
</div>"""

_SKELETON_REQUIREMENTS = """
<div class="skeleton-requirements" id="skeletonRequirements" role="img" aria-label="Loading requirements" aria-busy="true">
    <div class="skeleton-requirements-header">
        <div class="skeleton skeleton-requirements-icon" aria-hidden="true"></div>
        <div class="skeleton skeleton-requirements-title" aria-hidden="true"></div>
    </div>
    <div class="skeleton-requirements-content">
        {% for _ in range(6) %}
        <div class="skeleton-requirement-item">
            <div class="skeleton skeleton-requirement-checkbox" aria-hidden="true"></div>
            <div class="skeleton skeleton-requirement-label" aria-hidden="true"></div>
        </div>
        {% endfor %}
    </div>
</div>"""

_COLLAPSIBLE_SECTION = """
<div class="{{ css_class }} collapsible-section" id="{{ section_id }}" role="region" aria-label="{{ title }}">
    <div class="section-header-collapsible" onclick="toggleSection('{{ section_id }}Content', '{{ section_id }}Toggle', this)" role="button" tabindex="0" aria-expanded="true" aria-controls="{{ section_id }}Content">
        <span>{{ title }}</span>
        <span class="section-toggle expanded" id="{{ section_id }}Toggle" aria-hidden="true">{{ icons.chevron_down }}</span>
    </div>
    <div class="section-content" id="{{ section_id }}Content">
        {{ body }}
    </div>
</div>"""

_STATS_GRID = """
<div class="stats-grid">
    {% for stat_id, label in stats %}
    <div class="stat-card"><div class="stat-value" id="{{ stat_id }}">-</div><div class="stat-label">{{ label }}</div></div>
    {% endfor %}
</div>"""

_HEAD = """<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <style>{{ styles }}</style>
</head>"""

_CONTROLS = """
<div class="controls" role="toolbar" aria-label="Automation controls">
    {% for btn in buttons %}
    {% if btn.spacer %}<div class="spacer"></div>{% endif %}
    <button class="{{ btn.css }}" id="{{ btn.id }}" onclick="send('{{ btn.command }}')"{% if btn.disabled %} disabled{% endif %}{% if btn.hidden %} style="display:none"{% endif %} aria-label="{{ btn.title }}" title="{{ btn.title }}">
        <span class="btn-icon" aria-hidden="true">{{ icons[btn.icon] }}</span> {{ btn.label }}
    </button>
    {% endfor %}
    <button class="secondary icon-only" onclick="send('refresh')" title="Refresh" aria-label="Refresh panel">{{ icons.refresh }}</button>
    <button class="secondary icon-only" onclick="openSettings()" title="Settings" aria-label="Open settings">{{ icons.settings }}</button>
</div>"""

_REQUIREMENTS_SECTION = """
<div class="requirements-section" id="requirementsSection" role="region" aria-label="Acceptance criteria">
    <div class="requirements-header" onclick="toggleRequirements()" role="button" tabindex="0" aria-expanded="true" aria-controls="reqContent">
        <span class="requirements-header-title">Acceptance Criteria</span>
        <span class="requirements-toggle expanded" id="reqToggle" aria-hidden="true">{{ icons.chevron_down }}</span>
    </div>
    <div class="requirements-content" id="reqContent" role="group" aria-label="Acceptance criteria checkboxes">
        <div class="requirements-desc" id="requirements-desc">Actions the agent must complete before moving to the next task:</div>
        {% for item_id, label, checked in items %}
        <div class="requirement-item">
            <input type="checkbox" id="{{ item_id }}" onchange="updateRequirements()"{% if checked %} checked{% endif %} aria-describedby="requirements-desc">
            <label for="{{ item_id }}">{{ label }}</label>
        </div>
        {% endfor %}
    </div>
</div>"""

_TASK_SECTION = """
{% if task %}
<div class="task-section active collapsible-section" id="taskSection" role="region" aria-label="Current task">
    <div class="task-header section-header-collapsible" onclick="toggleSection('taskContent', 'taskToggle', this)" role="button" tabindex="0" aria-expanded="true" aria-controls="taskContent">
        <span class="task-label" id="taskLabel">Current Task</span>
        <span class="section-toggle expanded" id="taskToggle" aria-hidden="true">{{ icons.chevron_down }}</span>
    </div>
    <div class="task-content section-content" id="taskContent">
        <div class="task-text" id="taskText" aria-labelledby="taskLabel" role="status" aria-live="polite">{{ task.description }}</div>
        <dl class="task-details" id="taskDetailsPanel">
            <dt>ID</dt><dd>{{ task.id }}</dd>
            <dt>Status</dt><dd>{{ task.status.value }}</dd>
            {% if task.dependencies %}<dt>Depends on</dt><dd>{{ task.dependencies|join(', ') }}</dd>{% endif %}
        </dl>
        {% if task.acceptance_criteria %}
        <ul class="task-criteria">
            {% for criterion in task.acceptance_criteria %}<li>{{ criterion }}</li>{% endfor %}
        </ul>
        {% endif %}
        <div class="task-progress" id="taskProgress" role="progressbar" aria-label="Task execution progress" aria-valuenow="0" aria-valuemin="0" aria-valuemax="100">
            <div class="task-progress-bar" id="taskProgressBar" style="width: 0%"></div>
        </div>
    </div>
</div>
{% elif has_any_tasks %}
<div class="task-section collapsible-section" role="region" aria-label="Task status">
    <div class="empty-state" role="status" aria-live="polite">
        <div class="empty-state-icon" aria-hidden="true">{{ icons.check }}</div>
        <div>All tasks completed!</div>
    </div>
</div>
{% endif %}"""

_PENDING_TASKS_SECTION = """
<div class="task-queue-section collapsible-section" id="taskQueueSection" role="region" aria-label="Task Queue">
    <div class="task-header section-header-collapsible" onclick="toggleSection('taskQueueContent', 'taskQueueToggle', this)" role="button" tabindex="0" aria-expanded="true" aria-controls="taskQueueContent">
        <span class="task-label">Upcoming Tasks</span>
        <span class="section-toggle expanded" id="taskQueueToggle" aria-hidden="true">{{ icons.chevron_down }}</span>
    </div>
    <div class="task-queue-content section-content" id="taskQueueContent" role="list">
        <div class="task-queue-list" id="taskQueueList">
            {% for task in tasks %}
            <div class="task-queue-item" draggable="true" data-task-id="{{ task.id }}" role="listitem" tabindex="0" aria-label="Task: {{ task.description }}">
                <span class="drag-handle">{{ icons.drag }}</span>
                <span class="task-queue-text">{{ task.description }}</span>
            </div>
            {% endfor %}
        </div>
        <div class="queue-hint">Drag and drop to reorder tasks</div>
    </div>
</div>"""

_SETTINGS_OVERLAY = """
<div class="settings-overlay" id="settingsOverlay" role="dialog" aria-labelledby="settingsTitle" aria-modal="true">
    <div class="settings-header">
        <h2 id="settingsTitle"><span aria-hidden="true">{{ icons.settings }}</span> Settings</h2>
        <button class="settings-close" onclick="closeSettings()" aria-label="Close settings">{{ icons.close }}</button>
    </div>
    <div class="settings-body">
        <div class="settings-section" role="group" aria-labelledby="safetyLimitsTitle">
            <div class="settings-section-title" id="safetyLimitsTitle">Safety Limits</div>
            <label for="settingMaxIterations">Max iterations:
                <input type="number" id="settingMaxIterations" min="0" max="100" value="{{ max_iterations }}" onchange="updateSettings()" aria-describedby="maxIterationsHelp">
            </label>
            <div class="setting-help" id="maxIterationsHelp">Maximum number of task iterations before auto-stop (0 = unlimited).</div>
        </div>
    </div>
</div>"""


def _render(template_str: str, **context: object) -> str:
    template = _jinja_env.from_string(template_str)
    return template.render(icons=ICONS, **context).strip()


def _section(section_id: str, css_class: str, title: str, body: str) -> str:
    return _render(
        _COLLAPSIBLE_SECTION,
        section_id=section_id,
        css_class=css_class,
        title=title,
        body=Markup(body),
    )


def _stats_grid(stats: list[tuple[str, str]]) -> str:
    return _render(_STATS_GRID, stats=stats)


# ── Static sections ──


def render_header(projects: list[ProjectInfo] | None = None, current_project: str | None = None) -> str:
    """Header bar; shows a project dropdown when more than one project is open."""
    return _render(
        _HEADER,
        logo=Markup(_LOGO),
        projects=projects or [],
        current_project=current_project,
    )


def render_setup_section() -> str:
    return _render(_SETUP_SECTION, max_length=PRD_INPUT_MAX_LENGTH)


def render_timeline_section() -> str:
    return _render(_TIMELINE_SECTION)


def render_log_section() -> str:
    return _render(_LOG_SECTION, filters=LOG_FILTERS)


def render_footer() -> str:
    return _render(_FOOTER, version=DASHBOARD_VERSION)


def render_screen_reader_announcer() -> str:
    return _SCREEN_READER_ANNOUNCER


def render_toast_container() -> str:
    return _TOAST_CONTAINER


def render_skeleton_timeline() -> str:
    return _render(_SKELETON_TIMELINE)


def render_skeleton_task() -> str:
    return _render(_SKELETON_TASK)


def render_skeleton_log() -> str:
    return _render(_SKELETON_LOG)


def render_skeleton_requirements() -> str:
    return _render(_SKELETON_REQUIREMENTS)


def render_duration_chart_section() -> str:
    body = '<div class="duration-chart" id="durationChart" role="img" aria-label="Task duration chart"></div>'
    return _section("durationChartSection", "duration-chart-section", "Task Durations", body)


def render_dependency_graph_section() -> str:
    body = (
        '<div class="dependency-graph" id="dependencyGraph" role="img" aria-label="Task dependency graph">'
        '<div class="timeline-empty">No task dependencies declared</div></div>'
    )
    return _section("dependencyGraphSection", "dependency-graph-section", "Task Dependencies", body)


def render_aggregated_stats_section() -> str:
    body = _stats_grid(
        [
            ("aggProjects", "Projects"),
            ("aggTotal", "Total tasks"),
            ("aggCompleted", "Completed"),
            ("aggProgress", "Progress"),
        ]
    )
    return _section("aggregatedStatsSection", "aggregated-stats-section", "All Projects", body)


def render_completion_history_section() -> str:
    body = _stats_grid(
        [
            ("historyDays", "Active days"),
            ("historyTasks", "Tasks completed"),
            ("historyAvg", "Avg duration"),
        ]
    ) + '<div class="history-chart" id="historyChart" role="img" aria-label="Completion history chart"></div>'
    return _section("completionHistorySection", "completion-history-section", "Completion History", body)


def render_session_stats_dashboard() -> str:
    body = _stats_grid(
        [
            ("sessionDuration", "Session time"),
            ("sessionCompleted", "Completed"),
            ("sessionRemaining", "Remaining"),
            ("sessionEta", "ETA"),
        ]
    ) + '<ol class="session-task-list" id="sessionTaskList"></ol>'
    return _section("sessionStatsSection", "session-stats-section", "Session Statistics", body)


def render_productivity_report_section() -> str:
    body = (
        '<div class="report-preview" id="reportPreview" role="status">No report generated yet</div>'
        '<button class="secondary small" onclick="send(\'generateReport\')" aria-label="Generate productivity report">'
        "Generate Report</button>"
    )
    return _section("productivityReportSection", "productivity-report-section", "Productivity Report", body)


def render_head(title: str, styles: str) -> str:
    return _render(_HEAD, title=title, styles=Markup(styles))


# ── Dynamic sections ──


def render_controls(has_prd: bool) -> str:
    disabled_without_prd = not has_prd
    buttons = [
        {"id": "btnStart", "command": "start", "label": "Start", "title": "Start automation", "icon": "play", "css": "primary", "disabled": disabled_without_prd},
        {"id": "btnPause", "command": "pause", "label": "Pause", "title": "Pause automation", "icon": "pause", "css": "secondary", "disabled": True},
        {"id": "btnResume", "command": "resume", "label": "Resume", "title": "Resume automation", "icon": "play", "css": "secondary", "disabled": True, "hidden": True},
        {"id": "btnStop", "command": "stop", "label": "Stop", "title": "Stop automation", "icon": "stop", "css": "danger", "disabled": True},
        {"id": "btnNext", "command": "next", "label": "Step", "title": "Execute single step", "icon": "step", "css": "secondary", "disabled": disabled_without_prd, "spacer": True},
        {"id": "btnSkip", "command": "skipTask", "label": "Skip", "title": "Skip current task", "icon": "skip", "css": "secondary", "disabled": disabled_without_prd},
        {"id": "btnRetry", "command": "retryTask", "label": "Retry", "title": "Retry failed task", "icon": "retry", "css": "secondary", "disabled": disabled_without_prd},
    ]
    return _render(_CONTROLS, buttons=buttons)


def render_requirements_section(requirements: TaskRequirements) -> str:
    items = [
        (item_id, label, getattr(requirements, field))
        for item_id, label, field in _REQUIREMENT_ITEMS
    ]
    return _render(_REQUIREMENTS_SECTION, items=items)


def render_task_section(next_task: Task | None, has_any_tasks: bool) -> str:
    """Current task card, an all-done message, or nothing."""
    return _render(_TASK_SECTION, task=next_task, has_any_tasks=has_any_tasks)


def render_pending_tasks_section(tasks: list[Task]) -> str:
    pending = [t for t in tasks if t.is_open]
    # The first open task is already shown as the current task.
    if len(pending) <= 1:
        return ""
    return _render(_PENDING_TASKS_SECTION, tasks=pending)


def render_settings_overlay(settings: DashboardSettings) -> str:
    return _render(_SETTINGS_OVERLAY, max_iterations=settings.max_iterations)


def render_state_script(panel_state: PanelState, tasks: list[Task]) -> str:
    """Inline script that hands the panel state and task list to the client."""
    state_json = _script_json(panel_state.model_dump(mode="json"))
    tasks_json = _script_json([t.model_dump(mode="json") for t in tasks])
    return (
        "<script>\n"
        f"    window.__RALPH_PANEL_STATE__ = {state_json};\n"
        f"    window.__RALPH_INITIAL_TASKS__ = {tasks_json};\n"
        "</script>"
    )


def _script_json(value: object) -> str:
    # "</" would end the script element early.
    return json.dumps(value).replace("</", "<\\/")
