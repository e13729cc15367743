"""Dashboard stylesheet."""

from __future__ import annotations

_BASE = """
:root {
    --radius: 4px;
    --gap: 8px;
    --accent: #8b5cf6;
    --accent-warm: #f97316;
    --success: #22c55e;
    --warning: #eab308;
    --danger: #ef4444;
    --muted: var(--vscode-descriptionForeground, #8b8b8b);
}

* { box-sizing: border-box; }

body {
    margin: 0;
    padding: 0 12px 24px;
    font-family: var(--vscode-font-family, system-ui, sans-serif);
    font-size: var(--vscode-font-size, 13px);
    color: var(--vscode-foreground, #cccccc);
    background: var(--vscode-sideBar-background, #1e1e1e);
}

button {
    display: inline-flex;
    align-items: center;
    gap: 4px;
    padding: 4px 10px;
    border: none;
    border-radius: var(--radius);
    cursor: pointer;
}
button:disabled { opacity: 0.5; cursor: not-allowed; }
button.primary { background: var(--vscode-button-background); color: var(--vscode-button-foreground); }
button.secondary { background: var(--vscode-button-secondaryBackground); color: var(--vscode-button-secondaryForeground); }
button.danger { background: var(--danger); color: #ffffff; }
button.icon-only { padding: 4px; }
button.small { padding: 2px 4px; }
"""

_LAYOUT = """
.header {
    display: flex;
    align-items: center;
    justify-content: space-between;
    padding: 12px 0;
    border-bottom: 1px solid var(--vscode-panel-border, #333333);
}
.header-title { display: flex; align-items: center; gap: var(--gap); font-weight: 600; }
.status-pill { padding: 2px 8px; border-radius: 999px; font-size: 11px; background: var(--muted); }
.controls { display: flex; flex-wrap: wrap; gap: 6px; padding: 10px 0; }
.controls .spacer { flex: 1; }
.content { display: flex; flex-direction: column; gap: 12px; outline: none; }

.collapsible-section,
.setup-section,
.requirements-section,
.task-section,
.task-queue-section,
.log-section {
    border: 1px solid var(--vscode-panel-border, #333333);
    border-radius: var(--radius);
    padding: 8px 10px;
}
.section-header-collapsible { display: flex; justify-content: space-between; cursor: pointer; }
.section-header-right { display: flex; align-items: center; gap: 6px; }
.section-toggle { transition: transform 0.15s ease; }
.section-toggle:not(.expanded) { transform: rotate(-90deg); }
.section-content.collapsed { display: none; }

.footer {
    margin-top: 16px;
    font-size: 11px;
    color: var(--muted);
    text-align: center;
}
.footer-warning { margin-bottom: 6px; color: var(--warning); }
.footer-version { margin-left: 6px; }

.sr-announcer {
    position: absolute;
    width: 1px;
    height: 1px;
    overflow: hidden;
    clip: rect(0 0 0 0);
    white-space: nowrap;
}
"""

_COMPONENTS = """
.setup-textarea { width: 100%; resize: vertical; }
.textarea-char-count { text-align: right; font-size: 11px; color: var(--muted); }
.validation-message { color: var(--danger); min-height: 1em; }

.timeline-bars { display: flex; align-items: flex-end; gap: 2px; height: 60px; }
.timeline-bar { flex: 1; background: var(--accent); border-radius: 2px 2px 0 0; }
.timeline-empty { color: var(--muted); font-style: italic; }

.log-entries { max-height: 240px; overflow-y: auto; font-family: var(--vscode-editor-font-family, monospace); }
.log-entry { display: flex; gap: 8px; padding: 2px 0; }
.log-entry.success { color: var(--success); }
.log-entry.warning { color: var(--warning); }
.log-entry.error { color: var(--danger); }
.log-filter-btn.active { outline: 1px solid var(--accent); }

.task-queue-item { display: flex; gap: 6px; padding: 4px; cursor: grab; }
.task-queue-item.dragging { opacity: 0.5; }
.queue-hint { font-size: 11px; color: var(--muted); }
.task-progress { height: 3px; background: var(--muted); margin-top: 6px; }
.task-progress-bar { height: 100%; background: var(--accent); }

.stats-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(90px, 1fr)); gap: var(--gap); }
.stat-card { padding: 6px; border-radius: var(--radius); background: var(--vscode-editor-background, #252526); }
.stat-value { font-size: 16px; font-weight: 600; }
.stat-label { font-size: 11px; color: var(--muted); }

.toast-container { position: fixed; top: 8px; right: 8px; display: flex; flex-direction: column; gap: 6px; z-index: 100; }
.toast { padding: 6px 10px; border-radius: var(--radius); background: var(--vscode-notifications-background, #333333); }

.settings-overlay { display: none; position: fixed; inset: 0; background: rgba(0, 0, 0, 0.6); z-index: 50; }
.settings-overlay.visible { display: block; }
"""

_SKELETONS = """
@keyframes skeleton-pulse {
    0% { opacity: 0.6; }
    50% { opacity: 0.25; }
    100% { opacity: 0.6; }
}
.skeleton { background: var(--muted); border-radius: var(--radius); animation: skeleton-pulse 1.4s ease-in-out infinite; }
.skeleton-timeline-bars { display: flex; align-items: flex-end; gap: 4px; height: 48px; }
.skeleton-timeline-bar { flex: 1; height: 60%; }
.skeleton-timeline-bar:nth-child(2n) { height: 35%; }
.skeleton-timeline-labels { display: flex; gap: 4px; margin-top: 4px; }
.skeleton-timeline-label { flex: 1; height: 8px; }
.skeleton-task-label { width: 30%; height: 10px; margin-bottom: 6px; }
.skeleton-task-text { width: 90%; height: 12px; margin-bottom: 4px; }
.skeleton-log-entry { display: flex; gap: 6px; margin-bottom: 4px; }
.skeleton-log-time { width: 48px; height: 10px; }
.skeleton-log-msg { flex: 1; height: 10px; }
.skeleton-requirement-item { display: flex; gap: 6px; margin-bottom: 4px; }
.skeleton-requirement-checkbox { width: 12px; height: 12px; }
.skeleton-requirement-label { flex: 1; height: 10px; }
body.loaded .skeleton-timeline,
body.loaded .skeleton-task,
body.loaded .skeleton-log,
body.loaded .skeleton-requirements { display: none; }
"""


def render_styles() -> str:
    """Full dashboard stylesheet."""
    return "\n".join(part.strip() for part in (_BASE, _LAYOUT, _COMPONENTS, _SKELETONS))
