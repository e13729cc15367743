"""Client-side script embedded in the dashboard page."""

from __future__ import annotations

_MESSAGING = """
const vscode = acquireVsCodeApi();

function send(command, payload) {
    vscode.postMessage(Object.assign({ command: command }, payload || {}));
}

function announce(message) {
    const el = document.getElementById('srAnnouncer');
    if (!el) { return; }
    el.textContent = '';
    setTimeout(function () { el.textContent = message; }, 50);
}
"""

_SECTIONS = """
function toggleSection(contentId, toggleId, header) {
    const content = document.getElementById(contentId);
    const toggle = document.getElementById(toggleId);
    if (!content || !toggle) { return; }
    const collapsed = content.classList.toggle('collapsed');
    toggle.classList.toggle('expanded', !collapsed);
    if (header) { header.setAttribute('aria-expanded', String(!collapsed)); }
    const state = vscode.getState() || window.__RALPH_PANEL_STATE__ || {};
    const sections = new Set(state.collapsedSections || []);
    if (collapsed) { sections.add(contentId); } else { sections.delete(contentId); }
    state.collapsedSections = Array.from(sections);
    vscode.setState(state);
    send('savePanelState', { state: state });
}

function toggleRequirements() {
    toggleSection('reqContent', 'reqToggle', null);
}

function updateRequirements() {
    const requirements = {
        writeTests: document.getElementById('reqWriteTests').checked,
        runTests: document.getElementById('reqRunTests').checked,
        runTypeCheck: document.getElementById('reqTypeCheck').checked,
        runLinting: document.getElementById('reqLinting').checked,
        updateDocs: document.getElementById('reqDocs').checked,
        commitChanges: document.getElementById('reqCommit').checked
    };
    send('updateRequirements', { requirements: requirements });
}
"""

_TIMELINE = """
let timelineZoom = 1;

function zoomTimeline(direction) {
    timelineZoom = Math.min(4, Math.max(0.5, timelineZoom + direction * 0.25));
    const bars = document.getElementById('timelineBars');
    if (bars) { bars.style.width = (timelineZoom * 100) + '%'; }
}

function resetZoom() {
    timelineZoom = 1;
    zoomTimeline(0);
}
"""

_LOG = """
let activeLogFilter = 'all';

function filterLog(level) {
    activeLogFilter = level;
    document.querySelectorAll('.log-filter-btn').forEach(function (btn) {
        const active = btn.dataset.level === level;
        btn.classList.toggle('active', active);
        btn.setAttribute('aria-pressed', String(active));
    });
    document.querySelectorAll('.log-entry').forEach(function (entry) {
        entry.style.display = (level === 'all' || entry.classList.contains(level)) ? '' : 'none';
    });
}

function addLog(message, level) {
    const list = document.getElementById('logEntries');
    if (!list) { return; }
    const entry = document.createElement('div');
    entry.className = 'log-entry ' + (level || 'info');
    const time = document.createElement('span');
    time.className = 'log-time';
    time.textContent = new Date().toLocaleTimeString();
    const text = document.createElement('span');
    text.textContent = message;
    entry.appendChild(time);
    entry.appendChild(text);
    list.appendChild(entry);
    filterLog(activeLogFilter);
}
"""

_TOASTS = """
function showToast(message, type) {
    const container = document.getElementById('toastContainer');
    if (!container) { return; }
    const toast = document.createElement('div');
    toast.className = 'toast ' + (type || 'info');
    toast.setAttribute('role', 'status');
    toast.textContent = message;
    container.appendChild(toast);
    setTimeout(function () { toast.remove(); }, 4000);
}

function openSettings() {
    document.getElementById('settingsOverlay').classList.add('visible');
}

function closeSettings() {
    document.getElementById('settingsOverlay').classList.remove('visible');
}

function updateSettings() {
    const value = parseInt(document.getElementById('settingMaxIterations').value, 10);
    send('updateSettings', { settings: { maxIterations: isNaN(value) ? 0 : value } });
}
"""

_BOOT = """
window.addEventListener('message', function (event) {
    const message = event.data || {};
    switch (message.type) {
        case 'log':
            addLog(message.message, message.level);
            break;
        case 'toast':
            showToast(message.message, message.level);
            break;
        case 'announce':
            announce(message.message);
            break;
    }
});

document.addEventListener('DOMContentLoaded', function () {
    document.body.classList.add('loaded');
    const state = window.__RALPH_PANEL_STATE__ || {};
    (state.collapsedSections || []).forEach(function (id) {
        const content = document.getElementById(id);
        if (content) { content.classList.add('collapsed'); }
    });
    send('webviewReady');
});
"""


def render_client_scripts() -> str:
    """Client script, without the surrounding script tag."""
    return "\n".join(part.strip() for part in (_MESSAGING, _SECTIONS, _TIMELINE, _LOG, _TOASTS, _BOOT))
