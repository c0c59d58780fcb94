"""
controls.py — Side Panels
==========================
HTML fragments for everything around the tree canvas.  Each function takes
plain values and returns markup; main.py drops the fragments into the page
and the browser swaps them in again after every API call.

Panels:
  • playback_controls       – rewind / back / play / forward / end, speed
  • operation_panel         – insert / search inputs + traversal buttons
  • tree_builder            – quick builds, random tree, clear
  • pseudocode_viewer       – listing with the executing line marked
  • status_panel            – the current step's description
  • analytics_panel         – nodes visited, comparisons, outcome, …
  • traversal_output        – values a traversal has emitted so far

User-supplied text (step descriptions, labels) is escaped here; the
page template inserts the fragments with |safe.
"""

from html import escape
from typing import Any, List, Optional, Sequence

from algorithms import OpInfo
from engine import RunMetrics, SPEED_PRESETS


QUICK_BUILDS: List[List[int]] = [
    [50, 30, 70, 20, 40, 60, 80],
    [50, 25, 75, 10, 30, 60, 90],
    [1, 2, 3, 4, 5],
]


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_playing: bool = False,
    current_step: int = 0,
    total_steps: int = 0,
    speed: str = "medium",
) -> str:
    play_icon = "⏸" if is_playing else "▶"
    play_label = "Pause" if is_playing else "Play"
    is_finished = total_steps > 0 and current_step >= total_steps
    finished = '<span class="finished-badge">FINISHED</span>' if is_finished else ""
    percentage = round(current_step / total_steps * 100) if total_steps else 0

    options = []
    for name, seconds in SPEED_PRESETS.items():
        sel = 'selected' if name == speed else ''
        options.append(
            f'<option value="{name}" {sel}>{name.capitalize()} ({int(seconds * 1000)} ms)</option>'
        )

    return f"""
    <div class="panel playback">
      <h3>⏯ Step Through</h3>
      <div class="button-row">
        <button id="btn-rewind" title="First step">⏮</button>
        <button id="btn-prev" title="Step back">◀</button>
        <button id="btn-play" title="{play_label}">{play_icon}</button>
        <button id="btn-next" title="Step forward">▶</button>
        <button id="btn-end" title="Last step">⏭</button>
      </div>
      <div class="step-counter">
        <span id="current-step">{current_step}</span> of <span id="total-steps">{total_steps}</span> steps
        {finished}
      </div>
      <div class="progress-bar"><div id="progress-fill" style="width: {percentage}%"></div></div>
      <label class="speed-control">Speed
        <select id="speed-selector">
          {''.join(options)}
        </select>
      </label>
    </div>
    """


# ---------------------------------------------------------------------------
# Operation Panel
# ---------------------------------------------------------------------------
def operation_panel(operations: Sequence[OpInfo]) -> str:
    value_ops = []
    traversal_buttons = []
    for op in operations:
        if op.takes_value:
            value_ops.append(f"""
        <div class="input-row">
          <input type="number" id="{op.key}-input" placeholder="Value">
          <button id="btn-{op.key}" class="btn-primary" title="{escape(op.description)}">{escape(op.label)}</button>
        </div>""")
        elif op.is_traversal:
            traversal_buttons.append(
                f'<button class="btn-traverse" data-order="{op.key}" '
                f'title="{escape(op.description)}">{escape(op.label.split()[0])}</button>'
            )

    return f"""
    <div class="panel operation-panel">
      <h3>🌳 Operations</h3>
      {''.join(value_ops)}
      <h4>Traversals</h4>
      <div class="button-row">
        {''.join(traversal_buttons)}
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Tree Builder
# ---------------------------------------------------------------------------
def tree_builder(quick_builds: Sequence[Sequence[int]] = QUICK_BUILDS) -> str:
    buttons = []
    for values in quick_builds:
        csv = ",".join(str(v) for v in values)
        buttons.append(f'<button class="btn-quick" data-values="{csv}">[{csv}]</button>')

    return f"""
    <div class="panel tree-builder">
      <h3>⚡ Quick Build</h3>
      <div class="quick-actions">
        {''.join(buttons)}
      </div>
      <div class="button-row">
        <button id="btn-random" class="btn-secondary">🎲 Random Tree</button>
        <button id="btn-clear" class="btn-secondary">🗑 Clear</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
    op_label: str = "",
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block empty">
          <p class="placeholder">Run an operation to view its pseudocode</p>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block" data-op="{escape(op_label)}">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Status Panel
# ---------------------------------------------------------------------------
def status_panel(message: str = "", kind: str = "info") -> str:
    if not message:
        message, kind = "Ready. Insert values to build the tree.", "ready"
    return f"""<div class="status-message {escape(kind)}">{escape(message)}</div>"""


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
_OUTCOME_BADGES = {
    "inserted":  "✅ Inserted",
    "duplicate": "🔁 Duplicate — skipped",
    "found":     "✅ Found",
    "not_found": "❌ Not Found",
    "traversed": "✅ Traversed",
    "empty":     "∅ Empty tree",
}


def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run an operation to see metrics.</p>
        </div>
        """

    outcome = _OUTCOME_BADGES.get(metrics.outcome, escape(metrics.outcome))
    value_row = ""
    if metrics.value is not None:
        value_row = f"<tr><td>Value:</td><td><strong>{escape(str(metrics.value))}</strong></td></tr>"

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {escape(metrics.op_label)}</h3>
      <table>
        {value_row}
        <tr><td>Nodes Visited:</td><td><strong>{metrics.nodes_visited}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Moves:</td><td><strong>{metrics.moves}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Tree Size:</td><td><strong>{metrics.tree_size}</strong></td></tr>
        <tr><td>Tree Height:</td><td><strong>{metrics.tree_height}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Outcome:</td><td><strong>{outcome}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Traversal Output
# ---------------------------------------------------------------------------
def traversal_output(label: str = "", values: Sequence[Any] = ()) -> str:
    if not label:
        return """<div class="traversal-output placeholder">Run a traversal to see the visit order.</div>"""

    items = "".join(f'<span class="traversal-item">{escape(str(v))}</span>' for v in values)
    return f"""
    <div class="traversal-output">
      <strong>{escape(label)}:</strong> {items or '<em>nothing visited yet</em>'}
    </div>
    """
