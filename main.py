"""
main.py — BST Step Visualizer Flask App
========================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  POST /api/tree/insert        – insert a value, record its steps
  POST /api/tree/search        – search for a value
  POST /api/tree/traverse      – inorder / preorder / postorder
  POST /api/tree/build         – quick build from a list, or a random tree
  POST /api/tree/clear         – discard the tree
  GET  /api/tree/layout        – node positions + edges (JSON)
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  POST /api/step/play          – toggle play/pause
  POST /api/config/speed       – choose a speed preset

State management:
  All state is stored in the Flask session.  Each user's session holds:
    • tree          – pre-order values (rebuilds the identical shape)
    • run           – op key, value and whether the last operation added
                      a node; its steps are replayed on demand
    • total_steps / current_step / is_playing / speed

Input validation happens here, at the edge: the tree only ever receives
integers that already passed `_parse_value`.
"""

import random
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, render_template_string, request, jsonify, session

from algorithms import OpInfo, get_operation, list_operations, traversal_keys
from algorithms.step import Step, visited_values
from bst import BinarySearchTree
from config import get_settings
from engine import Recorder, RunMetrics, SPEED_PRESETS
from layout import compute_positions
from log import configure_logging, get_logger
from ui import (
    render_tree,
    playback_controls,
    operation_panel,
    tree_builder,
    pseudocode_viewer,
    status_panel,
    analytics_panel,
    traversal_output,
)

settings = get_settings()
configure_logging(settings.log_level)
logger = get_logger(__name__)

app = Flask(__name__)
app.secret_key = settings.secret_key


class InvalidValue(ValueError):
    """User input that cannot become a node value."""


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_tree() -> BinarySearchTree:
    """Rebuild this session's tree, or start an empty one."""
    return BinarySearchTree.from_dict(session.get("tree", {}))


def save_tree(tree: BinarySearchTree):
    session["tree"] = tree.to_dict()


def get_state():
    """Return current app state as a dict."""
    return {
        "run":          session.get("run"),
        "current_step": session.get("current_step", 0),
        "total_steps":  session.get("total_steps", 0),
        "is_playing":   session.get("is_playing", False),
        "speed":        session.get("speed", settings.default_speed),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def _parse_value(raw: Any) -> int:
    """Accept an int or an integer string inside the configured range."""
    if isinstance(raw, bool):
        raise InvalidValue("Please enter a valid number")
    if isinstance(raw, str):
        raw = raw.strip()
        try:
            raw = int(raw, 10)
        except ValueError:
            raise InvalidValue("Please enter a valid number") from None
    if not isinstance(raw, int):
        raise InvalidValue("Please enter a valid number")
    if not settings.min_value <= raw <= settings.max_value:
        raise InvalidValue(
            f"Values must be between {settings.min_value} and {settings.max_value}"
        )
    return raw


def _error(message: str, status: int = 400):
    logger.info("rejected request to %s: %s", request.path, message)
    return jsonify({"error": message}), status


# ---------------------------------------------------------------------------
# Run replay
# ---------------------------------------------------------------------------
# The session cookie is too small for a long step list, so only the recipe
# of the last run is stored (operation, value, and whether it added a node).
# The tree before the run is the current tree minus that node, which was a
# leaf when it was attached.  Steps are deterministic, so replaying the
# recipe yields the identical sequence.
def _record(op_key: str, tree: BinarySearchTree, value: Any = None) -> Recorder:
    rec = Recorder()
    rec.start(op_key, tree, value)
    rec.run_to_completion()
    return rec


def _replay() -> Tuple[Optional[OpInfo], List[Step], Optional[RunMetrics]]:
    run = session.get("run")
    if not run:
        return None, [], None
    values = session.get("tree", {}).get("values", [])
    if run["grew"]:
        values = [v for v in values if v != run["value"]]
    rec = _record(run["op_key"], BinarySearchTree().build(values), run["value"])
    return get_operation(run["op_key"]), rec.steps, rec.get_metrics()


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------
def _render_step(
    tree: BinarySearchTree,
    op: Optional[OpInfo],
    steps: List[Step],
    idx: Optional[int],
) -> Dict[str, Any]:
    """SVG + side panels for step `idx` of a run (None = static tree)."""
    layout = compute_positions(tree.snapshot())

    if idx is None or op is None or not 0 <= idx < len(steps):
        return {
            "svg":        render_tree(layout),
            "pseudocode": pseudocode_viewer([]),
            "status":     status_panel(),
            "traversal":  traversal_output(),
        }

    step = steps[idx]
    visited = visited_values(steps, idx) if op.is_traversal else []

    kind = step.action.value
    if idx == len(steps) - 1 and op.is_traversal:
        kind = "complete"

    return {
        "svg":        render_tree(layout, step, visited=visited),
        "pseudocode": pseudocode_viewer(op.pseudocode, step.pseudocode_line, op.label),
        "status":     status_panel(step.description, kind),
        "traversal":  traversal_output(op.label, visited) if op.is_traversal else traversal_output(),
    }


def _run(op_key: str, tree: BinarySearchTree, value: Any = None):
    """Run an operation, remember it and show step 0."""
    op = get_operation(op_key)
    size_before = len(tree)
    rec = _record(op_key, tree, value)

    if op.mutates:
        save_tree(tree)

    set_state(
        run={"op_key": op_key, "value": value, "grew": len(tree) > size_before},
        total_steps=len(rec.steps),
        current_step=0,
        is_playing=False,
    )

    payload = _render_step(tree, op, rec.steps, 0 if rec.steps else None)
    payload.update({
        "analytics":    analytics_panel(rec.get_metrics()),
        "metrics":      rec.export()["metrics"],
        "current_step": 0,
        "total_steps":  len(rec.steps),
        "steps":        [s.to_dict() for s in rec.steps],
    })
    return jsonify(payload)


def _reset_run():
    set_state(run=None, total_steps=0, current_step=0, is_playing=False)


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    tree = get_tree()
    state = get_state()

    op, steps, metrics = _replay()
    idx = state["current_step"] if steps else None
    panels = _render_step(tree, op, steps, idx)

    html = render_template_string(INDEX_TEMPLATE,
        svg=panels["svg"],
        pseudocode=panels["pseudocode"],
        status=panels["status"],
        traversal=panels["traversal"],
        playback=playback_controls(
            is_playing=state["is_playing"],
            current_step=state["current_step"] + 1 if state["total_steps"] else 0,
            total_steps=state["total_steps"],
            speed=state["speed"],
        ),
        operations=operation_panel(list_operations()),
        builder=tree_builder(),
        analytics=analytics_panel(metrics),
        speed_ms=int(SPEED_PRESETS[state["speed"]] * 1000),
    )
    return html


# ---------------------------------------------------------------------------
# API: Tree Operations
# ---------------------------------------------------------------------------
@app.route("/api/tree/insert", methods=["POST"])
def api_tree_insert():
    data = request.get_json(silent=True) or {}
    try:
        value = _parse_value(data.get("value"))
    except InvalidValue as e:
        return _error(str(e))
    tree = get_tree()
    if value not in tree and len(tree) >= settings.max_nodes:
        return _error(f"Tree is full ({settings.max_nodes} nodes max)")
    return _run("insert", tree, value)


@app.route("/api/tree/search", methods=["POST"])
def api_tree_search():
    data = request.get_json(silent=True) or {}
    try:
        value = _parse_value(data.get("value"))
    except InvalidValue as e:
        return _error(str(e))
    return _run("search", get_tree(), value)


@app.route("/api/tree/traverse", methods=["POST"])
def api_tree_traverse():
    data = request.get_json(silent=True) or {}
    order = data.get("order", "inorder")
    if order not in traversal_keys():
        return _error(f"Unknown traversal: {order}")
    return _run(order, get_tree())


@app.route("/api/tree/build", methods=["POST"])
def api_tree_build():
    data = request.get_json(silent=True) or {}
    mode = data.get("mode", "values")

    if mode == "random":
        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, str))):
            return _error("Invalid seed")
        rng = random.Random(seed)
        count = rng.randint(settings.random_min_nodes, settings.random_max_nodes)
        values = rng.sample(range(1, settings.random_max_value + 1), count)
    elif mode == "values":
        raw = data.get("values")
        if isinstance(raw, str):
            raw = [v for v in raw.split(",") if v.strip()]
        if not isinstance(raw, list) or not raw:
            return _error("Provide a non-empty list of values")
        try:
            values = [_parse_value(v) for v in raw]
        except InvalidValue as e:
            return _error(str(e))
        if len(set(values)) > settings.max_nodes:
            return _error(f"Too many values ({settings.max_nodes} nodes max)")
    else:
        return _error("Unknown mode")

    tree = BinarySearchTree().build(values)
    save_tree(tree)
    _reset_run()
    logger.debug("built tree from %s", values)

    payload = _render_step(tree, None, [], None)
    payload["status"] = status_panel(
        f"Built tree with [{', '.join(str(v) for v in values)}]", "ready"
    )
    payload.update({"values": values, "analytics": analytics_panel(), "total_steps": 0})
    return jsonify(payload)


@app.route("/api/tree/clear", methods=["POST"])
def api_tree_clear():
    tree = get_tree()
    tree.clear()
    save_tree(tree)
    _reset_run()

    payload = _render_step(tree, None, [], None)
    payload["status"] = status_panel("Tree cleared. Ready to build.", "ready")
    payload.update({"analytics": analytics_panel(), "total_steps": 0})
    return jsonify(payload)


@app.route("/api/tree/layout", methods=["GET"])
def api_tree_layout():
    tree = get_tree()
    payload = compute_positions(tree.snapshot()).to_dict()
    payload["values"] = tree.values()
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
def _goto(idx: int):
    set_state(current_step=idx)
    op, steps, _ = _replay()
    payload = _render_step(get_tree(), op, steps, idx)
    payload["current_step"] = idx
    return jsonify(payload)


@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    state = get_state()
    if state["current_step"] >= state["total_steps"] - 1:
        set_state(is_playing=False)
        return _error("Already at last step")
    return _goto(state["current_step"] + 1)


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    state = get_state()
    if state["current_step"] <= 0:
        return _error("Already at first step")
    return _goto(state["current_step"] - 1)


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    state = get_state()
    idx = (request.get_json(silent=True) or {}).get("index", 0)

    if isinstance(idx, bool) or not isinstance(idx, int) or not (0 <= idx < state["total_steps"]):
        return _error("Invalid step index")
    return _goto(idx)


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    state = get_state()
    playing = not state["is_playing"] and state["total_steps"] > 0
    set_state(is_playing=playing)
    return jsonify({"is_playing": playing})


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    speed = (request.get_json(silent=True) or {}).get("speed", settings.default_speed)
    if speed not in SPEED_PRESETS:
        return _error(f"Unknown speed: {speed}")
    set_state(speed=speed)
    return jsonify({"speed": speed, "interval_ms": int(SPEED_PRESETS[speed] * 1000)})


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>BST Step Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-amber: #f59e0b;
      --accent-emerald: #10b981;
      --accent-rose: #f43f5e;
      --accent-purple: #a855f7;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 340px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      overflow: auto;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      min-height: 260px;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 16px;
      margin-bottom: 16px;
    }
    .panel h3 { font-size: 14px; margin-bottom: 12px; }
    .panel h4 { font-size: 12px; color: var(--text-secondary); margin: 12px 0 8px; }

    .button-row, .input-row, .quick-actions { display: flex; gap: 8px; flex-wrap: wrap; margin-bottom: 8px; }
    button {
      background: var(--border);
      color: var(--text-primary);
      border: none;
      border-radius: 6px;
      padding: 8px 12px;
      cursor: pointer;
      font-family: inherit;
    }
    button:hover { background: #484f58; }
    .btn-primary { background: var(--accent-cyan); }
    input, select {
      background: var(--bg-darker);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 8px;
      flex: 1;
    }

    .progress-bar { height: 4px; background: var(--border); border-radius: 2px; margin: 8px 0; }
    #progress-fill { height: 100%; background: var(--accent-cyan); border-radius: 2px; }
    .finished-badge { color: var(--accent-emerald); font-weight: 700; }

    .code-block { font-family: 'JetBrains Mono', monospace; font-size: 13px; }
    .code-line { padding: 2px 8px; white-space: pre; color: var(--text-secondary); }
    .code-line.highlight { background: rgba(245, 158, 11, 0.15); color: var(--accent-amber); }

    .status-message { padding: 12px; border-radius: 8px; background: var(--bg-panel); }
    .status-message.found, .status-message.inserted, .status-message.complete { color: var(--accent-emerald); }
    .status-message.not_found, .status-message.error { color: var(--accent-rose); }
    .traversal-output { margin-top: 12px; color: var(--text-secondary); }
    .traversal-item {
      display: inline-block;
      margin: 2px;
      padding: 2px 8px;
      border-radius: 4px;
      background: rgba(6, 182, 212, 0.2);
      color: var(--text-primary);
    }
    .placeholder { color: var(--text-secondary); }
    table td { padding: 2px 8px 2px 0; font-size: 13px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="operations">{{ operations|safe }}</div>
    <div id="builder">{{ builder|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>

    <div id="bottom-panel">
      <div>
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div>
        <h3>Status</h3>
        <div id="status">{{ status|safe }}</div>
        <div id="traversal">{{ traversal|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    let intervalMs = {{ speed_ms }};
    let timer = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function apply(data) {
      if (data.error) {
        document.getElementById('status').innerHTML =
          '<div class="status-message error"></div>';
        document.querySelector('#status .status-message').textContent = data.error;
        return false;
      }
      for (const key of ['svg', 'pseudocode', 'status', 'traversal', 'analytics']) {
        if (data[key] !== undefined) {
          const id = key === 'svg' ? 'canvas-svg' : key;
          document.getElementById(id).innerHTML = data[key];
        }
      }
      if (data.total_steps !== undefined) {
        document.getElementById('total-steps').textContent = data.total_steps;
      }
      if (data.current_step !== undefined) {
        document.getElementById('current-step').textContent = data.current_step + 1;
      } else if (data.total_steps === 0) {
        document.getElementById('current-step').textContent = 0;
      }
      return true;
    }

    function stopPlayback() {
      if (timer) { clearInterval(timer); timer = null; }
      document.getElementById('btn-play').textContent = '▶';
    }

    async function startPlayback() {
      stopPlayback();
      document.getElementById('btn-play').textContent = '⏸';
      timer = setInterval(async () => {
        const data = await post('/api/step/next');
        if (data.error) { stopPlayback(); await post('/api/step/play'); return; }
        apply(data);
      }, intervalMs);
    }

    async function runOperation(url, body) {
      stopPlayback();
      const data = await post(url, body);
      if (apply(data) && data.total_steps > 0) {
        const play = await post('/api/step/play');
        if (play.is_playing) startPlayback();
      }
    }

    // Operations
    document.getElementById('btn-insert')?.addEventListener('click', () => {
      const input = document.getElementById('insert-input');
      runOperation('/api/tree/insert', {value: input.value});
      input.value = '';
    });
    document.getElementById('btn-search')?.addEventListener('click', () => {
      const input = document.getElementById('search-input');
      runOperation('/api/tree/search', {value: input.value});
      input.value = '';
    });
    for (const key of ['insert', 'search']) {
      document.getElementById(key + '-input')?.addEventListener('keypress', (e) => {
        if (e.key === 'Enter') document.getElementById('btn-' + key).click();
      });
    }
    document.querySelectorAll('.btn-traverse').forEach(btn => {
      btn.addEventListener('click', () => runOperation('/api/tree/traverse', {order: btn.dataset.order}));
    });

    // Tree builder
    document.querySelectorAll('.btn-quick').forEach(btn => {
      btn.addEventListener('click', async () => {
        stopPlayback();
        apply(await post('/api/tree/build', {mode: 'values', values: btn.dataset.values.split(',').map(Number)}));
      });
    });
    document.getElementById('btn-random')?.addEventListener('click', async () => {
      stopPlayback();
      apply(await post('/api/tree/build', {mode: 'random'}));
    });
    document.getElementById('btn-clear')?.addEventListener('click', async () => {
      stopPlayback();
      apply(await post('/api/tree/clear'));
    });

    // Playback controls
    document.getElementById('btn-next')?.addEventListener('click', async () => apply(await post('/api/step/next')));
    document.getElementById('btn-prev')?.addEventListener('click', async () => apply(await post('/api/step/prev')));
    document.getElementById('btn-rewind')?.addEventListener('click', async () => apply(await post('/api/step/goto', {index: 0})));
    document.getElementById('btn-end')?.addEventListener('click', async () => {
      const total = +document.getElementById('total-steps').textContent;
      if (total > 0) apply(await post('/api/step/goto', {index: total - 1}));
    });
    document.getElementById('btn-play')?.addEventListener('click', async () => {
      const data = await post('/api/step/play');
      if (data.is_playing) startPlayback(); else stopPlayback();
    });
    document.getElementById('speed-selector')?.addEventListener('change', async (e) => {
      const data = await post('/api/config/speed', {speed: e.target.value});
      if (data.interval_ms) {
        intervalMs = data.interval_ms;
        if (timer) startPlayback();
      }
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logger.info("BST Step Visualizer on http://%s:%d", settings.host, settings.port)
    app.run(debug=settings.debug, host=settings.host, port=settings.port)
