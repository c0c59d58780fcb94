"""
canvas.py — SVG Tree Renderer
==============================
Pure rendering function: TreeLayout + Step → SVG string.

The renderer consumes:
  • layout   – node positions and parent→child edges (layout.compute_positions)
  • step     – the Step currently being shown (or None for a static tree)
  • visited  – values a traversal has already emitted (drawn in the visited style)
  • config   – visual config (colours, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  The caller passes everything in and gets back a string.
    Positions are never reused across tree changes; the caller
    recomputes the layout after every insertion.
  - Which highlight a step gets is decided by `highlight_for`, which
    branches on every Action member explicitly and fails loudly on an
    unknown one instead of silently falling back to a default colour.
  - A MOVED_LEFT / MOVED_RIGHT step also lights up the edge it follows.
"""

import math
from html import escape
from typing import Any, Collection, Dict, Optional

from algorithms.step import Action, Step
from bst.node import Direction, NodeHighlight
from layout import TreeLayout, LayoutEdge, CONFIG as LAYOUT_CONFIG


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    bg: str = "#0d1117"

    # node fill per highlight
    node_colors: Dict[str, str] = {
        "none":     "#1c2128",   # dark grey
        "active":   "#f59e0b",   # amber — where the algorithm stands
        "compared": "#0ea5e9",   # cyan blue
        "found":    "#10b981",   # emerald green
        "inserted": "#a855f7",   # purple
        "visited":  "#06b6d4",   # teal — traversal output so far
    }

    edge_color:         str = "#30363d"
    edge_active_color:  str = "#f59e0b"

    # node
    node_radius:        int = LAYOUT_CONFIG.node_radius
    node_stroke:        str = "#30363d"
    node_stroke_width:  int = 2
    node_label_color:   str = "#e6edf3"
    node_label_size:    int = 14
    node_label_weight:  str = "600"

    # edge
    edge_width:         int = 2
    edge_width_active:  int = 4

    # empty indicator
    empty_text:         str = "Tree is empty"
    empty_color:        str = "#7d8590"
    empty_width:        int = 400
    empty_height:       int = 200


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Action → highlight
# ---------------------------------------------------------------------------
def highlight_for(action: Action) -> NodeHighlight:
    """Node highlight for a step action.  Every Action member is handled."""
    if action is Action.VISITED:
        return NodeHighlight.ACTIVE
    elif action is Action.COMPARED:
        return NodeHighlight.COMPARED
    elif action is Action.FOUND:
        return NodeHighlight.FOUND
    elif action is Action.INSERTED:
        return NodeHighlight.INSERTED
    elif action is Action.NOT_FOUND:
        # NOT_FOUND steps carry node=None, so render_tree never asks for this one
        return NodeHighlight.ACTIVE
    elif action is Action.MOVED_LEFT or action is Action.MOVED_RIGHT:
        return NodeHighlight.ACTIVE
    raise ValueError(f"Unhandled action: {action!r}")


def move_direction(action: Action) -> Optional[Direction]:
    if action is Action.MOVED_LEFT:
        return Direction.LEFT
    if action is Action.MOVED_RIGHT:
        return Direction.RIGHT
    return None


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_tree(
    layout: TreeLayout,
    step: Optional[Step] = None,
    visited: Collection[Any] = (),
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        layout  : Positions and edges of the current tree.
        step    : Current operation step (or None for a static tree).
        visited : Values already emitted by a running traversal.
        config  : Visual config.
    """
    if layout.is_empty:
        return _render_empty(config)

    width, height = layout.width, layout.height
    svg_parts = [
        f'<svg width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    ]

    active_edge = None
    highlighted = None
    if step is not None and step.node is not None:
        direction = move_direction(step.action)
        if direction is not None:
            active_edge = layout.edge_from(step.node, direction)
        highlighted = (step.node, highlight_for(step.action))

    # -- edges (draw first so nodes sit on top) --
    svg_parts.append('<g class="edges">')
    for edge in layout.edges:
        svg_parts.append(_render_edge(edge, edge is active_edge, config))
    svg_parts.append('</g>')

    # -- nodes --
    visited_set = set(visited)
    svg_parts.append('<g class="nodes">')
    for value, pos in layout.positions.items():
        state = NodeHighlight.NONE
        if value in visited_set:
            state = NodeHighlight.VISITED
        if highlighted is not None and highlighted[0] == value:
            state = highlighted[1]
        svg_parts.append(_render_node(value, pos.x, pos.y, state, config))
    svg_parts.append('</g>')

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(value: Any, cx: float, cy: float, state: NodeHighlight, config: CanvasConfig) -> str:
    fill = config.node_colors.get(state.value, config.node_colors["none"])
    r = config.node_radius

    stroke, stroke_width, glow = config.node_stroke, config.node_stroke_width, ""
    if state not in (NodeHighlight.NONE, NodeHighlight.VISITED):
        stroke, stroke_width = fill, 3
        glow = (
            f'<circle cx="{cx}" cy="{cy}" r="{r + 8}" fill="none" '
            f'stroke="{fill}" stroke-width="2" opacity="0.3"/>'
        )

    label = escape(str(value))
    parts = [
        f'<g class="node-group {state.value}" data-value="{label}">',
        glow,
        f'  <circle class="node" cx="{cx}" cy="{cy}" r="{r}" '
        f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>',
        f'  <text class="node-label" x="{cx}" y="{cy + 5}" text-anchor="middle" '
        f'font-size="{config.node_label_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.node_label_color}" font-weight="{config.node_label_weight}">{label}</text>',
        '</g>',
    ]
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(edge: LayoutEdge, active: bool, config: CanvasConfig) -> str:
    x1, y1 = edge.parent_pos.x, edge.parent_pos.y
    x2, y2 = edge.child_pos.x, edge.child_pos.y

    # shorten the line by node_radius on both ends
    dx, dy = x2 - x1, y2 - y1
    dist = math.sqrt(dx * dx + dy * dy)
    if dist < 0.001:
        return ""  # degenerate edge

    ux, uy = dx / dist, dy / dist
    r = config.node_radius

    stroke = config.edge_active_color if active else config.edge_color
    stroke_width = config.edge_width_active if active else config.edge_width
    css = f"edge edge-{edge.direction.value}" + (" active" if active else "")

    return (
        f'<line class="{css}" data-parent="{escape(str(edge.parent))}" '
        f'data-child="{escape(str(edge.child))}" '
        f'x1="{x1 + ux * r}" y1="{y1 + uy * r}" x2="{x2 - ux * r}" y2="{y2 - uy * r}" '
        f'stroke="{stroke}" stroke-width="{stroke_width}"/>'
    )


def _render_empty(config: CanvasConfig) -> str:
    w, h = config.empty_width, config.empty_height
    return (
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">\n'
        f'<text class="empty-message" x="50%" y="50%" text-anchor="middle" '
        f'fill="{config.empty_color}" font-size="16">{config.empty_text}</text>\n'
        f'</svg>'
    )
