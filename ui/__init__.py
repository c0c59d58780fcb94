"""
ui/
---
HTML / SVG fragments for the browser page.

    from ui import render_tree
    from ui import operation_panel, tree_builder, status_panel, …
"""

from ui.canvas import render_tree, highlight_for, CanvasConfig

from ui.controls import (
    QUICK_BUILDS,
    playback_controls,
    operation_panel,
    tree_builder,
    pseudocode_viewer,
    status_panel,
    analytics_panel,
    traversal_output,
)

__all__ = [
    "render_tree",
    "highlight_for",
    "CanvasConfig",
    "QUICK_BUILDS",
    "playback_controls",
    "operation_panel",
    "tree_builder",
    "pseudocode_viewer",
    "status_panel",
    "analytics_panel",
    "traversal_output",
]
