"""
layout/
-------
Tree geometry, independent of any drawing technology.

    from layout import compute_positions, TreeLayout
"""

from layout.positions import (
    CONFIG,
    LayoutConfig,
    LayoutEdge,
    Position,
    TreeLayout,
    compute_positions,
    subtree_widths,
)

__all__ = [
    "CONFIG",
    "LayoutConfig",
    "LayoutEdge",
    "Position",
    "TreeLayout",
    "compute_positions",
    "subtree_widths",
]
