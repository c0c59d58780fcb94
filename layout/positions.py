"""
positions.py — Subtree-Width Tree Layout
=========================================
Pure function: TreeSnapshot → TreeLayout.

Two passes over the snapshot:
  1. Width pass (post-order)   width(node) = width(left) + 1 + width(right)
  2. Position pass (pre-order) a running `left_bound` column; the node sits
     at column left_bound + width(left), its left subtree starts at
     left_bound and its right subtree right after the node.

Every node therefore gets its own column, columns follow in-order rank,
and sibling subtrees occupy disjoint column ranges.

Design decisions:
  - NO mutation of the snapshot and no state outside the call.  The
    caller re-runs this after every shape change; there is no
    incremental update, so stale positions can never leak through.
  - Both passes use explicit stacks so a list-shaped tree of any depth
    lays out without touching the recursion limit.
  - Edges are emitted during the position pass: pre-order reaches a
    parent before its children, so the parent position is always known.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from bst.node import Direction
from bst.tree import TreeSnapshot


# ---------------------------------------------------------------------------
# Geometry config
# ---------------------------------------------------------------------------
class LayoutConfig:
    node_radius:        int = 25
    horizontal_spacing: int = 60
    vertical_spacing:   int = 80
    padding:            int = 50


CONFIG = LayoutConfig()


# ---------------------------------------------------------------------------
# Output types
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Position:
    x:      float
    y:      float
    column: int = 0     # in-order rank
    depth:  int = 0

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class LayoutEdge:
    parent:     Any
    child:      Any
    parent_pos: Position
    child_pos:  Position
    direction:  Direction

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parent":     self.parent,
            "child":      self.child,
            "parent_pos": self.parent_pos.to_dict(),
            "child_pos":  self.child_pos.to_dict(),
            "direction":  self.direction.value,
        }


@dataclass
class TreeLayout:
    """
    Attributes:
        positions : {value: Position}
        edges     : Parent → child edges in depth-first order.
        width     : Bounding-box width  (max x + padding + radius), 0 if empty.
        height    : Bounding-box height (max y + padding + radius), 0 if empty.
        widths    : {value: subtree width in columns}
    """

    positions: Dict[Any, Position] = field(default_factory=dict)
    edges:     List[LayoutEdge]    = field(default_factory=list)
    width:     float               = 0
    height:    float               = 0
    widths:    Dict[Any, int]      = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.positions

    def edge_from(self, parent: Any, direction: Direction) -> Optional[LayoutEdge]:
        for e in self.edges:
            if e.parent == parent and e.direction is direction:
                return e
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "positions": [
                {"value": v, "x": p.x, "y": p.y} for v, p in self.positions.items()
            ],
            "edges":  [e.to_dict() for e in self.edges],
            "width":  self.width,
            "height": self.height,
        }


# ---------------------------------------------------------------------------
# Pass 1 — subtree widths
# ---------------------------------------------------------------------------
def subtree_widths(snapshot: TreeSnapshot) -> Dict[Any, int]:
    """Post-order width pass.  Absent children count as 0."""
    widths: Dict[Any, int] = {}
    if snapshot.root is None:
        return widths

    stack: List[Tuple[Any, bool]] = [(snapshot.root, False)]
    while stack:
        value, children_done = stack.pop()
        left, right = snapshot.children[value]
        if children_done:
            widths[value] = widths.get(left, 0) + 1 + widths.get(right, 0)
            continue
        stack.append((value, True))
        for child in (right, left):
            if child is not None:
                stack.append((child, False))
    return widths


# ---------------------------------------------------------------------------
# Pass 2 — positions + edges
# ---------------------------------------------------------------------------
def compute_positions(snapshot: TreeSnapshot, config: LayoutConfig = CONFIG) -> TreeLayout:
    """
    Lay out every node of `snapshot`.

    Args:
        snapshot : Immutable tree shape (BinarySearchTree.snapshot()).
        config   : Spacing constants.

    Returns:
        TreeLayout – empty positions / edges and a zero box for an empty tree.
    """
    if snapshot.root is None:
        return TreeLayout()

    widths = subtree_widths(snapshot)
    positions: Dict[Any, Position] = {}
    edges: List[LayoutEdge] = []

    # frame: (value, depth, left_bound, parent, direction-from-parent)
    stack: List[Tuple[Any, int, int, Optional[Any], Optional[Direction]]] = [
        (snapshot.root, 0, 0, None, None)
    ]
    while stack:
        value, depth, left_bound, parent, direction = stack.pop()
        left, right = snapshot.children[value]
        left_width = widths.get(left, 0)

        column = left_bound + left_width
        pos = Position(
            x=config.padding + column * config.horizontal_spacing,
            y=config.padding + depth * config.vertical_spacing,
            column=column,
            depth=depth,
        )
        positions[value] = pos

        if parent is not None:
            edges.append(LayoutEdge(
                parent=parent,
                child=value,
                parent_pos=positions[parent],
                child_pos=pos,
                direction=direction,
            ))

        # right pushed first so the left subtree is laid out first
        if right is not None:
            stack.append((right, depth + 1, column + 1, value, Direction.RIGHT))
        if left is not None:
            stack.append((left, depth + 1, left_bound, value, Direction.LEFT))

    margin = config.padding + config.node_radius
    return TreeLayout(
        positions=positions,
        edges=edges,
        width=max(p.x for p in positions.values()) + margin,
        height=max(p.y for p in positions.values()) + margin,
        widths=widths,
    )
