from enum import Enum
from typing import Any, Optional


# ---------------------------------------------------------------------------
# Direction — which child slot an edge / move refers to
# ---------------------------------------------------------------------------
class Direction(Enum):
    LEFT  = "left"
    RIGHT = "right"


# ---------------------------------------------------------------------------
# NodeHighlight — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class NodeHighlight(Enum):
    NONE     = "none"       # default fill
    ACTIVE   = "active"     # amber — the node the algorithm is standing on
    COMPARED = "compared"   # blue — the incoming value is being compared here
    FOUND    = "found"      # green — search hit / duplicate rejected
    INSERTED = "inserted"   # purple — freshly attached node
    VISITED  = "visited"    # teal — already emitted by a traversal


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    One slot in the tree arena.

    Children are stored as the child's *value*, not as object references:
    values are unique, so a value is a stable handle into
    ``BinarySearchTree._nodes``.

    Attributes:
        value : The key. Must be totally ordered against every other key.
        left  : Value of the left child, or None.
        right : Value of the right child, or None.
    """

    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any):
        self.value: Any           = value
        self.left:  Optional[Any] = None
        self.right: Optional[Any] = None

    def child(self, direction: Direction) -> Optional[Any]:
        return self.left if direction is Direction.LEFT else self.right

    def attach(self, direction: Direction, value: Any) -> None:
        """Set an empty child slot.  Slots are never overwritten."""
        if self.child(direction) is not None:
            raise ValueError(
                f"{direction.value} child of {self.value!r} is already set"
            )
        if direction is Direction.LEFT:
            self.left = value
        else:
            self.right = value

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"Node(value={self.value!r}, left={self.left!r}, right={self.right!r})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Node)
            and self.value == other.value
            and self.left == other.left
            and self.right == other.right
        )

    def __hash__(self) -> int:
        return hash(self.value)
