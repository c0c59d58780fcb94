"""
tree.py — Binary Search Tree Container
=======================================
Single source of truth for the tree.  Operations and the layout engine
both talk to this object (the layout engine only through snapshots).

Responsibilities:
  1. Node arena                             (add_root / add_child / node)
  2. Instrumented operations                (insert / search / traversals)
  3. Plain queries                          (len, in, values, height)
  4. Snapshots for the layout engine        (snapshot)
  5. Serialisation round-trip               (to_dict / from_dict)
  6. Bulk build & reset                     (build / clear)

Design decisions:
  - Nodes are stored in a plain dict keyed by value for O(1) lookup.
    Values are unique, so the value doubles as the node handle and
    children are stored as values rather than object references.
  - Every instrumented operation returns a fully materialised list of
    Steps.  By the time the caller sees the list, the operation has
    finished; there is never a half-applied insertion.
  - Values must be mutually comparable with <, > and ==.  That is a
    precondition, not something checked here.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

from bst.node import Direction, Node

if TYPE_CHECKING:
    from algorithms.step import Step


# ---------------------------------------------------------------------------
# Snapshot — immutable view handed to the layout engine
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TreeSnapshot:
    """
    Attributes:
        root     : Root value, or None for an empty tree.
        children : {value: (left_value, right_value)} for every node.
    """

    root:     Optional[Any]                                    = None
    children: Dict[Any, Tuple[Optional[Any], Optional[Any]]]   = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return len(self.children)


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------
class BinarySearchTree:
    """
    Attributes:
        root   : Value of the root node, or None when empty.
        _nodes : {value: Node}
    """

    def __init__(self):
        self.root:   Optional[Any]   = None
        self._nodes: Dict[Any, Node] = {}

    # ==================================================================
    # ARENA
    # ==================================================================
    def node(self, value: Any) -> Node:
        """Return the node holding `value`.  Raises KeyError if absent."""
        return self._nodes[value]

    def get_node(self, value: Any) -> Optional[Node]:
        return self._nodes.get(value)

    def add_root(self, value: Any) -> Node:
        if self.root is not None:
            raise ValueError(f"tree already has root {self.root!r}")
        node = Node(value)
        self._nodes[value] = node
        self.root = value
        return node

    def add_child(self, parent: Any, direction: Direction, value: Any) -> Node:
        """
        Attach `value` under `parent`.  Used by the insert operation, which
        has already walked to the right slot; the ordering check here only
        guards against misuse from elsewhere.
        """
        if value in self._nodes:
            raise ValueError(f"{value!r} is already in the tree")
        if direction is Direction.LEFT and not value < parent:
            raise ValueError(f"{value!r} cannot be the left child of {parent!r}")
        if direction is Direction.RIGHT and not value > parent:
            raise ValueError(f"{value!r} cannot be the right child of {parent!r}")

        self._nodes[parent].attach(direction, value)
        node = Node(value)
        self._nodes[value] = node
        return node

    # ==================================================================
    # INSTRUMENTED OPERATIONS
    # ==================================================================
    def insert(self, value: Any) -> List["Step"]:
        """Insert `value`; returns the decision trace.  Duplicates end in FOUND."""
        from algorithms.insert import insert
        return list(insert(self, value))

    def search(self, value: Any) -> List["Step"]:
        """Look `value` up; the trace ends in FOUND or NOT_FOUND."""
        from algorithms.search import search
        return list(search(self, value))

    def inorder_traversal(self) -> List["Step"]:
        from algorithms.traversal import inorder
        return list(inorder(self))

    def preorder_traversal(self) -> List["Step"]:
        from algorithms.traversal import preorder
        return list(preorder(self))

    def postorder_traversal(self) -> List["Step"]:
        from algorithms.traversal import postorder
        return list(postorder(self))

    def clear(self) -> None:
        """Drop every node.  Clearing an empty tree is a no-op."""
        self.root = None
        self._nodes = {}

    # ==================================================================
    # BULK BUILD
    # ==================================================================
    def build(self, values: Iterable[Any]) -> "BinarySearchTree":
        """Clear, then insert every value in order (duplicates are skipped)."""
        from algorithms.insert import insert

        self.clear()
        for v in values:
            for _ in insert(self, v):
                pass
        return self

    # ==================================================================
    # PLAIN QUERIES (no steps)
    # ==================================================================
    @property
    def is_empty(self) -> bool:
        return self.root is None

    def values(self) -> List[Any]:
        """All values in ascending order."""
        out: List[Any] = []
        stack: List[Any] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = self._nodes[current].left
            current = stack.pop()
            out.append(current)
            current = self._nodes[current].right
        return out

    def preorder_values(self) -> List[Any]:
        out: List[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            value = stack.pop()
            out.append(value)
            node = self._nodes[value]
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return out

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        if self.root is None:
            return -1
        best = 0
        stack: List[Tuple[Any, int]] = [(self.root, 0)]
        while stack:
            value, depth = stack.pop()
            best = max(best, depth)
            node = self._nodes[value]
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best

    def depth_of(self, value: Any) -> Optional[int]:
        """Number of edges from the root to `value`, or None if absent."""
        depth = 0
        current = self.root
        while current is not None:
            if value == current:
                return depth
            node = self._nodes[current]
            current = node.left if value < current else node.right
            depth += 1
        return None

    # ==================================================================
    # SNAPSHOT
    # ==================================================================
    def snapshot(self) -> TreeSnapshot:
        return TreeSnapshot(
            root=self.root,
            children={v: (n.left, n.right) for v, n in self._nodes.items()},
        )

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        # pre-order re-inserts into the identical shape
        return {"values": self.preorder_values()}

    @classmethod
    def from_dict(cls, data: dict) -> "BinarySearchTree":
        return cls().build(data.get("values", []))

    # ==================================================================
    # DUNDER
    # ==================================================================
    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, value: Any) -> bool:
        return value in self._nodes

    def __repr__(self) -> str:
        return f"BinarySearchTree(root={self.root!r}, size={len(self)})"
