"""
traversal.py — In-order / Pre-order / Post-order Walks
=======================================================
Generator-based depth-first traversals using an explicit stack (no Python
recursion limit issues on list-shaped trees built from sorted input).

Yields, for the whole tree:
  • MOVED_LEFT / MOVED_RIGHT (tagged with the parent) right before
    descending into a present child; nothing for an absent child
  • VISITED when a node is processed, at the position its order dictates

N nodes always give N VISITED steps and N - 1 moves.  An empty tree
gives no steps at all.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Generator, List, Tuple

from algorithms.step import Action, Step, StepBuilder

if TYPE_CHECKING:
    from bst.tree import BinarySearchTree


class Order(Enum):
    INORDER   = "inorder"
    PREORDER  = "preorder"
    POSTORDER = "postorder"


# ---------------------------------------------------------------------------
# Pseudocode — one listing per order; lines 0-1 are the same in all three
# ---------------------------------------------------------------------------
INORDER_PSEUDOCODE: List[str] = [
    "def INORDER(node):",                  # 0
    "    if node is None: return",         # 1
    "    INORDER(node.left)",              # 2
    "    visit(node)",                     # 3
    "    INORDER(node.right)",             # 4
]

PREORDER_PSEUDOCODE: List[str] = [
    "def PREORDER(node):",                 # 0
    "    if node is None: return",         # 1
    "    visit(node)",                     # 2
    "    PREORDER(node.left)",             # 3
    "    PREORDER(node.right)",            # 4
]

POSTORDER_PSEUDOCODE: List[str] = [
    "def POSTORDER(node):",                # 0
    "    if node is None: return",         # 1
    "    POSTORDER(node.left)",            # 2
    "    POSTORDER(node.right)",           # 3
    "    visit(node)",                     # 4
]

# (visit line, left-descent line, right-descent line) per order
_LINES = {
    Order.INORDER:   (3, 2, 4),
    Order.PREORDER:  (2, 3, 4),
    Order.POSTORDER: (4, 2, 3),
}

# frame stages
_ENTER, _AFTER_LEFT, _AFTER_RIGHT = 0, 1, 2


# ---------------------------------------------------------------------------
# Core walker
# ---------------------------------------------------------------------------
def traverse(tree: "BinarySearchTree", order: Order) -> Generator[Step, None, None]:
    """
    Depth-first walk of the whole tree in the given order.

    Each stack frame is (value, stage).  A frame is re-pushed before
    descending into a child so the walk resumes at the right stage once
    that subtree is finished.
    """

    if tree.root is None:
        return

    sb = StepBuilder()
    visit_line, left_line, right_line = _LINES[order]
    stack: List[Tuple[Any, int]] = [(tree.root, _ENTER)]

    while stack:
        value, stage = stack.pop()
        node = tree.node(value)

        if stage == _ENTER:
            if order is Order.PREORDER:
                yield sb.build(value, Action.VISITED, f"Visited {value}", line=visit_line)
            if node.left is not None:
                stack.append((value, _AFTER_LEFT))
                yield sb.build(
                    value, Action.MOVED_LEFT, f"Moving left from {value}", line=left_line
                )
                stack.append((node.left, _ENTER))
                continue
            stage = _AFTER_LEFT

        if stage == _AFTER_LEFT:
            if order is Order.INORDER:
                yield sb.build(value, Action.VISITED, f"Visited {value}", line=visit_line)
            if node.right is not None:
                stack.append((value, _AFTER_RIGHT))
                yield sb.build(
                    value, Action.MOVED_RIGHT, f"Moving right from {value}", line=right_line
                )
                stack.append((node.right, _ENTER))
                continue

        if order is Order.POSTORDER:
            yield sb.build(value, Action.VISITED, f"Visited {value}", line=visit_line)


# ---------------------------------------------------------------------------
# Registry entry points
# ---------------------------------------------------------------------------
def inorder(tree: "BinarySearchTree") -> Generator[Step, None, None]:
    """Left → Root → Right."""
    return traverse(tree, Order.INORDER)


def preorder(tree: "BinarySearchTree") -> Generator[Step, None, None]:
    """Root → Left → Right."""
    return traverse(tree, Order.PREORDER)


def postorder(tree: "BinarySearchTree") -> Generator[Step, None, None]:
    """Left → Right → Root."""
    return traverse(tree, Order.POSTORDER)
