"""
search.py — BST Search
=======================
Walks from the root towards `value`.  Yields:
  1. VISITED, COMPARED on every node stood on
  2. FOUND on a hit (terminal)
  3. MOVED_LEFT / MOVED_RIGHT before descending
  4. NOT_FOUND with node=None when the walk falls off the tree,
     or immediately when the tree is empty

Read-only: never touches the tree.
"""

from typing import TYPE_CHECKING, Any, Generator, List, Optional

from algorithms.step import Action, Step, StepBuilder

if TYPE_CHECKING:
    from bst.tree import BinarySearchTree


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def SEARCH(tree, value):",                  # 0
    "    current ← tree.root",                   # 1
    "    while current is not None:",            # 2
    "        visit(current)",                    # 3
    "        compare value with current.value",  # 4
    "        if value == current.value:",        # 5
    "            return FOUND",                  # 6
    "        elif value < current.value:",       # 7
    "            current ← current.left",        # 8
    "        else:",                             # 9
    "            current ← current.right",       # 10
    "    return NOT FOUND",                      # 11
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def search(tree: "BinarySearchTree", value: Any) -> Generator[Step, None, None]:
    """Yields Step snapshots for every decision taken while looking for `value`."""

    sb = StepBuilder()

    if tree.root is None:
        yield sb.build(
            None, Action.NOT_FOUND, f"Tree is empty, {value} not found", line=11, is_final=True
        )
        return

    current_value: Optional[Any] = tree.root

    while current_value is not None:
        current = tree.node(current_value)
        yield sb.build(current.value, Action.VISITED, f"Visiting node {current.value}", line=3)
        yield sb.build(
            current.value, Action.COMPARED, f"Comparing {value} with {current.value}", line=4
        )

        if value == current.value:
            yield sb.build(current.value, Action.FOUND, f"Found {value}!", line=6, is_final=True)
            return

        if value < current.value:
            yield sb.build(
                current.value, Action.MOVED_LEFT,
                f"{value} < {current.value}, moving left", line=8,
            )
            current_value = current.left
        else:
            yield sb.build(
                current.value, Action.MOVED_RIGHT,
                f"{value} > {current.value}, moving right", line=10,
            )
            current_value = current.right

    # fell off the tree
    yield sb.build(None, Action.NOT_FOUND, f"{value} not found in tree", line=11, is_final=True)
