"""
insert.py — BST Insertion
==========================
Generator-based insertion.  Yields a Step at every decision:
  1. Empty tree  →  INSERTED as root, done
  2. Stand on a node  →  VISITED, then COMPARED against the incoming value
  3. Smaller / larger  →  MOVED_LEFT / MOVED_RIGHT
  4. Empty child slot  →  attach the new node, INSERTED (tagged with the new value)
  5. Equal  →  FOUND: the value already exists and is skipped

Duplicates are not an error: the trace simply ends in FOUND and the tree
is left untouched.  The only mutation is the attach in step 4, which
happens right before the final step is yielded, so a caller always sees
either the whole insertion or none of it.
"""

from typing import TYPE_CHECKING, Any, Generator, List

from bst.node import Direction
from algorithms.step import Action, Step, StepBuilder

if TYPE_CHECKING:
    from bst.tree import BinarySearchTree


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def INSERT(tree, value):",                              # 0
    "    if tree.root is None:",                             # 1
    "        tree.root ← Node(value); return",               # 2
    "    current ← tree.root",                               # 3
    "    loop:",                                             # 4
    "        visit(current)",                                # 5
    "        compare value with current.value",              # 6
    "        if value < current.value:",                     # 7
    "            if current.left is None: attach; return",   # 8
    "            current ← current.left",                    # 9
    "        elif value > current.value:",                   # 10
    "            if current.right is None: attach; return",  # 11
    "            current ← current.right",                   # 12
    "        else: return  # duplicate, skip",               # 13
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def insert(tree: "BinarySearchTree", value: Any) -> Generator[Step, None, None]:
    """
    Insert `value` into `tree`, yielding one Step per decision.

    Args:
        tree  : The tree to grow.
        value : Key to insert.  Must be comparable with the existing keys.

    Yields:
        Step – VISITED / COMPARED / MOVED_* per level, then INSERTED or FOUND.
    """

    sb = StepBuilder()

    if tree.root is None:
        tree.add_root(value)
        yield sb.build(value, Action.INSERTED, f"Inserted {value} as root", line=2, is_final=True)
        return

    current = tree.node(tree.root)

    while True:
        yield sb.build(current.value, Action.VISITED, f"Visiting node {current.value}", line=5)
        yield sb.build(
            current.value, Action.COMPARED, f"Comparing {value} with {current.value}", line=6
        )

        if value < current.value:
            yield sb.build(
                current.value, Action.MOVED_LEFT,
                f"{value} < {current.value}, moving left", line=7,
            )
            if current.left is None:
                tree.add_child(current.value, Direction.LEFT, value)
                yield sb.build(
                    value, Action.INSERTED,
                    f"Inserted {value} as left child of {current.value}",
                    line=8, is_final=True,
                )
                return
            current = tree.node(current.left)

        elif value > current.value:
            yield sb.build(
                current.value, Action.MOVED_RIGHT,
                f"{value} > {current.value}, moving right", line=10,
            )
            if current.right is None:
                tree.add_child(current.value, Direction.RIGHT, value)
                yield sb.build(
                    value, Action.INSERTED,
                    f"Inserted {value} as right child of {current.value}",
                    line=11, is_final=True,
                )
                return
            current = tree.node(current.right)

        else:
            yield sb.build(
                current.value, Action.FOUND,
                f"{value} already exists, skipping", line=13, is_final=True,
            )
            return
