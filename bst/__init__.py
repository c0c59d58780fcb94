"""
bst/
----
Core data layer.  Public API:

    from bst import BinarySearchTree, TreeSnapshot
    from bst import Node, Direction, NodeHighlight
"""

from bst.node import Node, Direction, NodeHighlight
from bst.tree import BinarySearchTree, TreeSnapshot

__all__ = [
    "Node",             "Direction",    "NodeHighlight",
    "BinarySearchTree", "TreeSnapshot",
]
