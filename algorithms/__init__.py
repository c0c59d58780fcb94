"""
algorithms/__init__.py — Operation Registry
============================================
Single source of truth for every tree operation the visualizer knows about.

    from algorithms import REGISTRY, get_operation

REGISTRY is a dict:
    {
        "insert": OpInfo(key, label, fn, pseudocode, takes_value, mutates, …),
        …
    }

OpInfo is a lightweight dataclass.  The engine and UI both consume it
so adding a new operation is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

# ---------------------------------------------------------------------------
# Import all operation modules
# ---------------------------------------------------------------------------
from algorithms.insert    import insert    as _insert,    PSEUDOCODE as _insert_pc
from algorithms.search    import search    as _search,    PSEUDOCODE as _search_pc
from algorithms.traversal import (
    inorder   as _inorder,   INORDER_PSEUDOCODE   as _in_pc,
    preorder  as _preorder,  PREORDER_PSEUDOCODE  as _pre_pc,
    postorder as _postorder, POSTORDER_PSEUDOCODE as _post_pc,
)
from algorithms.step import Action, Step, StepBuilder


# ---------------------------------------------------------------------------
# OpInfo — metadata card for each operation
# ---------------------------------------------------------------------------
@dataclass
class OpInfo:
    key:               str                    # registry key, e.g. "insert"
    label:             str                    # human label, e.g. "Insert"
    fn:                Callable               # the generator function
    pseudocode:        List[str]              # lines for the side-panel
    takes_value:       bool = False           # fn(tree, value) vs fn(tree)
    mutates:           bool = False           # may change the tree shape
    is_traversal:      bool = False
    complexity_time:   str  = ""              # e.g. "O(h)"
    complexity_space:  str  = ""
    description:       str  = ""              # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, OpInfo] = {

    "insert": OpInfo(
        key="insert", label="Insert", fn=_insert, pseudocode=_insert_pc,
        takes_value=True, mutates=True,
        complexity_time="O(h)", complexity_space="O(1)",
        description="Walks down from the root and attaches the value at the first empty slot.",
    ),

    "search": OpInfo(
        key="search", label="Search", fn=_search, pseudocode=_search_pc,
        takes_value=True,
        complexity_time="O(h)", complexity_space="O(1)",
        description="Follows one root-to-leaf path, halving the candidates at every node.",
    ),

    "inorder": OpInfo(
        key="inorder", label="Inorder Traversal", fn=_inorder, pseudocode=_in_pc,
        is_traversal=True,
        complexity_time="O(n)", complexity_space="O(h)",
        description="Left → Root → Right. Emits the values in ascending order.",
    ),

    "preorder": OpInfo(
        key="preorder", label="Preorder Traversal", fn=_preorder, pseudocode=_pre_pc,
        is_traversal=True,
        complexity_time="O(n)", complexity_space="O(h)",
        description="Root → Left → Right. Re-inserting this order rebuilds the same tree.",
    ),

    "postorder": OpInfo(
        key="postorder", label="Postorder Traversal", fn=_postorder, pseudocode=_post_pc,
        is_traversal=True,
        complexity_time="O(n)", complexity_space="O(h)",
        description="Left → Right → Root. Children are always processed before their parent.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_operation(key: str) -> Optional[OpInfo]:
    """Return OpInfo by key, or None."""
    return REGISTRY.get(key)


def list_operations() -> List[OpInfo]:
    """Return all registered operations in insertion order."""
    return list(REGISTRY.values())


def traversal_keys() -> List[str]:
    return [op.key for op in REGISTRY.values() if op.is_traversal]


__all__ = [
    "Action",
    "Step",
    "StepBuilder",
    "OpInfo",
    "REGISTRY",
    "get_operation",
    "list_operations",
    "traversal_keys",
]
