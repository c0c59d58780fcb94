"""Tests for the three depth-first traversals."""

from __future__ import annotations

import pytest

from algorithms.step import Action, visited_values
from algorithms.traversal import (
    INORDER_PSEUDOCODE,
    Order,
    traverse,
)
from bst import BinarySearchTree, Direction


@pytest.mark.parametrize(
    "method, expected",
    [
        ("inorder_traversal",   [20, 30, 40, 50, 60, 70, 80]),
        ("preorder_traversal",  [50, 30, 20, 40, 70, 60, 80]),
        ("postorder_traversal", [20, 40, 30, 60, 80, 70, 50]),
    ],
)
def test_visit_order(balanced_tree: BinarySearchTree, method: str, expected) -> None:
    steps = getattr(balanced_tree, method)()

    assert visited_values(steps) == expected


@pytest.mark.parametrize("order", list(Order))
def test_empty_tree_yields_nothing(empty_tree: BinarySearchTree, order: Order) -> None:
    assert list(traverse(empty_tree, order)) == []


@pytest.mark.parametrize("order", list(Order))
def test_step_shape(balanced_tree: BinarySearchTree, order: Order) -> None:
    """It should visit every node once and move once per edge."""

    steps = list(traverse(balanced_tree, order))
    visits = [s for s in steps if s.action is Action.VISITED]
    moves = [s for s in steps if s.action in (Action.MOVED_LEFT, Action.MOVED_RIGHT)]

    assert len(visits) == len(balanced_tree)
    assert len(moves) == len(balanced_tree) - 1
    assert len(steps) == 2 * len(balanced_tree) - 1
    assert [s.step_number for s in steps] == list(range(len(steps)))


def test_inorder_small_tree_exact_trace() -> None:
    tree = BinarySearchTree().build([50, 30, 70])
    steps = tree.inorder_traversal()

    assert [(s.action, s.node) for s in steps] == [
        (Action.MOVED_LEFT, 50),
        (Action.VISITED, 30),
        (Action.VISITED, 50),
        (Action.MOVED_RIGHT, 50),
        (Action.VISITED, 70),
    ]
    assert steps[1].description == "Visited 30"
    assert steps[0].description == "Moving left from 50"
    assert steps[1].pseudocode_line == 3
    assert INORDER_PSEUDOCODE[3].strip() == "visit(node)"


def test_deep_list_tree_does_not_recurse() -> None:
    """It should walk a spine deeper than the recursion limit."""

    tree = BinarySearchTree()
    tree.add_root(0)
    for value in range(1, 3000):
        tree.add_child(value - 1, Direction.RIGHT, value)

    assert visited_values(tree.inorder_traversal()) == list(range(3000))
    assert visited_values(tree.postorder_traversal())[0] == 2999


def test_traversal_does_not_mutate(balanced_tree: BinarySearchTree) -> None:
    before = balanced_tree.to_dict()
    for order in Order:
        list(traverse(balanced_tree, order))
    assert balanced_tree.to_dict() == before
