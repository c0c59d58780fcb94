"""Tests for the instrumented insert operation."""

from __future__ import annotations

import pytest

from algorithms.insert import PSEUDOCODE, insert
from algorithms.step import Action
from bst import BinarySearchTree, Direction


def actions(steps):
    return [s.action for s in steps]


def test_insert_into_empty_tree_is_single_inserted_step(empty_tree: BinarySearchTree) -> None:
    """It should make the value the root with exactly one step."""

    steps = empty_tree.insert(50)

    assert len(steps) == 1
    assert steps[0].action is Action.INSERTED
    assert steps[0].node == 50
    assert steps[0].description == "Inserted 50 as root"
    assert steps[0].is_final
    assert empty_tree.root == 50
    assert len(empty_tree) == 1


def test_insert_left_child_trace() -> None:
    """It should visit, compare, move left and attach under the root."""

    tree = BinarySearchTree().build([50])
    steps = tree.insert(30)

    assert actions(steps) == [
        Action.VISITED, Action.COMPARED, Action.MOVED_LEFT, Action.INSERTED,
    ]
    assert [s.node for s in steps] == [50, 50, 50, 30]
    assert steps[2].description == "30 < 50, moving left"
    assert steps[3].description == "Inserted 30 as left child of 50"
    assert tree.node(50).left == 30


def test_insert_right_child_trace() -> None:
    tree = BinarySearchTree().build([50])
    steps = tree.insert(70)

    assert actions(steps) == [
        Action.VISITED, Action.COMPARED, Action.MOVED_RIGHT, Action.INSERTED,
    ]
    assert steps[3].description == "Inserted 70 as right child of 50"
    assert tree.node(50).right == 70


def test_insert_at_depth_two_walks_two_levels() -> None:
    """It should emit three steps per ancestor plus the INSERTED step."""

    tree = BinarySearchTree().build([50, 30, 70])
    steps = tree.insert(40)

    assert actions(steps) == [
        Action.VISITED, Action.COMPARED, Action.MOVED_LEFT,
        Action.VISITED, Action.COMPARED, Action.MOVED_RIGHT,
        Action.INSERTED,
    ]
    assert [s.node for s in steps] == [50, 50, 50, 30, 30, 30, 40]
    assert tree.depth_of(40) == 2
    assert len(steps) == 3 * 2 + 1


def test_insert_duplicate_ends_in_found_and_leaves_tree_unchanged(
    balanced_tree: BinarySearchTree,
) -> None:
    """It should stop at the existing node and not mutate the tree."""

    before = balanced_tree.to_dict()
    steps = balanced_tree.insert(40)

    assert actions(steps) == [
        Action.VISITED, Action.COMPARED, Action.MOVED_LEFT,
        Action.VISITED, Action.COMPARED, Action.MOVED_RIGHT,
        Action.VISITED, Action.COMPARED, Action.FOUND,
    ]
    assert steps[-1].node == 40
    assert steps[-1].description == "40 already exists, skipping"
    assert steps[-1].is_final
    assert balanced_tree.to_dict() == before
    assert len(balanced_tree) == 7


def test_insert_duplicate_root() -> None:
    tree = BinarySearchTree().build([50])
    steps = tree.insert(50)

    assert actions(steps) == [Action.VISITED, Action.COMPARED, Action.FOUND]
    assert len(tree) == 1


def test_step_numbers_are_sequential(balanced_tree: BinarySearchTree) -> None:
    steps = balanced_tree.insert(65)

    assert [s.step_number for s in steps] == list(range(len(steps)))
    assert [s.is_final for s in steps] == [False] * (len(steps) - 1) + [True]


def test_pseudocode_lines_point_at_the_listing(balanced_tree: BinarySearchTree) -> None:
    steps = balanced_tree.insert(65)

    for step in steps:
        assert 0 <= step.pseudocode_line < len(PSEUDOCODE)
    assert steps[0].pseudocode_line == 5
    assert steps[1].pseudocode_line == 6
    assert steps[-1].pseudocode_line == 8


def test_tree_is_mutated_only_when_the_final_step_is_reached() -> None:
    """It should not attach the node until the INSERTED step is yielded."""

    tree = BinarySearchTree().build([50])
    gen = insert(tree, 30)

    next(gen)
    next(gen)
    next(gen)
    assert 30 not in tree

    last = next(gen)
    assert last.action is Action.INSERTED
    assert 30 in tree


def test_sorted_input_builds_a_right_spine() -> None:
    tree = BinarySearchTree().build([1, 2, 3, 4, 5])

    assert tree.height() == 4
    for value in range(1, 5):
        assert tree.node(value).left is None
        assert tree.node(value).right == value + 1


def test_add_child_rejects_wrong_side() -> None:
    tree = BinarySearchTree().build([50])

    with pytest.raises(ValueError):
        tree.add_child(50, Direction.LEFT, 70)
    with pytest.raises(ValueError):
        tree.add_child(50, Direction.RIGHT, 50)
