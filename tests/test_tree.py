"""Tests for the BinarySearchTree container and its plain queries."""

from __future__ import annotations

import pytest

from algorithms.step import Action
from bst import BinarySearchTree, Direction, Node


def test_new_tree_is_empty(empty_tree: BinarySearchTree) -> None:
    assert empty_tree.is_empty
    assert len(empty_tree) == 0
    assert empty_tree.values() == []
    assert empty_tree.height() == -1
    assert empty_tree.snapshot().is_empty


def test_build_skips_duplicates() -> None:
    tree = BinarySearchTree().build([5, 3, 5, 8, 3])

    assert tree.values() == [3, 5, 8]
    assert len(tree) == 3


def test_build_replaces_previous_contents(balanced_tree: BinarySearchTree) -> None:
    balanced_tree.build([1, 2])

    assert balanced_tree.values() == [1, 2]
    assert 50 not in balanced_tree


def test_queries(balanced_tree: BinarySearchTree) -> None:
    assert 40 in balanced_tree
    assert 45 not in balanced_tree
    assert balanced_tree.height() == 2
    assert balanced_tree.depth_of(50) == 0
    assert balanced_tree.depth_of(60) == 2
    assert balanced_tree.depth_of(65) is None
    assert (balanced_tree.node(30).left, balanced_tree.node(30).right) == (20, 40)


def test_node_lookup_raises_for_missing_value(balanced_tree: BinarySearchTree) -> None:
    assert balanced_tree.get_node(99) is None
    with pytest.raises(KeyError):
        balanced_tree.node(99)


def test_snapshot_lists_children(balanced_tree: BinarySearchTree) -> None:
    snap = balanced_tree.snapshot()

    assert snap.root == 50
    assert len(snap) == 7
    assert snap.children[50] == (30, 70)
    assert snap.children[20] == (None, None)


def test_snapshot_is_detached_from_later_inserts(balanced_tree: BinarySearchTree) -> None:
    snap = balanced_tree.snapshot()
    balanced_tree.insert(65)

    assert 65 not in snap.children
    assert snap.children[60] == (None, None)


def test_clear_is_idempotent(balanced_tree: BinarySearchTree) -> None:
    balanced_tree.clear()
    balanced_tree.clear()

    assert balanced_tree.is_empty
    assert balanced_tree.root is None
    assert len(balanced_tree) == 0


def test_insert_after_clear_starts_a_fresh_tree() -> None:
    """It should make the next insert the root of a brand-new tree."""

    tree = BinarySearchTree().build([50, 30, 70, 20, 40])
    tree.clear()
    steps = tree.insert(99)

    assert tree.values() == [99]
    assert tree.root == 99
    assert [(s.action, s.node) for s in steps] == [(Action.INSERTED, 99)]
    assert steps[0].description == "Inserted 99 as root"


def test_to_dict_round_trip_keeps_shape() -> None:
    tree = BinarySearchTree().build([50, 70, 30, 80, 20, 60, 40, 10])
    copy = BinarySearchTree.from_dict(tree.to_dict())

    assert tree.to_dict() == {"values": [50, 30, 20, 10, 40, 70, 60, 80]}
    assert copy.snapshot() == tree.snapshot()


def test_from_empty_dict() -> None:
    assert BinarySearchTree.from_dict({}).is_empty


def test_add_root_twice_raises() -> None:
    tree = BinarySearchTree()
    tree.add_root(1)

    with pytest.raises(ValueError):
        tree.add_root(2)


def test_node_attach_refuses_to_overwrite() -> None:
    node = Node(10)
    node.attach(Direction.LEFT, 5)

    assert node.child(Direction.LEFT) == 5
    assert not node.is_leaf
    with pytest.raises(ValueError):
        node.attach(Direction.LEFT, 4)
