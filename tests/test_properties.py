"""Property tests over arbitrary insertion sequences."""

from __future__ import annotations

from hypothesis import given, strategies as st

from algorithms.step import Action, visited_values
from bst import BinarySearchTree
from layout import compute_positions

values = st.lists(st.integers(min_value=-999, max_value=999), max_size=40)


@given(values)
def test_inorder_is_sorted_unique(xs) -> None:
    tree = BinarySearchTree().build(xs)

    assert tree.values() == sorted(set(xs))
    assert visited_values(tree.inorder_traversal()) == sorted(set(xs))


@given(values, st.integers(min_value=-999, max_value=999))
def test_insert_trace_length_follows_depth(xs, x) -> None:
    tree = BinarySearchTree().build(xs)
    existed = x in tree
    steps = tree.insert(x)
    depth = tree.depth_of(x)

    if existed:
        assert steps[-1].action is Action.FOUND
        assert len(steps) == 3 * depth + 3
    else:
        assert steps[-1].action is Action.INSERTED
        assert len(steps) == 3 * depth + 1
    assert sum(1 for s in steps if s.is_final) == 1


@given(values, st.integers(min_value=-999, max_value=999))
def test_search_agrees_with_membership(xs, x) -> None:
    tree = BinarySearchTree().build(xs)
    last = tree.search(x)[-1]

    assert (last.action is Action.FOUND) == (x in tree)


@given(values)
def test_layout_columns_are_inorder_ranks(xs) -> None:
    tree = BinarySearchTree().build(xs)
    layout = compute_positions(tree.snapshot())

    assert [layout.positions[v].column for v in tree.values()] == list(range(len(tree)))
    assert len(layout.edges) == max(len(tree) - 1, 0)


@given(values)
def test_serialisation_keeps_shape(xs) -> None:
    tree = BinarySearchTree().build(xs)

    assert BinarySearchTree.from_dict(tree.to_dict()).snapshot() == tree.snapshot()


def _child_pairs(tree: BinarySearchTree):
    for value, (left, right) in tree.snapshot().children.items():
        for child in (left, right):
            if child is not None:
                yield value, child


@given(values)
def test_preorder_puts_each_node_before_its_children(xs) -> None:
    tree = BinarySearchTree().build(xs)
    order = visited_values(tree.preorder_traversal())
    index = {v: i for i, v in enumerate(order)}

    assert sorted(order) == tree.values()
    for parent, child in _child_pairs(tree):
        assert index[parent] < index[child]


@given(values)
def test_postorder_puts_each_node_after_its_children(xs) -> None:
    tree = BinarySearchTree().build(xs)
    order = visited_values(tree.postorder_traversal())
    index = {v: i for i, v in enumerate(order)}

    assert sorted(order) == tree.values()
    for parent, child in _child_pairs(tree):
        assert index[parent] > index[child]


@given(values, st.integers(min_value=-999, max_value=999))
def test_read_only_operations_repeat_exactly(xs, x) -> None:
    """It should emit the same steps every time a read-only operation runs."""

    tree = BinarySearchTree().build(xs)

    assert tree.search(x) == tree.search(x)
    assert tree.inorder_traversal() == tree.inorder_traversal()
    assert tree.preorder_traversal() == tree.preorder_traversal()
    assert tree.postorder_traversal() == tree.postorder_traversal()
