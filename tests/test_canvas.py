"""Tests for the SVG renderer."""

from __future__ import annotations

import re

import pytest

from algorithms.step import Action, Step
from bst import BinarySearchTree, NodeHighlight
from layout import compute_positions
from ui import render_tree, highlight_for


def layout_of(tree: BinarySearchTree):
    return compute_positions(tree.snapshot())


def node_class(svg: str, value) -> str:
    match = re.search(rf'<g class="node-group (\w+)" data-value="{value}">', svg)
    assert match, f"node {value} not rendered"
    return match.group(1)


@pytest.mark.parametrize(
    "action, expected",
    [
        (Action.VISITED, NodeHighlight.ACTIVE),
        (Action.COMPARED, NodeHighlight.COMPARED),
        (Action.MOVED_LEFT, NodeHighlight.ACTIVE),
        (Action.MOVED_RIGHT, NodeHighlight.ACTIVE),
        (Action.INSERTED, NodeHighlight.INSERTED),
        (Action.FOUND, NodeHighlight.FOUND),
        (Action.NOT_FOUND, NodeHighlight.ACTIVE),
    ],
)
def test_every_action_has_a_highlight(action: Action, expected: NodeHighlight) -> None:
    assert highlight_for(action) is expected


def test_unknown_action_is_rejected() -> None:
    with pytest.raises(ValueError):
        highlight_for("visited")


def test_empty_tree_renders_placeholder(empty_tree: BinarySearchTree) -> None:
    svg = render_tree(layout_of(empty_tree))

    assert "Tree is empty" in svg
    assert "node-group" not in svg


def test_static_tree_has_one_group_per_node_and_edge(balanced_tree: BinarySearchTree) -> None:
    svg = render_tree(layout_of(balanced_tree))

    assert svg.count('class="node-group none"') == 7
    assert svg.count("<line ") == 6
    assert "active" not in svg


def test_step_highlights_its_node(balanced_tree: BinarySearchTree) -> None:
    step = Step(node=30, action=Action.COMPARED)
    svg = render_tree(layout_of(balanced_tree), step)

    assert node_class(svg, 30) == "compared"
    assert node_class(svg, 50) == "none"


def test_move_lights_up_the_followed_edge(balanced_tree: BinarySearchTree) -> None:
    step = Step(node=50, action=Action.MOVED_RIGHT)
    svg = render_tree(layout_of(balanced_tree), step)

    assert 'class="edge edge-right active" data-parent="50" data-child="70"' in svg
    assert svg.count('active" data-parent') == 1


def test_not_found_without_node_highlights_nothing(balanced_tree: BinarySearchTree) -> None:
    step = Step(node=None, action=Action.NOT_FOUND)
    svg = render_tree(layout_of(balanced_tree), step)

    assert svg.count('class="node-group none"') == 7


def test_visited_values_and_current_step(balanced_tree: BinarySearchTree) -> None:
    step = Step(node=40, action=Action.VISITED)
    svg = render_tree(layout_of(balanced_tree), step, visited=[20, 30, 40])

    assert node_class(svg, 20) == "visited"
    assert node_class(svg, 30) == "visited"
    assert node_class(svg, 40) == "active"
    assert node_class(svg, 80) == "none"


def test_svg_box_matches_layout(balanced_tree: BinarySearchTree) -> None:
    layout = layout_of(balanced_tree)
    svg = render_tree(layout)

    assert svg.startswith(f'<svg width="{layout.width}" height="{layout.height}"')
    assert svg.rstrip().endswith("</svg>")
