"""Tests for the HTML side panels."""

from __future__ import annotations

from algorithms import list_operations
from algorithms.insert import PSEUDOCODE
from engine import RunMetrics
from ui import (
    analytics_panel,
    operation_panel,
    playback_controls,
    pseudocode_viewer,
    status_panel,
    traversal_output,
    tree_builder,
)


def test_operation_panel_has_inputs_and_traversal_buttons() -> None:
    html = operation_panel(list_operations())

    assert 'id="insert-input"' in html
    assert 'id="btn-search"' in html
    for order in ("inorder", "preorder", "postorder"):
        assert f'data-order="{order}"' in html


def test_tree_builder_quick_builds() -> None:
    html = tree_builder()

    assert 'data-values="50,30,70,20,40,60,80"' in html
    assert 'data-values="1,2,3,4,5"' in html
    assert 'id="btn-random"' in html
    assert 'id="btn-clear"' in html


def test_playback_controls_mark_speed_and_finish() -> None:
    html = playback_controls(is_playing=False, current_step=7, total_steps=7, speed="fast")

    assert '<option value="fast" selected>' in html
    assert "FINISHED" in html
    assert "width: 100%" in html
    assert "FINISHED" not in playback_controls(current_step=3, total_steps=7)


def test_pseudocode_viewer_highlights_one_line() -> None:
    html = pseudocode_viewer(PSEUDOCODE, current_line=6, op_label="Insert")

    assert html.count("code-line highlight") == 1
    assert 'class="code-line highlight" data-line="6"' in html
    assert "&lt;" in html
    assert "Run an operation" in pseudocode_viewer([])


def test_status_panel_escapes_and_defaults() -> None:
    assert "Ready." in status_panel()
    html = status_panel("30 < 50, moving left", "moved_left")
    assert "30 &lt; 50, moving left" in html
    assert 'class="status-message moved_left"' in html


def test_analytics_panel() -> None:
    assert "Run an operation" in analytics_panel()

    html = analytics_panel(RunMetrics(
        op_label="Search", value=40, nodes_visited=3, comparisons=3,
        total_steps=9, outcome="found",
    ))
    assert "Search" in html
    assert "<strong>40</strong>" in html
    assert "✅ Found" in html


def test_traversal_output() -> None:
    assert "placeholder" in traversal_output()
    html = traversal_output("Inorder Traversal", [20, 30])
    assert html.count("traversal-item") == 2
    assert "nothing visited yet" in traversal_output("Inorder Traversal", [])
