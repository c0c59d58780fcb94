"""Shared fixtures."""

from __future__ import annotations

import pytest

from bst import BinarySearchTree


BALANCED = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def empty_tree() -> BinarySearchTree:
    return BinarySearchTree()


@pytest.fixture
def balanced_tree() -> BinarySearchTree:
    return BinarySearchTree().build(BALANCED)


@pytest.fixture
def client():
    from main import app

    app.config.update(TESTING=True, SECRET_KEY="test-secret")
    with app.test_client() as c:
        yield c
