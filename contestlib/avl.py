"""Self-balancing AVL binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class AVLNode:
    """A tree node holding a value, its children and the height of its subtree."""

    value: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _refresh(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _factor(node: AVLNode) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _balance(node: AVLNode) -> AVLNode:
    _refresh(node)
    factor = _factor(node)
    if factor > 1:
        if _factor(node.left) <= 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _factor(node.right) >= 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: AVLNode | None, value: Any) -> AVLNode:
    if node is None:
        return AVLNode(value)
    if node.value > value:
        node.left = _insert(node.left, value)
    else:
        node.right = _insert(node.right, value)
    return _balance(node)


class AVLTree:
    """AVL tree; equal values go to the right subtree."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None
        self._size = 0

    def insert(self, value: Any) -> None:
        """Insert value, rebalancing on the way back up."""
        self.root = _insert(self.root, value)
        self._size += 1

    def height(self) -> int:
        """Number of levels in the tree; zero when empty."""
        return _height(self.root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size