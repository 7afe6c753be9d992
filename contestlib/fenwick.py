"""Fenwick tree supporting range additions and range sums."""

from __future__ import annotations


def _add(tree: list[int], index: int, delta: int) -> None:
    while index < len(tree):
        tree[index] += delta
        index += index & -index


def _prefix(tree: list[int], index: int) -> int:
    total = 0
    while index:
        total += tree[index]
        index -= index & -index
    return total


class RangeFenwick:
    """Binary indexed tree over positions 1..size with range update and range query."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._linear = [0] * (size + 2)
        self._offset = [0] * (size + 2)

    def _check_range(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self.size:
            raise ValueError(f"invalid range [{left}, {right}] for size {self.size}")

    def update(self, left: int, right: int, value: int) -> None:
        """Add value to every position in [left, right]."""
        self._check_range(left, right)
        _add(self._linear, left, value)
        _add(self._linear, right + 1, -value)
        _add(self._offset, left, -(left - 1) * value)
        _add(self._offset, right + 1, right * value)

    def prefix_sum(self, position: int) -> int:
        """Sum of positions 1..position."""
        if not 0 <= position <= self.size:
            raise ValueError(f"position {position} out of range for size {self.size}")
        return _prefix(self._linear, position) * position + _prefix(self._offset, position)

    def query(self, left: int, right: int) -> int:
        """Sum of positions in [left, right]."""
        self._check_range(left, right)
        return self.prefix_sum(right) - self.prefix_sum(left - 1)