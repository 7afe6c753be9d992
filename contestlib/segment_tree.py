"""Bottom-up segment tree for point assignment and half-open range sums."""

from __future__ import annotations

from collections.abc import Iterable


class SumSegmentTree:
    """Sum segment tree over a fixed-length sequence; ranges are [left, right)."""

    def __init__(self, values: Iterable[int]) -> None:
        leaves = list(values)
        self._n = len(leaves)
        self._tree = [0] * self._n + leaves
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = self._tree[i << 1] + self._tree[i << 1 | 1]

    def modify(self, position: int, value: int) -> None:
        """Set the element at position to value."""
        if not 0 <= position < self._n:
            raise IndexError(f"position {position} out of range")
        p = position + self._n
        self._tree[p] = value
        while p > 1:
            self._tree[p >> 1] = self._tree[p] + self._tree[p ^ 1]
            p >>= 1

    def query(self, left: int, right: int) -> int:
        """Sum of elements in [left, right)."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) out of bounds")
        result = 0
        left += self._n
        right += self._n
        while left < right:
            if left & 1:
                result += self._tree[left]
                left += 1
            if right & 1:
                right -= 1
                result += self._tree[right]
            left >>= 1
            right >>= 1
        return result