"""Segment tree answering maximum subsegment sum queries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

NEG_INF = -1_000_000_000


@dataclass(frozen=True)
class SegmentSummary:
    """Totals describing one segment: sum, best subsegment, best prefix and suffix."""

    total: int = 0
    best: int = NEG_INF
    prefix: int = 0
    suffix: int = 0


def _leaf(value: int) -> SegmentSummary:
    return SegmentSummary(value, value, value, value)


def merge_summaries(left: SegmentSummary, right: SegmentSummary) -> SegmentSummary:
    """Combine summaries of two adjacent segments, left first."""
    return SegmentSummary(
        total=left.total + right.total,
        best=max(left.best, right.best, left.suffix + right.prefix),
        prefix=max(left.prefix, left.total + right.prefix),
        suffix=max(right.suffix, right.total + left.suffix),
    )


class MaxSubsegmentTree:
    """Maximum subsegment sum over inclusive, zero-based ranges with point updates."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("values must not be empty")
        self._n = len(self._values)
        self._nodes = [SegmentSummary()] * (4 * self._n)
        self._build(0, 0, self._n - 1)

    def _build(self, node: int, low: int, high: int) -> SegmentSummary:
        if low == high:
            self._nodes[node] = _leaf(self._values[low])
        else:
            mid = (low + high) // 2
            self._nodes[node] = merge_summaries(
                self._build(2 * node + 1, low, mid),
                self._build(2 * node + 2, mid + 1, high),
            )
        return self._nodes[node]

    def _query(self, node: int, low: int, high: int, left: int, right: int) -> SegmentSummary:
        if left == low and right == high:
            return self._nodes[node]
        mid = (low + high) // 2
        if right <= mid:
            return self._query(2 * node + 1, low, mid, left, right)
        if left > mid:
            return self._query(2 * node + 2, mid + 1, high, left, right)
        return merge_summaries(
            self._query(2 * node + 1, low, mid, left, mid),
            self._query(2 * node + 2, mid + 1, high, mid + 1, right),
        )

    def _update(self, node: int, low: int, high: int, position: int, value: int) -> None:
        if low == high:
            self._nodes[node] = _leaf(value)
            return
        mid = (low + high) // 2
        if position <= mid:
            self._update(2 * node + 1, low, mid, position, value)
        else:
            self._update(2 * node + 2, mid + 1, high, position, value)
        self._nodes[node] = merge_summaries(self._nodes[2 * node + 1], self._nodes[2 * node + 2])

    def query(self, left: int, right: int) -> SegmentSummary:
        """Summary of the inclusive range [left, right]; its best field is the answer."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] out of bounds")
        return self._query(0, 0, self._n - 1, left, right)

    def update(self, position: int, value: int) -> None:
        """Set the element at position to value."""
        if not 0 <= position < self._n:
            raise IndexError(f"position {position} out of range")
        self._values[position] = value
        self._update(0, 0, self._n - 1, position, value)