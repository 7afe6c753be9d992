"""Closest pair of points in the plane, by squared Euclidean distance."""

from __future__ import annotations

import math
from bisect import bisect_left, insort
from collections.abc import Iterable
from itertools import combinations, pairwise

Point = tuple[int, int]


def _distance_squared(a: Point, b: Point) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def closest_pair_distance_squared(points: Iterable[Point]) -> int:
    """Smallest squared distance between two of the points, by a sweep line."""
    ordered = sorted(tuple(p) for p in points)
    if len(ordered) < 2:
        raise ValueError("at least two points are required")
    best = _distance_squared(ordered[0], ordered[1])
    active: list[tuple[int, int]] = []
    tail = 0
    for x, y in ordered:
        while (x - ordered[tail][0]) ** 2 > best:
            tail_x, tail_y = ordered[tail]
            del active[bisect_left(active, (tail_y, tail_x))]
            tail += 1
        reach = math.sqrt(best) + 1
        low = bisect_left(active, (y - reach,))
        high = bisect_left(active, (y + reach + 1,))
        for other_y, other_x in active[low:high]:
            best = min(best, (x - other_x) ** 2 + (y - other_y) ** 2)
        insort(active, (y, x))
    return best


def sorted_neighbour_distance_squared(points: Iterable[Point]) -> int:
    """Exact for up to 100 points; beyond that, the best of neighbours in y order."""
    ordered = sorted((tuple(p) for p in points), reverse=True)
    ordered.sort(key=lambda p: p[1], reverse=True)
    if len(ordered) < 2:
        raise ValueError("at least two points are required")
    pairs = combinations(ordered, 2) if len(ordered) <= 100 else pairwise(ordered)
    return min(_distance_squared(a, b) for a, b in pairs)