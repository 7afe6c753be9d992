"""Graph traversals and shortest paths."""

from __future__ import annotations

import heapq
import itertools
import math
from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


def _neighbours(adjacency: Any, vertex: Hashable) -> Iterable:
    if isinstance(adjacency, Mapping):
        return adjacency.get(vertex, ())
    return adjacency[vertex]


@dataclass
class DfsResult:
    """Entry and exit times of every vertex reached by a depth-first search."""

    time_in: dict[Hashable, int] = field(default_factory=dict)
    time_out: dict[Hashable, int] = field(default_factory=dict)


def dfs_times(adjacency: Any, start: Hashable) -> DfsResult:
    """Depth-first search from start, stamping each vertex on entry and exit."""
    result = DfsResult()
    timer = itertools.count()
    result.time_in[start] = next(timer)
    stack = [(start, iter(_neighbours(adjacency, start)))]
    while stack:
        vertex, pending = stack[-1]
        for neighbour in pending:
            if neighbour not in result.time_in:
                result.time_in[neighbour] = next(timer)
                stack.append((neighbour, iter(_neighbours(adjacency, neighbour))))
                break
        else:
            stack.pop()
            result.time_out[vertex] = next(timer)
    return result


def bfs_levels(adjacency: Any, source: Hashable) -> dict[Hashable, int]:
    """Number of edges from source to every reachable vertex."""
    levels = {source: 0}
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        for neighbour in _neighbours(adjacency, vertex):
            if neighbour not in levels:
                levels[neighbour] = levels[vertex] + 1
                queue.append(neighbour)
    return levels


def dijkstra(adjacency: Any, source: Hashable) -> dict[Hashable, float]:
    """Shortest distances from source; adjacency yields (neighbour, cost) pairs."""
    distances = {source: 0}
    tie = itertools.count()
    heap = [(0, next(tie), source)]
    while heap:
        cost, _, vertex = heapq.heappop(heap)
        if cost != distances[vertex]:
            continue
        for neighbour, weight in _neighbours(adjacency, vertex):
            candidate = cost + weight
            if candidate < distances.get(neighbour, math.inf):
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, next(tie), neighbour))
    return distances


def floyd_warshall(
    matrix: Sequence[Sequence[float]],
) -> tuple[list[list[float]], list[list[int | None]]]:
    """All-pairs shortest distances and next-hop table; math.inf marks no edge."""
    distances = [list(row) for row in matrix]
    size = len(distances)
    if any(len(row) != size for row in distances):
        raise ValueError("matrix must be square")
    next_hop: list[list[int | None]] = [
        [j if i == j or weight != math.inf else None for j, weight in enumerate(row)]
        for i, row in enumerate(distances)
    ]
    for k in range(size):
        row_k = distances[k]
        for i, row_i in enumerate(distances):
            through = row_i[k]
            if through == math.inf:
                continue
            for j, onward in enumerate(row_k):
                if through + onward < row_i[j]:
                    row_i[j] = through + onward
                    next_hop[i][j] = next_hop[i][k]
    return distances, next_hop


def reconstruct_path(
    next_hop: Sequence[Sequence[int | None]], source: int, target: int
) -> list[int]:
    """Vertices on the shortest path from source to target."""
    if next_hop[source][target] is None:
        raise ValueError(f"no path from {source} to {target}")
    path = [source]
    while source != target:
        source = next_hop[source][target]
        path.append(source)
    return path