import math
import random

import pytest

from contestlib.graph import (
    bfs_levels,
    dfs_times,
    dijkstra,
    floyd_warshall,
    reconstruct_path,
)

SIZE = 12


def _random_weighted(seed):
    rng = random.Random(seed)
    adjacency = {v: [] for v in range(SIZE)}
    for _ in range(30):
        u, v = rng.randrange(SIZE), rng.randrange(SIZE)
        adjacency[u].append((v, rng.randint(1, 20)))
    return adjacency


def _matrix(adjacency):
    matrix = [[math.inf] * SIZE for _ in range(SIZE)]
    for v in range(SIZE):
        matrix[v][v] = 0
    for u, edges in adjacency.items():
        for v, w in edges:
            matrix[u][v] = min(matrix[u][v], w)
    return matrix


def _unweighted(seed):
    return [[v for v, _ in edges] for _, edges in sorted(_random_weighted(seed).items())]


@pytest.mark.parametrize("seed", range(5))
def test_dfs_times_are_nested_intervals(seed):
    graph = _unweighted(seed)
    result = dfs_times(graph, 0)
    assert result.time_in[0] == 0
    assert set(result.time_in) == set(bfs_levels(graph, 0))
    assert set(result.time_in) == set(result.time_out)
    stamps = sorted(list(result.time_in.values()) + list(result.time_out.values()))
    assert stamps == list(range(2 * len(result.time_in)))
    for a in result.time_in:
        for b in result.time_in:
            ia, oa = result.time_in[a], result.time_out[a]
            ib, ob = result.time_in[b], result.time_out[b]
            assert ia < oa
            assert oa < ib or ob < ia or (ia <= ib and ob <= oa) or (ib <= ia and oa <= ob)


def test_dfs_visits_each_vertex_once_in_cycle():
    graph = {0: [1], 1: [2], 2: [0]}
    result = dfs_times(graph, 0)
    assert result.time_out[0] == 2 * len(graph) - 1


@pytest.mark.parametrize("seed", range(5))
def test_bfs_levels_match_unit_weight_dijkstra(seed):
    graph = _unweighted(seed)
    unit = {u: [(v, 1) for v in neighbours] for u, neighbours in enumerate(graph)}
    assert bfs_levels(graph, 0) == dijkstra(unit, 0)


@pytest.mark.parametrize("seed", range(5))
def test_dijkstra_matches_floyd_warshall(seed):
    adjacency = _random_weighted(seed)
    distances, _ = floyd_warshall(_matrix(adjacency))
    for source in range(SIZE):
        expected = {v: d for v, d in enumerate(distances[source]) if d != math.inf}
        assert dijkstra(adjacency, source) == expected


@pytest.mark.parametrize("seed", range(5))
def test_paths_have_shortest_length(seed):
    matrix = _matrix(_random_weighted(seed))
    distances, next_hop = floyd_warshall(matrix)
    for source in range(SIZE):
        for target in range(SIZE):
            if distances[source][target] == math.inf:
                with pytest.raises(ValueError):
                    reconstruct_path(next_hop, source, target)
                continue
            path = reconstruct_path(next_hop, source, target)
            assert path[0] == source and path[-1] == target
            assert sum(matrix[a][b] for a, b in zip(path, path[1:])) == distances[source][target]


def test_path_to_self():
    distances, next_hop = floyd_warshall([[0, 4], [math.inf, 0]])
    assert reconstruct_path(next_hop, 1, 1) == [1]
    assert distances[1][0] == math.inf


def test_floyd_rejects_ragged_matrix():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])