import math
import random

import pytest

from algobox.graphs import bfs_order, dfs_order, dijkstra


def _empty(size):
    return [[0] * size for _ in range(size)]


def _connect(matrix, u, v):
    matrix[u][v] = 1
    matrix[v][u] = 1


def test_bfs_visits_every_vertex_once_and_starts_at_source():
    matrix = _empty(6)
    _connect(matrix, 0, 4)
    _connect(matrix, 4, 5)
    order = bfs_order(matrix, 4)
    assert order[0] == 4
    assert sorted(order) == list(range(6))


def test_bfs_scans_neighbours_in_index_order():
    matrix = _empty(5)
    for leaf in (0, 1, 3, 4):
        _connect(matrix, 2, leaf)
    order = bfs_order(matrix, 2)
    assert order[0] == 2
    assert order[1:] == sorted(order[1:])


def test_bfs_restarts_from_smallest_unvisited_vertex():
    matrix = _empty(5)
    _connect(matrix, 0, 1)
    _connect(matrix, 3, 4)
    assert bfs_order(matrix, 3) == [3, 4, 0, 1, 2]


def test_bfs_only_counts_entries_equal_to_one():
    matrix = [[0, 2, 0], [2, 0, 5], [0, 5, 0]]
    assert bfs_order(matrix, 0) == list(range(3))


def test_bfs_rejects_non_square_matrix():
    with pytest.raises(ValueError):
        bfs_order([[0, 1], [1]], 0)


def test_bfs_rejects_bad_source():
    with pytest.raises(ValueError):
        bfs_order(_empty(3), 3)


def test_dfs_goes_deep_before_wide():
    adjacency = {0: [1, 3], 1: [2], 2: [], 3: []}
    assert dfs_order(adjacency, 0) == [0, 1, 2, 3]


def test_dfs_handles_long_chains():
    length = 3000
    adjacency = [[vertex + 1] for vertex in range(length)] + [[]]
    assert dfs_order(adjacency, 0) == list(range(length + 1))


def test_dfs_skips_unreachable_vertices():
    adjacency = {0: [1], 1: [], 2: [0]}
    order = dfs_order(adjacency, 0)
    assert 2 not in order
    assert set(order) == {0, 1}


def test_dfs_terminates_on_cycles():
    order = dfs_order([[1], [2], [0]], 1)
    assert order[0] == 1
    assert sorted(order) == [0, 1, 2]


def test_dfs_rejects_start_outside_list():
    with pytest.raises(ValueError):
        dfs_order([[1], [0]], 5)


def test_dijkstra_prefers_cheaper_detour():
    cost = [[0, 5, 1], [5, 0, 1], [1, 1, 0]]
    assert dijkstra(cost, 0) == [0, 2, 1]


def test_dijkstra_unreachable_is_infinite():
    cost = [[0, 3, None], [3, 0, math.inf], [None, math.inf, 0]]
    distances = dijkstra(cost, 0)
    assert distances[0] == 0
    assert distances[1] == 3
    assert math.isinf(distances[2])


def test_dijkstra_distances_satisfy_triangle_inequality():
    rng = random.Random(7)
    size = 8
    cost = [
        [None if rng.random() < 0.4 else rng.randint(1, 20) for _ in range(size)]
        for _ in range(size)
    ]
    distances = dijkstra(cost, 0)
    assert distances[0] == 0
    for u, row in enumerate(cost):
        for v, weight in enumerate(row):
            if weight is not None and u != v:
                assert distances[v] <= distances[u] + weight


def test_dijkstra_rejects_negative_costs():
    with pytest.raises(ValueError):
        dijkstra([[0, -1], [1, 0]], 0)