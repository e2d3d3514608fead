"""Graph traversals and single-source shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Mapping, Sequence

Matrix = Sequence[Sequence[float | None]]


def _check_square(matrix: Matrix) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def _check_vertex(vertex: int, size: int) -> None:
    if not 0 <= vertex < size:
        raise ValueError(f"vertex {vertex} is outside 0..{size - 1}")


def bfs_order(matrix: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return vertices in breadth-first order over an adjacency matrix.

    Only entries equal to 1 count as edges. After the search from
    ``source`` finishes, it restarts from each still-unvisited vertex in
    ascending order, so every vertex appears exactly once.
    """
    size = _check_square(matrix)
    _check_vertex(source, size)
    visited = [False] * size
    order: list[int] = []

    def visit_from(start: int) -> None:
        visited[start] = True
        order.append(start)
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour, edge in enumerate(matrix[current]):
                if edge == 1 and not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    queue.append(neighbour)

    visit_from(source)
    for vertex in range(size):
        if not visited[vertex]:
            visit_from(vertex)
    return order


def _neighbours(
    adjacency: Mapping[int, Iterable[int]] | Sequence[Iterable[int]], vertex: int
) -> Iterable[int]:
    if isinstance(adjacency, Mapping):
        return adjacency.get(vertex, ())
    if 0 <= vertex < len(adjacency):
        return adjacency[vertex]
    return ()


def dfs_order(
    adjacency: Mapping[int, Iterable[int]] | Sequence[Iterable[int]], start: int
) -> list[int]:
    """Return the vertices reachable from ``start`` in depth-first order.

    ``adjacency`` maps each vertex to its neighbours, either as a mapping
    or as a sequence indexed by vertex. Neighbours are explored in the
    order they are listed.
    """
    if not isinstance(adjacency, Mapping) and not 0 <= start < len(adjacency):
        raise ValueError(f"vertex {start} is outside the adjacency list")
    visited = {start}
    order = [start]
    stack = [iter(_neighbours(adjacency, start))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(_neighbours(adjacency, neighbour)))
                break
        else:
            stack.pop()
    return order


def dijkstra(cost: Matrix, source: int) -> list[float]:
    """Return shortest distances from ``source`` over a cost matrix.

    A missing edge is written as ``None`` or ``math.inf``. Unreachable
    vertices get ``math.inf``. Negative costs are rejected.
    """
    size = _check_square(cost)
    _check_vertex(source, size)
    if any(weight is not None and weight < 0 for row in cost for weight in row):
        raise ValueError("edge costs must not be negative")

    distances: list[float] = [math.inf] * size
    distances[source] = 0
    settled = [False] * size
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        distance, current = heapq.heappop(heap)
        if settled[current]:
            continue
        settled[current] = True
        for neighbour, weight in enumerate(cost[current]):
            if weight is None or neighbour == current or settled[neighbour]:
                continue
            candidate = distance + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distances