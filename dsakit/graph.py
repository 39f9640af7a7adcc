"""Undirected graph construction and breadth/depth-first traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from typing import Union

Graph = Union[Mapping[int, Sequence[int]], Sequence[Sequence[int]]]


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} out of range for {vertex_count} vertices")


def adjacency_list(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build the adjacency list of an undirected graph from its edges."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    graph: list[list[int]] = [[] for _ in range(vertex_count)]
    for first, second in edges:
        _check_vertex(first, vertex_count)
        _check_vertex(second, vertex_count)
        graph[first].append(second)
        graph[second].append(first)
    return graph


def adjacency_matrix(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build the 0/1 adjacency matrix of an undirected graph from its edges."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for first, second in edges:
        _check_vertex(first, vertex_count)
        _check_vertex(second, vertex_count)
        matrix[first][second] = 1
        matrix[second][first] = 1
    return matrix


def format_adjacency_list(graph: Sequence[Sequence[int]]) -> str:
    """Return one line per vertex of the form 'v -> n1 n2 ...'."""
    return "\n".join(
        f"{vertex} -> " + " ".join(str(n) for n in neighbours)
        for vertex, neighbours in enumerate(graph)
    )


def _neighbours(graph: Graph, vertex: int) -> Sequence[int]:
    if isinstance(graph, Mapping):
        return graph.get(vertex, ())
    if 0 <= vertex < len(graph):
        return graph[vertex]
    return ()


def bfs(start: int, graph: Graph) -> list[int]:
    """Return vertices in breadth-first order from start."""
    visited = {start}
    pending = deque([start])
    order: list[int] = []
    while pending:
        vertex = pending.popleft()
        order.append(vertex)
        for neighbour in _neighbours(graph, vertex):
            if neighbour not in visited:
                visited.add(neighbour)
                pending.append(neighbour)
    return order


def dfs(start: int, graph: Graph) -> list[int]:
    """Return vertices in depth-first order from start, using an explicit stack.

    Neighbours are pushed in listed order, so the last-listed is explored first.
    """
    visited: set[int] = set()
    stack = [start]
    order: list[int] = []
    while stack:
        vertex = stack.pop()
        if vertex not in visited:
            visited.add(vertex)
            order.append(vertex)
        stack.extend(n for n in _neighbours(graph, vertex) if n not in visited)
    return order