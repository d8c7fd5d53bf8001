"""Graph helpers: edge weights, minimum spanning trees, transposition."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations


def minimum_edge_weight(matrix: Sequence[Sequence[int]]) -> int:
    """Smallest weight between two distinct vertices of a symmetric weight matrix."""
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("the weight matrix must be square")
    if size < 2:
        raise ValueError("at least two vertices are needed")
    return min(rows[i][j] for i, j in combinations(range(size), 2))


def minimum_spanning_tree_weight(
    vertex_count: int, edges: Iterable[tuple[int, int, int]]
) -> int:
    """Total weight of a minimum spanning forest, found with Kruskal's method.

    Vertices are numbered 1 to vertex_count; 0 is accepted as well. Each
    edge is a (u, v, weight) triple.
    """
    edges = [tuple(edge) for edge in edges]
    parent = {vertex: vertex for vertex in range(vertex_count + 1)}
    size = dict.fromkeys(parent, 1)
    for u, v, _ in edges:
        if u not in parent or v not in parent:
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 0..{vertex_count}")

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    total = 0
    for u, v, weight in sorted(edges, key=lambda edge: edge[2]):
        root_u, root_v = find(u), find(v)
        if root_u == root_v:
            continue
        if size[root_u] < size[root_v]:
            root_u, root_v = root_v, root_u
        parent[root_v] = root_u
        size[root_u] += size[root_v]
        total += weight
    return total


def transpose_graph(adjacency: Sequence[Iterable[int]]) -> list[list[int]]:
    """Reverse every edge of a directed graph given as adjacency lists."""
    rows = [list(neighbours) for neighbours in adjacency]
    reversed_graph: list[list[int]] = [[] for _ in rows]
    for source, neighbours in enumerate(rows):
        for dest in neighbours:
            if not 0 <= dest < len(rows):
                raise ValueError(f"edge {source} -> {dest} points outside the graph")
            reversed_graph[dest].append(source)
    return reversed_graph


def format_adjacency(adjacency: Sequence[Iterable[int]]) -> str:
    """One line per vertex: its number, an arrow and its neighbours."""
    return "\n".join(
        f"{vertex}--> {'  '.join(map(str, neighbours))}".rstrip()
        for vertex, neighbours in enumerate(adjacency)
    )