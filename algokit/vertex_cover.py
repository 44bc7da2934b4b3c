"""Approximate vertex cover of an undirected graph held as adjacency lists."""

from __future__ import annotations


class Graph:
    """Undirected graph on vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Join u and v, appending each to the other's neighbour list."""
        self._check(u)
        self._check(v)
        self._adjacency[v].append(u)
        self._adjacency[u].append(v)

    def neighbours(self, vertex: int) -> tuple[int, ...]:
        """Neighbours of vertex in the order their edges were added."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    def vertex_cover(self) -> list[int]:
        """Cover built by taking both ends of a maximal matching, in ascending order."""
        covered = [False] * self.vertex_count
        for u, neighbours in enumerate(self._adjacency):
            if covered[u]:
                continue
            for v in neighbours:
                if not covered[v]:
                    covered[u] = covered[v] = True
                    break
        return [vertex for vertex, taken in enumerate(covered) if taken]