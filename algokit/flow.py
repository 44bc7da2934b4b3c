"""Maximum flow and minimum cut by breadth-first augmenting paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FlowResult:
    """Maximum flow value, the edges of a minimum cut, and the source side of it."""

    max_flow: int
    cut_edges: tuple[tuple[int, int], ...]
    reachable: frozenset[int]


def _augmenting_path(residual: list[list[int]], source: int, sink: int) -> list[tuple[int, int]] | None:
    parent: dict[int, int | None] = {source: None}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, capacity in enumerate(residual[u]):
            if v not in parent and capacity > 0:
                parent[v] = u
                queue.append(v)
                if v == sink:
                    path = []
                    node = sink
                    while (previous := parent[node]) is not None:
                        path.append((previous, node))
                        node = previous
                    return path
    return None


def _reachable(residual: list[list[int]], source: int) -> frozenset[int]:
    seen = {source}
    stack = [source]
    while stack:
        u = stack.pop()
        for v, capacity in enumerate(residual[u]):
            if capacity > 0 and v not in seen:
                seen.add(v)
                stack.append(v)
    return frozenset(seen)


def min_cut(capacities: Sequence[Sequence[int]], source: int, sink: int) -> FlowResult:
    """Compute the maximum flow from source to sink and a minimum cut."""
    size = len(capacities)
    if any(len(row) != size for row in capacities):
        raise ValueError("capacity matrix must be square")
    for vertex in (source, sink):
        if not 0 <= vertex < size:
            raise ValueError(f"vertex {vertex} is out of range")

    residual = [list(row) for row in capacities]
    max_flow = 0
    while (path := _augmenting_path(residual, source, sink)) is not None:
        path_flow = min(residual[u][v] for u, v in path)
        for u, v in path:
            residual[u][v] -= path_flow
            residual[v][u] += path_flow
        max_flow += path_flow

    reachable = _reachable(residual, source)
    cut_edges = tuple(
        (u, v)
        for u, row in enumerate(capacities)
        if u in reachable
        for v, capacity in enumerate(row)
        if v not in reachable and capacity > 0
    )
    return FlowResult(max_flow=max_flow, cut_edges=cut_edges, reachable=reachable)