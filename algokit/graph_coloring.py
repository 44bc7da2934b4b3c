"""Backtracking m-colouring of a graph given as an adjacency matrix."""

from __future__ import annotations

from collections.abc import Sequence


def color_graph(adjacency: Sequence[Sequence[int]], colors: int) -> list[int] | None:
    """Colour vertices with 1..colors so no edge joins equal colours.

    Returns the colour of each vertex, or None when no such colouring exists.
    """
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")

    assignment = [0] * size

    def place(vertex: int) -> bool:
        if vertex == size:
            return True
        for color in range(1, colors + 1):
            clash = any(
                edge and assigned == color
                for edge, assigned in zip(adjacency[vertex], assignment)
            )
            if not clash:
                assignment[vertex] = color
                if place(vertex + 1):
                    return True
                assignment[vertex] = 0
        return False

    return assignment if place(0) else None