"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algokit.vertex_cover import Graph


def _read_graph(text: str) -> Graph:
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as error:
        raise ValueError("input must contain only integers") from error
    if len(numbers) < 2:
        raise ValueError("expected the number of vertices and edges")
    vertex_count, edge_count = numbers[0], numbers[1]
    if edge_count < 0:
        raise ValueError("edge count must not be negative")
    ends = numbers[2:]
    if len(ends) < 2 * edge_count:
        raise ValueError(f"expected {edge_count} edges")
    graph = Graph(vertex_count)
    for u, v in zip(ends[0 : 2 * edge_count : 2], ends[1 : 2 * edge_count : 2]):
        graph.add_edge(u, v)
    return graph


def _vertex_cover() -> int:
    print("Enter number of vertices and edges: ", end="")
    print("Enter edges (u v):")
    try:
        graph = _read_graph(sys.stdin.read())
    except (ValueError, IndexError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print("Vertex cover of the graph:")
    print(" ".join(str(vertex) for vertex in graph.vertex_cover()))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run a command; with none given, print a greeting."""
    parser = argparse.ArgumentParser(prog="algokit")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("hello", help="print a greeting")
    commands.add_parser("vertex-cover", help="read a graph from stdin and print a vertex cover")
    args = parser.parse_args(argv)

    if args.command == "vertex-cover":
        return _vertex_cover()
    print("Hello, World!")
    return 0


if __name__ == "__main__":
    sys.exit(main())