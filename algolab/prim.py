"""Minimum spanning tree by Prim's algorithm over a weighted adjacency matrix."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Optional, Sequence

SAMPLE_GRAPH = (
    (0, 2, 0, 6, 0),
    (2, 0, 3, 8, 5),
    (0, 3, 0, 0, 7),
    (6, 8, 0, 0, 9),
    (0, 5, 7, 9, 0),
)


def prim_mst(graph: Sequence[Sequence[int]]) -> list[Optional[int]]:
    """Parent of each vertex in the tree grown from vertex 0; None for the root.

    A zero weight in the matrix means there is no edge.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []

    keys: list[float] = [math.inf] * size
    keys[0] = 0
    parents: list[Optional[int]] = [None] * size
    in_tree = [False] * size

    for _ in range(size):
        u = min((v for v in range(size) if not in_tree[v]), key=keys.__getitem__)
        if keys[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < keys[v]:
                parents[v] = u
                keys[v] = weight

    return parents


def format_mst(graph: Sequence[Sequence[int]], parents: Sequence[Optional[int]]) -> str:
    """Render the tree edges and their weights as the command prints them."""
    lines = ["Edge \tWeight"]
    lines.extend(
        f"{parent} - {vertex} \t{graph[vertex][parent]}"
        for vertex, parent in enumerate(parents)
        if parent is not None
    )
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the minimum spanning tree of the sample graph."""
    parser = argparse.ArgumentParser(
        description="Minimum spanning tree of the sample graph by Prim's algorithm."
    )
    parser.parse_args(argv)

    try:
        parents = prim_mst(SAMPLE_GRAPH)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    sys.stdout.write(format_mst(SAMPLE_GRAPH, parents))
    return 0