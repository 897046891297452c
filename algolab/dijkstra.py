"""Single-source shortest paths over a weighted adjacency matrix."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Optional, Sequence

SAMPLE_GRAPH = (
    (0, 10, 0, 0, 5),
    (0, 0, 1, 0, 2),
    (0, 0, 0, 4, 0),
    (7, 0, 6, 0, 0),
    (0, 3, 9, 2, 0),
)


def dijkstra(graph: Sequence[Sequence[int]], source: int) -> list[float]:
    """Shortest distance from source to every vertex; math.inf where unreachable.

    A zero weight in the matrix means there is no edge.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < size:
        raise ValueError(f"source vertex {source} is out of range")

    distances: list[float] = [math.inf] * size
    distances[source] = 0
    visited = [False] * size

    for _ in range(size - 1):
        # Among equal distances the highest-numbered vertex is taken.
        u = min(
            (v for v in reversed(range(size)) if not visited[v]),
            key=distances.__getitem__,
        )
        visited[u] = True
        if distances[u] == math.inf:
            continue
        for v, weight in enumerate(graph[u]):
            if not visited[v] and weight and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight

    return distances


def format_distances(distances: Sequence[float]) -> str:
    """Render the distance table printed by the command."""
    lines = ["Vertex \tDistance from Source"]
    lines.extend(f"{vertex} \t{distance}" for vertex, distance in enumerate(distances))
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print shortest distances from the chosen vertex (0 by default) of the sample graph."""
    parser = argparse.ArgumentParser(
        description="Shortest distances in the sample graph by Dijkstra's algorithm."
    )
    parser.add_argument("--source", type=int, default=0, help="source vertex")
    args = parser.parse_args(argv)

    try:
        distances = dijkstra(SAMPLE_GRAPH, args.source)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    sys.stdout.write(format_distances(distances))
    return 0