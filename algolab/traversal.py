"""Depth-first and breadth-first traversal of a graph given as an adjacency matrix."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Optional, Sequence

SAMPLE_GRAPH = (
    (0, 1, 1, 0, 0),
    (1, 0, 0, 1, 0),
    (1, 0, 0, 0, 1),
    (0, 1, 0, 0, 0),
    (0, 0, 1, 0, 0),
)


def _check(adjacency: Sequence[Sequence[int]], start: int) -> int:
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"start node {start} is out of range")
    return size


def dfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Visit order of an iterative depth-first search, lower neighbours first."""
    _check(adjacency, start)
    visited = {start}
    stack = [start]
    order = []
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbour in reversed(range(len(adjacency))):
            if adjacency[node][neighbour] == 1 and neighbour not in visited:
                stack.append(neighbour)
                visited.add(neighbour)
    return order


def bfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Visit order of a breadth-first search, lower neighbours first."""
    _check(adjacency, start)
    visited = {start}
    queue = deque([start])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour, linked in enumerate(adjacency[node]):
            if linked == 1 and neighbour not in visited:
                queue.append(neighbour)
                visited.add(neighbour)
    return order


def format_traversal(label: str, order: Sequence[int]) -> str:
    """Render a visit order as 'LABEL: a --> b --> NULL'."""
    return f"{label}: " + "".join(f"{node} --> " for node in order) + "NULL"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print both traversals of the sample graph from the chosen node (0 by default)."""
    parser = argparse.ArgumentParser(
        description="Depth-first and breadth-first traversal of the sample graph."
    )
    parser.add_argument("--start", type=int, default=0, help="node to start from")
    args = parser.parse_args(argv)

    try:
        lines = [
            format_traversal("DFS", dfs(SAMPLE_GRAPH, args.start)),
            format_traversal("BFS", bfs(SAMPLE_GRAPH, args.start)),
        ]
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0