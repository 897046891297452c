"""Minimum spanning tree by Kruskal's algorithm with a disjoint-set forest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between vertices u and v."""

    u: int
    v: int
    weight: int


class DisjointSet:
    """Union-find over vertices 0..size-1 with path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.parent = list(range(size))

    def find(self, node: int) -> int:
        """Representative of the set holding node."""
        root = node
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[node] != root:
            next_node = self.parent[node]
            self.parent[node] = root
            node = next_node
        return root

    def union(self, u: int, v: int) -> None:
        """Merge the set of v into the set of u."""
        self.parent[self.find(v)] = self.find(u)


SAMPLE_VERTEX_COUNT = 5
SAMPLE_EDGES = (
    Edge(0, 1, 10),
    Edge(0, 2, 6),
    Edge(0, 3, 5),
    Edge(1, 3, 15),
    Edge(2, 3, 4),
)


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Edges of a minimum spanning forest, in the order they were chosen."""
    ordered = sorted(edges, key=lambda edge: edge.weight)
    for edge in ordered:
        if not (0 <= edge.u < vertex_count and 0 <= edge.v < vertex_count):
            raise ValueError(f"edge {edge.u}-{edge.v} has a vertex out of range")

    forest = DisjointSet(vertex_count)
    tree = []
    for edge in ordered:
        if forest.find(edge.u) != forest.find(edge.v):
            tree.append(edge)
            forest.union(edge.u, edge.v)
    return tree


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the minimum spanning tree of the sample graph."""
    tree = kruskal_mst(SAMPLE_VERTEX_COUNT, SAMPLE_EDGES)
    print("Edges in MST:")
    for edge in tree:
        print(f"{edge.u} - {edge.v} = {edge.weight}")
    print(f"Total cost of MST: {sum(edge.weight for edge in tree)}")
    return 0