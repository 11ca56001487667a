"""
Minimum spanning tree (forest) extraction over a RoomGraph.

Kruskal's algorithm with a path-halving union-find. Edges are ordered by
their weight's order key (Adjacent before any Weighted, then spine distance,
then Euclidean distance) with room indices breaking ties, so the result is
fully determined by the graph.
"""

from typing import Iterable, List, Tuple

from .data_types import Edge
from .graph import RoomGraph


class DisjointSet:
    """Union-find over 0..size-1."""

    def __init__(self, size: int):
        self.parent = list(range(size))
        self.count = size  # Number of disjoint sets

    def find(self, x: int) -> int:
        parent = self.parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]  # path halving
            x = parent[x]
        return x

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding a and b; False if already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        # Smaller root index wins so merges are order-stable
        if rb < ra:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.count -= 1
        return True


class SpanningTree:
    """Edges of a minimum spanning forest plus its component count (read-only)."""

    def __init__(self, node_count: int, edges: Iterable[Edge], component_count: int):
        self._node_count = node_count
        self._edges: Tuple[Edge, ...] = tuple(edges)  # In selection order
        self._component_count = component_count
        self._pairs = frozenset(edge.pair for edge in self._edges)

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def component_count(self) -> int:
        return self._component_count

    @property
    def pairs(self) -> List[Tuple[int, int]]:
        return sorted(self._pairs)

    def contains(self, a: int, b: int) -> bool:
        return (min(a, b), max(a, b)) in self._pairs

    def neighbors(self, node: int) -> List[int]:
        result = []
        for a, b in self._pairs:
            if a == node:
                result.append(b)
            elif b == node:
                result.append(a)
        return sorted(result)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return (f"SpanningTree(nodes={self._node_count}, edges={len(self._edges)}, "
                f"components={self._component_count})")


def minimum_spanning_tree(graph: RoomGraph) -> SpanningTree:
    """
    Extract the minimum spanning forest of a room graph.

    A disconnected graph is a valid input and yields one tree per component.

    Args:
        graph: Merged triangulation/adjacency graph

    Returns:
        SpanningTree with node_count - component_count edges
    """
    sets = DisjointSet(graph.node_count)
    chosen: List[Edge] = []

    for edge in sorted(graph.edges, key=Edge.sort_key):
        if sets.union(edge.a, edge.b):
            chosen.append(edge)
            if sets.count == 1:
                break

    return SpanningTree(graph.node_count, chosen, sets.count)
