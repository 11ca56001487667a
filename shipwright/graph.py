"""
Spatial graph over placed rooms.

Two edge passes run over the final room list and merge into one RoomGraph:
- Triangulation: Delaunay triangulation of room centers (scipy.spatial),
  each triangle side becomes a Weighted edge.
- Adjacency: rooms sharing a wall get an Adjacent edge, replacing any
  triangulation edge between the same pair.

Both passes are pure functions of the room list; no randomness is consumed.
"""

from collections import deque
from typing import Dict, List, Sequence, Tuple

import numpy as np
from scipy.spatial import Delaunay

from .data_types import Room, Edge, EdgeWeight, Adjacent, Weighted
from .geometry import centers_array, center_distance, is_adjacent, spine_distance


class RoomGraph:
    """
    Undirected graph over room indices 0..node_count-1.

    At most one edge per unordered pair; edges are stored with a < b.
    Once freeze() is called the graph is read-only: add_edge() raises and
    edge views are tuples.
    """

    def __init__(self, node_count: int):
        self._node_count = node_count
        self._edges: Dict[Tuple[int, int], Edge] = {}
        self._adjacency: List[List[int]] = [[] for _ in range(node_count)]
        self._frozen = False

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "RoomGraph":
        """Make the graph read-only and return it."""
        self._frozen = True
        return self

    def add_edge(self, a: int, b: int, weight: EdgeWeight) -> Edge:
        """Insert or re-weight the edge between a and b."""
        if self._frozen:
            raise TypeError("RoomGraph is read-only once built")
        if a == b:
            raise ValueError(f"self-loop on room {a}")
        if not (0 <= a < self._node_count and 0 <= b < self._node_count):
            raise IndexError(f"edge ({a}, {b}) outside 0..{self._node_count - 1}")
        if a > b:
            a, b = b, a

        if (a, b) not in self._edges:
            self._adjacency[a].append(b)
            self._adjacency[b].append(a)
        edge = Edge(a, b, weight)
        self._edges[(a, b)] = edge
        return edge

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """All edges ordered by (a, b)."""
        return tuple(self._edges[pair] for pair in sorted(self._edges))

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def has_edge(self, a: int, b: int) -> bool:
        return (min(a, b), max(a, b)) in self._edges

    def weight(self, a: int, b: int) -> EdgeWeight:
        """Weight of edge (a, b); raises KeyError when absent."""
        return self._edges[(min(a, b), max(a, b))].weight

    def neighbors(self, node: int) -> List[int]:
        return sorted(self._adjacency[node])

    def components(self) -> List[List[int]]:
        """Connected components as sorted node lists, ordered by smallest node."""
        seen = [False] * self._node_count
        result = []
        for start in range(self._node_count):
            if seen[start]:
                continue
            seen[start] = True
            queue = deque([start])
            component = []
            while queue:
                node = queue.popleft()
                component.append(node)
                for other in self._adjacency[node]:
                    if not seen[other]:
                        seen[other] = True
                        queue.append(other)
            result.append(sorted(component))
        return result

    def __len__(self) -> int:
        return self._node_count

    def __repr__(self) -> str:
        return f"RoomGraph(nodes={self._node_count}, edges={self.edge_count})"


def _collinear_chain(points: np.ndarray) -> List[Tuple[int, int]]:
    """Delaunay graph of collinear points: consecutive points along the line."""
    order = np.lexsort((points[:, 1], points[:, 0]))
    edges = []
    for k in range(len(order) - 1):
        a, b = int(order[k]), int(order[k + 1])
        edges.append((min(a, b), max(a, b)))
    return sorted(edges)


def is_collinear(points: np.ndarray) -> bool:
    """True when all points lie on one line (triangulation undefined)."""
    if len(points) < 3:
        return True
    centered = points - points.mean(axis=0)
    return int(np.linalg.matrix_rank(centered)) < 2


def triangulation_pairs(rooms: Sequence[Room]) -> List[Tuple[int, int]]:
    """
    Room index pairs joined by the Delaunay triangulation of room centers.

    Degenerate inputs skip scipy: fewer than two rooms give no pairs, two
    rooms give the single pair, collinear centers give a chain.

    Returns
    - sorted list of (a, b) with a < b, each pair once
    """
    n = len(rooms)
    if n < 2:
        return []
    if n == 2:
        return [(0, 1)]

    points = centers_array(rooms)
    if is_collinear(points):
        return _collinear_chain(points)

    # Four or more cocircular centers have no unique triangulation and Qhull
    # picks the diagonal, so such a graph may differ between scipy releases.
    # The usual case is two rooms and their mirrors: there each diagonal is
    # the heaviest side of a triangle closed by a leg and a mirror-pair edge,
    # so the spanning tree does not depend on that choice.
    tri = Delaunay(points)

    # Extract edges from triangulation
    pairs = set()
    for simplex in tri.simplices:
        for k in range(3):
            a, b = int(simplex[k]), int(simplex[(k + 1) % 3])
            if a > b:
                a, b = b, a
            pairs.add((a, b))
    return sorted(pairs)


def triangulation_weight(a: Room, b: Room) -> Weighted:
    """Mean spine distance of the pair, then Euclidean center distance."""
    mean_spine = (spine_distance(a) + spine_distance(b)) / 2.0
    return Weighted(mean_spine, center_distance(a, b))


def adjacent_pairs(rooms: Sequence[Room]) -> List[Tuple[int, int]]:
    """Every unordered room pair sharing a wall longer than one cell."""
    pairs = []
    for i in range(len(rooms)):
        for j in range(i + 1, len(rooms)):
            if is_adjacent(rooms[i], rooms[j]):
                pairs.append((i, j))
    return pairs


def build_room_graph(rooms: Sequence[Room]) -> RoomGraph:
    """
    Build the merged proximity graph for a room list.

    Args:
        rooms: Final placed rooms (graph nodes are their indices)

    Returns:
        Read-only RoomGraph with Weighted triangulation edges and Adjacent
        wall edges
    """
    graph = RoomGraph(len(rooms))
    if len(rooms) < 2:
        return graph.freeze()

    for a, b in triangulation_pairs(rooms):
        graph.add_edge(a, b, triangulation_weight(rooms[a], rooms[b]))

    for a, b in adjacent_pairs(rooms):
        graph.add_edge(a, b, Adjacent())

    return graph.freeze()
