"""
Generated ship aggregate.

Rooms bundles the placed room list, the merged proximity graph and its
minimum spanning tree. It is produced once per generation by generate_ship()
and replaced wholesale on regeneration; consumers only read it.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .data_types import Room, Adjacent, ROLE_SPINE, ROLE_MIRROR
from .geometry import bounds
from .graph import RoomGraph
from .rng import room_color
from .spanning import SpanningTree


@dataclass(frozen=True)
class ShipStats:
    """Summary numbers for display"""
    room_count: int
    spine_rooms: int
    mirrored_rooms: int
    length: int  # x extent of all rooms (cells)
    width: int  # y extent of all rooms (cells)
    graph_edges: int
    adjacent_edges: int
    tree_edges: int
    components: int


class Rooms:
    """
    Read-only result of one ship generation.

    Attributes:
        rooms: Placed rooms (graph node i is rooms[i])
        graph: Merged triangulation/adjacency graph
        tree: Minimum spanning forest of graph (corridor plan)
        seed: Seed that reproduces this ship
        attempts: Placement passes used to meet the room-count floor
    """

    def __init__(self, rooms: List[Room], graph: RoomGraph, tree: SpanningTree,
                 seed: Optional[int] = None, attempts: int = 1):
        if graph.node_count != len(rooms) or tree.node_count != len(rooms):
            raise ValueError("graph and tree must cover exactly the room list")
        self._rooms: Tuple[Room, ...] = tuple(rooms)
        self._graph = graph
        self._tree = tree
        self._seed = seed
        self._attempts = attempts

    @property
    def rooms(self) -> Tuple[Room, ...]:
        return self._rooms

    @property
    def graph(self) -> RoomGraph:
        return self._graph

    @property
    def tree(self) -> SpanningTree:
        return self._tree

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    @property
    def attempts(self) -> int:
        return self._attempts

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)

    def __getitem__(self, index: int) -> Room:
        return self._rooms[index]

    def colors(self) -> List[Tuple[float, float, float, float]]:
        """Per-room RGBA colors (mirrored rooms match their originals)."""
        return [room_color(room.center, room.size) for room in self._rooms]

    def stats(self) -> ShipStats:
        box = bounds(self._rooms)
        length = width = 0
        if box is not None:
            length = box[2] - box[0]
            width = box[3] - box[1]

        return ShipStats(
            room_count=len(self._rooms),
            spine_rooms=sum(1 for r in self._rooms if r.role == ROLE_SPINE),
            mirrored_rooms=sum(1 for r in self._rooms if r.role == ROLE_MIRROR),
            length=length,
            width=width,
            graph_edges=self._graph.edge_count,
            adjacent_edges=sum(1 for e in self._graph.edges if isinstance(e.weight, Adjacent)),
            tree_edges=len(self._tree),
            components=self._tree.component_count,
        )

    def print_summary(self):
        """Print a one-block summary of this ship."""
        s = self.stats()
        print(f"[OK] Ship seed={self._seed} ({self._attempts} placement pass(es))")
        print(f"  Rooms:      {s.room_count} ({s.spine_rooms} on spine, {s.mirrored_rooms} mirrored)")
        print(f"  Extent:     {s.length} x {s.width} cells")
        print(f"  Graph:      {s.graph_edges} edges ({s.adjacent_edges} adjacent)")
        print(f"  Corridors:  {s.tree_edges} edges, {s.components} component(s)")

    def __repr__(self) -> str:
        return f"Rooms(count={len(self._rooms)}, seed={self._seed})"
