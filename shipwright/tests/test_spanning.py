"""
Tests for minimum spanning tree extraction.

Verifies:
- Adjacent edges are always preferred over Weighted edges
- Weighted edges order by spine distance before Euclidean distance
- Disconnected graphs yield a forest without error
"""

from itertools import combinations

from shipwright.data_types import Adjacent, Weighted, ShipParameters
from shipwright.graph import RoomGraph, build_room_graph
from shipwright.placement import place_rooms
from shipwright.rng import RandomSource
from shipwright.spanning import DisjointSet, SpanningTree, minimum_spanning_tree


def assert_forest(tree: SpanningTree, graph: RoomGraph):
    """Edge count, acyclicity and subset-of-graph checks."""
    assert len(tree.edges) == graph.node_count - tree.component_count

    sets = DisjointSet(graph.node_count)
    for edge in tree.edges:
        assert graph.has_edge(edge.a, edge.b)
        assert graph.weight(edge.a, edge.b) == edge.weight
        assert sets.union(edge.a, edge.b), f"cycle through {edge.pair}"

    assert tree.component_count == len(graph.components())


def test_adjacent_preferred_then_spine_distance():
    graph = RoomGraph(4)
    graph.add_edge(0, 1, Weighted(1.0, 5.0))
    graph.add_edge(1, 2, Weighted(1.0, 1.0))
    graph.add_edge(0, 2, Adjacent())
    graph.add_edge(2, 3, Weighted(0.5, 10.0))
    graph.add_edge(1, 3, Weighted(2.0, 1.0))

    tree = minimum_spanning_tree(graph)
    assert [e.pair for e in tree.edges] == [(0, 2), (2, 3), (1, 2)]
    assert tree.pairs == [(0, 2), (1, 2), (2, 3)]
    assert tree.component_count == 1
    assert tree.contains(2, 0)
    assert not tree.contains(0, 1)
    assert tree.neighbors(2) == [0, 1, 3]
    assert_forest(tree, graph)
    print("[OK] Adjacent first, then lowest spine distance")


def test_ties_broken_by_room_index():
    graph = RoomGraph(3)
    for a, b in [(1, 2), (0, 2), (0, 1)]:
        graph.add_edge(a, b, Weighted(1.0, 1.0))

    tree = minimum_spanning_tree(graph)
    assert tree.pairs == [(0, 1), (0, 2)]


def test_disconnected_graph_yields_forest():
    graph = RoomGraph(5)
    graph.add_edge(0, 1, Weighted(1.0, 1.0))
    graph.add_edge(2, 3, Adjacent())

    tree = minimum_spanning_tree(graph)
    assert tree.component_count == 3
    assert len(tree) == 2
    assert tree.neighbors(4) == []
    assert_forest(tree, graph)


def test_empty_graph():
    tree = minimum_spanning_tree(RoomGraph(0))
    assert len(tree) == 0
    assert tree.component_count == 0

    tree = minimum_spanning_tree(RoomGraph(1))
    assert len(tree) == 0
    assert tree.component_count == 1


def test_disjoint_set():
    sets = DisjointSet(4)
    assert sets.union(0, 1)
    assert sets.union(2, 3)
    assert not sets.union(1, 0)
    assert sets.count == 2
    assert sets.union(3, 1)
    assert sets.find(3) == sets.find(0) == 0
    assert sets.count == 1


def _tree_key(graph: RoomGraph, pairs) -> list:
    """Sorted multiset of order keys, used to compare spanning trees."""
    return sorted(graph.weight(a, b).order_key() for a, b in pairs)


def test_minimal_against_brute_force():
    """On a small generated layout, no spanning tree beats Kruskal's under the edge order."""
    params = ShipParameters(ship_length=24, max_width=10, min_rooms=4, max_rooms=4,
                            room_width_min=4, room_width_max=8,
                            room_height_min=4, room_height_max=8)
    rooms = place_rooms(params, RandomSource(4))[:7]
    graph = build_room_graph(rooms)
    tree = minimum_spanning_tree(graph)
    assert_forest(tree, graph)

    best = _tree_key(graph, tree.pairs)
    target = graph.node_count - tree.component_count
    all_pairs = [e.pair for e in graph.edges]
    for subset in combinations(all_pairs, target):
        sets = DisjointSet(graph.node_count)
        if all(sets.union(a, b) for a, b in subset):
            # Kruskal's tree is minimal: its sorted key list is lexicographically
            # no larger than any other spanning tree's
            assert best <= _tree_key(graph, subset)


def test_generated_ship_forest():
    for seed in range(5):
        rooms = place_rooms(ShipParameters(), RandomSource(seed))
        graph = build_room_graph(rooms)
        tree = minimum_spanning_tree(graph)
        assert_forest(tree, graph)
        assert tree.component_count == 1
