"""
Ship generator entry point.

Drives room placement until the room-count floor is met, then builds the
proximity graph and its minimum spanning tree, and assembles the Rooms
aggregate. Each call owns its RandomSource, so two calls with the same
parameters and seed produce identical ships.
"""

import time
from typing import Any, Optional

from .data_types import ShipParameters
from .graph import build_room_graph
from .placement import run_placement
from .rng import RandomSource
from .rooms import Rooms
from .spanning import minimum_spanning_tree


def generate_ship(
    params: Optional[ShipParameters] = None,
    seed: Optional[Any] = None,
    rng: Optional[RandomSource] = None,
    verbose: bool = False
) -> Rooms:
    """
    Generate one ship layout.

    Seed precedence: explicit `rng`, then `seed`, then params.seed, then a
    fresh OS-entropy seed. Parameters are validated before any draw.

    Args:
        params: Ship parameters (defaults when None)
        seed: Optional seed overriding params.seed
        rng: Optional caller-owned RandomSource (must not be shared across
             concurrent generations)
        verbose: Print progress lines

    Returns:
        Rooms aggregate (rooms, graph, spanning tree)

    Raises:
        ConfigError: invalid parameters
        PlacementError: room-count floor not met within params.max_attempts passes
    """
    params = params if params is not None else ShipParameters()
    params.validate()

    if rng is None:
        chosen_seed = seed if seed is not None else params.seed
        rng = RandomSource(chosen_seed) if chosen_seed is not None else RandomSource.from_entropy()

    start = time.perf_counter()
    if verbose:
        label = params.name or "ship"
        print(f"Generating {label} (seed={rng.seed}, length={params.ship_length}, "
              f"max_width={params.max_width}, rooms={params.min_rooms}..{params.max_rooms})...")

    rooms, attempts = run_placement(params, rng, verbose)
    graph = build_room_graph(rooms)
    tree = minimum_spanning_tree(graph)

    if verbose:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        print(f"[OK] Placed {len(rooms)} rooms in {attempts} pass(es), "
              f"{graph.edge_count} graph edges, {len(tree)} corridor edges "
              f"({elapsed_ms:.2f} ms)")

    return Rooms(rooms, graph, tree, seed=rng.seed, attempts=attempts)
