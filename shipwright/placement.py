"""
Room placement along the ship's spine.

Candidate rooms are dropped in from outside the hull and slid toward the
spine (y = 0) one cell at a time until they hit another room or reach the
spine. Off-spine rooms are mirrored across the spine, so the accepted set is
always symmetric. A pass that commits fewer than min_rooms rooms is thrown
away and the pass restarts with the same (advancing) RandomSource, up to
max_attempts passes.
"""

from typing import List, Tuple

from .constants import SPINE_ROOM_HEIGHT_FLOOR
from .data_types import ShipParameters, Room, ROLE_SIDE, ROLE_SPINE
from .geometry import overlaps_any
from .rng import RandomSource


class PlacementError(RuntimeError):
    """Raised when the room-count floor cannot be met within the retry bound"""

    def __init__(self, attempts: int, best_count: int, min_rooms: int):
        self.attempts = attempts
        self.best_count = best_count
        self.min_rooms = min_rooms
        super().__init__(
            f"could not satisfy room-count floor: {attempts} passes, "
            f"best pass placed {best_count} rooms (need {min_rooms})"
        )


def spine_height(height: int) -> int:
    """Height of a room centered on the spine: half the drawn height, rounded down to even."""
    return max(SPINE_ROOM_HEIGHT_FLOOR, (height // 2) // 2 * 2)


def place_candidate(params: ShipParameters, rng: RandomSource, rooms: List[Room]) -> List[Room]:
    """
    Draw one candidate room and commit it (plus its mirror) to `rooms`.

    Draw order per candidate: x, width, height, then one coin flip only if
    the room reaches the spine.

    Args:
        params: Ship parameters
        rng: Generator state for this run
        rooms: Rooms committed so far (extended in place)

    Returns:
        The rooms committed by this candidate (empty when it did not fit)
    """
    x = rng.rand_range(0, params.ship_length)
    width = rng.rand_inclusive(params.room_width_min, params.room_width_max)
    height = rng.rand_inclusive(params.room_height_min, params.room_height_max)

    # Start outside the hull and slide toward the spine
    center_y = params.max_width + height
    reached_spine = False
    while True:
        center_y -= 1
        candidate = Room.from_center_size((x, center_y), (width, height))
        if overlaps_any(candidate, rooms):
            # Hit something, back up to the last free position
            center_y += 1
            break
        if candidate.min_y <= 0:
            reached_spine = True
            break

    if reached_spine:
        if rng.coin_flip():
            spine_room = Room.from_center_size((x, 0), (width, spine_height(height)), ROLE_SPINE)
            if not overlaps_any(spine_room, rooms):
                rooms.append(spine_room)
                return [spine_room]
        # Leave the spine strip empty
        center_y += 1

    if center_y > params.max_width:
        # This room doesn't fit here, drop it
        return []

    room = Room.from_center_size((x, center_y), (width, height), ROLE_SIDE)
    mirror = room.mirrored()
    rooms.append(room)
    rooms.append(mirror)
    return [room, mirror]


def place_rooms_once(params: ShipParameters, rng: RandomSource) -> List[Room]:
    """Run a single placement pass of max_rooms candidate draws."""
    rooms: List[Room] = []
    for _ in range(params.max_rooms):
        place_candidate(params, rng, rooms)
    return rooms


def run_placement(params: ShipParameters, rng: RandomSource, verbose: bool = False) -> Tuple[List[Room], int]:
    """
    Repeat placement passes until the room-count floor is met.

    Returns:
        (rooms, number of passes used)

    Raises:
        PlacementError: when max_attempts passes all fall short of min_rooms
    """
    best_count = 0
    for attempt in range(1, params.max_attempts + 1):
        rooms = place_rooms_once(params, rng)
        if len(rooms) >= params.min_rooms:
            return rooms, attempt

        best_count = max(best_count, len(rooms))
        if verbose:
            print(f"[WARN] Placement pass {attempt} placed {len(rooms)} rooms "
                  f"(need {params.min_rooms}), retrying")

    raise PlacementError(params.max_attempts, best_count, params.min_rooms)


def place_rooms(params: ShipParameters, rng: RandomSource, verbose: bool = False) -> List[Room]:
    """Place rooms for one ship; see run_placement()."""
    rooms, _ = run_placement(params, rng, verbose)
    return rooms
