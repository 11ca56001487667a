"""
Geometry helper utilities for room placement and graph building.

This module provides small, focused functions with no generator
state. Rectangles are Room values in integer grid cells; distances
are computed as float64.
"""
from __future__ import annotations

from typing import Iterable, Optional, Tuple

import numpy as np

from .constants import ADJACENCY_INFLATE, ADJACENCY_MIN_AREA, OFFSET_X, TILE_SIZE
from .data_types import Room


def intersection(a: Room, b: Room) -> Optional[Tuple[int, int, int, int]]:
    """
    Return the overlap of two rectangles as (min_x, min_y, max_x, max_y).

    Returns None when the overlap has zero area (disjoint or touching only
    along an edge or corner).
    """
    min_x = max(a.min_x, b.min_x)
    min_y = max(a.min_y, b.min_y)
    max_x = min(a.max_x, b.max_x)
    max_y = min(a.max_y, b.max_y)
    if min_x >= max_x or min_y >= max_y:
        return None
    return (min_x, min_y, max_x, max_y)


def intersection_area(a: Room, b: Room) -> int:
    """Area of the overlap of two rectangles (0 when they do not overlap)."""
    rect = intersection(a, b)
    if rect is None:
        return 0
    return (rect[2] - rect[0]) * (rect[3] - rect[1])


def overlaps(a: Room, b: Room) -> bool:
    """True when the rectangles share positive area."""
    return intersection(a, b) is not None


def overlaps_any(candidate: Room, rooms: Iterable[Room]) -> bool:
    return any(overlaps(candidate, room) for room in rooms)


def inflate(room: Room, amount: int) -> Room:
    """Grow a rectangle evenly on all sides by `amount` cells."""
    return Room(room.min_x - amount, room.min_y - amount,
                room.max_x + amount, room.max_y + amount, room.role)


def is_adjacent(a: Room, b: Room) -> bool:
    """
    True when the rooms share a wall longer than a single corner.

    Inflates `a` by one cell and intersects with `b`; a shared corner
    produces an overlap of exactly 1, a shared wall more. For rooms at least
    two cells wide on each axis the test gives the same answer from either
    side.
    """
    return intersection_area(inflate(a, ADJACENCY_INFLATE), b) > ADJACENCY_MIN_AREA


def spine_distance(room: Room) -> float:
    """Absolute distance of the room's center from the spine (y = 0)."""
    return abs(room.center[1])


def center_distance(a: Room, b: Room) -> float:
    """Euclidean distance between room centers."""
    diff = np.asarray(a.center, dtype=np.float64) - np.asarray(b.center, dtype=np.float64)
    return float(np.sqrt(np.dot(diff, diff)))


def centers_array(rooms: Iterable[Room]) -> np.ndarray:
    """(N, 2) float64 array of room centers."""
    centers = [room.center for room in rooms]
    if not centers:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray(centers, dtype=np.float64)


def bounds(rooms: Iterable[Room]) -> Optional[Tuple[int, int, int, int]]:
    """Bounding box of a set of rooms, or None when there are none."""
    rooms = list(rooms)
    if not rooms:
        return None
    return (min(r.min_x for r in rooms), min(r.min_y for r in rooms),
            max(r.max_x for r in rooms), max(r.max_y for r in rooms))


def world_rect(room: Room, tile_size: float = TILE_SIZE, offset_x: int = OFFSET_X) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert a room to world-space center and size for a renderer.

    Returns
    - (2,) center in world units (x shifted by offset_x cells)
    - (2,) size in world units
    """
    center = np.asarray(room.center, dtype=np.float64) * tile_size
    center[0] += offset_x * tile_size
    size = np.asarray(room.size, dtype=np.float64) * tile_size
    return center, size
