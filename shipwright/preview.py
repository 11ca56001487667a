"""
Plain-text preview of a generated deck, for terminals and test output.
"""

import string
from typing import Optional

import numpy as np

from .geometry import bounds
from .hull import hull_cells
from .rooms import Rooms

ROOM_GLYPHS = string.ascii_letters + string.digits
EMPTY = "."
SPINE = "-"
HULL = ":"


def render_text(ship: Rooms, hull: Optional[np.ndarray] = None) -> str:
    """
    Draw rooms as letters on a grid (row 0 at the top is the largest y).

    Cell (x, y) belongs to a room when min <= coord < max. The spine row
    (y = 0) shows '-' where it is not covered by a room. When a hull profile
    is given, hull cells outside rooms are drawn as ':'.
    """
    box = bounds(ship.rooms)
    if box is None:
        return ""
    min_x, min_y, max_x, max_y = box
    if hull is not None and len(hull):
        min_x = min(min_x, 0)
        max_x = max(max_x, len(hull))
        reach = int(np.max(hull))
        min_y = min(min_y, -reach)
        max_y = max(max_y, reach + 1)
    min_y = min(min_y, 0)
    max_y = max(max_y, 1)

    width, height = max_x - min_x, max_y - min_y
    grid = np.full((height, width), EMPTY, dtype="<U1")

    # Row index r holds y = max_y - 1 - r
    grid[max_y - 1, :] = SPINE
    if hull is not None:
        cells = hull_cells(hull)
        grid[max_y - 1 - cells[:, 1], cells[:, 0] - min_x] = HULL

    for index, room in enumerate(ship.rooms):
        glyph = ROOM_GLYPHS[index % len(ROOM_GLYPHS)]
        rows = slice(max_y - room.max_y, max_y - room.min_y)
        cols = slice(room.min_x - min_x, room.max_x - min_x)
        grid[rows, cols] = glyph

    return "\n".join("".join(row) for row in grid)
