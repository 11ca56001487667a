"""
Hull profile generation by runs.

The hull is described as a half-width per spine cell. Consecutive runs of
cells share one width, which gives the stepped outline of a blocky ship.
"""

import numpy as np

from .data_types import HullParameters
from .rng import RandomSource


def hull_profile(rng: RandomSource, params: HullParameters = HullParameters()) -> np.ndarray:
    """
    Generate a stepped hull outline.

    Args:
        rng: Generator state (shared with the rest of the run)
        params: Hull parameters

    Returns:
        (length,) int64 array of half-widths, each in [0, max_width)
    """
    if params.length < 0:
        raise ValueError(f"hull length must be >= 0, got {params.length}")
    if params.min_run < 1 or params.max_run <= params.min_run:
        raise ValueError(f"invalid run range [{params.min_run}, {params.max_run})")
    if params.max_width < 1:
        raise ValueError(f"hull max_width must be >= 1, got {params.max_width}")

    widths = np.zeros(params.length, dtype=np.int64)
    start = 0
    while start < params.length:
        run = min(rng.rand_range(params.min_run, params.max_run), params.length - start)
        width = rng.rand_range(0, params.max_width)
        widths[start:start + run] = width
        start += run

    return widths


def hull_cells(widths: np.ndarray) -> np.ndarray:
    """
    Expand a profile into occupied hull cells on both sides of the spine.

    Returns
    - (K, 2) int64 array of (x, y) cells, y != 0, mirrored across the spine
    """
    cells = []
    for x, width in enumerate(widths):
        for y in range(1, int(width) + 1):
            cells.append((x, y))
            cells.append((x, -y))
    if not cells:
        return np.empty((0, 2), dtype=np.int64)
    return np.asarray(cells, dtype=np.int64)
