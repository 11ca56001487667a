"""
Deterministic RNG utilities for ship generation.

All randomness in a generation run flows through one RandomSource. The
engine is numpy's PCG64 bit generator seeded through SeedSequence (a fixed
hash-mixing step, so small and large seeds expand to equally well mixed
state). Distributions are built here from raw 64-bit words rather than
numpy.random.Generator methods, which keeps streams bit-identical across
numpy releases.

Uses SHA256 hashing to derive stable seeds from arbitrary components
(strings, negative integers, tuples) the same way on every platform.
"""

import hashlib
from typing import Any, Optional, Tuple

import numpy as np

from .constants import ROOM_ALPHA


U64_MASK = (1 << 64) - 1
U64_RANGE = 1 << 64
F53_SCALE = 1.0 / (1 << 53)


def make_seed(*components: Any) -> int:
    """
    Generate deterministic 64-bit seed from hierarchical components.

    Uses SHA256 to hash components into stable seed value.

    Args:
        *components: Seed components (ship name, room center, purpose tag, etc.)

    Returns:
        64-bit integer seed

    Example:
        ship_seed = make_seed("frigate", 3)
        color_seed = make_seed("room-color", 12, 5, 8, 6)
    """
    # Join all components with colon separator
    hash_input = ":".join(str(c) for c in components)

    # SHA256 hash and extract 64-bit integer
    hash_bytes = hashlib.sha256(hash_input.encode('utf-8')).digest()
    seed = int.from_bytes(hash_bytes[:8], byteorder='big')

    return seed


def normalize_seed(seed: Any) -> int:
    """
    Turn any user-supplied seed into a non-negative integer.

    Non-negative ints (including wide ones) pass through unchanged so that
    numeric seeds map directly onto SeedSequence entropy. Everything else
    (strings, negative ints, tuples) is hashed with make_seed().
    """
    if isinstance(seed, (int, np.integer)) and not isinstance(seed, bool) and seed >= 0:
        return int(seed)
    return make_seed(seed)


class RandomSource:
    """
    Seedable generator producing uniform integers, floats and ranged draws.

    State is advanced by every draw and owned exclusively by the instance.
    Two sources built from the same seed produce the same stream forever.
    A copy of the stream is only ever made by explicit re-seeding (fork()).
    """

    def __init__(self, seed: Any):
        self._seed = normalize_seed(seed)
        self._bitgen = np.random.PCG64(np.random.SeedSequence(self._seed))

    @classmethod
    def from_entropy(cls) -> "RandomSource":
        """Create a source from a fresh OS-entropy seed (128 bits)."""
        return cls(np.random.SeedSequence().entropy)

    @property
    def seed(self) -> int:
        """Seed this stream was created from."""
        return self._seed

    def next_u64(self) -> int:
        """Uniform 64-bit unsigned integer."""
        return int(self._bitgen.random_raw()) & U64_MASK

    def next_u32(self) -> int:
        """Uniform 32-bit unsigned integer (low half of a 64-bit draw)."""
        return self.next_u64() & 0xFFFFFFFF

    def rand_below(self, bound: int) -> int:
        """
        Uniform integer in [0, bound).

        Rejection sampling removes modulo bias: draws at or above the
        largest multiple of bound that fits in 64 bits are discarded.
        """
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        if bound > U64_RANGE:
            raise ValueError(f"bound {bound} exceeds 64-bit range")

        zone = (U64_RANGE // bound) * bound
        while True:
            n = self.next_u64()
            if n < zone:
                return n % bound

    def rand_range(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi)."""
        if hi <= lo:
            raise ValueError(f"empty range [{lo}, {hi})")
        return lo + self.rand_below(hi - lo)

    def rand_inclusive(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi]."""
        return self.rand_range(lo, hi + 1)

    def random(self) -> float:
        """Uniform float in [0, 1) with 53 bits of precision."""
        return (self.next_u64() >> 11) * F53_SCALE

    def coin_flip(self) -> bool:
        """Fair boolean (top bit of a 64-bit draw)."""
        return (self.next_u64() >> 63) == 1

    def roll_dx(self, sides: int) -> int:
        """Roll a `sides`-sided die; result is in [1, sides]."""
        if sides < 1:
            raise ValueError(f"die needs at least one side, got {sides}")
        return self.rand_below(sides) + 1

    def roll_ndx(self, dice: int, sides: int) -> int:
        """Roll `dice` dice with `sides` sides each and return the sum."""
        return sum(self.roll_dx(sides) for _ in range(dice))

    def fork(self) -> "RandomSource":
        """
        Derive an independent source seeded from this stream.

        Consumes two 64-bit draws; the child never shares state with the parent.
        """
        child_seed = (self.next_u64() << 64) | self.next_u64()
        return RandomSource(child_seed)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed})"


def room_color(center: Tuple[float, float], size: Tuple[int, int],
               alpha: Optional[float] = None) -> Tuple[float, float, float, float]:
    """
    Pseudo-color for a room, derived from its geometry only.

    Uses |y| so a room and its mirror across the spine share a color.

    Args:
        center: Room center (x, y) in cells
        size: Room size (width, height) in cells
        alpha: Alpha channel (default ROOM_ALPHA)

    Returns:
        (r, g, b, a) floats in [0, 1]
    """
    cx, cy = center
    source = RandomSource(make_seed("room-color", float(cx), abs(float(cy)), int(size[0]), int(size[1])))
    r, g, b = source.random(), source.random(), source.random()
    return (r, g, b, ROOM_ALPHA if alpha is None else alpha)
