"""
Data types shared by the ship generator.

ShipParameters mirrors the YAML configuration structure and is populated by
loader.py (or built directly). Room, the edge weights and Edge are the
values flowing between placement, graph building and spanning-tree
extraction.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Tuple, Union

from .constants import (
    SHIP_LENGTH_DEFAULT,
    MAX_WIDTH_DEFAULT,
    MIN_ROOMS_DEFAULT,
    MAX_ROOMS_DEFAULT,
    ROOM_WIDTH_MIN_DEFAULT,
    ROOM_WIDTH_MAX_DEFAULT,
    ROOM_HEIGHT_MIN_DEFAULT,
    ROOM_HEIGHT_MAX_DEFAULT,
    ROOM_SIZE_FLOOR,
    MAX_PLACEMENT_ATTEMPTS,
    HULL_LENGTH_DEFAULT,
    HULL_MAX_WIDTH_DEFAULT,
    HULL_MIN_RUN_DEFAULT,
    HULL_MAX_RUN_DEFAULT,
)


class ConfigError(ValueError):
    """Raised when ship parameters violate their invariants"""
    pass


# ============================================================================
# Ship Parameters
# ============================================================================

@dataclass(frozen=True)
class ShipParameters:
    """Per-run generation configuration (immutable)"""
    ship_length: int = SHIP_LENGTH_DEFAULT
    max_width: int = MAX_WIDTH_DEFAULT  # Half-width measured from the spine
    min_rooms: int = MIN_ROOMS_DEFAULT
    max_rooms: int = MAX_ROOMS_DEFAULT
    room_width_min: int = ROOM_WIDTH_MIN_DEFAULT
    room_width_max: int = ROOM_WIDTH_MAX_DEFAULT
    room_height_min: int = ROOM_HEIGHT_MIN_DEFAULT
    room_height_max: int = ROOM_HEIGHT_MAX_DEFAULT
    seed: Optional[Any] = None  # None = draw from OS entropy
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS
    name: Optional[str] = None

    def validate(self):
        """
        Check parameter invariants.

        Raises:
            ConfigError: on the first violated invariant
        """
        for key in ('ship_length', 'max_width', 'min_rooms', 'max_rooms',
                    'room_width_min', 'room_width_max', 'room_height_min',
                    'room_height_max', 'max_attempts'):
            value = getattr(self, key)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"{key} must be an integer, got {value!r}")

        if self.ship_length < 1:
            raise ConfigError(f"ship_length must be >= 1, got {self.ship_length}")
        if self.max_width < 0:
            raise ConfigError(f"max_width must be >= 0, got {self.max_width}")
        if self.min_rooms < 0:
            raise ConfigError(f"min_rooms must be >= 0, got {self.min_rooms}")
        if self.min_rooms > self.max_rooms:
            raise ConfigError(f"min_rooms ({self.min_rooms}) > max_rooms ({self.max_rooms})")
        if self.room_width_min > self.room_width_max:
            raise ConfigError(f"room_width_min ({self.room_width_min}) > room_width_max ({self.room_width_max})")
        if self.room_height_min > self.room_height_max:
            raise ConfigError(f"room_height_min ({self.room_height_min}) > room_height_max ({self.room_height_max})")
        if self.room_width_min < ROOM_SIZE_FLOOR or self.room_height_min < ROOM_SIZE_FLOOR:
            raise ConfigError(f"room sizes must be >= {ROOM_SIZE_FLOOR}")
        if self.max_attempts < 1:
            raise ConfigError(f"max_attempts must be >= 1, got {self.max_attempts}")

    def with_seed(self, seed: Any) -> "ShipParameters":
        """Copy of these parameters with a different seed"""
        return replace(self, seed=seed)


# ============================================================================
# Rooms
# ============================================================================

ROLE_SIDE = "side"      # Off-spine room (y > 0)
ROLE_MIRROR = "mirror"  # Reflection of a side room (y < 0)
ROLE_SPINE = "spine"    # Room bisected by the spine


@dataclass(frozen=True)
class Room:
    """
    Axis-aligned integer rectangle in grid cells.

    Invariant: min_x < max_x and min_y < max_y. Equality compares geometry only.
    """
    min_x: int
    min_y: int
    max_x: int
    max_y: int
    role: str = field(default=ROLE_SIDE, compare=False)

    def __post_init__(self):
        if self.min_x >= self.max_x or self.min_y >= self.max_y:
            raise ValueError(f"degenerate room: ({self.min_x}, {self.min_y})-({self.max_x}, {self.max_y})")

    @classmethod
    def from_center_size(cls, center: Tuple[int, int], size: Tuple[int, int], role: str = ROLE_SIDE) -> "Room":
        """Build a room from integer center and size (extent is 2 * (size // 2))"""
        half_w, half_h = abs(size[0]) // 2, abs(size[1]) // 2
        cx, cy = center
        return cls(cx - half_w, cy - half_h, cx + half_w, cy + half_h, role)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Tuple[float, float]:
        return ((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    def mirrored(self) -> "Room":
        """Reflection across the spine (y -> -y)"""
        role = ROLE_MIRROR if self.role == ROLE_SIDE else self.role
        return Room(self.min_x, -self.max_y, self.max_x, -self.min_y, role)


# ============================================================================
# Graph Edges
# ============================================================================

@dataclass(frozen=True)
class Adjacent:
    """Rooms share a wall; orders before every Weighted edge"""

    def order_key(self) -> Tuple[int, float, float]:
        return (0, 0.0, 0.0)


@dataclass(frozen=True)
class Weighted:
    """Triangulation edge weight, compared as (spine_distance, distance)"""
    spine_distance: float  # Mean |center.y| of the two rooms
    distance: float  # Euclidean distance between centers

    def order_key(self) -> Tuple[int, float, float]:
        return (1, self.spine_distance, self.distance)


EdgeWeight = Union[Adjacent, Weighted]


@dataclass(frozen=True)
class Edge:
    """Undirected edge between room indices, stored with a < b"""
    a: int
    b: int
    weight: EdgeWeight

    @property
    def pair(self) -> Tuple[int, int]:
        return (self.a, self.b)

    def sort_key(self) -> Tuple:
        return self.weight.order_key() + (self.a, self.b)


# ============================================================================
# Hull Profile
# ============================================================================

@dataclass(frozen=True)
class HullParameters:
    """Hull-by-runs profile configuration"""
    length: int = HULL_LENGTH_DEFAULT
    max_width: int = HULL_MAX_WIDTH_DEFAULT
    min_run: int = HULL_MIN_RUN_DEFAULT
    max_run: int = HULL_MAX_RUN_DEFAULT
