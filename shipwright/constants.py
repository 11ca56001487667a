"""
Central configuration constants for ship generation.

Defines default values, thresholds, and configuration parameters
used across multiple modules.
"""

# ============================================================================
# Ship Parameter Defaults
# ============================================================================

SHIP_LENGTH_DEFAULT = 64      # Spine extent sampled for room x positions (cells)
MAX_WIDTH_DEFAULT = 24        # Max distance from the spine a room center may sit
MIN_ROOMS_DEFAULT = 10        # Room-count floor for an accepted layout
MAX_ROOMS_DEFAULT = 25        # Candidate draws per placement pass

ROOM_WIDTH_MIN_DEFAULT = 4
ROOM_WIDTH_MAX_DEFAULT = 16
ROOM_HEIGHT_MIN_DEFAULT = 4
ROOM_HEIGHT_MAX_DEFAULT = 16

# Smallest size a room may be drawn at (half-extent must be >= 1 cell)
ROOM_SIZE_FLOOR = 2


# ============================================================================
# Placement Retry Configuration
# ============================================================================

# Full placement passes before giving up on the room-count floor
MAX_PLACEMENT_ATTEMPTS = 32
SPINE_ROOM_HEIGHT_FLOOR = 2   # Spine rooms never shrink below this height


# ============================================================================
# Graph Configuration
# ============================================================================

# Inflation applied before the adjacency overlap test (cells)
ADJACENCY_INFLATE = 1

# Overlap area that counts as a shared wall (a single shared corner has area 1)
ADJACENCY_MIN_AREA = 1


# ============================================================================
# Rendering Hand-off
# ============================================================================

TILE_SIZE = 16.0       # World units per grid cell
OFFSET_X = -32         # Shift (in cells) applied to x so the ship is centered
ROOM_ALPHA = 0.65      # Alpha channel for room colors


# ============================================================================
# Hull Profile Defaults
# ============================================================================

HULL_LENGTH_DEFAULT = 64
HULL_MAX_WIDTH_DEFAULT = 16
HULL_MIN_RUN_DEFAULT = 4
HULL_MAX_RUN_DEFAULT = 8
