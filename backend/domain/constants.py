"""
Game constants for the Snake simulation.
"""

# Movement directions
NORTH = "NORTH"
EAST = "EAST"
SOUTH = "SOUTH"
WEST = "WEST"
VALID_DIRECTIONS = {NORTH, EAST, SOUTH, WEST}

OPPOSITES = {
    NORTH: SOUTH,
    SOUTH: NORTH,
    EAST: WEST,
    WEST: EAST,
}

# y grows downward, so NORTH => y - 1
DIRECTION_DELTAS = {
    NORTH: (0, -1),
    SOUTH: (0, 1),
    WEST:  (-1, 0),
    EAST:  (1, 0),
}

# Board settings (fixed rules, keep in code, not env vars)
GRID_SIZE = 30
OBSTACLE = (GRID_SIZE - 1, GRID_SIZE - 1)
START_CELL = (0, 0)
INITIAL_LENGTH = 6
INITIAL_DIRECTION = EAST

# Speed settings
INITIAL_TICK_INTERVAL_MS = 250
TICK_INTERVAL_STEP_MS = 20
MIN_TICK_INTERVAL_MS = 10
SPEEDUP_LENGTH_MULTIPLE = 4


def wrap(value: int, size: int = GRID_SIZE) -> int:
    """Wrap a coordinate onto the torus: past the last cell is 0, below 0 is size - 1."""
    if value > size - 1:
        return 0
    if value < 0:
        return size - 1
    return value
