"""
Domain entities for the Snake simulation engine.

This module contains the core game entities that are independent of
any host concerns (rendering, input devices, timers, etc.).
"""

from .constants import (
    NORTH, EAST, SOUTH, WEST, VALID_DIRECTIONS, OPPOSITES,
    GRID_SIZE, OBSTACLE, INITIAL_LENGTH,
)
from .snake import Snake
from .speed import SpeedPolicy
from .game_state import GameState

__all__ = [
    'NORTH', 'EAST', 'SOUTH', 'WEST', 'VALID_DIRECTIONS', 'OPPOSITES',
    'GRID_SIZE', 'OBSTACLE', 'INITIAL_LENGTH',
    'Snake',
    'SpeedPolicy',
    'GameState',
]
