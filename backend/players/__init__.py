"""
Player implementations for the Snake simulation.

This module contains the input-source abstractions that stand in for the
host's input channel and decide which turns to request.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
