"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    A player stands in for the host's input channel: once per tick it looks
    at the current game state and may ask for a turn.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or self.__class__.__name__

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a direction to request given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "NORTH", "EAST", "SOUTH", "WEST", or None for no input
        """
        raise NotImplementedError
