"""
Scripted player - replays a fixed list of moves, one per tick.
"""

from typing import Iterable, List, Optional

from domain.constants import VALID_DIRECTIONS
from domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """
    Replays `moves` in order. None entries mean "no input this tick".
    Once the script is exhausted the player stops sending input.
    """

    def __init__(self, moves: Iterable[Optional[str]], name: Optional[str] = None):
        super().__init__(name)
        self.moves: List[Optional[str]] = list(moves)
        for move in self.moves:
            if move is not None and move not in VALID_DIRECTIONS:
                raise ValueError(f"Unknown direction '{move}' in script")
        self.cursor = 0

    def get_move(self, game_state: GameState) -> Optional[str]:
        if self.cursor >= len(self.moves):
            return None
        move = self.moves[self.cursor]
        self.cursor += 1
        return move
