"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import VALID_DIRECTIONS, OPPOSITES, DIRECTION_DELTAS, wrap
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a legal direction that avoids self-collisions.
    """

    def __init__(self, name: Optional[str] = None, rng: Optional[random.Random] = None):
        super().__init__(name)
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Optional[str]:
        head_x, head_y = game_state.head
        body = game_state.body

        # Reversing is always rejected by the engine
        legal = sorted(VALID_DIRECTIONS - {OPPOSITES[game_state.direction]})

        # Filter out moves that land on the body (tail included, it is still
        # checked on the tick it vacates)
        safe_moves: List[str] = []
        for move in legal:
            dx, dy = DIRECTION_DELTAS[move]
            new_cell = (wrap(head_x + dx, game_state.grid_size), wrap(head_y + dy, game_state.grid_size))
            if new_cell in body[1:]:
                continue
            safe_moves.append(move)

        # If no safe moves, just return a random legal one (we'll die anyway)
        if not safe_moves:
            return self.rng.choice(legal)

        return self.rng.choice(safe_moves)
