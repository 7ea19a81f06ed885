"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple, Optional

from .constants import INITIAL_LENGTH, INITIAL_DIRECTION, START_CELL


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        length: number of meaningful segments (the drawn body)
        direction: current heading, one of the direction constants
        alive: whether the game is in progress
        game_over: set when the snake bites itself, cleared only by a reset
        turn_locked: set once a direction change is accepted, cleared each tick
        death_reason: e.g., 'self'
        death_tick: The tick number when the snake died
    """

    def __init__(
        self,
        positions: List[Tuple[int, int]],
        direction: str = INITIAL_DIRECTION,
        length: Optional[int] = None,
    ):
        self.positions = deque(positions)
        self.length = len(self.positions) if length is None else length
        self.direction = direction
        self.alive = False
        self.game_over = False
        self.turn_locked = False
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @classmethod
    def initial(cls, start: Tuple[int, int] = START_CELL) -> "Snake":
        """A fresh snake with every segment coiled on the start cell."""
        return cls([start] * INITIAL_LENGTH, direction=INITIAL_DIRECTION)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    def body(self) -> List[Tuple[int, int]]:
        """Return exactly `length` cells, head first."""
        return list(self.positions)[:self.length]

    def occupies(self, cell: Tuple[int, int]) -> bool:
        return cell in self.body()

    def truncate(self) -> None:
        while len(self.positions) > self.length:
            self.positions.pop()

    def __repr__(self):
        return (
            f"<Snake head={self.head if self.positions else None}, length={self.length}, "
            f"direction={self.direction}, alive={self.alive}, game_over={self.game_over}>"
        )
