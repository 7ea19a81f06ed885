"""
GameState entity - a read-only snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Tuple, Dict, Any

from .constants import GRID_SIZE, OBSTACLE, INITIAL_LENGTH, INITIAL_TICK_INTERVAL_MS, EAST

Cell = Tuple[int, int]


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many ticks have been applied since the last start
        body: tuple of (x, y), head first, exactly `length` entries
        food: (x, y) of the food cell
        alive: whether the game is running
        game_over: whether the last game ended with the snake biting itself
        length: current snake length
        direction: current heading
        tick_interval_ms: interval the host should wait before the next tick
        grid_size: side of the square board
        obstacle: (x, y) of the robot cell
    """

    tick_number: int
    body: Tuple[Cell, ...]
    food: Cell
    alive: bool
    game_over: bool
    length: int = INITIAL_LENGTH
    direction: str = EAST
    tick_interval_ms: int = INITIAL_TICK_INTERVAL_MS
    grid_size: int = GRID_SIZE
    obstacle: Cell = OBSTACLE

    @property
    def score(self) -> int:
        return self.length - INITIAL_LENGTH

    @property
    def head(self) -> Cell:
        return self.body[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        R = robot (obstacle)
        H = snake head
        T = snake body
        (0,0) is the top left, y grows downward.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        ox, oy = self.obstacle
        board[oy][ox] = 'R'

        fx, fy = self.food
        board[fy][fx] = 'A'

        # Draw the tail first so the head wins on coiled segments
        for x, y in reversed(self.body[1:]):
            board[y][x] = 'T'
        if self.body:
            hx, hy = self.body[0]
            board[hy][hx] = 'H'

        result = []
        for y in range(self.grid_size):
            result.append(f"{y:2d} {' '.join(board[y])}")
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))
        return "\n".join(result)

    def status_text(self) -> str:
        """Title, game over banner, start/stop hint and score, one per line."""
        lines = ["Snake Game", "Use WASD to control the snake."]
        if self.game_over:
            lines.append("GAME OVER!")
        lines.append(f"Press space to {'stop' if self.alive else 'start'}.")
        lines.append(f"Score: {self.score}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        # JSON stores the (x, y) tuples as lists
        return {
            "tick_number": self.tick_number,
            "body": [list(cell) for cell in self.body],
            "food": list(self.food),
            "alive": self.alive,
            "game_over": self.game_over,
            "length": self.length,
            "score": self.score,
            "direction": self.direction,
            "tick_interval_ms": self.tick_interval_ms,
            "grid_size": self.grid_size,
            "obstacle": list(self.obstacle),
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, head={self.body[0] if self.body else None}, "
            f"food={self.food}, score={self.score}, alive={self.alive}, game_over={self.game_over}>"
        )
