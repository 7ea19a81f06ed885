import os
import json
import time
import random
import logging
import argparse
import threading
from typing import Dict, Any, Optional, Tuple, Set

from dotenv import load_dotenv

from domain.constants import (
    GRID_SIZE,
    OBSTACLE,
    START_CELL,
    VALID_DIRECTIONS,
    OPPOSITES,
    DIRECTION_DELTAS,
    wrap,
)
from domain.snake import Snake
from domain.speed import SpeedPolicy
from domain.game_state import GameState
from players import Player, ScriptedPlayer, get_player_class, AVAILABLE_VARIANTS

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class BoardFullError(RuntimeError):
    """Raised when no free cell is left for food or a teleport."""


class SnakeGame:
    """
    Manages:
      - Board (fixed toroidal grid with the robot cell)
      - The snake and its turn lock
      - Food
      - Speed policy
      - Start/stop lifecycle

    The engine never schedules itself. A host calls tick() once per
    `tick_interval_ms`, forwards input to request_direction()/toggle_running()
    and polls snapshot() to draw. All of these run under one lock, so input
    arriving from another thread never interleaves with a tick.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        start: Cell = START_CELL,
    ):
        x, y = start
        if not (0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
            raise ValueError(f"Start cell out of bounds at {start}.")
        if start == OBSTACLE:
            raise ValueError(f"Start cell {start} is the obstacle.")

        self._lock = threading.RLock()
        self.rng = rng or random.Random(seed)
        self.start_cell = start
        self.snake = Snake.initial(start)
        self.speed = SpeedPolicy()
        self.tick_number = 0
        self.food: Cell = self.random_free_cell()

    # ---------------------------------------------
    # Placement
    # ---------------------------------------------

    def is_free(self, x: int, y: int) -> bool:
        """A cell is free unless it is the robot or part of the snake body."""
        if (x, y) == OBSTACLE:
            return False
        return not self.snake.occupies((x, y))

    def random_free_cell(self, exclude: Optional[Set[Cell]] = None) -> Cell:
        """
        Return a uniformly random free cell by rejection sampling.

        Args:
            exclude: extra cells to treat as occupied

        Raises:
            BoardFullError: if every cell is taken, instead of looping forever.
        """
        occupied = set(self.snake.body())
        occupied.add(OBSTACLE)
        if exclude:
            occupied.update(exclude)

        if len(occupied) >= GRID_SIZE * GRID_SIZE:
            raise BoardFullError(
                f"No free cell left on the {GRID_SIZE}x{GRID_SIZE} board "
                f"(snake length {self.snake.length})."
            )

        while True:
            x = self.rng.randint(0, GRID_SIZE - 1)
            y = self.rng.randint(0, GRID_SIZE - 1)
            if (x, y) not in occupied:
                return (x, y)

    # ---------------------------------------------
    # Host API
    # ---------------------------------------------

    def tick(self) -> None:
        """
        Advance the simulation by one step:
          1) Push a new head one cell ahead (wrapping at the edges)
          2) Clear the turn lock
          3) Bite check against the pre-move body (old tail included)
          4) Eat food (grow + new food)
          5) Teleport off the robot cell
          6) Speed update
        Does nothing unless the game is running.
        """
        with self._lock:
            snake = self.snake
            if not snake.alive:
                return

            self.tick_number += 1

            hx, hy = snake.head
            dx, dy = DIRECTION_DELTAS[snake.direction]
            new_head = (wrap(hx + dx), wrap(hy + dy))

            previous_body = snake.body()
            snake.positions.appendleft(new_head)
            snake.turn_locked = False

            if new_head in previous_body:
                snake.alive = False
                snake.game_over = True
                snake.death_reason = "self"
                snake.death_tick = self.tick_number
                snake.truncate()
                logger.info(f"Snake bit itself at {new_head} on tick {self.tick_number}. Length: {snake.length}")
                return

            if new_head == self.food:
                snake.length += 1
                self.food = self.random_free_cell()
                logger.info(f"Ate food at {new_head}, length now {snake.length}. New food at {self.food}")

            snake.truncate()

            if snake.head == OBSTACLE:
                target = self.random_free_cell(exclude={self.food})
                snake.positions[0] = target
                logger.debug(f"Head hit the robot at {OBSTACLE}, teleported to {target}")

            self.speed.update(snake.length)

    def request_direction(self, direction: str) -> bool:
        """
        Ask the snake to turn.

        Accepted only while running, when `direction` does not reverse the
        current heading and no other turn was accepted since the last tick.

        Returns:
            True if the turn was applied.

        Raises:
            ValueError: if `direction` is not one of the direction constants.
        """
        if direction not in VALID_DIRECTIONS:
            raise ValueError(f"Unknown direction '{direction}'. Valid: {sorted(VALID_DIRECTIONS)}")

        with self._lock:
            snake = self.snake
            if not snake.alive or snake.turn_locked:
                return False
            if direction == OPPOSITES[snake.direction]:
                return False

            snake.turn_locked = True
            snake.direction = direction
            return True

    def toggle_running(self) -> bool:
        """
        Start if idle or dead, stop (and reset) if running.

        Returns:
            Whether the game is running afterwards.
        """
        with self._lock:
            if self.snake.alive:
                self.stop()
            else:
                self.start()
            return self.snake.alive

    def start(self) -> None:
        with self._lock:
            self.reset()
            self.snake.alive = True
            logger.info("Game started")

    def stop(self) -> None:
        with self._lock:
            self.reset()
            logger.info("Game stopped")

    def reset(self) -> None:
        """
        Restore the initial snake and speed. Food stays where it is unless the
        fresh snake now covers it.
        """
        with self._lock:
            self.snake = Snake.initial(self.start_cell)
            self.speed.reset()
            self.tick_number = 0
            if not self.is_free(*self.food):
                self.food = self.random_free_cell()

    def snapshot(self) -> GameState:
        """
        Return a read-only snapshot of the current board as a GameState.
        """
        with self._lock:
            snake = self.snake
            return GameState(
                tick_number=self.tick_number,
                body=tuple(snake.body()),
                food=self.food,
                alive=snake.alive,
                game_over=snake.game_over,
                length=snake.length,
                direction=snake.direction,
                tick_interval_ms=self.speed.tick_interval_ms,
                grid_size=GRID_SIZE,
                obstacle=OBSTACLE,
            )

    @property
    def tick_interval_ms(self) -> int:
        return self.speed.tick_interval_ms

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.snapshot().print_board() + "\n")


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    player: Player,
    max_ticks: int,
    game: Optional[SnakeGame] = None,
    seed: Optional[int] = None,
    realtime: bool = False,
    show_board: bool = False,
) -> Dict[str, Any]:
    """
    Drives a single game headlessly, the way a host shell would.

    Args:
        player: input source asked for a move before every tick.
        max_ticks: stop after this many ticks even if the snake is alive.
        game: an existing engine to drive; a new one is created if omitted.
        seed: seed for a newly created engine.
        realtime: sleep `tick_interval_ms` between ticks.
        show_board: print the board after every tick.

    Returns:
        A dictionary summarizing the game.
    """
    if max_ticks < 0:
        raise ValueError(f"max_ticks must be non-negative, got {max_ticks}")

    if game is None:
        game = SnakeGame(seed=seed)

    if not game.snake.alive:
        game.toggle_running()

    start_time = time.time()
    accepted_turns = 0

    while game.snake.alive and game.tick_number < max_ticks:
        move = player.get_move(game.snapshot())
        if move is not None and game.request_direction(move):
            accepted_turns += 1

        game.tick()

        if show_board:
            game.print_board()

        if realtime:
            time.sleep(game.tick_interval_ms / 1000)

    state = game.snapshot()
    if state.game_over:
        logger.info(f"Game Over after {state.tick_number} ticks. Score: {state.score}")
    else:
        logger.info(f"Stopped after {state.tick_number} ticks. Score: {state.score}")

    return {
        "player": player.name,
        "ticks": state.tick_number,
        "score": state.score,
        "length": state.length,
        "game_over": state.game_over,
        "death_reason": game.snake.death_reason,
        "accepted_turns": accepted_turns,
        "tick_interval_ms": state.tick_interval_ms,
        "duration_seconds": round(time.time() - start_time, 3),
    }


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got '{value}'")


def build_player(variant: str, moves: Optional[str] = None, seed: Optional[int] = None) -> Player:
    """Create the player named by `variant` ('random' or 'scripted')."""
    player_class = get_player_class(variant)
    if player_class is ScriptedPlayer:
        if moves is None:
            raise ValueError("The scripted player needs --moves, e.g. NORTH,EAST,,SOUTH")
        script = [m.strip().upper() or None for m in moves.split(",")]
        return player_class(script)
    return player_class(rng=random.Random(seed))


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main(argv=None):
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Run a headless Snake game driven by a scripted or random player."
    )
    parser.add_argument("--player", type=str, default=os.getenv("SNAKE_PLAYER", "random"),
                        choices=AVAILABLE_VARIANTS,
                        help="Input source for the snake (default: random)")
    parser.add_argument("--moves", type=str, default=None,
                        help="Comma separated directions for the scripted player; empty entries mean no input")
    parser.add_argument("--max-ticks", type=int, default=_env_int("SNAKE_MAX_TICKS", 1000),
                        help="Maximum number of ticks (default: 1000)")
    parser.add_argument("--seed", type=int, default=_env_int("SNAKE_SEED", None),
                        help="Seed for food placement, teleports and the random player")
    parser.add_argument("--realtime", action="store_true",
                        help="Wait the current tick interval between ticks")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--log-level", type=str, default=os.getenv("SNAKE_LOG_LEVEL", "INFO"),
                        help="Logging level (default: INFO)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    player = build_player(args.player, moves=args.moves, seed=args.seed)
    game = SnakeGame(seed=args.seed)

    result = run_simulation(
        player,
        max_ticks=args.max_ticks,
        game=game,
        realtime=args.realtime,
        show_board=args.show_board,
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    print(game.snapshot().status_text())
    return result


if __name__ == "__main__":
    main()
