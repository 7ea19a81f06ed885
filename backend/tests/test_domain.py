"""
Tests for the domain package - constants, Snake, SpeedPolicy and GameState.
"""

import pytest
import sys
import os
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    Snake,
    SpeedPolicy,
    GameState,
    NORTH, EAST, SOUTH, WEST,
    VALID_DIRECTIONS,
    OPPOSITES,
    GRID_SIZE,
    OBSTACLE,
    INITIAL_LENGTH,
)
from domain.constants import wrap, MIN_TICK_INTERVAL_MS, INITIAL_TICK_INTERVAL_MS


class TestConstants:
    """Tests for the fixed rules."""

    def test_grid_and_obstacle(self):
        assert GRID_SIZE == 30
        assert OBSTACLE == (29, 29)

    def test_opposites_are_symmetric(self):
        for direction in VALID_DIRECTIONS:
            assert OPPOSITES[OPPOSITES[direction]] == direction
        assert OPPOSITES[NORTH] == SOUTH
        assert OPPOSITES[EAST] == WEST

    @pytest.mark.parametrize("value,expected", [
        (-1, 29),
        (0, 0),
        (15, 15),
        (29, 29),
        (30, 0),
    ])
    def test_wrap(self, value, expected):
        assert wrap(value) == expected


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization(self):
        """Snake initializes idle with its length taken from the positions."""
        positions = [(5, 5), (4, 5), (3, 5)]
        snake = Snake(positions)
        assert list(snake.positions) == positions
        assert snake.length == 3
        assert snake.direction == EAST
        assert snake.alive is False
        assert snake.game_over is False
        assert snake.turn_locked is False
        assert snake.death_reason is None
        assert snake.death_tick is None

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for cheap head pushes."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_snake_head_property(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)

    def test_initial_snake_is_coiled(self):
        snake = Snake.initial((2, 3))
        assert snake.length == INITIAL_LENGTH
        assert snake.body() == [(2, 3)] * INITIAL_LENGTH
        assert snake.direction == EAST

    def test_body_is_capped_at_length(self):
        snake = Snake([(5, 5), (4, 5), (3, 5), (2, 5)], length=3)
        assert snake.body() == [(5, 5), (4, 5), (3, 5)]
        assert snake.occupies((2, 5)) is False

    def test_truncate_drops_extra_tail(self):
        snake = Snake([(5, 5), (4, 5), (3, 5), (2, 5)], length=2)
        snake.truncate()
        assert list(snake.positions) == [(5, 5), (4, 5)]


class TestSpeedPolicy:
    """Tests for the SpeedPolicy class."""

    def test_starts_at_initial_interval(self):
        assert SpeedPolicy().tick_interval_ms == INITIAL_TICK_INTERVAL_MS

    def test_multiples_of_four_speed_up(self):
        policy = SpeedPolicy()
        assert policy.update(8) is True
        assert policy.tick_interval_ms == 230
        assert policy.update(12) is True
        assert policy.tick_interval_ms == 210
        assert policy.update(16) is True
        assert policy.tick_interval_ms == 190

    def test_other_lengths_do_nothing(self):
        policy = SpeedPolicy()
        for length in (6, 7, 9, 10, 11, 13):
            assert policy.update(length) is False
        assert policy.tick_interval_ms == INITIAL_TICK_INTERVAL_MS

    def test_each_length_triggers_once(self):
        policy = SpeedPolicy()
        policy.update(8)
        assert policy.update(8) is False
        assert policy.tick_interval_ms == 230

    def test_floor(self):
        policy = SpeedPolicy()
        for length in range(4, 400, 4):
            policy.update(length)
            assert policy.tick_interval_ms >= MIN_TICK_INTERVAL_MS
        assert policy.tick_interval_ms == MIN_TICK_INTERVAL_MS
        assert policy.update(400) is False
        assert policy.tick_interval_ms == MIN_TICK_INTERVAL_MS

    def test_reset_clears_triggered_lengths(self):
        policy = SpeedPolicy()
        policy.update(8)
        policy.reset()
        assert policy.tick_interval_ms == INITIAL_TICK_INTERVAL_MS
        assert policy.triggered_lengths == set()
        assert policy.update(8) is True


class TestGameState:
    """Tests for the GameState snapshot."""

    def _state(self, **overrides):
        values = dict(
            tick_number=3,
            body=((5, 5), (4, 5), (3, 5), (2, 5), (1, 5), (0, 5), (0, 4)),
            food=(10, 10),
            alive=True,
            game_over=False,
            length=7,
            direction=EAST,
            tick_interval_ms=250,
        )
        values.update(overrides)
        return GameState(**values)

    def test_score_is_length_minus_initial(self):
        assert self._state().score == 1

    def test_head(self):
        assert self._state().head == (5, 5)

    def test_print_board_marks_cells(self):
        board = self._state().print_board()
        lines = board.split("\n")
        assert len(lines) == GRID_SIZE + 1
        row5 = lines[5].split()
        assert row5[0] == "5"
        assert row5[1:7] == ["T", "T", "T", "T", "T", "H"]
        assert lines[10].split()[11] == "A"
        assert lines[29].split()[30] == "R"

    def test_print_board_head_wins_on_coiled_body(self):
        state = self._state(body=((0, 0),) * 6, length=6)
        assert state.print_board().split("\n")[0].split()[1] == "H"

    def test_status_text_running(self):
        text = self._state().status_text()
        assert "Press space to stop." in text
        assert "Score: 1" in text
        assert "GAME OVER!" not in text

    def test_status_text_game_over(self):
        text = self._state(alive=False, game_over=True).status_text()
        assert "GAME OVER!" in text
        assert "Press space to start." in text

    def test_to_dict(self):
        data = self._state().to_dict()
        assert data["body"][0] == [5, 5]
        assert data["food"] == [10, 10]
        assert data["score"] == 1
        assert data["obstacle"] == [29, 29]
        assert data["tick_interval_ms"] == 250

    def test_repr(self):
        repr_str = repr(self._state())
        assert "GameState" in repr_str
        assert "tick=3" in repr_str
