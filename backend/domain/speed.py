"""
Speed policy - how long the host should wait between ticks.

The interval shrinks by a fixed step each time the snake's length reaches a
new multiple of four, down to a floor. Each length value triggers at most once
per game, so ticks spent at the same length never re-trigger.
"""

import logging
from typing import Set

from .constants import (
    INITIAL_TICK_INTERVAL_MS,
    TICK_INTERVAL_STEP_MS,
    MIN_TICK_INTERVAL_MS,
    SPEEDUP_LENGTH_MULTIPLE,
)

logger = logging.getLogger(__name__)


class SpeedPolicy:
    """
    Tracks the desired tick interval for one game.

    Attributes:
        tick_interval_ms: current interval the host should wait between ticks
        triggered_lengths: lengths that have already sped the game up
    """

    def __init__(self) -> None:
        self.tick_interval_ms = INITIAL_TICK_INTERVAL_MS
        self.triggered_lengths: Set[int] = set()

    def update(self, length: int) -> bool:
        """
        Apply a speed-up if `length` is a fresh multiple of four.

        Returns:
            True if the interval changed.
        """
        if length % SPEEDUP_LENGTH_MULTIPLE != 0:
            return False
        if length in self.triggered_lengths:
            return False
        if self.tick_interval_ms <= MIN_TICK_INTERVAL_MS:
            return False

        self.tick_interval_ms = max(
            MIN_TICK_INTERVAL_MS, self.tick_interval_ms - TICK_INTERVAL_STEP_MS
        )
        self.triggered_lengths.add(length)
        logger.info(f"Length {length} reached, tick interval now {self.tick_interval_ms}ms")
        return True

    def reset(self) -> None:
        self.tick_interval_ms = INITIAL_TICK_INTERVAL_MS
        self.triggered_lengths.clear()

    def __repr__(self):
        return f"<SpeedPolicy interval={self.tick_interval_ms}ms, triggered={sorted(self.triggered_lengths)}>"
