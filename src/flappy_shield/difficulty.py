"""
difficulty.py: Score-driven difficulty levels.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .constants import (
    BASE_PIPE_SPEED, BASE_PIPE_GAP, BASE_GRAVITY, BASE_SPAWN_INTERVAL,
    POINTS_PER_LEVEL, SPEED_PER_LEVEL, GAP_PER_LEVEL, GRAVITY_PER_LEVEL,
    INTERVAL_PER_LEVEL, MIN_PIPE_GAP, MIN_SPAWN_INTERVAL, LEVEL_UP_MESSAGES,
)

logger = logging.getLogger(__name__)


def level_for_score(score: int) -> int:
    return max(0, score) // POINTS_PER_LEVEL


def message_for_level(level: int) -> str:
    """Notification text for reaching ``level``. The last message repeats."""
    index = min(level - 1, len(LEVEL_UP_MESSAGES) - 1)
    if index < 0:
        return f"Level {level} reached!"
    return LEVEL_UP_MESSAGES[index]


@dataclass
class DifficultyController:
    base_speed: float = BASE_PIPE_SPEED
    base_gap: float = BASE_PIPE_GAP
    base_gravity: float = BASE_GRAVITY
    base_interval: float = BASE_SPAWN_INTERVAL

    level: int = 0
    pipe_speed: float = BASE_PIPE_SPEED
    pipe_gap: float = BASE_PIPE_GAP
    gravity: float = BASE_GRAVITY
    spawn_interval: float = BASE_SPAWN_INTERVAL

    def __post_init__(self):
        self.recompute()

    def recompute(self):
        """Derives the live tunables from the current level."""
        self.pipe_speed = self.base_speed + self.level * SPEED_PER_LEVEL
        self.pipe_gap = max(MIN_PIPE_GAP, self.base_gap - self.level * GAP_PER_LEVEL)
        self.gravity = self.base_gravity + self.level * GRAVITY_PER_LEVEL
        self.spawn_interval = max(MIN_SPAWN_INTERVAL,
                                  self.base_interval - self.level * INTERVAL_PER_LEVEL)

    def reset(self):
        self.level = 0
        self.recompute()

    def update_for_score(self, score: int) -> Optional[str]:
        """
        Raises the level when ``score`` crossed a threshold.
        Returns the level-up message, or None when the level did not change.
        """
        new_level = level_for_score(score)
        if new_level <= self.level:
            return None
        self.level = new_level
        self.recompute()
        logger.info("Difficulty level %d: speed=%.0f gap=%.0f gravity=%.0f interval=%.2f",
                    self.level, self.pipe_speed, self.pipe_gap,
                    self.gravity, self.spawn_interval)
        return message_for_level(self.level)
