"""
obstacles.py: The scrolling field of pipe pairs.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import (
    VIEWPORT_WIDTH, PLAY_HEIGHT, PIPE_WIDTH, PIPE_MARGIN,
    PIPE_GAP_EDGE, PAIR_EPSILON,
)
from .data_models import Pipe

logger = logging.getLogger(__name__)


@dataclass
class ObstacleField:
    """
    Owns the ordered list of pipes. Insertion order is spawn order, which is
    also left-to-right on screen.
    """
    viewport_width: float = VIEWPORT_WIDTH
    play_height: float = PLAY_HEIGHT
    pipe_width: float = PIPE_WIDTH
    rng: random.Random = field(default_factory=random.Random)
    pipes: List[Pipe] = field(default_factory=list)
    spawn_timer: float = 0.0

    def clear(self):
        self.pipes = []
        self.spawn_timer = 0.0

    def advance(self, dt: float, speed: float):
        """Scrolls every pipe left by ``speed * dt``."""
        delta_x = speed * dt
        for pipe in self.pipes:
            pipe.x -= delta_x

    def prune(self):
        """Drops pipes that scrolled well past either edge."""
        self.pipes = [
            p for p in self.pipes
            if p.x + p.width > -PIPE_MARGIN and p.x < self.viewport_width + PIPE_MARGIN
        ]

    def gap_range(self, gap: float) -> Tuple[float, float]:
        """Valid interval for the top of the gap, measured from the top edge."""
        low = PIPE_GAP_EDGE
        high = max(low, self.play_height - gap - PIPE_GAP_EDGE)
        return low, high

    def spawn_pair(self, gap: float, gap_y: Optional[float] = None) -> Tuple[Pipe, Pipe]:
        """Appends a top/bottom pair at the right edge of the viewport."""
        low, high = self.gap_range(gap)
        if gap_y is None:
            gap_y = self.rng.uniform(low, high)
        else:
            gap_y = max(low, min(gap_y, high))

        x = float(self.viewport_width)
        top = Pipe(x=x, y=0.0, width=self.pipe_width, height=gap_y)
        bottom = Pipe(x=x, y=gap_y + gap, width=self.pipe_width,
                      height=self.play_height - (gap_y + gap))
        self.pipes.append(top)
        self.pipes.append(bottom)
        logger.debug("Spawned pipe pair: gap_y=%.1f gap=%.1f", gap_y, gap)
        return top, bottom

    def try_spawn(self, dt: float, interval: float, gap: float) -> Optional[Tuple[Pipe, Pipe]]:
        """Advances the spawn timer and emits a pair once it reaches ``interval``."""
        self.spawn_timer += dt
        if self.spawn_timer >= interval:
            pair = self.spawn_pair(gap)
            self.spawn_timer = 0.0
            return pair
        return None

    def collect_passed(self, actor_x: float) -> int:
        """
        Marks pipes whose trailing edge is left of ``actor_x`` as passed and
        returns the number of pairs completed by this call.
        """
        points = 0
        for pipe in self.pipes:
            if pipe.passed or pipe.right >= actor_x:
                continue
            pipe.passed = True
            partners = [
                p for p in self.pipes
                if p.passed and abs(p.x - pipe.x) < PAIR_EPSILON
            ]
            if len(partners) == 2:
                points += 1
        return points
