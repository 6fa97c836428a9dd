"""
data_models.py: Data structures for the game state.
"""

import enum
from dataclasses import dataclass, field, replace
from typing import Tuple

from .constants import (
    BIRD_START_X, BIRD_START_Y, BIRD_WIDTH, BIRD_HEIGHT,
    SHIELD_DURATION, SHIELD_COOLDOWN,
)


class GameState(enum.Enum):
    """Top-level state owned by the engine."""
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game-over"


@dataclass
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass
class Bird:
    """The player-controlled body."""
    x: float = BIRD_START_X
    y: float = BIRD_START_Y
    width: float = BIRD_WIDTH
    height: float = BIRD_HEIGHT
    velocity: float = 0.0
    rotation: float = 0.0
    wing_phase: float = 0.0

    # Death animation sub-state
    is_dying: bool = False
    death_elapsed: float = 0.0
    death_finished: bool = False

    def reset(self):
        """Puts the bird back in its starting pose."""
        self.x = BIRD_START_X
        self.y = BIRD_START_Y
        self.velocity = 0.0
        self.rotation = 0.0
        self.wing_phase = 0.0
        self.is_dying = False
        self.death_elapsed = 0.0
        self.death_finished = False

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def copy(self) -> "Bird":
        return replace(self)


@dataclass
class Pipe:
    """One rectangular segment of an obstacle pair."""
    x: float
    y: float
    width: float
    height: float
    passed: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass
class AbilityState:
    """Timers of the invulnerability ability."""
    duration: float = SHIELD_DURATION
    cooldown: float = SHIELD_COOLDOWN
    active: bool = False
    active_timer: float = 0.0
    cooldown_timer: float = 0.0


@dataclass(frozen=True)
class AbilityStatus:
    """What the ability indicator should display."""
    phase: str                  # "ready", "active" or "cooldown"
    remaining: int = 0          # Whole seconds, rounded up
    key_name: str = ""

    @property
    def label(self) -> str:
        if self.phase == "active":
            return f"Shield active {self.remaining}s"
        if self.phase == "cooldown":
            return f"Cooldown {self.remaining}s"
        return f"Shield ({self.key_name})"


@dataclass(frozen=True)
class RenderSnapshot:
    """Read-only view of one frame handed to the renderer."""
    state: GameState
    bird: Bird
    pipes: Tuple[Rect, ...] = field(default_factory=tuple)
    invulnerable: bool = False
    score: int = 0
    high_score: int = 0
    difficulty_level: int = 0

    @property
    def show_world(self) -> bool:
        return self.state in (GameState.PLAYING, GameState.GAME_OVER)
