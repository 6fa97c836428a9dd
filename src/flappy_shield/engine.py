"""
engine.py: The game orchestrator and its top-level state machine.
"""

import logging
import random
from typing import Optional

from .abilities import Ability
from .actor import BirdEngine, start_death_animation
from .constants import VIEWPORT_WIDTH, PLAY_HEIGHT
from .data_models import Bird, GameState, RenderSnapshot
from .difficulty import DifficultyController
from .input_manager import InputManager
from .interfaces import (
    AbilityIndicator, HighScoreStore, NotificationSink,
    MemoryHighScoreStore, NullAbilityIndicator, NullNotificationSink,
)
from .keybindings import display_name
from .obstacles import ObstacleField
from .physics_core import check_collision, clamp_frame_delta

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Owns every piece of mutable game state and advances it one frame at a
    time. Collaborators (input, persistence, HUD) are injected.
    """

    def __init__(self,
                 input_manager: Optional[InputManager] = None,
                 store: Optional[HighScoreStore] = None,
                 notifications: Optional[NotificationSink] = None,
                 ability_indicator: Optional[AbilityIndicator] = None,
                 rng: Optional[random.Random] = None,
                 viewport_width: float = VIEWPORT_WIDTH,
                 play_height: float = PLAY_HEIGHT):
        self.input = input_manager or InputManager()
        self.store = store or MemoryHighScoreStore()
        self.notifications = notifications or NullNotificationSink()
        if ability_indicator is None:
            ability_indicator = NullAbilityIndicator()
        self.ability_indicator = ability_indicator

        self.state = GameState.START
        self.score = 0
        self.high_score = self.store.get_high_score()

        self.bird = Bird()
        self.bird_engine = BirdEngine(floor_y=play_height)
        self.obstacles = ObstacleField(viewport_width=viewport_width,
                                       play_height=play_height,
                                       rng=rng or random.Random())
        self.difficulty = DifficultyController()
        self.shield = Ability()

    # ---------- State transitions ----------

    def start_game(self):
        """Resets every round-scoped value and enters PLAYING."""
        self.state = GameState.PLAYING
        self.score = 0
        self.obstacles.clear()
        self.difficulty.reset()
        self.shield.reset()
        self.bird.reset()

        self.input.reset()
        self.input.set_enabled(True)
        self.notifications.clear()
        self.refresh_ability_indicator()
        logger.info("Game started (high score %d)", self.high_score)

    def game_over(self) -> bool:
        """Ends the round. Returns False if the round was already over."""
        if self.state == GameState.GAME_OVER:
            return False

        self.state = GameState.GAME_OVER
        self.input.set_enabled(False)

        if self.score > self.high_score:
            self.high_score = self.score
            self.store.set_high_score(self.high_score)
            logger.info("New high score: %d", self.high_score)
        logger.info("Game over with score %d", self.score)
        return True

    def activate_ability(self) -> bool:
        if self.state != GameState.PLAYING:
            return False
        activated = self.shield.activate()
        self.refresh_ability_indicator()
        return activated

    # ---------- Per-frame update ----------

    @property
    def death_animation_pending(self) -> bool:
        return self.bird.is_dying and not self.bird.death_finished

    def update(self, dt: float):
        dt = clamp_frame_delta(dt)

        if self.state == GameState.PLAYING:
            self._step_playing(dt)
        elif self.state == GameState.GAME_OVER and self.death_animation_pending:
            # Only the plunge keeps moving once the round is over.
            self.bird_engine.step(self.bird, dt, False, self.difficulty.gravity)

    def _step_playing(self, dt: float):
        # 1. Collect input for this frame
        jump = self.input.consume_jump()

        # 2. Ability timers
        self.shield.tick(dt)
        self.refresh_ability_indicator()

        # 3. Bird
        if self.bird_engine.step(self.bird, dt, jump, self.difficulty.gravity):
            self.game_over()
            return

        # 4. Obstacles
        self.obstacles.advance(dt, self.difficulty.pipe_speed)
        self.obstacles.prune()
        self.obstacles.try_spawn(dt, self.difficulty.spawn_interval,
                                 self.difficulty.pipe_gap)

        # 5. Collisions
        if self.check_collisions():
            return

        # 6. Score and difficulty
        self.update_score()

    def check_collisions(self) -> bool:
        """Returns True when the bird hit a pipe and the round ended."""
        if self.shield.active or self.bird.is_dying:
            return False

        for pipe in self.obstacles.pipes:
            if check_collision(self.bird, pipe):
                start_death_animation(self.bird)
                self.game_over()
                return True
        return False

    def update_score(self):
        points = self.obstacles.collect_passed(self.bird.x)
        for _ in range(points):
            self.score += 1
            message = self.difficulty.update_for_score(self.score)
            if message:
                self.notifications.show(message)

    # ---------- Outputs ----------

    def refresh_ability_indicator(self):
        status = self.shield.status(display_name(self.input.ability_key))
        self.ability_indicator.show_status(status)

    def snapshot(self) -> RenderSnapshot:
        return RenderSnapshot(
            state=self.state,
            bird=self.bird.copy(),
            pipes=tuple(p.rect() for p in self.obstacles.pipes),
            invulnerable=self.shield.active,
            score=self.score,
            high_score=self.high_score,
            difficulty_level=self.difficulty.level,
        )
