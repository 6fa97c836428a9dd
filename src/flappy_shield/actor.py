"""
actor.py: Per-frame update of the player-controlled bird.
"""

import logging
import math
from dataclasses import dataclass

from .constants import (
    PLAY_HEIGHT, JUMP_FORCE, MAX_FALL_VELOCITY,
    ROTATION_FACTOR, ROTATION_SMOOTHING, MAX_NOSE_DOWN,
    WING_SPEED_UP, WING_SPEED_DOWN,
    DEATH_GRAVITY_SCALE, DEATH_VELOCITY_SCALE, DEATH_ROTATION_SMOOTHING,
    DEATH_TARGET_ROTATION, DEATH_MIN_VELOCITY, DEATH_MAX_DURATION,
)
from .data_models import Bird
from .physics_core import apply_gravity, apply_jump, clamp_velocity

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


def start_death_animation(bird: Bird) -> bool:
    """Switches the bird into its death plunge. Returns False if already dying."""
    if bird.is_dying:
        return False
    bird.is_dying = True
    bird.death_elapsed = 0.0
    bird.death_finished = False
    bird.velocity = max(bird.velocity, DEATH_MIN_VELOCITY)
    return True


@dataclass
class BirdEngine:
    """
    Moves the bird for one frame. Gravity is passed per call because the
    difficulty controller changes it between rounds.
    """
    floor_y: float = PLAY_HEIGHT
    jump_force: float = JUMP_FORCE
    max_velocity: float = MAX_FALL_VELOCITY

    def step(self, bird: Bird, dt: float, jump: bool, gravity: float) -> bool:
        """
        Deterministic single-frame update (mutates bird).
        Returns True when the bird hit the floor during this frame.
        """
        if bird.is_dying:
            self._step_dying(bird, dt, gravity)
            return False

        # 1. Flap input
        if jump:
            apply_jump(bird, self.jump_force)
            bird.wing_phase = 0.0

        # 2. Gravity and movement
        apply_gravity(bird, gravity, dt)
        clamp_velocity(bird, self.max_velocity)
        bird.y += bird.velocity * dt

        # 3. Pose
        target = min(bird.velocity * ROTATION_FACTOR, MAX_NOSE_DOWN)
        bird.rotation += (target - bird.rotation) * ROTATION_SMOOTHING

        wing_speed = WING_SPEED_UP if bird.velocity < 0 else WING_SPEED_DOWN
        bird.wing_phase = (bird.wing_phase + dt * wing_speed) % TWO_PI

        # 4. Bounds: the ceiling blocks, the floor kills
        if bird.y < 0:
            bird.y = 0.0
            bird.velocity = 0.0
        if bird.bottom > self.floor_y:
            bird.y = self.floor_y - bird.height
            start_death_animation(bird)
            return True
        return False

    def _step_dying(self, bird: Bird, dt: float, gravity: float):
        if bird.death_finished:
            return

        bird.death_elapsed += dt
        apply_gravity(bird, gravity * DEATH_GRAVITY_SCALE, dt)
        clamp_velocity(bird, self.max_velocity * DEATH_VELOCITY_SCALE)
        bird.y += bird.velocity * dt

        bird.rotation += (DEATH_TARGET_ROTATION - bird.rotation) * DEATH_ROTATION_SMOOTHING
        bird.wing_phase = 0.0

        if bird.bottom >= self.floor_y or bird.death_elapsed > DEATH_MAX_DURATION:
            bird.y = min(bird.y, self.floor_y - bird.height)
            bird.death_finished = True
            logger.debug("Death animation finished after %.2fs", bird.death_elapsed)
