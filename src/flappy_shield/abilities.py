"""
abilities.py: Cooldown-gated invulnerability shield.
"""

import logging
import math
from typing import Optional

from .data_models import AbilityState, AbilityStatus

logger = logging.getLogger(__name__)


class Ability:
    """
    Timer machine: ready -> active -> cooldown -> ready.

    The cooldown starts together with the active window, so the total lockout
    after an activation is ``cooldown`` seconds.
    """

    def __init__(self, state: Optional[AbilityState] = None):
        self.state = state or AbilityState()

    @property
    def active(self) -> bool:
        return self.state.active

    def reset(self):
        self.state.active = False
        self.state.active_timer = 0.0
        self.state.cooldown_timer = 0.0

    def activate(self) -> bool:
        s = self.state
        if s.cooldown_timer > 0:
            return False
        s.active = True
        s.active_timer = s.duration
        s.cooldown_timer = s.cooldown
        logger.info("Shield activated for %.1fs", s.duration)
        return True

    def tick(self, dt: float):
        s = self.state
        if s.cooldown_timer > 0:
            s.cooldown_timer = max(0.0, s.cooldown_timer - dt)

        if s.active:
            s.active_timer -= dt
            if s.active_timer <= 0:
                s.active = False
                s.active_timer = 0.0
                logger.debug("Shield expired")

    def status(self, key_name: str = "") -> AbilityStatus:
        s = self.state
        if s.active:
            return AbilityStatus("active", math.ceil(s.active_timer), key_name)
        if s.cooldown_timer > 0:
            return AbilityStatus("cooldown", math.ceil(s.cooldown_timer), key_name)
        return AbilityStatus("ready", 0, key_name)
