"""
hud.py: On-screen overlay state (level-up banner and shield indicator).

The HUD is the engine's notification sink and ability indicator. It only
keeps text and timers; the renderer draws it.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import NOTIFICATION_DURATION
from .data_models import AbilityStatus


@dataclass
class Hud:
    banner: Optional[str] = None
    banner_remaining: float = 0.0
    ability: Optional[AbilityStatus] = None

    def show(self, message: str, duration: float = NOTIFICATION_DURATION) -> None:
        self.banner = message
        self.banner_remaining = duration

    def clear(self) -> None:
        self.banner = None
        self.banner_remaining = 0.0

    def show_status(self, status: AbilityStatus) -> None:
        self.ability = status

    def tick(self, dt: float):
        """Counts the banner down in real time, even while the game is paused."""
        if self.banner is None:
            return
        self.banner_remaining -= dt
        if self.banner_remaining <= 0:
            self.clear()
