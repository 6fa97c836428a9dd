"""
input_manager.py: Single-slot jump latch fed by keyboard, mouse and touch.
"""

from dataclasses import dataclass

from .constants import DEFAULT_ABILITY_KEY, TOUCH_COOLDOWN_MS, MOUSE_AFTER_TOUCH_MS


@dataclass
class InputManager:
    """
    Producers call the ``press_*`` methods, the engine drains the latch with
    ``consume_jump`` once per frame. Extra presses within a frame are dropped.
    """
    ability_key: str = DEFAULT_ABILITY_KEY
    enabled: bool = False
    jump_requested: bool = False
    last_touch_ms: float = -1e9

    def set_enabled(self, enabled: bool):
        self.enabled = enabled
        if not enabled:
            self.jump_requested = False

    def request_jump(self) -> bool:
        if not self.enabled:
            return False
        self.jump_requested = True
        return True

    def press_key(self) -> bool:
        return self.request_jump()

    def press_mouse(self, now_ms: float) -> bool:
        # Touch screens emit a synthetic mouse press right after the touch.
        if now_ms - self.last_touch_ms < MOUSE_AFTER_TOUCH_MS:
            return False
        return self.request_jump()

    def press_touch(self, now_ms: float) -> bool:
        if now_ms - self.last_touch_ms < TOUCH_COOLDOWN_MS:
            return False
        if not self.enabled:
            return False
        self.last_touch_ms = now_ms
        return self.request_jump()

    def consume_jump(self) -> bool:
        if self.jump_requested:
            self.jump_requested = False
            return True
        return False

    def reset(self):
        self.jump_requested = False
