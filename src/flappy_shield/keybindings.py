"""
keybindings.py: Key codes for the rebindable shield key.

Key codes are opaque strings ("KeyE", "Digit1", "ShiftLeft") so they can be
stored as-is and compared against translated pygame key events.
"""

from typing import List, Optional, Tuple

import pygame

AVAILABLE_KEYS: List[Tuple[str, str]] = [
    ("KeyE", "E"),
    ("KeyQ", "Q"),
    ("KeyR", "R"),
    ("KeyF", "F"),
    ("KeyS", "S"),
    ("KeyD", "D"),
    ("KeyW", "W"),
    ("KeyA", "A"),
    ("KeyZ", "Z"),
    ("KeyX", "X"),
    ("KeyC", "C"),
    ("KeyV", "V"),
    ("KeyB", "B"),
    ("KeyN", "N"),
    ("KeyM", "M"),
    ("Digit1", "1"),
    ("Digit2", "2"),
    ("Digit3", "3"),
    ("Digit4", "4"),
    ("Digit5", "5"),
    ("ShiftLeft", "SHIFT"),
    ("ControlLeft", "CTRL"),
    ("AltLeft", "ALT"),
]

KEY_DISPLAY_NAMES = dict(AVAILABLE_KEYS)

# Keys that keep their meaning in the game and cannot hold the shield.
RESERVED_KEYS = ("Escape", "Tab", "Space")


class KeyBindingError(ValueError):
    """Raised when a key cannot be bound to the shield."""


def display_name(code: str) -> str:
    if code in KEY_DISPLAY_NAMES:
        return KEY_DISPLAY_NAMES[code]
    return code.replace("Key", "").replace("Digit", "")


def validate_ability_key(code: str) -> str:
    if not code:
        raise KeyBindingError("Empty key code")
    if code in RESERVED_KEYS:
        raise KeyBindingError(f"{code} is not available for the shield, pick another key")
    return code


def code_for_pygame_key(key: int) -> Optional[str]:
    """Translates a pygame key constant into a key code string."""
    if pygame.K_a <= key <= pygame.K_z:
        return "Key" + chr(key).upper()
    if pygame.K_0 <= key <= pygame.K_9:
        return "Digit" + chr(key)
    return {
        pygame.K_SPACE: "Space",
        pygame.K_ESCAPE: "Escape",
        pygame.K_TAB: "Tab",
        pygame.K_RETURN: "Enter",
        pygame.K_LSHIFT: "ShiftLeft",
        pygame.K_RSHIFT: "ShiftRight",
        pygame.K_LCTRL: "ControlLeft",
        pygame.K_RCTRL: "ControlRight",
        pygame.K_LALT: "AltLeft",
        pygame.K_RALT: "AltRight",
    }.get(key)
