"""
interfaces.py: Contracts between the engine and its outer collaborators.
"""

import logging
from typing import Protocol

from .constants import NOTIFICATION_DURATION
from .data_models import AbilityStatus

logger = logging.getLogger(__name__)


class NotificationSink(Protocol):
    def show(self, message: str, duration: float = NOTIFICATION_DURATION) -> None:
        """Display ``message`` and hide it after ``duration`` seconds."""

    def clear(self) -> None:
        ...


class AbilityIndicator(Protocol):
    def show_status(self, status: AbilityStatus) -> None:
        ...


class HighScoreStore(Protocol):
    def get_high_score(self) -> int:
        ...

    def set_high_score(self, score: int) -> None:
        ...


class NullNotificationSink:
    def show(self, message: str, duration: float = NOTIFICATION_DURATION) -> None:
        logger.info("Notification: %s", message)

    def clear(self) -> None:
        pass


class NullAbilityIndicator:
    """Used when no ability display is present. Warns once, then stays quiet."""
    def __init__(self):
        self.warned = False

    def show_status(self, status: AbilityStatus) -> None:
        if not self.warned:
            logger.warning("No ability indicator attached, shield status is not shown")
            self.warned = True


class MemoryHighScoreStore:
    def __init__(self, best: int = 0):
        self.best = best

    def get_high_score(self) -> int:
        return self.best

    def set_high_score(self, score: int) -> None:
        self.best = max(self.best, score)
