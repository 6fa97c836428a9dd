import os
import random

import pytest

# Renderer and client tests run without a real display or sound card.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_shield.engine import GameEngine
from flappy_shield.input_manager import InputManager
from flappy_shield.interfaces import MemoryHighScoreStore
from flappy_shield.storage import Database


class RecordingNotifications:
    def __init__(self):
        self.messages = []
        self.cleared = 0

    def show(self, message, duration=2.0):
        self.messages.append(message)

    def clear(self):
        self.cleared += 1


class RecordingIndicator:
    def __init__(self):
        self.statuses = []

    def show_status(self, status):
        self.statuses.append(status)

    @property
    def last(self):
        return self.statuses[-1]


class RecordingStore(MemoryHighScoreStore):
    def __init__(self, best=0):
        super().__init__(best)
        self.writes = []

    def set_high_score(self, score):
        self.writes.append(score)
        super().set_high_score(score)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def notifications():
    return RecordingNotifications()


@pytest.fixture
def indicator():
    return RecordingIndicator()


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def engine(rng, notifications, indicator, store):
    return GameEngine(
        input_manager=InputManager(),
        store=store,
        notifications=notifications,
        ability_indicator=indicator,
        rng=rng,
    )


@pytest.fixture
def playing(engine):
    engine.start_game()
    return engine


@pytest.fixture
def db():
    database = Database(":memory:")
    yield database
    database.close()
