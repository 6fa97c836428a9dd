"""
config.py: Runtime settings loaded from the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import TARGET_FPS, VIEWPORT_WIDTH, VIEWPORT_HEIGHT
from .storage import DB_FILE


@dataclass(frozen=True)
class GameConfig:
    window_width: int = VIEWPORT_WIDTH
    window_height: int = VIEWPORT_HEIGHT
    fps: int = TARGET_FPS
    db_path: str = DB_FILE
    log_level: str = "info"
    seed: Optional[int] = None
    bird_sprite: Optional[str] = None


def _int_env(name: str, default):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"Invalid integer for {name}: {raw!r}") from None


def load_config() -> GameConfig:
    """Load configuration from .env and environment variables."""
    load_dotenv()

    fps = _int_env("FLAPPY_FPS", TARGET_FPS)
    if fps <= 0:
        raise RuntimeError(f"FLAPPY_FPS must be positive, got {fps}")

    return GameConfig(
        window_width=_int_env("FLAPPY_WINDOW_WIDTH", VIEWPORT_WIDTH),
        window_height=_int_env("FLAPPY_WINDOW_HEIGHT", VIEWPORT_HEIGHT),
        fps=fps,
        db_path=os.environ.get("FLAPPY_DB_PATH", DB_FILE),
        log_level=os.environ.get("FLAPPY_LOG_LEVEL", "info"),
        seed=_int_env("FLAPPY_SEED", None),
        bird_sprite=os.environ.get("FLAPPY_BIRD_SPRITE") or None,
    )
