#!/usr/bin/env python3
"""
client.py

Desktop front end: pygame window, event capture and the frame loop that
drives the engine.
"""

import logging
import random
from typing import Optional

import pygame

from .config import GameConfig, load_config
from .data_models import GameState
from .engine import GameEngine
from .hud import Hud
from .input_manager import InputManager
from .keybindings import (
    KeyBindingError, code_for_pygame_key, display_name, validate_ability_key,
)
from .log import setup_logging
from .physics_core import clamp_frame_delta
from .renderer import Renderer
from .storage import Database

logger = logging.getLogger(__name__)

REBIND_KEY = pygame.K_F2
RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None,
                 screen: Optional[pygame.Surface] = None,
                 db: Optional[Database] = None):
        self.config = config or GameConfig()
        self.owns_window = screen is None
        if screen is None:
            pygame.init()
            screen = pygame.display.set_mode(
                (self.config.window_width, self.config.window_height), pygame.RESIZABLE)
            pygame.display.set_caption("Flappy Shield")
        self.screen = screen

        self.db = db or Database(self.config.db_path)
        self.hud = Hud()
        self.input = InputManager(ability_key=self.db.load_ability_key())
        rng = random.Random(self.config.seed) if self.config.seed is not None else None
        self.engine = GameEngine(
            input_manager=self.input,
            store=self.db,
            notifications=self.hud,
            ability_indicator=self.hud,
            rng=rng,
        )
        self.renderer = Renderer(screen)
        self.renderer.load_assets(self.config.bird_sprite)

        # Time Management
        self.clock = pygame.time.Clock()
        self.running = False
        self.rebinding = False

    def run(self):
        """The main client execution loop."""
        logger.info("Shield key: %s", display_name(self.input.ability_key))
        self.running = True
        while self.running:
            dt = clamp_frame_delta(self.clock.tick(self.config.fps) / 1000.0)

            for event in pygame.event.get():
                self.handle_event(event, pygame.time.get_ticks())

            self.frame(dt)
            pygame.display.flip()

        self.db.close()
        pygame.quit()

    def frame(self, dt: float):
        """One update + render pair."""
        self.engine.update(dt)
        self.hud.tick(dt)
        if self.owns_window:
            # The display surface changes when the window is resized.
            self.renderer.target = pygame.display.get_surface()
        self.renderer.render(self.engine.snapshot(), self.hud, self._prompt())

    def _prompt(self) -> Optional[str]:
        if self.rebinding:
            return "Press a key for the shield..."
        return None

    # ---------- Events ----------

    def handle_event(self, event: pygame.event.Event, now_ms: float):
        state = self.engine.state

        if event.type == pygame.QUIT:
            self.running = False
            return

        if event.type == pygame.KEYDOWN:
            if self.rebinding:
                self._rebind(event.key)
            elif event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == REBIND_KEY:
                self.rebinding = True
            else:
                self._handle_key(event.key, state)
            return

        if event.type == pygame.MOUSEBUTTONDOWN:
            if state == GameState.START:
                self.engine.start_game()
            elif state == GameState.PLAYING:
                self.input.press_mouse(now_ms)
            return

        if event.type == pygame.FINGERDOWN:
            if state == GameState.START:
                self.engine.start_game()
            elif state == GameState.PLAYING:
                self.input.press_touch(now_ms)

    def _handle_key(self, key: int, state: GameState):
        if key == pygame.K_SPACE:
            if state == GameState.START:
                self.engine.start_game()
            else:
                self.input.press_key()
            return

        if state == GameState.GAME_OVER and key in RESTART_KEYS:
            self.engine.start_game()
            return

        if state == GameState.PLAYING and code_for_pygame_key(key) == self.input.ability_key:
            self.engine.activate_ability()

    def _rebind(self, key: int):
        self.rebinding = False
        code = code_for_pygame_key(key)
        if code in ("Escape", "Tab"):
            return
        try:
            code = validate_ability_key(code)
        except KeyBindingError as e:
            logger.info("Rejected shield key: %s", e)
            self.hud.show("Space can't be the shield key" if code == "Space" else "Key not supported")
            return

        self.input.ability_key = code
        self.db.save_ability_key(code)
        self.engine.refresh_ability_indicator()
        self.hud.show(f"Shield key: {display_name(code)}")
        logger.info("Shield key set to %s", code)


def main():
    config = load_config()
    setup_logging(config.log_level)
    client = FlappyClient(config)
    try:
        client.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
        pygame.quit()


if __name__ == "__main__":
    main()
