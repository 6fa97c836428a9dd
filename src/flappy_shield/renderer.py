"""
renderer.py: Draws a RenderSnapshot with pygame.

All drawing happens on a fixed virtual viewport surface which is then scaled
into the window, keeping the aspect ratio.
"""

import logging
import math
from typing import Optional, Tuple

import pygame

from .constants import VIEWPORT_WIDTH, VIEWPORT_HEIGHT
from .data_models import Bird, GameState, RenderSnapshot
from .hud import Hud

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

SKY_STOPS = ((0.0, (135, 206, 235)), (0.5, (152, 216, 232)), (1.0, (176, 224, 230)))
CLOUDS = ((80, 100), (250, 150), (150, 250))

PIPE_COLOR = (34, 139, 34)
PIPE_BORDER = (0, 100, 0)
PIPE_HIGHLIGHT = (50, 205, 50)

BIRD_COLORS = {
    "body": ((255, 215, 0), (204, 170, 0)),
    "beak": ((255, 140, 0), (204, 102, 0)),
    "wing": ((255, 165, 0), (204, 136, 0)),
    "wing2": ((255, 140, 0), (170, 102, 0)),
}
SHIELD_GOLD = (255, 215, 0)
SHIELD_ORANGE = (255, 165, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (220, 20, 60)

# Bird sprites are drawn on a square canvas so rotation never clips the halo.
BIRD_CANVAS = 90


def lerp_color(a: Color, b: Color, t: float) -> Color:
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


def sky_color(t: float) -> Color:
    for (t0, c0), (t1, c1) in zip(SKY_STOPS, SKY_STOPS[1:]):
        if t <= t1:
            return lerp_color(c0, c1, (t - t0) / (t1 - t0))
    return SKY_STOPS[-1][1]


def fit_viewport(window_size: Tuple[int, int],
                 viewport_size: Tuple[int, int] = (VIEWPORT_WIDTH, VIEWPORT_HEIGHT)) -> pygame.Rect:
    """Largest rectangle with the viewport's aspect ratio centered in the window."""
    ww, wh = window_size
    vw, vh = viewport_size
    scale = min(ww / vw, wh / vh)
    w, h = int(vw * scale), int(vh * scale)
    return pygame.Rect((ww - w) // 2, (wh - h) // 2, w, h)


class Renderer:
    def __init__(self, target: pygame.Surface):
        if not pygame.font.get_init():
            pygame.font.init()
        self.target = target
        self.viewport = pygame.Surface((VIEWPORT_WIDTH, VIEWPORT_HEIGHT))
        self.background = self._build_background()
        self.bird_sprite: Optional[pygame.Surface] = None

        self.large_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 32)
        self.small_font = pygame.font.Font(None, 24)

    def load_assets(self, bird_path: Optional[str] = None):
        """Loads the bird sprite, falling back to the procedural bird."""
        if not bird_path:
            return
        try:
            self.bird_sprite = pygame.image.load(bird_path)
        except (pygame.error, FileNotFoundError) as e:
            logger.warning("Could not load bird sprite %s (%s), using built-in shape", bird_path, e)
            self.bird_sprite = None

    def _build_background(self) -> pygame.Surface:
        surf = pygame.Surface((VIEWPORT_WIDTH, VIEWPORT_HEIGHT))
        for y in range(VIEWPORT_HEIGHT):
            pygame.draw.line(surf, sky_color(y / VIEWPORT_HEIGHT), (0, y), (VIEWPORT_WIDTH, y))

        clouds = pygame.Surface((VIEWPORT_WIDTH, VIEWPORT_HEIGHT), pygame.SRCALPHA)
        for x, y in CLOUDS:
            for dx, r in ((0, 20), (25, 25), (50, 20)):
                pygame.draw.circle(clouds, (255, 255, 255, 153), (x + dx, y), r)
        surf.blit(clouds, (0, 0))
        return surf

    # ---------- Frame ----------

    def render(self, snapshot: RenderSnapshot, hud: Hud, prompt: Optional[str] = None):
        screen = self.viewport
        screen.blit(self.background, (0, 0))

        if snapshot.show_world:
            for pipe in snapshot.pipes:
                self.draw_pipe(pipe)
            self.draw_bird(snapshot.bird, snapshot.invulnerable)
            self.draw_hud(snapshot, hud)

        if snapshot.state == GameState.START:
            self.draw_start_screen(snapshot)
        elif snapshot.state == GameState.GAME_OVER:
            self.draw_game_over(snapshot)

        if hud.banner:
            self._center_text(hud.banner, self.font, 110, RED)
        if prompt:
            self._center_text(prompt, self.small_font, VIEWPORT_HEIGHT - 60, WHITE)

        self.present()

    def present(self):
        """Scales the viewport into the target surface."""
        area = fit_viewport(self.target.get_size())
        self.target.fill(BLACK)
        if area.size == self.viewport.get_size():
            self.target.blit(self.viewport, area.topleft)
        else:
            self.target.blit(pygame.transform.smoothscale(self.viewport, area.size), area.topleft)

    # ---------- World ----------

    def draw_pipe(self, pipe):
        if pipe.x + pipe.width < -50 or pipe.x > VIEWPORT_WIDTH + 50:
            return
        rect = pygame.Rect(int(pipe.x), int(pipe.y), int(pipe.width), int(pipe.height))
        pygame.draw.rect(self.viewport, PIPE_COLOR, rect)
        pygame.draw.rect(self.viewport, PIPE_BORDER, rect, 4)
        pygame.draw.rect(self.viewport, PIPE_HIGHLIGHT, rect.inflate(-4, -4), 2)

    def draw_bird(self, bird: Bird, invulnerable: bool = False):
        canvas = pygame.Surface((BIRD_CANVAS, BIRD_CANVAS), pygame.SRCALPHA)
        c = BIRD_CANVAS // 2

        if bird.is_dying:
            self._draw_death_effects(canvas, bird, c)
        if invulnerable and not bird.is_dying:
            self._draw_shield(canvas, bird, c)

        if self.bird_sprite is not None:
            sprite = pygame.transform.smoothscale(self.bird_sprite, (int(bird.width), int(bird.height)))
            canvas.blit(sprite, sprite.get_rect(center=(c, c)))
        else:
            self._draw_bird_shape(canvas, bird, c)

        rotated = pygame.transform.rotate(canvas, -math.degrees(bird.rotation))
        center = (int(bird.x + bird.width / 2), int(bird.y + bird.height / 2))
        self.viewport.blit(rotated, rotated.get_rect(center=center))

    def _draw_death_effects(self, canvas: pygame.Surface, bird: Bird, c: int):
        elapsed_ms = bird.death_elapsed * 1000
        if (elapsed_ms % 200) / 100 < 1:
            tint = pygame.Rect(0, 0, int(bird.width) + 10, int(bird.height) + 10)
            tint.center = (c, c)
            pygame.draw.rect(canvas, (255, 0, 0, 77), tint)

        if elapsed_ms < 300:
            alpha = int(255 * (1 - elapsed_ms / 300))
            distance = 15 + (elapsed_ms / 300) * 10
            for i in range(8):
                angle = 2 * math.pi * i / 8
                pos = (int(c + math.cos(angle) * distance), int(c + math.sin(angle) * distance))
                pygame.draw.circle(canvas, (255, 100, 0, alpha), pos, 3)

    def _draw_shield(self, canvas: pygame.Surface, bird: Bird, c: int):
        radius = int(bird.width / 2 + 15)
        for r in range(radius, 0, -3):
            alpha = int(204 * (1 - r / radius))
            pygame.draw.circle(canvas, (*SHIELD_GOLD, alpha), (c, c), r)
        pygame.draw.circle(canvas, SHIELD_GOLD, (c, c), int(bird.width / 2 + 10), 4)
        pygame.draw.circle(canvas, SHIELD_ORANGE, (c, c), int(bird.width / 2 + 5), 2)

    def _draw_bird_shape(self, canvas: pygame.Surface, bird: Bird, c: int):
        shade = 1 if bird.is_dying else 0
        pygame.draw.circle(canvas, BIRD_COLORS["body"][shade], (c, c), 12)

        if bird.is_dying:
            pygame.draw.line(canvas, BLACK, (c + 2, c - 3), (c + 8, c - 3), 2)
        else:
            pygame.draw.circle(canvas, BLACK, (c + 5, c - 3), 3)

        pygame.draw.polygon(canvas, BIRD_COLORS["beak"][shade],
                            [(c + 12, c), (c + 20, c - 3), (c + 20, c + 3)])

        if bird.is_dying:
            angles = (0.5, 0.4)
        else:
            flap = math.sin(bird.wing_phase) * 0.5
            angles = (-0.3 + flap, -0.2 + flap * 0.7)
        self._draw_wing(canvas, BIRD_COLORS["wing"][shade], (c - 5, c + 5), (16, 10), angles[0], 255)
        self._draw_wing(canvas, BIRD_COLORS["wing2"][shade], (c - 3, c + 6), (12, 8), angles[1], 178)

    @staticmethod
    def _draw_wing(canvas, color, center, size, angle, alpha):
        wing = pygame.Surface(size, pygame.SRCALPHA)
        pygame.draw.ellipse(wing, (*color, alpha), wing.get_rect())
        wing = pygame.transform.rotate(wing, -math.degrees(angle))
        canvas.blit(wing, wing.get_rect(center=center))

    # ---------- Overlays ----------

    def _center_text(self, text: str, font: pygame.font.Font, y: int, color: Color):
        surf = font.render(text, True, color)
        self.viewport.blit(surf, (VIEWPORT_WIDTH // 2 - surf.get_width() // 2, y))

    def draw_hud(self, snapshot: RenderSnapshot, hud: Hud):
        self._center_text(str(snapshot.score), self.large_font, 20, WHITE)
        best = self.small_font.render(f"Best: {snapshot.high_score}", True, WHITE)
        self.viewport.blit(best, (10, 10))

        if hud.ability is not None and snapshot.state == GameState.PLAYING:
            color = {"active": SHIELD_GOLD, "cooldown": (200, 200, 200)}.get(hud.ability.phase, WHITE)
            self._center_text(hud.ability.label, self.small_font, VIEWPORT_HEIGHT - 30, color)

    def draw_start_screen(self, snapshot: RenderSnapshot):
        self._center_text("FLAPPY SHIELD", self.large_font, 160, WHITE)
        self._center_text("Press SPACE or click to start", self.small_font, 240, WHITE)
        self._center_text(f"Best: {snapshot.high_score}", self.font, 290, WHITE)
        self._center_text("F2: change shield key", self.small_font, 340, WHITE)

    def draw_game_over(self, snapshot: RenderSnapshot):
        self._center_text("GAME OVER", self.large_font, 200, RED)
        self._center_text(f"Score: {snapshot.score}", self.font, 260, WHITE)
        self._center_text("Press ENTER to play again", self.small_font, 310, WHITE)
