import logging

import pytest

pygame = pytest.importorskip("pygame")

from flappy_shield.client import FlappyClient
from flappy_shield.config import GameConfig
from flappy_shield.data_models import GameState
from flappy_shield.storage import Database


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


@pytest.fixture
def client():
    db = Database(":memory:")
    c = FlappyClient(GameConfig(seed=3), screen=pygame.Surface((400, 600)), db=db)
    yield c
    db.close()


def test_space_starts_then_flaps(client):
    client.handle_event(key(pygame.K_SPACE), 0)
    assert client.engine.state == GameState.PLAYING
    assert not client.input.jump_requested

    client.handle_event(key(pygame.K_SPACE), 10)
    assert client.input.jump_requested


def test_click_starts_and_flaps(client):
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10))
    client.handle_event(click, 0)
    assert client.engine.state == GameState.PLAYING

    client.handle_event(click, 1000)
    assert client.input.jump_requested


def test_ability_key_activates_shield(client):
    client.handle_event(key(pygame.K_SPACE), 0)
    client.handle_event(key(pygame.K_e), 10)
    assert client.engine.shield.active
    assert client.hud.ability.phase == "active"


def test_rebinding_saves_key(client):
    client.handle_event(key(pygame.K_F2), 0)
    assert client.rebinding
    client.handle_event(key(pygame.K_q), 10)

    assert not client.rebinding
    assert client.input.ability_key == "KeyQ"
    assert client.db.load_ability_key() == "KeyQ"
    assert client.hud.banner == "Shield key: Q"


def test_space_cannot_be_bound(client):
    client.handle_event(key(pygame.K_F2), 0)
    client.handle_event(key(pygame.K_SPACE), 10)

    assert client.input.ability_key == "KeyE"
    assert client.hud.banner == "Space can't be the shield key"
    assert client.engine.state == GameState.START


def test_escape_cancels_rebinding_then_quits(client):
    client.running = True
    client.handle_event(key(pygame.K_F2), 0)
    client.handle_event(key(pygame.K_ESCAPE), 10)
    assert not client.rebinding
    assert client.running

    client.handle_event(key(pygame.K_ESCAPE), 20)
    assert not client.running


def test_enter_restarts_after_game_over(client):
    client.handle_event(key(pygame.K_SPACE), 0)
    client.engine.game_over()

    client.handle_event(key(pygame.K_SPACE), 10)
    assert client.engine.state == GameState.GAME_OVER

    client.handle_event(key(pygame.K_RETURN), 20)
    assert client.engine.state == GameState.PLAYING


def test_frames_run(client):
    client.handle_event(key(pygame.K_SPACE), 0)
    for _ in range(30):
        client.frame(1 / 60)
    assert client.engine.bird.y != 250


def test_missing_bird_sprite_falls_back(tmp_path, caplog):
    db = Database(":memory:")
    config = GameConfig(seed=3, bird_sprite=str(tmp_path / "missing.png"))
    with caplog.at_level(logging.WARNING, logger="flappy_shield"):
        c = FlappyClient(config, screen=pygame.Surface((400, 600)), db=db)

    assert c.renderer.bird_sprite is None
    assert "using built-in shape" in caplog.text

    c.handle_event(key(pygame.K_SPACE), 0)
    assert c.engine.state == GameState.PLAYING
    for _ in range(5):
        c.frame(1 / 60)
    db.close()


def test_bird_sprite_is_loaded(tmp_path):
    path = tmp_path / "bird.png"
    sprite = pygame.Surface((34, 24))
    sprite.fill((255, 200, 0))
    pygame.image.save(sprite, str(path))

    db = Database(":memory:")
    c = FlappyClient(GameConfig(bird_sprite=str(path)), screen=pygame.Surface((400, 600)), db=db)

    assert c.renderer.bird_sprite is not None
    assert c.renderer.bird_sprite.get_size() == (34, 24)
    c.frame(1 / 60)
    db.close()
