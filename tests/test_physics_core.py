import math

import pytest

from flappy_shield.data_models import Bird, Pipe, Rect
from flappy_shield.physics_core import (
    apply_gravity, apply_jump, check_collision, clamp_frame_delta, clamp_velocity,
)


@pytest.mark.parametrize("dt", [0.0, 0.001, 0.016, 0.1, 1.0, 10.0])
@pytest.mark.parametrize("start", [-300.0, 0.0, 399.0, 1000.0])
def test_gravity_then_clamp_never_exceeds_ceiling(dt, start):
    bird = Bird(velocity=start)
    apply_gravity(bird, 1000.0, dt)
    clamp_velocity(bird, 400.0)
    assert bird.velocity <= 400.0


def test_clamp_leaves_upward_velocity_alone():
    bird = Bird(velocity=-900.0)
    clamp_velocity(bird, 400.0)
    assert bird.velocity == -900.0


@pytest.mark.parametrize("before", [-500.0, 0.0, 123.4, 400.0])
def test_jump_overwrites_velocity(before):
    bird = Bird(velocity=before)
    apply_jump(bird, 250.0)
    assert bird.velocity == -250.0


def test_gravity_does_not_move_position():
    bird = Bird(y=250.0, velocity=0.0)
    apply_gravity(bird, 1000.0, 0.1)
    assert bird.velocity == pytest.approx(100.0)
    assert bird.y == 250.0

    apply_jump(bird, 250.0)
    assert bird.velocity == -250.0


@pytest.mark.parametrize("a, b, expected", [
    (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10), True),
    (Rect(0, 0, 10, 10), Rect(10, 0, 10, 10), False),   # touching right edge
    (Rect(0, 0, 10, 10), Rect(0, 10, 10, 10), False),   # touching bottom edge
    (Rect(0, 0, 10, 10), Rect(2, 2, 2, 2), True),       # contained
    (Rect(0, 0, 10, 10), Rect(20, 20, 5, 5), False),
    (Rect(100, 250, 40, 30), Rect(90, 0, 60, 260), True),
])
def test_check_collision_is_symmetric(a, b, expected):
    assert check_collision(a, b) is expected
    assert check_collision(b, a) is expected


def test_check_collision_takes_bird_and_pipe_directly():
    bird = Bird(x=100.0, y=250.0)
    assert check_collision(bird, Pipe(x=90.0, y=0.0, width=60.0, height=260.0))
    assert not check_collision(bird, Pipe(x=90.0, y=0.0, width=60.0, height=250.0))


@pytest.mark.parametrize("dt, expected", [
    (-1.0, 0.0),
    (0.0, 0.0),
    (0.016, 0.016),
    (0.1, 0.1),
    (5.0, 0.1),
    (math.inf, 0.1),
    (math.nan, 0.0),
])
def test_clamp_frame_delta(dt, expected):
    assert clamp_frame_delta(dt) == expected
