import pytest

from flappy_shield.data_models import Pipe
from flappy_shield.obstacles import ObstacleField


@pytest.fixture
def field(rng):
    return ObstacleField(viewport_width=400, play_height=600, pipe_width=60, rng=rng)


def test_spawn_pair_heights_fill_play_area(field):
    top, bottom = field.spawn_pair(gap=150, gap_y=200)

    assert top.y == 0
    assert top.height == 200
    assert bottom.y == 350
    assert bottom.height == 250
    assert top.height + 150 + bottom.height == 600
    assert top.x == bottom.x == 400


def test_random_spawns_stay_in_range(field):
    for _ in range(200):
        top, bottom = field.spawn_pair(gap=150)
        assert 100 <= top.height <= 350
        assert top.height + 150 + bottom.height == pytest.approx(600)
        assert bottom.y - top.height == pytest.approx(150)


def test_explicit_gap_is_clamped(field):
    top, _ = field.spawn_pair(gap=150, gap_y=500)
    assert top.height == 350

    top, _ = field.spawn_pair(gap=150, gap_y=10)
    assert top.height == 100


def test_try_spawn_waits_for_interval(field):
    assert field.try_spawn(0.5, 1.5, 150) is None
    assert field.try_spawn(0.5, 1.5, 150) is None
    pair = field.try_spawn(0.5, 1.5, 150)

    assert pair is not None
    assert len(field.pipes) == 2
    assert field.spawn_timer == 0.0


def test_try_spawn_uses_current_gap(field):
    top, bottom = field.try_spawn(2.0, 1.5, 120)
    assert bottom.y - top.height == pytest.approx(120)


def test_advance_moves_all_pipes_left(field):
    field.spawn_pair(gap=150, gap_y=200)
    field.advance(0.1, 150)
    assert [p.x for p in field.pipes] == [pytest.approx(385)] * 2


def test_prune_keeps_margin(field):
    field.pipes = [
        Pipe(x=-111, y=0, width=60, height=100),   # trailing edge at -51
        Pipe(x=-100, y=0, width=60, height=100),
        Pipe(x=449, y=0, width=60, height=100),
        Pipe(x=451, y=0, width=60, height=100),
    ]
    field.prune()
    assert [p.x for p in field.pipes] == [-100, 449]


def test_clear_resets_timer(field):
    field.try_spawn(1.0, 1.5, 150)
    field.spawn_pair(gap=150)
    field.clear()
    assert field.pipes == []
    assert field.spawn_timer == 0.0


def test_pair_scores_once(field):
    field.spawn_pair(gap=150, gap_y=200)
    for p in field.pipes:
        p.x = 35

    assert field.collect_passed(actor_x=100) == 1
    assert all(p.passed for p in field.pipes)
    assert field.collect_passed(actor_x=100) == 0


def test_pipes_ahead_of_bird_do_not_score(field):
    field.spawn_pair(gap=150, gap_y=200)
    for p in field.pipes:
        p.x = 40        # trailing edge exactly at the bird

    assert field.collect_passed(actor_x=100) == 0
    assert not any(p.passed for p in field.pipes)


def test_two_pairs_in_one_pass(field):
    field.spawn_pair(gap=150, gap_y=200)
    field.spawn_pair(gap=150, gap_y=250)
    for p, x in zip(field.pipes, (0, 0, 30, 30)):
        p.x = x

    assert field.collect_passed(actor_x=100) == 2


def test_lone_segment_never_scores(field):
    field.pipes = [Pipe(x=0, y=0, width=60, height=200)]
    assert field.collect_passed(actor_x=100) == 0
    assert field.pipes[0].passed
