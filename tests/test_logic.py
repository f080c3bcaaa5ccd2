"""Motion model: free bouncing, target seeking, clamping and rotation."""

from __future__ import annotations

import random

import pytest

from shapesim import config
from shapesim.linalg import Vec2
from shapesim.logic import advance, advance_scene, bounce_axis
from shapesim.state import Parked, Scene, Seeking, Target, make_entity

BOUNDS = (800.0, 600.0)


def test_free_entity_moves_by_velocity_and_spins() -> None:
    e = make_entity(100, 100, 50, 25, size=10)
    out = advance(e, 0.1, BOUNDS)
    assert out.position.x == pytest.approx(105.0)
    assert out.position.y == pytest.approx(102.5)
    assert out.velocity == Vec2(50, 25)
    assert out.rotation == pytest.approx(0.2)


def test_left_wall_bounce_clamps_and_reverses() -> None:
    e = make_entity(5, 100, -50, 0, size=10)
    out = advance(e, 0.1, BOUNDS)
    assert out.position == Vec2(5.0, 100.0)
    assert out.velocity == Vec2(50, 0)


def test_right_wall_bounce() -> None:
    e = make_entity(785, 100, 200, 0, size=20)
    out = advance(e, 0.1, BOUNDS)
    assert out.position == Vec2(790.0, 100.0)
    assert out.velocity == Vec2(-200, 0)


def test_corner_bounce_reverses_both_axes() -> None:
    e = make_entity(5, 5, -50, -25, size=10)
    out = advance(e, 0.1, BOUNDS)
    assert out.position == Vec2(5.0, 5.0)
    assert out.velocity == Vec2(50, 25)


def test_exact_touch_counts_as_bounce() -> None:
    pos, vel = bounce_axis(795.0, 30.0, 5.0, 795.0)
    assert (pos, vel) == (795.0, -30.0)


def test_zero_size_reaches_edges() -> None:
    e = make_entity(10, 10, 100, 100, size=0)
    out = advance(e, 0.1, (100.0, 100.0))
    assert out.position.x == pytest.approx(20.0)
    assert out.position.y == pytest.approx(20.0)


def test_sequential_updates_accumulate() -> None:
    e = make_entity(400, 300, 60, 30, size=15)
    for _ in range(5):
        e = advance(e, 0.1, BOUNDS)
    assert e.position.x == pytest.approx(430.0)
    assert e.position.y == pytest.approx(315.0)
    assert e.rotation == pytest.approx(1.0)


def test_advance_does_not_mutate_input() -> None:
    e = make_entity(100, 100, 50, 25, size=10)
    advance(e, 0.5, BOUNDS)
    assert e.position == Vec2(100, 100)
    assert e.rotation == 0.0


def test_bounce_conserves_speed_exactly() -> None:
    gen = random.Random(7)
    for _ in range(200):
        size = gen.uniform(0, 60)
        e = make_entity(
            gen.uniform(0, 800),
            gen.uniform(0, 600),
            gen.uniform(-500, 500),
            gen.uniform(-500, 500),
            size=size,
        )
        out = advance(e, gen.uniform(0.001, 1.0), BOUNDS)
        assert abs(out.velocity.x) == abs(e.velocity.x)
        assert abs(out.velocity.y) == abs(e.velocity.y)


def test_zero_dt_neither_moves_nor_flips() -> None:
    # Sitting exactly on the wall would otherwise flip the velocity.
    e = make_entity(5, 100, 50, 0, size=10, rotation=1.25)
    assert advance(e, 0.0, BOUNDS) == e
    seeker = make_entity(100, 100, size=10, target=Target(Vec2(300, 100), True))
    assert advance(seeker, 0.0, BOUNDS) == seeker


def test_zero_dt_still_pulls_stray_entity_inside() -> None:
    e = make_entity(900, 100, 0, 0, size=10)
    out = advance(e, 0.0, BOUNDS)
    assert out.position == Vec2(795.0, 100.0)
    assert out.velocity == Vec2(0, 0)

    fast = make_entity(-50, 700, 40, -20, size=10)
    out = advance(fast, 0.0, BOUNDS)
    assert out.position == Vec2(5.0, 595.0)
    assert out.velocity == Vec2(40, -20)


def test_zero_dt_still_detects_arrival() -> None:
    e = make_entity(300, 200, size=10, target=Target(Vec2(302, 201), False))
    out = advance(e, 0.0, BOUNDS)
    assert out.parked
    assert out.position == Vec2(300, 200)


def test_entities_stay_inside_bounds(rng) -> None:
    gen = random.Random(99)
    for _ in range(500):
        width, height = gen.uniform(60, 1200), gen.uniform(60, 900)
        size = gen.uniform(-10, 60)
        target = None
        if gen.random() < 0.5:
            target = Target(Vec2(gen.uniform(-100, 1300), gen.uniform(-100, 1000)), gen.random() < 0.5)
        e = make_entity(
            gen.uniform(-100, 1300),
            gen.uniform(-100, 1000),
            gen.uniform(-1000, 1000),
            gen.uniform(-1000, 1000),
            size=size,
            target=target,
        )
        dt = 0.0 if gen.random() < 0.2 else gen.uniform(1e-4, 2.0)
        out = advance(e, dt, (width, height), rng)
        half = size / 2
        assert half <= out.position.x <= width - half
        assert half <= out.position.y <= height - half


def test_bounds_shrink_reclamps_on_next_tick() -> None:
    e = make_entity(700, 500, 0, 0, size=10)
    out = advance(e, 0.016, (400.0, 300.0))
    assert out.position == Vec2(395.0, 295.0)


def test_seeking_moves_at_seek_speed_toward_target() -> None:
    e = make_entity(100, 100, size=10, target=Target(Vec2(200, 100), False))
    out = advance(e, 0.1, BOUNDS)
    assert out.position.x == pytest.approx(100 + config.SEEK_SPEED * 0.1)
    assert out.position.y == pytest.approx(100.0)
    assert out.seeking
    assert out.rotation == pytest.approx(0.2)


def test_seek_converges_then_stops() -> None:
    e = make_entity(100, 100, 40, -30, size=10, target=Target(Vec2(300, 220), False))
    goal = e.target.point
    last = e.position.distance_to(goal)
    for _ in range(1000):
        e = advance(e, 0.01, BOUNDS)
        if not e.seeking:
            break
        d = e.position.distance_to(goal)
        assert d <= last
        last = d
    else:
        pytest.fail("seeker never reached its target")

    assert isinstance(e.mode, Parked)
    assert e.velocity == Vec2(40, -30)
    assert e.position.distance_to(goal) <= config.TARGET_TOLERANCE + config.SEEK_SPEED * 0.01

    parked = e.position
    for _ in range(50):
        e = advance(e, 0.05, BOUNDS)
    assert e.position == parked


def test_arrival_at_one_shot_target_clears_it_without_moving() -> None:
    e = make_entity(300, 200, size=10, target=Target(Vec2(303, 204), False))
    out = advance(e, 0.1, BOUNDS)
    assert out.target is None
    assert out.position == Vec2(300, 200)


def test_parked_entity_ignores_nudge() -> None:
    scene = Scene(BOUNDS, [make_entity(300, 200, 20, 10, size=10, target=Target(Vec2(303, 204), False))])
    advance_scene(scene, 0.1)
    assert scene.get(1).parked

    scene.nudge(lambda: 1.0)
    advance_scene(scene, 0.1)
    parked = scene.get(1)
    assert parked.position == Vec2(300, 200)
    assert parked.parked
    assert parked.velocity == Vec2(20, 10)


def test_parked_entity_is_pulled_inside_a_smaller_arena() -> None:
    e = make_entity(700, 500, size=10, target=Target(Vec2(701, 500), False))
    e = advance(e, 0.1, BOUNDS)
    assert e.parked
    out = advance(e, 0.1, (400.0, 300.0))
    assert out.position == Vec2(395.0, 295.0)
    assert out.parked


@pytest.mark.parametrize("draw", [0.0, 0.5, 0.999999])
def test_respawning_target_picks_new_point_inside_bounds(draw: float) -> None:
    e = make_entity(300, 200, size=40, target=Target(Vec2(302, 201), True))
    out = advance(e, 0.1, BOUNDS, rng=lambda: draw)
    assert isinstance(out.mode, Seeking)
    assert out.target.respawns is True
    p = out.target.point
    assert 20.0 <= p.x <= 780.0
    assert 20.0 <= p.y <= 580.0
    assert p == Vec2(20 + draw * 760, 20 + draw * 560)


def test_respawning_seeker_keeps_seeking(rng) -> None:
    e = make_entity(400, 300, size=20, target=Target(Vec2(400, 300), True))
    arrivals = 0
    for _ in range(3000):
        before = e.target.point
        e = advance(e, 0.02, BOUNDS, rng)
        assert e.seeking
        if e.target.point != before:
            arrivals += 1
    assert arrivals >= 2


def test_advance_scene_updates_all_and_accumulates_time() -> None:
    scene = Scene(
        BOUNDS,
        [
            make_entity(100, 100, 50, 0, size=10),
            make_entity(200, 200, size=10, target=Target(Vec2(400, 200), False)),
        ],
    )
    advance_scene(scene, 0.1)
    advance_scene(scene, 0.1)
    first, second = scene.get(1), scene.get(2)
    assert first.position.x == pytest.approx(110.0)
    assert second.position.x == pytest.approx(220.0)
    assert scene.elapsed == pytest.approx(0.2)


def test_rotation_rate_is_configurable() -> None:
    e = make_entity(100, 100, size=10)
    out = advance(e, 0.5, BOUNDS, rotation_rate=1.0)
    assert out.rotation == pytest.approx(0.5)
