from __future__ import annotations

import random

from . import config
from .linalg import Vec2
from .state import Entity, Free, Functor, Parked, Scene, Seeking, Target, half_extent_box


def bounce_axis(pos: float, vel: float, low: float, high: float) -> tuple[float, float]:
    """Reflect ``vel`` when ``pos`` touches or crosses either wall, then clamp."""
    if pos <= low or pos >= high:
        return max(low, min(high, pos)), -vel
    return pos, vel


def clamp_to_bounds(entity: Entity, bounds: tuple[float, float]) -> Entity:
    low, high = half_extent_box(entity.size, bounds)
    return entity._replace(position=entity.position.clamp(low, high))


def random_point(size: float, bounds: tuple[float, float], rng) -> Vec2:
    low, high = half_extent_box(size, bounds)
    return Vec2.random_in(low, high, rng)


def move_free(entity: Entity, dt: float, bounds: tuple[float, float]) -> Entity:
    low, high = half_extent_box(entity.size, bounds)
    pos = entity.position + entity.velocity * dt
    x, vx = bounce_axis(pos.x, entity.velocity.x, low.x, high.x)
    y, vy = bounce_axis(pos.y, entity.velocity.y, low.y, high.y)
    return entity._replace(position=Vec2(x, y), mode=Free(Vec2(vx, vy)))


def move_seeking(entity: Entity, dt: float, bounds: tuple[float, float], rng) -> Entity:
    target, velocity = entity.mode
    delta = target.point - entity.position
    distance = delta.mag()

    if distance <= config.TARGET_TOLERANCE:
        if target.respawns:
            fresh = Target(random_point(entity.size, bounds, rng), True)
            return entity._replace(mode=Seeking(fresh, velocity))
        # One-shot target: park where we are, bouncing stays off.
        return entity._replace(mode=Parked(velocity))

    step = delta.norm() * (config.SEEK_SPEED * dt)
    return entity._replace(position=entity.position + step)


def spin(entity: Entity, dt: float, rate: float) -> Entity:
    return entity._replace(rotation=entity.rotation + rate * dt)


def advance(
    entity: Entity,
    dt: float,
    bounds: tuple[float, float],
    rng=random.random,
    rotation_rate: float = config.ROTATION_RATE,
) -> Entity:
    if isinstance(entity.mode, Seeking):
        moved = move_seeking(entity, dt, bounds, rng)
    elif isinstance(entity.mode, Free) and dt > 0:
        moved = move_free(entity, dt, bounds)
    else:
        # Parked, or a zero-length step: nothing moves or bounces, but a
        # shrunken arena still pulls the shape back inside.
        moved = entity

    return (
        Functor(moved)
        .map(lambda e: clamp_to_bounds(e, bounds))
        .map(lambda e: spin(e, dt, rotation_rate))
        .get()
    )


def advance_scene(
    scene: Scene,
    dt: float,
    rng=random.random,
    rotation_rate: float = config.ROTATION_RATE,
) -> None:
    for entity_id, entity in scene.entities.items():
        scene.entities[entity_id] = advance(entity, dt, scene.bounds, rng, rotation_rate)
    scene.elapsed += dt
