"""Starting scenes selectable with ``--preset``."""

from __future__ import annotations

from typing import Callable

from .logic import random_point
from .state import Entity, Target, make_entity

CORAL = (255, 107, 107)
TEAL = (78, 205, 196)
SKY = (69, 183, 209)
RED = (231, 76, 60)
AMBER = (255, 193, 7)
VIOLET = (155, 89, 182)
GREEN = (46, 204, 113)

Bounds = tuple[float, float]


def foundation(bounds: Bounds, rng) -> list[Entity]:
    return [
        make_entity(200.0, 150.0, 120.0, 80.0, size=40.0, color=CORAL),
        make_entity(400.0, 300.0, -100.0, 150.0, size=30.0, color=TEAL),
        make_entity(100.0, 400.0, 90.0, -120.0, size=50.0, color=SKY),
    ]


def ball(bounds: Bounds, rng) -> list[Entity]:
    width, height = bounds
    return [make_entity(width / 2, height / 2, 150.0, 100.0, size=40.0, color=RED)]


def seekers(bounds: Bounds, rng) -> list[Entity]:
    width, height = bounds
    return [
        make_entity(
            width * 0.25,
            height * 0.5,
            size=35.0,
            color=AMBER,
            target=Target(random_point(35.0, bounds, rng), True),
        ),
        make_entity(
            width * 0.75,
            height * 0.25,
            size=25.0,
            color=VIOLET,
            target=Target(random_point(25.0, bounds, rng), False),
        ),
        make_entity(width * 0.5, height * 0.75, -80.0, 60.0, size=20.0, color=GREEN),
    ]


def mixed(bounds: Bounds, rng) -> list[Entity]:
    return foundation(bounds, rng) + seekers(bounds, rng)


PRESETS: dict[str, Callable[[Bounds, Callable[[], float]], list[Entity]]] = {
    "foundation": foundation,
    "ball": ball,
    "seekers": seekers,
    "mixed": mixed,
}


def names() -> list[str]:
    return sorted(PRESETS)


def build(name: str, bounds: Bounds, rng) -> list[Entity]:
    try:
        factory = PRESETS[name]
    except KeyError:
        raise KeyError(f"unknown preset: {name}") from None
    return factory(bounds, rng)
