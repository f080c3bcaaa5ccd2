from __future__ import annotations

import logging
from collections import namedtuple

from . import config
from .linalg import Vec2

logger = logging.getLogger(__name__)

Target = namedtuple("Target", ["point", "respawns"])
# point: Vec2
# respawns: bool, pick a fresh point on arrival instead of stopping

# Active modes: bouncing at a velocity, or chasing a target. A seeker keeps the
# velocity it had before so clearing the target does not invent a new one.
Free = namedtuple("Free", ["velocity"])
Seeking = namedtuple("Seeking", ["target", "velocity"])
# Target cleared: stands still, neither bounces nor takes velocity kicks.
Parked = namedtuple("Parked", ["velocity"])


class Entity(namedtuple("Entity", ["position", "mode", "size", "color", "rotation"])):
    """One simulated shape. Values are immutable; updates return a new Entity."""

    __slots__ = ()

    @property
    def velocity(self) -> Vec2:
        # Only drives motion in Free mode; the other modes just carry it.
        return self.mode.velocity

    @property
    def target(self) -> Target | None:
        if isinstance(self.mode, Seeking):
            return self.mode.target
        return None

    @property
    def seeking(self) -> bool:
        return isinstance(self.mode, Seeking)

    @property
    def parked(self) -> bool:
        return isinstance(self.mode, Parked)


def make_entity(
    x: float,
    y: float,
    vx: float = 0.0,
    vy: float = 0.0,
    size: float = 20.0,
    color: tuple[int, int, int] = (255, 255, 255),
    target: Target | None = None,
    rotation: float = 0.0,
) -> Entity:
    velocity = Vec2(vx, vy)
    mode = Seeking(target, velocity) if target is not None else Free(velocity)
    return Entity(Vec2(x, y), mode, float(size), color, float(rotation))


def half_extent_box(size: float, bounds: tuple[float, float]) -> tuple[Vec2, Vec2]:
    """Allowed centre positions for a shape of ``size`` inside ``bounds``."""
    half = size / 2
    return Vec2(half, half), Vec2(bounds[0] - half, bounds[1] - half)


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value


class Scene:
    """The owned entity collection plus the arena and simulated clock."""

    def __init__(self, bounds: tuple[float, float] = (config.WIDTH, config.HEIGHT), entities=()):
        self.bounds = (float(bounds[0]), float(bounds[1]))
        self.entities: dict[int, Entity] = {}
        self.elapsed = 0.0
        self._next_id = 1
        for entity in entities:
            self.add(entity)

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self):
        return iter(self.entities.values())

    def add(self, entity: Entity) -> int:
        entity_id = self._next_id
        self._next_id += 1
        self.entities[entity_id] = entity
        return entity_id

    def get(self, entity_id: int) -> Entity:
        return self.entities[entity_id]

    def clear(self) -> None:
        logger.info("clearing %d entities", len(self.entities))
        self.entities.clear()

    def resize(self, width: float, height: float) -> None:
        self.bounds = (float(width), float(height))
        logger.info("bounds resized to %gx%g", width, height)

    def set_target(self, entity_id: int, point: tuple[float, float], respawns: bool = False) -> None:
        entity = self.entities[entity_id]
        target = Target(Vec2(*point), respawns)
        self.entities[entity_id] = entity._replace(mode=Seeking(target, entity.velocity))
        logger.debug("entity %d seeking %s (respawns=%s)", entity_id, target.point, respawns)

    def clear_target(self, entity_id: int) -> None:
        """Drop the entity's target and leave it parked where it stands."""
        entity = self.entities[entity_id]
        if entity.seeking:
            self.entities[entity_id] = entity._replace(mode=Parked(entity.velocity))
            logger.debug("entity %d target cleared", entity_id)

    def nearest(self, point: tuple[float, float]) -> int | None:
        if not self.entities:
            return None
        p = Vec2(*point)
        return min(self.entities, key=lambda eid: self.entities[eid].position.distance_to(p))

    def nudge(self, rng, strength: float = config.NUDGE_STRENGTH) -> None:
        """Kick every free entity's velocity by a random amount."""
        for entity_id, entity in self.entities.items():
            if not isinstance(entity.mode, Free):
                continue
            kick = Vec2(rng() - 0.5, rng() - 0.5) * strength
            self.entities[entity_id] = entity._replace(mode=Free(entity.velocity + kick))
        logger.info("nudged free entities (strength=%g)", strength)
