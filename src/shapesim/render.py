from __future__ import annotations

import numpy as np
import pygame

from . import config
from .state import Entity, Scene

_UNIT_SQUARE = np.array(
    [[-0.5, -0.5], [0.5, -0.5], [0.5, 0.5], [-0.5, 0.5]],
    dtype=np.float64,
)


def square_corners(entity: Entity) -> np.ndarray:
    """Corners of the entity's rotated square, shape (4, 2)."""
    c, s = np.cos(entity.rotation), np.sin(entity.rotation)
    rot = np.array([[c, s], [-s, c]])
    return _UNIT_SQUARE * entity.size @ rot + np.array(entity.position.to_tuple())


def draw_entity(screen: pygame.Surface, entity: Entity) -> None:
    if entity.size <= 0:
        return
    points = [tuple(p) for p in square_corners(entity).tolist()]
    pygame.draw.polygon(screen, entity.color, points)
    pygame.draw.polygon(screen, config.OUTLINE, points, 1)


def draw_target(screen: pygame.Surface, entity: Entity) -> None:
    target = entity.target
    if target is None:
        return
    pygame.draw.line(screen, config.GUIDE, entity.position.to_tuple(), target.point.to_tuple(), 1)
    tx, ty = target.point.to_tuple()
    pygame.draw.circle(screen, config.TARGET, (int(tx), int(ty)), config.TARGET_RADIUS, 1)


def draw_status(screen: pygame.Surface, font: pygame.font.Font, scene: Scene, fps: float, paused: bool) -> None:
    lines = [
        f"Time: {scene.elapsed:.1f}s",
        f"Entities: {len(scene)}",
        f"FPS: {fps:.0f}",
    ]
    if paused:
        lines.append("PAUSED")
    y = 10
    for line in lines:
        surf = font.render(line, True, config.TEXT)
        screen.blit(surf, (10, y))
        y += surf.get_height() + 2


def draw_scene(screen: pygame.Surface, font: pygame.font.Font, scene: Scene, scheduler=None) -> None:
    screen.fill(config.BACKGROUND)

    for entity in scene:
        draw_target(screen, entity)
    for entity in scene:
        draw_entity(screen, entity)

    fps = scheduler.fps if scheduler is not None else 0.0
    paused = scheduler.paused if scheduler is not None else False
    draw_status(screen, font, scene, fps, paused)
