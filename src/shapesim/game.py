from __future__ import annotations

import logging
import random
from typing import Callable

import pygame

from . import config, presets
from .render import draw_scene
from .scheduler import FrameScheduler
from .state import Scene

logger = logging.getLogger(__name__)


class PygameHost:
    """Frame host backed by ``pygame.time.Clock``.

    Pending callbacks are kept by handle; ``run`` delivers the current tick
    count to each of them once per frame and returns when nothing is pending.
    """

    def __init__(self, fps: int = config.FPS):
        self.fps = fps
        self.clock = pygame.time.Clock()
        self._pending: dict[int, Callable[[float], None]] = {}
        self._next_handle = 1

    def request_frame(self, callback: Callable[[float], None]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def run(self, handle_events: Callable[[list], None]) -> None:
        while self._pending:
            handle_events(pygame.event.get())
            self.clock.tick(self.fps)
            now = pygame.time.get_ticks()
            for handle in list(self._pending):
                callback = self._pending.pop(handle, None)
                if callback is not None:
                    callback(now)


def make_event_handler(scene: Scene, scheduler: FrameScheduler, rng) -> Callable[[list], None]:
    def handle_events(events) -> None:
        for event in events:
            if event.type == pygame.QUIT:
                scheduler.stop()
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    scheduler.stop()
                elif event.key == pygame.K_SPACE:
                    scheduler.toggle_pause()
                elif event.key == pygame.K_r:
                    scene.nudge(rng)
                elif event.key == pygame.K_c:
                    scene.clear()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 2, 3):
                entity_id = scene.nearest(event.pos)
                if entity_id is None:
                    continue
                if event.button == 2:
                    scene.clear_target(entity_id)
                else:
                    scene.set_target(entity_id, event.pos, respawns=event.button == 3)

    return handle_events


def main(
    width: int = config.WIDTH,
    height: int = config.HEIGHT,
    fps: int = config.FPS,
    preset: str = config.DEFAULT_PRESET,
    seed: int | None = None,
    max_dt: float | None = config.MAX_DT,
) -> None:
    rng = random.Random(seed).random
    scene = Scene((width, height), presets.build(preset, (width, height), rng))
    logger.info("preset %r: %d entities in %dx%d", preset, len(scene), width, height)

    pygame.init()
    pygame.display.set_caption("shapesim")
    pygame.display.set_mode((width, height), pygame.RESIZABLE)
    font = pygame.font.Font(None, config.FONT_SIZE)

    def render(scene: Scene, scheduler: FrameScheduler) -> None:
        draw_scene(pygame.display.get_surface(), font, scene, scheduler)
        pygame.display.flip()

    host = PygameHost(fps)
    scheduler = FrameScheduler(
        scene,
        host,
        render=render,
        bounds=lambda: pygame.display.get_surface().get_size(),
        rng=rng,
        max_dt=max_dt,
    )

    try:
        scheduler.start()
        host.run(make_event_handler(scene, scheduler, rng))
    finally:
        scheduler.stop()
        pygame.quit()
    logger.info("simulated %.1fs", scene.elapsed)
