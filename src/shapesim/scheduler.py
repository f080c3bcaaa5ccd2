"""Frame scheduler: drives "advance every entity, then render" once per host frame.

The scheduler never owns a clock or a loop. A *frame host* hands it
millisecond timestamps through ``tick`` and provides the two primitives it
needs: ``request_frame(callback) -> handle`` and ``cancel_frame(handle)``.
This keeps the state machine testable with a fake host.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Callable, Hashable, Protocol

from . import config
from .logic import advance_scene
from .state import Scene

logger = logging.getLogger(__name__)


class FrameHost(Protocol):
    def request_frame(self, callback: Callable[[float], None]) -> Hashable: ...

    def cancel_frame(self, handle: Hashable) -> None: ...


class SchedulerState(Enum):
    IDLE = "idle"
    RUNNING = "running"


class FrameScheduler:
    """Idle/running state machine around a host-driven frame callback.

    ``render`` is called as ``render(scene, scheduler)`` once per tick after the
    scene has been advanced. ``bounds`` is an optional zero-argument callable
    returning the current ``(width, height)``; when given it is consulted at
    the start of every tick so a window resize reaches the motion model.
    """

    def __init__(
        self,
        scene: Scene,
        host: FrameHost,
        render: Callable[[Scene, "FrameScheduler"], None] | None = None,
        bounds: Callable[[], tuple[float, float]] | None = None,
        rng: Callable[[], float] = random.random,
        max_dt: float | None = config.MAX_DT,
        rotation_rate: float = config.ROTATION_RATE,
    ) -> None:
        self.scene = scene
        self.host = host
        self.render = render
        self.bounds = bounds
        self.rng = rng
        self.max_dt = max_dt
        self.rotation_rate = rotation_rate

        self.state = SchedulerState.IDLE
        self.paused = False
        self.fps = 0.0
        self._handle: Hashable | None = None
        self._last_timestamp: float | None = None
        self._fps_window_start: float | None = None
        self._fps_frames = 0

    @property
    def running(self) -> bool:
        return self.state is SchedulerState.RUNNING

    @property
    def pending(self) -> bool:
        return self._handle is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self.running:
            return
        self._reset_clock()
        self._handle = self.host.request_frame(self.tick)
        self.state = SchedulerState.RUNNING
        logger.info("scheduler started with %d entities", len(self.scene))

    def stop(self) -> None:
        if self._handle is not None:
            handle, self._handle = self._handle, None
            self.host.cancel_frame(handle)
        if self.running:
            self.state = SchedulerState.IDLE
            logger.info("scheduler stopped after %.2fs simulated", self.scene.elapsed)

    def pause(self) -> None:
        if not self.paused:
            self.paused = True
            logger.info("paused")

    def resume(self) -> None:
        if self.paused:
            self.paused = False
            # Drop the baseline so the pause does not turn into one huge step.
            self._last_timestamp = None
            logger.info("resumed")

    def toggle_pause(self) -> None:
        if self.paused:
            self.resume()
        else:
            self.pause()

    # ------------------------------------------------------------------
    # Frame callback
    # ------------------------------------------------------------------
    def tick(self, timestamp: float) -> None:
        if not self.running:
            return
        self._handle = None
        try:
            self._step(timestamp)
            if self.running:
                self._handle = self.host.request_frame(self.tick)
        except Exception:
            logger.exception("frame failed at t=%sms, stopping", timestamp)
            self.stop()
            raise

    def _step(self, timestamp: float) -> None:
        self._count_frame(timestamp)
        if self._last_timestamp is None:
            self._last_timestamp = timestamp
            return

        dt = max(0.0, (timestamp - self._last_timestamp) / 1000.0)
        if self.max_dt is not None:
            dt = min(dt, self.max_dt)
        self._last_timestamp = timestamp

        if self.bounds is not None:
            width, height = self.bounds()
            if (width, height) != self.scene.bounds:
                self.scene.resize(width, height)

        if not self.paused:
            advance_scene(self.scene, dt, self.rng, self.rotation_rate)
        if self.render is not None:
            self.render(self.scene, self)

    def _reset_clock(self) -> None:
        self._last_timestamp = None
        self._fps_window_start = None
        self._fps_frames = 0

    def _count_frame(self, timestamp: float) -> None:
        if self._fps_window_start is None:
            self._fps_window_start = timestamp
            return
        self._fps_frames += 1
        window = timestamp - self._fps_window_start
        if window >= 1000.0:
            self.fps = self._fps_frames * 1000.0 / window
            self._fps_frames = 0
            self._fps_window_start = timestamp
