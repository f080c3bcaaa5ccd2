"""Shared fixtures: fixed randomness, a fake frame host, headless pygame."""

from __future__ import annotations

import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class FakeHost:
    """Records frame requests; tests deliver frames by hand with ``fire``."""

    def __init__(self) -> None:
        self.pending: dict[int, object] = {}
        self.requests = 0
        self.cancels: list[int] = []
        self._next = 1

    def request_frame(self, callback) -> int:
        handle = self._next
        self._next += 1
        self.pending[handle] = callback
        self.requests += 1
        return handle

    def cancel_frame(self, handle: int) -> None:
        self.cancels.append(handle)
        self.pending.pop(handle, None)

    def fire(self, timestamp: float) -> None:
        for handle in list(self.pending):
            callback = self.pending.pop(handle)
            callback(timestamp)


@pytest.fixture()
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture()
def rng():
    return random.Random(12345).random


@pytest.fixture()
def pygame_font():
    pygame = pytest.importorskip("pygame")
    pygame.font.init()
    yield pygame.font.Font(None, 18)
    pygame.font.quit()
