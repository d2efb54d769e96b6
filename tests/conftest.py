"""Shared fixtures: a recording canvas, a seeded RNG and a fake millisecond clock."""

from __future__ import annotations

import os
import random
from typing import List, Tuple

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pytest

from bloom.api.config import EngineConfig
from bloom.api.params import ParameterStore
from bloom.app.context import build_context
from bloom.app.viewport import Viewport
from bloom.render.canvas import Canvas


class RecordingCanvas(Canvas):
    """Canvas double that records every call as (op, *args)."""

    def __init__(self, size: Tuple[int, int] = (800, 600)):
        self._size = size
        self.calls: List[tuple] = []

    @property
    def size(self):
        return self._size

    def clear_rect(self, x, y, w, h):
        self.calls.append(("clear_rect", x, y, w, h))

    def reset_transform(self):
        self.calls.append(("reset_transform",))

    def translate(self, dx, dy):
        self.calls.append(("translate", dx, dy))

    def begin_path(self):
        self.calls.append(("begin_path",))

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def curve(self, points):
        self.calls.append(("curve", [tuple(p) for p in points]))

    def stroke(self, color, width=1.0):
        self.calls.append(("stroke", tuple(color), width))

    def ops(self, name: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == name]


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(12345)


@pytest.fixture()
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def ctx(canvas, fake_clock, rng):
    """Context at 800x600 with default parameters and a linear 8 s cycle."""
    cfg = EngineConfig(screen_size=(800, 600), easing="linear", seed=12345)
    viewport = Viewport(cfg.screen_size)
    return build_context(cfg, ParameterStore(), viewport, canvas, fake_clock, rng)
