from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Callable

from bloom.anim.morph import MorphEngine
from bloom.api.config import EngineConfig
from bloom.api.params import ParameterStore
from bloom.app.viewport import Viewport
from bloom.render.canvas import Canvas
from bloom.render.renderer import Renderer


@dataclass
class Context:
    cfg: EngineConfig
    params: ParameterStore
    viewport: Viewport
    morph: MorphEngine
    canvas: Canvas
    renderer: Renderer
    # milliseconds, monotonic
    clock: Callable[[], float]
    rng: random.Random


def build_context(cfg: EngineConfig, params: ParameterStore, viewport: Viewport,
                  canvas: Canvas, clock: Callable[[], float],
                  rng: random.Random | None = None) -> Context:
    """Wire up one animation instance. Geometry is generated for the current viewport."""
    rng = rng if rng is not None else random.Random(cfg.seed)
    morph = MorphEngine.create(
        viewport.size, cfg.duration_ms, cfg.easing, start_ms=clock(), rng=rng)
    return Context(
        cfg=cfg,
        params=params,
        viewport=viewport,
        morph=morph,
        canvas=canvas,
        renderer=Renderer(),
        clock=clock,
        rng=rng,
    )
