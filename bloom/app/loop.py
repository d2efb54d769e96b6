from __future__ import annotations
import logging
import random
from typing import Optional

import pygame

from bloom.api.config import EngineConfig
from bloom.api.frame_data import FrameData
from bloom.api.params import ParameterStore
from bloom.app.context import Context, build_context
from bloom.app.viewport import Viewport
from bloom.render.canvas import Canvas, PygameCanvas
from bloom.render.shapes import clear_font_cache
from bloom.ui.panel import ControlPanel

logger = logging.getLogger(__name__)


def reset_canvas(canvas: Canvas, viewport: Viewport) -> None:
    canvas.reset_transform()
    w, h = canvas.size
    canvas.clear_rect(0, 0, w, h)
    cx, cy = viewport.center
    canvas.translate(cx, cy)


def step_frame(ctx: Context, now_ms: Optional[float] = None) -> FrameData:
    """
    One frame: advance the morph, wipe the canvas, draw. The order matters;
    drawing before the update would show last frame's progress.
    """
    if now_ms is None:
        now_ms = ctx.clock()
    ctx.morph.update(now_ms, ctx.viewport.size, ctx.rng)
    reset_canvas(ctx.canvas, ctx.viewport)
    frame = FrameData(timestamp=now_ms, progress=ctx.morph.progress,
                      viewport_size=ctx.viewport.size)
    ctx.renderer.draw(ctx.canvas, ctx.morph.geometry, frame.progress, ctx.params)
    return frame


def run_visualizer(cfg: EngineConfig, params: Optional[ParameterStore] = None) -> int:
    """Open the window and animate until quit (or cfg.max_frames). Returns frames drawn."""
    params = params if params is not None else ParameterStore()

    pygame.init()
    pygame.display.set_caption("Line Bloom (H: panel, Esc: quit)")
    clock = pygame.time.Clock()
    flags = pygame.RESIZABLE if cfg.resizable else 0

    canvas: Optional[PygameCanvas] = None

    def resize_surface(size):
        w, h = size
        surface = pygame.display.set_mode((max(1, w), max(1, h)), flags)
        if canvas is not None:
            canvas.surface = surface

    frames = 0
    try:
        viewport = Viewport(cfg.screen_size, on_resize=resize_surface)
        canvas = PygameCanvas(pygame.display.get_surface(), background=cfg.background)
        ctx = build_context(cfg, params, viewport, canvas,
                            clock=pygame.time.get_ticks, rng=random.Random(cfg.seed))
        panel = ControlPanel(params, visible=cfg.show_panel)
        logger.info("running %dx%d at %d fps, cycle %.0f ms (%s)",
                    viewport.width, viewport.height, cfg.fps, cfg.duration_ms, cfg.easing)

        running = True
        while running:
            clock.tick(cfg.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif viewport.handle_event(event):
                    continue
                else:
                    panel.handle_event(event, viewport.size)

            step_frame(ctx)
            panel.draw(canvas.surface)
            pygame.display.flip()

            frames += 1
            if cfg.max_frames is not None and frames >= cfg.max_frames:
                running = False

    finally:
        clear_font_cache()
        pygame.quit()

    logger.info("stopped after %d frames", frames)
    return frames
