import pygame

from bloom.app.loop import step_frame
from bloom.app.viewport import Viewport


def test_construction_resizes_surface():
    seen = []
    vp = Viewport((800, 600), on_resize=seen.append)
    assert seen == [(800, 600)]
    assert vp.center == (400.0, 300.0)


def test_resize_event_updates_immediately():
    seen = []
    vp = Viewport((800, 600), on_resize=seen.append)
    event = pygame.event.Event(pygame.VIDEORESIZE, w=1000, h=400, size=(1000, 400))
    assert vp.handle_event(event) is True
    assert vp.size == (1000, 400)
    assert seen[-1] == (1000, 400)


def test_other_events_ignored():
    vp = Viewport((800, 600))
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)
    assert vp.handle_event(event) is False
    assert vp.size == (800, 600)


def test_negative_size_clamped():
    vp = Viewport((-5, 0))
    assert vp.size == (0, 0)


def test_resize_mid_cycle_keeps_progress_and_geometry(ctx, fake_clock):
    step_frame(ctx, fake_clock.advance(3000))
    progress = ctx.morph.progress
    radial = ctx.morph.geometry.radial.current

    ctx.viewport.resize(1000, 400)

    assert ctx.viewport.size == (1000, 400)
    assert ctx.morph.progress == progress
    assert ctx.morph.geometry.radial.current is radial
