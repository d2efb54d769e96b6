from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from bloom import const
from bloom.api.params import ParameterStore, ParamSpec
from bloom.render.color import to_rgb
from bloom.render.shapes import draw_slider, draw_text

_CHANNELS = ("R", "G", "B")
_LABEL_W = 92


@dataclass
class _Row:
    spec: ParamSpec
    # colour channel index for colour sliders, None for numbers and swatch rows
    channel: Optional[int]
    rect: pygame.Rect
    slider: Optional[pygame.Rect]


class ControlPanel:
    """
    Slider overlay bound to a ParameterStore, drawn in the top-right corner.

    Numbers get one slider snapped to the binding's step; colours get a
    swatch row plus one slider per channel. Every edit is written straight
    into the store.
    """

    def __init__(self, params: ParameterStore, visible: bool = True):
        self.params = params
        self.visible = visible
        self._active: Optional[_Row] = None
        self._screen_w = 0

    # ---- layout ----
    def _origin(self) -> Tuple[int, int]:
        return (self._screen_w - const.PANEL_W - const.PANEL_MARGIN, const.PANEL_MARGIN)

    def rows(self) -> List[_Row]:
        x0, y = self._origin()
        y += 4
        out: List[_Row] = []

        def add(spec, channel, with_slider):
            nonlocal y
            rect = pygame.Rect(x0, y, const.PANEL_W, const.PANEL_ROW_H)
            slider = None
            if with_slider:
                slider = pygame.Rect(x0 + _LABEL_W, y + 3, const.PANEL_W - _LABEL_W - 8,
                                     const.PANEL_ROW_H - 6)
            out.append(_Row(spec, channel, rect, slider))
            y += const.PANEL_ROW_H

        for spec in self.params.specs():
            if spec.kind == "color":
                add(spec, None, False)
                for ch in range(len(_CHANNELS)):
                    add(spec, ch, True)
            else:
                add(spec, None, True)
        return out

    def bounds(self) -> pygame.Rect:
        rows = self.rows()
        x0, y0 = self._origin()
        bottom = rows[-1].rect.bottom if rows else y0
        return pygame.Rect(x0, y0, const.PANEL_W, bottom - y0 + 4)

    # ---- value mapping ----
    def _fraction(self, row: _Row) -> float:
        value = self.params.get(row.spec.name)
        if row.channel is not None:
            return to_rgb(value)[row.channel] / 255.0
        span = float(row.spec.max) - float(row.spec.min)
        if span <= 0:
            return 0.0
        return (float(value) - float(row.spec.min)) / span

    def _apply(self, row: _Row, mouse_x: int) -> None:
        # last pixel of the bar maps to 1.0
        frac = (mouse_x - row.slider.left) / max(1, row.slider.width - 1)
        frac = max(0.0, min(1.0, frac))
        spec = row.spec
        if row.channel is not None:
            rgb = list(to_rgb(self.params.get(spec.name)))
            rgb[row.channel] = int(round(frac * 255))
            self.params.set(spec.name, "#%02x%02x%02x" % tuple(rgb))
        else:
            value = spec.snap(float(spec.min) + frac * (float(spec.max) - float(spec.min)))
            self.params.set(spec.name, value)

    # ---- events / drawing ----
    def handle_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> bool:
        """Returns True if the panel consumed the event."""
        self._screen_w = screen_size[0]

        if event.type == pygame.KEYDOWN and event.key == pygame.K_h:
            self.visible = not self.visible
            self._active = None
            return True
        if not self.visible:
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for row in self.rows():
                if row.slider is not None and row.slider.collidepoint(event.pos):
                    self._active = row
                    self._apply(row, event.pos[0])
                    return True
        elif event.type == pygame.MOUSEMOTION and self._active is not None:
            self._apply(self._active, event.pos[0])
            return True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self._active is not None:
            self._active = None
            return True
        return False

    def draw(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return
        self._screen_w = surface.get_width()
        pygame.draw.rect(surface, const.PANEL_BG, self.bounds())

        for row in self.rows():
            spec = row.spec
            tx, ty = row.rect.left + 6, row.rect.top + 4
            if row.channel is not None:
                draw_text(surface, f"  {_CHANNELS[row.channel]}", (tx, ty), const.PANEL_FG, size=18)
            elif spec.kind == "color":
                draw_text(surface, spec.label, (tx, ty), const.PANEL_FG, size=18)
                swatch = pygame.Rect(row.rect.left + _LABEL_W, row.rect.top + 3,
                                     const.PANEL_W - _LABEL_W - 8, const.PANEL_ROW_H - 6)
                pygame.draw.rect(surface, to_rgb(self.params.get(spec.name)), swatch)
            else:
                value = self.params.get(spec.name)
                draw_text(surface, f"{spec.label} {value:g}", (tx, ty), const.PANEL_FG, size=18)
            if row.slider is not None:
                draw_slider(surface, row.slider, self._fraction(row),
                            const.PANEL_FG, const.PANEL_ACCENT)
