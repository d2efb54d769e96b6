from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

import pygame

from bloom import const
from bloom.render.spline import basis_spline

XY = Tuple[float, float]


class Canvas(ABC):
    """
    Immediate-mode 2D drawing surface, shaped after an HTML canvas context:
    build a path with move_to/line_to/curve, then stroke it.
    """

    @abstractmethod
    def clear_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    @abstractmethod
    def reset_transform(self) -> None: ...

    @abstractmethod
    def translate(self, dx: float, dy: float) -> None: ...

    @abstractmethod
    def begin_path(self) -> None: ...

    @abstractmethod
    def move_to(self, x: float, y: float) -> None: ...

    @abstractmethod
    def line_to(self, x: float, y: float) -> None: ...

    @abstractmethod
    def curve(self, points: Sequence[XY]) -> None:
        """Append a smoothed (basis spline) sub-path through `points`."""
        ...

    @abstractmethod
    def stroke(self, color, width: float = 1.0) -> None: ...

    @property
    @abstractmethod
    def size(self) -> Tuple[int, int]: ...


class PygameCanvas(Canvas):
    def __init__(self, surface: pygame.Surface, background=const.BACKGROUND,
                 bezier_steps: int = const.BEZIER_STEPS):
        self.surface = surface
        self.background = background
        self.bezier_steps = bezier_steps
        self._offset = (0.0, 0.0)
        self._subpaths: List[List[XY]] = []

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def _apply(self, x: float, y: float) -> XY:
        return (x + self._offset[0], y + self._offset[1])

    def clear_rect(self, x, y, w, h):
        ox, oy = self._apply(x, y)
        self.surface.fill(self.background, pygame.Rect(int(ox), int(oy), int(w), int(h)))

    def reset_transform(self):
        self._offset = (0.0, 0.0)

    def translate(self, dx, dy):
        self._offset = (self._offset[0] + dx, self._offset[1] + dy)

    def begin_path(self):
        self._subpaths = []

    def move_to(self, x, y):
        self._subpaths.append([self._apply(x, y)])

    def line_to(self, x, y):
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].append(self._apply(x, y))

    def curve(self, points):
        pts = basis_spline(points, self.bezier_steps)
        if pts:
            self._subpaths.append([self._apply(x, y) for x, y in pts])

    def stroke(self, color, width=1.0):
        for path in self._subpaths:
            if len(path) < 2:
                continue
            if width <= 1:
                pygame.draw.aalines(self.surface, color, False, path)
            else:
                pygame.draw.lines(self.surface, color, False, path, max(1, round(width)))
