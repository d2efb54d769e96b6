"""
Draws one frame of the figure: radial line bursts plus two mirrored
ribbon families, each rotated around the origin `repeat_count` times.

All coordinates are viewport-centred; the caller translates the canvas
to the screen centre before calling in.
"""
from __future__ import annotations
import math
from typing import List, Sequence, Tuple

from bloom import const
from bloom.api.frame_data import Point
from bloom.api.params import ParameterStore
from bloom.geometry.state import GeometryState, MorphPair
from bloom.render.canvas import Canvas
from bloom.render.color import animate_color


def rotate(theta: float, x: float, y: float, cx: float = 0.0, cy: float = 0.0) -> Point:
    """Clockwise rotation (screen y-down) of (x, y) about (cx, cy)."""
    c, s = math.cos(theta), math.sin(theta)
    dx, dy = x - cx, y - cy
    return Point(c * dx + s * dy + cx, c * dy - s * dx + cy)


def lerp_point(p0: Point, p1: Point, t: float) -> Point:
    return Point(p0[0] * (1 - t) + p1[0] * t, p0[1] * (1 - t) + p1[1] * t)


def lerp_points(src: Sequence[Point], dst: Sequence[Point], t: float) -> List[Point]:
    return [lerp_point(a, b, t) for a, b in zip(src, dst)]


def _angles(repeat_count: int) -> List[float]:
    n = int(repeat_count)
    if n < 1:
        return []
    step = (math.pi * 2) / n
    return [step * i for i in range(n)]


def draw_radial_lines(canvas: Canvas, pair: MorphPair, t: float, params: ParameterStore,
                      width: float = const.RADIAL_LINE_WIDTH) -> int:
    """One straight segment per rotation; returns the number of segments stroked."""
    inner, outer = lerp_points(pair.current, pair.target, t)
    color = animate_color(params.color1, t)

    drawn = 0
    for theta in _angles(params.repeat_count):
        canvas.begin_path()
        a = rotate(theta, inner.x, inner.y)
        b = rotate(theta, outer.x, outer.y)
        canvas.move_to(a.x, a.y)
        canvas.line_to(b.x, b.y)
        canvas.stroke(color, width)
        drawn += 1
    return drawn


def draw_radial_curves(canvas: Canvas, pair: MorphPair, t: float, params: ParameterStore,
                       color, width: float = const.CURVE_LINE_WIDTH) -> int:
    """
    Two mirrored smoothed curves per rotation, stroked together.
    The interpolated x offsets are scaled by the live amplitude.
    """
    amp = params.amplitude
    pts = [Point(p.x * amp, p.y) for p in lerp_points(pair.current, pair.target, t)]
    display = animate_color(color, t)

    drawn = 0
    for theta in _angles(params.repeat_count):
        canvas.begin_path()
        canvas.curve([rotate(theta, p.x, p.y) for p in pts])
        canvas.curve([rotate(theta, -p.x, p.y) for p in pts])
        canvas.stroke(display, width)
        drawn += 1
    return drawn


class Renderer:
    def __init__(self, line_width: float = const.RADIAL_LINE_WIDTH,
                 curve_width: float = const.CURVE_LINE_WIDTH):
        self.line_width = line_width
        self.curve_width = curve_width

    def draw(self, canvas: Canvas, geometry: GeometryState, t: float,
             params: ParameterStore) -> Tuple[int, int]:
        """Returns (radial segments, curve strokes) drawn this frame."""
        lines = draw_radial_lines(canvas, geometry.radial, t, params, self.line_width)
        curves = 0
        for fam in geometry.families:
            curves += draw_radial_curves(canvas, fam.pair, t, params,
                                         params.get(fam.color_param), self.curve_width)
        return lines, curves
