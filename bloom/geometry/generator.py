"""
Randomized point sets for the radial lines and the curve families.

Both generators scale to the shorter half-axis of the viewport, so the
whole figure always fits inside the window it was generated for.
"""
from __future__ import annotations
import random
from typing import Optional

from bloom.api.frame_data import Point, PointSet


def _half_extent(width: float, height: float) -> float:
    # degenerate viewports collapse to zero-length geometry
    return max(0.0, min(height / 2, width / 2))


def generate_radial_endpoints(width: float, height: float,
                              rng: Optional[random.Random] = None) -> PointSet:
    """
    Inner and outer end of one radial line, both on the y axis.
    Inner sits within the first eighth of the radius, outer within the last quarter.
    """
    rand = (rng if rng is not None else random).random
    r = _half_extent(width, height)
    return (
        Point(0.0, rand() * (r / 8)),
        Point(0.0, r - rand() * (r / 4)),
    )


def generate_curve_control_points(width: float, height: float, segment_count: int,
                                  rng: Optional[random.Random] = None) -> PointSet:
    """
    Control points walking outward along the y axis with jitter; odd
    indices get a small x offset that the renderer later scales by amplitude.
    """
    rand = (rng if rng is not None else random).random
    if segment_count <= 0:
        return ()
    segment_length = _half_extent(width, height) / segment_count
    pts = []
    for i in range(segment_count):
        x = rand() if i % 2 else 0.0
        y = segment_length * i + (rand() - 0.5) * segment_length * 5
        pts.append(Point(x, y))
    return tuple(pts)
