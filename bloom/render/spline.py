from __future__ import annotations
from typing import List, Sequence, Tuple

from bloom import const

XY = Tuple[float, float]


def _cubic(p0: XY, c1: XY, c2: XY, p3: XY, steps: int) -> List[XY]:
    """Samples of a cubic Bezier, excluding p0 and including p3."""
    out = []
    for k in range(1, steps + 1):
        t = k / steps
        u = 1 - t
        a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
        out.append((
            a * p0[0] + b * c1[0] + c * c2[0] + d * p3[0],
            a * p0[1] + b * c1[1] + c * c2[1] + d * p3[1],
        ))
    return out


def basis_spline(points: Sequence[XY], steps: int = const.BEZIER_STEPS) -> List[XY]:
    """
    Flatten a uniform cubic B-spline through `points` into a polyline.

    The curve starts and ends on the first/last point but is only pulled
    toward the interior ones. One point gives a lone point, two give a
    straight segment.
    """
    pts = [(float(x), float(y)) for x, y in points]
    if len(pts) <= 2:
        return pts

    steps = max(1, int(steps))
    (x0, y0), (x1, y1) = pts[0], pts[1]
    out = [pts[0], ((5 * x0 + x1) / 6, (5 * y0 + y1) / 6)]

    # the last point is fed twice to close the final span
    for x, y in pts[2:] + [pts[-1]]:
        c1 = ((2 * x0 + x1) / 3, (2 * y0 + y1) / 3)
        c2 = ((x0 + 2 * x1) / 3, (y0 + 2 * y1) / 3)
        end = ((x0 + 4 * x1 + x) / 6, (y0 + 4 * y1 + y) / 6)
        out.extend(_cubic(out[-1], c1, c2, end, steps))
        x0, y0, x1, y1 = x1, y1, x, y

    out.append(pts[-1])
    return out
