from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple, Tuple


class Point(NamedTuple):
    """Viewport-centred coordinate (origin at screen centre)."""
    x: float
    y: float


# Collections are tuples so they can only be replaced, never edited
PointSet = Tuple[Point, ...]


@dataclass(frozen=True)
class FrameData:
    timestamp: float
    # normalized morph position in [0, 1]
    progress: float
    viewport_size: Tuple[int, int]
