from __future__ import annotations
import logging
import random
from typing import Optional, Tuple

from bloom.anim.tween import Tween
from bloom.geometry.state import GeometryState

logger = logging.getLogger(__name__)


class MorphEngine:
    """
    Couples the tween with the geometry it interpolates. One cycle is in
    flight at a time; on completion every family promotes its target and
    gets a fresh one sized for the viewport at that moment.
    """

    def __init__(self, tween: Tween, geometry: GeometryState):
        self.tween = tween
        self.geometry = geometry
        self.cycles = 0

    @classmethod
    def create(cls, viewport_size: Tuple[int, int], duration_ms: float, easing: str,
               start_ms: float = 0.0, rng: Optional[random.Random] = None) -> "MorphEngine":
        w, h = viewport_size
        return cls(
            tween=Tween(duration_ms, easing=easing, start_ms=start_ms),
            geometry=GeometryState.create(w, h, rng),
        )

    @property
    def progress(self) -> float:
        return self.tween.progress

    def update(self, now_ms: float, viewport_size: Tuple[int, int],
               rng: Optional[random.Random] = None) -> bool:
        """Advance progress; returns True if a cycle boundary was crossed this call."""
        if not self.tween.update(now_ms):
            return False

        w, h = viewport_size
        self.geometry.promote(w, h, rng)
        self.tween.restart(now_ms)
        self.cycles += 1
        logger.debug("morph cycle %d complete at %.0f ms (viewport %dx%d)",
                     self.cycles, now_ms, w, h)
        return True
