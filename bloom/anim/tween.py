from __future__ import annotations
from enum import Enum
from typing import Callable, Dict


def linear(x: float) -> float:
    return x


def cubic_in_out(x: float) -> float:
    if x < 0.5:
        return 4 * x * x * x
    return 1 - ((-2 * x + 2) ** 3) / 2


EASINGS: Dict[str, Callable[[float], float]] = {
    "linear": linear,
    "cubic_in_out": cubic_in_out,
}


def get_easing(name: str) -> Callable[[float], float]:
    try:
        return EASINGS[name]
    except KeyError:
        raise ValueError(
            f"Unknown easing '{name}' (expected one of: {', '.join(sorted(EASINGS))})") from None


class TweenState(Enum):
    RUNNING = "running"
    COMPLETING = "completing"


class Tween:
    """
    Drives a progress value from 0 to 1 over duration_ms of wall time.

    update() reports completion instead of firing a callback; the owner
    does its cycle-boundary work and then calls restart().
    """

    def __init__(self, duration_ms: float, easing: str = "cubic_in_out", start_ms: float = 0.0):
        self.duration_ms = float(duration_ms)
        self.easing_name = easing
        self._ease = get_easing(easing)
        self.start_ms = float(start_ms)
        self.progress = 0.0
        self.state = TweenState.RUNNING

    def fraction(self, now_ms: float) -> float:
        if self.duration_ms <= 0:
            return 1.0
        elapsed = max(0.0, now_ms - self.start_ms)
        return min(1.0, elapsed / self.duration_ms)

    def update(self, now_ms: float) -> bool:
        """Advance to now_ms. Returns True when the cycle just reached 1.0."""
        frac = self.fraction(now_ms)
        self.progress = self._ease(frac)
        if frac >= 1.0:
            self.progress = 1.0
            self.state = TweenState.COMPLETING
            return True
        return False

    def restart(self, now_ms: float) -> None:
        self.start_ms = float(now_ms)
        self.progress = 0.0
        self.state = TweenState.RUNNING
