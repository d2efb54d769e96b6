from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from bloom import const


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int] = (const.SCREEN_W, const.SCREEN_H)
    fps: int = const.FPS
    duration_ms: float = const.CYCLE_DURATION_MS
    easing: str = const.DEFAULT_EASING
    seed: Optional[int] = None
    show_panel: bool = True
    resizable: bool = True
    # stop after this many frames (headless runs); None runs until quit
    max_frames: Optional[int] = None
    background: Tuple[int, int, int] = const.BACKGROUND
