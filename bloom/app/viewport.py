from __future__ import annotations
import logging
from typing import Callable, Optional, Tuple

import pygame

logger = logging.getLogger(__name__)


class Viewport:
    """
    Tracks the window size and keeps the backing surface in step with it.

    Resizing does not touch geometry: shapes generated for the old size keep
    morphing until the next cycle boundary picks up the new size.
    """

    def __init__(self, size: Tuple[int, int],
                 on_resize: Optional[Callable[[Tuple[int, int]], None]] = None):
        self.on_resize = on_resize
        self.width = 0
        self.height = 0
        self.resize(*size)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def center(self) -> Tuple[float, float]:
        return (self.width / 2, self.height / 2)

    def resize(self, width: int, height: int) -> None:
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        logger.debug("viewport resized to %dx%d", self.width, self.height)
        if self.on_resize is not None:
            self.on_resize(self.size)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
            return True
        return False
