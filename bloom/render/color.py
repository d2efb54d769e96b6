from __future__ import annotations
import math
from typing import Any, Tuple

import cv2
import numpy as np
import pygame

from bloom import const

RGB = Tuple[int, int, int]
LCH = Tuple[float, float, float]


def to_rgb(color: Any) -> RGB:
    """Accepts anything pygame.Color does: '#rrggbb', names, (r, g, b[, a])."""
    if isinstance(color, (tuple, list)):
        c = pygame.Color(*color)
    else:
        c = pygame.Color(color)
    return (c.r, c.g, c.b)


def rgb_to_lch(rgb: RGB) -> LCH:
    """RGB (0-255) -> (lightness 0..1, chroma, hue degrees) via CIE Lab."""
    px = np.array([[rgb]], dtype=np.float32) / 255.0
    L, a, b = cv2.cvtColor(px, cv2.COLOR_RGB2Lab)[0, 0]
    hue = math.degrees(math.atan2(float(b), float(a))) % 360.0
    return float(L) / 100.0, math.hypot(float(a), float(b)), hue


def lch_to_rgb(lch: LCH) -> RGB:
    light, chroma, hue = lch
    h = math.radians(hue)
    lab = np.array([[[light * 100.0, chroma * math.cos(h), chroma * math.sin(h)]]], dtype=np.float32)
    rgb = cv2.cvtColor(lab, cv2.COLOR_Lab2RGB)[0, 0]
    rgb = np.clip(np.rint(rgb * 255.0), 0, 255).astype(np.uint8)
    return int(rgb[0]), int(rgb[1]), int(rgb[2])


def lightness_offset(t: float, swing: float = const.LIGHTNESS_SWING) -> float:
    """One full sine period per morph cycle, bounded by +-swing."""
    return math.sin(t * math.pi * 2) * swing


def animate_color(color: Any, t: float) -> RGB:
    """Shift the perceptual lightness of `color` by the cycle offset at progress t."""
    light, chroma, hue = rgb_to_lch(to_rgb(color))
    return lch_to_rgb((light + lightness_offset(t), chroma, hue))
