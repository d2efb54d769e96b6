import pygame
from typing import Tuple

_FONTS = {}


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    font = _FONTS.get(size)
    if font is None:
        font = _FONTS[size] = pygame.font.SysFont(None, size)
    surface.blit(font.render(text, True, color), pos)


def draw_slider(surface: pygame.Surface, rect: pygame.Rect, frac: float,
                fg=(220, 220, 220), accent=(90, 150, 240)):
    """Horizontal bar filled to `frac` (0..1) of its width."""
    frac = max(0.0, min(1.0, frac))
    pygame.draw.rect(surface, fg, rect, 1)
    fill = rect.inflate(-4, -4)
    fill.width = int(fill.width * frac)
    if fill.width > 0:
        pygame.draw.rect(surface, accent, fill)


def clear_font_cache():
    """Fonts die with pygame.quit(); drop them so a later init starts clean."""
    _FONTS.clear()
