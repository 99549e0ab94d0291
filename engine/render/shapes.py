import pygame
from functools import lru_cache
from typing import Tuple

WHITE = (255, 255, 255)


@lru_cache(maxsize=64)
def _font(size: int, bold: bool = False) -> pygame.font.Font:
    return pygame.font.SysFont(None, size, bold=bold)


def draw_text_centered(surface: pygame.Surface, text: str, center: Tuple[float, float],
                       color=(230, 230, 230), size=24, bold=False, alpha=255) -> pygame.Rect:
    img = _font(max(1, int(size)), bold).render(text, True, color)
    if alpha < 255:
        img.set_alpha(alpha)
    rect = img.get_rect(center=(int(center[0]), int(center[1])))
    surface.blit(img, rect)
    return rect


def draw_labeled_circle(surface: pygame.Surface, center: Tuple[float, float], radius: float,
                        fill, label: str, outline=WHITE, outline_width=2, label_scale=0.4) -> None:
    """Filled circle with an outline and a bold label sized relative to the radius."""
    c = (int(center[0]), int(center[1]))
    r = max(1, int(radius))
    pygame.draw.circle(surface, fill, c, r)
    pygame.draw.circle(surface, outline, c, r, width=outline_width)
    # the default font renders small for its nominal size
    draw_text_centered(surface, label, c, WHITE, size=radius * label_scale * 1.35, bold=True)


def draw_button(surface: pygame.Surface, rect: pygame.Rect, label: str,
                fill=(255, 107, 157), color=WHITE, size=32) -> None:
    pygame.draw.rect(surface, fill, rect, border_radius=rect.height // 2)
    draw_text_centered(surface, label, rect.center, color, size=size, bold=True)
