from __future__ import annotations
import pygame

from engine.render.shapes import draw_labeled_circle, draw_text_centered

from .const import (
    BACKGROUND_TEXT, BACKGROUND_TEXT_ALPHA, CLEAR_COLOR, CURSOR_COLOR, OUTLINE_COLOR,
    CURSOR_OUTLINE_W, DOT_OUTLINE_W, LABEL_SCALE,
)


def draw_background_text(surface: pygame.Surface, font_size: float) -> None:
    w, h = surface.get_size()
    draw_text_centered(surface, BACKGROUND_TEXT, (w / 2, h / 2), (255, 255, 255),
                       size=font_size, bold=True, alpha=BACKGROUND_TEXT_ALPHA)


def draw_scene(surface: pygame.Surface, game) -> None:
    """Full redraw: background label, every NO dot, then the YES cursor on top."""
    surface.fill(CLEAR_COLOR)
    draw_background_text(surface, game.sizes.background_font)
    for dot in game.obstacles:
        draw_labeled_circle(surface, (dot.x, dot.y), dot.r, dot.color, "NO",
                            outline=OUTLINE_COLOR, outline_width=DOT_OUTLINE_W,
                            label_scale=LABEL_SCALE)
    c = game.cursor
    draw_labeled_circle(surface, (c.x, c.y), c.r, CURSOR_COLOR, "YES",
                        outline=OUTLINE_COLOR, outline_width=CURSOR_OUTLINE_W,
                        label_scale=LABEL_SCALE)
