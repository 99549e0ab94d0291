from __future__ import annotations
import pygame
from typing import List, Optional, Tuple

from engine.api.config import EngineConfig
from engine.api.frame_data import Point

LEFT_BUTTON = 1


class PointerInput:
    """
    Mouse / touch pointer tracking:
    - Motion (mouse or finger) updates the current pointer position.
    - Left-button release or finger lift queues a confirm point for the next frame.
    - Respects --mirror by converting window coords -> logical coords.

    Finger events carry normalized (0..1) coordinates and are scaled to the surface.
    Mouse events that SDL synthesizes from touches are skipped so a tap is
    only reported once.
    """

    def __init__(self, cfg: EngineConfig):
        self.mirror = cfg.mirror
        self._pointer: Optional[Tuple[float, float]] = None
        self._moved = False
        self._confirms: List[Tuple[float, float]] = []

    def _to_logical(self, x: float, y: float, w: int, h: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def _finger_pos(self, event: pygame.event.Event, w: int, h: int) -> Tuple[float, float]:
        return self._to_logical(event.x * w, event.y * h, w, h)

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        w, h = screen_size

        if event.type == pygame.MOUSEMOTION:
            if getattr(event, "touch", False):
                return
            self._pointer = self._to_logical(*event.pos, w, h)
            self._moved = True

        elif event.type == pygame.MOUSEBUTTONUP:
            if getattr(event, "touch", False) or event.button != LEFT_BUTTON:
                return
            self._confirms.append(self._to_logical(*event.pos, w, h))

        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            self._pointer = self._finger_pos(event, w, h)
            self._moved = True

        elif event.type == pygame.FINGERUP:
            self._confirms.append(self._finger_pos(event, w, h))

        # a click queued while focus changes should not fire later
        elif event.type == pygame.WINDOWFOCUSLOST:
            self._confirms.clear()

    def emit(self) -> Tuple[Optional[Point], List[Point]]:
        """
        Return (pointer, confirms) for the current frame and drain the confirm queue.
        pointer is None unless the pointer moved since the previous frame.
        """
        pointer = Point(*self._pointer) if self._moved and self._pointer is not None else None
        self._moved = False
        confirms = [Point(x, y) for (x, y) in self._confirms]
        self._confirms.clear()
        return pointer, confirms
