from __future__ import annotations
import logging
import math
import random
from typing import Callable, List, Optional, Tuple

import numpy as np
import pygame

from engine.app.scheduler import FrameScheduler

from .const import INITIAL_DOT_COUNT, GROWTH_RATE
from .models import Cursor, Obstacle, RoundState, Sizes
from .placement import sample_obstacle

logger = logging.getLogger(__name__)

RoundListener = Callable[[RoundState], None]
SceneRenderer = Callable[[pygame.Surface, "GameController"], None]


class GameController:
    """
    Owns one round of YES vs NO: the cursor, the NO dots and the round state.

    The tick is a one-shot frame callback that re-requests itself while the
    round is running. Ending the round cancels the pending tick and detaches
    the click-to-win listener before anyone is notified, so nothing mutates
    the state after Won/Lost.
    """

    def __init__(
        self,
        surface_size: Tuple[int, int],
        scheduler: FrameScheduler,
        rng: Optional[random.Random] = None,
        coarse_pointer: bool = False,
        target_count: int = INITIAL_DOT_COUNT,
        renderer: Optional[SceneRenderer] = None,
    ):
        self._check_size(surface_size)
        if target_count < 1:
            raise ValueError(f"target_count must be at least 1, got {target_count}")
        self.surface_size: Tuple[int, int] = (int(surface_size[0]), int(surface_size[1]))
        self.scheduler = scheduler
        self.rng = rng or random.Random()
        self.coarse_pointer = coarse_pointer
        self.sizes = Sizes.for_device(coarse_pointer)
        self.target_count = target_count
        self.renderer = renderer

        self.state = RoundState.Idle
        self.cursor = Cursor(0.0, 0.0, self.sizes.initial_cursor)
        self.obstacles: List[Obstacle] = []
        self.confirm_listener_attached = False
        self._tick_handle: Optional[int] = None
        self._listeners: List[RoundListener] = []

    @staticmethod
    def _check_size(size: Tuple[int, int]) -> None:
        w, h = size
        if w <= 0 or h <= 0:
            raise ValueError(f"Surface size must be positive, got {w}x{h}")

    # ------------- collaborators -------------
    def add_round_listener(self, listener: RoundListener) -> None:
        """listener(RoundState.Won | RoundState.Lost) is called when a round ends."""
        self._listeners.append(listener)

    def resize(self, size: Tuple[int, int]) -> None:
        self._check_size(size)
        self.surface_size = (int(size[0]), int(size[1]))

    def on_pointer_move(self, x: float, y: float) -> None:
        self.cursor.x = x
        self.cursor.y = y

    def on_confirm(self, x: float, y: float) -> bool:
        """
        Click / tap release. Landing on empty space wins the round outright.
        Returns True if it did.
        """
        if not self.confirm_listener_attached or self.state != RoundState.Running:
            return False
        if self.is_over_obstacle(x, y):
            return False
        logger.info("Clicked empty space at (%.0f, %.0f)", x, y)
        self._end_round(RoundState.Won)
        return True

    # ------------- lifecycle -------------
    def start(self) -> None:
        self.cursor.r = self.sizes.initial_cursor
        self.state = RoundState.Running
        self.obstacles = [
            sample_obstacle(self.rng, self.sizes, self.surface_size, exclude_center=True)
            for _ in range(self.target_count)
        ]
        # always dead center, even if a dot is already there
        w, h = self.surface_size
        self.cursor.x = w / 2
        self.cursor.y = h / 2

        self.confirm_listener_attached = not self.coarse_pointer
        self.scheduler.cancel(self._tick_handle)
        self._tick_handle = self.scheduler.request(self.tick)
        logger.info("Round started with %d dots on %dx%d", len(self.obstacles), w, h)

    def reset(self) -> None:
        """Back to a fresh load: idle, no dots, nothing scheduled."""
        self.scheduler.cancel(self._tick_handle)
        self._tick_handle = None
        self.confirm_listener_attached = False
        self.state = RoundState.Idle
        self.obstacles = []
        self.cursor.r = self.sizes.initial_cursor

    def restart(self) -> None:
        self.reset()
        self.start()

    def _end_round(self, outcome: RoundState) -> None:
        self.state = outcome
        self.scheduler.cancel(self._tick_handle)
        self._tick_handle = None
        self.confirm_listener_attached = False
        logger.info("Round %s, cursor radius %.1f, %d dots left",
                    outcome.name.lower(), self.cursor.r, len(self.obstacles))
        for listener in list(self._listeners):
            listener(outcome)

    @property
    def tick_pending(self) -> bool:
        return self.scheduler.is_pending(self._tick_handle)

    # ------------- per frame -------------
    def tick(self, surface: Optional[pygame.Surface] = None) -> None:
        if self.state != RoundState.Running:
            return
        if surface is not None and self.renderer is not None:
            self.renderer(surface, self)
        self.resolve_collisions()
        if self.state == RoundState.Running:
            self._tick_handle = self.scheduler.request(self.tick)

    def resolve_collisions(self) -> None:
        c = self.cursor
        # back to front so removing a dot never skips the next one
        for i in range(len(self.obstacles) - 1, -1, -1):
            dot = self.obstacles[i]
            if math.hypot(c.x - dot.x, c.y - dot.y) >= c.r + dot.r:
                continue

            if dot.r < c.r:
                del self.obstacles[i]
                c.r += dot.r * GROWTH_RATE
                if not self.obstacles:
                    self._end_round(RoundState.Won)
                    return
                if len(self.obstacles) < self.target_count and self.can_spawn():
                    self.obstacles.append(
                        sample_obstacle(self.rng, self.sizes, self.surface_size))
                    logger.debug("Spawned replacement dot, %d on screen", len(self.obstacles))
            else:
                self._end_round(RoundState.Lost)
                return

    # ------------- queries -------------
    def largest_obstacle_radius(self) -> float:
        if not self.obstacles:
            return 0.0
        return max(d.r for d in self.obstacles)

    def can_spawn(self) -> bool:
        """More dots only while YES is not yet bigger than the biggest NO."""
        if not self.obstacles:
            return False
        return self.cursor.r <= self.largest_obstacle_radius()

    def is_over_obstacle(self, x: float, y: float) -> bool:
        if not self.obstacles:
            return False
        dots = np.array([(d.x, d.y, d.r) for d in self.obstacles], dtype=float)
        dist = np.hypot(dots[:, 0] - x, dots[:, 1] - y)
        return bool(np.any(dist < dots[:, 2] + self.sizes.click_radius))
