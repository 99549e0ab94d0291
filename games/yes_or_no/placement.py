"""
Where "NO" dots (and, optionally, the cursor) may be placed.

Everything here is a plain function over an injected ``random.Random`` and the
current surface size, so placement can be replayed in tests with a seeded rng.
"""
from __future__ import annotations
import colorsys
import logging
import math
import random
from typing import Iterable, Sequence, Tuple

from .const import (
    MAX_PLACEMENT_ATTEMPTS, SAFE_START_PADDING, SAFE_START_GRID,
    DOT_HUE_MIN, DOT_HUE_RANGE, DOT_SATURATION, DOT_LIGHTNESS,
)
from .models import Obstacle, Sizes

logger = logging.getLogger(__name__)


def hsl_to_rgb(hue_deg: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """CSS-style hsl() -> 8-bit RGB; hue wraps around 360."""
    r, g, b = colorsys.hls_to_rgb((hue_deg % 360) / 360.0, lightness, saturation)
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


def is_in_center_exclusion_zone(x: float, y: float, surface_size: Tuple[int, int], sizes: Sizes) -> bool:
    w, h = surface_size
    dx = abs(x - w / 2)
    dy = abs(y - h / 2)
    return dx < sizes.exclusion_w / 2 and dy < sizes.exclusion_h / 2


def is_position_safe(x: float, y: float, radius: float, obstacles: Iterable[Obstacle]) -> bool:
    for dot in obstacles:
        if math.hypot(x - dot.x, y - dot.y) < radius + dot.r:
            return False
    return True


def _random_dot_at(rng: random.Random, sizes: Sizes, x: float, y: float) -> Obstacle:
    r = sizes.min_dot + rng.random() * (sizes.max_dot - sizes.min_dot)
    hue = DOT_HUE_MIN + rng.random() * DOT_HUE_RANGE
    return Obstacle(x=x, y=y, r=r, hue=hue,
                    color=hsl_to_rgb(hue, DOT_SATURATION, DOT_LIGHTNESS))


def sample_obstacle(rng: random.Random, sizes: Sizes, surface_size: Tuple[int, int],
                    exclude_center: bool = False) -> Obstacle:
    """
    A dot at a uniformly random spot on the surface.

    With exclude_center, spots inside the overlay area are re-drawn up to
    MAX_PLACEMENT_ATTEMPTS times; after that the last spot is used anyway.
    Overlap with existing dots is never checked.
    """
    w, h = surface_size
    x = rng.random() * w
    y = rng.random() * h
    if exclude_center:
        attempts = 1
        while is_in_center_exclusion_zone(x, y, surface_size, sizes):
            if attempts >= MAX_PLACEMENT_ATTEMPTS:
                logger.debug("No spot outside the center zone after %d tries, using (%.0f, %.0f)",
                             attempts, x, y)
                break
            x = rng.random() * w
            y = rng.random() * h
            attempts += 1
    return _random_dot_at(rng, sizes, x, y)


def sample_safe_start(rng: random.Random, sizes: Sizes, surface_size: Tuple[int, int],
                      obstacles: Sequence[Obstacle]) -> Tuple[float, float]:
    """
    A cursor start point that does not touch any dot: random tries first,
    then a coarse grid scan, then the center of the surface no matter what.
    """
    w, h = surface_size
    pad = SAFE_START_PADDING
    start_r = sizes.initial_cursor

    for _ in range(MAX_PLACEMENT_ATTEMPTS):
        x = pad + rng.random() * (w - 2 * pad)
        y = pad + rng.random() * (h - 2 * pad)
        if is_position_safe(x, y, start_r, obstacles):
            return x, y

    for gx in range(pad, int(w - pad), SAFE_START_GRID):
        for gy in range(pad, int(h - pad), SAFE_START_GRID):
            if is_position_safe(gx, gy, start_r, obstacles):
                return float(gx), float(gy)

    logger.debug("No safe start found, falling back to center")
    return w / 2, h / 2
