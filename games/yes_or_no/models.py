from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .const import (
    MIN_DOT_SIZE, MAX_DOT_SIZE, INITIAL_CURSOR_SIZE, CLICK_RADIUS,
    BACKGROUND_FONT_SIZE, EXCLUSION_WIDTH, EXCLUSION_HEIGHT, COARSE_POINTER_SCALE,
)


class RoundState(Enum):
    Idle = 1
    Running = 2
    Won = 3
    Lost = 4


@dataclass
class Cursor:
    x: float
    y: float
    r: float


# eq=False: obstacles are unique by identity, two equal-looking dots are still two dots
@dataclass(frozen=True, eq=False)
class Obstacle:
    x: float
    y: float
    r: float
    hue: float
    color: Tuple[int, int, int]


@dataclass(frozen=True)
class Sizes:
    """Size constants in effect for this device."""
    min_dot: float
    max_dot: float
    initial_cursor: float
    click_radius: float
    background_font: float
    exclusion_w: float
    exclusion_h: float

    @classmethod
    def for_device(cls, coarse_pointer: bool) -> "Sizes":
        s = COARSE_POINTER_SCALE if coarse_pointer else 1.0
        return cls(
            min_dot=MIN_DOT_SIZE * s,
            max_dot=MAX_DOT_SIZE * s,
            initial_cursor=INITIAL_CURSOR_SIZE * s,
            click_radius=CLICK_RADIUS * s,
            background_font=BACKGROUND_FONT_SIZE * s,
            exclusion_w=EXCLUSION_WIDTH * s,
            exclusion_h=EXCLUSION_HEIGHT * s,
        )
