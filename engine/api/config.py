from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int]
    fps: int = 60
    # touch-first device: read once at startup, games scale their sizes from it
    coarse_pointer: bool = False
    mirror: bool = False
