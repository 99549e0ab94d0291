from __future__ import annotations
from dataclasses import dataclass
import pygame
from typing import Any, Tuple
from engine.api.config import EngineConfig
from engine.app.scheduler import FrameScheduler


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: EngineConfig
    scheduler: FrameScheduler
    # engine internals exposed read-only for games if needed:
    resources: dict[str, Any]
    # kept current by the loop on window resize
    screen_size: Tuple[int, int]
