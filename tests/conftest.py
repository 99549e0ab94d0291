from __future__ import annotations

import os
import random
from typing import Iterator

# headless pygame: must be set before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pygame
import pytest

from engine.app.scheduler import FrameScheduler
from games.yes_or_no.controller import GameController
from games.yes_or_no.models import Obstacle


@pytest.fixture(scope="session", autouse=True)
def _pygame_fonts() -> Iterator[None]:
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture()
def scheduler() -> FrameScheduler:
    return FrameScheduler()


@pytest.fixture()
def make_controller(scheduler: FrameScheduler):
    def _make(size=(1280, 720), seed=1234, **kwargs) -> GameController:
        return GameController(size, scheduler, rng=random.Random(seed), **kwargs)

    return _make


@pytest.fixture()
def make_dot():
    def _dot(x: float, y: float, r: float) -> Obstacle:
        return Obstacle(x=x, y=y, r=r, hue=330.0, color=(230, 90, 160))

    return _dot
