from __future__ import annotations
import logging
import random
from typing import Tuple

import pygame

from engine.api import Game, FrameData
from engine.app.context import Context
from engine.render.shapes import draw_button, draw_text_centered

from .const import *
from .controller import GameController
from .models import RoundState
from .render import draw_scene

logger = logging.getLogger(__name__)


class YesOrNo(Game):
    def on_load(self, ctx: Context, manifest):
        if ctx.screen is None:
            raise RuntimeError("YesOrNo needs a drawing surface")
        self.ctx = ctx
        self.manifest = manifest
        options = manifest.get("options", {}) or {}

        seed = options.get("seed")
        self.controller = GameController(
            ctx.screen_size,
            ctx.scheduler,
            rng=random.Random(seed),
            coarse_pointer=ctx.cfg.coarse_pointer,
            target_count=int(options.get("target_count", INITIAL_DOT_COUNT)),
            renderer=draw_scene,
        )
        self.controller.add_round_listener(self._on_round_end)
        self._layout_buttons(ctx.screen_size)

    def _layout_buttons(self, size: Tuple[int, int]) -> None:
        w, h = size
        scale = COARSE_POINTER_SCALE if self.ctx.cfg.coarse_pointer else 1.0
        bw, bh = int(BUTTON_W * scale), int(BUTTON_H * scale)
        self.button_rect = pygame.Rect((w - bw) // 2, h // 2 + int(40 * scale), bw, bh)

    @property
    def state(self) -> RoundState:
        return self.controller.state

    # ------------- actions -------------
    def _press_button(self) -> None:
        state = self.controller.state
        if state == RoundState.Idle:
            self._set_cursor_hidden(True)
            self.controller.start()
        elif state == RoundState.Lost:
            self._set_cursor_hidden(True)
            self.controller.restart()
        elif state == RoundState.Won:
            # play again: same as a fresh load, back to the start screen
            self.controller.reset()

    def _on_round_end(self, outcome: RoundState) -> None:
        self._set_cursor_hidden(False)

    @staticmethod
    def _set_cursor_hidden(hidden: bool) -> None:
        if pygame.display.get_init():
            pygame.mouse.set_visible(not hidden)

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        if frame.pointer is not None:
            self.controller.on_pointer_move(frame.pointer.x, frame.pointer.y)

        # at most one state change per frame, so every end screen gets drawn
        for p in frame.confirms:
            before = self.controller.state
            if before == RoundState.Running:
                self.controller.on_confirm(p.x, p.y)
            elif self.button_rect.collidepoint(p.x, p.y):
                self._press_button()
            if self.controller.state != before:
                break

    def on_event(self, event: pygame.event.Event) -> None:
        # Keyboard fallback: space/enter presses whatever button is showing
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_SPACE, pygame.K_RETURN):
            if self.controller.state != RoundState.Running:
                self._press_button()

    def on_resize(self, size: Tuple[int, int]) -> None:
        self.controller.resize(size)
        self._layout_buttons(size)

    def on_draw(self, surface: pygame.Surface) -> None:
        state = self.controller.state
        if state == RoundState.Running:
            return  # the tick already drew the scene

        if state == RoundState.Lost:
            # the last frame stays visible under the game over screen
            draw_scene(surface, self.controller)
            self._draw_overlay(surface, "Oh no! The NO got you!",
                               "Grow bigger before you touch the big ones", "Try Again")
        elif state == RoundState.Won:
            surface.fill(CLEAR_COLOR)
            self._draw_overlay(surface, "YAY!", "Happy Valentine's Day!", "Play Again")
        else:
            surface.fill(CLEAR_COLOR)
            self._draw_overlay(surface, "Will you be my Valentine?",
                               "Eat the smaller NOs, dodge the bigger ones", "Start")

    def _draw_overlay(self, surface: pygame.Surface, title: str, hint: str, button: str) -> None:
        w, h = surface.get_size()
        scale = COARSE_POINTER_SCALE if self.ctx.cfg.coarse_pointer else 1.0
        dim = pygame.Surface((w, h), pygame.SRCALPHA)
        dim.fill(OVERLAY_DIM)
        surface.blit(dim, (0, 0))
        draw_text_centered(surface, title, (w / 2, h / 2 - 90 * scale), TITLE_COLOR,
                           size=TITLE_FONT_SIZE * scale, bold=True)
        draw_text_centered(surface, hint, (w / 2, h / 2 - 30 * scale), HINT_COLOR,
                           size=HINT_FONT_SIZE * scale)
        draw_button(surface, self.button_rect, button, fill=BUTTON_COLOR,
                    size=BUTTON_FONT_SIZE * scale)

    def on_unload(self) -> None:
        self.controller.reset()
        self._set_cursor_hidden(False)


def get_game():
    return YesOrNo()
