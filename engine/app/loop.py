from __future__ import annotations
import logging
import time
import pygame

from engine.api.config import EngineConfig
from engine.api.frame_data import FrameData
from engine.app.context import Context
from engine.app.loader import game_root_for, load_game_manifest, load_game_module
from engine.app.scheduler import FrameScheduler
from engine.input.pointer_input import PointerInput

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (12, 14, 18)
RESIZE_EVENTS = (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED)


def _make_render_surface(screen: pygame.Surface, mirror: bool) -> pygame.Surface:
    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    if not mirror:
        return screen
    return pygame.Surface(screen.get_size()).convert()


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    fps: int = 60,
    coarse_pointer: bool = False,
    mirror: bool = False,
):
    w, h = screen_size
    if w <= 0 or h <= 0:
        raise ValueError(f"Screen size must be positive, got {w}x{h}")

    cfg = EngineConfig(
        screen_size=screen_size,
        fps=fps,
        coarse_pointer=coarse_pointer,
        mirror=mirror,
    )

    # load game before opening the window so a broken plugin fails fast
    game_root = game_root_for(game_id)
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(manifest.get("title", game_id))
    screen = pygame.display.set_mode(screen_size, pygame.RESIZABLE)
    if screen is None or screen.get_width() <= 0 or screen.get_height() <= 0:
        pygame.quit()
        raise RuntimeError("could not create a drawing surface")
    clock = pygame.time.Clock()

    input_layer = PointerInput(cfg)
    scheduler = FrameScheduler()
    render_surface = _make_render_surface(screen, mirror)

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        scheduler=scheduler,
        resources={},
        screen_size=screen.get_size(),
    )

    logger.info("Starting %s at %dx%d (touch=%s, mirror=%s)",
                game_id, ctx.screen_size[0], ctx.screen_size[1], coarse_pointer, mirror)
    game.on_load(ctx, manifest)

    running = True
    try:
        while running:
            dt = clock.tick(fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    continue
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                    continue
                if event.type in RESIZE_EVENTS:
                    new_size = pygame.display.get_surface().get_size()
                    if new_size != ctx.screen_size and new_size[0] > 0 and new_size[1] > 0:
                        screen = pygame.display.get_surface()
                        render_surface = _make_render_surface(screen, mirror)
                        ctx.screen = render_surface
                        ctx.screen_size = new_size
                        logger.debug("Resized to %dx%d", *new_size)
                        game.on_resize(new_size)
                    continue
                input_layer.handle_pygame_event(event, ctx.screen_size)
                game.on_event(event)

            pointer, confirms = input_layer.emit()
            frame_data = FrameData(timestamp=time.time(),
                                   pointer=pointer, confirms=confirms)

            # ---- draw to render_surface ----
            render_surface.fill(BACKGROUND_COLOR)
            game.on_update(dt, frame_data)
            scheduler.run_frame(render_surface)
            game.on_draw(render_surface)

            # ---- present to window ----
            if mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        scheduler.clear()
        game.on_unload()
        pygame.quit()
        logger.info("Stopped %s", game_id)
