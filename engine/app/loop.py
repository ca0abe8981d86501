from __future__ import annotations
import logging
import sys
from pathlib import Path
import pygame

from engine.api.config import EngineConfig
from engine.api.frame_data import FrameData
from engine.app.context import Context
from engine.app.loader import load_game_manifest, load_game_module, resolve_game_root
from engine.app.scheduler import FrameScheduler
from engine.input.pointer_input import PointerInput
from engine.render.canvas import BACKGROUND_COLOR
from engine.render.shapes import draw_text
from engine.storage.kv_store import KeyValueStore, MemoryStore, YamlKeyValueStore

logger = logging.getLogger(__name__)

BORDER_COLOR = (220, 220, 220)


def make_store(cfg: EngineConfig) -> KeyValueStore:
    if not cfg.persist:
        return MemoryStore()
    return YamlKeyValueStore(cfg.store_path)


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    fps: int = 60,
    mirror: bool = False,
    debug: bool = False,
    store_path: Path | None = None,
    persist: bool = True,
):
    cfg = EngineConfig(
        screen_size=screen_size,
        fps=fps,
        mirror=mirror,
        debug=debug,
        store_path=store_path,
        persist=persist,
    )

    # load game before opening a window so a bad id fails cleanly
    game_root = resolve_game_root(game_id)
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(manifest.get("title", game_id))
    try:
        screen = pygame.display.set_mode(screen_size)
    except pygame.error as exc:
        print(f"ERROR: could not open display: {exc}", file=sys.stderr)
        pygame.quit()
        return 1
    clock = pygame.time.Clock()

    pointer = PointerInput(cfg)
    scheduler = FrameScheduler()
    store = make_store(cfg)

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not mirror else pygame.Surface(
        screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        scheduler=scheduler,
        store=store,
        resources={"manifest": manifest, "game_root": game_root},
        screen_size=screen_size,
    )

    game.on_load(ctx, manifest)
    show_fps = debug or bool(manifest.get("options", {}).get("show_fps", False))
    logger.info("running %s at %dx%d", game_id, *screen_size)

    running = True
    try:
        while running:
            dt = clock.tick(cfg.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    continue
                pointer.handle_pygame_event(event, screen_size)
                consumed = game.on_event(event)
                if not consumed and event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            frame_data = FrameData(timestamp=pygame.time.get_ticks(),
                                   taps=pointer.drain())

            # ---- draw to render_surface ----
            render_surface.fill(BACKGROUND_COLOR)
            game.on_update(dt, frame_data)
            scheduler.run_pending(frame_data.timestamp)
            game.on_draw(render_surface)
            pygame.draw.rect(render_surface, BORDER_COLOR,
                             (8, 8, screen_size[0] - 16, screen_size[1] - 16), 1)
            if show_fps:
                draw_text(render_surface, f"{clock.get_fps():.0f} fps",
                          (screen_size[0] - 90, screen_size[1] - 34), size=22)

            # ---- present to window ----
            if mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        game.on_unload()
        pygame.quit()
    return 0
