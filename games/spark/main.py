from __future__ import annotations
import random
from enum import Enum
from typing import Optional

import pygame

from engine.api import Game, FrameData
from engine.app.context import Context
from engine.render.canvas import Canvas
from engine.render.shapes import draw_text
from games.spark.const import (
    BODY_FONT_SIZE,
    GAME_OVER_SCREEN_DELAY_MS,
    HIT_CIRCLE_COLOR,
    HIT_FLASH_MS,
    HUD_COLOR,
    TITLE_FONT_SIZE,
)
from games.spark.hud import TextHud
from games.spark.loop import SparkLoop
from games.spark.session import GameSession, Phase

INSTRUCTIONS = (
    "Targets appear and shrink. Click or tap them before the ring runs out.",
    "Faster taps score more: 100 points plus up to 100 reaction bonus.",
    "Every target that expires costs a life. Missing a tap is free.",
    "Three lives. The game speeds up as it goes.",
)


class Screen(Enum):
    Start = 1
    Instructions = 2
    Playing = 3
    GameOver = 4


class SplitSecondSpark(Game):
    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        self.w, self.h = ctx.screen_size

        self.canvas = Canvas(ctx.screen)
        self.session = GameSession()
        self.hud = TextHud()
        self.loop = SparkLoop(self.session, self.canvas, ctx.scheduler,
                              store=ctx.store, hud=self.hud, rng=random.Random())
        self.hud.high_score_text = f"{self.session.high_score:,}"

        self.screen: Screen = Screen.Start
        self.paused_note = False
        self.flash_until_ms: int = 0
        self.game_over_at_ms: Optional[int] = None
        self._start_requested = False

    # ------------- helpers -------------
    def _begin_game(self, now: int):
        self.paused_note = False
        self.game_over_at_ms = None
        self.flash_until_ms = 0
        self.screen = Screen.Playing
        self.loop.start(now)

    def _exit_to_menu(self, paused: bool = False):
        self.loop.stop()
        self.paused_note = paused
        self.screen = Screen.Start

    def _game_over_screen_ready(self, now: int) -> bool:
        return (self.game_over_at_ms is not None
                and now - self.game_over_at_ms >= GAME_OVER_SCREEN_DELAY_MS)

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        now = frame.timestamp

        if self.screen == Screen.Playing:
            for tap in frame.taps:
                if self.loop.tap(tap.x, tap.y) is not None:
                    self.flash_until_ms = now + HIT_FLASH_MS
            if self.session.phase is Phase.GameOver and self.game_over_at_ms is None:
                self.game_over_at_ms = now
            if self._game_over_screen_ready(now):
                self.screen = Screen.GameOver
            return

        if self.screen == Screen.Instructions:
            if frame.taps:
                self.screen = Screen.Start
            return

        # Start and GameOver both restart on a tap or a keyboard request
        if frame.taps or self._start_requested:
            self._start_requested = False
            self._begin_game(now)

    def on_event(self, event: pygame.event.Event) -> Optional[bool]:
        if event.type in (pygame.WINDOWFOCUSLOST, pygame.WINDOWMINIMIZED):
            if self.session.running:
                self._exit_to_menu(paused=True)
            return None

        if event.type != pygame.KEYDOWN:
            return None

        if event.key == pygame.K_ESCAPE:
            if self.screen == Screen.Playing:
                self._exit_to_menu()
                return True
            if self.screen in (Screen.Instructions, Screen.GameOver):
                self.screen = Screen.Start
                return True
            return None  # let the engine quit from the start screen

        if event.key in (pygame.K_SPACE, pygame.K_RETURN):
            if self.screen in (Screen.Start, Screen.GameOver):
                self._start_requested = True
                return True
        if event.key == pygame.K_i and self.screen == Screen.Start:
            self.screen = Screen.Instructions
            return True
        return None

    def on_draw(self, surface: pygame.Surface) -> None:
        if self.screen == Screen.Start:
            self._draw_start_screen(surface)
            return
        if self.screen == Screen.Instructions:
            self._draw_instructions(surface)
            return
        if self.screen == Screen.GameOver:
            self._draw_game_over(surface)
            return

        if self.session.phase is Phase.GameOver:
            # no frames run after game over; keep the last one on screen
            self.loop.render()
        if self.ctx.cfg.debug:
            for t in self.session.targets:
                pygame.draw.circle(surface, HIT_CIRCLE_COLOR, (int(t.x), int(t.y)), int(t.radius), width=1)
        self.hud.draw(surface)

        if pygame.time.get_ticks() < self.flash_until_ms:
            flash = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
            flash.fill((255, 255, 255, 60))
            surface.blit(flash, (0, 0))

    def _draw_start_screen(self, surface: pygame.Surface) -> None:
        cx = self.w // 2
        title = self.manifest.get("title", "Split-Second Spark")
        draw_text(surface, title, (cx, self.h // 3), HUD_COLOR, size=TITLE_FONT_SIZE, center=True)
        if self.paused_note:
            draw_text(surface, "Paused", (cx, self.h // 3 + 60), (255, 220, 90), size=BODY_FONT_SIZE, center=True)
        draw_text(surface, f"High score: {self.hud.high_score_text}", (cx, self.h // 2),
                  HUD_COLOR, size=BODY_FONT_SIZE, center=True)
        draw_text(surface, "Click or press SPACE to play", (cx, self.h // 2 + 50),
                  (210, 210, 210), size=BODY_FONT_SIZE, center=True)
        draw_text(surface, "I: instructions    ESC: quit", (cx, self.h // 2 + 90),
                  (170, 170, 170), size=22, center=True)

    def _draw_instructions(self, surface: pygame.Surface) -> None:
        cx = self.w // 2
        y = self.h // 4
        draw_text(surface, "How to play", (cx, y), HUD_COLOR, size=48, center=True)
        for line in INSTRUCTIONS:
            y += 44
            draw_text(surface, line, (cx, y), (210, 210, 210), size=BODY_FONT_SIZE, center=True)
        draw_text(surface, "Click or ESC to go back", (cx, y + 70), (170, 170, 170), size=22, center=True)

    def _draw_game_over(self, surface: pygame.Surface) -> None:
        cx = self.w // 2
        draw_text(surface, "Game Over", (cx, self.h // 3), HUD_COLOR, size=TITLE_FONT_SIZE, center=True)
        draw_text(surface, f"Score: {self.hud.final_score_text}", (cx, self.h // 2),
                  HUD_COLOR, size=BODY_FONT_SIZE, center=True)
        draw_text(surface, f"High score: {self.hud.high_score_text}", (cx, self.h // 2 + 40),
                  HUD_COLOR, size=BODY_FONT_SIZE, center=True)
        draw_text(surface, "Click or SPACE to play again, ESC for menu", (cx, self.h // 2 + 100),
                  (170, 170, 170), size=22, center=True)

    def on_unload(self) -> None:
        self.loop.stop()


def get_game():
    return SplitSecondSpark()
