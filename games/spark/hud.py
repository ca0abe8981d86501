from __future__ import annotations

import pygame

from engine.render.shapes import draw_text
from games.spark.const import (
    HEART_COLOR,
    HEART_RADIUS,
    HUD_COLOR,
    HUD_FONT_SIZE,
)


class Hud:
    """Write-only sinks the loop pushes score, lives and game-over values to."""

    def show_score(self, score: int) -> None:
        pass

    def show_lives(self, lives: int) -> None:
        pass

    def show_game_over(self, score: int, high_score: int) -> None:
        pass


class TextHud(Hud):
    def __init__(self, high_score: int = 0):
        self.score_text = "0"
        self.lives = 0
        self.final_score_text = ""
        self.high_score_text = f"{high_score:,}"

    def show_score(self, score: int) -> None:
        self.score_text = f"{score:,}"

    def show_lives(self, lives: int) -> None:
        self.lives = lives

    def show_game_over(self, score: int, high_score: int) -> None:
        self.final_score_text = f"{score:,}"
        self.high_score_text = f"{high_score:,}"

    def draw(self, surface: pygame.Surface) -> None:
        draw_text(surface, f"Score: {self.score_text}", (24, 24), HUD_COLOR, size=HUD_FONT_SIZE)
        w = surface.get_width()
        for i in range(self.lives):
            cx = w - 40 - i * (HEART_RADIUS * 3)
            pygame.draw.circle(surface, HEART_COLOR, (cx, 40), HEART_RADIUS)
