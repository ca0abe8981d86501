from __future__ import annotations
import pygame
from typing import List, Tuple

from engine.api.config import EngineConfig
from engine.api.frame_data import Point

_LEFT_BUTTON = 1


class PointerInput:
    """
    Press-only pointer source:
    - Each left mouse press or touch-down queues one tap; holds and drags emit nothing.
    - Touch coordinates arrive normalized (0..1) and are scaled to the screen.
    - Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, cfg: EngineConfig):
        self.mirror = cfg.mirror
        self._taps: List[Point] = []

    def _to_logical(self, x: float, y: float, w: int, h: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        w, h = screen_size

        if event.type == pygame.MOUSEBUTTONDOWN:
            # touch screens also synthesize mouse events; FINGERDOWN covers those
            if getattr(event, "touch", False):
                return
            if event.button != _LEFT_BUTTON:
                return
            lx, ly = self._to_logical(*event.pos, w, h)
            self._taps.append(Point(lx, ly, "mouse"))

        elif event.type == pygame.FINGERDOWN:
            lx, ly = self._to_logical(event.x * w, event.y * h, w, h)
            self._taps.append(Point(lx, ly, "touch"))

        elif event.type == pygame.WINDOWFOCUSLOST:
            self._taps.clear()

    def drain(self) -> List[Point]:
        """Return and forget the taps queued since the last call."""
        taps, self._taps = self._taps, []
        return taps
