from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

import pygame

ColorLike = Union[pygame.Color, str, Tuple[int, int, int]]

BACKGROUND_COLOR = (12, 14, 18)


class SurfaceUnavailableError(RuntimeError):
    """Raised when a renderer is created without a drawing surface."""


def _rgb(color: ColorLike) -> pygame.Color:
    return pygame.Color(color)


class Canvas:
    """
    Pixel-space drawing primitives over a pygame surface.

    Coordinates match pointer coordinates, so whatever the input layer
    reports can be compared directly against what was drawn.
    """

    def __init__(self, surface: pygame.Surface | None):
        if surface is None:
            raise SurfaceUnavailableError("no drawing surface available")
        self.surface = surface

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def clear(self, color: ColorLike = BACKGROUND_COLOR) -> None:
        self.surface.fill(_rgb(color))

    def fill_circle(self, center: Tuple[float, float], radius: float, color: ColorLike, alpha: float = 1.0) -> None:
        r = max(1, int(round(radius)))
        c = _rgb(color)
        if alpha >= 1.0:
            pygame.draw.circle(self.surface, c, (int(center[0]), int(center[1])), r)
            return
        a = int(max(0.0, min(1.0, alpha)) * 255)
        if a <= 0:
            return
        # per-pixel alpha needs an intermediate surface
        circle_surf = pygame.Surface((r * 2 + 2, r * 2 + 2), pygame.SRCALPHA)
        pygame.draw.circle(circle_surf, (c.r, c.g, c.b, a), (r + 1, r + 1), r)
        self.surface.blit(circle_surf, (int(center[0]) - r - 1, int(center[1]) - r - 1))

    def arc(self, center: Tuple[float, float], radius: float, start_angle: float, end_angle: float,
            color: ColorLike, width: int = 1) -> None:
        """Counter-clockwise arc (pygame convention, radians) around center."""
        if end_angle <= start_angle:
            return
        r = int(round(radius))
        rect = pygame.Rect(int(center[0]) - r, int(center[1]) - r, r * 2, r * 2)
        if end_angle - start_angle >= 2 * math.pi:
            pygame.draw.circle(self.surface, _rgb(color), rect.center, r, width=width)
            return
        pygame.draw.arc(self.surface, _rgb(color), rect, start_angle, end_angle, width)

    def radial_glow(self, center: Tuple[float, float], inner_radius: float, outer_radius: float,
                    color: ColorLike, stops: Sequence[Tuple[float, float]] = ((0.0, 0.5), (0.7, 0.19), (1.0, 0.0)),
                    rings: int = 8) -> None:
        """
        Approximate a radial gradient with concentric alpha rings.
        stops are (offset in [0, 1], alpha in [0, 1]) pairs, offsets ascending.
        """
        outer = int(math.ceil(outer_radius))
        inner = max(0.0, float(inner_radius))
        if outer <= 0 or outer <= inner:
            return
        c = _rgb(color)
        glow = pygame.Surface((outer * 2 + 2, outer * 2 + 2), pygame.SRCALPHA)
        for i in range(rings, -1, -1):
            offset = i / rings
            rr = inner + (outer - inner) * offset
            a = int(_interpolate(stops, offset) * 255)
            if a <= 0 or rr < 1:
                continue
            pygame.draw.circle(glow, (c.r, c.g, c.b, a), (outer + 1, outer + 1), int(rr))
        self.surface.blit(glow, (int(center[0]) - outer - 1, int(center[1]) - outer - 1))


def _interpolate(stops: Sequence[Tuple[float, float]], offset: float) -> float:
    if offset <= stops[0][0]:
        return stops[0][1]
    for (o0, a0), (o1, a1) in zip(stops, stops[1:]):
        if offset <= o1:
            if o1 == o0:
                return a1
            t = (offset - o0) / (o1 - o0)
            return a0 + (a1 - a0) * t
    return stops[-1][1]
