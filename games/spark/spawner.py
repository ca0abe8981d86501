from __future__ import annotations

import logging
import math
import random
from typing import Optional, Sequence, Tuple

from games.spark.const import (
    HUD_HEIGHT,
    MAX_SPAWN_INTERVAL_MS,
    MIN_SPAWN_INTERVAL_MS,
    MIN_TARGET_LIFETIME_MS,
    SPAWN_MARGIN,
    SPEED_INCREASE_RATE,
    TARGET_COLORS,
    TARGET_LIFETIME_MS,
)
from games.spark.entities import Target
from games.spark.session import GameSession

logger = logging.getLogger(__name__)


def spawn_interval_for(speed_factor: float) -> float:
    return max(MIN_SPAWN_INTERVAL_MS, min(MAX_SPAWN_INTERVAL_MS, MAX_SPAWN_INTERVAL_MS / speed_factor))


def lifetime_for(speed_factor: float) -> float:
    return max(MIN_TARGET_LIFETIME_MS, TARGET_LIFETIME_MS / speed_factor)


class Spawner:
    """
    Time-gated target creation. Every spawn bumps the session's speed factor,
    which shortens both the spawn interval and new target lifetimes.
    """

    def __init__(self, rng: random.Random | None = None,
                 palette: Sequence[str] = TARGET_COLORS,
                 margin: float = SPAWN_MARGIN,
                 hud_height: float = HUD_HEIGHT):
        self.rng = rng or random.Random()
        self.palette = tuple(palette)
        self.margin = margin
        self.hud_height = hud_height

    def spawn_area(self, size: Tuple[int, int]) -> Optional[Tuple[float, float, float, float]]:
        """(x_min, x_max, y_min, y_max) for target centers, or None if nothing fits."""
        w, h = size
        x_min, x_max = self.margin, w - self.margin
        y_min, y_max = self.margin + self.hud_height, h - self.margin
        if x_max - x_min <= 0 or y_max - y_min <= 0:
            return None
        return x_min, x_max, y_min, y_max

    def due(self, session: GameSession, now_ms: float) -> bool:
        return (now_ms - session.last_spawn_ms) > session.spawn_interval_ms

    def maybe_spawn(self, session: GameSession, now_ms: float, size: Tuple[int, int]) -> Optional[Target]:
        if not self.due(session, now_ms):
            return None
        area = self.spawn_area(size)
        if area is None:
            logger.debug("canvas %dx%d too small to spawn", *size)
            return None
        x_min, x_max, y_min, y_max = area

        target = Target(
            x=self.rng.uniform(x_min, x_max),
            y=self.rng.uniform(y_min, y_max),
            color=self.rng.choice(self.palette),
            lifetime_ms=lifetime_for(session.speed_factor),
            pulse_phase=self.rng.uniform(0.0, 2 * math.pi),
        )

        session.last_spawn_ms = now_ms
        session.speed_factor += SPEED_INCREASE_RATE
        session.spawn_interval_ms = spawn_interval_for(session.speed_factor)
        logger.debug("spawned target at (%.0f, %.0f), speed %.2f, next in %.0f ms",
                     target.x, target.y, session.speed_factor, session.spawn_interval_ms)
        return target
