from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from games.spark.const import INITIAL_LIVES, INITIAL_SPAWN_INTERVAL_MS
from games.spark.entities import Particle, Target

logger = logging.getLogger(__name__)


class Phase(Enum):
    Idle = 1
    Running = 2
    GameOver = 3


@dataclass
class GameSession:
    """Mutable state of one playthrough, owned by the loop that drives it."""

    score: int = 0
    lives: int = INITIAL_LIVES
    speed_factor: float = 1.0
    spawn_interval_ms: float = INITIAL_SPAWN_INTERVAL_MS
    last_spawn_ms: float = 0.0
    # spawn order; the hit tester relies on it for overlaps
    targets: List[Target] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    phase: Phase = Phase.Idle
    high_score: int = 0

    @property
    def running(self) -> bool:
        return self.phase is Phase.Running

    def reset(self, now_ms: float = 0.0) -> None:
        self.score = 0
        self.lives = INITIAL_LIVES
        self.speed_factor = 1.0
        self.spawn_interval_ms = INITIAL_SPAWN_INTERVAL_MS
        self.last_spawn_ms = now_ms
        self.targets = []
        self.particles = []
        self.phase = Phase.Idle

    def add_score(self, points: int) -> int:
        if points < 0:
            raise ValueError(f"score can only grow, got {points}")
        self.score += points
        return self.score

    def lose_life(self) -> int:
        self.lives = max(0, self.lives - 1)
        logger.debug("life lost, %d left", self.lives)
        return self.lives
