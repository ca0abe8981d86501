from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional

from games.spark.const import BASE_SCORE, MAX_REACTION_BONUS
from games.spark.entities import Particle, Target, explode
from games.spark.session import GameSession


@dataclass
class HitResult:
    target: Target
    points: int
    particles: List[Particle]


def score_for(target: Target) -> int:
    """Base score plus a reaction bonus proportional to the time left."""
    return BASE_SCORE + int(math.floor(target.remaining_fraction * MAX_REACTION_BONUS))


def resolve_tap(session: GameSession, x: float, y: float, rng: random.Random) -> Optional[HitResult]:
    """
    Score at most one target under (x, y). Newest targets are checked first so
    overlapping targets resolve to the most recently spawned one. Taps on
    empty space change nothing.
    """
    if not session.running:
        return None
    for i in range(len(session.targets) - 1, -1, -1):
        target = session.targets[i]
        if target.hit or not target.contains(x, y):
            continue
        target.hit = True
        points = score_for(target)
        session.add_score(points)
        burst = explode(target.x, target.y, target.color, rng)
        session.particles.extend(burst)
        del session.targets[i]
        return HitResult(target=target, points=points, particles=burst)
    return None
