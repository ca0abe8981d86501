"""Targets and explosion particles.

Both entities advance themselves and draw onto an ``engine.render.canvas.Canvas``
(or anything with the same methods), so simulation can be exercised without a
display.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional

from games.spark.const import (
    EXPLOSION_PARTICLES,
    GLOW_FREQUENCY,
    MIN_RENDER_SCALE,
    PARTICLE_DRAG,
    PARTICLE_LIFE_DECAY,
    PARTICLE_MAX_SIZE,
    PARTICLE_MAX_SPEED,
    PARTICLE_MIN_SIZE,
    PARTICLE_SIZE_DECAY,
    RING_COLOR,
    RING_OFFSET,
    RING_WIDTH,
    TARGET_LIFETIME_MS,
    TARGET_RADIUS,
)

RING_START_ANGLE = 0.5 * math.pi   # top of the circle in pygame's arc convention


@dataclass(eq=False)
class Target:
    x: float
    y: float
    color: str
    lifetime_ms: float = TARGET_LIFETIME_MS
    radius: float = TARGET_RADIUS
    pulse_phase: Optional[float] = None
    remaining_ms: float = field(init=False)
    glow: float = field(init=False, default=0.0)
    hit: bool = field(init=False, default=False)

    def __post_init__(self):
        self.remaining_ms = float(self.lifetime_ms)
        if self.pulse_phase is None:
            self.pulse_phase = random.uniform(0.0, 2 * math.pi)

    @property
    def alive(self) -> bool:
        return self.remaining_ms > 0

    @property
    def remaining_fraction(self) -> float:
        if self.lifetime_ms <= 0:
            return 0.0
        return max(0.0, min(1.0, self.remaining_ms / self.lifetime_ms))

    @property
    def render_radius(self) -> float:
        progress = 1.0 - self.remaining_fraction
        return self.radius * (1.0 - progress * (1.0 - MIN_RENDER_SCALE))

    @property
    def ring_sweep(self) -> float:
        """Countdown ring arc length in radians: full circle at spawn, nothing at expiry."""
        return 2 * math.pi * self.remaining_fraction

    def update(self, dt_ms: float, now_ms: float) -> bool:
        self.remaining_ms -= dt_ms
        self.glow = math.sin(now_ms * GLOW_FREQUENCY + self.pulse_phase) * 0.5 + 0.5
        return self.alive

    def contains(self, px: float, py: float) -> bool:
        # base radius on purpose: the drawn circle shrinks, the hit area does not
        dx = px - self.x
        dy = py - self.y
        return dx * dx + dy * dy <= self.radius * self.radius

    def draw(self, canvas) -> None:
        r = self.render_radius
        center = (self.x, self.y)
        canvas.radial_glow(center, r, r + 20 + self.glow * 10, self.color)
        canvas.fill_circle(center, r, self.color)
        sweep = self.ring_sweep
        if sweep > 0:
            canvas.arc(center, r + RING_OFFSET, RING_START_ANGLE, RING_START_ANGLE + sweep,
                       RING_COLOR, RING_WIDTH)


@dataclass(eq=False)
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    size: float
    color: str
    life: float = 1.0

    @classmethod
    def burst_member(cls, x: float, y: float, color: str, rng: random.Random) -> "Particle":
        return cls(
            x=x,
            y=y,
            vx=rng.uniform(-PARTICLE_MAX_SPEED, PARTICLE_MAX_SPEED),
            vy=rng.uniform(-PARTICLE_MAX_SPEED, PARTICLE_MAX_SPEED),
            size=rng.uniform(PARTICLE_MIN_SIZE, PARTICLE_MAX_SIZE),
            color=color,
        )

    @property
    def alive(self) -> bool:
        return self.life > 0

    def update(self) -> bool:
        # fixed per-frame steps, independent of dt
        self.x += self.vx
        self.y += self.vy
        self.vx *= PARTICLE_DRAG
        self.vy *= PARTICLE_DRAG
        self.life -= PARTICLE_LIFE_DECAY
        self.size *= PARTICLE_SIZE_DECAY
        return self.alive

    def draw(self, canvas) -> None:
        canvas.fill_circle((self.x, self.y), self.size, self.color, alpha=self.life)


def explode(x: float, y: float, color: str, rng: random.Random,
            count: int = EXPLOSION_PARTICLES) -> List[Particle]:
    return [Particle.burst_member(x, y, color, rng) for _ in range(count)]
