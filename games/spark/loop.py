"""Frame-by-frame driver for a Split-Second Spark session.

``SparkLoop`` owns the state machine (Idle -> Running -> GameOver/Idle) and
schedules itself on the engine's ``FrameScheduler`` one tick at a time, the
way a browser game chains ``requestAnimationFrame`` calls. Pointer taps come
in separately through ``tap``.

Simulation (``advance``) and drawing (``render``) are split so the gameplay
rules can be driven without a display.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from engine.app.scheduler import FrameScheduler
from engine.render.canvas import SurfaceUnavailableError
from engine.storage.kv_store import KeyValueStore, MemoryStore
from games.spark.hits import HitResult, resolve_tap
from games.spark.hud import Hud
from games.spark.scores import load_high_score, record_high_score
from games.spark.session import GameSession, Phase
from games.spark.spawner import Spawner

logger = logging.getLogger(__name__)


class SparkLoop:
    def __init__(
        self,
        session: GameSession,
        canvas,
        scheduler: FrameScheduler,
        store: Optional[KeyValueStore] = None,
        hud: Optional[Hud] = None,
        rng: Optional[random.Random] = None,
        spawner: Optional[Spawner] = None,
    ):
        if canvas is None:
            raise SurfaceUnavailableError("SparkLoop needs a canvas to draw on")
        self.session = session
        self.canvas = canvas
        self.scheduler = scheduler
        self.store = store if store is not None else MemoryStore()
        self.hud = hud or Hud()
        self.rng = rng or random.Random()
        self.spawner = spawner or Spawner(self.rng)
        self.last_frame_ms: float = 0.0
        self._pending: Optional[int] = None
        try:
            self.session.high_score = load_high_score(self.store)
        except Exception:
            logger.exception("reading the high score failed; starting from 0")

    @property
    def phase(self) -> Phase:
        return self.session.phase

    @property
    def frame_pending(self) -> bool:
        return self._pending is not None

    # ------------- transitions -------------
    def start(self, now_ms: float) -> None:
        self._cancel_pending()
        self.session.reset(now_ms)
        self.session.phase = Phase.Running
        self.last_frame_ms = now_ms
        self.hud.show_lives(self.session.lives)
        self.hud.show_score(self.session.score)
        logger.info("session started")
        self._pending = self.scheduler.request(self.frame)

    def stop(self) -> None:
        """Leave a running session (menu exit, focus loss). Not resumable."""
        if not self.session.running:
            return
        self.session.phase = Phase.Idle
        self._cancel_pending()
        logger.info("session stopped at score %d", self.session.score)

    def _game_over(self) -> None:
        self.session.phase = Phase.GameOver
        self._cancel_pending()
        try:
            self.session.high_score = record_high_score(self.store, self.session.score)
        except Exception:
            logger.exception("recording the high score failed; skipping")
        try:
            self.hud.show_game_over(self.session.score, self.session.high_score)
        except Exception:
            logger.exception("game over display failed; skipping")
        logger.info("game over, score %d, best %d", self.session.score, self.session.high_score)

    def _cancel_pending(self) -> None:
        self.scheduler.cancel(self._pending)
        self._pending = None

    # ------------- input -------------
    def tap(self, x: float, y: float) -> Optional[HitResult]:
        result = resolve_tap(self.session, x, y, self.rng)
        if result is not None:
            self.hud.show_score(self.session.score)
        return result

    # ------------- per frame -------------
    def frame(self, now_ms: float) -> None:
        self._pending = None
        if not self.session.running:
            return
        dt = now_ms - self.last_frame_ms
        self.last_frame_ms = now_ms

        try:
            self.canvas.clear()
        except Exception:
            logger.exception("clearing the canvas failed; skipping")
        self.advance(now_ms, dt)
        self.render()

        if self.session.running:
            self._pending = self.scheduler.request(self.frame)

    def advance(self, now_ms: float, dt_ms: float) -> None:
        session = self.session

        try:
            target = self.spawner.maybe_spawn(session, now_ms, self.canvas.size)
        except Exception:
            logger.exception("spawn step failed; skipping")
            target = None
        if target is not None:
            session.targets.append(target)

        survivors = []
        for target in session.targets:
            try:
                alive = target.update(dt_ms, now_ms)
            except Exception:
                logger.exception("target update failed; skipping")
                survivors.append(target)
                continue
            if alive:
                survivors.append(target)
            elif not target.hit:
                self._miss()
        session.targets = survivors

        particles = []
        for particle in session.particles:
            try:
                if particle.update():
                    particles.append(particle)
            except Exception:
                logger.exception("particle update failed; dropping it")
        session.particles = particles

    def _miss(self) -> None:
        if not self.session.running:
            # already over this frame; the rest just get culled
            return
        lives = self.session.lose_life()
        try:
            self.hud.show_lives(lives)
        except Exception:
            logger.exception("lives display failed; skipping")
        if lives == 0:
            self._game_over()

    def render(self) -> None:
        for entity in (*self.session.targets, *self.session.particles):
            try:
                entity.draw(self.canvas)
            except Exception:
                logger.exception("drawing %s failed; skipping", type(entity).__name__)
