"""Shared pytest fixtures.

pygame is forced into a headless configuration with the SDL ``dummy`` video
and audio drivers before anything imports it.
"""

from __future__ import annotations

import os
import random
from typing import Generator, List, Tuple

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pytest

from engine.app.scheduler import FrameScheduler
from engine.storage.kv_store import MemoryStore
from games.spark.hud import Hud
from games.spark.loop import SparkLoop
from games.spark.session import GameSession


class RecordingCanvas:
    """Canvas double that records draw calls instead of touching pixels."""

    def __init__(self, size: Tuple[int, int] = (800, 600)):
        self.size = size
        self.calls: List[tuple] = []

    def clear(self, color=None) -> None:
        self.calls.append(("clear",))

    def fill_circle(self, center, radius, color, alpha=1.0) -> None:
        self.calls.append(("fill_circle", center, radius, color, alpha))

    def arc(self, center, radius, start_angle, end_angle, color, width=1) -> None:
        self.calls.append(("arc", center, radius, start_angle, end_angle, color, width))

    def radial_glow(self, center, inner_radius, outer_radius, color, stops=None, rings=8) -> None:
        self.calls.append(("radial_glow", center, inner_radius, outer_radius, color))

    def named(self, name: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == name]


class RecordingHud(Hud):
    def __init__(self):
        self.scores: List[int] = []
        self.lives: List[int] = []
        self.game_overs: List[Tuple[int, int]] = []

    def show_score(self, score: int) -> None:
        self.scores.append(score)

    def show_lives(self, lives: int) -> None:
        self.lives.append(lives)

    def show_game_over(self, score: int, high_score: int) -> None:
        self.game_overs.append((score, high_score))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def hud() -> RecordingHud:
    return RecordingHud()


@pytest.fixture
def scheduler() -> FrameScheduler:
    return FrameScheduler()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def session() -> GameSession:
    return GameSession()


@pytest.fixture
def spark_loop(session, canvas, scheduler, store, hud, rng) -> SparkLoop:
    return SparkLoop(session, canvas, scheduler, store=store, hud=hud, rng=rng)


@pytest.fixture(scope="session")
def pygame_module() -> Generator:
    import pygame

    pygame.display.init()
    pygame.font.init()
    try:
        yield pygame
    finally:
        pygame.quit()
