import pygame
import pytest

from engine.api import FrameData, Game, Point
from engine.api.config import EngineConfig
from engine.app.context import Context
from engine.app.loader import load_game_manifest, load_game_module, resolve_game_root
from engine.app.scheduler import FrameScheduler
from engine.storage.kv_store import MemoryStore
from games.spark.const import GAME_OVER_SCREEN_DELAY_MS, HIGH_SCORE_KEY
from games.spark.entities import Particle, Target
from games.spark.session import Phase

SCREEN = (800, 600)


@pytest.fixture
def module():
    return load_game_module(resolve_game_root("spark"))


@pytest.fixture
def game(module):
    root = resolve_game_root("spark")
    ctx = Context(
        screen=pygame.Surface(SCREEN),
        clock=pygame.time.Clock(),
        cfg=EngineConfig(screen_size=SCREEN, debug=True),
        scheduler=FrameScheduler(),
        store=MemoryStore({HIGH_SCORE_KEY: 1234}),
        resources={},
        screen_size=SCREEN,
    )
    g = module.get_game()
    g.on_load(ctx, load_game_manifest(root))
    return g


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=0, unicode="", scancode=0)


def tap_frame(now, *points):
    return FrameData(timestamp=now, taps=[Point(x, y) for x, y in points])


def test_plugin_exposes_game(module, game):
    assert isinstance(game, Game)
    assert game.screen is module.Screen.Start
    assert game.hud.high_score_text == "1,234"


def test_click_on_start_screen_starts_session(module, game):
    game.on_update(16, tap_frame(100, (10, 10)))
    assert game.screen is module.Screen.Playing
    assert game.session.running
    assert game.ctx.scheduler.has_pending()


def test_space_starts_session(module, game):
    assert game.on_event(key(pygame.K_SPACE)) is True
    game.on_update(16, tap_frame(100))
    assert game.session.running


def test_escape_while_playing_returns_to_menu(module, game):
    game.on_update(16, tap_frame(0, (10, 10)))
    assert game.on_event(key(pygame.K_ESCAPE)) is True
    assert game.screen is module.Screen.Start
    assert game.session.phase is Phase.Idle
    assert not game.ctx.scheduler.has_pending()


def test_escape_on_start_screen_is_left_to_engine(game):
    assert not game.on_event(key(pygame.K_ESCAPE))


def test_focus_loss_pauses(module, game):
    game.on_update(16, tap_frame(0, (10, 10)))
    game.on_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
    assert not game.session.running
    assert game.paused_note
    assert not game.ctx.scheduler.has_pending()
    assert game.screen is module.Screen.Start


def test_instructions_screen_round_trip(module, game):
    assert game.on_event(key(pygame.K_i)) is True
    assert game.screen is module.Screen.Instructions
    game.on_update(16, tap_frame(0, (5, 5)))
    assert game.screen is module.Screen.Start
    assert not game.session.running


def test_hit_scores_and_flashes(game):
    game.on_update(16, tap_frame(0, (10, 10)))
    game.session.targets.append(Target(x=300, y=300, color="#00ffff"))
    game.on_update(16, tap_frame(50, (300, 300)))
    assert game.session.score == 200
    assert game.flash_until_ms == 250
    assert game.hud.score_text == "200"


def test_game_over_screen_after_delay_then_restart(module, game):
    scheduler = game.ctx.scheduler
    game.on_update(16, tap_frame(0, (10, 10)))
    game.session.targets.extend(Target(x=300, y=300, color="#00ffff", lifetime_ms=50) for _ in range(3))
    scheduler.run_pending(100)
    assert game.session.phase is Phase.GameOver

    game.on_update(16, tap_frame(116))
    assert game.screen is module.Screen.Playing
    game.on_update(16, tap_frame(116 + GAME_OVER_SCREEN_DELAY_MS - 1, (1, 1)))
    assert game.screen is module.Screen.Playing
    assert game.session.phase is Phase.GameOver
    game.on_update(16, tap_frame(116 + GAME_OVER_SCREEN_DELAY_MS))
    assert game.screen is module.Screen.GameOver
    assert game.hud.final_score_text == "0"

    game.on_update(16, tap_frame(2000, (1, 1)))
    assert game.session.running
    assert game.session.lives == 3


def test_draws_every_screen(pygame_module, module, game):
    surface = game.ctx.screen
    game.on_draw(surface)
    game.on_event(key(pygame.K_i))
    game.on_draw(surface)
    game.on_event(key(pygame.K_ESCAPE))
    game.on_update(16, tap_frame(0, (10, 10)))
    game.session.targets.append(Target(x=300, y=300, color="#ff00ff"))
    game.ctx.scheduler.run_pending(16)
    game.on_draw(surface)
    game.screen = module.Screen.GameOver
    game.on_draw(surface)


def test_last_frame_stays_visible_before_game_over_screen(pygame_module, module, game):
    scheduler = game.ctx.scheduler
    game.on_update(16, tap_frame(0, (10, 10)))
    game.session.targets.extend(Target(x=300, y=300, color="#00ffff", lifetime_ms=50) for _ in range(3))
    scheduler.run_pending(100)
    game.on_update(16, tap_frame(116))
    assert game.screen is module.Screen.Playing
    assert game.session.phase is Phase.GameOver

    game.session.particles.append(Particle(x=400, y=400, vx=0, vy=0, size=6, color="#ff00ff"))
    surface = game.ctx.screen
    surface.fill((0, 0, 0))
    game.on_draw(surface)
    assert surface.get_at((400, 400))[:3] == (255, 0, 255)
