import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from scuolagame.game import Game, GameState
from scuolagame.ingame import InGame, InGameState


@pytest.fixture
def game(tmp_path):
    instance = Game(asset_dir=tmp_path, fullscreen=False)
    yield instance
    instance.close()


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def test_starts_in_main_menu_with_particles(game):
    assert game.state is GameState.MAIN_MENU
    assert game.running
    assert game.window_size == (1280, 720)
    assert len(game.particles) == 50
    for particle in game.particles:
        assert 0 <= particle.position.x < 1280
        assert 0 <= particle.position.y < 720
        assert 1.0 <= particle.radius <= 3.0
        assert particle.color == (255, 255, 255, 127)


def test_player_starts_on_the_ground(game):
    before = game.player.position
    game.player.land_on_ground(game.window_size)
    assert game.player.position == before


def test_escape_in_main_menu_closes(game):
    game.handle_event(key(pygame.K_ESCAPE))
    assert not game.running


def test_escape_in_options_returns_to_main_menu(game):
    game.state = GameState.OPTIONS
    game.handle_event(key(pygame.K_ESCAPE))
    assert game.state is GameState.MAIN_MENU
    assert game.running


def test_quit_event_closes(game):
    game.handle_event(pygame.event.Event(pygame.QUIT))
    assert not game.running


def test_arrow_keys_move_main_menu_selection(game):
    for _ in range(4):
        game.handle_event(key(pygame.K_DOWN))
    assert game.menu.selected == 2
    game.handle_event(key(pygame.K_UP))
    assert game.menu.selected == 1


def test_arrow_keys_move_options_selection(game):
    game.state = GameState.OPTIONS
    game.handle_event(key(pygame.K_DOWN))
    game.handle_event(key(pygame.K_DOWN))
    assert game.options_menu.selected == 2
    assert game.menu.selected == 0


def test_enter_on_play_starts_loading_transition(game):
    game.handle_event(key(pygame.K_RETURN))
    assert game.transitioning
    assert game.target_state is GameState.LOADING
    assert game.state is GameState.MAIN_MENU


def test_enter_on_options_item_starts_options_transition(game):
    game.handle_event(key(pygame.K_DOWN))
    game.handle_event(key(pygame.K_RETURN))
    assert game.target_state is GameState.OPTIONS


def test_enter_on_quit_closes(game):
    game.menu.selected = 2
    game.handle_event(key(pygame.K_RETURN))
    assert not game.running


def test_options_back_returns_to_main_menu(game):
    game.state = GameState.OPTIONS
    game.options_menu.selected = 4
    game.handle_event(key(pygame.K_RETURN))
    assert game.state is GameState.MAIN_MENU


def test_options_fullscreen_toggles_and_rebuilds_menu(game):
    game.state = GameState.OPTIONS
    game.options_menu.selected = 3
    game.handle_event(key(pygame.K_RETURN))
    assert game.fullscreen is True
    assert game.options_menu.selected == 0
    game.toggle_fullscreen()
    assert game.fullscreen is False
    assert game.window_size == (1280, 720)


def test_f11_toggles_only_in_menus(game):
    game.handle_event(key(pygame.K_F11))
    assert game.fullscreen is True
    game.handle_event(key(pygame.K_F11))
    assert game.fullscreen is False
    game.state = GameState.PLAY
    game.handle_event(key(pygame.K_F11))
    assert game.fullscreen is False


def test_enter_in_play_starts_game_transition(game):
    game.state = GameState.PLAY
    game.handle_event(key(pygame.K_RETURN))
    assert game.target_state is GameState.GAME


def test_transition_fades_in_then_out(game):
    game.start_transition(GameState.OPTIONS)
    alphas = []
    for _ in range(4):
        game.update(0.25)
        alphas.append(game.overlay_alpha)
    assert alphas == sorted(alphas)
    assert game.state is GameState.OPTIONS
    assert game.fade_out_phase
    game.update(1.0)
    assert not game.transitioning
    assert not game.fade_out_phase
    assert game.overlay_alpha == 0


def test_particles_frozen_during_transition(game):
    before = [pygame.Vector2(p.position) for p in game.particles]
    game.start_transition(GameState.OPTIONS)
    game.update(0.1)
    assert [p.position for p in game.particles] == before


def test_particles_stay_inside_window_after_update(game):
    for _ in range(20):
        game.update(0.5)
    for particle in game.particles:
        assert 0 <= particle.position.x <= 1280
        assert 0 <= particle.position.y <= 720


def test_left_wall_pushes_player_right(game, tmp_path):
    game.state = GameState.GAME
    game.scene = InGame(tmp_path)
    game.player.position = (100.0, 300.0)
    game.update(0.0)
    assert game.player.position == pygame.Vector2(105.0, 300.0)


def test_right_wall_pushes_player_left(game, tmp_path):
    game.state = GameState.GAME
    game.scene = InGame(tmp_path)
    game.player.position = (1200.0, 300.0)
    game.update(0.0)
    assert game.player.position == pygame.Vector2(1195.0, 300.0)


def test_stairs_lift_player(game, tmp_path):
    game.state = GameState.GAME
    game.scene = InGame(tmp_path)
    game.player.position = (640.0, 600.0)
    game.update(0.0)
    assert game.player.position == pygame.Vector2(640.0, 595.0)
    assert game.player.velocity_y == -50.0


def test_loading_screen_creates_scene_after_delay(game):
    game.state = GameState.LOADING
    game.dt = game.loading_delay
    game.render()
    assert game.scene is not None
    assert game.transitioning
    assert game.target_state is GameState.PLAY
    assert game.loading_timer == 0.0


def test_loading_screen_waits_before_delay(game):
    game.state = GameState.LOADING
    game.dt = game.loading_delay / 4
    game.render()
    assert game.scene is None
    assert not game.transitioning


def test_render_play_creates_scene(game):
    game.state = GameState.PLAY
    game.render()
    assert game.scene.scene_state is InGameState.STORIA


def test_render_game_switches_scene_to_courtyard(game, tmp_path):
    game.state = GameState.GAME
    game.scene = InGame(tmp_path)
    game.render()
    assert game.scene.scene_state is InGameState.CORTILE


def test_background_missing_is_none(game):
    assert game.background() is None