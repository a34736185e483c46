"""The game loop: window, state machine, menus, transitions and the player."""

from __future__ import annotations

import argparse
import enum
import logging
import math
import random
from pathlib import Path

import pygame

from scuolagame.ingame import CollisionType, InGame, InGameState
from scuolagame.loading import LoadingScreen
from scuolagame.menus import MainMenu, OptionsMenu
from scuolagame.particle import Particle
from scuolagame.pawn import GROUND_RATIO, Pawn

log = logging.getLogger(__name__)

WINDOW_SIZE = (1280, 720)
TITLE = "Game"
PARTICLE_COUNT = 50
PARTICLE_COLOR = (255, 255, 255, 127)
PLAYER_START_X = 100.0
WALL_PUSH = 5.0
STAIRS_VELOCITY = -50.0
MENU_MUSIC_VOLUME = 0.3
BUTTON_VOLUME = 0.3


class GameState(enum.Enum):
    MAIN_MENU = enum.auto()
    OPTIONS = enum.auto()
    PLAY = enum.auto()
    LOADING = enum.auto()
    GAME = enum.auto()


_MENU_STATES = (GameState.MAIN_MENU, GameState.OPTIONS)


class Game:
    """Owns the window and drives every screen of the game."""

    transition_duration = 1.0
    loading_delay = 4.0

    def __init__(self, asset_dir="assets", fullscreen: bool = False) -> None:
        pygame.init()
        self.asset_dir = Path(asset_dir)
        self.fullscreen = bool(fullscreen)
        self.rng = random.Random()
        self.state = GameState.MAIN_MENU
        self.target_state = GameState.MAIN_MENU
        self.transitioning = False
        self.fade_out_phase = False
        self.transition_timer = 0.0
        self.overlay_alpha = 0
        self.loading_timer = 0.0
        self.dt = 0.0
        self.scene: InGame | None = None
        self._open = True
        self._background_image = self._load_image("mainMenuNoText.png")
        self._options_background = self._load_image("optionsBackground.png")
        self._button_sound: pygame.mixer.Sound | None = None

        self.play_menu_music()
        self.surface = self._create_window()
        self.menu = MainMenu(self._font(MainMenu.character_size))
        self.options_menu = self._create_options_menu()
        self.loading = LoadingScreen(self._font(50), self._options_background)
        self.particles = self._create_particles()

        self.player = Pawn(50.0, 200.0)
        ground_y = self.window_size[1] * GROUND_RATIO
        self.player.position = (PLAYER_START_X, ground_y - self.player.size)

    # -- setup ---------------------------------------------------------

    @property
    def window_size(self) -> tuple[int, int]:
        return self.surface.get_size()

    @property
    def running(self) -> bool:
        return self._open

    def _path(self, name) -> Path:
        return self.asset_dir / name

    def _load_image(self, name) -> pygame.Surface | None:
        path = self._path(name)
        try:
            return pygame.image.load(str(path))
        except (FileNotFoundError, pygame.error) as exc:
            log.error("Background image %s not found: %s", path, exc)
            return None

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        path = self._path("AFont.ttf")
        if path.is_file():
            try:
                return pygame.font.Font(str(path), size)
            except (OSError, pygame.error) as exc:
                log.error("Cannot load font %s: %s", path, exc)
        else:
            log.error("Font %s not found", path)
        return pygame.font.Font(None, size)

    def _desktop_size(self) -> tuple[int, int]:
        try:
            sizes = pygame.display.get_desktop_sizes()
        except pygame.error:
            sizes = []
        if sizes and all(sizes[0]):
            return tuple(sizes[0])
        return WINDOW_SIZE

    def _create_window(self) -> pygame.Surface:
        if self.fullscreen:
            surface = pygame.display.set_mode(self._desktop_size(), pygame.FULLSCREEN)
        else:
            surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        return surface

    def _create_options_menu(self) -> OptionsMenu:
        return OptionsMenu(self._font(OptionsMenu.character_size), self._options_background)

    def _create_particles(self) -> list[Particle]:
        width, height = self.window_size
        particles = []
        for _ in range(PARTICLE_COUNT):
            radius = 1.0 + self.rng.randrange(3)
            position = (self.rng.randrange(width), self.rng.randrange(height))
            velocity = (self.rng.randrange(101) - 50, self.rng.randrange(101) - 50)
            particle = Particle(radius, position, velocity, self.rng)
            particle.color = PARTICLE_COLOR
            particles.append(particle)
        return particles

    # -- screens and sound ---------------------------------------------

    def background(self) -> pygame.Surface | None:
        """The menu background scaled to the window, or None when missing."""
        if self._background_image is None:
            return None
        return pygame.transform.scale(self._background_image, self.window_size)

    def start_transition(self, new_state: GameState) -> None:
        """Fade out, switch to ``new_state``, then fade back in."""
        self.transitioning = True
        self.transition_timer = 0.0
        self.target_state = new_state

    def toggle_fullscreen(self) -> None:
        """Switch between windowed and fullscreen mode."""
        self.fullscreen = not self.fullscreen
        self.surface = self._create_window()
        self.options_menu = self._create_options_menu()

    def play_menu_music(self) -> None:
        """Start the looping menu music while a menu is shown."""
        if self.state not in _MENU_STATES:
            return
        if not pygame.mixer.get_init():
            log.error("Audio is not available; cannot play the menu music")
            return
        path = self._path("musica/Main Menu.wav")
        try:
            pygame.mixer.music.load(str(path))
        except (FileNotFoundError, pygame.error) as exc:
            log.error("Cannot find the background song %s: %s", path, exc)
            return
        pygame.mixer.music.set_volume(MENU_MUSIC_VOLUME)
        pygame.mixer.music.play(-1)

    def stop_menu_music(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()

    def play_button_sound(self) -> None:
        if not pygame.mixer.get_init():
            return
        if self._button_sound is None:
            path = self._path("suoni/pulsante.ogg")
            try:
                self._button_sound = pygame.mixer.Sound(str(path))
            except (FileNotFoundError, pygame.error) as exc:
                log.error("Cannot find the sound %s: %s", path, exc)
                return
            self._button_sound.set_volume(BUTTON_VOLUME)
        self._button_sound.play()

    # -- input ---------------------------------------------------------

    def _activate_main_menu(self) -> None:
        selected = self.menu.selected
        if selected == 0:
            log.info("Gioca")
            self.play_button_sound()
            self.stop_menu_music()
            self.start_transition(GameState.LOADING)
        elif selected == 1:
            log.info("Opzioni")
            self.play_button_sound()
            self.start_transition(GameState.OPTIONS)
        elif selected == 2:
            log.info("Esci")
            self.play_button_sound()
            self.close()

    def _activate_options(self) -> None:
        selected = self.options_menu.selected
        if selected == 3:
            self.play_button_sound()
            self.toggle_fullscreen()
        elif selected == 4:
            self.play_button_sound()
            self.state = GameState.MAIN_MENU

    def handle_event(self, event) -> None:
        """React to a single pygame event."""
        if event.type == pygame.QUIT:
            self.close()
            return
        if event.type != pygame.KEYDOWN:
            return
        key = event.key
        if key == pygame.K_ESCAPE:
            if self.state is GameState.OPTIONS:
                self.state = GameState.MAIN_MENU
            else:
                self.close()
        elif key in (pygame.K_UP, pygame.K_DOWN):
            menu = {GameState.MAIN_MENU: self.menu, GameState.OPTIONS: self.options_menu}.get(self.state)
            if menu is not None:
                if key == pygame.K_UP:
                    menu.move_up()
                else:
                    menu.move_down()
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if self.state is GameState.MAIN_MENU:
                self._activate_main_menu()
            elif self.state is GameState.OPTIONS:
                self._activate_options()
            elif self.state is GameState.PLAY:
                self.play_button_sound()
                self.start_transition(GameState.GAME)
        elif key == pygame.K_F11 and self.state in _MENU_STATES:
            self.toggle_fullscreen()

    def poll_events(self) -> None:
        """Handle pending events, then move the player from the held keys."""
        for event in pygame.event.get():
            self.handle_event(event)

        pressed = pygame.key.get_pressed()
        direction = pygame.Vector2(0.0, 0.0)
        if pressed[pygame.K_a]:
            direction.x -= 1.0
        if pressed[pygame.K_s]:
            direction.y += 1.0
        if pressed[pygame.K_d]:
            direction.x += 1.0
        if direction.length_squared():
            direction /= math.sqrt(direction.length_squared())
        self.player.move(direction, self.dt)

    # -- frame ---------------------------------------------------------

    def _update_play(self) -> None:
        if self.scene is None:
            return
        self.player.apply_gravity(self.dt)
        self.scene.update_colliders(self.window_size)
        collision = self.scene.check_collision(self.player.bounds)
        position = self.player.position
        if collision is CollisionType.GROUND:
            self.player.land_on_ground(self.window_size)
        elif collision is CollisionType.LEFT_WALL:
            self.player.position = (position.x + WALL_PUSH, position.y)
        elif collision is CollisionType.RIGHT_WALL:
            self.player.position = (position.x - WALL_PUSH, position.y)
        elif collision is CollisionType.STAIRS:
            self.player.position = (position.x, position.y - WALL_PUSH)
            self.player.velocity_y = STAIRS_VELOCITY

    def _update_particles(self, dt: float) -> None:
        width, height = self.window_size
        for particle in self.particles:
            particle.update(dt)
            particle.wrap(width, height)

    def _update_transition(self, dt: float) -> None:
        self.transition_timer += dt
        progress = min(self.transition_timer / self.transition_duration, 1.0)
        if not self.fade_out_phase:
            self.overlay_alpha = int(255 * progress)
            if self.transition_timer >= self.transition_duration:
                self.state = self.target_state
                self.fade_out_phase = True
                self.transition_timer = 0.0
        else:
            self.overlay_alpha = int(255 * (1 - progress))
            if self.transition_timer >= self.transition_duration:
                self.transitioning = False
                self.fade_out_phase = False
                self.transition_timer = 0.0
                self.overlay_alpha = 0

    def update(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds."""
        self.dt = dt
        self.poll_events()

        if self.state is GameState.GAME:
            self._update_play()
        if self.state is GameState.MAIN_MENU and not self.transitioning:
            self._update_particles(dt)
        if self.transitioning:
            self._update_transition(dt)

    def _new_scene(self) -> InGame:
        return InGame(self.asset_dir)

    def render(self) -> None:
        """Draw the current screen and present it."""
        surface = self.surface
        surface.fill((0, 0, 0))

        if self.state in _MENU_STATES:
            background = self.background()
            if background is not None:
                surface.blit(background, (0, 0))
            if self.state is GameState.MAIN_MENU:
                self.menu.draw(surface)
                for particle in self.particles:
                    particle.draw(surface)
            else:
                self.options_menu.draw(surface)
        elif self.state is GameState.PLAY:
            if self.scene is None:
                self.scene = self._new_scene()
            self.scene.draw(surface)
        elif self.state is GameState.LOADING:
            self.loading.update(self.dt)
            self.loading.draw(surface)
            self.loading_timer += self.dt
            if self.loading_timer >= self.loading_delay:
                if self.scene is None:
                    self.scene = self._new_scene()
                    if not self.scene.create_backgrounds():
                        log.error("Error while loading the game backgrounds")
                self.start_transition(GameState.PLAY)
                self.loading_timer = 0.0
        elif self.state is GameState.GAME and self.scene is not None:
            self.scene.draw_scene(surface)
            self.scene.draw(surface)
            self.player.draw(surface)
            self.scene.scene_state = InGameState.CORTILE

        if self.transitioning:
            overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, self.overlay_alpha))
            surface.blit(overlay, (0, 0))

        pygame.display.flip()

    def close(self) -> None:
        """Close the window; ``running`` becomes False."""
        self._open = False


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="scuolagame", description="Run the game.")
    parser.add_argument("--assets", default="assets", help="directory holding the game assets")
    parser.add_argument("--fullscreen", action="store_true", help="start in fullscreen mode")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    game = Game(args.assets, args.fullscreen)
    clock = pygame.time.Clock()
    try:
        while game.running:
            game.update(clock.tick() / 1000.0)
            if game.running:
                game.render()
    finally:
        game.close()
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())