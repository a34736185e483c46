"""The in-game scenes: story screen, chapter intro, courtyard and colliders."""

from __future__ import annotations

import enum
import logging
import threading
import time
from dataclasses import dataclass
from pathlib import Path

import pygame

log = logging.getLogger(__name__)

WHITE = (255, 255, 255)
TEXT_SIZE = 30
BELL_RINGS = 12
POLL_INTERVAL = 0.1
FRAME_STEP = 1.0 / 60.0


class Location(enum.Enum):
    CORTILE = enum.auto()
    SCALE_DI_ENTRATA = enum.auto()
    SCALE_PRINCIPALI = enum.auto()
    CORRIDOIO_ELEMENTARI_1 = enum.auto()
    CORRIDOIO_ELEMENTARI_2 = enum.auto()
    CORRIDOIO_ELEMENTARI_3 = enum.auto()
    CORRIDOIO_MEDIE_1 = enum.auto()
    CORRIDOIO_MEDIE_2 = enum.auto()


class InGameState(enum.Enum):
    STORIA = enum.auto()
    CAP1_INTRO = enum.auto()
    TRANSITION_TO_CORTILE = enum.auto()
    CORTILE = enum.auto()


class CollisionType(enum.Enum):
    NONE = enum.auto()
    LEFT_WALL = enum.auto()
    RIGHT_WALL = enum.auto()
    GROUND = enum.auto()
    STAIRS = enum.auto()


@dataclass(frozen=True)
class Collider:
    """An axis-aligned rectangle the player can bump into."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, bounds) -> bool:
        """True when this rectangle and ``(left, top, width, height)`` overlap."""
        left, top, width, height = bounds
        inter_left = max(self.left, left)
        inter_top = max(self.top, top)
        inter_right = min(self.right, left + width)
        inter_bottom = min(self.bottom, top + height)
        return inter_left < inter_right and inter_top < inter_bottom

    def rect(self) -> pygame.Rect:
        return pygame.Rect(round(self.left), round(self.top), round(self.width), round(self.height))


# Background image of every location; ``None`` marks a location with no artwork yet.
_BACKGROUNDS: tuple[tuple[Location, str | None], ...] = (
    (Location.CORTILE, "cortile.png"),
    (Location.SCALE_DI_ENTRATA, "scale1.png"),
    (Location.SCALE_PRINCIPALI, "scale2.png"),
    (Location.CORRIDOIO_ELEMENTARI_1, None),
    (Location.CORRIDOIO_ELEMENTARI_2, None),
    (Location.CORRIDOIO_ELEMENTARI_3, None),
    (Location.CORRIDOIO_MEDIE_1, None),
    (Location.CORRIDOIO_MEDIE_2, None),
)


def _blit_scaled(surface: pygame.Surface, image: pygame.Surface) -> None:
    surface.blit(pygame.transform.scale(image, surface.get_size()), (0, 0))


class InGame:
    """The playing scene, its transitions, sounds and collision geometry."""

    continue_text = "Clicca ENTER per continuare"
    transition_duration = 1.0
    intro_delay = 3.0

    def __init__(self, asset_dir="assets") -> None:
        self.asset_dir = Path(asset_dir)
        self.story_image: pygame.Surface | None = None
        self.chapter_image: pygame.Surface | None = None
        self.backgrounds: dict[Location, pygame.Surface] = {}
        self.scene_state = InGameState.STORIA
        self.current_location = Location.CORTILE
        self.target_location = Location.CORTILE
        self.transitioning = False
        self.fade_out_phase = False
        self.transition_timer = 0.0
        self.overlay_alpha = 0
        self.intro_started = False
        self.ambience_loaded = False
        self.ambience_playing = False
        self.colliders: list[Collider] = []
        self.window_size: tuple[int, int] = (0, 0)
        self.font = None
        self._lock = threading.RLock()
        self._intro_timer: threading.Timer | None = None

        self.load_background("TramaInit.png")
        self.load_ambience()
        self.play_bell_loop()
        self.font = self._load_font("AFont.ttf")

    # -- asset loading -------------------------------------------------

    def _path(self, name) -> Path:
        return self.asset_dir / name

    def _load_image(self, name) -> pygame.Surface | None:
        path = self._path(name)
        try:
            return pygame.image.load(str(path))
        except (FileNotFoundError, pygame.error) as exc:
            log.error("Cannot load image %s: %s", path, exc)
            return None

    def _load_font(self, name):
        path = self._path(name)
        if not path.is_file():
            log.error("Cannot load the in-game font %s", path)
            return None
        try:
            if not pygame.font.get_init():
                pygame.font.init()
            return pygame.font.Font(str(path), TEXT_SIZE)
        except (OSError, pygame.error) as exc:
            log.error("Cannot load the in-game font %s: %s", path, exc)
            return None

    def _load_sound(self, name) -> pygame.mixer.Sound | None:
        path = self._path(name)
        if not pygame.mixer.get_init():
            log.error("Audio is not available; cannot load %s", path)
            return None
        try:
            return pygame.mixer.Sound(str(path))
        except (FileNotFoundError, pygame.error) as exc:
            log.error("Cannot load sound %s: %s", path, exc)
            return None

    def load_background(self, filename) -> bool:
        """Load the story background; return whether it succeeded."""
        image = self._load_image(filename)
        if image is None:
            return False
        self.story_image = image
        return True

    def create_backgrounds(self) -> bool:
        """Load the background of every location, logging the missing ones."""
        for number, (location, filename) in enumerate(_BACKGROUNDS, start=1):
            image = self._load_image(filename) if filename else None
            if image is None:
                log.error("File %d not found", number)
            else:
                self.backgrounds[location] = image
        return True

    # -- sound ---------------------------------------------------------

    @staticmethod
    def _play_and_wait(sound: pygame.mixer.Sound) -> None:
        channel = sound.play()
        while channel is not None and channel.get_busy():
            time.sleep(POLL_INTERVAL)

    def play_bell_loop(self) -> None:
        """Ring the bell twelve times in the background."""
        bell = self._load_sound("suoni/campana.ogg")
        if bell is None:
            return

        def ring() -> None:
            for _ in range(BELL_RINGS):
                self._play_and_wait(bell)

        threading.Thread(target=ring, daemon=True).start()

    def load_ambience(self) -> None:
        path = self._path("suoni/night-ambience-normal.mp3")
        self.ambience_loaded = False
        if not pygame.mixer.get_init():
            log.error("Audio is not available; cannot load the ambience")
            return
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.set_volume(0.4)
            self.ambience_loaded = True
        except (FileNotFoundError, pygame.error) as exc:
            log.error("Cannot load the ambience %s: %s", path, exc)

    def play_ambience(self) -> None:
        """Start the looping ambience once."""
        if self.ambience_playing:
            return
        if self.ambience_loaded and pygame.mixer.get_init():
            pygame.mixer.music.play(-1)
        self.ambience_playing = True

    # -- transitions ---------------------------------------------------

    def start_transition(self, location: Location) -> None:
        """Begin a fade towards ``location``."""
        with self._lock:
            self.transitioning = True
            self.transition_timer = 0.0
            self.target_location = location
            self.fade_out_phase = False
        if location is Location.CORTILE:
            self.load_ambience()
            self.play_ambience()

    def update_game_scene(self, dt: float) -> None:
        """Advance a running fade by ``dt`` seconds."""
        with self._lock:
            if not self.transitioning:
                return
            self.transition_timer += dt
            progress = min(self.transition_timer / self.transition_duration, 1.0)
            if not self.fade_out_phase:
                self.overlay_alpha = int(255 * progress)
                if self.transition_timer >= self.transition_duration:
                    self.current_location = self.target_location
                    self.fade_out_phase = True
                    self.transition_timer = 0.0
            else:
                self.overlay_alpha = int(255 * (1 - progress))
                if self.transition_timer >= self.transition_duration:
                    self.transitioning = False
                    self.fade_out_phase = False
                    self.transition_timer = 0.0
                    self.overlay_alpha = 0

    def draw_scene(self, surface: pygame.Surface) -> None:
        self.update_game_scene(FRAME_STEP)

    # -- drawing -------------------------------------------------------

    def _draw_overlay(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, self.overlay_alpha))
        surface.blit(overlay, (0, 0))

    def draw(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        if self.scene_state is InGameState.STORIA:
            if self.story_image is not None:
                _blit_scaled(surface, self.story_image)
            if self.font is not None:
                text = self.font.render(self.continue_text, True, WHITE)
                surface.blit(text, (width / 2, height * 0.8))
        elif self.scene_state is InGameState.CAP1_INTRO:
            self.draw_chapter_intro(surface)
            self.start_chapter_intro()
        elif self.scene_state is InGameState.TRANSITION_TO_CORTILE:
            self.transition_timer += FRAME_STEP
            progress = min(self.transition_timer / self.transition_duration, 1.0)
            self.overlay_alpha = int(255 * progress)
            self._draw_overlay(surface)
            if progress >= 1.0:
                self.scene_state = InGameState.CORTILE
                self.overlay_alpha = 0
        elif self.scene_state is InGameState.CORTILE:
            self.draw_courtyard(surface)
            self.play_ambience()

    def start_chapter_intro(self) -> None:
        """Play the chapter jingle once, then fade to the courtyard."""
        if not self.intro_started:
            sound = self._load_sound("suoni/introCapitolo.ogg")
            if sound is not None:
                sound.set_volume(0.3)

                def run() -> None:
                    self._play_and_wait(sound)
                    time.sleep(POLL_INTERVAL)
                    self.start_transition(Location.CORTILE)

                threading.Thread(target=run, daemon=True).start()
        self.intro_started = True

    def draw_chapter_intro(self, surface: pygame.Surface) -> None:
        if self.chapter_image is None:
            self.chapter_image = self._load_image("cap1.png")
            if self.chapter_image is None:
                return
        _blit_scaled(surface, self.chapter_image)
        if not self.intro_started and self._intro_timer is None:
            self._intro_timer = threading.Timer(
                self.intro_delay, self.start_transition, args=(Location.CORTILE,)
            )
            self._intro_timer.daemon = True
            self._intro_timer.start()

    def draw_courtyard(self, surface: pygame.Surface) -> None:
        image = self.backgrounds.get(Location.CORTILE)
        if image is not None:
            _blit_scaled(surface, image)

    # -- colliders -----------------------------------------------------

    def create_colliders(self, window_size) -> None:
        """Add floor, stairs and wall colliders sized for ``window_size``."""
        width, height = window_size
        self.window_size = (width, height)
        self.colliders.extend(
            [
                Collider(0.0, height * 0.9, width, height * 0.1),
                Collider(width * 0.4, height * 0.7, width * 0.2, height * 0.2),
                Collider(0.0, 0.0, width * 0.1, height),
                Collider(width * 0.9, 0.0, width * 0.1, height),
            ]
        )

    def update_colliders(self, window_size) -> None:
        """Rebuild the colliders when the window size has changed."""
        size = tuple(window_size)
        if size != self.window_size:
            self.colliders.clear()
            self.create_colliders(size)

    def check_collision(self, player_bounds) -> CollisionType:
        """Classify the first collider that overlaps ``(left, top, width, height)``."""
        width, height = self.window_size
        player_top = player_bounds[1]
        for collider in self.colliders:
            if not collider.intersects(player_bounds):
                continue
            if collider.left == 0.0:
                return CollisionType.LEFT_WALL
            if collider.right == width:
                return CollisionType.RIGHT_WALL
            if collider.bottom == height:
                return CollisionType.GROUND
            if collider.top < player_top:
                return CollisionType.STAIRS
        return CollisionType.NONE

    def draw_colliders(self, surface: pygame.Surface) -> None:
        for collider in self.colliders:
            pygame.draw.rect(surface, WHITE, collider.rect())