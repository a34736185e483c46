"""The player-controlled pawn: a square that walks and falls."""

from __future__ import annotations

import logging

import pygame

log = logging.getLogger(__name__)

PAWN_COLOR = (0, 255, 0)
GROUND_RATIO = 0.9
DEFAULT_X = 10.0
DEFAULT_Y_OFFSET = 600.0
GRAVITY_FACTOR = 10.0


class Pawn:
    """A square pawn positioned by its centre."""

    def __init__(self, size: float = 50.0, speed: float = 100.0, gravity: float = 9.81) -> None:
        self.size = float(size)
        self.speed = float(speed)
        self.gravity = float(gravity)
        self.velocity_y = 0.0
        self.color = PAWN_COLOR
        self._position = pygame.Vector2(0.0, 0.0)

    @property
    def position(self) -> pygame.Vector2:
        """Centre of the pawn."""
        return pygame.Vector2(self._position)

    @position.setter
    def position(self, value) -> None:
        self._position = pygame.Vector2(value)
        log.debug("Player position updated: %s, %s", self._position.x, self._position.y)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box as (left, top, width, height)."""
        half = self.size / 2
        return (self._position.x - half, self._position.y - half, self.size, self.size)

    def move(self, direction, delta_time: float) -> None:
        """Move along ``direction`` at the pawn's speed for ``delta_time`` seconds."""
        self._position += pygame.Vector2(direction) * self.speed * delta_time

    def apply_gravity(self, dt: float) -> None:
        """Accelerate and move vertically; a pawn at rest is left alone."""
        if self.velocity_y == 0.0:
            return
        self.velocity_y += self.gravity * dt * GRAVITY_FACTOR
        self._position.y += self.velocity_y * dt

    def draw(self, surface: pygame.Surface) -> None:
        left, top, width, height = self.bounds
        rect = pygame.Rect(round(left), round(top), round(width), round(height))
        pygame.draw.rect(surface, self.color, rect)

    def set_default_position(self, window_size) -> None:
        """Place the pawn at its starting spot for a window of ``window_size``."""
        _, height = window_size
        self.position = (DEFAULT_X, height - DEFAULT_Y_OFFSET)

    def land_on_ground(self, window_size) -> None:
        """Put the pawn on the floor line and stop its vertical motion."""
        _, height = window_size
        ground_y = height * GROUND_RATIO
        self.position = (self._position.x, ground_y - self.size)
        self.velocity_y = 0.0
        log.debug(
            "Player collision with ground. Position updated to: %s, %s",
            self._position.x,
            self._position.y,
        )