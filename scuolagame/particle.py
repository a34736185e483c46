"""Drifting decorative particles for the main menu."""

from __future__ import annotations

import random

import pygame

COLOR_BASE = 200
COLOR_RANGE = 56


class Particle:
    """A small circle moving at constant velocity."""

    def __init__(self, radius: float, position, velocity, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self.radius = float(radius)
        self.position = pygame.Vector2(position)
        self.velocity = pygame.Vector2(velocity)
        self.color: tuple[int, ...] = tuple(
            COLOR_BASE + rng.randrange(COLOR_RANGE) for _ in range(3)
        )

    def update(self, dt: float) -> None:
        self.position += self.velocity * dt

    def wrap(self, width: float, height: float) -> None:
        """Move a particle that has left the area to the opposite edge."""
        if self.position.x < 0:
            self.position.x = width
        if self.position.x > width:
            self.position.x = 0
        if self.position.y < 0:
            self.position.y = height
        if self.position.y > height:
            self.position.y = 0

    def draw(self, surface: pygame.Surface) -> None:
        if len(self.color) == 4 and self.color[3] < 255:
            diameter = max(1, int(self.radius * 2) + 1)
            sprite = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
            pygame.draw.circle(sprite, self.color, (diameter / 2, diameter / 2), self.radius)
            surface.blit(sprite, (self.position.x - diameter / 2, self.position.y - diameter / 2))
        else:
            pygame.draw.circle(surface, self.color[:3], self.position, self.radius)