"""The loading screen with a spinning throbber."""

from __future__ import annotations

import math

import pygame

WHITE = (255, 255, 255)


class LoadingScreen:
    """Background, rotating throbber and a "loading" caption."""

    text = "Caricamento..."
    rotation_speed = 180.0
    throbber_radius = 30.0
    throbber_points = 10
    outline_thickness = 5

    def __init__(self, font, background: pygame.Surface | None = None) -> None:
        self.font = font
        self.background = background
        self.angle = 0.0
        self.throbber_position = pygame.Vector2(0, 0)
        self.text_position = pygame.Vector2(1280 // 3 - 100, 720 // 3)

    def update(self, dt: float) -> None:
        """Spin the throbber; the angle stays within [0, 360)."""
        self.angle = (self.angle + self.rotation_speed * dt) % 360.0

    def _throbber_polygon(self) -> list[tuple[float, float]]:
        centre = self.throbber_position
        rotation = math.radians(self.angle)
        points = []
        for index in range(self.throbber_points):
            theta = index * 2 * math.pi / self.throbber_points - math.pi / 2 + rotation
            points.append(
                (
                    centre.x + self.throbber_radius * math.cos(theta),
                    centre.y + self.throbber_radius * math.sin(theta),
                )
            )
        return points

    def draw(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        self.throbber_position = pygame.Vector2(width / 2, height / 2)
        text_width = self.font.size(self.text)[0]
        self.text_position = pygame.Vector2(width / 2 - text_width / 2, height / 3)

        if self.background is not None:
            surface.blit(pygame.transform.scale(self.background, (width, height)), (0, 0))
        pygame.draw.polygon(surface, WHITE, self._throbber_polygon(), self.outline_thickness)
        surface.blit(
            self.font.render(self.text, True, WHITE),
            (self.text_position.x, self.text_position.y),
        )