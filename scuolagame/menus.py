"""Keyboard-driven menus: the main menu and the options screen."""

from __future__ import annotations

import pygame

WHITE = (255, 255, 255)
RED = (255, 0, 0)
SLIDER_COLOR = (180, 180, 180)


class _SelectableList:
    """A vertical list of labels with one highlighted entry."""

    items: tuple[str, ...] = ()
    character_size = 0

    def __init__(self, font) -> None:
        self.font = font
        self.selected = 0
        self.positions = [pygame.Vector2(0, 0) for _ in self.items]

    @property
    def item_colors(self) -> list[tuple[int, int, int]]:
        return [RED if index == self.selected else WHITE for index in range(len(self.items))]

    def _step(self, delta: int) -> None:
        target = self.selected + delta
        if 0 <= target < len(self.items):
            self.selected = target

    def _text_width(self, text: str) -> float:
        return self.font.size(text)[0]

    def _draw_items(self, surface: pygame.Surface) -> None:
        for item, position, color in zip(self.items, self.positions, self.item_colors):
            surface.blit(self.font.render(item, True, color), (position.x, position.y))


class MainMenu(_SelectableList):
    """The title screen menu: play, options, quit."""

    items = ("Gioca", "Opzioni", "Esci")
    character_size = 50
    row_gap = 20

    def __init__(self, font) -> None:
        super().__init__(font)

    def move_up(self) -> None:
        """Highlight the previous entry, if there is one."""
        self._step(-1)

    def move_down(self) -> None:
        """Highlight the next entry, if there is one."""
        self._step(1)

    def layout(self, window_size) -> None:
        width, height = window_size
        self.positions = [
            pygame.Vector2(
                width / 4 - self._text_width(item) / 2,
                height * 0.6 + index * (self.character_size + self.row_gap),
            )
            for index, item in enumerate(self.items)
        ]

    def draw(self, surface: pygame.Surface) -> None:
        self.layout(surface.get_size())
        self._draw_items(surface)


class OptionsMenu(_SelectableList):
    """The options screen with a background and a volume slider."""

    items = ("Audio", "Video", "Controlli", "Fullscreen", "Indietro")
    character_size = 40
    row_gap = 15
    slider_size = (200.0, 10.0)
    knob_radius = 8.0

    def __init__(self, font, background: pygame.Surface | None = None) -> None:
        super().__init__(font)
        self.background = background
        self.positions = [
            pygame.Vector2(1280 // 2 - 100, 200 + index * 50) for index in range(len(self.items))
        ]
        self.slider_position = pygame.Vector2(1280 // 2 - 100, 400)
        self.knob_position = self._knob_for(self.slider_position)

    def move_up(self) -> None:
        """Highlight the previous option, if there is one."""
        self._step(-1)

    def move_down(self) -> None:
        """Highlight the next option, if there is one."""
        self._step(1)

    def _knob_for(self, bar: pygame.Vector2) -> pygame.Vector2:
        bar_width, bar_height = self.slider_size
        return pygame.Vector2(bar.x + bar_width * 0.5, bar.y + bar_height / 2)

    def layout(self, window_size) -> None:
        width, height = window_size
        self.positions = [
            pygame.Vector2(
                width / 2 - self._text_width(item) / 2,
                height * 0.3 + index * (self.character_size + self.row_gap),
            )
            for index, item in enumerate(self.items)
        ]
        self.slider_position = pygame.Vector2(width / 2 - self.slider_size[0] / 2, height * 0.6)
        self.knob_position = self._knob_for(self.slider_position)

    def draw(self, surface: pygame.Surface) -> None:
        size = surface.get_size()
        self.layout(size)
        if self.background is not None:
            surface.blit(pygame.transform.scale(self.background, size), (0, 0))
        self._draw_items(surface)
        bar = pygame.Rect(
            round(self.slider_position.x),
            round(self.slider_position.y),
            round(self.slider_size[0]),
            round(self.slider_size[1]),
        )
        pygame.draw.rect(surface, SLIDER_COLOR, bar)
        pygame.draw.circle(surface, RED, self.knob_position, self.knob_radius)