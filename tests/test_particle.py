import random

import pygame
import pytest

from scuolagame.particle import Particle


def test_color_channels_are_light_grey_to_white():
    rng = random.Random(1)
    for _ in range(50):
        particle = Particle(2, (0, 0), (0, 0), rng)
        assert len(particle.color) == 3
        assert all(200 <= channel <= 255 for channel in particle.color)


def test_color_is_deterministic_for_a_seed():
    first = Particle(1, (0, 0), (0, 0), random.Random(7))
    second = Particle(1, (0, 0), (0, 0), random.Random(7))
    assert first.color == second.color


def test_update_moves_by_velocity_times_dt():
    particle = Particle(1, (10, 20), (3, -4), random.Random(0))
    particle.update(1.0)
    assert particle.position == pygame.Vector2(13, 16)
    particle.update(0.0)
    assert particle.position == pygame.Vector2(13, 16)


@pytest.mark.parametrize(
    "start, expected",
    [
        ((-1, 50), (100, 50)),
        ((101, 50), (0, 50)),
        ((50, -1), (50, 80)),
        ((50, 81), (50, 0)),
        ((50, 40), (50, 40)),
    ],
)
def test_wrap_moves_to_opposite_edge(start, expected):
    particle = Particle(1, start, (0, 0), random.Random(0))
    particle.wrap(100, 80)
    assert particle.position == pygame.Vector2(expected)


def test_draw_paints_particle_color_at_centre():
    surface = pygame.Surface((20, 20))
    particle = Particle(3, (10, 10), (0, 0), random.Random(3))
    particle.draw(surface)
    assert surface.get_at((10, 10))[:3] == particle.color
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)


def test_draw_translucent_particle_blends():
    surface = pygame.Surface((20, 20))
    particle = Particle(3, (10, 10), (0, 0), random.Random(3))
    particle.color = (255, 255, 255, 127)
    particle.draw(surface)
    red = surface.get_at((10, 10))[0]
    assert 0 < red < 255