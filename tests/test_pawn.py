import pygame
import pytest

from scuolagame.pawn import Pawn


def test_defaults_come_from_the_source():
    pawn = Pawn()
    assert (pawn.size, pawn.speed, pawn.gravity) == (50.0, 100.0, 9.81)
    assert pawn.velocity_y == 0.0


def test_move_scales_by_speed_and_time():
    pawn = Pawn(size=10, speed=30)
    pawn.position = (5, 5)
    pawn.move((1, 0), 1.0)
    assert pawn.position == pygame.Vector2(35, 5)


def test_move_round_trip_returns_to_start():
    pawn = Pawn(speed=42)
    pawn.position = (12, 34)
    pawn.move((0.6, -0.8), 0.25)
    pawn.move((-0.6, 0.8), 0.25)
    assert pawn.position.x == pytest.approx(12)
    assert pawn.position.y == pytest.approx(34)


def test_gravity_ignored_when_at_rest():
    pawn = Pawn()
    pawn.position = (100, 100)
    pawn.apply_gravity(0.5)
    assert pawn.position == pygame.Vector2(100, 100)
    assert pawn.velocity_y == 0.0


def test_gravity_accelerates_a_moving_pawn_downwards():
    pawn = Pawn()
    pawn.position = (100, 100)
    pawn.velocity_y = 1.0
    pawn.apply_gravity(0.1)
    assert pawn.velocity_y > 1.0
    first_y = pawn.position.y
    assert first_y > 100
    pawn.apply_gravity(0.1)
    assert pawn.position.y - first_y > first_y - 100


def test_bounds_are_centred_on_position():
    pawn = Pawn(size=20)
    pawn.position = (100, 60)
    left, top, width, height = pawn.bounds
    assert (width, height) == (20, 20)
    assert left + width / 2 == 100
    assert top + height / 2 == 60


def test_land_on_ground_places_pawn_and_stops_it():
    pawn = Pawn(size=50)
    pawn.position = (77, 10)
    pawn.velocity_y = 30.0
    pawn.land_on_ground((800, 600))
    assert pawn.position == pygame.Vector2(77, 490)
    assert pawn.velocity_y == 0.0


def test_set_default_position():
    pawn = Pawn()
    pawn.set_default_position((800, 1000))
    assert pawn.position == pygame.Vector2(10, 400)


def test_draw_paints_green_square():
    surface = pygame.Surface((100, 100))
    pawn = Pawn(size=20)
    pawn.position = (50, 50)
    pawn.draw(surface)
    assert surface.get_at((50, 50))[:3] == (0, 255, 0)
    assert surface.get_at((5, 5))[:3] == (0, 0, 0)