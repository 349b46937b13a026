import pygame
import pytest

from spacewar.bullet import Bullet
from spacewar.constants import WINDOW_HEIGHT, WINDOW_WIDTH


def make_bullet(x=100.0, y=100.0, vx=0.0, vy=-1.0):
    return Bullet((x, y), (vx, vy), (10, 10))


def test_update_moves_by_velocity_times_time():
    bullet = make_bullet(vx=0.5, vy=-1.0)
    bullet.update(10)
    assert bullet.position == (pytest.approx(105), pytest.approx(90))


def test_zero_time_does_not_move():
    bullet = make_bullet()
    bullet.update(0)
    assert bullet.position == (100.0, 100.0)


@pytest.mark.parametrize(
    "x, y",
    [(0, 0), (WINDOW_WIDTH, WINDOW_HEIGHT), (WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2)],
)
def test_on_screen_including_edges(x, y):
    assert not make_bullet(x, y).is_off_screen()


@pytest.mark.parametrize(
    "x, y",
    [(-0.5, 10), (WINDOW_WIDTH + 0.5, 10), (10, -0.5), (10, WINDOW_HEIGHT + 0.5)],
)
def test_off_screen_outside_any_edge(x, y):
    assert make_bullet(x, y).is_off_screen()


def test_mark_for_removal_sets_flag():
    bullet = make_bullet()
    assert not bullet.marked_for_removal
    bullet.mark_for_removal()
    assert bullet.marked_for_removal


def test_bounds_centred_on_position():
    bullet = make_bullet(50, 60)
    box = bullet.bounds()
    assert box.contains(50, 60)
    assert box.left + box.width / 2 == pytest.approx(50)
    assert box.top + box.height / 2 == pytest.approx(60)


def test_bounds_follow_movement():
    bullet = make_bullet(50, 60)
    before = bullet.bounds()
    bullet.update(5)
    after = bullet.bounds()
    assert after.top == pytest.approx(before.top - 5)
    assert after.width == pytest.approx(before.width)


def test_draw_paints_at_position():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    surface.fill((0, 0, 0))
    image = pygame.Surface((10, 10))
    image.fill((255, 255, 255))
    make_bullet(50, 50).draw(surface, image)
    assert surface.get_at((50, 50))[:3] == (255, 255, 255)
    assert surface.get_at((80, 80))[:3] == (0, 0, 0)