from types import SimpleNamespace

import pygame
import pytest

from spacerocks.geometry import Bounds
from spacerocks.imageset import FrameSet, ImageSet
from spacerocks.menus import GameOverMenu, WelcomeMenu, cycle_color
from spacerocks.shot import Shot


@pytest.fixture
def images():
    sheet = pygame.Surface((70, 70))
    sheet.fill((10, 10, 10))
    return ImageSet(
        sheet,
        2,
        20,
        20,
        [FrameSet(0, 2, 20, 20), FrameSet(1, 2, 20, 20), FrameSet(2, 2, 20, 20)],
    )


@pytest.mark.parametrize(
    "value, rising, expected",
    [
        (0, True, (1, True)),
        (254, True, (255, False)),
        (255, False, (254, False)),
        (1, False, (0, True)),
    ],
)
def test_cycle_color_steps(value, rising, expected):
    assert cycle_color(value, rising) == expected


def test_cycle_color_full_cycle_returns_to_start():
    value, rising = 0, True
    seen = set()
    for _ in range(510):
        value, rising = cycle_color(value, rising)
        seen.add(value)
    assert (value, rising) == (0, True)
    assert min(seen) == 0
    assert max(seen) == 255


def test_welcome_title_color_starts_blue_and_shifts(images):
    menu = WelcomeMenu(images, Bounds())
    assert menu.title_color == (0, 0, 255)
    menu.update(0, 0)
    assert menu.title_color == (0, 1, 254)


def test_welcome_hover_follows_mouse(images):
    menu = WelcomeMenu(images, Bounds())
    menu.update(200, 260)
    assert menu.mouse_button.hovered is True
    assert menu.keyboard_button.hovered is False
    menu.update(530, 260)
    assert menu.mouse_button.hovered is False
    assert menu.keyboard_button.hovered is True


def test_welcome_rocks_drift(images):
    menu = WelcomeMenu(images, Bounds())
    assert len(menu.rocks) == 5
    before = [(rock.x, rock.y) for rock in menu.rocks]
    menu.update(0, 0)
    after = [(rock.x, rock.y) for rock in menu.rocks]
    for (bx, by), (ax, ay), rock in zip(before, after, menu.rocks):
        assert ax == pytest.approx(bx + rock.vx)
        assert ay == pytest.approx(by + rock.vy)


def test_welcome_draw_paints_buttons(images):
    menu = WelcomeMenu(images, Bounds())
    surface = pygame.Surface((800, 600))
    menu.draw(surface, None, True)
    assert tuple(surface.get_at((172, 252)))[:3] == (0, 0, 255)
    assert tuple(surface.get_at((502, 252)))[:3] == (0, 0, 255)


def test_game_over_ship_launches_after_delay(images):
    target = SimpleNamespace(x=0.0, y=0.0)
    menu = GameOverMenu(images, images, Bounds(), target, 10.0)
    shots = [Shot(Bounds()) for _ in range(5)]
    for _ in range(30):
        menu.update(400, 500, shots)
        assert menu.bad_ship.in_play is False
    menu.update(400, 500, shots)
    assert menu.bad_ship.in_play is True
    assert menu.bad_ship.x == pytest.approx(-45.0)
    assert (target.x, target.y) == (400.0, 500.0)


def test_game_over_ship_fires_towards_mouse(images):
    target = SimpleNamespace(x=0.0, y=0.0)
    menu = GameOverMenu(images, images, Bounds(), target, 10.0)
    shots = [Shot(Bounds()) for _ in range(5)]
    fired = False
    for _ in range(150):
        if menu.update(400, 500, shots):
            fired = True
            break
    assert fired
    flying = [shot for shot in shots if shot.in_air]
    assert len(flying) == 1
    shot = flying[0]
    assert (shot.vx ** 2 + shot.vy ** 2) ** 0.5 == pytest.approx(10.0)
    assert shot.vx > 0.0 and shot.vy > 0.0


def test_game_over_without_target_never_fires(images):
    menu = GameOverMenu(images, images, Bounds(), None, 10.0)
    shots = [Shot(Bounds()) for _ in range(5)]
    results = [menu.update(400, 500, shots) for _ in range(120)]
    assert not any(results)
    assert not any(shot.in_air for shot in shots)


def test_game_over_draw_paints_buttons(images):
    menu = GameOverMenu(images, images, Bounds(), SimpleNamespace(x=0.0, y=0.0), 10.0)
    surface = pygame.Surface((800, 600))
    menu.draw(surface, None, [], images, False)
    assert tuple(surface.get_at((372, 302)))[:3] == (0, 0, 255)
    assert tuple(surface.get_at((372, 352)))[:3] == (0, 0, 255)