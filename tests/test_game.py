import random

import pygame
import pytest

from spacerocks.badship import BadShipData
from spacerocks.game import Game, SoundEvent
from spacerocks.geometry import Bounds
from spacerocks.imageset import FrameSet, ImageSet
from spacerocks.levels import GameSettings, LevelData
from spacerocks.rock import RockData


def _sheet(sets, color=(255, 255, 255)):
    image = pygame.Surface((200, 200))
    image.fill(color)
    return ImageSet(image, 4, 40, 40, sets)


def _ship_sheet():
    return _sheet(
        [FrameSet(0, 1, 20, 20), FrameSet(1, 2, 20, 20), FrameSet(2, 3, 20, 20)]
    )


def _rock_sheet():
    return _sheet(
        [FrameSet(0, 1, 40, 40), FrameSet(1, 1, 20, 20), FrameSet(2, 1, 10, 10)]
    )


def _make_game(levels=None, settings=None):
    if levels is None:
        levels = [
            LevelData([RockData(0, 1, 10.0, 10.0, 0.0, 0.0)], []),
            LevelData(
                [RockData(0, 1, 10.0, 10.0, 0.0, 0.0), RockData(0, 1, 700.0, 10.0, 0.0, 0.0)],
                [],
            ),
        ]
    if settings is None:
        settings = GameSettings()
    return Game(
        settings,
        levels,
        _ship_sheet(),
        _sheet([FrameSet(0, 1, 30, 30)]),
        _rock_sheet(),
        _sheet([FrameSet(0, 1, 4, 4)]),
        Bounds(),
        random.Random(1),
    )


def test_start_level_builds_rocks_from_level_data():
    game = _make_game()
    game.start_level(1)
    assert game.level_num == 1
    assert [(r.x, r.y) for r in game.rocks] == [(10.0, 10.0), (700.0, 10.0)]
    assert game.level_label == "Level 1"


def test_start_level_out_of_range():
    game = _make_game()
    with pytest.raises(IndexError):
        game.start_level(5)


def test_no_levels_rejected():
    with pytest.raises(ValueError):
        _make_game(levels=[])


def test_fire_player_shot_until_all_in_air():
    settings = GameSettings(max_shots=2)
    game = _make_game(settings=settings)
    assert game.fire_player_shot() is True
    assert game.fire_player_shot() is True
    assert game.fire_player_shot() is False
    assert all(shot.in_air for shot in game.shots)
    assert game.sounds.count(SoundEvent.PLAYER_FIRE) == 2


def test_hyperjump_stays_inside_margins():
    game = _make_game()
    for _ in range(50):
        game.hyperjump()
        assert 50 <= game.ship.x < game.bounds.right - 50
        assert 50 <= game.ship.y < game.bounds.bottom - 50


def test_shot_hitting_rock_scores_and_splits():
    levels = [LevelData([RockData(0, 1, 100.0, 100.0, 0.0, 0.0)], [])]
    game = _make_game(levels=levels)
    game.shots[0].launch(120.0, 120.0, 0.0, 0.0)
    assert game.update() is True
    assert game.score == 100
    assert len(game.rocks) == 2
    assert game.shots[0].in_air is False
    assert SoundEvent.EXPLOSION in game.sounds
    assert all(rock.set_num == 1 for rock in game.rocks)


def test_ship_hitting_rock_scores_rock_value():
    settings = GameSettings(rock_values=(7, 8, 9))
    levels = [LevelData([RockData(0, 1, 380.0, 280.0, 0.0, 0.0)], [])]
    game = _make_game(levels=levels, settings=settings)
    game.update()
    assert game.ship.killed
    assert game.score == settings.rock_values[0]


def test_lost_ship_is_replaced_after_delay():
    levels = [LevelData([RockData(0, 1, 380.0, 280.0, 0.0, 0.0)], [])]
    game = _make_game(levels=levels)
    start = game.ships_left
    for _ in range(300):
        game.update()
        game.draw(None, True)
        if game.ships_left < start:
            break
    assert game.ships_left == start - 1
    assert game.ship.in_play
    assert (game.ship.x, game.ship.y) == game.bounds.center()


def test_game_over_when_no_ships_left():
    levels = [LevelData([RockData(0, 1, 380.0, 280.0, 0.0, 0.0)], [])]
    game = _make_game(levels=levels)
    game.ships_left = 0
    results = []
    for _ in range(300):
        running = game.update()
        results.append(running)
        if not running:
            break
        game.draw(None, True)
    assert results[-1] is False
    assert game.ships_left < 0


def test_cleared_level_moves_to_next():
    game = _make_game()
    for rock in game.rocks:
        rock.in_play = False
    for _ in range(300):
        game.update()
        if game.level_num == 1:
            break
    assert game.level_num == 1
    assert len(game.rocks) == len(game.levels[1].rocks)


def test_last_level_repeats():
    game = _make_game()
    game.start_level(1)
    for rock in game.rocks:
        rock.in_play = False
    for _ in range(150):
        game.update()
    assert game.level_num == 1
    assert any(rock.in_play for rock in game.rocks)


def test_extra_ship_when_crossing_points_threshold():
    settings = GameSettings(points_per_ship=1000)
    levels = [LevelData([RockData(0, 1, 100.0, 100.0, 0.0, 0.0)], [])]
    game = _make_game(levels=levels, settings=settings)
    game.score = 950
    before = game.ships_left
    game.shots[0].launch(120.0, 120.0, 0.0, 0.0)
    game.update()
    assert game.ships_left == before + 1


def test_keyboard_rotation():
    game = _make_game()
    game.rotate = 1
    game.update()
    game.update()
    assert game.ship.rotation == -10.0
    game.rotate = -1
    game.update()
    assert game.ship.rotation == -5.0


def test_rotation_ignored_under_mouse_control():
    game = _make_game()
    game.mouse_control = True
    game.rotate = 1
    game.update()
    assert game.ship.rotation == 0.0


def test_bad_ship_launches_and_fires():
    bad = BadShipData(0, 2, 3, 5, 0.0, 500.0, 1.0, 0.0)
    levels = [LevelData([RockData(0, 1, 10.0, 10.0, 0.0, 0.0)], [bad])]
    game = _make_game(levels=levels)
    for _ in range(10):
        game.update()
    assert game.current_bad_ship.in_play
    assert SoundEvent.ENEMY_FIRE in game.sounds
    assert any(shot.in_air for shot in game.bad_shots)


def test_new_game_resets_state():
    game = _make_game()
    game.start_level(1)
    game.ships_left = 0
    game.score = 500
    game.new_game()
    assert game.level_num == 0
    assert game.ships_left == 3
    assert game.score == 0
    assert game.ship.in_play


def test_draw_shows_spare_ship_icons():
    game = _make_game()
    game.level_display_index = 100
    surface = pygame.Surface((800, 600))
    surface.fill((0, 0, 0))
    game.draw(surface, False)
    assert surface.get_at((45, 25))[:3] == (255, 255, 255)
    assert surface.get_at((45 + 26 * 3, 25))[:3] == (0, 0, 0)