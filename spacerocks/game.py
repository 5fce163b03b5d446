"""The in-play game: the player's ship, rocks, enemy ships, shots and scoring."""

from __future__ import annotations

import random
from enum import Enum
from typing import Sequence

import pygame

from .badship import BadShip, BadShipData
from .geometry import Bounds
from .levels import GameSettings, LevelData
from .rock import Rock
from .ship import Ship
from .shot import Shot

SHIPS_AT_START = 3
MAX_BAD_SHOTS = 5
ROTATE_STEP = 5.0
RESPAWN_DELAY = 100
LEVEL_DISPLAY_LIMIT = 100
HYPERJUMP_MARGIN = 50
LIVES_X = 40.0
LIVES_Y = 20.0
LIVES_SPACING = 26.0
LEVEL_LABEL_Y = 40.0
LEVEL_LABEL_SIZE = 25
LEVEL_LABEL_COLOR = (255, 0, 0)


class SoundEvent(Enum):
    """Sounds the game asks to be played."""

    PLAYER_FIRE = "player_fire"
    ENEMY_FIRE = "enemy_fire"
    EXPLOSION = "explosion"


class Game:
    """One game in progress, advanced a frame at a time by :meth:`update`."""

    def __init__(
        self,
        settings: GameSettings,
        levels: Sequence[LevelData],
        ship_images,
        bad_images,
        rock_images,
        shot_images,
        bounds: Bounds = Bounds(),
        rng: random.Random | None = None,
    ) -> None:
        if not levels:
            raise ValueError("a game needs at least one level")
        if settings.points_per_ship <= 0:
            raise ValueError(
                f"points per ship must be positive, got {settings.points_per_ship}"
            )
        self.settings = settings
        self.levels = list(levels)
        self.ship_images = ship_images
        self.bad_images = bad_images
        self.rock_images = rock_images
        self.shot_images = shot_images
        self.bounds = bounds
        self.rng = rng if rng is not None else random.Random()

        self.ship = Ship(
            ship_images,
            0,
            1,
            2,
            settings.max_speed,
            settings.accel,
            settings.decel,
            bounds,
            settings.shot_speed,
        )
        self.ship.reset()

        self.shots = [Shot(bounds) for _ in range(settings.max_shots)]
        self.bad_shots = [Shot(bounds) for _ in range(MAX_BAD_SHOTS)]

        self.score = 0
        self.ships_left = SHIPS_AT_START
        self.mouse_control = False
        self.rotate = 0
        self.sounds: list[SoundEvent] = []

        self.level_num = 0
        self.level_display_index = 0
        self.rocks: list[Rock] = []
        self.bad_ships: list[BadShip] = []
        self._bad_index = 0
        self._bad_last: BadShipData | None = None
        self._rocks_left = False
        self._any_bad_shots = False
        self._delay_index = 0
        self._launch_counter = 0

        self.start_level(0)

    @property
    def max_level(self) -> int:
        """Index of the last level."""
        return len(self.levels) - 1

    @property
    def level_label(self) -> str:
        """Text shown when a level begins."""
        return f"Level {self.level_num}"

    @property
    def current_bad_ship(self) -> BadShip | None:
        """The enemy ship that is in play or due to launch next."""
        if not self.bad_ships:
            return None
        return self.bad_ships[self._bad_index]

    def _make_bad_ship(self, data: BadShipData) -> BadShip:
        return BadShip.from_data(
            self.bad_images,
            self.ship_images,
            data,
            self.bounds,
            self.ship,
            self.settings.bad_shot_speed,
        )

    def start_level(self, level: int) -> None:
        """Lay out the rocks and enemy ships of ``level``."""
        if not 0 <= level < len(self.levels):
            raise IndexError(f"no level {level}; levels run from 0 to {self.max_level}")
        data = self.levels[level]
        self.level_num = level
        self.rocks = [
            Rock.from_data(self.rock_images, rock, self.bounds, True) for rock in data.rocks
        ]
        self.bad_ships = [self._make_bad_ship(bad) for bad in data.bad_ships]
        self._bad_index = 0
        self._bad_last = data.bad_ships[-1] if data.bad_ships else None
        self._launch_counter = 0
        self.level_display_index = 0

    def new_game(self) -> None:
        """Start over from the first level with a full set of ships."""
        self.score = 0
        self.ships_left = SHIPS_AT_START
        self.rotate = 0
        self.ship.thrusting = False
        self.ship.reset()
        for shot in (*self.shots, *self.bad_shots):
            shot.in_air = False
        self._any_bad_shots = False
        self._delay_index = 0
        self.start_level(0)

    def fire_player_shot(self) -> bool:
        """Fire the first shot not already in flight; returns whether one was fired."""
        free = next((shot for shot in self.shots if not shot.in_air), None)
        if free is None:
            return False
        self.ship.fire(free)
        self.sounds.append(SoundEvent.PLAYER_FIRE)
        return True

    def hyperjump(self) -> None:
        """Move the ship to a random spot away from the edges of the field."""
        width = self.bounds.width()
        height = self.bounds.height()
        span = 2 * HYPERJUMP_MARGIN
        if width > span and height > span:
            self.ship.x = HYPERJUMP_MARGIN + float(self.rng.randrange(width - span))
            self.ship.y = HYPERJUMP_MARGIN + float(self.rng.randrange(height - span))

    def update(self) -> bool:
        """Advance the game one frame; returns ``False`` once the game is over."""
        points_per_ship = self.settings.points_per_ship
        points_before = self.score % points_per_ship

        if self.level_display_index < LEVEL_DISPLAY_LIMIT:
            self.level_display_index += 1

        ship = self.ship
        if ship.in_play:
            if not self.mouse_control and self.rotate:
                ship.rotation += -ROTATE_STEP if self.rotate > 0 else ROTATE_STEP
            ship.move()

        for shot in self.shots:
            if shot.in_air:
                shot.move()

        self._update_bad_shots()
        self._update_bad_ship()
        self._update_rocks()

        if self.score % points_per_ship < points_before:
            self.ships_left += 1

        return self._advance()

    def _update_bad_shots(self) -> None:
        if not self._any_bad_shots:
            return
        self._any_bad_shots = False
        for shot in self.bad_shots:
            if not shot.in_air:
                continue
            self._any_bad_shots = True
            shot.move()
            if self.ship.in_play and self.ship.hit_shot(shot):
                self.sounds.append(SoundEvent.EXPLOSION)

    def _update_bad_ship(self) -> None:
        bad = self.current_bad_ship
        if bad is None:
            return
        self._launch_counter += 1
        if self._launch_counter > bad.launch_time and not bad.in_play:
            if self.ship.in_play and self._rocks_left:
                bad.launch()
            self._launch_counter = 0
        if not bad.in_play:
            return
        bad.move()
        if self.ship.in_play and bad.fire(self.bad_shots):
            self._any_bad_shots = True
            self.sounds.append(SoundEvent.ENEMY_FIRE)
        for shot in self.shots:
            if shot.in_air and bad.hit_by(shot):
                self.sounds.append(SoundEvent.EXPLOSION)
                self.score += self.settings.bad_ship_value
        if not bad.in_play:
            if self._bad_index + 1 < len(self.bad_ships):
                self._bad_index += 1
            elif self._bad_last is not None:
                self.bad_ships[self._bad_index] = self._make_bad_ship(self._bad_last)

    def _update_rocks(self) -> None:
        ship = self.ship
        split_off: list[Rock] = []

        def split(rock: Rock) -> None:
            child = rock.split()
            if child is not None:
                split_off.append(child)

        self._rocks_left = False
        for rock in self.rocks:
            if not rock.in_play:
                continue
            self._rocks_left = True
            rock.move()
            if ship.in_play and ship.hit_rock(rock):
                self.sounds.append(SoundEvent.EXPLOSION)
                self.score += self.settings.rock_values[rock.set_num]
                split(rock)
            for shot in self.shots:
                if shot.in_air and rock.hit_by(shot):
                    self.sounds.append(SoundEvent.EXPLOSION)
                    self.score += 100 * (1 + rock.set_num)
                    split(rock)
            if self._any_bad_shots:
                for shot in self.bad_shots:
                    if shot.in_air and rock.hit_by(shot):
                        self.sounds.append(SoundEvent.EXPLOSION)
                        split(rock)
        self.rocks.extend(split_off)

    def _advance(self) -> bool:
        if self.ship.in_play and self._rocks_left:
            return True
        self._delay_index += 1
        if self._delay_index <= RESPAWN_DELAY:
            return True
        self._delay_index = 0
        if not self.ship.in_play:
            self.ships_left -= 1
            self.ship.reset()
            if self.ships_left < 0:
                return False
        else:
            self.start_level(min(self.level_num + 1, self.max_level))
        return True

    def draw(self, surface, advance: bool) -> None:
        """Draw shots, rocks, ships, spare-ship icons and the level banner."""
        for shot in (*self.shots, *self.bad_shots):
            if shot.in_air:
                shot.draw(surface, self.shot_images)
        for rock in self.rocks:
            if rock.in_play:
                rock.draw(surface, advance)
        if self.ship.in_play:
            self.ship.draw_rotated(surface, advance)
        bad = self.current_bad_ship
        if bad is not None and bad.in_play:
            bad.draw(surface, advance)
        for spare in range(max(self.ships_left, 0)):
            self.ship_images.draw(surface, 0, 0, LIVES_X + spare * LIVES_SPACING, LIVES_Y)
        if surface is not None and self.level_display_index < LEVEL_DISPLAY_LIMIT:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, LEVEL_LABEL_SIZE)
            text = font.render(self.level_label, True, LEVEL_LABEL_COLOR)
            center_x, _ = self.bounds.center()
            surface.blit(text, (round(center_x - text.get_width() / 2.0), round(LEVEL_LABEL_Y)))