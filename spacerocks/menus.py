"""The welcome menu and the game-over menu."""

from __future__ import annotations

from typing import Iterable, Sequence

import pygame

from .badship import BadShip
from .button import LabelPlacement, RectButton
from .geometry import Bounds
from .rock import Rock
from .shot import Shot

Color = tuple[int, int, int]

COLOR_MAX = 255
BUTTON_WIDTH = 60
BUTTON_HEIGHT = 20
BUTTON_LABEL_SIZE = 14
BUTTON_LABEL_COLOR: Color = (255, 255, 255)
BUTTON_FILL: Color = (0, 0, 255)
BUTTON_OUTLINE: Color = (255, 0, 0)

TITLE_SIZE = 50
SUBTITLE_SIZE = 25
HELP_SIZE = 15
HELP_COLOR: Color = (255, 0, 0)
HELP_TOP = 280.0
HELP_LINE_SPACING = 20.0

MOUSE_HELP = (
    "Left     thrust",
    "Right    fire",
    "wheel",
    "scroll   rotate ship",
    "click    hyperjump",
)
KEYBOARD_HELP = (
    "Up arrow           thrust",
    "Spacebar           fire",
    "left/right arrow   rotate ship",
    "down arrow         hyperjump",
)
MOUSE_HELP_X = 150.0
KEYBOARD_HELP_X = 450.0

GAME_OVER_LAUNCH_TIME = 200
GAME_OVER_FIRST_LAUNCH_LEAD = 30
GAME_OVER_FIRE_INTERVAL = 50
GAME_OVER_START = (-50.0, 100.0)
GAME_OVER_SPEED = 5.0


def cycle_color(value: int, rising: bool) -> tuple[int, bool]:
    """Step a colour channel one unit, bouncing between 0 and 255.

    Returns the new value and whether it is still rising.
    """
    if rising:
        value += 1
        return value, value != COLOR_MAX
    value -= 1
    return value, value == 0


def _menu_button(x: int, y: int, label: str) -> RectButton:
    button = RectButton(x, y, BUTTON_WIDTH, BUTTON_HEIGHT)
    button.set_label(label, BUTTON_LABEL_SIZE, BUTTON_LABEL_COLOR, LabelPlacement.CENTER)
    button.unselected_color = BUTTON_FILL
    button.no_hover_color = BUTTON_OUTLINE
    return button


class _TextPainter:
    """Renders text in a few sizes, creating each font once."""

    def __init__(self) -> None:
        self._fonts: dict[int, pygame.font.Font] = {}

    def font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def centered(self, surface, text: str, size: int, color: Color, center_x: float, y: float) -> None:
        rendered = self.font(size).render(text, True, color)
        surface.blit(rendered, (round(center_x - rendered.get_width() / 2.0), round(y)))

    @staticmethod
    def at(surface, font, text: str, color: Color, x: float, y: float) -> None:
        surface.blit(font.render(text, True, color), (round(x), round(y)))


class WelcomeMenu:
    """The opening screen where the player picks mouse or keyboard control."""

    def __init__(self, rock_images, bounds: Bounds = Bounds()) -> None:
        self.bounds = bounds
        self.mouse_button = _menu_button(170, 250, "mouse")
        self.keyboard_button = _menu_button(500, 250, "keyboard")
        self.blue, self.blue_rising = COLOR_MAX, False
        self.green, self.green_rising = 0, True
        b = bounds
        self.rocks = [
            Rock(rock_images, 1, 4, 200.0, b.bottom + 100.0, 0.3, -1.4, True, b),
            Rock(rock_images, 0, 4, 600.0, b.bottom + 100.0, -1.3, -1.0, True, b),
            Rock(rock_images, 0, 4, b.left - 80.0, 200.0, 1.0, 1.2, True, b),
            Rock(rock_images, 1, 4, b.right + 20.0, 100.0, -1.0, 1.0, True, b),
            Rock(rock_images, 0, 4, 500.0, b.top - 100.0, 0.6, 2.0, True, b),
        ]
        self._text = _TextPainter()

    @property
    def title_color(self) -> Color:
        """Current colour of the title, which shifts every frame."""
        return 0, self.green, self.blue

    def update(self, mouse_x: int, mouse_y: int) -> None:
        """Advance the title colour, button hover states and drifting rocks."""
        self.blue, self.blue_rising = cycle_color(self.blue, self.blue_rising)
        self.green, self.green_rising = cycle_color(self.green, self.green_rising)
        self.mouse_button.mouse_over(mouse_x, mouse_y)
        self.keyboard_button.mouse_over(mouse_x, mouse_y)
        for rock in self.rocks:
            rock.move()

    def draw(self, surface, font=None, advance: bool = False) -> None:
        """Draw rocks, titles, control help and the two buttons."""
        if surface is None:
            return
        for rock in self.rocks:
            rock.draw(surface, advance)
        center_x, _ = self.bounds.center()
        self._text.centered(surface, "ASTEROIDS", TITLE_SIZE, self.title_color, center_x, 100.0)
        self._text.centered(
            surface, "select control mode", SUBTITLE_SIZE, (255, 255, 255), center_x, 200.0
        )
        self._text.centered(surface, "Esc = Quit", SUBTITLE_SIZE, (0, 255, 0), center_x, 500.0)
        help_font = font if font is not None else self._text.font(HELP_SIZE)
        for column_x, lines in ((MOUSE_HELP_X, MOUSE_HELP), (KEYBOARD_HELP_X, KEYBOARD_HELP)):
            for line_num, line in enumerate(lines):
                self._text.at(
                    surface,
                    help_font,
                    line,
                    HELP_COLOR,
                    column_x,
                    HELP_TOP + HELP_LINE_SPACING * line_num,
                )
        self.mouse_button.draw(surface)
        self.keyboard_button.draw(surface)


class GameOverMenu:
    """The closing screen, with an enemy ship that keeps shooting at the mouse."""

    def __init__(
        self,
        bad_images,
        ship_images,
        bounds: Bounds = Bounds(),
        target=None,
        shot_speed: float = 10.0,
    ) -> None:
        self.bounds = bounds
        self.target = target
        self.replay_button = _menu_button(370, 300, "Replay")
        self.quit_button = _menu_button(370, 350, "Quit")
        start_x, start_y = GAME_OVER_START
        self.bad_ship = BadShip(
            bad_images,
            0,
            ship_images,
            2,
            GAME_OVER_FIRE_INTERVAL,
            GAME_OVER_LAUNCH_TIME,
            start_x,
            start_y,
            GAME_OVER_SPEED,
            0.0,
            bounds,
            target,
            shot_speed,
        )
        self.launch_index = self.bad_ship.launch_time - GAME_OVER_FIRST_LAUNCH_LEAD
        self._text = _TextPainter()

    def update(self, mouse_x: int, mouse_y: int, shots: Sequence[Shot]) -> bool:
        """Advance one frame; returns whether the enemy ship fired."""
        self.replay_button.mouse_over(mouse_x, mouse_y)
        self.quit_button.mouse_over(mouse_x, mouse_y)

        bad = self.bad_ship
        self.launch_index += 1
        if self.launch_index > bad.launch_time:
            bad.x, bad.y = GAME_OVER_START
            bad.launch()
            self.launch_index = 0

        fired = False
        if bad.in_play:
            if self.target is not None:
                self.target.x = float(mouse_x)
                self.target.y = float(mouse_y)
            bad.move()
            fired = bad.fire(shots)
        for shot in shots:
            if shot.in_air:
                shot.move()
        return fired

    def draw(
        self,
        surface,
        font=None,
        shots: Iterable[Shot] = (),
        shot_images=None,
        advance: bool = False,
    ) -> None:
        """Draw the title, the buttons, the enemy ship and its shots."""
        if surface is None:
            return
        center_x, _ = self.bounds.center()
        self._text.centered(surface, "GAME OVER", TITLE_SIZE, (255, 0, 0), center_x, 150.0)
        self.replay_button.draw(surface, font)
        self.quit_button.draw(surface, font)
        if self.bad_ship.in_play:
            self.bad_ship.draw(surface, advance)
        if shot_images is not None:
            for shot in shots:
                if shot.in_air:
                    shot.draw(surface, shot_images)