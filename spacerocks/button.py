"""Clickable rectangular menu buttons with an optional text label."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

import pygame

Color = tuple[int, int, int]

SELECTED_COLOR: Color = (0, 255, 0)
UNSELECTED_COLOR: Color = (255, 0, 0)
HOVER_COLOR: Color = (255, 255, 102)
NO_HOVER_COLOR: Color = (153, 153, 153)

LABEL_MARGIN = 3.0
LABEL_RAISE = 1.5


class LabelPlacement(Enum):
    """Where a label sits relative to its button."""

    CENTER = "c"
    LEFT = "l"
    RIGHT = "r"
    TOP = "t"
    BOTTOM = "b"


def _as_placement(placement: LabelPlacement | str | None) -> LabelPlacement | None:
    if placement is None or isinstance(placement, LabelPlacement):
        return placement
    try:
        return LabelPlacement(placement)
    except ValueError:
        return None


class Button(ABC):
    """A screen control at a fixed position that reacts to the mouse."""

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.x = x
        self.y = y
        self.selected = False
        self.hovered = False

    @abstractmethod
    def hit(self, mouse_x: int, mouse_y: int) -> bool:
        """Whether the point ``(mouse_x, mouse_y)`` lies on the button."""

    @abstractmethod
    def draw(self, surface, font=None) -> None:
        """Draw the button onto ``surface``."""

    def mouse_over(self, mouse_x: int, mouse_y: int) -> bool:
        """Record and return whether the mouse is over the button."""
        self.hovered = self.hit(mouse_x, mouse_y)
        return self.hovered


class RectButton(Button):
    """A filled rectangle with a one-pixel outline and an optional label."""

    def __init__(self, x: int = 0, y: int = 0, width: int = 10, height: int = 10) -> None:
        super().__init__(x, y)
        self.width = width
        self.height = height
        self.selected_color: Color = SELECTED_COLOR
        self.unselected_color: Color = UNSELECTED_COLOR
        self.hover_color: Color = HOVER_COLOR
        self.no_hover_color: Color = NO_HOVER_COLOR
        self.label = ""
        self.label_size = 14
        self.label_color: Color = (255, 255, 255)
        self.label_pos: tuple[float, float] = (float(x), float(y))

    def hit(self, mouse_x: int, mouse_y: int) -> bool:
        """Whether the point lies strictly inside the rectangle."""
        return (
            self.x < mouse_x < self.x + self.width
            and self.y < mouse_y < self.y + self.height
        )

    def place_label(
        self,
        text_width: float,
        text_height: float,
        placement: LabelPlacement | str | None,
    ) -> tuple[float, float]:
        """Top-left corner for a label of the given size at ``placement``.

        An unknown or missing placement puts the label at the button's corner.
        """
        x = float(self.x)
        y = float(self.y)
        w = float(self.width)
        h = float(self.height)
        centered_x = (2.0 * x + w - text_width) / 2.0
        centered_y = (2.0 * y + h - text_height) / 2.0 - LABEL_RAISE
        match _as_placement(placement):
            case LabelPlacement.CENTER:
                return centered_x, centered_y
            case LabelPlacement.LEFT:
                return x - text_width - LABEL_MARGIN, centered_y
            case LabelPlacement.RIGHT:
                return x + w + LABEL_MARGIN, centered_y
            case LabelPlacement.TOP:
                return centered_x, y - text_height - LABEL_MARGIN
            case LabelPlacement.BOTTOM:
                return centered_x, y + h - 1.0
            case _:
                return x, y

    def set_label(
        self,
        text: str,
        font_size: int,
        color: Color,
        placement: LabelPlacement | str | None,
        text_size: tuple[float, float] | None = None,
    ) -> None:
        """Attach a label; ``text_size`` is its rendered size, measured if omitted."""
        self.label = text
        self.label_size = font_size
        self.label_color = color
        if text_size is None:
            text_size = self._default_font().size(text)
        width, height = text_size
        self.label_pos = self.place_label(float(width), float(height), placement)

    def _default_font(self) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(None, self.label_size)

    def draw(self, surface, font=None) -> None:
        """Draw the rectangle, its outline and its label onto ``surface``."""
        if surface is None:
            return
        fill = self.selected_color if self.selected else self.unselected_color
        outline = self.hover_color if self.hovered else self.no_hover_color
        rect = pygame.Rect(self.x, self.y, self.width, self.height)
        pygame.draw.rect(surface, fill, rect)
        pygame.draw.rect(surface, outline, rect, 1)
        if self.label:
            if font is None:
                font = self._default_font()
            rendered = font.render(self.label, True, self.label_color)
            surface.blit(rendered, (round(self.label_pos[0]), round(self.label_pos[1])))