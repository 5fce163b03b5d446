"""Sprite sheets holding animation frames laid out in a grid of cells."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import pygame

TRANSPARENT = (0, 0, 0)


class ImageSetError(Exception):
    """Raised when a sprite sheet or its description cannot be loaded."""


@dataclass(frozen=True)
class FrameSet:
    """One animation in a sheet: its first row, frame count and frame size."""

    row: int
    frame_count: int
    width: int
    height: int


def parse_config(text: str) -> tuple[str, int, int, int, list[FrameSet]]:
    """Parse a sheet description.

    The first line names the image file.  Then follow the number of frame
    sets, the number of columns and the cell width and height, and for each
    set its starting row, frame count, width and height.

    Returns ``(image_name, columns, cell_width, cell_height, sets)``.
    """
    image_name, _, rest = text.partition("\n")
    image_name = image_name.strip()
    if not image_name:
        raise ImageSetError("sheet description does not name an image file")
    try:
        numbers = [int(token) for token in rest.split()]
    except ValueError as exc:
        raise ImageSetError(f"non-integer value in sheet description: {exc}") from exc
    if len(numbers) < 4:
        raise ImageSetError("sheet description lacks its header values")
    set_count, columns, cell_width, cell_height = numbers[:4]
    if set_count < 0:
        raise ImageSetError(f"negative frame set count: {set_count}")
    if columns < 1:
        raise ImageSetError(f"column count must be positive, got {columns}")
    values = numbers[4:]
    if len(values) < 4 * set_count:
        raise ImageSetError(
            f"sheet description declares {set_count} frame sets but holds "
            f"{len(values) // 4}"
        )
    sets = [FrameSet(*values[i : i + 4]) for i in range(0, 4 * set_count, 4)]
    return image_name, columns, cell_width, cell_height, sets


class ImageSet:
    """A sprite sheet whose cells are separated by one-pixel gutters."""

    def __init__(
        self,
        image: pygame.Surface,
        columns: int,
        cell_width: int,
        cell_height: int,
        sets: Sequence[FrameSet],
    ) -> None:
        if columns < 1:
            raise ImageSetError(f"column count must be positive, got {columns}")
        self.image = image
        self.image.set_colorkey(TRANSPARENT)
        self.columns = columns
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.sets = list(sets)

    @classmethod
    def from_config(cls, path: str | Path) -> "ImageSet":
        """Load a sheet from a description file and the image it names."""
        path = Path(path)
        try:
            text = path.read_text()
        except OSError as exc:
            raise ImageSetError(f"cannot read {path}: {exc}") from exc
        image_name, columns, cell_width, cell_height, sets = parse_config(text)
        image_path = Path(image_name)
        if not image_path.is_absolute() and not image_path.exists():
            candidate = path.parent / image_path
            if candidate.exists():
                image_path = candidate
        try:
            image = pygame.image.load(str(image_path))
        except (pygame.error, OSError, FileNotFoundError) as exc:
            raise ImageSetError(f"cannot load image {image_path}: {exc}") from exc
        return cls(image, columns, cell_width, cell_height, sets)

    @property
    def set_count(self) -> int:
        """Number of frame sets in the sheet."""
        return len(self.sets)

    def source_rect(self, set_num: int, frame: int) -> pygame.Rect:
        """The area of the sheet holding ``frame`` of frame set ``set_num``."""
        frame_set = self.sets[set_num]
        top = (frame // self.columns + frame_set.row) * (self.cell_height + 1)
        left = (frame % self.columns) * (self.cell_width + 1)
        return pygame.Rect(left, top, frame_set.width, frame_set.height)

    def next_frame(self, set_num: int, frame: int) -> int:
        """The frame that follows ``frame``, wrapping to the first one."""
        frame += 1
        return 0 if frame >= self.sets[set_num].frame_count else frame

    def draw(self, surface, set_num: int, frame: int, x: float, y: float) -> None:
        """Blit one frame with its top-left corner at ``(x, y)``."""
        if surface is None:
            return
        area = self.source_rect(set_num, frame)
        surface.blit(self.image, (round(x), round(y)), area)

    def draw_rotated(
        self, surface, set_num: int, frame: int, x: float, y: float, angle: float
    ) -> None:
        """Blit one frame turned ``angle`` degrees anticlockwise, centred on ``(x, y)``."""
        if surface is None:
            return
        area = self.source_rect(set_num, frame).clip(self.image.get_rect())
        cell = self.image.subsurface(area)
        turned = pygame.transform.rotate(cell, angle)
        turned.set_colorkey(TRANSPARENT)
        target = turned.get_rect(center=(round(x), round(y)))
        surface.blit(turned, target)