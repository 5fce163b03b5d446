"""Drifting asteroids that wrap around the play field and split when hit."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Bounds
from .shot import Shot

SPLIT_FRAME_DELAY = 3


@dataclass(frozen=True)
class RockData:
    """Starting parameters of one rock in a level description."""

    set_num: int
    frame_delay: int
    x: float
    y: float
    vx: float
    vy: float


class Rock:
    """An animated rock moving at constant velocity across a wrapping field."""

    def __init__(
        self,
        image_set,
        set_num: int,
        frame_delay: int = 1,
        x: float = 0.0,
        y: float = 0.0,
        vx: float = 0.0,
        vy: float = 0.0,
        in_play: bool = True,
        bounds: Bounds = Bounds(),
    ) -> None:
        self.image_set = image_set
        self.set_num = set_num
        self.frame_delay = max(1, frame_delay)
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.in_play = in_play
        self.bounds = bounds
        self.frame = 0
        self.delay_index = 0
        self.width = 0.0
        self.height = 0.0
        self._update_size()

    @classmethod
    def from_data(
        cls,
        image_set,
        data: RockData,
        bounds: Bounds = Bounds(),
        in_play: bool = True,
    ) -> "Rock":
        """Build a rock from a level description entry."""
        return cls(
            image_set,
            data.set_num,
            data.frame_delay,
            data.x,
            data.y,
            data.vx,
            data.vy,
            in_play,
            bounds,
        )

    def _update_size(self) -> None:
        if self.image_set is not None:
            frame_set = self.image_set.sets[self.set_num]
            self.width = float(frame_set.width)
            self.height = float(frame_set.height)

    def step_frame(self, advance: bool) -> int:
        """Return the frame to show now and move the animation on.

        With a frame delay of ``n`` the animation advances on every ``n``-th
        request only.
        """
        current = self.frame
        if advance:
            self.delay_index += 1
            if self.delay_index < self.frame_delay:
                advance = False
            else:
                self.delay_index = 0
        if advance:
            self.frame = self.image_set.next_frame(self.set_num, self.frame)
        return current

    def draw(self, surface, advance: bool) -> None:
        """Draw the current frame at the rock's position."""
        self.draw_offset(surface, advance, 0.0, 0.0)

    def draw_offset(self, surface, advance: bool, dx: float, dy: float) -> None:
        """Draw the current frame displaced by ``(dx, dy)``."""
        frame = self.step_frame(advance)
        self.image_set.draw(surface, self.set_num, frame, self.x + dx, self.y + dy)

    def move(self) -> None:
        """Advance one frame, reappearing on the far side after leaving the field."""
        self.x += self.vx
        self.y += self.vy
        b = self.bounds
        if self.x > b.right and self.vx > 0.0:
            self.x = b.left - self.width
        elif self.x < b.left - self.width and self.vx < 0.0:
            self.x = float(b.right)
        if self.y > b.bottom and self.vy > 0.0:
            self.y = b.top - self.height
        elif self.y < b.top - self.height and self.vy < 0.0:
            self.y = float(b.bottom)

    def hit_by(self, shot: Shot) -> bool:
        """Whether ``shot`` strikes the rock; a striking shot is taken out of the air."""
        if not self.in_play:
            return False
        cx = self.x + self.width / 2.0 - shot.x
        cy = self.y + self.height / 2.0 - shot.y
        if cx * cx + cy * cy < self.width * self.width / 4.0:
            shot.in_air = False
            return True
        return False

    def split(self) -> "Rock | None":
        """Break into the next smaller size.

        Returns the newly split-off rock, or ``None`` when the rock was already
        the smallest size and is destroyed instead.
        """
        self.set_num += 1
        if self.set_num >= self.image_set.set_count:
            self.set_num = 0
            self.in_play = False
            return None
        child = Rock(
            self.image_set,
            self.set_num,
            SPLIT_FRAME_DELAY,
            self.x,
            self.y,
            self.vx - self.vy,
            self.vy + self.vx,
            True,
            self.bounds,
        )
        self.vx, self.vy = self.vx + self.vy, self.vy - self.vx
        self._update_size()
        return child