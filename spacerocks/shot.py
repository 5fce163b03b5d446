"""Projectiles fired by ships."""

from __future__ import annotations

from .geometry import Bounds


class Shot:
    """A projectile that flies in a straight line until it leaves the field."""

    def __init__(self, bounds: Bounds, set_num: int = 0, cell_num: int = 0) -> None:
        self.bounds = bounds
        self.set_num = set_num
        self.cell_num = cell_num
        self.x = 0.0
        self.y = 0.0
        self.vx = 0.0
        self.vy = 0.0
        self.in_air = False

    def launch(self, x: float, y: float, vx: float, vy: float) -> None:
        """Put the shot in flight from ``(x, y)`` with velocity ``(vx, vy)``."""
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.in_air = True

    def move(self) -> None:
        """Advance one frame; the shot lands once it is outside the field."""
        self.x += self.vx
        self.y += self.vy
        b = self.bounds
        if self.x > b.right or self.x < b.left or self.y > b.bottom or self.y < b.top:
            self.in_air = False

    def draw(self, surface, image_set) -> None:
        """Draw the shot's cell from ``image_set``."""
        image_set.draw(surface, self.set_num, self.cell_num, self.x, self.y)