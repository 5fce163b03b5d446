"""Enemy ships that cross the field and fire at the player."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from .geometry import Bounds
from .shot import Shot


@dataclass(frozen=True)
class BadShipData:
    """Parameters of one enemy ship in a level description."""

    set_normal: int
    set_killed: int
    fire_interval: int
    launch_time: int
    x: float
    y: float
    vx: float
    vy: float


class BadShip:
    """An enemy ship that flies straight across and shoots at its target."""

    def __init__(
        self,
        normal_images,
        set_normal: int,
        killed_images,
        set_killed: int,
        fire_interval: int,
        launch_time: int = 0,
        x: float = 0.0,
        y: float = 0.0,
        vx: float = 0.0,
        vy: float = 0.0,
        bounds: Bounds = Bounds(),
        target=None,
        shot_speed: float = 10.0,
    ) -> None:
        self.normal_images = normal_images
        self.killed_images = killed_images
        self.images = normal_images
        self.set_normal = set_normal
        self.set_killed = set_killed
        self.set_now = set_normal
        self.fire_interval = fire_interval
        self.fire_index = 0
        self.launch_time = launch_time
        self.frame = 0
        self.in_play = False
        self.killed = False
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.bounds = bounds
        self.target = target
        self.shot_speed = shot_speed
        frame_set = normal_images.sets[set_normal]
        self.width = float(frame_set.width)
        self.height = float(frame_set.height)

    @classmethod
    def from_data(
        cls,
        normal_images,
        killed_images,
        data: BadShipData,
        bounds: Bounds = Bounds(),
        target=None,
        shot_speed: float = 10.0,
    ) -> "BadShip":
        """Build an enemy ship from a level description entry."""
        return cls(
            normal_images,
            data.set_normal,
            killed_images,
            data.set_killed,
            data.fire_interval,
            data.launch_time,
            data.x,
            data.y,
            data.vx,
            data.vy,
            bounds,
            target,
            shot_speed,
        )

    def launch(self) -> None:
        """Put the ship into play, showing its normal frames."""
        self.images = self.normal_images
        self.set_now = self.set_normal
        self.killed = False
        self.frame = 0
        self.fire_index = 0
        self.in_play = True

    def _retire(self) -> None:
        self.images = self.normal_images
        self.set_now = self.set_normal
        self.killed = False
        self.in_play = False

    def move(self) -> None:
        """Advance one frame; the ship leaves play off screen or when its explosion ends."""
        self.x += self.vx
        self.y += self.vy
        b = self.bounds
        if self.vx >= 0.0 and self.x > b.right:
            self.in_play = False
            return
        if self.vx < 0.0 and self.x < b.left - self.width:
            self.in_play = False
            return
        if self.vy >= 0.0 and self.y > b.bottom + self.height:
            self.in_play = False
            return
        if self.vy < 0.0 and self.y < b.top - self.height:
            self.in_play = False
            return
        if self.killed and self.frame == 0:
            self._retire()

    def hit_by(self, shot: Shot) -> bool:
        """Whether ``shot`` strikes the ship; on impact it stops and explodes."""
        dx = self.x + self.width / 2.0 - shot.x
        dy = self.y + self.height / 2.0 - shot.y
        if dx * dx + dy * dy < self.width * self.width / 4.0 and not self.killed:
            shot.in_air = False
            self.killed = True
            self.set_now = self.set_killed
            self.images = self.killed_images
            self.frame = 0
            self.vx = self.vy = 0.0
            return True
        return False

    def fire(self, shots: Iterable[Shot]) -> bool:
        """Every ``fire_interval`` frames, aim a free shot at the target.

        Returns whether a shot was launched.
        """
        if self.target is None:
            return False
        self.fire_index += 1
        if self.fire_index < self.fire_interval:
            return False
        self.fire_index = 0
        if self.killed:
            return False
        free = next((shot for shot in shots if not shot.in_air), None)
        if free is None:
            return False
        dx = self.target.x - self.x
        dy = self.target.y - self.y
        dist = math.hypot(dx, dy)
        if dist == 0.0:
            return False
        free.launch(self.x, self.y, self.shot_speed * dx / dist, self.shot_speed * dy / dist)
        return True

    def draw(self, surface, advance: bool) -> None:
        """Draw the current frame from whichever sheet is in use."""
        self.images.draw(surface, self.set_now, self.frame, self.x, self.y)
        if advance:
            self.frame = self.images.next_frame(self.set_now, self.frame)