"""The player's ship."""

from __future__ import annotations

import math

from .geometry import Bounds
from .shot import Shot

_PI = 3.14159


def _radians(degrees: float) -> float:
    return _PI * degrees / 180.0


class Ship:
    """A thrust-driven ship that rotates, fires and explodes on collision."""

    def __init__(
        self,
        image_set,
        set_normal: int = 0,
        set_boost: int = 1,
        set_killed: int = 2,
        max_speed: float = 10.0,
        accel: float = 0.1,
        decel: float = 0.01,
        bounds: Bounds = Bounds(),
        shot_speed: float = 10.0,
    ) -> None:
        self.image_set = image_set
        self.set_normal = set_normal
        self.set_boost = set_boost
        self.set_killed = set_killed
        self.set_now = set_normal
        self.max_speed = max_speed
        self.accel = accel
        self.decel = decel
        self.bounds = bounds
        self.shot_speed = shot_speed
        self.frame = 0
        self.boost_frame = 0
        self.in_play = False
        self.thrusting = False
        self.rotation = 0.0
        frame_set = image_set.sets[set_normal]
        self.width = float(frame_set.width)
        self.height = float(frame_set.height)
        self.x = 0.0
        self.y = 0.0
        self.vx = 0.0
        self.vy = 0.0

    @property
    def killed(self) -> bool:
        """Whether the ship is showing its explosion."""
        return self.set_now == self.set_killed

    def reset(self) -> None:
        """Bring a fresh ship into play at rest in the middle of the field."""
        self.in_play = True
        self.set_now = self.set_normal
        self.vx = self.vy = 0.0
        self.x, self.y = self.bounds.center()

    def move(self) -> None:
        """Apply thrust and damping, then advance, wrapping around the field."""
        if self.thrusting:
            angle = _radians(self.rotation)
            self.vx += self.accel * math.sin(angle)
            self.vy += self.accel * math.cos(angle)
        self.vx -= self.decel * self.vx
        self.vy -= self.decel * self.vy
        self.x += self.vx
        self.y += self.vy

        b = self.bounds
        if self.x > b.right + self.width and self.vx > 0.0:
            self.x = float(b.left)
        elif self.x < b.left - self.width and self.vx < 0.0:
            self.x = float(b.right)
        if self.y > b.bottom + self.height and self.vy > 0.0:
            self.y = float(b.top)
        elif self.y < b.top - self.height and self.vy < 0.0:
            self.y = float(b.bottom)

    def fire(self, shot: Shot) -> None:
        """Launch ``shot`` from the ship along its heading."""
        angle = _radians(self.rotation)
        shot.launch(
            self.x,
            self.y,
            self.shot_speed * math.sin(angle) + self.vx,
            self.shot_speed * math.cos(angle) + self.vy,
        )

    def hit_rock(self, rock) -> bool:
        """Check a collision with ``rock``; on impact the ship explodes and drifts with it."""
        dx = self.x - rock.x - rock.width / 2.0
        dy = self.y - rock.y - rock.height / 2.0
        reach = self.width + rock.width
        if self.set_now == self.set_normal and dx * dx + dy * dy < reach * reach / 4.0:
            self.thrusting = False
            self.vx = rock.vx
            self.vy = rock.vy
            self.set_now = self.set_killed
            self.frame = 0
            return True
        return False

    def hit_shot(self, shot: Shot) -> bool:
        """Check whether ``shot`` strikes the ship; on impact it explodes in place."""
        dx = self.x - shot.x
        dy = self.y - shot.y
        if dx * dx + dy * dy < self.width * self.width / 4.0:
            self.thrusting = False
            self.vx = self.vy = 0.0
            self.set_now = self.set_killed
            self.frame = 0
            shot.in_air = False
            return True
        return False

    def hit_point(self, x: float, y: float) -> bool:
        """Whether ``(x, y)`` lies on the ship; shows the boost frames while it does."""
        dx = self.x - x
        dy = self.y - y
        if dx * dx + dy * dy < self.width * self.width / 4.0:
            self.set_now = self.set_boost
            return True
        self.set_now = self.set_normal
        return False

    def draw(self, surface, advance: bool) -> None:
        """Draw the current frame unrotated."""
        self.image_set.draw(surface, self.set_now, self.frame, self.x, self.y)
        if advance:
            self.frame = self.image_set.next_frame(self.set_now, self.frame)

    def draw_rotated(self, surface, advance: bool) -> None:
        """Draw the ship turned to its heading, with its exhaust while thrusting.

        Once the explosion animation has run through, the ship leaves play.
        """
        images = self.image_set
        images.draw_rotated(surface, self.set_now, self.frame, self.x, self.y, self.rotation)
        if advance:
            self.frame = images.next_frame(self.set_now, self.frame)
        if not self.killed and self.thrusting:
            angle = _radians(self.rotation)
            images.draw_rotated(
                surface,
                self.set_boost,
                self.boost_frame,
                self.x - self.width * math.sin(angle) / 2.0,
                self.y - self.height * math.cos(angle) / 2.0,
                self.rotation,
            )
            if advance:
                self.boost_frame = images.next_frame(self.set_boost, self.boost_frame)
        if self.killed and advance and self.frame == 0:
            self.in_play = False