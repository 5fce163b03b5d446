"""Play-field geometry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds:
    """An axis-aligned rectangle given by its edges, in screen coordinates."""

    left: int = 0
    top: int = 0
    right: int = 800
    bottom: int = 600

    def width(self) -> int:
        """Horizontal extent of the rectangle."""
        return self.right - self.left

    def height(self) -> int:
        """Vertical extent of the rectangle."""
        return self.bottom - self.top

    def center(self) -> tuple[float, float]:
        """The middle point of the rectangle."""
        return (self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0