"""A row of digit sprites showing a number."""

from __future__ import annotations

from typing import Iterator


class NumericDisplay:
    """Shows ``value`` in a given base using one sprite cell per digit."""

    def __init__(
        self,
        image_set=None,
        set_num: int = 0,
        x: float = 0.0,
        y: float = 0.0,
        max_digits: int = 4,
        base: int = 10,
        gap: float = 0.0,
        lead_zeros: bool = False,
    ) -> None:
        if base < 2:
            raise ValueError(f"base must be at least 2, got {base}")
        self.image_set = image_set
        self.set_num = set_num
        self.x = x
        self.y = y
        self.max_digits = max_digits
        self.base = base
        self.gap = gap
        self.lead_zeros = lead_zeros
        self.value = 0
        self.max_value = base ** max(max_digits, 1) - 1
        if image_set is not None:
            frame_set = image_set.sets[set_num]
            self.width = float(frame_set.width)
            self.height = float(frame_set.height)
        else:
            self.width = self.height = 0.0

    def digit_cells(self) -> Iterator[tuple[int, float, float]]:
        """Yield ``(digit, x, y)`` for each drawn digit, least significant first.

        A value of zero draws nothing unless leading zeros are on.
        """
        if self.value < 0:
            raise ValueError(f"cannot display a negative value: {self.value}")
        step = self.gap + self.width
        index = self.max_digits - 1
        remaining = self.value
        while remaining:
            remaining, digit = divmod(remaining, self.base)
            yield digit, self.x + index * step, self.y
            index -= 1
        if self.lead_zeros:
            while index >= 0:
                yield 0, self.x + index * step, self.y
                index -= 1

    def draw(self, surface) -> None:
        """Draw every digit cell onto ``surface``."""
        for digit, x, y in self.digit_cells():
            self.image_set.draw(surface, self.set_num, digit, x, y)