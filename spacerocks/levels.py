"""Game-wide settings and per-level layouts read from a level file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, TypeVar

from .badship import BadShipData
from .rock import RockData

T = TypeVar("T")


class LevelFormatError(Exception):
    """Raised when a level file cannot be read or is malformed."""


@dataclass
class GameSettings:
    """Parameters that hold across all levels."""

    points_per_ship: int = 10000
    max_shots: int = 6
    shot_speed: float = 10.0
    max_speed: float = 10.0
    accel: float = 0.3
    decel: float = 0.01
    bad_ship_value: int = 1000
    bad_shot_speed: float = 10.0
    rock_values: tuple[int, int, int] = (100, 200, 300)


@dataclass
class LevelData:
    """The rocks and enemy ships of one level."""

    rocks: list[RockData] = field(default_factory=list)
    bad_ships: list[BadShipData] = field(default_factory=list)


class _Tokens:
    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def _read(self, convert: Callable[[str], T], what: str) -> T:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise LevelFormatError(f"level file ends before {what}") from None
        try:
            return convert(token)
        except ValueError:
            raise LevelFormatError(f"bad value {token!r} for {what}") from None

    def int(self, what: str) -> int:
        return self._read(int, what)

    def float(self, what: str) -> float:
        return self._read(float, what)

    def count(self, what: str) -> int:
        value = self.int(what)
        if value < 0:
            raise LevelFormatError(f"negative {what}: {value}")
        return value


def _read_rock(tokens: _Tokens) -> RockData:
    return RockData(
        tokens.int("rock set"),
        tokens.int("rock frame delay"),
        tokens.float("rock x"),
        tokens.float("rock y"),
        tokens.float("rock x velocity"),
        tokens.float("rock y velocity"),
    )


def _read_bad_ship(tokens: _Tokens) -> BadShipData:
    return BadShipData(
        tokens.int("enemy normal set"),
        tokens.int("enemy killed set"),
        tokens.int("enemy fire interval"),
        tokens.int("enemy launch time"),
        tokens.float("enemy x"),
        tokens.float("enemy y"),
        tokens.float("enemy x velocity"),
        tokens.float("enemy y velocity"),
    )


def parse_levels(text: str) -> tuple[GameSettings, list[LevelData]]:
    """Parse the whitespace-separated contents of a level file.

    The file starts with the game-wide settings, then the number of levels;
    each level lists its rocks and then its enemy ships, each preceded by
    their count.
    """
    tokens = _Tokens(text)
    settings = GameSettings(
        points_per_ship=tokens.int("points per ship"),
        max_shots=tokens.int("maximum shots"),
        shot_speed=tokens.float("shot speed"),
        max_speed=tokens.float("maximum speed"),
        accel=tokens.float("acceleration"),
        decel=tokens.float("deceleration"),
        bad_ship_value=tokens.int("enemy value"),
        bad_shot_speed=tokens.float("enemy shot speed"),
        rock_values=(
            tokens.int("large rock value"),
            tokens.int("medium rock value"),
            tokens.int("small rock value"),
        ),
    )
    level_count = tokens.count("level count")
    if level_count == 0:
        raise LevelFormatError("level file defines no levels")
    levels = []
    for _ in range(level_count):
        rocks = [_read_rock(tokens) for _ in range(tokens.count("rock count"))]
        bad_ships = [_read_bad_ship(tokens) for _ in range(tokens.count("enemy count"))]
        levels.append(LevelData(rocks, bad_ships))
    return settings, levels


def load_levels(path: str | Path) -> tuple[GameSettings, list[LevelData]]:
    """Read and parse a level file."""
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as exc:
        raise LevelFormatError(f"cannot read {path}: {exc}") from exc
    return parse_levels(text)