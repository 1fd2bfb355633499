"""The square grid the game is played on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class SquareType(IntEnum):
    """What occupies one square of the map; values match map file digits."""

    EMPTY = 0
    WALL = 1
    BRICK = 2
    POWERUP_BOMBS = 3
    POWERUP_FLAMES = 4
    POWERUP_WALLPASS = 5
    POWERUP_BOMBPASS = 6
    POWERUP_FLAMEPASS = 7
    EXIT = 8
    BOMB = 9


@dataclass
class CollisionInfo:
    """Row-major grid of squares; anything off the grid reads as a wall."""

    squares: list[SquareType] = field(default_factory=list)
    width: int = 0

    def _index(self, coords) -> int | None:
        x, y = (int(c) for c in coords)
        if x < 0 or y < 0 or x >= self.width:
            return None
        index = x + y * self.width
        return index if index < len(self.squares) else None

    def __getitem__(self, coords) -> SquareType:
        index = self._index(coords)
        if index is None:
            return SquareType.WALL
        return self.squares[index]

    def __setitem__(self, coords, value: SquareType) -> None:
        index = self._index(coords)
        if index is not None:
            self.squares[index] = SquareType(value)

    def coords_of(self, index: int) -> tuple[int, int]:
        """Grid column and row of a flat index."""
        return index % self.width, index // self.width

    @property
    def height(self) -> int:
        return len(self.squares) // self.width if self.width else 0