"""Random generation of the bonus-level map."""

from __future__ import annotations

import random

from blastgrid.grid import SquareType

DEFAULT_WIDTH = 21
DEFAULT_HEIGHT = 21


class MapGenerator:
    """Builds a walled map with a pillar lattice and randomly placed bricks."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()

    def _square(self, row: int, col: int) -> SquareType:
        if col in (0, self.width - 1) or row in (0, self.height - 1):
            return SquareType.WALL
        if row % 2 == 0 and col % 2 == 0:
            return SquareType.WALL
        if col < 3 and row < 3:
            return SquareType.EMPTY
        return SquareType.BRICK if self._rng.randrange(5) == 0 else SquareType.EMPTY

    def generate(self) -> list[SquareType]:
        """Row-major list of squares, width * height long."""
        return [
            self._square(row, col)
            for row in range(self.height)
            for col in range(self.width)
        ]