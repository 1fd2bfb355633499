"""Bombs: they grow in, burn their fuse, then explode."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable

from blastgrid.entity import Clock, Entity
from blastgrid.geometry import Vec2
from blastgrid.grid import CollisionInfo, SquareType

ExplosionHandler = Callable[[Vec2, int], None]


class BombPhase(Enum):
    SPAWNING = "spawning"
    COUNTING = "counting"


class Bomb(Entity):
    """A bomb centred on a grid square, occupying it until released."""

    FUSE_TIME = 3.0
    SPAWN_TIME = 0.5

    def __init__(
        self,
        position,
        explosion_strength: int,
        grid: CollisionInfo,
        *,
        clock: Clock = time.monotonic,
        on_explode: ExplosionHandler | None = None,
        on_release: Callable[[], None] | None = None,
    ) -> None:
        x, y = position
        super().__init__(Vec2(float(x), float(y)).floor() + 0.5)
        self.explosion_strength = explosion_strength
        self.grid = grid
        self.clock = clock
        self.on_explode = on_explode
        self.on_release = on_release
        self.spark: tuple[float, float, float, float] | None = None
        self.time_to_explode = 0.0
        self._released = False
        grid[self.position] = SquareType.BOMB
        self._enter_spawning()

    def _enter_spawning(self) -> None:
        self.phase = BombPhase.SPAWNING
        self._start_time = self.clock()
        self.scale = 0.0

    def _enter_counting(self) -> None:
        self.phase = BombPhase.COUNTING
        self.scale = 1.0
        now = self.clock()
        self.time_to_explode = now + self.FUSE_TIME - self.SPAWN_TIME
        countdown = self.time_to_explode - now
        x, y, z = self.position3d()
        self.spark = (x - 0.1, y + 0.5, z, countdown)

    def tick(self, delta_time: float) -> None:
        """Advance the bomb; it explodes once its fuse has burnt."""
        if self.dead:
            return
        now = self.clock()
        if self.phase is BombPhase.SPAWNING:
            if now - self._start_time >= self.SPAWN_TIME:
                self._enter_counting()
            else:
                self.scale = (now - self._start_time) / self.SPAWN_TIME
                return
        if now >= self.time_to_explode:
            if self.on_explode is not None:
                self.on_explode(self.position, self.explosion_strength)
            self.kill()

    def release(self) -> None:
        """Free the bomb's square and give the bomb back to its owner; only once."""
        if self._released:
            return
        self._released = True
        if self.on_release is not None:
            self.on_release()
        self.grid[self.position] = SquareType.EMPTY