"""Per-frame ticking of registered objects and the game clock."""

from __future__ import annotations

import time
from typing import Callable, Iterator, Protocol


class Tickable(Protocol):
    def tick(self, delta_time: float) -> None: ...


class TickRegistry:
    """Objects that are advanced together once per frame, in registration order."""

    def __init__(self) -> None:
        self._items: list[Tickable] = []

    def register(self, item: Tickable) -> None:
        self._items.append(item)

    def unregister(self, item: Tickable) -> None:
        """Remove every registration of this exact object."""
        self._items = [existing for existing in self._items if existing is not item]

    def tick_all(self, delta_time: float) -> None:
        for item in list(self._items):
            item.tick(delta_time)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tickable]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._items)


class GameClock:
    """Game time sampled once per frame, with an adjustable speed of time."""

    MAX_DELTA = 1.0
    FALLBACK_DELTA = 0.016

    def __init__(self, counter: Callable[[], float] = time.perf_counter, speed: float = 1.0) -> None:
        self._counter = counter
        self.speed = speed
        self._time_now = counter()
        self._correction = 0.0
        self.delta_time = 0.0

    def now(self) -> float:
        """Game time as of the last frame, slowed down by the speed of time."""
        return self._time_now - self._correction

    def advance(self) -> float:
        """Sample the counter for a new frame and return the frame's delta time."""
        last = self._time_now
        self._time_now = self._counter()
        delta = self._time_now - last
        if delta > self.MAX_DELTA:
            delta = self.FALLBACK_DELTA
        if self.speed != 1.0:
            scaled = delta * self.speed
            self._correction += delta - scaled
            delta = scaled
        self.delta_time = delta
        return delta