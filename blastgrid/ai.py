"""Enemy behaviour: grid helpers and an idle/patrol/chase/confused state machine."""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Callable, ClassVar, Optional

from blastgrid.entity import Clock, MovingEntity, SoundPlayer
from blastgrid.geometry import Vec2
from blastgrid.grid import CollisionInfo, SquareType

HeroLocator = Callable[[], Vec2]

OFF_RAILS_TOLERANCE = 0.02
RAIL_CORRECTION = 15.0
CHASE_ACCELERATION = 40.0
RECENTER_GAIN = 2.0
IDLE_DURATION = 0.3
VISION_CONE = -0.1


class Direction(IntFlag):
    """Grid directions as bits, so several can be combined."""

    NONE = 0
    DOWN = 1
    RIGHT = 1 << 1
    UP = 1 << 2
    LEFT = 1 << 3


_VECTORS = {
    Direction.DOWN: Vec2(0.0, 1.0),
    Direction.RIGHT: Vec2(1.0, 0.0),
    Direction.UP: Vec2(0.0, -1.0),
    Direction.LEFT: Vec2(-1.0, 0.0),
}


def _vec(value) -> Vec2:
    if isinstance(value, Vec2):
        return value
    x, y = value
    return Vec2(float(x), float(y))


def closest_center(position) -> Vec2:
    """Centre of the grid square holding the position."""
    return _vec(position).floor() + 0.5


def available_directions(grid: CollisionInfo, position) -> Direction:
    """Directions whose neighbouring square is empty."""
    position = _vec(position)
    result = Direction.NONE
    for direction, offset in _VECTORS.items():
        if grid[position + offset] == SquareType.EMPTY:
            result |= direction
    return result


def pick_random_direction(grid: CollisionInfo, position, rng) -> Vec2:
    """A random open direction as a unit vector; zero when boxed in."""
    available = available_directions(grid, position)
    if not available:
        return Vec2()
    bit = 1 << rng.randrange(4)
    while True:
        if bit > Direction.LEFT:
            bit = Direction.DOWN
        if available & bit:
            return _VECTORS[Direction(bit)]
        bit <<= 1


def march(grid: CollisionInfo, start, direction, distance: int) -> Vec2:
    """Step along a direction until the next square is blocked or the distance runs out."""
    current = _vec(start)
    step = _vec(direction)
    for _ in range(distance):
        if grid[current + step] != SquareType.EMPTY:
            break
        current = current + step
    return closest_center(current)


def _recenter(pawn: MovingEntity) -> None:
    pawn.add_velocity((closest_center(pawn.position) - pawn.position) * RECENTER_GAIN)


def move_ai(grid: CollisionInfo, pawn: MovingEntity, destination) -> bool:
    """Push the pawn toward a destination; False when blocked or already there."""
    destination = _vec(destination)
    position = pawn.position

    off_rails = closest_center(position) - position
    abs_x, abs_y = abs(off_rails.x), abs(off_rails.y)
    if abs_x > OFF_RAILS_TOLERANCE and abs_y > OFF_RAILS_TOLERANCE:
        correction = Vec2(off_rails.x, 0.0) if abs_x < abs_y else Vec2(0.0, off_rails.y)
        pawn.add_acceleration(correction.normalized() * RAIL_CORRECTION)

    direction = destination - position
    length = direction.length()

    first_obstacle = march(grid, position, direction.normalized(), int(length + 0.5))
    if position.distance(first_obstacle) < length:
        return False

    if length < OFF_RAILS_TOLERANCE:
        _recenter(pawn)
        return False

    pawn.add_acceleration(direction / length * CHASE_ACCELERATION)
    return True


def check_visibility(grid: CollisionInfo, pawn, point) -> bool:
    """Whether the pawn faces the point and sees it along a clear row or column."""
    point = _vec(point)
    direction = (point - pawn.position).normalized()
    vision = Vec2(math.sin(pawn.angle), math.cos(pawn.angle))
    if direction.dot(vision) <= VISION_CONE:
        return False

    ax, ay = (int(c) for c in pawn.position)
    bx, by = (int(c) for c in point)
    if (ax, ay) == (bx, by):
        return True
    if ax == bx:
        return all(
            grid[(ax, row)] == SquareType.EMPTY for row in range(min(ay, by), max(ay, by))
        )
    if ay == by:
        return all(
            grid[(col, ay)] == SquareType.EMPTY for col in range(min(ax, bx), max(ax, bx))
        )
    return False


@dataclass
class IdleState:
    """Stand still on the square centre for a moment."""

    name: ClassVar[str] = "idle"
    transition_to_patrol: float = 0.0

    def on_entry(self, controller: AIController, pawn: MovingEntity) -> None:
        self.transition_to_patrol = controller.clock() + IDLE_DURATION

    def on_tick(self, controller: AIController, pawn: MovingEntity, delta_time: float) -> None:
        _recenter(pawn)

    def next_state(self, controller: AIController) -> Optional[type]:
        if self.transition_to_patrol <= controller.clock():
            return PatrolState
        return None


@dataclass
class PatrolState:
    """Walk a random distance in a random open direction, watching for the hero."""

    name: ClassVar[str] = "patrol"
    current_direction: Vec2 = field(default_factory=Vec2)
    short_term_goal: Vec2 = field(default_factory=Vec2)
    should_idle: bool = False
    sees_player: bool = False

    def on_entry(self, controller: AIController, pawn: MovingEntity) -> None:
        grid = controller.grid
        self.sees_player = False
        self.current_direction = pick_random_direction(grid, pawn.position, controller.rng)
        start = pawn.position
        goal = march(grid, start, self.current_direction, grid.width)
        distance = int((goal - start).length() + 0.5)
        steps = controller.rng.randrange(distance + 1)
        self.short_term_goal = start + self.current_direction * float(steps)
        self.should_idle = False

    def on_tick(self, controller: AIController, pawn: MovingEntity, delta_time: float) -> None:
        if not move_ai(controller.grid, pawn, self.short_term_goal):
            self.should_idle = True
            return
        self.sees_player = check_visibility(controller.grid, pawn, controller.hero_position())

    def next_state(self, controller: AIController) -> Optional[type]:
        if self.should_idle:
            return IdleState
        if self.sees_player:
            return ChaseState
        return None


@dataclass
class ChaseState:
    """Run to where the hero was last seen."""

    name: ClassVar[str] = "chase"
    last_seen_player: Vec2 = field(default_factory=Vec2)
    sees_player: bool = False
    is_confused: bool = False

    def on_entry(self, controller: AIController, pawn: MovingEntity) -> None:
        self.sees_player = True
        self.is_confused = False
        self.last_seen_player = Vec2()

    def on_tick(self, controller: AIController, pawn: MovingEntity, delta_time: float) -> None:
        grid = controller.grid
        hero = _vec(controller.hero_position())
        self.sees_player = check_visibility(grid, pawn, hero)
        if self.sees_player:
            self.last_seen_player = closest_center(hero)
        if self.last_seen_player == Vec2():
            self.is_confused = True
            return
        at_destination = not move_ai(grid, pawn, self.last_seen_player)
        self.is_confused = (not self.sees_player and at_destination) or not check_visibility(
            grid, pawn, self.last_seen_player
        )

    def next_state(self, controller: AIController) -> Optional[type]:
        return ConfusedState if self.is_confused else None


@dataclass
class ConfusedState:
    """Look around for a while after losing the hero."""

    name: ClassVar[str] = "confused"
    confusion_started: float = 0.0
    initial_angle: float = 0.0
    sees_player: bool = False

    def on_entry(self, controller: AIController, pawn: MovingEntity) -> None:
        self.confusion_started = controller.clock()
        self.initial_angle = pawn.angle
        self.sees_player = False

    def on_tick(self, controller: AIController, pawn: MovingEntity, delta_time: float) -> None:
        elapsed = controller.clock() - self.confusion_started
        pawn.angle = self.initial_angle + math.sin(elapsed * 2)
        self.sees_player = check_visibility(controller.grid, pawn, controller.hero_position())

    def next_state(self, controller: AIController) -> Optional[type]:
        if controller.clock() - self.confusion_started >= math.pi:
            return PatrolState
        if self.sees_player:
            return ChaseState
        return None


class AIController:
    """Runs one enemy's state machine; it starts idle."""

    def __init__(
        self,
        grid: CollisionInfo,
        hero_position: HeroLocator,
        *,
        clock: Clock = time.monotonic,
        rng=None,
    ) -> None:
        self.grid = grid
        self.hero_position = hero_position
        self.clock = clock
        self.rng = rng if rng is not None else random.Random()
        self._states = {
            cls: cls() for cls in (IdleState, PatrolState, ChaseState, ConfusedState)
        }
        self._current = None

    @property
    def state(self):
        """The active state, or None before the first tick."""
        return self._current

    def _enter(self, state_type: type, pawn: MovingEntity) -> None:
        self._current = self._states[state_type]
        self._current.on_entry(self, pawn)

    def tick(self, pawn: MovingEntity, delta_time: float) -> None:
        if self._current is None:
            self._enter(IdleState, pawn)
        self._current.on_tick(self, pawn, delta_time)
        following = self._current.next_state(self)
        if following is not None:
            self._enter(following, pawn)


class Enemy(MovingEntity):
    """A moving enemy steered by its own AI controller."""

    def __init__(
        self,
        position,
        grid: CollisionInfo,
        hero_position: HeroLocator,
        *,
        kind: str = "balloon",
        clock: Clock = time.monotonic,
        sound: SoundPlayer | None = None,
        rng=None,
    ) -> None:
        super().__init__(position, clock=clock, sound=sound)
        self.kind = kind
        self.controller = AIController(grid, hero_position, clock=clock, rng=rng)