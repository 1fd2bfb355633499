"""Positioned game objects and the ones that move with simple physics."""

from __future__ import annotations

import itertools
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from blastgrid.geometry import Vec2

Clock = Callable[[], float]
SoundPlayer = Callable[[str], None]


def _vec(value) -> Vec2:
    if isinstance(value, Vec2):
        return value
    x, y = value
    return Vec2(float(x), float(y))


def angle_between(vec, target) -> float:
    """Signed angle from target to vec, as a difference of their polar angles."""
    vec = _vec(vec)
    target = _vec(target)
    return math.atan2(vec.y, vec.x) - math.atan2(target.y, target.x)


class AnimationType(Enum):
    IDLE = "idle"
    RUNNING = "running"
    DYING = "dying"


@dataclass
class AnimationState:
    """Which animation an entity is playing and how far into it."""

    kind: AnimationType = AnimationType.IDLE
    time: float = 0.0

    def tick(self, delta_time: float) -> None:
        self.time += delta_time


class Entity:
    """Something placed on the map with a position, facing angle and scale."""

    _uids = itertools.count()

    def __init__(self, position=Vec2(), angle: float = 0.0) -> None:
        self.position = _vec(position)
        self.angle = angle
        self.uid = next(Entity._uids)
        self.scale = 1.0
        self.dead = False

    def position3d(self) -> tuple[float, float, float]:
        """Position in world space, where the map lies in the x-z plane."""
        return (self.position.x, 0.0, self.position.y)

    def kill(self) -> None:
        self.dead = True

    def move(self, offset) -> None:
        self.position = self.position + _vec(offset)

    def model_matrix(self) -> tuple[tuple[float, ...], ...]:
        """Row-major 4x4 matrix: translate, then rotate about Y, then scale."""
        c = math.cos(self.angle) * self.scale
        s = math.sin(self.angle) * self.scale
        return (
            (c, 0.0, s, self.position.x),
            (0.0, self.scale, 0.0, 0.0),
            (-s, 0.0, c, self.position.y),
            (0.0, 0.0, 0.0, 1.0),
        )


def _clamp(value: Vec2, limit: float) -> Vec2:
    return Vec2(min(max(value.x, -limit), limit), min(max(value.y, -limit), limit))


class MovingEntity(Entity):
    """An entity moved by Euler integration with friction and speed limits."""

    FRICTION = 17.0
    MAX_VELOCITY = 4.0
    MAX_ACCELERATION = 60.0
    DEATH_DELAY = 2.0
    RUNNING_SPEED = 0.2
    TURN_RATE = 4.0

    def __init__(
        self,
        position=Vec2(),
        angle: float = 0.0,
        velocity=Vec2(),
        acceleration=Vec2(),
        *,
        clock: Clock = time.monotonic,
        sound: SoundPlayer | None = None,
    ) -> None:
        super().__init__(position, angle)
        self.velocity = _vec(velocity)
        self.acceleration = _vec(acceleration)
        self.clock = clock
        self.sound = sound
        self.animation = AnimationState()
        self.time_of_death = 0.0

    def _play(self, name: str) -> None:
        if self.sound is not None:
            self.sound(name)

    def speed(self) -> float:
        return self.velocity.length()

    def add_velocity(self, offset) -> None:
        self.velocity = self.velocity + _vec(offset)

    def add_acceleration(self, offset) -> None:
        self.acceleration = self.acceleration + _vec(offset)

    def is_dead_for_awhile(self) -> bool:
        return self.dead and self.clock() > self.time_of_death + self.DEATH_DELAY

    def kill(self) -> None:
        self._play("ugh")
        self.animation.time = 0.0
        self.time_of_death = self.clock()
        super().kill()

    def _animate(self, delta_time: float) -> None:
        self.animation.tick(delta_time)
        if self.dead:
            self.animation.kind = AnimationType.DYING
        elif self.speed() >= self.RUNNING_SPEED:
            self.animation.kind = AnimationType.RUNNING
        else:
            self.animation.kind = AnimationType.IDLE

    def _rotate(self, delta_time: float) -> None:
        forward = Vec2(0.0, 1.0)
        desired = angle_between(forward, self.velocity)
        turn = math.remainder(desired - self.angle, math.tau)
        result = self.angle + turn * (self.TURN_RATE * delta_time)
        self.angle = angle_between(forward, Vec2(math.sin(result), math.cos(result)))

    def tick(self, delta_time: float) -> None:
        self._animate(delta_time)
        if self.dead:
            return
        if self.acceleration == Vec2() and self.velocity == Vec2():
            return
        self._rotate(delta_time)
        self.acceleration = _clamp(self.acceleration, self.MAX_ACCELERATION)
        self.velocity = self.velocity + self.acceleration * delta_time
        damping = self.velocity * (self.FRICTION * delta_time)
        damping_length = damping.length()
        speed = self.speed()
        if damping_length > speed:
            damping = damping / damping_length * speed
        self.velocity = _clamp(self.velocity - damping, self.MAX_VELOCITY)
        self.move(self.velocity * delta_time)
        self.acceleration = Vec2()