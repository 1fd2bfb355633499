"""A 3D camera that flies freely or follows an entity from above."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

Matrix4 = tuple[tuple[float, float, float, float], ...]


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other) -> Vec3:
        o = _as_vec3(other)
        return Vec3(self.x + o.x, self.y + o.y, self.z + o.z)

    __radd__ = __add__

    def __sub__(self, other) -> Vec3:
        o = _as_vec3(other)
        return Vec3(self.x - o.x, self.y - o.y, self.z - o.z)

    def __mul__(self, other) -> Vec3:
        o = _as_vec3(other)
        return Vec3(self.x * o.x, self.y * o.y, self.z * o.z)

    __rmul__ = __mul__

    def __truediv__(self, other) -> Vec3:
        o = _as_vec3(other)
        return Vec3(self.x / o.x, self.y / o.y, self.z / o.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other) -> float:
        o = _as_vec3(other)
        return self.x * o.x + self.y * o.y + self.z * o.z

    def cross(self, other) -> Vec3:
        o = _as_vec3(other)
        return Vec3(
            self.y * o.z - self.z * o.y,
            self.z * o.x - self.x * o.z,
            self.x * o.y - self.y * o.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return Vec3()
        return Vec3(self.x / length, self.y / length, self.z / length)


def _as_vec3(value) -> Vec3:
    if isinstance(value, Vec3):
        return value
    if isinstance(value, (int, float)):
        return Vec3(float(value), float(value), float(value))
    x, y, z = value
    return Vec3(float(x), float(y), float(z))


def _mix(a: Vec3, b: Vec3, t: float) -> Vec3:
    return a + (b - a) * t


def look_at(eye, center, up) -> Matrix4:
    """Right-handed row-major view matrix looking from eye toward center."""
    eye = _as_vec3(eye)
    forward = (_as_vec3(center) - eye).normalized()
    side = forward.cross(up).normalized()
    upward = side.cross(forward)
    return (
        (side.x, side.y, side.z, -side.dot(eye)),
        (upward.x, upward.y, upward.z, -upward.dot(eye)),
        (-forward.x, -forward.y, -forward.z, forward.dot(eye)),
        (0.0, 0.0, 0.0, 1.0),
    )


class CameraDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"
    UPWARD = "upward"
    DOWNWARD = "downward"


class Camera:
    """Euler-angle camera with zoom, shake and an entity-following mode."""

    YAW = -90.0
    PITCH = 0.0
    SPEED = 2.5
    SENSITIVITY = 0.1
    ZOOM = 45.0
    MIN_ZOOM = 1.0
    MAX_ZOOM = 45.0
    FOLLOW_ZOOM = 0.9
    FOLLOW_SPEED = 2.0
    FOLLOW_HEIGHT = 1.4
    SHAKE_DECAY = 3.5

    def __init__(
        self,
        position=Vec3(),
        up=Vec3(0.0, 1.0, 0.0),
        yaw: float = YAW,
        pitch: float = PITCH,
    ) -> None:
        self.position = _as_vec3(position)
        self.front = Vec3(0.0, 0.0, -1.0)
        self.world_up = _as_vec3(up)
        self.up = self.world_up
        self.right = Vec3(1.0, 0.0, 0.0)
        self.yaw = yaw
        self.pitch = pitch
        self.movement_speed = self.SPEED
        self.mouse_sensitivity = self.SENSITIVITY
        self.zoom = self.ZOOM
        self.shake_amount = 0.0
        self._update_vectors()
        self._apply_transform()

    def view_matrix(self) -> Matrix4:
        return self._view

    def follow_entity(self, target, distance: float, delta_time: float, now: float) -> None:
        """Glide toward a spot above and behind the target, shaking if asked to."""
        d = distance * self.FOLLOW_ZOOM
        tx, ty, tz = target.position3d()
        desired = Vec3(tx, d * self.FOLLOW_HEIGHT, tz + d)
        self.position = _mix(self.position, desired, delta_time * self.FOLLOW_SPEED)
        wobble = Vec3(math.sin(now * 20), math.cos(now * 10), 0.4)
        self.position = self.position + wobble * self.shake_amount
        self.shake_amount += (0.0 - self.shake_amount) * (delta_time * self.SHAKE_DECAY)
        self._view = look_at(self.position, Vec3(tx, ty, tz), self.up)

    def add_shake(self, amount: float) -> None:
        self.shake_amount += amount

    def move_camera(self, direction: CameraDirection, delta_time: float) -> None:
        velocity = self.movement_speed * delta_time
        steps = {
            CameraDirection.FORWARD: self.front,
            CameraDirection.BACKWARD: -self.front,
            CameraDirection.LEFT: -self.right,
            CameraDirection.RIGHT: self.right,
            CameraDirection.UPWARD: self.up,
            CameraDirection.DOWNWARD: -self.up,
        }
        self.position = self.position + steps[direction] * velocity
        self._apply_transform()

    def process_mouse_movement(self, xoffset: float, yoffset: float) -> None:
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        self._update_vectors()
        self._apply_transform()

    def process_mouse_scroll(self, zoom_factor: float) -> None:
        if self.MIN_ZOOM <= self.zoom <= self.MAX_ZOOM:
            self.zoom -= zoom_factor
        self.zoom = min(max(self.zoom, self.MIN_ZOOM), self.MAX_ZOOM)

    def _apply_transform(self) -> None:
        self._view = look_at(self.position, self.position + self.front, self.up)

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.front = Vec3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ).normalized()
        self.right = self.front.cross(self.world_up).normalized()
        self.up = self.right.cross(self.front).normalized()