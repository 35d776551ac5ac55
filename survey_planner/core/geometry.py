"""Small vector/quaternion helpers for the simulation frame (Y up, Z forward)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

APPROX_EPSILON = 1e-9


def approximately(a: float, b: float, epsilon: float = APPROX_EPSILON) -> bool:
    """Relative comparison scaled by the larger magnitude (never below ``epsilon``)."""

    return abs(a - b) <= epsilon * max(1.0, abs(a), abs(b))


def within(value: float, minimum: float, maximum: float, epsilon: float = APPROX_EPSILON) -> bool:
    """Inclusive range check that accepts values approximately equal to either bound."""

    above = minimum < value or approximately(minimum, value, epsilon)
    below = value < maximum or approximately(value, maximum, epsilon)
    return above and below


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Vector3":
        if len(values) != 3:
            raise ValueError(f"Expected 3 components, got {len(values)}")
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in self.as_tuple())


@dataclass(frozen=True)
class Quaternion:
    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, degrees: float) -> "Quaternion":
        norm = axis.length()
        if norm == 0.0:
            return cls.identity()
        half = math.radians(degrees) / 2.0
        s = math.sin(half) / norm
        return cls(math.cos(half), axis.x * s, axis.y * s, axis.z * s)

    @classmethod
    def from_euler(cls, pitch_deg: float, yaw_deg: float, roll_deg: float = 0.0) -> "Quaternion":
        """Yaw about Y, then pitch about the rotated X, then roll about the rotated Z."""

        yaw = cls.from_axis_angle(Vector3(0.0, 1.0, 0.0), yaw_deg)
        pitch = cls.from_axis_angle(Vector3(1.0, 0.0, 0.0), pitch_deg)
        roll = cls.from_axis_angle(Vector3(0.0, 0.0, 1.0), roll_deg)
        return yaw * pitch * roll

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    def conjugate(self) -> "Quaternion":
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def rotate(self, vector: Vector3) -> Vector3:
        rotated = self * Quaternion(0.0, vector.x, vector.y, vector.z) * self.conjugate()
        return Vector3(rotated.x, rotated.y, rotated.z)

    def forward(self) -> Vector3:
        return self.rotate(Vector3(0.0, 0.0, 1.0))

    def yaw_deg(self) -> float:
        fwd = self.forward()
        return math.degrees(math.atan2(fwd.x, fwd.z))

    def pitch_deg(self) -> float:
        fwd = self.forward()
        return math.degrees(math.atan2(-fwd.y, math.hypot(fwd.x, fwd.z)))

    def approximately(self, other: "Quaternion", epsilon: float = APPROX_EPSILON) -> bool:
        # q and -q encode the same rotation
        dot = self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z
        return approximately(abs(dot), 1.0, epsilon)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.w, self.x, self.y, self.z)


def look_rotation(direction: Vector3) -> Quaternion:
    """Rotation whose forward (+Z) axis points along ``direction`` with Y kept up.

    A zero-length direction yields the identity rotation.
    """

    if direction.length() == 0.0:
        return Quaternion.identity()
    yaw = math.degrees(math.atan2(direction.x, direction.z))
    pitch = math.degrees(math.atan2(-direction.y, math.hypot(direction.x, direction.z)))
    return Quaternion.from_euler(pitch, yaw)


def rotation_between_waypoints(current: Vector3, target: Vector3, camera_angle_deg: float) -> Quaternion:
    """Look from ``current`` toward ``target`` and tilt the camera about the lateral axis."""

    return look_rotation(target - current) * Quaternion.from_axis_angle(Vector3(1.0, 0.0, 0.0), camera_angle_deg)


__all__ = [
    "APPROX_EPSILON",
    "approximately",
    "within",
    "Vector3",
    "Quaternion",
    "look_rotation",
    "rotation_between_waypoints",
]
