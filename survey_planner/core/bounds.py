"""Bounds helpers shared by the survey model and the grid planner."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import APPROX_EPSILON, Vector3, within


@dataclass(frozen=True)
class AxisBounds:
    minimum: float
    maximum: float

    @property
    def span(self) -> float:
        return self.maximum - self.minimum

    def contains(self, value: float, epsilon: float = APPROX_EPSILON) -> bool:
        return within(value, self.minimum, self.maximum, epsilon)


@dataclass(frozen=True)
class PlanarBounds:
    """Horizontal rectangle of the survey area (X east, Z forward)."""

    x: AxisBounds
    z: AxisBounds

    def axis(self, index: int) -> AxisBounds:
        return self.x if index == 0 else self.z

    def contains(self, point: tuple[float, float], epsilon: float = APPROX_EPSILON) -> bool:
        return self.x.contains(point[0], epsilon) and self.z.contains(point[1], epsilon)


@dataclass(frozen=True)
class SurveyBounds:
    """Full 3D box in the simulation frame (Y up)."""

    x: AxisBounds
    y: AxisBounds
    z: AxisBounds

    def contains(self, position: Vector3, epsilon: float = APPROX_EPSILON) -> bool:
        return (
            self.x.contains(position.x, epsilon)
            and self.y.contains(position.y, epsilon)
            and self.z.contains(position.z, epsilon)
        )


__all__ = [
    "AxisBounds",
    "PlanarBounds",
    "SurveyBounds",
]
