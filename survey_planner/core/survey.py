"""Survey area and camera definitions used to derive grid step pitches."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .bounds import AxisBounds, PlanarBounds, SurveyBounds
from .errors import InvalidConfiguration
from .geometry import Vector3, approximately

Point2D = Tuple[float, float]


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidConfiguration(f"{name} must be a finite number, got {value!r}")


def _require_overlap(name: str, value: float) -> None:
    _require_finite(name, value)
    if not 0.0 <= value < 100.0:
        raise InvalidConfiguration(f"{name} must be within [0, 100), got {value}")


@dataclass(frozen=True)
class SurveyArea:
    """Axis-aligned box to cover plus the requested image overlaps (percent)."""

    center: Vector3
    extents: Vector3
    frontal_overlap: float
    side_overlap: float

    def __post_init__(self) -> None:
        if not self.center.is_finite():
            raise InvalidConfiguration(f"Survey area center must be finite, got {self.center}")
        if not self.extents.is_finite():
            raise InvalidConfiguration(f"Survey area extents must be finite, got {self.extents}")
        for axis, value in zip("xyz", self.extents.as_tuple()):
            if value < 0.0:
                raise InvalidConfiguration(f"Survey area extent along {axis.upper()} cannot be negative ({value})")
        _require_overlap("frontal_overlap", self.frontal_overlap)
        _require_overlap("side_overlap", self.side_overlap)

    @property
    def bottom_left(self) -> Point2D:
        return (self.center.x - self.extents.x, self.center.z - self.extents.z)

    @property
    def top_right(self) -> Point2D:
        return (self.center.x + self.extents.x, self.center.z + self.extents.z)

    @property
    def floor(self) -> float:
        return self.center.y - self.extents.y

    def horizontal_bounds(self) -> PlanarBounds:
        (x_min, z_min), (x_max, z_max) = self.bottom_left, self.top_right
        return PlanarBounds(AxisBounds(x_min, x_max), AxisBounds(z_min, z_max))

    def bounds(self, ceiling: float | None = None) -> SurveyBounds:
        """3D bounds of the area; ``ceiling`` raises the top to include flight altitudes."""

        horizontal = self.horizontal_bounds()
        top = self.center.y + self.extents.y
        if ceiling is not None:
            top = max(top, ceiling)
        return SurveyBounds(horizontal.x, AxisBounds(self.floor, top), horizontal.z)


@dataclass(frozen=True)
class ImageFootprint:
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class CameraDefinition:
    """Pinhole camera intrinsics (sensor size and focal length share a unit)."""

    sensor_size_x: float
    sensor_size_y: float
    focal_length: float

    def __post_init__(self) -> None:
        for name in ("sensor_size_x", "sensor_size_y", "focal_length"):
            value = getattr(self, name)
            _require_finite(name, value)
            if value <= 0.0:
                raise InvalidConfiguration(f"{name} must be positive, got {value}")

    def footprint(self, altitude: float) -> ImageFootprint:
        """Ground footprint of one image taken from ``altitude`` metres."""

        return ImageFootprint(
            width=altitude * self.sensor_size_x / self.focal_length,
            height=altitude * self.sensor_size_y / self.focal_length,
        )


@dataclass(frozen=True)
class GridPassConfig:
    """Altitude above the survey floor and camera tilt (degrees) for one pass."""

    relative_altitude: float
    camera_angle: float = 0.0

    def __post_init__(self) -> None:
        _require_finite("relative_altitude", self.relative_altitude)
        _require_finite("camera_angle", self.camera_angle)


@dataclass(frozen=True)
class StepPitch:
    frontal: float
    side: float


def step_pitch(area: SurveyArea, camera: CameraDefinition, altitude: float) -> StepPitch:
    """Forward and lateral sampling pitches at ``altitude``.

    Raises :class:`InvalidConfiguration` when either pitch is not positive or is
    too small to move a coordinate at the area's edges, since the scan would
    never leave its first line.
    """

    footprint = camera.footprint(altitude)
    if footprint.width <= 0.0 or footprint.height <= 0.0:
        raise InvalidConfiguration(
            f"Image footprint at altitude {altitude} must be positive "
            f"(got {footprint.width:.3f} x {footprint.height:.3f})"
        )
    frontal = footprint.height * (100.0 - area.frontal_overlap) / 100.0
    side = footprint.width * (100.0 - area.side_overlap) / 100.0
    if frontal <= 0.0 or side <= 0.0:
        raise InvalidConfiguration(f"Step pitches must be positive (frontal={frontal}, side={side})")
    _require_resolvable(area, frontal=frontal, side=side)
    return StepPitch(frontal=frontal, side=side)


def _require_resolvable(area: SurveyArea, **steps: float) -> None:
    (x_min, z_min), (x_max, z_max) = area.bottom_left, area.top_right
    for name, step in steps.items():
        for edge in (x_min, x_max, z_min, z_max):
            if approximately(edge, edge + step):
                raise InvalidConfiguration(
                    f"{name} step {step} is below the coordinate resolution at {edge}; "
                    "move the survey area closer to the origin"
                )


__all__ = [
    "Point2D",
    "SurveyArea",
    "CameraDefinition",
    "ImageFootprint",
    "GridPassConfig",
    "StepPitch",
    "step_pitch",
]
