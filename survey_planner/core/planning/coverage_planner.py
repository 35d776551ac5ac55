"""Coverage planning utilities (boustrophedon / serpentine grid passes)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..bounds import PlanarBounds
from ..errors import DegenerateArea
from ..geometry import Quaternion, Vector3, approximately, rotation_between_waypoints
from ..steps import FlightStep
from ..survey import CameraDefinition, GridPassConfig, Point2D, StepPitch, SurveyArea, step_pitch

logger = logging.getLogger(__name__)

AXIS_X = 0
AXIS_Z = 1
_AXIS_NAMES = ("x", "z")


@dataclass(frozen=True)
class ScanPattern:
    """Where a serpentine scan starts and which way it sweeps.

    The major axis is the one each line runs along; the minor axis is the one
    stepped between lines.
    """

    major_axis: int
    major_direction: int
    minor_direction: int
    start_corner: str  # "bottom_left" or "top_right"

    @property
    def minor_axis(self) -> int:
        return 1 - self.major_axis


# Lines along Z, stepping +X from the bottom-left corner.
FIRST_GRID = ScanPattern(major_axis=AXIS_Z, major_direction=1, minor_direction=1, start_corner="bottom_left")
# Lines along X, stepping -Z from the top-right corner.
SECOND_GRID = ScanPattern(major_axis=AXIS_X, major_direction=-1, minor_direction=-1, start_corner="top_right")


@dataclass(frozen=True)
class GridPass:
    name: str
    altitude: float
    camera_angle: float
    frontal_step: float
    side_step: float
    waypoints: Tuple[Vector3, ...]
    steps: Tuple[FlightStep, ...]
    line_count: int
    notices: Tuple[DegenerateArea, ...] = ()


def serpentine_scan(
    bounds: PlanarBounds,
    start: Point2D,
    major_axis: int,
    major_step: float,
    minor_step: float,
    major_direction: int = 1,
    minor_direction: int = 1,
) -> List[List[Point2D]]:
    """Sweep ``bounds`` back and forth, returning the points of each line.

    Points on a line are spaced ``major_step`` apart along ``major_axis``; lines
    are spaced ``minor_step`` apart along the other axis. When a line leaves the
    area the sweep reverses and steps back onto the last in-range coordinate
    before moving to the next line. Both bounds are inclusive within the
    tolerance of :func:`~survey_planner.core.geometry.approximately`.
    """

    if major_step <= 0.0 or minor_step <= 0.0:
        raise ValueError("serpentine_scan requires positive steps")
    for axis, step in ((major_axis, major_step), (1 - major_axis, minor_step)):
        axis_range = bounds.axis(axis)
        for edge in (axis_range.minimum, axis_range.maximum):
            if approximately(edge, edge + step):
                raise ValueError(f"step {step} does not advance past coordinate {edge}")

    minor_axis = 1 - major_axis
    major_range = bounds.axis(major_axis)
    minor_range = bounds.axis(minor_axis)
    major = start[major_axis]
    minor = start[minor_axis]
    direction = major_direction

    lines: List[List[Point2D]] = []
    while minor_range.contains(minor):
        line: List[Point2D] = []
        while major_range.contains(major):
            line.append(_compose(major_axis, major, minor))
            major += major_step * direction
        lines.append(line)
        direction = -direction
        major += major_step * direction
        minor += minor_step * minor_direction
    return lines


def _compose(major_axis: int, major: float, minor: float) -> Point2D:
    return (major, minor) if major_axis == AXIS_X else (minor, major)


def waypoints_to_flight_steps(waypoints: Sequence[Vector3], camera_angle: float) -> List[FlightStep]:
    """Orient each waypoint toward its successor, tilted by ``camera_angle``.

    The final waypoint keeps the orientation of the step before it. A lone
    waypoint only gets the camera tilt.
    """

    steps: List[FlightStep] = []
    orientation: Optional[Quaternion] = None
    for current, target in zip(waypoints, waypoints[1:]):
        orientation = rotation_between_waypoints(current, target, camera_angle)
        steps.append(FlightStep(current, orientation))
    if waypoints:
        if orientation is None:
            orientation = Quaternion.from_axis_angle(Vector3(1.0, 0.0, 0.0), camera_angle)
        steps.append(FlightStep(waypoints[-1], orientation))
    return steps


def resolve_pass(area: SurveyArea, camera: CameraDefinition, config: GridPassConfig) -> Tuple[float, StepPitch]:
    """Absolute altitude and validated step pitches for one pass, without scanning."""

    altitude = area.floor + config.relative_altitude
    return altitude, step_pitch(area, camera, altitude)


def plan_grid_pass(
    name: str,
    area: SurveyArea,
    camera: CameraDefinition,
    config: GridPassConfig,
    pattern: ScanPattern,
) -> GridPass:
    """Plan one serpentine pass over ``area`` at ``area.floor + relative_altitude``."""

    altitude, pitch = resolve_pass(area, camera, config)
    bounds = area.horizontal_bounds()

    notices = tuple(
        DegenerateArea(name, _AXIS_NAMES[axis])
        for axis in (pattern.major_axis, pattern.minor_axis)
        if bounds.axis(axis).span == 0.0
    )
    for notice in notices:
        logger.warning("Degenerate survey area: %s", notice)

    start = area.bottom_left if pattern.start_corner == "bottom_left" else area.top_right
    lines = serpentine_scan(
        bounds,
        start,
        pattern.major_axis,
        pitch.frontal,
        pitch.side,
        pattern.major_direction,
        pattern.minor_direction,
    )
    waypoints = tuple(Vector3(x, altitude, z) for line in lines for (x, z) in line)
    steps = tuple(waypoints_to_flight_steps(waypoints, config.camera_angle))
    logger.debug(
        "%s: altitude=%.2f frontal_step=%.3f side_step=%.3f lines=%d waypoints=%d",
        name,
        altitude,
        pitch.frontal,
        pitch.side,
        len(lines),
        len(waypoints),
    )
    return GridPass(
        name=name,
        altitude=altitude,
        camera_angle=config.camera_angle,
        frontal_step=pitch.frontal,
        side_step=pitch.side,
        waypoints=waypoints,
        steps=steps,
        line_count=len(lines),
        notices=notices,
    )


__all__ = [
    "AXIS_X",
    "AXIS_Z",
    "ScanPattern",
    "FIRST_GRID",
    "SECOND_GRID",
    "GridPass",
    "serpentine_scan",
    "waypoints_to_flight_steps",
    "resolve_pass",
    "plan_grid_pass",
]
