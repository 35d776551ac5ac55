"""Survey missions assembled from one or two serpentine grid passes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .errors import DegenerateArea
from .planning.coverage_planner import FIRST_GRID, SECOND_GRID, GridPass, plan_grid_pass, resolve_pass
from .steps import FlightStep
from .survey import CameraDefinition, GridPassConfig, SurveyArea

logger = logging.getLogger(__name__)


class MissionType(Enum):
    GRID = "grid"
    DOUBLE_GRID = "double_grid"


@dataclass(frozen=True)
class Mission:
    mission_type: MissionType
    survey_area: SurveyArea
    camera: CameraDefinition
    passes: Tuple[GridPass, ...]

    @property
    def steps(self) -> Tuple[FlightStep, ...]:
        """Flight steps of every pass, in flight order, with no transition steps."""

        return tuple(step for grid_pass in self.passes for step in grid_pass.steps)

    @property
    def notices(self) -> Tuple[DegenerateArea, ...]:
        return tuple(notice for grid_pass in self.passes for notice in grid_pass.notices)

    def __len__(self) -> int:
        return sum(len(grid_pass.steps) for grid_pass in self.passes)


def plan_grid(area: SurveyArea, camera: CameraDefinition, config: GridPassConfig) -> Mission:
    """Single-pass mission: lines along Z swept across X."""

    first = plan_grid_pass("grid", area, camera, config, FIRST_GRID)
    mission = Mission(MissionType.GRID, area, camera, (first,))
    logger.info("Planned grid mission: %d steps over %d lines", len(mission), first.line_count)
    return mission


def plan_double_grid(
    area: SurveyArea,
    camera: CameraDefinition,
    first: GridPassConfig,
    second: GridPassConfig,
) -> Mission:
    """Two perpendicular passes: lines along Z first, then lines along X.

    Both passes are validated before either one is scanned.
    """

    resolve_pass(area, camera, first)
    resolve_pass(area, camera, second)
    first_pass = plan_grid_pass("first_grid", area, camera, first, FIRST_GRID)
    second_pass = plan_grid_pass("second_grid", area, camera, second, SECOND_GRID)
    mission = Mission(MissionType.DOUBLE_GRID, area, camera, (first_pass, second_pass))
    logger.info(
        "Planned double grid mission: %d steps (%d + %d)",
        len(mission),
        len(first_pass.steps),
        len(second_pass.steps),
    )
    return mission


class DoubleGridMission:
    """Mission object handed to the host: plans lazily, caches the result.

    Mirrors the host's mission lifecycle where flight steps are computed once
    from the survey area, camera and per-pass altitude/angle pairs.
    """

    mission_type = MissionType.DOUBLE_GRID

    def __init__(
        self,
        survey_area: SurveyArea,
        camera: CameraDefinition,
        relative_altitude1: float,
        camera_angle1: float,
        relative_altitude2: float,
        camera_angle2: float,
    ) -> None:
        self.survey_area = survey_area
        self.camera = camera
        self._first = GridPassConfig(relative_altitude1, camera_angle1)
        self._second = GridPassConfig(relative_altitude2, camera_angle2)
        self._mission: Mission | None = None

    @property
    def altitude1(self) -> float:
        return self.survey_area.floor + self._first.relative_altitude

    @property
    def altitude2(self) -> float:
        return self.survey_area.floor + self._second.relative_altitude

    @property
    def mission(self) -> Mission:
        if self._mission is None:
            self._mission = plan_double_grid(self.survey_area, self.camera, self._first, self._second)
        return self._mission

    @property
    def flight_steps(self) -> Tuple[FlightStep, ...]:
        return self.mission.steps


__all__ = [
    "MissionType",
    "Mission",
    "plan_grid",
    "plan_double_grid",
    "DoubleGridMission",
]
