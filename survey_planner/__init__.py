"""Survey planner package exposing the grid mission planners and CLI."""

from .core import (
    CameraDefinition,
    DegenerateArea,
    DoubleGridMission,
    FlightStep,
    GridPassConfig,
    InvalidConfiguration,
    Mission,
    MissionConfigError,
    MissionType,
    SurveyArea,
    build_mission,
    load_mission_config,
    plan_double_grid,
    plan_grid,
)

__all__ = [
    "CameraDefinition",
    "DegenerateArea",
    "DoubleGridMission",
    "FlightStep",
    "GridPassConfig",
    "InvalidConfiguration",
    "Mission",
    "MissionConfigError",
    "MissionType",
    "SurveyArea",
    "build_mission",
    "load_mission_config",
    "plan_double_grid",
    "plan_grid",
]
